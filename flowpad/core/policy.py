from typing import Dict, Optional

from flowpad.core.ir import FALSE_HANDLE, TRUE_HANDLE


class ConnectionPolicy:
    """Decides the display label of a new edge from its source handle."""

    LABELS: Dict[str, str] = {
        FALSE_HANDLE: "No",
        TRUE_HANDLE: "Yes",
    }

    def label_for(self, source_handle: Optional[str]) -> Optional[str]:
        if source_handle is None:
            return None
        return self.LABELS.get(source_handle)
