from typing import Dict, List, Optional

from flowpad.storage.interface import SlotStore


class MemorySlotStore(SlotStore):
    """Slot store backed by a plain dict; used by tests and embedders."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> List[str]:
        return list(self._data)

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
