import logging
from pathlib import Path
from typing import List, Optional, Union

from flowpad.errors import DecodeError, ValidationError
from flowpad.storage.interface import SlotStore

logger = logging.getLogger(__name__)


class FileSlotStore(SlotStore):
    """
    Slot store keeping one `<slot>.json` file per slot in a directory.
    """

    SUFFIX = ".json"

    def __init__(self, base_dir: Union[str, Path]):
        """
        Initialize filesystem storage.

        Args:
            base_dir: Directory holding the slot files. Created if missing.
        """
        self.base_dir = Path(base_dir).expanduser()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key in (".", ".."):
            raise ValidationError(f"Invalid slot name: {key!r}")
        return self.base_dir / f"{key}{self.SUFFIX}"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Slot file {path.name} is not UTF-8 text: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        # Write then rename so a crash never leaves a half-written slot.
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)
        logger.debug("Wrote slot file %s", path)

    def keys(self) -> List[str]:
        names = [p.name[: -len(self.SUFFIX)] for p in self.base_dir.glob(f"*{self.SUFFIX}") if p.is_file()]
        # A bare ".json" file has no usable slot name.
        return [name for name in names if name]

    def delete(self, key: str) -> bool:
        path = self._path(key)
        if not path.exists():
            return False
        path.unlink()
        return True
