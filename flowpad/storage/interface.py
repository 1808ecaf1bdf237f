from abc import ABC, abstractmethod
from typing import List, Optional


class SlotStore(ABC):
    """
    Abstract key-value store for serialized flowcharts. Keys are slot names,
    values are the persisted JSON text.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Return the text stored under `key`, or None if there is none.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store `value` under `key`, replacing any previous value.
        """
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """
        Return every key currently held by the store.

        The namespace may be shared with unrelated entries; callers filter.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove `key`.

        Returns:
            True if a value was removed, False if the key was absent
        """
        pass
