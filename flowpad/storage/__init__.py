"""Key-value slot stores for saved flowcharts."""

from flowpad.storage.interface import SlotStore
from flowpad.storage.memory import MemorySlotStore
from flowpad.storage.filesystem import FileSlotStore

__all__ = [
    "SlotStore",
    "MemorySlotStore",
    "FileSlotStore",
]
