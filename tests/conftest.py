import pytest

from flowpad.core.ir import FALSE_HANDLE, Position
from flowpad.core.store import GraphStore
from flowpad.persistence import PersistenceGateway
from flowpad.storage.memory import MemorySlotStore


@pytest.fixture
def store():
    return GraphStore()


@pytest.fixture
def decision_graph(store):
    """Decision -> Process on the false branch, plus a Start feeding the Decision."""
    start = store.add_node("Start", Position(0, -100))
    decide = store.add_node("Decision", Position(0, 0))
    proc = store.add_node("Process", Position(0, 100))
    store.connect(start.id, decide.id, "a", "a")
    store.connect(decide.id, proc.id, FALSE_HANDLE, "b")
    return store, start, decide, proc


@pytest.fixture
def gateway(tmp_path):
    return PersistenceGateway(MemorySlotStore(), export_dir=tmp_path)
