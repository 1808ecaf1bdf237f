import pytest
from flowpad.core.ir import GraphSnapshot
from flowpad.errors import DecodeError, ValidationError
from flowpad.persistence import PersistenceGateway
from flowpad.storage.filesystem import FileSlotStore
from flowpad.storage.memory import MemorySlotStore


@pytest.fixture(params=["memory", "filesystem"])
def slot_store(request, tmp_path):
    if request.param == "memory":
        return MemorySlotStore()
    return FileSlotStore(tmp_path / "slots")


class TestSlotStoreContract:

    def test_get_missing(self, slot_store):
        assert slot_store.get("missing") is None

    def test_set_get(self, slot_store):
        slot_store.set("a", "one")
        slot_store.set("a", "two")
        assert slot_store.get("a") == "two"

    def test_keys(self, slot_store):
        slot_store.set("a", "1")
        slot_store.set("b", "2")
        assert sorted(slot_store.keys()) == ["a", "b"]

    def test_delete(self, slot_store):
        slot_store.set("a", "1")
        assert slot_store.delete("a") is True
        assert slot_store.delete("a") is False
        assert slot_store.get("a") is None


class TestFileSlotStore:

    def test_creates_directory(self, tmp_path):
        FileSlotStore(tmp_path / "deep" / "dir")
        assert (tmp_path / "deep" / "dir").is_dir()

    def test_one_file_per_slot(self, tmp_path):
        store = FileSlotStore(tmp_path)
        store.set("chart", "{}")
        assert (tmp_path / "chart.json").read_text() == "{}"
        assert not (tmp_path / "chart.json.tmp").exists()

    def test_ignores_other_files(self, tmp_path):
        (tmp_path / "notes.txt").write_text("hi")
        store = FileSlotStore(tmp_path)
        assert store.keys() == []

    @pytest.mark.parametrize("name", ["../escape", "a/b", "..", ""])
    def test_rejects_path_like_names(self, tmp_path, name):
        with pytest.raises(ValidationError):
            FileSlotStore(tmp_path).set(name, "{}")

    def test_gateway_roundtrip_on_disk(self, tmp_path, decision_graph):
        snap = decision_graph[0].snapshot()
        PersistenceGateway(FileSlotStore(tmp_path)).save("disk", snap)
        # A new gateway over the same directory sees the slot.
        reopened = PersistenceGateway(FileSlotStore(tmp_path))
        assert reopened.list_slots() == ["disk"]
        assert reopened.load("disk") == snap


class TestUndecodableSlotFiles:

    @pytest.fixture
    def disk_gateway(self, tmp_path, decision_graph):
        gateway = PersistenceGateway(FileSlotStore(tmp_path))
        gateway.save("good", decision_graph[0].snapshot())
        return gateway

    def test_binary_slot_is_skipped_when_listing(self, tmp_path, disk_gateway):
        (tmp_path / "binary.json").write_bytes(b"\xff\xfe\x00garbage")
        assert disk_gateway.list_slots() == ["good"]

    def test_binary_slot_load_is_decode_error(self, tmp_path, disk_gateway):
        (tmp_path / "binary.json").write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(DecodeError, match="not UTF-8"):
            disk_gateway.load("binary")

    def test_bare_suffix_file_is_ignored(self, tmp_path, disk_gateway):
        (tmp_path / ".json").write_text('{"nodes": [], "edges": []}')
        assert disk_gateway.store.keys() == ["good"]
        assert disk_gateway.list_slots() == ["good"]

    def test_list_snapshots_decodes_once_per_slot(self, tmp_path, disk_gateway, decision_graph):
        (tmp_path / "broken.json").write_text("{")
        assert disk_gateway.list_snapshots() == [("good", decision_graph[0].snapshot())]
