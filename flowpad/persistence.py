"""Saving, loading, importing and exporting flowchart snapshots."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from flowpad.core.ir import GraphSnapshot
from flowpad.core.serialization import GraphCodec
from flowpad.errors import FlowpadError, NotFoundError, ValidationError
from flowpad.storage.interface import SlotStore

logger = logging.getLogger(__name__)

DEFAULT_JSON_FILENAME = "flowchart.json"


class PersistenceGateway:
    """
    Stores snapshots in named slots of a SlotStore and converts them to and
    from the JSON file format. Every direction goes through GraphCodec, so a
    slot and an exported file hold the same representation.
    """

    def __init__(self, store: SlotStore, export_dir: Union[str, Path] = ".",
                 json_filename: str = DEFAULT_JSON_FILENAME):
        self.store = store
        self.export_dir = Path(export_dir)
        self.json_filename = json_filename

    # -- slots -----------------------------------------------------------

    def save(self, slot_name: str, snapshot: GraphSnapshot) -> None:
        if not slot_name or not slot_name.strip():
            raise ValidationError("Slot name must not be empty.")
        self.store.set(slot_name, GraphCodec.encode(snapshot))
        logger.info("Saved flowchart to slot %r (%d nodes, %d edges)",
                    slot_name, len(snapshot.nodes), len(snapshot.edges))

    def load(self, slot_name: str) -> GraphSnapshot:
        raw = self.store.get(slot_name) if slot_name else None
        if raw is None:
            raise NotFoundError(f"No saved flowchart named {slot_name!r}.")
        snapshot = GraphCodec.decode(raw)
        logger.info("Loaded flowchart from slot %r", slot_name)
        return snapshot

    def list_snapshots(self) -> List[Tuple[str, GraphSnapshot]]:
        """(name, snapshot) for every slot holding a decodable flowchart, sorted by name."""
        found = []
        for key in sorted(self.store.keys()):
            try:
                raw = self.store.get(key)
                if raw is None:
                    continue
                found.append((key, GraphCodec.decode(raw)))
            except FlowpadError as e:
                logger.debug("Skipping slot %r: %s", key, e)
        return found

    def list_slots(self) -> List[str]:
        """Names of all slots holding a decodable flowchart, sorted."""
        return [name for name, _ in self.list_snapshots()]

    def delete_slot(self, slot_name: str) -> None:
        if not self.store.delete(slot_name):
            raise NotFoundError(f"No saved flowchart named {slot_name!r}.")
        logger.info("Deleted slot %r", slot_name)

    # -- files -----------------------------------------------------------

    def import_from_bytes(self, raw: Union[str, bytes]) -> GraphSnapshot:
        return GraphCodec.decode(raw)

    def export_bytes(self, snapshot: GraphSnapshot) -> bytes:
        return GraphCodec.encode(snapshot).encode("utf-8")

    def import_file(self, path: Union[str, Path]) -> GraphSnapshot:
        path = Path(path)
        if not path.is_file():
            raise NotFoundError(f"File not found: {path}")
        snapshot = self.import_from_bytes(path.read_bytes())
        logger.info("Imported flowchart from %s", path)
        return snapshot

    def export_file(self, snapshot: GraphSnapshot, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the snapshot as JSON, by default to `<export_dir>/flowchart.json`."""
        output_file = Path(path) if path else self.export_dir / self.json_filename
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_bytes(self.export_bytes(snapshot))
        logger.info("Exported flowchart to %s", output_file)
        return output_file
