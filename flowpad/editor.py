"""
Editing session: turns user commands into GraphStore and persistence
operations, and reports failures as notifications instead of raising.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from flowpad.backend.graphviz import GraphvizExporter
from flowpad.core.ir import Edge, Node, Position
from flowpad.core.store import GraphStore
from flowpad.errors import FlowpadError
from flowpad.persistence import PersistenceGateway
from flowpad.storage.memory import MemorySlotStore

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_NAME = "flowchart"


@dataclass(frozen=True)
class Notification:
    level: str
    message: str


class FlowchartEditor:
    """
    Command facade over one GraphStore.

    Every command returns its result, or None after recording a
    Notification when it failed. A failed command leaves the graph as it
    was.

    Example:
        editor = FlowchartEditor()
        check = editor.add_node("Decision")
        stop = editor.add_node("Stop", Position(0, 100))
        editor.connect(check.id, stop.id, source_handle="c-dec")
        editor.save("my-chart")
    """

    def __init__(self, gateway: Optional[PersistenceGateway] = None, store: Optional[GraphStore] = None):
        self.store = store or GraphStore()
        self.gateway = gateway or PersistenceGateway(MemorySlotStore())
        self.current_slot: Optional[str] = None
        self.notifications: List[Notification] = []
        self._executor: Optional[ThreadPoolExecutor] = None

    def _notify(self, level: str, message: str) -> None:
        self.notifications.append(Notification(level, message))
        logger.log(logging.ERROR if level == "error" else logging.INFO, message)

    def _fail(self, action: str, error: FlowpadError) -> None:
        self._notify("error", f"{action} failed: {error}")

    # -- graph commands --------------------------------------------------

    def add_node(self, node_type, position: Optional[Position] = None) -> Optional[Node]:
        try:
            return self.store.add_node(node_type, position)
        except FlowpadError as e:
            self._fail("Add node", e)
            return None

    def connect(self, source: str, target: str, source_handle: Optional[str] = None,
                target_handle: Optional[str] = None) -> Optional[Edge]:
        try:
            return self.store.connect(source, target, source_handle, target_handle)
        except FlowpadError as e:
            self._fail("Connect", e)
            return None

    def relabel(self, node_id: str, label: str) -> None:
        self.store.relabel(node_id, label)

    def move_node(self, node_id: str, position: Position) -> None:
        self.store.move_node(node_id, position)

    def delete_node(self, node_id: str) -> None:
        self.store.delete_node(node_id)

    def delete_edge(self, edge_id: str) -> None:
        self.store.delete_edge(edge_id)

    def new(self) -> None:
        """Start an empty, unsaved flowchart."""
        self.store.clear()
        self.current_slot = None

    # -- persistence commands --------------------------------------------

    def save(self, slot_name: str) -> bool:
        try:
            self.gateway.save(slot_name, self.store.snapshot())
        except FlowpadError as e:
            self._fail("Save", e)
            return False
        self.current_slot = slot_name
        self._notify("info", f"Saved flowchart as '{slot_name}'.")
        return True

    def load(self, slot_name: str) -> bool:
        try:
            snapshot = self.gateway.load(slot_name)
            self.store.restore(snapshot)
        except FlowpadError as e:
            self._fail("Load", e)
            return False
        self.current_slot = slot_name
        return True

    def list_slots(self) -> List[str]:
        return self.gateway.list_slots()

    def import_file(self, path: Union[str, Path]) -> bool:
        try:
            snapshot = self.gateway.import_file(path)
            self.store.restore(snapshot)
        except FlowpadError as e:
            self._fail("Import", e)
            return False
        return True

    def import_bytes(self, raw: Union[str, bytes]) -> bool:
        try:
            snapshot = self.gateway.import_from_bytes(raw)
            self.store.restore(snapshot)
        except FlowpadError as e:
            self._fail("Import", e)
            return False
        return True

    def export_json(self, path: Optional[Union[str, Path]] = None) -> Optional[Path]:
        try:
            return self.gateway.export_file(self.store.snapshot(), path)
        except (FlowpadError, OSError) as e:
            self._notify("error", f"Export failed: {e}")
            return None

    # -- image export ----------------------------------------------------

    def default_image_path(self, format: str = "png") -> Path:
        stem = self.current_slot or DEFAULT_IMAGE_NAME
        return self.gateway.export_dir / f"{stem}.{format}"

    def export_image(self, path: Optional[Union[str, Path]] = None, format: Optional[str] = None) -> "Future[Path]":
        """
        Render the current flowchart to an image in the background.

        The render works on a snapshot taken now, so later edits and render
        failures never touch the store. Failures are recorded as
        notifications and also surface through the returned future.
        """
        snapshot = self.store.snapshot()
        target = Path(path) if path else self.default_image_path(format or "png")
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="flowpad-export")
        future = self._executor.submit(GraphvizExporter.render, snapshot, target, format)
        future.add_done_callback(self._export_done)
        return future

    def _export_done(self, future: "Future[Path]") -> None:
        error = future.exception()
        if error is not None:
            self._notify("error", f"Image export failed: {error}")
        else:
            self._notify("info", f"Exported image to {future.result()}")

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
