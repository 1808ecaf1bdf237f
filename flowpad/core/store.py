"""The authoritative, in-memory node/edge set of one editing session."""

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from flowpad.core.ids import IdGenerator
from flowpad.core.ir import DEFAULT_POSITION, Edge, GraphSnapshot, Node, NodeType, Position
from flowpad.core.policy import ConnectionPolicy
from flowpad.errors import GraphReferenceError, ValidationError

logger = logging.getLogger(__name__)

Listener = Callable[[GraphSnapshot], None]


class GraphStore:
    """
    Owns the nodes and edges of a flowchart and enforces its invariants:
    every edge references nodes present in the store, and deleting a node
    removes its edges in the same operation.

    Example:
        store = GraphStore()
        decide = store.add_node("Decision")
        done = store.add_node("Stop", Position(0, 100))
        store.connect(decide.id, done.id, source_handle=FALSE_HANDLE)  # label "No"
    """

    def __init__(
        self,
        node_ids: Optional[IdGenerator] = None,
        edge_ids: Optional[IdGenerator] = None,
        policy: Optional[ConnectionPolicy] = None,
    ):
        self.node_ids = node_ids or IdGenerator("node_")
        self.edge_ids = edge_ids or IdGenerator("edge_")
        self.policy = policy or ConnectionPolicy()
        self._nodes: Dict[str, Node] = {}
        self._edges: Dict[str, Edge] = {}
        self._listeners: List[Listener] = []

    # -- queries ---------------------------------------------------------

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self._edges.get(edge_id)

    def edges_of(self, node_id: str) -> List[Edge]:
        return [e for e in self._edges.values() if e.touches(node_id)]

    def find_edge(self, source: str, target: str, source_handle: Optional[str] = None,
                  target_handle: Optional[str] = None) -> Optional[Edge]:
        """The edge joining exactly these endpoints and handles, if any."""
        for edge in self._edges.values():
            if (edge.source, edge.target, edge.source_handle, edge.target_handle) == (
                    source, target, source_handle, target_handle):
                return edge
        return None

    def snapshot(self) -> GraphSnapshot:
        return GraphSnapshot.of(self._nodes.values(), self._edges.values())

    # -- observers -------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with a fresh snapshot after every mutation."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # -- mutations -------------------------------------------------------

    def add_node(self, node_type, position: Optional[Position] = None) -> Node:
        node_type = NodeType.parse(node_type)
        node = Node(
            id=self.node_ids.next(),
            type=node_type,
            position=position or DEFAULT_POSITION,
            label=node_type.value,
        )
        self._nodes[node.id] = node
        logger.debug("Added %r", node)
        self._changed()
        return node

    def delete_node(self, node_id: str) -> None:
        if node_id not in self._nodes:
            return
        # Node and incident edges go together, before anyone is notified.
        del self._nodes[node_id]
        self._edges = {eid: e for eid, e in self._edges.items() if not e.touches(node_id)}
        logger.debug("Deleted node %s and its edges", node_id)
        self._changed()

    def relabel(self, node_id: str, label: str) -> None:
        node = self._nodes.get(node_id)
        if node is None:
            return
        self._nodes[node_id] = replace(node, label=label)
        self._changed()

    def move_node(self, node_id: str, position: Position) -> None:
        node = self._nodes.get(node_id)
        if node is None:
            return
        self._nodes[node_id] = replace(node, position=position)
        self._changed()

    def connect(
        self,
        source: str,
        target: str,
        source_handle: Optional[str] = None,
        target_handle: Optional[str] = None,
    ) -> Edge:
        for node_id in (source, target):
            if node_id not in self._nodes:
                raise GraphReferenceError(f"Node {node_id} does not exist.")
        existing = self.find_edge(source, target, source_handle, target_handle)
        if existing is not None:
            return existing
        edge = Edge(
            id=self.edge_ids.next(),
            source=source,
            target=target,
            source_handle=source_handle,
            target_handle=target_handle,
            label=self.policy.label_for(source_handle),
        )
        self._edges[edge.id] = edge
        logger.debug("Connected %r", edge)
        self._changed()
        return edge

    def delete_edge(self, edge_id: str) -> None:
        if self._edges.pop(edge_id, None) is not None:
            self._changed()

    def restore(self, snapshot: GraphSnapshot) -> None:
        """
        Replace the whole graph with the snapshot's contents.

        The id generators are left alone: restored ids may collide with ids
        generated later if the snapshot came from another session.
        """
        duplicates = snapshot.duplicate_ids()
        if duplicates:
            raise ValidationError(f"Snapshot repeats id {duplicates[0]}.")
        dangling = snapshot.dangling_edges()
        if dangling:
            raise GraphReferenceError(
                f"Edge {dangling[0].id} references a node that is not in the snapshot."
            )
        self._nodes = {n.id: n for n in snapshot.nodes}
        self._edges = {e.id: e for e in snapshot.edges}
        logger.debug("Restored %d nodes, %d edges", len(self._nodes), len(self._edges))
        self._changed()

    def clear(self) -> None:
        self.restore(GraphSnapshot())
