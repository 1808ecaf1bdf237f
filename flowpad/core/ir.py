"""Data model for Flowpad flowcharts.

Nodes are a single tagged variant (NodeType) and the per-type behaviour
(display name, handles, shape) lives in the NODE_TYPES lookup table.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from flowpad.errors import ValidationError


class NodeType(str, Enum):
    START = "Start"
    STOP = "Stop"
    PROCESS = "Process"
    INPUT_OUTPUT = "InputOutput"
    DECISION = "Decision"

    @classmethod
    def parse(cls, value) -> "NodeType":
        """Accept a NodeType or its persisted name ("Decision", ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(t.value for t in cls)
            raise ValidationError(f"Unknown node type {value!r}. Use one of: {known}") from None


@dataclass(frozen=True)
class NodeTypeSpec:
    """Render/behaviour descriptor for one node variant."""
    display_name: str
    shape: str
    inputs: Tuple[str, ...] = ()
    outputs: Tuple[str, ...] = ()


# Decision branch handles
FALSE_HANDLE = "b-dec"
TRUE_HANDLE = "c-dec"

NODE_TYPES: Dict[NodeType, NodeTypeSpec] = {
    NodeType.START: NodeTypeSpec("Start", "ellipse", outputs=("a",)),
    NodeType.STOP: NodeTypeSpec("Stop", "ellipse", inputs=("b",)),
    NodeType.PROCESS: NodeTypeSpec("Process", "box", inputs=("b",), outputs=("a",)),
    NodeType.INPUT_OUTPUT: NodeTypeSpec("InputOutput", "parallelogram", inputs=("b",), outputs=("a",)),
    NodeType.DECISION: NodeTypeSpec("Decision", "diamond", inputs=("a",), outputs=(FALSE_HANDLE, TRUE_HANDLE)),
}


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0


DEFAULT_POSITION = Position(150, 150)


@dataclass(frozen=True)
class Node:
    """A typed, labelled vertex of the flowchart. Edits replace the value."""
    id: str
    type: NodeType
    position: Position = DEFAULT_POSITION
    label: str = ""

    @property
    def descriptor(self) -> NodeTypeSpec:
        return NODE_TYPES[self.type]

    def __repr__(self):
        return f"<Node {self.type.value} id={self.id} label='{self.label}'>"


@dataclass(frozen=True)
class Edge:
    """A directed connection between two nodes, attached at optional handles."""
    id: str
    source: str
    target: str
    source_handle: Optional[str] = None
    target_handle: Optional[str] = None
    label: Optional[str] = None

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def __repr__(self):
        return f"<Edge {self.source} -> {self.target} label='{self.label}'>"


@dataclass(frozen=True)
class GraphSnapshot:
    """Immutable node and edge state of a graph, in insertion order."""
    nodes: Tuple[Node, ...] = field(default_factory=tuple)
    edges: Tuple[Edge, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, nodes, edges) -> "GraphSnapshot":
        return cls(nodes=tuple(nodes), edges=tuple(edges))

    def node_ids(self):
        return [n.id for n in self.nodes]

    def dangling_edges(self):
        """Edges whose source or target is not a node of this snapshot."""
        ids = set(self.node_ids())
        return [e for e in self.edges if e.source not in ids or e.target not in ids]

    def duplicate_ids(self):
        """Node and edge ids that occur more than once."""
        seen, dupes = set(), []
        for item in self.nodes + self.edges:
            key = (type(item), item.id)
            if key in seen and item.id not in dupes:
                dupes.append(item.id)
            seen.add(key)
        return dupes
