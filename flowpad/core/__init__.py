"""Core data structures for Flowpad flowcharts."""

from .ir import (
    DEFAULT_POSITION,
    FALSE_HANDLE,
    NODE_TYPES,
    TRUE_HANDLE,
    Edge,
    GraphSnapshot,
    Node,
    NodeType,
    NodeTypeSpec,
    Position,
)
from .ids import IdGenerator
from .policy import ConnectionPolicy
from .store import GraphStore
from .serialization import GraphCodec

__all__ = [
    "DEFAULT_POSITION",
    "FALSE_HANDLE",
    "TRUE_HANDLE",
    "NODE_TYPES",
    "Edge",
    "GraphSnapshot",
    "Node",
    "NodeType",
    "NodeTypeSpec",
    "Position",
    "IdGenerator",
    "ConnectionPolicy",
    "GraphStore",
    "GraphCodec",
]
