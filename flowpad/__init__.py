"""
Flowpad - a flowchart editing and persistence engine.

Main APIs:
- GraphStore: Authoritative node/edge set with cascading deletes
- GraphCodec: JSON encoding of graph snapshots
- PersistenceGateway: Named save slots plus JSON file import/export
- FlowchartEditor: Command facade reporting failures as notifications

Backends:
- GraphvizExporter: DOT source and PNG/SVG/PDF rendering (requires Graphviz)
"""

from flowpad.core import (
    FALSE_HANDLE,
    TRUE_HANDLE,
    ConnectionPolicy,
    Edge,
    GraphCodec,
    GraphSnapshot,
    GraphStore,
    IdGenerator,
    Node,
    NodeType,
    Position,
)
from flowpad.errors import (
    DecodeError,
    ExportError,
    FlowpadError,
    GraphReferenceError,
    NotFoundError,
    ValidationError,
)
from flowpad.storage import FileSlotStore, MemorySlotStore, SlotStore
from flowpad.persistence import PersistenceGateway
from flowpad.backend import GraphvizExporter
from flowpad.editor import FlowchartEditor, Notification

__all__ = [
    # Core
    "FALSE_HANDLE",
    "TRUE_HANDLE",
    "ConnectionPolicy",
    "Edge",
    "GraphCodec",
    "GraphSnapshot",
    "GraphStore",
    "IdGenerator",
    "Node",
    "NodeType",
    "Position",
    # Errors
    "DecodeError",
    "ExportError",
    "FlowpadError",
    "GraphReferenceError",
    "NotFoundError",
    "ValidationError",
    # Persistence
    "SlotStore",
    "MemorySlotStore",
    "FileSlotStore",
    "PersistenceGateway",
    # Backends
    "GraphvizExporter",
    # Editor
    "FlowchartEditor",
    "Notification",
]
