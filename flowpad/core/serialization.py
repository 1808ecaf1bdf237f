"""
JSON codec for GraphSnapshot objects.

The persisted form is an object with exactly two fields, "nodes" and
"edges", shared by slot storage, file export and file import. Decoding is
all-or-nothing: either a complete snapshot comes back or DecodeError is
raised.
"""

import json
from numbers import Real
from typing import Any, Dict, Union

from flowpad.core.ir import Edge, GraphSnapshot, Node, NodeType, Position
from flowpad.errors import DecodeError, ValidationError


class GraphCodec:
    """Encodes and decodes GraphSnapshot objects to/from JSON."""

    @staticmethod
    def to_dict(snapshot: GraphSnapshot) -> Dict[str, Any]:
        nodes_data = []
        for node in snapshot.nodes:
            nodes_data.append({
                "id": node.id,
                "type": node.type.value,
                "position": {"x": node.position.x, "y": node.position.y},
                "label": node.label,
            })

        edges_data = []
        for edge in snapshot.edges:
            edges_data.append({
                "id": edge.id,
                "source": edge.source,
                "target": edge.target,
                "sourceHandle": edge.source_handle,
                "targetHandle": edge.target_handle,
                "label": edge.label,
            })

        return {"nodes": nodes_data, "edges": edges_data}

    @staticmethod
    def encode(snapshot: GraphSnapshot, indent: int = 2) -> str:
        return json.dumps(GraphCodec.to_dict(snapshot), indent=indent)

    to_json = encode

    @staticmethod
    def _node_from_dict(data: Dict[str, Any]) -> Node:
        position = data["position"]
        x, y = position["x"], position["y"]
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(f"position must be numeric, got {value!r}")
        label = data["label"]
        if not isinstance(label, str):
            raise TypeError(f"label must be a string, got {label!r}")
        return Node(
            id=_string(data["id"], "id"),
            type=NodeType.parse(data["type"]),
            position=Position(x, y),
            label=label,
        )

    @staticmethod
    def _edge_from_dict(data: Dict[str, Any]) -> Edge:
        return Edge(
            id=_string(data["id"], "id"),
            source=_string(data["source"], "source"),
            target=_string(data["target"], "target"),
            source_handle=_optional_string(data.get("sourceHandle"), "sourceHandle"),
            target_handle=_optional_string(data.get("targetHandle"), "targetHandle"),
            label=_optional_string(data.get("label"), "label"),
        )

    @staticmethod
    def from_dict(data: Any) -> GraphSnapshot:
        if not isinstance(data, dict):
            raise DecodeError("Flowchart data must be a JSON object.")
        if not isinstance(data.get("nodes"), list):
            raise DecodeError("missing nodes field")
        if not isinstance(data.get("edges"), list):
            raise DecodeError("missing edges field")

        try:
            nodes = [GraphCodec._node_from_dict(n) for n in data["nodes"]]
            edges = [GraphCodec._edge_from_dict(e) for e in data["edges"]]
        except (KeyError, TypeError, ValidationError) as e:
            raise DecodeError(f"malformed flowchart entry: {e}") from e

        snapshot = GraphSnapshot(nodes=tuple(nodes), edges=tuple(edges))
        duplicates = snapshot.duplicate_ids()
        if duplicates:
            raise DecodeError(f"duplicate id {duplicates[0]}")
        dangling = snapshot.dangling_edges()
        if dangling:
            raise DecodeError(f"edge {dangling[0].id} references an unknown node")
        return snapshot

    @staticmethod
    def decode(raw: Union[str, bytes, bytearray]) -> GraphSnapshot:
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"malformed JSON: {e}") from e
        return GraphCodec.from_dict(data)

    from_json = decode


def _string(value, name):
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {value!r}")
    return value


def _optional_string(value, name):
    if value is None:
        return None
    return _string(value, name)
