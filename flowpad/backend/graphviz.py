import logging
from pathlib import Path
from typing import Optional, Union

import graphviz

from flowpad.core.ir import GraphSnapshot
from flowpad.errors import ExportError

logger = logging.getLogger(__name__)

# Graphviz positions are in inches; editor positions are screen points.
POINTS_PER_INCH = 72.0


class GraphvizExporter:
    """Exports a GraphSnapshot to Graphviz/Dot format or renders it to an image."""

    FORMATS = ("png", "svg", "pdf")

    @staticmethod
    def _pos(node) -> str:
        # Screen y grows downwards, Graphviz y grows upwards.
        x = node.position.x / POINTS_PER_INCH
        y = -node.position.y / POINTS_PER_INCH
        return f"{x:.3f},{y:.3f}!"

    @staticmethod
    def to_digraph(snapshot: GraphSnapshot, name: str = "flowchart", use_positions: bool = True) -> graphviz.Digraph:
        """
        Converts a snapshot to a graphviz.Digraph object.

        Args:
            snapshot: The flowchart to convert
            name: Graph name written into the DOT source
            use_positions: If True, pin nodes at their editor positions (neato
                engine); otherwise let dot lay the graph out top to bottom
        """
        dot = graphviz.Digraph(name=name, comment=name, engine="neato" if use_positions else "dot")
        if use_positions:
            dot.attr(splines="true", overlap="true")
        else:
            dot.attr(rankdir="TB")

        for node in snapshot.nodes:
            attrs = {"label": node.label, "shape": node.descriptor.shape}
            if use_positions:
                attrs["pos"] = GraphvizExporter._pos(node)
            dot.node(node.id, **attrs)

        for edge in snapshot.edges:
            dot.edge(edge.source, edge.target, label=edge.label or "")

        return dot

    @staticmethod
    def to_dot(snapshot: GraphSnapshot, name: str = "flowchart") -> str:
        """Returns the DOT source string for the flowchart."""
        return GraphvizExporter.to_digraph(snapshot, name).source

    @staticmethod
    def pipe(snapshot: GraphSnapshot, format: str = "png", name: str = "flowchart") -> bytes:
        """Renders the flowchart and returns the image bytes."""
        if format not in GraphvizExporter.FORMATS:
            raise ExportError(f"Unknown image format: {format}. Use: {', '.join(GraphvizExporter.FORMATS)}")
        digraph = GraphvizExporter.to_digraph(snapshot, name)
        try:
            return digraph.pipe(format=format)
        except graphviz.ExecutableNotFound as e:
            raise ExportError(
                "Graphviz executable not found. "
                "Please install Graphviz: https://graphviz.org/download/"
            ) from e
        except graphviz.CalledProcessError as e:
            raise ExportError(f"Graphviz failed to render the flowchart: {e}") from e

    @staticmethod
    def render(snapshot: GraphSnapshot, path: Union[str, Path], format: Optional[str] = None) -> Path:
        """
        Renders the flowchart to an image file.

        The format defaults to the file suffix (png when there is none).
        """
        path = Path(path)
        format = format or path.suffix.lstrip(".") or "png"
        data = GraphvizExporter.pipe(snapshot, format=format, name=path.stem or "flowchart")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info("Rendered %s image to %s", format, path)
        return path
