"""Backend exporters for flowcharts."""

from flowpad.backend.graphviz import GraphvizExporter

__all__ = [
    "GraphvizExporter",
]
