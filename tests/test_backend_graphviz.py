"""Tests for the Graphviz backend exporter."""

import pytest
import graphviz
from flowpad.backend.graphviz import GraphvizExporter
from flowpad.core.ir import GraphSnapshot, Position
from flowpad.core.store import GraphStore
from flowpad.errors import ExportError


def _graphviz_available():
    try:
        GraphvizExporter.pipe(GraphSnapshot(), format="svg")
    except ExportError:
        return False
    return True


GRAPHVIZ_AVAILABLE = _graphviz_available()
needs_graphviz = pytest.mark.skipif(
    not GRAPHVIZ_AVAILABLE,
    reason="Graphviz executable not found - install with: brew install graphviz"
)


@pytest.fixture
def all_types():
    """A snapshot using every node type."""
    store = GraphStore()
    s = store.add_node("Start", Position(0, 0))
    p = store.add_node("Process", Position(0, 100))
    io = store.add_node("InputOutput", Position(0, 200))
    d = store.add_node("Decision", Position(0, 300))
    e = store.add_node("Stop", Position(144, 400))
    store.relabel(p.id, "Proc")
    store.connect(s.id, p.id)
    store.connect(p.id, io.id)
    store.connect(io.id, d.id)
    store.connect(d.id, e.id, "c-dec")
    return store.snapshot()


class TestGraphvizExporter:

    def test_to_digraph_structure(self, all_types):
        dot = GraphvizExporter.to_digraph(all_types, name="TestGraph")

        assert isinstance(dot, graphviz.Digraph)
        assert dot.name == "TestGraph"
        assert dot.engine == "neato"

        source = dot.source
        assert "label=Start" in source
        assert "label=Proc" in source
        assert "label=Yes" in source

    def test_shapes_follow_node_types(self, all_types):
        source = GraphvizExporter.to_dot(all_types)
        assert "shape=ellipse" in source
        assert "shape=box" in source
        assert "shape=parallelogram" in source
        assert "shape=diamond" in source

    def test_positions_are_pinned(self, all_types):
        source = GraphvizExporter.to_dot(all_types)
        # (144, 400) points -> (2, -5.556) inches, y flipped
        assert 'pos="2.000,-5.556!"' in source

    def test_layout_without_positions(self, all_types):
        dot = GraphvizExporter.to_digraph(all_types, use_positions=False)
        assert dot.engine == "dot"
        assert "pos=" not in dot.source
        assert "rankdir=TB" in dot.source

    def test_to_dot_returns_string(self, all_types):
        dot_source = GraphvizExporter.to_dot(all_types, name="chart")
        assert isinstance(dot_source, str)
        assert "digraph chart" in dot_source

    def test_unknown_format(self, all_types):
        with pytest.raises(ExportError, match="Unknown image format"):
            GraphvizExporter.pipe(all_types, format="bmp")

    def test_missing_executable_becomes_export_error(self, all_types, monkeypatch):
        def boom(self, *args, **kwargs):
            raise graphviz.ExecutableNotFound(["dot"])

        monkeypatch.setattr(graphviz.Digraph, "pipe", boom)
        with pytest.raises(ExportError, match="Graphviz executable not found"):
            GraphvizExporter.render(all_types, "unused.png")

    @needs_graphviz
    def test_render_png(self, all_types, tmp_path):
        path = GraphvizExporter.render(all_types, tmp_path / "chart.png")
        assert path.read_bytes().startswith(b"\x89PNG")

    @needs_graphviz
    def test_render_format_from_suffix(self, all_types, tmp_path):
        path = GraphvizExporter.render(all_types, tmp_path / "chart.svg")
        assert "</svg>" in path.read_text()
