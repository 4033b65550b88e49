"""Tests for the ui render functions."""

from engine import PlaybackController, ManualScheduler
from flowgraph import FlowNode, NodeKind, layout, flowchart_for
from ui import (
    render_flowchart,
    playback_controls,
    algorithm_selector,
    code_viewer,
    trace_log_panel,
)
from algorithms import algorithms_by_category


class TestFlowchart:
    def test_empty_layout_renders_nothing(self):
        assert render_flowchart(layout([])) == ""

    def test_shapes_and_highlight(self):
        graph = flowchart_for("Bubble Sort")
        svg = render_flowchart(layout(graph.nodes, graph.edges), highlighted_node="compare")
        assert svg.startswith("<svg")
        assert "<ellipse" in svg
        assert "<polygon" in svg
        assert 'data-id="compare"' in svg
        assert "flowchart-node-decision active" in svg
        assert ">Yes<" in svg

    def test_labels_escaped(self):
        svg = render_flowchart(layout([FlowNode("x", "a < b", NodeKind.DECISION)]))
        assert "a &lt; b" in svg


class TestPanels:
    def test_code_viewer_highlights_line(self):
        html = code_viewer("a = 1\nb = 2", highlighted_line=2)
        assert 'class="code-line highlight" data-line="2"' in html
        assert 'class="code-line " data-line="1"' in html

    def test_code_viewer_placeholder(self):
        assert "placeholder" in code_viewer("")

    def test_trace_log(self):
        ctrl = PlaybackController(scheduler=ManualScheduler())
        ctrl.select("foo-sort")
        ctrl.seek(2)
        html = trace_log_panel(ctrl.trace_log())
        assert "Final Answer" in html
        assert "output-result" in html
        assert "output-placeholder" in trace_log_panel(())

    def test_controls_disable_at_bounds(self):
        ctrl = PlaybackController(scheduler=ManualScheduler(), speed_tier=3)
        ctrl.select("foo-sort")
        html = playback_controls(ctrl.state)
        assert 'title="Step Backward" disabled' in html
        assert '<option value="3" selected>Fast</option>' in html

    def test_selector_marks_selection(self):
        html = algorithm_selector(algorithms_by_category(), "dfs")
        assert '<option value="dfs" selected>' in html
        assert '<optgroup label="Graph">' in html
