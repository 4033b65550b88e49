"""Tests for flowgraph.layout and flowgraph.catalogue."""

from flowgraph import (
    FlowNode,
    FlowEdge,
    FlowGraph,
    NodeKind,
    layout,
    flowchart_for,
    generic_flow,
)


def _chain(n):
    return [FlowNode(id=f"n{i}", label=f"Node {i}") for i in range(n)]


class TestLayout:
    def test_chain_positions(self):
        result = layout(_chain(3))
        assert [(n.x, n.y) for n in result.nodes] == [(200, 50), (200, 150), (200, 250)]
        assert all(n.width == 150 and n.height == 60 for n in result.nodes)

    def test_auto_chain_edges(self):
        result = layout(_chain(3))
        assert [(e.source, e.target) for e in result.edges] == [("n0", "n1"), ("n1", "n2")]
        first = result.edges[0]
        assert (first.x1, first.y1, first.x2, first.y2) == (200, 80, 200, 120)

    def test_canvas_size(self):
        assert layout(_chain(3)).height == 400
        assert layout(_chain(5)).height == 600
        assert layout(_chain(5)).width == 600

    def test_empty(self):
        result = layout([])
        assert result.nodes == ()
        assert result.edges == ()
        assert result.height == 400

    def test_explicit_position_kept(self):
        nodes = [FlowNode("a", "A", NodeKind.START, position=(300, 50)), FlowNode("b", "B")]
        result = layout(nodes)
        assert (result.nodes[0].x, result.nodes[0].y) == (300, 50)
        assert (result.nodes[1].x, result.nodes[1].y) == (200, 150)

    def test_dangling_edge_dropped(self):
        nodes = _chain(2)
        edges = [FlowEdge("n0", "n1", "Yes"), FlowEdge("n1", "ghost")]
        result = layout(nodes, edges)
        assert len(result.edges) == 1
        assert result.edges[0].label == "Yes"

    def test_label_anchor(self):
        edge = layout(_chain(2), [FlowEdge("n0", "n1", "No")]).edges[0]
        assert edge.label_anchor == (200, 95)

    def test_duplicate_ids_first_wins(self):
        nodes = [FlowNode("a", "first", position=(10, 10)), FlowNode("a", "second", position=(90, 90))]
        edge = layout(nodes + [FlowNode("b", "B", position=(10, 200))], [FlowEdge("a", "b")]).edges[0]
        assert (edge.x1, edge.y1) == (10, 40)

    def test_shapes(self):
        nodes = [
            FlowNode("s", "S", NodeKind.START),
            FlowNode("d", "D", NodeKind.DECISION),
            FlowNode("p", "P"),
        ]
        result = layout(nodes)
        assert [n.shape for n in result.nodes] == ["ellipse", "diamond", "rectangle"]
        assert result.get_node("d").diamond_points() == [
            (200, 120), (275, 150), (200, 180), (125, 150),
        ]

    def test_deterministic_and_pure(self):
        graph = flowchart_for("Bubble Sort")
        before = graph.to_dict()
        assert layout(graph.nodes, graph.edges) == layout(graph.nodes, graph.edges)
        assert graph.to_dict() == before


class TestCatalogue:
    def test_known_names(self):
        assert flowchart_for("Bubble Sort").get_node("swap") is not None
        assert flowchart_for("binarysearch").get_node("notfound") is not None
        assert flowchart_for("BFS").get_node("dequeue") is not None
        assert flowchart_for("DFS").get_node("pop") is not None
        assert flowchart_for("Dijkstra's Algorithm").get_node("mark") is not None

    def test_first_match_wins(self):
        graph = flowchart_for("binary search after bubble sort")
        assert graph.get_node("swap") is not None
        assert graph.get_node("notfound") is None

    def test_generic_fallback(self):
        graph = flowchart_for("Foo Sort")
        assert graph == generic_flow("Foo Sort")
        assert graph.node_ids() == ["start", "process", "algorithm", "result", "end"]
        assert graph.get_node("algorithm").label == "Foo Sort"
        assert graph.nodes[-1].position == (300, 370)

    def test_round_trip_dict(self):
        graph = flowchart_for("Two Sum")
        assert FlowGraph.from_dict(graph.to_dict()) == graph

    def test_node_kind_parse_lenient(self):
        node = FlowNode.from_dict({"id": "x", "type": "weird"})
        assert node.kind == NodeKind.PROCESS
        assert node.label == "x"
