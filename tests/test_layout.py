import pytest

from graph import Graph, LayoutEdge, LEAF_SPACING, choose_root, tree_layout


def by_id(nodes):
    return {n.id: n for n in nodes}


def test_empty_graph():
    assert tree_layout(Graph(), None, 600, 300) == ([], [])


def test_single_node_is_centred():
    nodes, edges = tree_layout(Graph.from_dict({"A": []}), "A", 600, 300)
    assert len(nodes) == 1
    assert nodes[0].x == pytest.approx(300)
    assert nodes[0].y == pytest.approx(150)
    assert edges == []


def test_fork():
    g = Graph.from_dict({"A": ["B", "C"], "B": [], "C": []})
    nodes, edges = tree_layout(g, "A", 600, 300)

    assert [n.id for n in nodes] == ["B", "C", "A"]
    pos = by_id(nodes)
    assert (pos["B"].x, pos["B"].y) == pytest.approx((265, 200))
    assert (pos["C"].x, pos["C"].y) == pytest.approx((335, 200))
    assert (pos["A"].x, pos["A"].y) == pytest.approx((300, 100))
    assert pos["C"].x - pos["B"].x == pytest.approx(LEAF_SPACING)
    assert edges == [LayoutEdge("A", "B"), LayoutEdge("A", "C")]


def test_parent_sits_over_mean_of_children():
    g = Graph.from_dict({
        "A": ["B", "C"], "B": ["D", "E"], "C": ["F", "G"],
        "D": [], "E": [], "F": [], "G": [],
    })
    pos = by_id(tree_layout(g, "A", 600, 400)[0])

    assert pos["A"].x == pytest.approx(300)
    assert pos["B"].x == pytest.approx((pos["D"].x + pos["E"].x) / 2)
    assert pos["C"].x == pytest.approx((pos["F"].x + pos["G"].x) / 2)
    # symmetric around the canvas centre
    assert pos["D"].x + pos["G"].x == pytest.approx(600)
    assert pos["B"].x + pos["C"].x == pytest.approx(600)
    assert [pos[n].level for n in "ABD"] == [0, 1, 2]
    assert pos["A"].y < pos["B"].y < pos["D"].y


def test_post_order_lists_children_first(example_graph):
    nodes, _ = tree_layout(example_graph, "A", 600, 350)
    order = [n.id for n in nodes]
    for src, tgt in example_graph.edges():
        assert order.index(tgt) < order.index(src)
    assert order[-1] == "A"


def test_every_graph_node_positioned_once(example_graph):
    nodes, edges = tree_layout(example_graph, "A", 600, 350)
    assert sorted(n.id for n in nodes) == sorted(example_graph.node_ids())
    assert len(edges) == example_graph.edge_count()


def test_disconnected_nodes_are_levelled_and_clamped():
    g = Graph.from_dict({"A": ["B"], "B": [], "X": ["Y", "Z"], "Y": [], "Z": ["W"], "W": []})
    nodes, _ = tree_layout(g, "A", 600, 300)
    pos = by_id(nodes)

    assert set(pos) == {"A", "B", "X", "Y", "Z", "W"}
    assert pos["X"].level == 0
    assert max(n.level for n in nodes) == 1
    assert pos["W"].level == 1


def test_dangling_successor_is_not_positioned():
    g = Graph.from_dict({"A": ["B", "Q"], "B": []})
    nodes, edges = tree_layout(g, "A", 600, 300)
    assert [n.id for n in nodes] == ["B", "A"]
    assert LayoutEdge("A", "Q") in edges


def test_preferred_root_becomes_level_zero():
    g = Graph.from_dict({"A": ["B"], "B": ["C"], "C": []})
    pos = by_id(tree_layout(g, "B", 600, 300)[0])
    assert pos["B"].level == 0
    assert pos["C"].level == 1


def test_choose_root():
    g = Graph.from_dict({"A": ["B"], "B": [], "C": ["A"]})
    assert choose_root(g) == "C"
    assert choose_root(g, "B") == "B"
    assert choose_root(g, "nope") == "C"
    assert choose_root(Graph()) is None

    cycle = Graph.from_dict({"A": ["B"], "B": ["A"]})
    assert choose_root(cycle) == "A"


def test_cycle_layout_terminates():
    g = Graph.from_dict({"A": ["B"], "B": ["C"], "C": ["A"]})
    nodes, _ = tree_layout(g, "A", 600, 300)
    assert [n.id for n in nodes] == ["C", "B", "A"]
