import pytest

from npqgen.exceptions import DuplicateLabel, NodeNotFound
from npqgen.graph.graph_schema import Node, Relationship, WaypointMode
from npqgen.graph.graph_store import Graph


def test_add_node_twice_fails_with_duplicate_label():
    graph = Graph()
    graph.add_node(Node.create("A"))

    with pytest.raises(DuplicateLabel):
        graph.add_node(Node.create("A"))

    assert graph.node_count() == 1


def test_add_relationship_with_missing_endpoint_fails():
    graph = Graph()
    graph.add_node(Node.create("A"))

    with pytest.raises(NodeNotFound):
        graph.add_relationship("x", "A", "missing")
    with pytest.raises(LookupError):
        graph.add_relationship("x", "missing", "A")

    assert graph.relationship_count() == 0


def test_relationships_share_node_instances(abc_graph):
    a = abc_graph.get_node("A")
    of = abc_graph.relationships()[0]

    assert of.source is a
    assert of.target is abc_graph.get_node("B")

    a.bind_from("q")
    assert of.source.var_from == "q"


def test_arena_ids_address_every_waypoint(abc_graph):
    assert abc_graph.size() == 5
    for wp in abc_graph.waypoints():
        assert abc_graph.waypoint(wp.id) is wp
    assert [n.id for n in abc_graph.nodes()] == [0, 1, 2]
    assert [r.id for r in abc_graph.relationships()] == [3, 4]


def test_incident_lists_both_directions_and_self_loops_once(loop_graph):
    a_labels = [rel.label for rel in loop_graph.incident("A")]
    assert a_labels == ["of", "has", "owns"]

    b_labels = [rel.label for rel in loop_graph.incident("B")]
    assert b_labels == ["of", "next"]

    with pytest.raises(NodeNotFound):
        loop_graph.incident("Z")


def test_waypoint_modes():
    a = Node.create("A")
    b = Node.create("B")
    hidden = Node.create("H", unlabelled=True)
    rel = Relationship(label="of", source=a, target=b)

    assert a.mode() is WaypointMode.NODE
    assert hidden.mode(a) is WaypointMode.UNLABELLED
    assert rel.mode(a) is WaypointMode.REL_FORWARD
    assert rel.mode(b) is WaypointMode.REL_INVERSE
    assert rel.far_end("A") is b
    assert rel.far_end("B") is a
    assert not rel.reflexive


def test_render_formats():
    a = Node.create("A")
    a.bind_from("a")
    hidden = Node.create("H", unlabelled=True)
    hidden.bind_from("b")
    rel = Relationship(label="next", source=a, target=a)
    rel.bind_from("a")
    rel.bind_to("c")

    assert a.render() == "A(a)"
    assert hidden.render() == ""
    assert rel.render() == "next(a,c)"
    assert rel.render(star=True) == "next*(a,c)"
    assert rel.reflexive


def test_default_schema_shape(scene_graph):
    assert scene_graph.node_count() == 14
    assert scene_graph.relationship_count() == 16
    assert "pedestrian" in scene_graph
    assert scene_graph.get_node("instance").unlabelled
    assert scene_graph.get_node("sample_annotation").unlabelled
    assert not scene_graph.get_node("pedestrian").unlabelled
    for node in scene_graph.nodes():
        assert scene_graph.incident(node.label)
