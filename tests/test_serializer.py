import pytest

from npqgen.config.settings import RenderConfig
from npqgen.graph.graph_builder import GraphBuilder
from npqgen.graph.graph_schema import Node
from npqgen.serialize.encoding import to_alphabetic
from npqgen.serialize.serializer import QuerySerializer
from npqgen.subgraph.subgraph import Subgraph
from npqgen.subgraph.subgraph_grower import SubgraphGrower
from npqgen.utils.rng import make_rng


@pytest.fixture()
def graph():
    return (
        GraphBuilder()
        .add_nodes(
            [Node.create("A"), Node.create("B"), Node.create("U", unlabelled=True)]
        )
        .add_relationships(
            [("of", "A", "B"), ("next", "B", "B"), ("has", "U", "A")]
        )
        .build()
    )


def _select(graph, *labels):
    rels = {rel.label: rel for rel in graph.relationships()}
    subgraph = Subgraph(graph)
    for label in labels:
        subgraph.add(rels[label] if label in rels else graph.get_node(label))
    return subgraph


def _serializer(probability: float, seed: int = 0) -> QuerySerializer:
    return QuerySerializer(
        rng=make_rng(seed),
        config=RenderConfig(star_probability=probability),
    )


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, ""),
        (1, "a"),
        (2, "b"),
        (26, "z"),
        (27, "aa"),
        (52, "az"),
        (53, "ba"),
        (702, "zz"),
        (703, "aaa"),
    ],
)
def test_to_alphabetic(n, expected):
    assert to_alphabetic(n) == expected


def test_all_distinct_gives_every_occurrence_fresh_variables(graph):
    subgraph = _select(graph, "A", "of", "B")

    assert _serializer(0.0).all_distinct(subgraph) == "A(a), of(b,c), B(d)"


def test_all_distinct_counts_unlabelled_nodes(graph):
    subgraph = _select(graph, "U", "has", "A")

    assert _serializer(0.0).all_distinct(subgraph) == "has(b,c), A(d)"


def test_maximally_joined_shares_variables_per_label(graph):
    assert _serializer(0.0).maximally_joined(_select(graph, "A", "of", "B")) == (
        "A(a), of(a,b), B(b)"
    )
    assert _serializer(0.0).maximally_joined(_select(graph, "of", "B", "A")) == (
        "of(a,b), B(b), A(a)"
    )


def test_maximally_joined_reflexive_relationship(graph):
    subgraph = _select(graph, "B", "next", "of", "A")

    assert _serializer(0.0).maximally_joined(subgraph) == "B(a), next(a,a), of(b,a), A(b)"
    assert _serializer(1.0).maximally_joined(subgraph) == "B(a), next*(a,a), of(b,a), A(b)"


def test_only_reflexive_relationships_are_starred(graph):
    subgraph = _select(graph, "A", "of", "B", "next")

    assert _serializer(1.0).all_distinct(subgraph) == "A(a), of(b,c), B(d), next*(e,f)"


def test_star_is_drawn_fresh_per_render(graph):
    subgraph = _select(graph, "B", "next")
    serializer = _serializer(0.5, seed=11)

    renders = {serializer.maximally_joined(subgraph) for _ in range(200)}

    assert renders == {"B(a), next(a,a)", "B(a), next*(a,a)"}


def test_star_choice_follows_the_seed(graph):
    subgraph = _select(graph, "B", "next")

    first = [_serializer(0.5, seed=4).all_distinct(subgraph) for _ in range(3)]
    again = [_serializer(0.5, seed=4).all_distinct(subgraph) for _ in range(3)]
    assert first == again


def test_joined_policy_on_grown_subgraph(scene_graph):
    for seed in range(10):
        rng = make_rng(seed)
        grower = SubgraphGrower(scene_graph, rng=rng)
        subgraph = grower.grow(grower.start("pedestrian"), 15)

        QuerySerializer(rng=rng).maximally_joined(subgraph)

        by_label = {}
        for wp in subgraph.in_order():
            if isinstance(wp, Node):
                pairs = [(wp.label, wp.var_from)]
            else:
                pairs = [(wp.source.label, wp.var_from), (wp.target.label, wp.var_to)]
            for label, var in pairs:
                assert by_label.setdefault(label, var) == var

        assert len(set(by_label.values())) == len(by_label)


def test_distinct_policy_on_grown_subgraph(scene_graph):
    for seed in range(10):
        rng = make_rng(seed)
        grower = SubgraphGrower(scene_graph, rng=rng)
        subgraph = grower.grow(grower.start("pedestrian"), 15)

        QuerySerializer(rng=rng).all_distinct(subgraph)

        variables = []
        for wp in subgraph.in_order():
            if isinstance(wp, Node):
                variables.append(wp.var_from)
            else:
                variables.extend([wp.var_from, wp.var_to])

        assert len(variables) == len(set(variables))


def test_render_config_rejects_bad_probability():
    with pytest.raises(ValueError):
        RenderConfig(star_probability=1.5)
