from __future__ import annotations

import numpy as np
import pytest

from npqgen.graph.default_schema import build_default_schema
from npqgen.graph.graph_builder import GraphBuilder
from npqgen.graph.graph_schema import Node
from npqgen.graph.graph_store import Graph
from npqgen.utils.rng import make_rng


@pytest.fixture()
def rng() -> np.random.Generator:
    return make_rng(1234)


@pytest.fixture()
def abc_graph() -> Graph:
    return (
        GraphBuilder()
        .add_nodes([Node.create("A"), Node.create("B"), Node.create("C")])
        .add_relationships([("of", "A", "B"), ("has", "A", "C")])
        .build()
    )


@pytest.fixture()
def loop_graph() -> Graph:
    """
    Fully labelled graph with a reflexive relationship and a relationship
    pointing back at A, so walks cross edges in both directions.
    """
    return (
        GraphBuilder()
        .add_nodes([Node.create("A"), Node.create("B"), Node.create("C")])
        .add_relationships(
            [
                ("of", "A", "B"),
                ("has", "A", "C"),
                ("next", "B", "B"),
                ("owns", "C", "A"),
            ]
        )
        .build()
    )


@pytest.fixture()
def scene_graph() -> Graph:
    return build_default_schema()
