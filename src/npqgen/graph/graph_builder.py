from __future__ import annotations

from typing import Iterable, Tuple

from npqgen.graph.graph_schema import Node
from npqgen.graph.graph_store import Graph


class GraphBuilder:
    """
    Constructs a schema graph from structured inputs.
    """

    def __init__(self, graph: Graph | None = None) -> None:
        self.graph = graph if graph is not None else Graph()

    def add_nodes(self, nodes: Iterable[Node]) -> "GraphBuilder":
        for node in nodes:
            self.graph.add_node(node)
        return self

    def add_relationships(
        self, triples: Iterable[Tuple[str, str, str]]
    ) -> "GraphBuilder":
        for label, from_label, to_label in triples:
            self.graph.add_relationship(label, from_label, to_label)
        return self

    def build(self) -> Graph:
        return self.graph
