from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import networkx as nx

from npqgen.exceptions import DuplicateLabel, NodeNotFound
from npqgen.graph.graph_schema import Node, Relationship, Waypoint


class Graph:
    """
    Authoritative in-memory schema graph.

    Nodes are keyed by their unique label. Every node and relationship is
    also registered in an arena, so selections can address waypoints by a
    stable integer id instead of by object identity.
    """

    def __init__(self) -> None:
        self._graph = nx.MultiDiGraph()
        self._relationships: List[Relationship] = []
        self._arena: List[Waypoint] = []

    # -------------------- Nodes --------------------

    def add_node(self, node: Node) -> Node:
        if self._graph.has_node(node.label):
            raise DuplicateLabel(node.label)

        node.id = len(self._arena)
        self._arena.append(node)
        self._graph.add_node(node.label, data=node)
        return node

    def has_node(self, label: str) -> bool:
        return self._graph.has_node(label)

    def get_node(self, label: str) -> Node:
        if not self._graph.has_node(label):
            raise NodeNotFound(label)
        return self._graph.nodes[label]["data"]

    def nodes(self) -> List[Node]:
        return [data for _, data in self._graph.nodes(data="data")]

    def labels(self) -> List[str]:
        return list(self._graph.nodes)

    # -------------------- Relationships --------------------

    def add_relationship(
        self,
        label: str,
        from_label: str,
        to_label: str,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Relationship:
        source = self.get_node(from_label)
        target = self.get_node(to_label)

        rel = Relationship(
            label=label,
            source=source,
            target=target,
            properties=properties or {},
        )
        rel.id = len(self._arena)
        self._arena.append(rel)
        self._relationships.append(rel)
        self._graph.add_edge(from_label, to_label, key=rel.id, data=rel)
        return rel

    def relationships(self) -> List[Relationship]:
        return list(self._relationships)

    def incident(self, label: str) -> List[Relationship]:
        """
        Relationships touching ``label`` as either endpoint, in insertion
        order. Self-loops are reported once.
        """
        if not self._graph.has_node(label):
            raise NodeNotFound(label)

        found: Dict[int, Relationship] = {}
        for _, _, key, rel in self._graph.out_edges(label, keys=True, data="data"):
            found[key] = rel
        for _, _, key, rel in self._graph.in_edges(label, keys=True, data="data"):
            found[key] = rel
        return [found[key] for key in sorted(found)]

    # -------------------- Arena --------------------

    def waypoint(self, waypoint_id: int) -> Waypoint:
        return self._arena[waypoint_id]

    def waypoints(self) -> Iterable[Waypoint]:
        return iter(self._arena)

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def relationship_count(self) -> int:
        return len(self._relationships)

    def size(self) -> int:
        return len(self._arena)

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self._graph.has_node(label)

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={self.node_count()}, "
            f"relationships={self.relationship_count()})"
        )
