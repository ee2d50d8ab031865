from __future__ import annotations

from typing import Dict, List

from npqgen.exceptions import IndexOutOfRange
from npqgen.graph.graph_schema import Node, Relationship, Waypoint
from npqgen.graph.graph_store import Graph


class Subgraph:
    """
    Growing selection over a read-only parent graph.

    ``order`` maps a waypoint's arena id to the 0-based position at which
    it was selected. Positions are unique, gap-free and strictly
    increasing, and every id in ``order`` is part of the current selection.
    """

    def __init__(self, parent: Graph) -> None:
        self.parent = parent
        self.nodes: Dict[str, Node] = {}
        self.relationships: List[Relationship] = []
        self.order: Dict[int, int] = {}
        self._selected: List[Waypoint] = []

    # -------------------- Selection --------------------

    def add(self, wp: Waypoint) -> int:
        if wp.id in self.order:
            raise ValueError(f"{wp!r} is already part of the subgraph")
        owned = 0 <= wp.id < self.parent.size() and self.parent.waypoint(wp.id) is wp
        if not owned:
            raise ValueError(f"{wp!r} does not belong to the parent graph")

        index = len(self._selected)
        self.order[wp.id] = index
        self._selected.append(wp)

        if isinstance(wp, Node):
            self.nodes[wp.label] = wp
        else:
            self.relationships.append(wp)
        return index

    def contains(self, wp: Waypoint) -> bool:
        return wp.id in self.order

    def in_order(self) -> List[Waypoint]:
        return list(self._selected)

    def nth(self, index: int) -> Waypoint:
        if index < 0 or index >= len(self._selected):
            raise IndexOutOfRange(index, len(self._selected))
        return self._selected[index]

    # -------------------- Frontier --------------------

    def neighbourhood(self) -> List[Waypoint]:
        """
        Unselected waypoints adjacent to the selection.

        A node qualifies once a selected relationship touches it, a
        relationship once one of its endpoints is selected. Parent order,
        nodes first.
        """
        out: List[Waypoint] = []

        for node in self.parent.nodes():
            if node.id in self.order:
                continue
            if any(rel.touches(node) for rel in self.relationships):
                out.append(node)

        for rel in self.parent.relationships():
            if rel.id in self.order:
                continue
            if rel.source.id in self.order or rel.target.id in self.order:
                out.append(rel)

        return out

    def unselected(self) -> List[Waypoint]:
        return [wp for wp in self.parent.waypoints() if wp.id not in self.order]

    def is_complete(self) -> bool:
        return len(self.order) == self.parent.size()

    def is_bootstrap(self) -> bool:
        return not self.relationships and len(self.nodes) <= 1

    # -------------------- Introspection --------------------

    def __len__(self) -> int:
        return len(self._selected)

    def __repr__(self) -> str:
        return (
            f"Subgraph(nodes={len(self.nodes)}, "
            f"relationships={len(self.relationships)}, "
            f"order={[wp.label for wp in self._selected]})"
        )
