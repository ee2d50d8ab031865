from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from npqgen.graph.graph_schema import Node, Waypoint
from npqgen.serialize.path_renderer import render_path


@dataclass
class Path:
    """
    Ordered selection of waypoints: node, relationship, node, ..., node.
    """

    stops: List[Waypoint] = field(default_factory=list)

    def merge(self, other: "Path") -> "Path":
        self.stops.extend(other.stops)
        return self

    def hops(self) -> int:
        return len(self.stops) // 2

    def is_alternating(self) -> bool:
        if not self.stops:
            return False
        for i, stop in enumerate(self.stops):
            if isinstance(stop, Node) != (i % 2 == 0):
                return False
        return isinstance(self.stops[-1], Node)

    def labels(self) -> List[str]:
        return [stop.label for stop in self.stops]

    def __len__(self) -> int:
        return len(self.stops)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.stops)

    def __getitem__(self, index: int) -> Waypoint:
        return self.stops[index]

    def __str__(self) -> str:
        return render_path(self.stops)
