from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


class WaypointMode(Enum):
    """
    How a waypoint relates to the stop that precedes it in a selection.
    """

    NODE = "node"
    UNLABELLED = "unlabelled"
    REL_FORWARD = "rel_forward"
    REL_INVERSE = "rel_inverse"

    @property
    def is_node(self) -> bool:
        return self in (WaypointMode.NODE, WaypointMode.UNLABELLED)


@dataclass(eq=False, repr=False)
class Node:
    """
    Schema node type.

    Instances are shared: the owning graph and every relationship touching
    the node hold the same object, so binding slots written while rendering
    are seen through every reference.
    """

    label: str
    # pass-through nodes take part in traversal but never render
    unlabelled: bool = False
    properties: Dict[str, Any] = field(default_factory=dict)

    var_from: str = ""
    var_to: str = ""

    # arena id, assigned by the owning graph
    id: int = -1

    @staticmethod
    def create(
        label: str,
        unlabelled: bool = False,
        properties: Optional[Dict[str, Any]] = None,
    ) -> "Node":
        return Node(
            label=label,
            unlabelled=unlabelled,
            properties=properties or {},
        )

    def mode(self, prev: Optional["Waypoint"] = None) -> WaypointMode:
        if self.unlabelled:
            return WaypointMode.UNLABELLED
        return WaypointMode.NODE

    def bind_from(self, variable: str) -> None:
        self.var_from = variable

    def bind_to(self, variable: str) -> None:
        self.var_to = variable

    def render(self, star: bool = False) -> str:
        if self.unlabelled:
            return ""
        return f"{self.label}({self.var_from})"

    def __repr__(self) -> str:
        marker = "~" if self.unlabelled else ""
        return f"Node({marker}{self.label})"


@dataclass(eq=False, repr=False)
class Relationship:
    """
    Directed, typed relationship between two schema nodes.

    ``source`` and ``target`` are references into the owning graph's node
    mapping, never copies.
    """

    label: str
    source: Node
    target: Node
    properties: Dict[str, Any] = field(default_factory=dict)

    var_from: str = ""
    var_to: str = ""

    id: int = -1

    @property
    def reflexive(self) -> bool:
        return self.source.label == self.target.label

    def touches(self, node: Node) -> bool:
        return self.source is node or self.target is node

    def far_end(self, label: str) -> Node:
        """
        Endpoint reached when crossing this relationship from ``label``.
        """
        if self.source.label == label:
            return self.target
        return self.source

    def mode(self, prev: Optional["Waypoint"] = None) -> WaypointMode:
        if prev is not None and prev.label == self.source.label:
            return WaypointMode.REL_FORWARD
        if prev is not None and prev.label == self.target.label:
            return WaypointMode.REL_INVERSE
        return WaypointMode.REL_FORWARD

    def bind_from(self, variable: str) -> None:
        self.var_from = variable

    def bind_to(self, variable: str) -> None:
        self.var_to = variable

    def render(self, star: bool = False) -> str:
        suffix = "*" if star else ""
        return f"{self.label}{suffix}({self.var_from},{self.var_to})"

    def __repr__(self) -> str:
        return f"Relationship({self.label}: {self.source.label}->{self.target.label})"


Waypoint = Union[Node, Relationship]
