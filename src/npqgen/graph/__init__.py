"""
Graph subsystem for npqgen.

Defines the schema graph that queries are synthesized against:
- uniquely labelled node types
- directed, typed relationships between them
- the bundled traffic-scene schema
"""

from npqgen.graph.graph_schema import Node, Relationship, Waypoint, WaypointMode
from npqgen.graph.graph_store import Graph
from npqgen.graph.graph_builder import GraphBuilder
from npqgen.graph.default_schema import DEFAULT_START_LABEL, build_default_schema

__all__ = [
    "Node",
    "Relationship",
    "Waypoint",
    "WaypointMode",
    "Graph",
    "GraphBuilder",
    "DEFAULT_START_LABEL",
    "build_default_schema",
]
