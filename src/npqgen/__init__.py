"""
npqgen
======

Navigational path query generator: synthesizes benchmark queries by
walking or growing random selections over a small labelled schema graph
and binding shared variables across the selected elements.

Public API:
- Graph
- PathWalker
- SubgraphGrower
- QuerySerializer
- QueryGenerator
"""

from npqgen.graph.graph_schema import Node, Relationship, WaypointMode
from npqgen.graph.graph_store import Graph
from npqgen.graph.default_schema import build_default_schema
from npqgen.walk.path import Path
from npqgen.walk.path_walker import PathWalker
from npqgen.subgraph.subgraph import Subgraph
from npqgen.subgraph.subgraph_grower import SubgraphGrower
from npqgen.serialize.serializer import QuerySerializer
from npqgen.generator import GeneratedQuery, QueryGenerator

__all__ = [
    "Node",
    "Relationship",
    "WaypointMode",
    "Graph",
    "build_default_schema",
    "Path",
    "PathWalker",
    "Subgraph",
    "SubgraphGrower",
    "QuerySerializer",
    "GeneratedQuery",
    "QueryGenerator",
]

__version__ = "0.1.0"
