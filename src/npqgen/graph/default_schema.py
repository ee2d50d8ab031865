"""
Bundled traffic-scene schema.

Agents (pedestrians, vehicles, buses, bicycles) are reached through
``instance`` nodes and carry per-instance state nodes. ``instance`` and
``sample_annotation`` are pass-through types: walks cross them but they
never appear in generated queries.
"""

from __future__ import annotations

from npqgen.graph.graph_builder import GraphBuilder
from npqgen.graph.graph_schema import Node
from npqgen.graph.graph_store import Graph

DEFAULT_START_LABEL = "pedestrian"

LABELLED_NODES = [
    "pedestrian",
    "pedestrian_moving",
    "pedestrian_standing",
    "vehicle",
    "vehicle_moving",
    "vehicle_stopped",
    "vehicle_parked",
    "bus",
    "bicycle",
    "cycle_with_rider",
    "cycle_without_rider",
    "sample",
]

PASS_THROUGH_NODES = [
    "instance",
    "sample_annotation",
]

RELATIONSHIPS = [
    ("OF", "instance", "pedestrian"),
    ("OF", "instance", "vehicle"),
    ("OF", "instance", "bus"),
    ("OF", "instance", "bicycle"),
    ("FIRST_ANNOTATION", "pedestrian", "sample_annotation"),
    ("LAST_ANNOTATION", "pedestrian", "sample_annotation"),
    ("OF", "sample_annotation", "sample"),
    ("NEXT", "sample", "sample"),
    ("NEXT", "instance", "instance"),
    ("HAS", "instance", "pedestrian_moving"),
    ("HAS", "instance", "pedestrian_standing"),
    ("HAS", "instance", "vehicle_moving"),
    ("HAS", "instance", "vehicle_stopped"),
    ("HAS", "instance", "vehicle_parked"),
    ("HAS", "instance", "cycle_with_rider"),
    ("HAS", "instance", "cycle_without_rider"),
]


def build_default_schema() -> Graph:
    builder = GraphBuilder()
    builder.add_nodes(Node.create(label) for label in LABELLED_NODES)
    builder.add_nodes(
        Node.create(label, unlabelled=True) for label in PASS_THROUGH_NODES
    )
    builder.add_relationships(RELATIONSHIPS)
    return builder.build()
