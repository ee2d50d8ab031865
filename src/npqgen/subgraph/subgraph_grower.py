from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from npqgen.exceptions import StartNodeNotFound
from npqgen.graph.graph_schema import Waypoint
from npqgen.graph.graph_store import Graph
from npqgen.subgraph.subgraph import Subgraph
from npqgen.utils.rng import choose

logger = logging.getLogger("npqgen.subgraph")


class SubgraphGrower:
    """
    Randomized frontier expansion over the schema.

    Each growth step adds exactly one node or relationship adjacent to the
    current selection, so the selection stays connected and eventually
    covers the start node's whole component.
    """

    def __init__(self, graph: Graph, *, rng: np.random.Generator) -> None:
        self.graph = graph
        self.rng = rng

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def empty(self) -> Subgraph:
        return Subgraph(self.graph)

    def start(self, start_label: str) -> Subgraph:
        if not self.graph.has_node(start_label):
            raise StartNodeNotFound(start_label)

        subgraph = Subgraph(self.graph)
        subgraph.add(self.graph.get_node(start_label))
        return subgraph

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def random_grow(self, subgraph: Subgraph) -> Optional[Waypoint]:
        """
        Add one random frontier waypoint; ``None`` when nothing can grow.
        """
        candidates = subgraph.neighbourhood()

        if not candidates:
            if subgraph.is_complete():
                return None

            if not subgraph.is_bootstrap():
                logger.debug("component exhausted at %d waypoints", len(subgraph))
                return None

            # nothing adjacent yet: any parent element may seed the growth
            candidates = subgraph.unselected()

        picked = choose(self.rng, candidates)
        index = subgraph.add(picked)

        logger.debug(
            "selected %r at %d (%d candidates)",
            picked,
            index,
            len(candidates),
        )
        return picked

    def grow(self, subgraph: Subgraph, steps: int) -> Subgraph:
        for _ in range(steps):
            if self.random_grow(subgraph) is None:
                break
        return subgraph
