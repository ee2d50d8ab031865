from __future__ import annotations

import logging

import numpy as np

from npqgen.exceptions import AdjacencyExhausted, StartNodeNotFound
from npqgen.graph.graph_store import Graph
from npqgen.utils.rng import choose
from npqgen.walk.path import Path

logger = logging.getLogger("npqgen.walk")


class PathWalker:
    """
    Memoryless random walk over the schema.

    Cycles are allowed: the walk may revisit nodes and relationships,
    including self-loops.
    """

    def __init__(self, graph: Graph, *, rng: np.random.Generator) -> None:
        self.graph = graph
        self.rng = rng

    def get_path(self, length: int, start_label: str) -> Path:
        """
        Walk ``length - 1`` relationship hops from ``start_label``.

        The result alternates node / relationship and holds ``2 * length - 1``
        stops, or just the start node when ``length <= 1``.
        """
        if not self.graph.has_node(start_label):
            raise StartNodeNotFound(start_label)

        current = self.graph.get_node(start_label)
        path = Path(stops=[current])

        remaining = length
        while remaining > 1:
            candidates = self.graph.incident(current.label)
            if not candidates:
                raise AdjacencyExhausted(current.label, remaining - 1)

            rel = choose(self.rng, candidates)
            previous = current
            current = rel.far_end(previous.label)
            path.merge(Path(stops=[rel, current]))
            remaining -= 1

            logger.debug(
                "took %s from %s to %s (%d left)",
                rel.label,
                previous.label,
                current.label,
                remaining - 1,
            )

        return path
