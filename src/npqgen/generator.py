from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional

import numpy as np

from npqgen.config.settings import NpqgenConfig
from npqgen.graph.graph_store import Graph
from npqgen.serialize.serializer import QuerySerializer
from npqgen.subgraph.subgraph_grower import SubgraphGrower
from npqgen.utils.rng import make_rng
from npqgen.walk.path_walker import PathWalker

logger = logging.getLogger("npqgen.generator")


@dataclass(frozen=True)
class GeneratedQuery:
    """
    A rendered query together with the selection trace it came from.
    """

    query: str
    mode: Literal["path", "subgraph"]
    policy: str
    trace: List[str]


class QueryGenerator:
    """
    Single entry point for query synthesis.

    Owns one random source and shares it between walker, grower and
    serializer so a seeded generator replays the same sequence of queries.
    """

    def __init__(
        self,
        *,
        graph: Graph,
        config: Optional[NpqgenConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.graph = graph
        self.config = config or NpqgenConfig()
        self.rng = rng if rng is not None else make_rng(self.config.seed)

        self.walker = PathWalker(graph, rng=self.rng)
        self.grower = SubgraphGrower(graph, rng=self.rng)
        self.serializer = QuerySerializer(rng=self.rng, config=self.config.render)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def path_query(
        self,
        length: Optional[int] = None,
        start_label: Optional[str] = None,
    ) -> GeneratedQuery:
        length = length if length is not None else self.config.walk.default_length
        start_label = start_label or self.config.walk.start_label

        path = self.walker.get_path(length, start_label)
        trace = path.labels()
        logger.info("produced path %s", trace)

        query = self.serializer.render_path(path)
        logger.info("produced query %s", query)
        return GeneratedQuery(query=query, mode="path", policy="path", trace=trace)

    def subgraph_query(
        self,
        steps: Optional[int] = None,
        start_label: Optional[str] = None,
        policy: Optional[str] = None,
    ) -> GeneratedQuery:
        steps = steps if steps is not None else self.config.growth.default_steps
        start_label = start_label or self.config.walk.start_label
        policy = policy or self.config.growth.policy

        subgraph = self.grower.grow(self.grower.start(start_label), steps)
        trace = [wp.label for wp in subgraph.in_order()]
        logger.info("produced subgraph order %s", trace)

        if policy == "maximally_joined":
            query = self.serializer.maximally_joined(subgraph)
        elif policy == "all_distinct":
            query = self.serializer.all_distinct(subgraph)
        else:
            raise ValueError(f"unknown rendering policy {policy!r}")

        logger.info("produced query %s", query)
        return GeneratedQuery(query=query, mode="subgraph", policy=policy, trace=trace)
