from __future__ import annotations

import logging
from typing import Dict, List, Optional

import numpy as np

from npqgen.config.settings import RenderConfig
from npqgen.graph.graph_schema import Node, Relationship, Waypoint
from npqgen.serialize.encoding import to_alphabetic
from npqgen.serialize.path_renderer import render_path
from npqgen.subgraph.subgraph import Subgraph
from npqgen.utils.rng import coin
from npqgen.walk.path import Path

logger = logging.getLogger("npqgen.serialize")


class QuerySerializer:
    """
    Turns walk and subgraph selections into navigational path query text.

    Two policies exist for subgraphs:
    - all-distinct: every occurrence gets its own variables, no joins
    - maximally-joined: one variable per node label, so every position
      sharing a label is joined

    Reflexive relationships are starred at random on every render, which
    turns them into transitive-closure terms.
    """

    def __init__(
        self,
        *,
        rng: np.random.Generator,
        config: Optional[RenderConfig] = None,
    ) -> None:
        self.rng = rng
        self.config = config or RenderConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_path(self, path: Path) -> str:
        return render_path(path.stops, separator=self.config.separator)

    def all_distinct(self, subgraph: Subgraph) -> str:
        parts: List[str] = []
        count = 0

        for wp in subgraph.in_order():
            if isinstance(wp, Node):
                count += 1
                wp.bind_from(to_alphabetic(count))
                wp.bind_to(to_alphabetic(count))
            else:
                wp.bind_from(to_alphabetic(count + 1))
                wp.bind_to(to_alphabetic(count + 2))
                count += 2
            parts.append(self._render(wp))

        logger.debug("all-distinct render used %d variables", count)
        return self._join(parts)

    def maximally_joined(self, subgraph: Subgraph) -> str:
        parts: List[str] = []
        variables: Dict[str, str] = {}

        def variable_for(label: str) -> str:
            if label not in variables:
                variables[label] = to_alphabetic(len(variables) + 1)
            return variables[label]

        for wp in subgraph.in_order():
            if isinstance(wp, Node):
                var = variable_for(wp.label)
                wp.bind_from(var)
                wp.bind_to(var)
            else:
                wp.bind_from(variable_for(wp.source.label))
                wp.bind_to(variable_for(wp.target.label))
            parts.append(self._render(wp))

        logger.debug("maximally-joined render used %d variables", len(variables))
        return self._join(parts)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _render(self, wp: Waypoint) -> str:
        if isinstance(wp, Relationship) and wp.reflexive:
            return wp.render(star=coin(self.rng, self.config.star_probability))
        return wp.render()

    def _join(self, parts: List[str]) -> str:
        return self.config.separator.join(p for p in parts if p)
