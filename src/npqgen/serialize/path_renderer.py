from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from npqgen.graph.graph_schema import Waypoint, WaypointMode
from npqgen.serialize.encoding import to_alphabetic

logger = logging.getLogger("npqgen.serialize")


def render_path(stops: Sequence[Waypoint], separator: str = ", ") -> str:
    """
    Bind variables along an ordered walk and render it as query text.

    Every node stop, labelled or not, takes the next letter. A relationship
    takes the variable of the stop before it on the endpoint that stop
    matches, and the variable of the stop after it on the other endpoint,
    so it always renders in schema direction. Unlabelled nodes render to
    nothing but still use up their letter.
    """
    if not stops:
        return ""

    n = 1
    prev = stops[0]
    prev_prev: Optional[Waypoint] = None
    prev.bind_from(to_alphabetic(n))
    prev.bind_to(to_alphabetic(n))

    elements: List[str] = []

    for nxt in stops[1:]:
        current = to_alphabetic(n)
        mode = nxt.mode(prev)

        if mode.is_node:
            n += 1
            fresh = to_alphabetic(n)
            nxt.bind_from(fresh)

            if prev_prev is not None and prev.mode(prev_prev) is WaypointMode.REL_INVERSE:
                prev.bind_from(fresh)
            else:
                prev.bind_to(fresh)

            nxt.bind_to(fresh)
        elif mode is WaypointMode.REL_FORWARD:
            nxt.bind_from(current)
        else:
            nxt.bind_to(current)

        # prev is fully bound once its successor is handled
        elements.append(prev.render())
        prev_prev, prev = prev, nxt

    if prev.mode(prev_prev) is WaypointMode.NODE:
        elements.append(prev.render())

    logger.debug("bound %d stops using %d variables", len(stops), n)
    return separator.join(e for e in elements if e)
