from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

# ---------------------------------------------------------------------
# Path walk
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class WalkConfig:
    """
    Controls where walks start and how long they run by default.
    """

    start_label: str = "pedestrian"
    default_length: int = 3


# ---------------------------------------------------------------------
# Subgraph growth
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GrowthConfig:
    """
    Controls subgraph growth and which rendering policy is applied.
    """

    default_steps: int = 4
    policy: Literal["all_distinct", "maximally_joined"] = "all_distinct"

    def __post_init__(self) -> None:
        if self.policy not in ("all_distinct", "maximally_joined"):
            raise ValueError(f"unknown rendering policy {self.policy!r}")


# ---------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class RenderConfig:
    """
    Controls query text output.
    """

    star_probability: float = 0.5
    separator: str = ", "

    def __post_init__(self) -> None:
        if not 0.0 <= self.star_probability <= 1.0:
            raise ValueError("star_probability must be within [0, 1]")


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class NpqgenConfig:
    """
    Root configuration object for npqgen.

    Constructed explicitly and passed to the generator; never global.
    """

    walk: WalkConfig = field(default_factory=WalkConfig)
    growth: GrowthConfig = field(default_factory=GrowthConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    seed: Optional[int] = None
    log_level: str = "INFO"
