from __future__ import annotations

from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Returns the random source threaded through walker, grower and
    serializer. Passing the same seed reproduces the same queries.
    """
    return np.random.default_rng(seed)


def choose(rng: np.random.Generator, items: Sequence[T]) -> T:
    """
    Uniform pick from a non-empty sequence.
    """
    if not items:
        raise ValueError("cannot choose from an empty sequence")
    return items[int(rng.integers(len(items)))]


def coin(rng: np.random.Generator, probability: float) -> bool:
    return bool(rng.random() < probability)
