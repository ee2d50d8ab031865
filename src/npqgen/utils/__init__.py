"""
Utility functions for npqgen.

Low-level helpers used across the system.
No domain logic should live here.
"""

from npqgen.utils.rng import make_rng, choose, coin

__all__ = [
    "make_rng",
    "choose",
    "coin",
]
