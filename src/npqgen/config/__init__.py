"""
Configuration layer for npqgen.

Configuration in npqgen is:
- Explicit (passed, not global)
- Typed (frozen dataclasses)
- Overridable through NPQGEN_* environment variables
"""

from npqgen.config.settings import (
    WalkConfig,
    GrowthConfig,
    RenderConfig,
    NpqgenConfig,
)
from npqgen.config.loader import load_config

__all__ = [
    "WalkConfig",
    "GrowthConfig",
    "RenderConfig",
    "NpqgenConfig",
    "load_config",
]
