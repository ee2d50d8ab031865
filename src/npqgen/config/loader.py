from __future__ import annotations

from typing import Any, Mapping, Optional

from dynaconf import Dynaconf

from npqgen.config.constants import DEFAULTS
from npqgen.config.settings import (
    GrowthConfig,
    NpqgenConfig,
    RenderConfig,
    WalkConfig,
)


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def load_config(overrides: Optional[Mapping[str, Any]] = None) -> NpqgenConfig:
    """
    Build the root config from NPQGEN_* environment variables, falling
    back to DEFAULTS. ``overrides`` wins over both.
    """
    settings = Dynaconf(
        envvar_prefix="NPQGEN",
        load_dotenv=True,
        settings_files=[],
    )
    if overrides:
        settings.update(dict(overrides))

    def get(key: str) -> Any:
        return settings.get(key, DEFAULTS[key])

    return NpqgenConfig(
        walk=WalkConfig(
            start_label=str(get("START_LABEL")),
            default_length=int(get("WALK_DEFAULT_LENGTH")),
        ),
        growth=GrowthConfig(
            default_steps=int(get("GROWTH_DEFAULT_STEPS")),
            policy=get("GROWTH_POLICY"),
        ),
        render=RenderConfig(
            star_probability=float(get("RENDER_STAR_PROBABILITY")),
            separator=str(get("RENDER_SEPARATOR")),
        ),
        seed=_optional_int(get("SEED")),
        log_level=str(get("LOG_LEVEL")).upper(),
    )
