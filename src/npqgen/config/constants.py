DEFAULTS = {
    # Node label walks and growth start from
    "START_LABEL": "pedestrian",
    # Walk length used when none is requested
    "WALK_DEFAULT_LENGTH": 3,
    # Growth steps used when none is requested
    "GROWTH_DEFAULT_STEPS": 4,
    # Subgraph rendering policy: all_distinct | maximally_joined
    "GROWTH_POLICY": "all_distinct",
    # Chance that a reflexive relationship is rendered with a star
    "RENDER_STAR_PROBABILITY": 0.5,
    # Text placed between rendered terms
    "RENDER_SEPARATOR": ", ",
    # Seed for the random source; unset means fresh entropy
    "SEED": None,
    # Root log level for the command line tool
    "LOG_LEVEL": "INFO",
}
