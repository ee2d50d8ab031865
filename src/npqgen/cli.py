"""Command line entry for npqgen."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from npqgen.config.loader import load_config
from npqgen.exceptions import QueryGenerationError
from npqgen.generator import QueryGenerator
from npqgen.graph.default_schema import build_default_schema
from npqgen.utils.rng import make_rng


def build_parser(default_start: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="npqgen",
        description="Generate navigational path queries over a graph schema.",
    )
    parser.add_argument(
        "-l", "--length",
        type=int,
        default=0,
        help="Length of the path that defines the query (growth steps with --branching).",
    )
    parser.add_argument(
        "-s", "--startWith",
        dest="start_with",
        type=str,
        default=default_start,
        help="The starting node. Must exist.",
    )
    parser.add_argument(
        "-b", "--branching",
        action="store_true",
        help="Grow a random subgraph instead of walking a path.",
    )
    parser.add_argument(
        "-j", "--joined",
        action="store_true",
        help="With --branching, share one variable per node label.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible queries.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every step of the walk or growth.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()
    graph = build_default_schema()

    parser = build_parser(config.walk.start_label)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger = logging.getLogger("npqgen.cli")

    if args.start_with not in graph or args.length <= 0:
        parser.error(
            f"--length must be > 0 and --startWith one of {', '.join(graph.labels())}"
        )

    seed = args.seed if args.seed is not None else config.seed
    generator = QueryGenerator(graph=graph, config=config, rng=make_rng(seed))

    try:
        if args.branching:
            policy = "maximally_joined" if args.joined else config.growth.policy
            result = generator.subgraph_query(
                steps=args.length,
                start_label=args.start_with,
                policy=policy,
            )
        else:
            result = generator.path_query(
                length=args.length,
                start_label=args.start_with,
            )
    except QueryGenerationError as exc:
        logger.error("query generation failed: %s", exc)
        print(f"npqgen: error: {exc}", file=sys.stderr)
        return 1

    print(result.query)
    return 0


if __name__ == "__main__":
    sys.exit(main())
