from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from hill_climb.config import SearchConfig
from hill_climb.errors import ParseError
from hill_climb.renderer import render_image, render_route_text
from hill_climb.solver import HillClimbSolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hill_climb",
        description="Fewest steps up a heightmap, from the start and from any lowest cell.",
    )
    parser.add_argument(
        "input", nargs="?", type=str, help="Path to heightmap file (default: stdin)"
    )
    parser.add_argument(
        "--no-prune",
        action="store_true",
        help="Do not skip the immediate predecessor when expanding a cell",
    )
    parser.add_argument(
        "--deadline", type=float, default=None, help="Per-search time budget in seconds"
    )
    parser.add_argument(
        "--show-route", action="store_true", help="Print the part one route as arrows"
    )
    parser.add_argument(
        "--image", type=str, default=None, help="Write a PNG of the part one route"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = SearchConfig(
            prune_backtrack=not args.no_prune, deadline_seconds=args.deadline
        )
    except ValueError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 2

    try:
        if args.input is None:
            solver = HillClimbSolver.from_input(sys.stdin, config)
        else:
            with Path(args.input).open(encoding="utf-8") as stream:
                solver = HillClimbSolver.from_input(stream, config)
    except ParseError as e:
        print(f"Could not parse heightmap: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read heightmap: {e}", file=sys.stderr)
        return 1

    print(solver.part_one())
    print(solver.part_two())

    if args.show_route or args.image:
        result = solver.part_one_result()
        if args.show_route:
            print(render_route_text(solver.grid, result.route))
        if args.image:
            render_image(solver.grid, result.route).save(args.image)
    return 0
