"""Command line runner for a single simulated game."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from salvo.ai import STRATEGY_NAMES, build_strategy
from salvo.core.engine import GameEngine
from salvo.core.errors import GameError
from salvo.core.models import Coordinate, TurnEvent
from salvo.infra.config import load_default_env_files, load_env_file, load_settings
from salvo.infra.logging import setup_logging
from salvo.view import format_outcome, format_turn, render_battlefield

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


@dataclass(frozen=True, slots=True)
class ShipArg:
    """One ``--ship`` definition."""

    ship_id: str
    size: int
    center_a: Coordinate
    center_b: Coordinate


def parse_ship(value: str) -> ShipArg:
    """Parse ``ID:SIZE:XA,YA:XB,YB``."""
    parts = value.split(":")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"expected ID:SIZE:XA,YA:XB,YB, got {value!r}")
    ship_id, size_raw, center_a_raw, center_b_raw = (part.strip() for part in parts)
    try:
        return ShipArg(
            ship_id=ship_id,
            size=int(size_raw),
            center_a=_parse_coordinate(center_a_raw),
            center_b=_parse_coordinate(center_b_raw),
        )
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid ship {value!r}: {exc}") from None


def _parse_coordinate(raw: str) -> Coordinate:
    x_raw, sep, y_raw = raw.partition(",")
    if not sep:
        raise ValueError(f"coordinate must be X,Y, got {raw!r}")
    return Coordinate(int(x_raw), int(y_raw))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="salvo",
        description="Simulate a two-player territory battleship game.",
    )
    parser.add_argument("--size", type=int, default=None, help="even battlefield size N")
    parser.add_argument(
        "--ship",
        dest="ships",
        action="append",
        type=parse_ship,
        default=[],
        metavar="ID:SIZE:XA,YA:XB,YB",
        help="ship added for both players; repeatable",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--strategy", choices=STRATEGY_NAMES, default=None)
    parser.add_argument("--show-board", action="store_true", help="print the battlefield before play")
    parser.add_argument("--env-file", default=None, help="extra env file loaded after defaults")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one game from command line arguments."""
    args = build_parser().parse_args(argv)
    load_default_env_files(override_existing=False)
    if args.env_file:
        load_env_file(args.env_file)
    setup_logging()

    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    size = args.size if args.size is not None else settings.board_size
    seed = args.seed if args.seed is not None else settings.seed
    strategy_name = args.strategy or settings.strategy

    try:
        strategy = build_strategy(strategy_name, random.Random(seed))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    engine = GameEngine(strategy)
    engine.events.subscribe(TurnEvent, lambda event: print(format_turn(event)))
    try:
        engine.initialize(size)
        print(f"Game initialized with a {size}x{size} battlefield.")
        for ship in args.ships:
            engine.register_ship(ship.ship_id, ship.size, ship.center_a, ship.center_b)
            print(f"Ship '{ship.ship_id}' of size {ship.size}x{ship.size} added for both players.")
        if args.show_board:
            snapshot = engine.snapshot()
            if snapshot is not None:
                print(render_battlefield(snapshot))
        print("--- Game Started ---")
        outcome = engine.start()
    except GameError as exc:
        logger.debug("game_aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    print(format_outcome(outcome))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
