"""
Command line entry point.

Usage:
    mines [--difficulty {easy,medium,hard}] [--width W --height H --mines N]
          [--seed S] [--log-file PATH] [--verbose]
"""
import argparse
import logging
from typing import List, Optional

from game import DIFFICULTIES, BoardConfig

from .runner import play


DEFAULT_DIFFICULTY = "medium"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mines", description="Minesweeper in the terminal"
    )
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default=DEFAULT_DIFFICULTY,
        help="The difficulty of the game",
    )
    parser.add_argument("--width", type=int, help="Override board width")
    parser.add_argument("--height", type=int, help="Override board height")
    parser.add_argument("--mines", type=int, help="Override number of mines")
    parser.add_argument("--seed", type=int, help="Seed for mine placement")
    parser.add_argument("--log-file", help="Write log output to this file")
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug messages"
    )
    return parser


def resolve_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> BoardConfig:
    """Build the board configuration from a preset and any overrides."""
    preset = DIFFICULTIES[args.difficulty]
    width = args.width if args.width is not None else preset.width
    height = args.height if args.height is not None else preset.height
    num_mines = args.mines if args.mines is not None else preset.num_mines
    try:
        return BoardConfig(width, height, num_mines)
    except ValueError as error:
        parser.error(str(error))


def configure_logging(args: argparse.Namespace) -> None:
    """Send logs to a file when asked; the terminal belongs to curses."""
    if args.log_file:
        level = logging.DEBUG if args.verbose else logging.INFO
        logging.basicConfig(
            filename=args.log_file,
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(handlers=[logging.NullHandler()])


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run a game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = resolve_config(args, parser)
    configure_logging(args)

    state = play(config, seed=args.seed)

    if state.is_won:
        print("You won!")
    elif state.is_lost:
        print("You hit a mine.")
    else:
        print("Game abandoned.")


if __name__ == "__main__":
    main()
