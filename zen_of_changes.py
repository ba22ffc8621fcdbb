#!/usr/bin/env python3
"""
zen_of_changes.py — The Zen of Changes: random I-Ching hexagram demo.

Each reading draws three numbers: the lower trigram (1-8), the upper
trigram (1-8) and the moving line (1-6), then shows the hexagram with
its judgement, the moving line's text and the commentaries.

Usage:
    zen-of-changes              # Interactive: Enter draws, q quits
    zen-of-changes --once       # One reading and exit
    zen-of-changes --draw 2 5 3 # Fixed numbers: lower, upper, moving line
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from display import display_idle, display_reading, display_welcome
from divination import Diviner, SequenceSource, Session

LOG_FORMAT = '%(levelname)s: %(message)s'
QUIT_WORDS = ("q", "quit", "exit")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--once',
        action='store_true',
        help='Draw a single reading and exit'
    )
    parser.add_argument(
        '--seed',
        help='Seed the random source for a reproducible session'
    )
    parser.add_argument(
        '--draw',
        nargs=3,
        type=int,
        metavar=('LOWER', 'UPPER', 'MOVING'),
        help='Cast fixed numbers instead of drawing (implies --once)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def make_session(args: argparse.Namespace) -> Session:
    if args.draw:
        return Session(Diviner(source=SequenceSource(args.draw)))
    return Session(Diviner(seed=args.seed))


def run_interactive(session: Session, console: Console):
    """Enter draws a new reading; q quits."""
    display_idle(console)
    while True:
        answer = console.input("[bold cyan]> [/bold cyan]").strip().lower()
        if answer in QUIT_WORDS:
            break
        with console.status("[bold cyan]Consulting the oracle...[/bold cyan]", spinner="dots"):
            result = session.generate()
        display_reading(result, console)
        display_idle(console)


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
    console = console or Console()

    try:
        session = make_session(args)
        display_welcome(console)
        if args.once or args.draw:
            display_reading(session.generate(), console)
        else:
            run_interactive(session, console)
    except (KeyboardInterrupt, EOFError):
        console.print("\n\nDivination cancelled.")
        sys.exit(0)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
