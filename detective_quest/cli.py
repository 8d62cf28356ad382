"""Command-line entry point: argument parsing, logging setup and the game session."""
import argparse
import logging
import sys
from typing import List, Optional

from .game_orchestrator import GameOrchestrator
from .types import LEVEL_NAMES

logger = logging.getLogger("detective_quest.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Explore the mansion, collect clues and accuse a suspect")
    parser.add_argument("--level", default="master", choices=LEVEL_NAMES, help="Game level (default: master)")
    parser.add_argument("--verbose", action="store_true", help="Log game events to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        GameOrchestrator(level=args.level).play(input)
    except MemoryError:
        logger.critical("Out of memory; aborting")
        return 1
    return 0
