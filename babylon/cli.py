"""Command line entry point of the game."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from babylon.constants import GAME_AUTHOR, GAME_NAME, GAME_VERSION, init_paths
from babylon.game import Game, GameInitError
from babylon.logger import LoggerLevel, get_logger
from babylon.utilities import path_join

HELP_TEXT = (
    "Usage: babylon [options]\n"
    f"Description: A game engine written by {GAME_AUTHOR}\n"
    "\n"
    "Options:\n"
    "  -h, --help     Display this help message\n"
    "  -v, --version  Display the version information\n"
    "\n"
    f"Written by {GAME_AUTHOR}\n"
)

VERSION_TEXT = f"{GAME_NAME} v{GAME_VERSION}\nWritten by: {GAME_AUTHOR}\n"


def help_command(argv: Sequence[str]) -> bool:
    """Print the help text if ``-h`` or ``--help`` is present."""
    if any(arg in ("-h", "--help") for arg in argv):
        sys.stdout.write(HELP_TEXT)
        return True
    return False


def version_command(argv: Sequence[str]) -> bool:
    """Print the version text if ``-v`` or ``--version`` is present."""
    if any(arg in ("-v", "--version") for arg in argv):
        sys.stdout.write(VERSION_TEXT)
        return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game, or answer a help or version request."""
    args = list(sys.argv[1:] if argv is None else argv)

    paths = init_paths()
    logger = get_logger()
    if not logger.is_fully_initialized():
        logger.init(sys.stdout, path_join(paths.root, ".log", "/"), LoggerLevel.INFO, None)

    if help_command(args) or version_command(args):
        return 0

    game = Game()
    try:
        game.init()
    except GameInitError:
        print("Failed to initialize game", file=sys.stderr)
        return 1

    try:
        game.run()
    finally:
        game.destroy()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())