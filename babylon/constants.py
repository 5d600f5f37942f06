"""Game identity constants and per-user storage paths."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import platformdirs

from babylon.utilities import path_join

GAME_NAME = "Babylon"
GAME_VERSION = "0.1.1"
GAME_AUTHOR = "BabylonDev"


@dataclass(frozen=True)
class GamePaths:
    """Root storage directory and configuration path of the game."""

    root: str
    config: str


def init_paths(root: str | os.PathLike[str] | None = None) -> GamePaths:
    """Create the per-user root directory and return the game's paths.

    The root ends with a path separator; ``root`` overrides the platform default.
    """
    if root is None:
        root = platformdirs.user_data_dir(GAME_NAME, GAME_AUTHOR)
    root_dir = Path(root)
    root_dir.mkdir(parents=True, exist_ok=True)

    root_path = str(root_dir)
    if not root_path.endswith(os.sep):
        root_path += os.sep
    config_path = path_join(root_path, "config", "/")

    print(f"INFO: Game Root Path: {root_path}")
    print(f"INFO: Game Config Path: {config_path}")
    return GamePaths(root=root_path, config=config_path)