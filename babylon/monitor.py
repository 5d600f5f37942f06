"""Enumeration of the connected displays."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


@dataclass(frozen=True)
class MonitorInfo:
    """A display's index, name and desktop size when known."""

    id: int
    name: str
    size: tuple[int, int] | None = None

    @property
    def has_bounds(self) -> bool:
        return self.size is not None


def get_all_monitors() -> list[MonitorInfo]:
    """Return every connected display; an empty list if video is unavailable."""
    if not pygame.display.get_init():
        try:
            pygame.display.init()
        except pygame.error as exc:
            print(f"Failed to initialize SDL video: {exc}", file=sys.stderr)
            return []

    try:
        count = pygame.display.get_num_displays()
    except pygame.error as exc:
        print(f"No monitors found: {exc}", file=sys.stderr)
        return []
    if count < 0:
        print("No monitors found", file=sys.stderr)
        return []

    try:
        sizes = list(pygame.display.get_desktop_sizes())
    except pygame.error:
        sizes = []

    return [
        MonitorInfo(
            id=index,
            name=f"Monitor {index}",
            size=tuple(sizes[index]) if index < len(sizes) else None,
        )
        for index in range(count)
    ]