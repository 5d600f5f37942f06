"""The game window and its main loop."""

from __future__ import annotations

import os
import sys
from types import TracebackType

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEO_CENTERED", "1")

import pygame  # noqa: E402

WINDOW_TITLE = "SDL2 Window"
WINDOW_SIZE = (640, 480)
CLEAR_COLOR = (0, 0, 0, 255)


class GameInitError(RuntimeError):
    """Raised when the video system or the game window cannot be set up."""


class Game:
    """A single window that is cleared every frame until the user closes it."""

    def __init__(self) -> None:
        self.running = True
        self.window: pygame.Surface | None = None

    def init(self) -> Game:
        """Start the video system and open the window if it is not open yet."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            print(f"SDL_Init Error: {exc}", file=sys.stderr)
            raise GameInitError(f"failed to initialize video: {exc}") from exc

        if self.window is None:
            try:
                pygame.display.set_caption(WINDOW_TITLE)
                self.window = pygame.display.set_mode(WINDOW_SIZE)
            except pygame.error as exc:
                print(f"SDL_CreateWindow Error: {exc}", file=sys.stderr)
                self.window = None
                pygame.display.quit()
                raise GameInitError(f"failed to create window: {exc}") from exc
        return self

    def run(self) -> None:
        """Process events and redraw until a quit event arrives."""
        if self.window is None:
            raise RuntimeError("game is not initialized")
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
            self.window.fill(CLEAR_COLOR)
            pygame.display.flip()

    def destroy(self) -> None:
        """Close the window and shut the video system down."""
        self.window = None
        pygame.quit()

    def __enter__(self) -> Game:
        return self.init()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()