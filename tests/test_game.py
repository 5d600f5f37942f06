import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from babylon.game import (  # noqa: E402
    CLEAR_COLOR,
    WINDOW_SIZE,
    WINDOW_TITLE,
    Game,
    GameInitError,
)


@pytest.fixture
def game():
    g = Game()
    yield g
    g.destroy()


def test_new_game_is_running_without_window():
    g = Game()
    assert g.running is True
    assert g.window is None


def test_init_returns_self(game):
    assert game.init() is game


def test_init_creates_window_of_fixed_size(game):
    game.init()
    assert game.window.get_size() == (640, 480)
    assert game.window.get_size() == WINDOW_SIZE
    assert pygame.display.get_caption()[0] == WINDOW_TITLE


def test_init_reuses_existing_window(game):
    game.init()
    first = game.window
    game.init()
    assert game.window is first


def test_run_stops_on_quit_and_clears_black(game):
    game.init()
    game.window.fill((255, 0, 0))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert game.running is False
    assert tuple(game.window.get_at((0, 0))) == CLEAR_COLOR


def test_run_without_init_raises():
    with pytest.raises(RuntimeError):
        Game().run()


def test_destroy_shuts_down_display(game):
    game.init()
    assert pygame.display.get_init() is True
    game.destroy()
    assert game.window is None
    assert pygame.display.get_init() is False


def test_context_manager_opens_and_closes():
    with Game() as g:
        assert g.window is not None and pygame.display.get_init() is True
    assert g.window is None
    assert pygame.display.get_init() is False


def test_window_failure_raises_init_error(game, monkeypatch):
    def failing_set_mode(*args, **kwargs):
        raise pygame.error("no window")

    monkeypatch.setattr(pygame.display, "set_mode", failing_set_mode)
    with pytest.raises(GameInitError):
        game.init()
    assert game.window is None
    assert pygame.display.get_init() is False