from unittest import mock

import pygame

from babylon.monitor import get_all_monitors


def test_init_failure_returns_empty(capsys):
    with mock.patch("pygame.display.get_init", return_value=False), mock.patch(
        "pygame.display.init", side_effect=pygame.error("no video")
    ):
        assert get_all_monitors() == []
    assert "Failed to initialize SDL video: no video" in capsys.readouterr().err


def test_negative_count_returns_empty():
    with mock.patch("pygame.display.get_init", return_value=True), mock.patch(
        "pygame.display.get_num_displays", return_value=-1
    ):
        assert get_all_monitors() == []


def test_monitors_listed_with_sizes():
    with mock.patch("pygame.display.get_init", return_value=True), mock.patch(
        "pygame.display.get_num_displays", return_value=2
    ), mock.patch(
        "pygame.display.get_desktop_sizes", return_value=[(800, 600), (1920, 1080)]
    ):
        monitors = get_all_monitors()
    assert [m.id for m in monitors] == [0, 1]
    assert [m.name for m in monitors] == ["Monitor 0", "Monitor 1"]
    assert [m.size for m in monitors] == [(800, 600), (1920, 1080)]
    assert all(m.has_bounds for m in monitors)


def test_missing_size_has_no_bounds():
    with mock.patch("pygame.display.get_init", return_value=True), mock.patch(
        "pygame.display.get_num_displays", return_value=2
    ), mock.patch("pygame.display.get_desktop_sizes", return_value=[(640, 480)]):
        monitors = get_all_monitors()
    assert monitors[0].has_bounds is True
    assert monitors[1].size is None
    assert monitors[1].has_bounds is False


def test_init_called_when_not_initialized():
    with mock.patch("pygame.display.get_init", return_value=False), mock.patch(
        "pygame.display.init"
    ) as init, mock.patch("pygame.display.get_num_displays", return_value=0), mock.patch(
        "pygame.display.get_desktop_sizes", return_value=[]
    ):
        assert get_all_monitors() == []
    assert init.call_count == 1