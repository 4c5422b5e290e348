from unittest import mock

import pygame
import pytest

from pokewalk.app import main, run
from pokewalk.game import Game
from pokewalk.gamemap import parse_map

CORRIDOR = ["11111\n", "1PCE1\n", "11111\n"]


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def key_event(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_main_without_map_reports_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Error\nInvalid arguments.\n"


def test_main_with_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 0
    assert capsys.readouterr().out == "Error\nInvalid arguments.\n"


def test_main_rejects_wrong_extension(capsys, tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("".join(CORRIDOR))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error\nInvalid map\n"


def test_main_rejects_missing_file(capsys):
    assert main(["missing.ber"]) == 0
    assert capsys.readouterr().out == "Error\nInvalid map\n"


def test_main_rejects_open_map(capsys, tmp_path):
    path = tmp_path / "open.ber"
    path.write_text("11111\n1PCE0\n11111\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error\nInvalid map\n"


def test_run_escape_quits(headless):
    game = Game(parse_map(CORRIDOR))
    with mock.patch("pygame.event.get", side_effect=[[key_event(pygame.K_ESCAPE)]]):
        assert run(game) is False
    assert game.running is False
    assert game.moves == 0


def test_run_window_close_quits(headless):
    game = Game(parse_map(CORRIDOR))
    with mock.patch("pygame.event.get", side_effect=[[pygame.event.Event(pygame.QUIT)]]):
        assert run(game) is False
    assert game.running is False


def test_run_plays_to_a_win(headless, capsys):
    game = Game(parse_map(CORRIDOR))
    events = [[key_event(pygame.K_RIGHT)], [key_event(pygame.K_d)]]
    with mock.patch("pygame.event.get", side_effect=events):
        assert run(game) is True
    assert game.won is True
    assert game.collectibles == 0
    assert capsys.readouterr().out == "Steps: 1\n"


def test_main_runs_valid_map(headless, tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("".join(CORRIDOR))
    with mock.patch("pygame.event.get", side_effect=[[key_event(pygame.K_ESCAPE)]]):
        assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""