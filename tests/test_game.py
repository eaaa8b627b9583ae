"""Headless smoke tests for the pygame shell (SDL dummy drivers)."""

import pygame
import pytest

from ball_blast.config import Config, ProgressStore
from ball_blast.game import Game
from ball_blast.session import GameState


@pytest.fixture
def game(tmp_path):
    g = Game(config=Config(str(tmp_path / "settings.json")),
             store=ProgressStore(str(tmp_path / "save.json")))
    yield g
    pygame.quit()


def press(game, key):
    game._handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_daily_popup_then_play(game):
    game._update(1 / 60)
    assert game.daily_popup == (40, "Day 1 Streak!")
    game._draw(game.screen)

    # The first Enter collects the reward, the second starts the game
    press(game, pygame.K_RETURN)
    assert game.daily_popup is None
    assert game.session.state == GameState.START
    press(game, pygame.K_RETURN)
    assert game.session.state == GameState.PLAYING

    game._handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(100, 300),
                                          rel=(0, 0), buttons=(0, 0, 0)))
    assert game.session.simulation.cannon.target_x == 100

    for _ in range(30):
        game._update(1 / 60)
        game._draw(game.screen)
    assert game.session.simulation.balls


def test_shop_keys(game):
    game._update(1 / 60)
    press(game, pygame.K_RETURN)

    press(game, pygame.K_s)
    assert game.session.shop_open
    game._draw(game.screen)

    # 40 coins from the daily reward do not cover any first tier
    press(game, pygame.K_1)
    press(game, pygame.K_4)
    game._update(1 / 60)
    assert [n[0] for n in game.notices] == ["Not enough coins!", "Not enough coins!"]
    game._draw(game.screen)

    press(game, pygame.K_ESCAPE)
    assert not game.session.shop_open


def test_game_over_screen_and_restart(game):
    game._update(1 / 60)
    press(game, pygame.K_RETURN)
    press(game, pygame.K_RETURN)

    sim = game.session.simulation
    sim.blocks[0].y = sim.ground_y - sim.blocks[0].height
    game._update(1 / 60)
    assert game.session.state == GameState.GAME_OVER
    game._draw(game.screen)

    press(game, pygame.K_r)
    assert game.session.state == GameState.PLAYING


def test_fullscreen_toggle_is_saved(game, tmp_path):
    press(game, pygame.K_F11)
    assert game.config.fullscreen
    assert Config(str(tmp_path / "settings.json")).fullscreen
    game._draw(game.screen)

    press(game, pygame.K_F11)
    assert not game.config.fullscreen
    assert not Config(str(tmp_path / "settings.json")).fullscreen


def test_window_resize(game):
    game._handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=900, h=600, size=(900, 600)))
    w, h = game.screen.get_size()
    assert game.session.simulation.width == max(200, w)
    game._draw(game.screen)
