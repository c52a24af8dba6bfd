"""Event handling of the windowed front end, run against the dummy video driver."""

import pygame
import pytest

from flappy_rocket.__main__ import main, parse_args
from flappy_rocket.app import SPAWN_OBSTACLE_EVENT, SPAWN_PICKUP_EVENT, FlappyRocketApp
from flappy_rocket.world import GameOverReason, Phase


@pytest.fixture
def app(config):
    pygame.init()
    app = FlappyRocketApp(config, seed=1)
    app.screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    app.running = True
    yield app
    app.disarm_timers()
    pygame.quit()


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_space_starts_run_and_arms_timers(app):
    app.handle_event(key(pygame.K_SPACE))
    app.sync_timers()

    assert app.world.running
    assert app.timers_armed


def test_spawn_events_only_count_while_running(app):
    app.handle_event(pygame.event.Event(SPAWN_OBSTACLE_EVENT))
    app.handle_event(pygame.event.Event(SPAWN_PICKUP_EVENT))
    assert app.world.obstacles == []
    assert app.world.pickups == []

    app.handle_event(key(pygame.K_UP))
    app.handle_event(pygame.event.Event(SPAWN_OBSTACLE_EVENT))
    app.handle_event(pygame.event.Event(SPAWN_PICKUP_EVENT))
    assert len(app.world.obstacles) == 1
    assert len(app.world.pickups) == 1


def test_game_over_disarms_and_restart_resets(app):
    app.handle_event(key(pygame.K_SPACE))
    app.sync_timers()
    app.world.end(GameOverReason.OBSTACLE)
    app.sync_timers()
    assert not app.timers_armed

    app.handle_event(key(pygame.K_r))

    assert app.world.phase is Phase.NOT_STARTED


def test_tap_thrusts_or_restarts(app, config):
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert app.world.running
    assert app.world.rocket.dy == config.THRUST

    app.world.end(GameOverReason.FUEL)
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert app.world.phase is Phase.NOT_STARTED


def test_quit_and_escape_stop_the_loop(app):
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert not app.running

    app.running = True
    app.handle_event(key(pygame.K_ESCAPE))
    assert not app.running


def test_frame_processes_queued_input(app):
    pygame.event.clear()
    pygame.event.post(key(pygame.K_SPACE))

    app.frame()

    assert app.world.running
    assert app.world.rocket.dy == pytest.approx(-9.35)


def test_parse_args_defaults():
    args = parse_args([])

    assert args.seed is None
    assert args.fps == 60
    assert not args.no_wait
    assert args.assets is None


def test_main_rejects_bad_config(capsys):
    assert main(["--fps", "0"]) == 2
    assert "FPS must be positive" in capsys.readouterr().err
