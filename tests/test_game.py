import pygame
import pytest

from gridsnake import config
from gridsnake.controls import Command
from gridsnake.engine import Engine
from gridsnake.game import TICK_EVENT, main, parse_args, step
from gridsnake.grid import Grid


@pytest.fixture
def engine():
    return Engine(Grid(20, 20), snake=[(5, 5), (4, 5), (3, 5)], food=(15, 15))


def tick_event():
    return pygame.event.Event(TICK_EVENT)


def test_late_timer_events_coalesce_into_one_tick(engine):
    command, snap = step(engine, [tick_event(), tick_event(), tick_event()])
    assert command is Command.NONE
    assert snap.ticks == 1
    assert snap.snake[0] == (6, 5)


def test_no_timer_event_means_no_tick(engine):
    command, snap = step(engine, [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)])
    assert snap is None
    assert engine.snapshot().ticks == 0


def test_input_in_batch_applies_to_its_tick(engine):
    _, snap = step(engine, [tick_event(), pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN)])
    assert snap.snake[0] == (5, 6)


def test_quit_skips_the_tick(engine):
    command, snap = step(engine, [pygame.event.Event(pygame.QUIT), tick_event()])
    assert command is Command.QUIT
    assert snap is None


def test_parse_args_defaults():
    settings, verbose = parse_args([])
    assert settings == config.DEFAULTS
    assert verbose is False
    assert settings.grid() == Grid(20, 20)


def test_parse_args_overrides():
    settings, verbose = parse_args(["--width", "200", "--tile-size", "10", "--tick-ms", "50", "--seed", "3", "-v"])
    assert settings.grid() == Grid(20, 40)
    assert (settings.tick_ms, settings.seed) == (50, 3)
    assert verbose is True


@pytest.mark.parametrize(
    "argv",
    [["--length", "0"], ["--length", "30"], ["--tick-ms", "0"], ["--tile-size", "500"]],
)
def test_bad_settings_exit_with_error(argv, capsys):
    assert main(argv) == 2
    assert capsys.readouterr().err.startswith("error:")
