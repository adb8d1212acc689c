from __future__ import annotations

from enum import Enum

import pygame

from .engine import Engine
from .state import Direction, GameStatus

KEY_MAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)
RESTART_KEYS = (pygame.K_r, pygame.K_SPACE)


class Command(Enum):
    NONE = "none"
    QUIT = "quit"
    RESTART = "restart"


def handle_events(engine: Engine, events) -> Command:
    """Feeds key presses to the engine and reports what the host loop should do."""
    command = Command.NONE
    for event in events:
        if event.type == pygame.QUIT:
            return Command.QUIT
        if event.type != pygame.KEYDOWN:
            continue
        if event.key in QUIT_KEYS:
            return Command.QUIT
        if event.key in RESTART_KEYS and engine.status is GameStatus.GAME_OVER:
            command = Command.RESTART
            continue
        direction = KEY_MAP.get(event.key)
        if direction is not None:
            engine.on_direction(direction)
    return command
