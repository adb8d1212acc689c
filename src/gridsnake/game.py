from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from . import config
from .controls import Command, handle_events
from .engine import Engine
from .render import draw_state
from .state import GameStatus, Snapshot

TICK_EVENT = pygame.USEREVENT + 1

log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> tuple[config.Settings, bool]:
    d = config.DEFAULTS
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake, arrow keys or WASD to steer.")
    parser.add_argument("--width", type=int, default=d.width, help="Board width in pixels.")
    parser.add_argument("--height", type=int, default=d.height, help="Board height in pixels.")
    parser.add_argument("--tile-size", type=int, default=d.tile, help="Cell size in pixels.")
    parser.add_argument("--length", type=int, default=d.length, help="Initial snake length in cells.")
    parser.add_argument("--tick-ms", type=int, default=d.tick_ms, help="Milliseconds between moves.")
    parser.add_argument("--seed", type=int, default=d.seed, help="Seed for food placement.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine events to stderr.")
    ns = parser.parse_args(argv)
    settings = config.Settings(ns.width, ns.height, ns.tile_size, ns.length, ns.tick_ms, ns.seed)
    return settings, ns.verbose


def step(engine: Engine, events) -> tuple[Command, Snapshot | None]:
    """Handles one batch of events: input first, then at most one tick.

    Timer events that piled up while the loop was busy collapse into a single
    tick, so ticks never overlap or burst.
    """
    command = handle_events(engine, events)
    if command is not Command.NONE:
        return command, None
    if any(e.type == TICK_EVENT for e in events):
        return command, engine.tick()
    return command, None


def main(argv: list[str] | None = None) -> int:
    settings, verbose = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings.validate()
        grid = settings.grid()
        engine = Engine(grid, settings.length, rng=random.Random(settings.seed))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    pygame.init()
    pygame.display.set_caption("Snake Game")
    screen = pygame.display.set_mode((grid.width * settings.tile, grid.height * settings.tile))
    pygame.time.set_timer(TICK_EVENT, settings.tick_ms)
    log.debug("grid %dx%d, tick %d ms", grid.width, grid.height, settings.tick_ms)

    draw_state(screen, engine.snapshot(), settings.tile)
    pygame.display.flip()

    while True:
        events = [pygame.event.wait(), *pygame.event.get()]
        command, snap = step(engine, events)
        if command is Command.QUIT:
            break
        if command is Command.RESTART:
            engine.reset()
            pygame.time.set_timer(TICK_EVENT, settings.tick_ms)
        elif snap is not None and snap.status is GameStatus.GAME_OVER:
            pygame.time.set_timer(TICK_EVENT, 0)

        draw_state(screen, engine.snapshot(), settings.tile)
        pygame.display.flip()

    pygame.quit()
    print("Game Over! Score:", engine.snapshot().score)
    return 0
