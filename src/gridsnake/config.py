from __future__ import annotations

from collections import namedtuple

from .grid import Grid

WIDTH, HEIGHT = 400, 400
TILE_SIZE = 20
INIT_LENGTH = 5
TICK_MS = 100

BLACK = (0, 0, 0)
HEAD = (0, 255, 0)
BODY = (0, 100, 0)
FOOD = (255, 99, 71)
TEXT = (255, 0, 0)
SCORE_TEXT = (200, 200, 200)


class Settings(namedtuple("Settings", ["width", "height", "tile", "length", "tick_ms", "seed"])):
    """Session configuration, fixed once the window is open."""

    __slots__ = ()

    def grid(self) -> Grid:
        return Grid.from_pixels(self.width, self.height, self.tile)

    def validate(self) -> "Settings":
        grid = self.grid()
        if self.length < 1:
            raise ValueError(f"initial length must be positive, got {self.length}")
        if self.length > grid.width:
            raise ValueError(f"initial length {self.length} does not fit a {grid.width}-cell row")
        if self.tick_ms < 1:
            raise ValueError(f"tick period must be positive, got {self.tick_ms}")
        return self


DEFAULTS = Settings(WIDTH, HEIGHT, TILE_SIZE, INIT_LENGTH, TICK_MS, None)
