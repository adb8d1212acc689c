from __future__ import annotations

import logging
import random
import threading

from . import config, food as food_spawner
from .grid import Grid
from .logic import check_collisions, is_contiguous, move_snake, next_head
from .state import Cell, Direction, EndReason, GameStatus, Snake, Snapshot

log = logging.getLogger(__name__)


class Engine:
    """Owns the snake, the food and the game status.

    ``tick``, ``on_direction`` and ``reset`` are the only mutation paths and all
    of them hold ``_lock``, so input may be delivered from another thread than
    the one driving the timer.
    """

    def __init__(
        self,
        grid: Grid,
        initial_length: int = config.INIT_LENGTH,
        rng=None,
        snake=None,
        direction: Direction = Direction.RIGHT,
        food: tuple[int, int] | None = None,
    ):
        if snake is None and not 1 <= initial_length <= grid.width:
            raise ValueError(f"initial length {initial_length} does not fit a {grid.width}-cell row")
        self.grid = grid
        self.initial_length = initial_length
        self.rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()
        self._start = (snake, direction, food)
        self._restart()

    def _restart(self) -> None:
        cells, direction, food = self._start
        if cells is None:
            self._snake = Snake.initial(self.initial_length)
        else:
            self._snake = Snake(cells)
            _validate_snake(self._snake, self.grid)
        self._heading = direction
        self._requested: Direction | None = None
        self._status = GameStatus.RUNNING
        self._reason: EndReason | None = None
        self._score = 0
        self._ticks = 0
        if food is None:
            self._food = food_spawner.spawn(self._snake, self.grid, self.rng)
        else:
            self._food = Cell(*food)
            if not self.grid.in_bounds(self._food) or self._snake.occupies(self._food):
                raise ValueError(f"food {self._food} must be a free in-bounds cell")
        if self._food is None:
            self._end(EndReason.BOARD_FULL)

    def reset(self) -> Snapshot:
        with self._lock:
            self._restart()
            log.debug("game reset")
            return self._snapshot()

    def on_direction(self, requested: Direction) -> bool:
        """Queue ``requested`` for the next tick; the latest valid request wins.

        Reversals are judged against the heading the snake last moved in, not
        against an earlier request still waiting in the slot.
        """
        with self._lock:
            if self._status is GameStatus.GAME_OVER:
                return False
            if requested.is_opposite(self._heading):
                return False
            self._requested = requested
            return True

    def tick(self) -> Snapshot:
        with self._lock:
            if self._status is GameStatus.GAME_OVER:
                return self._snapshot()

            requested, self._requested = self._requested, None
            if requested is not None:
                self._heading = requested

            new_head = next_head(self._snake, self._heading)
            self._ticks += 1
            if move_snake(self._snake, new_head, self._food):
                self._score += 1
                self._food = food_spawner.spawn(self._snake, self.grid, self.rng)

            reason = check_collisions(self._snake, self.grid)
            if reason is None and self._food is None:
                reason = EndReason.BOARD_FULL
            if reason is not None:
                self._end(reason)
            return self._snapshot()

    def _end(self, reason: EndReason) -> None:
        self._status = GameStatus.GAME_OVER
        self._reason = reason
        self._requested = None
        log.info("game over (%s): score=%d ticks=%d", reason.value, self._score, self._ticks)

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self._snake.cells,
            food=self._food,
            direction=self._heading,
            status=self._status,
            reason=self._reason,
            score=self._score,
            ticks=self._ticks,
            width=self.grid.width,
            height=self.grid.height,
        )

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def heading(self) -> Direction:
        return self._heading

    @property
    def food(self) -> Cell | None:
        return self._food

    @property
    def snake(self) -> tuple[Cell, ...]:
        return self._snake.cells


def _validate_snake(snake: Snake, grid: Grid) -> None:
    cells = snake.cells
    if not all(grid.in_bounds(c) for c in cells):
        raise ValueError(f"snake leaves the {grid.width}x{grid.height} grid: {list(cells)}")
    if len(set(cells)) != len(cells):
        raise ValueError(f"snake overlaps itself: {list(cells)}")
    if not is_contiguous(cells):
        raise ValueError(f"snake cells are not adjacent: {list(cells)}")
