from __future__ import annotations

from .grid import Grid
from .state import Cell, Direction, EndReason, Snake, add_vectors


def next_head(snake: Snake, direction: Direction) -> Cell:
    return add_vectors(snake.head(), direction.value)


def move_snake(snake: Snake, new_head: Cell, food: Cell | None) -> bool:
    """Advances the snake onto new_head. Returns True if it ate (the tail stays)."""
    snake.push_head(new_head)
    if new_head == food:
        return True
    snake.pop_tail()
    return False


def check_collisions(snake: Snake, grid: Grid) -> EndReason | None:
    head = snake.head()
    if not grid.in_bounds(head):
        return EndReason.WALL
    if snake.occupies(head, include_head=False):
        return EndReason.SELF
    return None


def is_contiguous(cells) -> bool:
    cells = list(cells)
    return all(abs(ax - bx) + abs(ay - by) == 1 for (ax, ay), (bx, by) in zip(cells, cells[1:]))
