from __future__ import annotations

from collections import deque, namedtuple
from enum import Enum
from itertools import islice

Cell = namedtuple("Cell", ["x", "y"])


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> Cell:
    return Cell(a[0] + b[0], a[1] + b[1])


class Direction(Enum):
    # (dx, dy) in screen space: y grows downward.
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: "Direction") -> bool:
        # Opposite headings sum to the zero vector.
        return add_vectors(self.value, other.value) == (0, 0)


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class EndReason(Enum):
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


Snapshot = namedtuple(
    "Snapshot",
    ["snake", "food", "direction", "status", "reason", "score", "ticks", "width", "height"],
)
# snake: tuple[Cell, ...], head is first element.
# food: Cell, or None once the board is full.
# reason: EndReason, or None while running.


class Snake:
    def __init__(self, cells):
        self.body: deque[Cell] = deque(Cell(*c) for c in cells)
        assert self.body, "snake must have at least one cell"

    @classmethod
    def initial(cls, length: int) -> "Snake":
        """Horizontal snake along row 0, head at (length - 1, 0) facing right."""
        return cls(Cell(x, 0) for x in range(length - 1, -1, -1))

    def head(self) -> Cell:
        assert self.body, "snake is empty"
        return self.body[0]

    def push_head(self, cell: tuple[int, int]) -> None:
        self.body.appendleft(Cell(*cell))

    def pop_tail(self) -> Cell:
        assert len(self.body) > 1, "cannot pop the last snake cell"
        return self.body.pop()

    def occupies(self, cell: tuple[int, int], include_head: bool = True) -> bool:
        if include_head:
            return cell in self.body
        return cell in islice(self.body, 1, None)

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __repr__(self) -> str:
        return f"Snake({list(self.body)!r})"
