from .engine import Engine
from .grid import Grid
from .state import Cell, Direction, EndReason, GameStatus, Snake, Snapshot

__all__ = [
    "Cell",
    "Direction",
    "EndReason",
    "Engine",
    "GameStatus",
    "Grid",
    "Snake",
    "Snapshot",
]
