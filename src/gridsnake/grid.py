from __future__ import annotations

from collections import namedtuple

from .state import Cell


class Grid(namedtuple("Grid", ["width", "height"])):
    """Board size in cells. Cells run from (0, 0) to (width - 1, height - 1)."""

    __slots__ = ()

    @classmethod
    def from_pixels(cls, width_px: int, height_px: int, tile: int) -> "Grid":
        if tile < 1:
            raise ValueError(f"tile size must be positive, got {tile}")
        grid = cls(width_px // tile, height_px // tile)
        if grid.width < 1 or grid.height < 1:
            raise ValueError(f"{width_px}x{height_px} px holds no {tile}px tiles")
        return grid

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self):
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(x, y)
