"""Uniform periodic grid used to reject candidates that crowd accepted points."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from .geometry import toroidal_distance
from .types import GridCollisionError, Point

logger = logging.getLogger(__name__)

EMPTY = -1


def _ring_offsets(center: int, reach: int, size: int) -> List[int]:
    if 2 * reach + 1 >= size:
        return list(range(size))
    return [(center + offset) % size for offset in range(-reach, reach + 1)]


class SpatialGrid:
    """Cell lattice covering a ``width`` x ``height`` torus.

    Each cell is at most ``min_distance / sqrt(2)`` on a side, so it can hold
    no more than one accepted point. Cell extents are stretched down slightly
    so that a whole number of cells tiles each axis, which keeps the lattice
    itself periodic.
    """

    def __init__(self, width: float, height: float, min_distance: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self.min_distance = float(min_distance)

        max_side = self.min_distance / math.sqrt(2.0)
        self.columns = max(1, math.ceil(self.width / max_side))
        self.rows = max(1, math.ceil(self.height / max_side))
        self.cell_width = self.width / self.columns
        self.cell_height = self.height / self.rows
        self.reach_x = math.ceil(self.min_distance / self.cell_width)
        self.reach_y = math.ceil(self.min_distance / self.cell_height)

        self.cells = np.full((self.rows, self.columns), EMPTY, dtype=np.int64)
        logger.debug(
            "Created %dx%d grid (cell %.6g x %.6g, reach %d/%d)",
            self.columns,
            self.rows,
            self.cell_width,
            self.cell_height,
            self.reach_x,
            self.reach_y,
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return self.columns, self.rows

    def cell_of(self, point: Iterable[float]) -> Tuple[int, int]:
        x, y = point
        cx = int(math.floor(x / self.cell_width)) % self.columns
        cy = int(math.floor(y / self.cell_height)) % self.rows
        return cx, cy

    def insert(self, point: Iterable[float], index: int) -> None:
        cx, cy = self.cell_of(point)
        occupant = int(self.cells[cy, cx])
        if occupant != EMPTY:
            raise GridCollisionError(
                f"cell ({cx}, {cy}) already holds point {occupant}, cannot insert point {index}"
            )
        self.cells[cy, cx] = index

    def neighbors(self, candidate: Iterable[float]) -> Iterator[int]:
        """Yield indices of accepted points in the block of cells around ``candidate``.

        The block wraps across the domain edges and never visits a cell twice.
        """

        cx, cy = self.cell_of(candidate)
        columns = _ring_offsets(cx, self.reach_x, self.columns)
        for row in _ring_offsets(cy, self.reach_y, self.rows):
            cell_row = self.cells[row]
            for column in columns:
                index = int(cell_row[column])
                if index != EMPTY:
                    yield index

    def is_far_enough(self, candidate: Iterable[float], points: Sequence[Point]) -> bool:
        """Return ``True`` when no accepted point lies closer than ``min_distance``."""

        for index in self.neighbors(candidate):
            if toroidal_distance(candidate, points[index], self.width, self.height) < self.min_distance:
                return False
        return True

    def __len__(self) -> int:
        return int(np.count_nonzero(self.cells != EMPTY))


__all__ = ["EMPTY", "SpatialGrid"]
