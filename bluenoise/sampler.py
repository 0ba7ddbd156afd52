"""Tileable Poisson-disc sampling on a wrapped rectangle.

The sampler follows Bridson's active-list algorithm, with every distance and
neighbour query done on the torus so that the resulting point set repeats
edge-to-edge without a seam. All randomness comes from the injected
``numpy.random.Generator``; identical configuration and seed reproduce the
same sequence.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Iterator, List, Optional

import numpy as np

from .config import SamplerOptions, check_samples
from .geometry import wrap
from .grid import SpatialGrid
from .types import Point, SamplerStateError

logger = logging.getLogger(__name__)

SEEDING = "seeding"
SAMPLING = "sampling"
EXHAUSTED = "exhausted"

TAU = 2.0 * math.pi


class SamplerCore:
    """Mutable sampling state: accepted points, active list, grid and generator.

    Draw order per step is fixed: the seed consumes two ``rng.random()``
    values (x, then y); each candidate consumes ``rng.uniform(0, 2*pi)``
    followed by ``rng.uniform(r, 2*r)``. The active point advanced at each
    step is always the most recently added one.
    """

    def __init__(self, options: SamplerOptions, rng: np.random.Generator) -> None:
        self.options = options
        self.rng = rng
        self.grid = SpatialGrid(options.width, options.height, options.min_distance)
        self.points: List[Point] = []
        self.active: List[int] = []
        self._exhausted = False

    @property
    def state(self) -> str:
        if self._exhausted:
            return EXHAUSTED
        if not self.points:
            return SEEDING
        return SAMPLING

    def _accept(self, point: Point) -> Point:
        index = len(self.points)
        self.grid.insert(point, index)
        self.points.append(point)
        self.active.append(index)
        return point

    def _seed(self) -> Point:
        width, height = self.options.width, self.options.height
        x = wrap(self.rng.random() * width, width)
        y = wrap(self.rng.random() * height, height)
        logger.debug("Seeding sampler at (%.6g, %.6g)", x, y)
        return self._accept(Point(x, y))

    def _candidate(self, origin: Point) -> Point:
        radius = self.options.min_distance
        angle = self.rng.uniform(0.0, TAU)
        distance = self.rng.uniform(radius, 2.0 * radius)
        x = wrap(origin.x + distance * math.cos(angle), self.options.width)
        y = wrap(origin.y + distance * math.sin(angle), self.options.height)
        return Point(x, y)

    def step(self) -> Optional[Point]:
        """Advance the newest active point by one round of up to ``samples`` candidates.

        Returns the accepted point, or ``None`` when every candidate was
        rejected and the active point has been retired.
        """

        origin = self.points[self.active[-1]]
        for _ in range(self.options.samples):
            candidate = self._candidate(origin)
            if self.grid.is_far_enough(candidate, self.points):
                return self._accept(candidate)
        retired = self.active.pop()
        logger.debug("Point %d exhausted, %d active remain", retired, len(self.active))
        return None

    def pull(self) -> Optional[Point]:
        """Return the next accepted point, or ``None`` once the domain is saturated."""

        if self._exhausted:
            return None
        if not self.points:
            return self._seed()
        while self.active:
            point = self.step()
            if point is not None:
                return point
        self._exhausted = True
        logger.debug("Sampler exhausted after %d points", len(self.points))
        return None


class WrappingBlueNoise:
    """Lazy, non-restartable iterator over blue-noise points on a torus."""

    def __init__(self, options: SamplerOptions, rng: np.random.Generator) -> None:
        self.options = replace(options)
        self.rng = rng
        self._core: Optional[SamplerCore] = None

    @classmethod
    def from_rng(
        cls,
        width: float,
        height: float,
        min_distance: float,
        rng: np.random.Generator,
    ) -> "WrappingBlueNoise":
        return cls(SamplerOptions(width, height, min_distance), rng)

    @classmethod
    def from_seed(
        cls,
        width: float,
        height: float,
        min_distance: float,
        seed: Optional[int] = None,
    ) -> "WrappingBlueNoise":
        return cls.from_rng(width, height, min_distance, np.random.default_rng(seed))

    def with_samples(self, samples: int) -> "WrappingBlueNoise":
        """Set the number of candidates tried per active point before it is retired."""

        if self._core is not None:
            raise SamplerStateError("with_samples() must be called before the first point is drawn")
        self.options.samples = check_samples(samples)
        return self

    @property
    def core(self) -> SamplerCore:
        if self._core is None:
            self._core = SamplerCore(self.options, self.rng)
        return self._core

    @property
    def points(self) -> List[Point]:
        """Points emitted so far, in emission order."""

        if self._core is None:
            return []
        return list(self._core.points)

    @property
    def exhausted(self) -> bool:
        return self._core is not None and self._core.state == EXHAUSTED

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        point = self.core.pull()
        if point is None:
            raise StopIteration
        return point

    def take(self, count: int) -> List[Point]:
        """Return up to ``count`` further points; fewer when the domain fills up."""

        if count < 0:
            raise ValueError(f"count must be non-negative, got {count!r}")
        taken: List[Point] = []
        while len(taken) < count:
            point = self.core.pull()
            if point is None:
                break
            taken.append(point)
        return taken


__all__ = [
    "SEEDING",
    "SAMPLING",
    "EXHAUSTED",
    "SamplerCore",
    "WrappingBlueNoise",
]
