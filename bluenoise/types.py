from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

Coord = Tuple[float, float]


class ConfigurationError(ValueError):
    """Raised when a sampler or tile configuration cannot describe a valid domain."""


class SamplerStateError(RuntimeError):
    """Raised when a sampler is reconfigured after it started emitting points."""


class GridCollisionError(RuntimeError):
    """Raised when two accepted points land in the same grid cell."""


@dataclass(frozen=True)
class Point:
    """Accepted sample inside the wrapped domain."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Coord:
        return (self.x, self.y)


__all__ = [
    "Coord",
    "ConfigurationError",
    "SamplerStateError",
    "GridCollisionError",
    "Point",
]
