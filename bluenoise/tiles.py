"""Bake blue-noise point sets into 8-bit threshold tiles and dither against them.

A tile is a ``size x size`` ``uint8`` array indexed ``tile[y % size, x % size]``.
Frames of an animation each get their own tile so that the dither pattern
shimmers instead of sitting still.
"""

from __future__ import annotations

import logging
import numbers
from typing import Optional

import numpy as np

from .config import SamplerOptions
from .logging_utils import apply_debug_logging
from .sampler import WrappingBlueNoise
from .types import ConfigurationError

logger = logging.getLogger(__name__)


def _positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def _check_tile(tile: np.ndarray) -> np.ndarray:
    tile = np.asarray(tile)
    if tile.ndim != 2 or tile.shape[0] != tile.shape[1] or tile.shape[0] == 0:
        raise ConfigurationError(f"threshold tile must be a non-empty square array, got shape {tile.shape}")
    return tile


def threshold_tile(
    size: int,
    min_distance: float,
    rng: np.random.Generator,
    samples: Optional[int] = None,
) -> np.ndarray:
    """Return a ``size x size`` threshold tile built from one wrapped point set.

    Pixels are ranked by the toroidal distance from their centre to the
    nearest sample (ties broken by the sample's emission index, then raster
    order) and rank ``i`` becomes threshold ``i * 256 // size**2``. Pixels on
    top of samples therefore light up first as luma rises.
    """

    size = _positive_int("size", size)
    noise = WrappingBlueNoise(SamplerOptions(size, size, min_distance, samples), rng)
    points = np.array([point.as_tuple() for point in noise], dtype=float)

    centers = np.arange(size, dtype=float) + 0.5
    cx, cy = np.meshgrid(centers, centers)
    dx = cx.reshape(-1, 1) - points[:, 0]
    dy = cy.reshape(-1, 1) - points[:, 1]
    dx -= size * np.round(dx / size)
    dy -= size * np.round(dy / size)
    distances = np.hypot(dx, dy)

    nearest = np.argmin(distances, axis=1)
    nearest_distance = distances[np.arange(distances.shape[0]), nearest]
    raster = np.arange(size * size)
    order = np.lexsort((raster, nearest, nearest_distance))

    ranks = np.empty(size * size, dtype=np.int64)
    ranks[order] = raster
    logger.debug("Threshold tile %dx%d built from %d points", size, size, len(points))
    return (ranks * 256 // (size * size)).astype(np.uint8).reshape(size, size)


def build_tile_set(
    frames: int,
    size: int,
    min_distance: float,
    rng: np.random.Generator,
    samples: Optional[int] = None,
) -> np.ndarray:
    """Return ``frames`` independent tiles stacked into a ``(frames, size, size)`` array."""

    frames = _positive_int("frames", frames)
    return np.stack([threshold_tile(size, min_distance, rng, samples) for _ in range(frames)])


def dither(luma: np.ndarray, tile: np.ndarray) -> np.ndarray:
    """Threshold a grayscale image against a repeating tile.

    A pixel is on when its luma is non-zero and not below the tile value at
    ``(x % size, y % size)``.
    """

    luma = np.asarray(luma)
    if luma.ndim != 2:
        raise ConfigurationError(f"luma must be a 2D array, got shape {luma.shape}")
    tile = _check_tile(tile)
    size = tile.shape[0]
    height, width = luma.shape
    rows = np.arange(height)[:, None] % size
    columns = np.arange(width)[None, :] % size
    thresholds = tile[rows, columns]
    return (luma != 0) & (luma >= thresholds)


class FrameDitherer:
    """Cycle through a tile set, one tile per displayed frame."""

    def __init__(self, tiles: np.ndarray, frame: int = 0) -> None:
        tiles = np.asarray(tiles)
        if tiles.ndim != 3 or tiles.shape[0] == 0:
            raise ConfigurationError(f"tile set must have shape (frames, size, size), got {tiles.shape}")
        for tile in tiles:
            _check_tile(tile)
        self.tiles = tiles
        self.frame = frame % len(tiles)

    @property
    def tile(self) -> np.ndarray:
        return self.tiles[self.frame]

    def render(self, luma: np.ndarray) -> np.ndarray:
        return dither(luma, self.tile)

    def advance(self) -> int:
        self.frame = (self.frame + 1) % len(self.tiles)
        return self.frame


apply_debug_logging(globals(), logger=logger, skip={"FrameDitherer.render"})
