"""Periodic geometry helpers for a rectangle whose opposite edges are identified."""

from __future__ import annotations

import math
from typing import Iterable


def wrap(coord: float, extent: float) -> float:
    """Fold ``coord`` into ``[0, extent)``; negative values come in from the far edge."""

    folded = math.fmod(coord, extent)
    if folded < 0.0:
        folded += extent
    # -1e-18 + extent rounds to extent
    if folded >= extent:
        return 0.0
    return folded


def toroidal_delta(a: float, b: float, extent: float) -> float:
    """Return the signed shortest displacement from ``a`` to ``b`` on a periodic axis.

    The result lies in ``[-extent / 2, extent / 2]`` for any finite inputs.
    """

    return math.remainder(b - a, extent)


def toroidal_distance(
    p: Iterable[float],
    q: Iterable[float],
    width: float,
    height: float,
) -> float:
    px, py = p
    qx, qy = q
    return math.hypot(toroidal_delta(px, qx, width), toroidal_delta(py, qy, height))


__all__ = ["wrap", "toroidal_delta", "toroidal_distance"]
