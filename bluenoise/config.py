"""Sampler configuration and library-wide defaults."""

from __future__ import annotations

import copy
import math
import numbers
from dataclasses import dataclass
from typing import Optional

from .types import ConfigurationError

DEFAULT_SAMPLES = 30


@dataclass
class SamplerDefaults:
    """Values used when a sampler is built without an explicit setting."""

    samples: int = DEFAULT_SAMPLES


_SAMPLER_DEFAULTS = SamplerDefaults()


def get_sampler_defaults() -> SamplerDefaults:
    return copy.deepcopy(_SAMPLER_DEFAULTS)


def set_sampler_defaults(defaults: SamplerDefaults) -> None:
    global _SAMPLER_DEFAULTS
    _SAMPLER_DEFAULTS = copy.deepcopy(defaults)


def _positive_extent(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a real number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise ConfigurationError(f"{name} must be finite, got {result!r}")
    if result <= 0.0:
        raise ConfigurationError(f"{name} must be positive, got {result!r}")
    return result


def check_samples(value: object) -> int:
    """Return ``value`` as a candidate budget or raise :class:`ConfigurationError`."""

    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"samples must be an integer, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"samples must be non-negative, got {value!r}")
    return int(value)


@dataclass
class SamplerOptions:
    """Domain size, minimum separation and candidate budget of one sampler."""

    width: float
    height: float
    min_distance: float
    samples: Optional[int] = None

    def __post_init__(self) -> None:
        self.width = _positive_extent("width", self.width)
        self.height = _positive_extent("height", self.height)
        self.min_distance = _positive_extent("min_distance", self.min_distance)
        if self.samples is None:
            self.samples = _SAMPLER_DEFAULTS.samples
        self.samples = check_samples(self.samples)

    @property
    def cell_size(self) -> float:
        """Largest cell side that can hold at most one accepted point."""

        return self.min_distance / math.sqrt(2.0)


__all__ = [
    "DEFAULT_SAMPLES",
    "SamplerDefaults",
    "SamplerOptions",
    "check_samples",
    "get_sampler_defaults",
    "set_sampler_defaults",
]
