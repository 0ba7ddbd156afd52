from .types import ConfigurationError, GridCollisionError, Point, SamplerStateError
from .geometry import toroidal_delta, toroidal_distance, wrap
from .grid import SpatialGrid
from .config import (
    DEFAULT_SAMPLES,
    SamplerDefaults,
    SamplerOptions,
    get_sampler_defaults,
    set_sampler_defaults,
)
from .sampler import EXHAUSTED, SAMPLING, SEEDING, SamplerCore, WrappingBlueNoise
from .tiles import FrameDitherer, build_tile_set, dither, threshold_tile

__all__ = [
    'ConfigurationError',
    'GridCollisionError',
    'Point',
    'SamplerStateError',
    'toroidal_delta',
    'toroidal_distance',
    'wrap',
    'SpatialGrid',
    'DEFAULT_SAMPLES',
    'SamplerDefaults',
    'SamplerOptions',
    'get_sampler_defaults',
    'set_sampler_defaults',
    'EXHAUSTED',
    'SAMPLING',
    'SEEDING',
    'SamplerCore',
    'WrappingBlueNoise',
    'FrameDitherer',
    'build_tile_set',
    'dither',
    'threshold_tile',
]
