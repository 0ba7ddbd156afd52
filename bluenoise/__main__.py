import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from bluenoise import ConfigurationError, WrappingBlueNoise, get_sampler_defaults

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print tileable blue-noise points")
    parser.add_argument("--width", type=float, default=16.0, help="Domain width (default: 16)")
    parser.add_argument("--height", type=float, default=16.0, help="Domain height (default: 16)")
    parser.add_argument(
        "--min-distance",
        type=float,
        default=2.0,
        help="Minimum wrapped distance between points (default: 2.0)",
    )
    parser.add_argument("--seed", type=int, default=10, help="Random seed (default: 10)")
    parser.add_argument(
        "--samples",
        type=int,
        default=None,
        help=f"Candidates per active point (default: {get_sampler_defaults().samples})",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of points to print, 0 for all (default: 10)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        noise = WrappingBlueNoise.from_rng(
            args.width, args.height, args.min_distance, np.random.default_rng(args.seed)
        )
        if args.samples is not None:
            noise.with_samples(args.samples)
    except ConfigurationError as exc:
        logger.error("Invalid sampler configuration: %s", exc)
        raise SystemExit(2)

    points = list(noise) if args.count <= 0 else noise.take(args.count)
    for point in points:
        print(f"{point.x}, {point.y}")

    logger.info(
        "Emitted %d point(s) on a %gx%g torus (min distance %g, samples %d)",
        len(points),
        args.width,
        args.height,
        args.min_distance,
        noise.options.samples,
    )
    if noise.exhausted:
        logger.info("Domain saturated")


if __name__ == "__main__":
    main(sys.argv[1:])
