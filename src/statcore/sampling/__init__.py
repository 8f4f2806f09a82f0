"""Marsaglia polar sampling shared by every normal-derived distribution."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..errors import SamplingExhausted

if TYPE_CHECKING:  # pragma: no cover
    from ..distributions.base import Sampleable, UniformSource

logger = logging.getLogger(__name__)

__all__ = [
    "SamplingConfig",
    "polar_transform",
    "standard_normal",
    "sample_unchecked",
    "draw_samples",
    "sample_distribution",
]


@dataclass(slots=True)
class SamplingConfig:
    """Configuration for the rejection loop.

    ``max_iterations`` bounds the number of uniform pairs drawn for a single
    variate. ``None`` keeps the loop unbounded; it terminates with
    probability one for a well-behaved source (acceptance rate is pi/4).
    """

    max_iterations: int | None = None

    def __post_init__(self) -> None:
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError("max_iterations must be a positive integer or None.")


def polar_transform(a: float, b: float) -> tuple[float, float, bool]:
    """Map two uniforms in ``[0, 1)`` to a pair of standard normal deviates.

    Returns ``(z1, z2, accepted)``. When the point falls outside the open
    unit disc (or on its centre) the pair is rejected and both deviates are
    zero.
    """
    v1 = 2.0 * a - 1.0
    v2 = 2.0 * b - 1.0
    r = v1 * v1 + v2 * v2
    if r >= 1.0 or r == 0.0:
        return 0.0, 0.0, False

    fac = math.sqrt(-2.0 * math.log(r) / r)
    return v1 * fac, v2 * fac, True


def standard_normal(rng: UniformSource, config: SamplingConfig | None = None) -> float:
    """Draw one N(0, 1) deviate, redrawing until the polar test accepts."""
    limit = config.max_iterations if config is not None else None
    attempts = 0
    while True:
        z1, _, accepted = polar_transform(rng.random(), rng.random())
        if accepted:
            return z1
        attempts += 1
        if limit is not None and attempts >= limit:
            logger.warning("Polar sampler rejected %d consecutive pairs; giving up.", attempts)
            raise SamplingExhausted(
                f"No accepted pair after {attempts} draws from the uniform source."
            )


def sample_unchecked(
    rng: UniformSource,
    mean: float,
    std_dev: float,
    config: SamplingConfig | None = None,
) -> float:
    """Draw from N(mean, std_dev) without validating the parameters."""
    return mean + std_dev * standard_normal(rng, config)


def draw_samples(
    distribution: Sampleable,
    size: int,
    *,
    random_state: UniformSource | None = None,
    config: SamplingConfig | None = None,
) -> np.ndarray:
    """Draw ``size`` variates from ``distribution`` into a float array."""
    if size < 0:
        raise ValueError("size must be non-negative.")
    rng = random_state or np.random.default_rng()
    logger.debug("Drawing %d samples from %r", size, distribution)
    out = np.empty(size, dtype=float)
    for index in range(size):
        out[index] = distribution.sample(rng, config=config)
    return out


def sample_distribution(
    distribution: str,
    params: Mapping[str, float],
    size: int,
    *,
    random_state: UniformSource | None = None,
    config: SamplingConfig | None = None,
) -> np.ndarray:
    """Draw samples from a registered family."""
    from ..distributions import create_distribution

    dist = create_distribution(distribution, params)
    return draw_samples(dist, size, random_state=random_state, config=config)
