"""Log-normal distribution expressed through its underlying normal."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from scipy.special import erfc

from ..sampling import SamplingConfig, sample_unchecked
from .base import Continuous, Sampleable, UniformSource, Univariate, validate_location_scale
from .normal import LN_SQRT_2PI, SQRT_2, SQRT_2PI


def _exp(value: float) -> float:
    # math.exp raises instead of returning inf on overflow.
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


@dataclass(frozen=True, slots=True)
class LogNormal(Sampleable, Univariate, Continuous):
    """Distribution of ``exp(N)`` where ``N ~ Normal(mu, sigma)``.

    ``mu`` and ``sigma`` parametrize the underlying normal, not the mean and
    standard deviation of the log-normal itself. Moments are the analytic
    closed forms; nothing is estimated from samples.

    Support is ``[0, inf)``. For ``x <= 0`` the density and CDF are exactly
    ``0.0`` and the log-density is ``-inf``.
    """

    mu: float
    sigma: float

    def __post_init__(self) -> None:
        validate_location_scale(self.mu, self.sigma)

    @classmethod
    def new(cls, mean: float, std_dev: float) -> LogNormal:
        return cls(mean, std_dev)

    def sample(
        self,
        rng: UniformSource | None = None,
        *,
        config: SamplingConfig | None = None,
    ) -> float:
        rng = rng or np.random.default_rng()
        return _exp(sample_unchecked(rng, self.mu, self.sigma, config))

    def mean(self) -> float:
        return _exp(self.mu + self.sigma * self.sigma / 2.0)

    def variance(self) -> float:
        sigma2 = self.sigma * self.sigma
        return (_exp(sigma2) - 1.0) * _exp(self.mu + self.mu + sigma2)

    def std_dev(self) -> float:
        return math.sqrt(self.variance())

    def entropy(self) -> float:
        return 0.5 + math.log(self.sigma) + self.mu + LN_SQRT_2PI

    def skewness(self) -> float:
        expsigma2 = _exp(self.sigma * self.sigma)
        return (expsigma2 + 2.0) * math.sqrt(expsigma2 - 1.0)

    def median(self) -> float | None:
        return _exp(self.mu)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return 0.5 * float(erfc((self.mu - math.log(x)) / (self.sigma * SQRT_2)))

    def mode(self) -> float:
        return _exp(self.mu - self.sigma * self.sigma)

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return math.inf

    def pdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        d = (math.log(x) - self.mu) / self.sigma
        density = math.exp(-0.5 * d * d)
        scale = x * SQRT_2PI * self.sigma
        if scale == 0.0:
            # x * sigma underflowed; Python raises where IEEE gives 0/0 or 1/0.
            return 0.0 if density == 0.0 else math.inf
        return density / scale

    def ln_pdf(self, x: float) -> float:
        if x <= 0.0:
            return -math.inf
        d = (math.log(x) - self.mu) / self.sigma
        scale = x * self.sigma
        ln_scale = math.log(scale) if scale > 0.0 else math.log(x) + math.log(self.sigma)
        return (-0.5 * d * d) - LN_SQRT_2PI - ln_scale
