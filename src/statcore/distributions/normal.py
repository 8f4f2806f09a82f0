"""Normal (Gaussian) distribution."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from scipy.special import erfc

from ..sampling import SamplingConfig, sample_unchecked
from .base import Continuous, Sampleable, UniformSource, Univariate, validate_location_scale

SQRT_2 = math.sqrt(2.0)
SQRT_2PI = 2.5066282746310005024157652848110452530069867406099
LN_SQRT_2PI = 0.91893853320467274178032973640561763986139747363778
# ln(sqrt(2 * pi * e))
LN_SQRT_2PIE = 1.4189385332046727417803297364056176398613974736378


@dataclass(frozen=True, slots=True)
class Normal(Sampleable, Univariate, Continuous):
    """Normal distribution with mean ``mu`` and standard deviation ``sigma``.

    ``sigma`` may be ``inf``; the moments and densities then follow plain
    IEEE arithmetic (infinite variance, zero density).
    """

    mu: float
    sigma: float

    def __post_init__(self) -> None:
        validate_location_scale(self.mu, self.sigma)

    @classmethod
    def new(cls, mean: float, std_dev: float) -> Normal:
        return cls(mean, std_dev)

    def sample(
        self,
        rng: UniformSource | None = None,
        *,
        config: SamplingConfig | None = None,
    ) -> float:
        rng = rng or np.random.default_rng()
        return sample_unchecked(rng, self.mu, self.sigma, config)

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma * self.sigma

    def std_dev(self) -> float:
        return self.sigma

    def entropy(self) -> float:
        return math.log(self.sigma) + LN_SQRT_2PIE

    def skewness(self) -> float:
        return 0.0

    def median(self) -> float | None:
        return self.mu

    def cdf(self, x: float) -> float:
        return 0.5 * float(erfc((self.mu - x) / (self.sigma * SQRT_2)))

    def mode(self) -> float:
        return self.mu

    def min(self) -> float:
        return -math.inf

    def max(self) -> float:
        return math.inf

    def pdf(self, x: float) -> float:
        d = (x - self.mu) / self.sigma
        return math.exp(-0.5 * d * d) / (SQRT_2PI * self.sigma)

    def ln_pdf(self, x: float) -> float:
        d = (x - self.mu) / self.sigma
        return (-0.5 * d * d) - LN_SQRT_2PI - math.log(self.sigma)
