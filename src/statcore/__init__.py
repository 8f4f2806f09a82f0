"""Top-level package exports for statcore."""

from __future__ import annotations

from importlib import metadata

__version__ = "0.1.0"

try:
    __version__ = metadata.version("statcore")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev fallback
    pass

from . import core as core  # noqa: F401
from . import distributions as distributions  # noqa: F401
from . import sampling as sampling  # noqa: F401
from .core import DistributionSummary, summaries_to_frame  # noqa: F401
from .distributions import LogNormal, Normal  # noqa: F401
from .errors import BadParams, SamplingExhausted, StatsError  # noqa: F401
from .sampling import SamplingConfig  # noqa: F401

__all__ = [
    "__version__",
    "core",
    "distributions",
    "sampling",
    "BadParams",
    "DistributionSummary",
    "LogNormal",
    "Normal",
    "SamplingConfig",
    "SamplingExhausted",
    "StatsError",
    "summaries_to_frame",
]
