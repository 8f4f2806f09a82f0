"""Error taxonomy shared by distributions and the sampling engine."""

from __future__ import annotations


class StatsError(Exception):
    """Base class for statcore failures."""


class BadParams(StatsError, ValueError):
    """Distribution parameters failed validation at construction."""


class SamplingExhausted(StatsError, RuntimeError):
    """The rejection sampler hit its configured iteration cap."""


__all__ = ["StatsError", "BadParams", "SamplingExhausted"]
