"""Core dataclasses for tabulating distribution statistics."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from ..distributions.base import Continuous, Univariate


@dataclass(slots=True)
class DistributionSummary:
    """Closed-form statistics of one distribution instance."""

    distribution: str
    parameters: dict[str, float]
    statistics: dict[str, float | None] = field(default_factory=dict)

    @classmethod
    def from_distribution(
        cls,
        name: str,
        dist: Any,
        parameters: Mapping[str, float] | None = None,
    ) -> DistributionSummary:
        """Collect every statistic ``dist`` exposes through its capabilities."""
        stats: dict[str, float | None] = {}
        if isinstance(dist, Univariate):
            stats.update(
                mean=dist.mean(),
                variance=dist.variance(),
                std_dev=dist.std_dev(),
                entropy=dist.entropy(),
                skewness=dist.skewness(),
                median=dist.median(),
            )
        if isinstance(dist, Continuous):
            stats.update(mode=dist.mode(), min=dist.min(), max=dist.max())
        return cls(distribution=name, parameters=dict(parameters or {}), statistics=stats)


def summaries_to_frame(summaries: Sequence[DistributionSummary]) -> pd.DataFrame:
    """Return a tidy data frame with one row per summary."""
    records: list[dict[str, Any]] = []
    for summary in summaries:
        record: dict[str, Any] = {"distribution": summary.distribution}
        record.update(summary.parameters)
        record.update(summary.statistics)
        records.append(record)
    return pd.DataFrame.from_records(records)


__all__ = ["DistributionSummary", "summaries_to_frame"]
