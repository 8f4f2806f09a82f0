"""Capability contracts and the distribution family registry."""

from __future__ import annotations

import logging
import math
import os
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from importlib import import_module, metadata
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import yaml

from ..errors import BadParams

if TYPE_CHECKING:  # pragma: no cover
    from ..sampling import SamplingConfig

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "statcore.distributions"


@runtime_checkable
class UniformSource(Protocol):
    """Anything yielding uniform doubles in ``[0, 1)`` via ``random()``.

    ``numpy.random.Generator`` and ``random.Random`` both satisfy this.
    """

    def random(self) -> float: ...


class Sampleable(ABC):
    """Distributions that can draw random variates."""

    @abstractmethod
    def sample(
        self,
        rng: UniformSource | None = None,
        *,
        config: SamplingConfig | None = None,
    ) -> float:
        """Draw a single variate using ``rng`` as the uniform source."""


class Univariate(ABC):
    """Summary statistics of a univariate distribution."""

    @abstractmethod
    def mean(self) -> float: ...

    @abstractmethod
    def variance(self) -> float: ...

    @abstractmethod
    def std_dev(self) -> float: ...

    @abstractmethod
    def entropy(self) -> float: ...

    @abstractmethod
    def skewness(self) -> float: ...

    @abstractmethod
    def median(self) -> float | None:
        """Return the median, or ``None`` when it is undefined."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """Return ``P(X <= x)``.

        Implementations may raise :class:`~statcore.errors.StatsError` where
        the CDF is undefined or numerically unstable.
        """


class Continuous(ABC):
    """Density-level statistics of a continuous distribution."""

    @abstractmethod
    def mode(self) -> float: ...

    @abstractmethod
    def min(self) -> float:
        """Lower bound of the support."""

    @abstractmethod
    def max(self) -> float:
        """Upper bound of the support."""

    @abstractmethod
    def pdf(self, x: float) -> float: ...

    @abstractmethod
    def ln_pdf(self, x: float) -> float: ...


def validate_location_scale(mean: float, std_dev: float) -> None:
    """Raise :class:`BadParams` unless ``mean`` is a number and ``std_dev > 0``."""
    # NaN compares false against everything, so test for it explicitly.
    if math.isnan(mean) or math.isnan(std_dev) or std_dev <= 0.0:
        raise BadParams(f"Invalid parameters mean={mean!r}, std_dev={std_dev!r}.")


@dataclass(slots=True)
class DistributionFamily:
    """Describe a constructible distribution with named parameters."""

    name: str
    parameters: tuple[str, ...]
    factory: Callable[..., Any]
    defaults: dict[str, float] = field(default_factory=dict)
    notes: str | None = None

    def create(self, params: Mapping[str, float] | None = None) -> Any:
        """Instantiate the family, filling gaps from ``defaults``."""
        values: dict[str, float] = dict(self.defaults)
        values.update(params or {})
        unknown = sorted(set(values) - set(self.parameters))
        if unknown:
            raise ValueError(f"Unknown parameter(s) for '{self.name}': {', '.join(unknown)}.")
        missing = [name for name in self.parameters if name not in values]
        if missing:
            raise ValueError(f"Missing parameter(s) for '{self.name}': {', '.join(missing)}.")
        return self.factory(**{name: float(values[name]) for name in self.parameters})


_REGISTRY: dict[str, DistributionFamily] = {}


def list_distributions() -> Iterable[str]:
    """Return registered family names."""
    return sorted(_REGISTRY.keys())


def get_distribution(name: str) -> DistributionFamily:
    """Retrieve a family by name."""
    key = name.lower()
    if key not in _REGISTRY:
        raise KeyError(f"Unknown distribution '{name}'.")
    return _REGISTRY[key]


def create_distribution(name: str, params: Mapping[str, float] | None = None) -> Any:
    """Look up ``name`` and construct it from ``params``."""
    return get_distribution(name).create(params)


def register_distribution(family: DistributionFamily, *, overwrite: bool = False) -> None:
    """Register a family in the global registry."""
    key = family.name.lower()
    if key in _REGISTRY and not overwrite:
        raise ValueError(f"Distribution '{family.name}' already registered.")
    _REGISTRY[key] = family


def clear_registry() -> None:
    """Reset the registry (primarily for testing)."""
    _REGISTRY.clear()


def _iter_families(candidate: Any) -> Iterable[DistributionFamily]:
    if isinstance(candidate, DistributionFamily):
        yield candidate
    elif isinstance(candidate, Mapping) and "name" in candidate and "factory" in candidate:
        factory = candidate["factory"]
        if isinstance(factory, str):
            factory = _load_object(factory)
        raw_parameters = candidate.get("parameters", [])
        defaults = {str(k): float(v) for k, v in (candidate.get("defaults") or {}).items()}
        yield DistributionFamily(
            name=str(candidate["name"]),
            parameters=tuple(str(param) for param in raw_parameters),
            factory=factory,
            defaults=defaults,
            notes=candidate.get("notes"),
        )
    elif isinstance(candidate, Iterable) and not isinstance(candidate, str | bytes):
        for item in candidate:
            yield from _iter_families(item)
    elif callable(candidate):
        yield from _iter_families(candidate())
    else:
        raise TypeError(
            "Unsupported distribution specification. Expected DistributionFamily, an iterable "
            "of them, a callable returning them, or a mapping with name/factory keys."
        )


def _load_object(path: str) -> Any:
    module_name, _, attribute = path.partition(":")
    if not attribute:
        module_name, _, attribute = path.rpartition(".")
    if not module_name or not attribute:
        raise ValueError(f"Invalid import path '{path}'. Expected 'module:callable'.")
    module = import_module(module_name)
    try:
        return getattr(module, attribute)
    except AttributeError as exc:
        raise AttributeError(f"Module '{module_name}' has no attribute '{attribute}'.") from exc


def load_entry_points(group: str = ENTRY_POINT_GROUP) -> list[str]:
    """Discover third-party families via entry points."""
    loaded: list[str] = []
    try:
        candidates = metadata.entry_points().select(group=group)
    except Exception as exc:  # pragma: no cover - discovery failure
        logger.debug("Entry point discovery failed: %s", exc)
        return loaded

    for ep in candidates:
        try:
            for family in _iter_families(ep.load()):
                register_distribution(family, overwrite=True)
                loaded.append(family.name)
        except Exception as exc:  # pragma: no cover - plugin failure
            logger.warning("Failed to load distribution entry point '%s': %s", ep.name, exc)
    return loaded


def load_yaml_config(path: str | os.PathLike[str]) -> list[str]:
    """Register families described in a YAML configuration file."""
    path = Path(path)
    if not path.exists():
        logger.debug("Skipping distribution config %s (file not found)", path)
        return []

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to parse distribution config %s: %s", path, exc)
        return []
    if not isinstance(data, Mapping):
        logger.warning("Ignoring distribution config %s (expected a mapping at top level)", path)
        return []

    registered: list[str] = []
    for item in data.get("distributions", []):
        try:
            for family in _iter_families(item):
                register_distribution(family, overwrite=item.get("overwrite", True))
                registered.append(family.name)
        except (AttributeError, ImportError, TypeError, ValueError) as exc:
            logger.warning(
                "Failed to register distribution from %s (spec=%s): %s",
                path,
                item,
                exc,
            )
    return registered


__all__ = [
    "UniformSource",
    "Sampleable",
    "Univariate",
    "Continuous",
    "validate_location_scale",
    "DistributionFamily",
    "ENTRY_POINT_GROUP",
    "list_distributions",
    "get_distribution",
    "create_distribution",
    "register_distribution",
    "clear_registry",
    "load_entry_points",
    "load_yaml_config",
]
