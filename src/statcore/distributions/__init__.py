"""Distribution registry and canonical implementations."""

from __future__ import annotations

import os
from pathlib import Path

from .base import (
    Continuous,
    DistributionFamily,
    Sampleable,
    UniformSource,
    Univariate,
    clear_registry,
    create_distribution,
    get_distribution,
    list_distributions,
    load_entry_points,
    load_yaml_config,
    register_distribution,
)
from .lognormal import LogNormal
from .normal import Normal

__all__ = [
    "Continuous",
    "DistributionFamily",
    "LogNormal",
    "Normal",
    "Sampleable",
    "UniformSource",
    "Univariate",
    "STANDARD_DISTRIBUTIONS",
    "clear_registry",
    "create_distribution",
    "get_distribution",
    "list_distributions",
    "register_distribution",
]

CONFIG_ENV_VAR = "STATCORE_DISTRIBUTIONS"

STANDARD_DISTRIBUTIONS = [
    DistributionFamily(
        name="normal",
        parameters=("mu", "sigma"),
        factory=Normal,
        defaults={"mu": 0.0, "sigma": 1.0},
        notes="Gaussian with mean mu and standard deviation sigma.",
    ),
    DistributionFamily(
        name="lognormal",
        parameters=("mu", "sigma"),
        factory=LogNormal,
        defaults={"mu": 0.0, "sigma": 1.0},
        notes="exp(N) for N ~ Normal(mu, sigma); mu and sigma describe the underlying normal.",
    ),
]


def _register_builtin() -> None:
    for family in STANDARD_DISTRIBUTIONS:
        register_distribution(family, overwrite=True)


def _load_config_files() -> None:
    project_root = Path(__file__).resolve().parents[3]
    config_dir = project_root / "config" / "distributions"
    if config_dir.exists():
        for path in sorted(config_dir.glob("*.yaml")):
            load_yaml_config(path)

    env_paths = os.environ.get(CONFIG_ENV_VAR)
    if env_paths:
        for item in env_paths.split(os.pathsep):
            load_yaml_config(item)


_register_builtin()
load_entry_points()
_load_config_files()
