"""Typer-based CLI entry point."""

from __future__ import annotations

import logging
import math

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .core import DistributionSummary
from .distributions import create_distribution, get_distribution, list_distributions
from .errors import SamplingExhausted
from .sampling import SamplingConfig, draw_samples

app = typer.Typer(help="statcore distribution toolkit.")
console = Console()

NAME_ARGUMENT = typer.Argument(..., help="Registered distribution family (see `registry`).")

PARAM_OPTION = typer.Option(
    None,
    "--param",
    "-p",
    help="Parameter assignment such as mu=0.5 (repeat for multiples).",
    show_default=False,
)

AT_OPTION = typer.Option(
    None,
    "--at",
    help="Also evaluate pdf, ln_pdf and cdf at this point.",
    show_default=False,
)

SIZE_OPTION = typer.Option(10_000, "--size", "-n", help="Number of samples to draw.")
SEED_OPTION = typer.Option(None, "--seed", help="Seed for numpy.random.default_rng.")

MAX_ITERATIONS_OPTION = typer.Option(
    None,
    "--max-iterations",
    help="Cap on rejected uniform pairs per sample (default: unbounded).",
    show_default=False,
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable verbose output.")
VERSION_OPTION = typer.Option(False, "--version", help="Show version and exit.")


def _format_metric(value: float | None) -> str:
    if value is None:
        return "-"
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.6g}"


def _parse_params(values: list[str] | None) -> dict[str, float]:
    params: dict[str, float] = {}
    for item in values or []:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected NAME=VALUE, got '{item}'.", param_hint="--param")
        try:
            params[key.strip()] = float(raw)
        except ValueError as exc:
            raise typer.BadParameter(
                f"Value for '{key.strip()}' is not a number: '{raw}'.", param_hint="--param"
            ) from exc
    return params


def _build(name: str, params: dict[str, float]):
    try:
        return create_distribution(name, params)
    except (KeyError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


@app.callback(invoke_without_command=True)
def cli_callback(  # noqa: B008
    ctx: typer.Context,
    verbose: bool = VERBOSE_OPTION,
    version: bool = VERSION_OPTION,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if verbose or version:
        console.print(f"[bold green]statcore {__version__}[/bold green]")
    if ctx.invoked_subcommand is None and not ctx.resilient_parsing:
        raise typer.Exit()


@app.command()
def registry() -> None:
    """List registered distribution families."""
    table = Table(title="Registered Distributions")
    table.add_column("Name")
    table.add_column("Parameters")
    table.add_column("Description", overflow="fold")
    for name in list_distributions():
        family = get_distribution(name)
        params = ", ".join(family.parameters)
        table.add_row(family.name, params, family.notes or "")
    console.print(table)


@app.command()
def describe(  # noqa: B008
    name: str = NAME_ARGUMENT,
    param: list[str] | None = PARAM_OPTION,
    at: float | None = AT_OPTION,
) -> None:
    """Print the closed-form statistics of a distribution."""
    params = _parse_params(param)
    dist = _build(name, params)
    summary = DistributionSummary.from_distribution(name, dist, params)

    table = Table(title=f"{name} statistics")
    table.add_column("Statistic", no_wrap=True)
    table.add_column("Value", justify="right", no_wrap=True)
    for key, value in summary.statistics.items():
        table.add_row(key, _format_metric(value))
    if at is not None:
        table.add_row(f"pdf({at:g})", _format_metric(dist.pdf(at)))
        table.add_row(f"ln_pdf({at:g})", _format_metric(dist.ln_pdf(at)))
        table.add_row(f"cdf({at:g})", _format_metric(dist.cdf(at)))
    console.print(table)


@app.command()
def sample(  # noqa: B008
    name: str = NAME_ARGUMENT,
    param: list[str] | None = PARAM_OPTION,
    size: int = SIZE_OPTION,
    seed: int | None = SEED_OPTION,
    max_iterations: int | None = MAX_ITERATIONS_OPTION,
) -> None:
    """Draw samples and compare empirical moments with the analytic ones."""
    params = _parse_params(param)
    dist = _build(name, params)
    try:
        config = SamplingConfig(max_iterations=max_iterations)
        draws = draw_samples(dist, size, random_state=np.random.default_rng(seed), config=config)
    except (SamplingExhausted, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"{name}: {size} samples")
    table.add_column("Statistic", no_wrap=True)
    table.add_column("Analytic", justify="right", no_wrap=True)
    table.add_column("Empirical", justify="right", no_wrap=True)
    empirical_mean = float(np.mean(draws)) if size else float("nan")
    empirical_std = float(np.std(draws)) if size else float("nan")
    table.add_row("mean", _format_metric(dist.mean()), _format_metric(empirical_mean))
    table.add_row("std_dev", _format_metric(dist.std_dev()), _format_metric(empirical_std))
    console.print(table)


def main() -> None:  # pragma: no cover - console script
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
