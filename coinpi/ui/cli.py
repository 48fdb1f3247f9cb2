"""Typer-based command line interface for coin-flip pi estimation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_N_SIMS,
    ENV_CHUNK_SIZE,
    ENV_LOG_LEVEL,
    ENV_N_SIMS,
    ENV_SEED,
    interactive,
)
from ..core.estimate_validation import check_estimate
from ..core.validator import CoinPiError, ValidationError
from ..engine import simulate_coin_pi
from ..reporting.summary import estimate_table, export_ratios

app = typer.Typer(help="Estimate pi from stopping-time coin flips")
console = Console()
err_console = Console(stderr=True)


@app.callback()
def _main() -> None:
    """Stopping-time coin flip estimator for pi."""


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def run(
    n_sims: int = typer.Option(
        DEFAULT_N_SIMS, envvar=ENV_N_SIMS, help="Number of independent trials"
    ),
    chunk_size: int = typer.Option(
        DEFAULT_CHUNK_SIZE, envvar=ENV_CHUNK_SIZE, help="Trials simulated per chunk"
    ),
    seed: Optional[int] = typer.Option(
        None, envvar=ENV_SEED, help="Seed for reproducible runs"
    ),
    progress: Optional[bool] = typer.Option(
        None,
        "--progress/--no-progress",
        help="Print a line per completed chunk (default: only on a terminal)",
    ),
    return_ratios: bool = typer.Option(
        False, "--return-ratios", help="Keep every per-trial ratio"
    ),
    ratios_out: Optional[Path] = typer.Option(
        None, help="Write per-trial ratios to this CSV (implies --return-ratios)"
    ),
    max_flips: Optional[int] = typer.Option(
        None, help="Abort if any trial needs more than this many flips"
    ),
    log_level: str = typer.Option(
        "WARNING", envvar=ENV_LOG_LEVEL, help="Logging level for diagnostics"
    ),
) -> None:
    """Run the simulation and print a summary."""
    _configure_logging(log_level)
    try:
        estimate = simulate_coin_pi(
            n_sims=n_sims,
            chunk_size=chunk_size,
            seed=seed,
            progress=interactive() if progress is None else progress,
            return_ratios=return_ratios or ratios_out is not None,
            max_flips=max_flips,
        )
    except ValidationError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc
    except CoinPiError as exc:
        err_console.print(f"[red]Simulation failed: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(estimate_table(estimate))
    low, high = estimate.confidence_interval()
    console.print(f"95% interval: [{low:.6f}, {high:.6f}]")

    result = check_estimate(estimate)
    colour = "green" if result.passed else "red"
    console.print(f"Checks: [{colour}]{result.status}[/{colour}]")
    for failure in result.failed_checks:
        console.print(f"[red]  - {failure}[/red]")
    for warning in result.warnings:
        console.print(f"[yellow]  - {warning}[/yellow]")

    if ratios_out is not None:
        path = export_ratios(estimate, ratios_out)
        console.print(f"Ratios exported to: {path}")

    if not result.passed:
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
