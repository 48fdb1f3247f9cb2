"""Presentation helpers for estimates and chunk progress."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd
from rich.console import Console
from rich.table import Table

from ..models.estimate import CoinPiEstimate
from ..models.progress import ChunkProgressEvent
from ..utils.numbers import format_count

LOGGER = logging.getLogger(__name__)


def _summary_rows(estimate: CoinPiEstimate) -> List[Tuple[str, str]]:
    rows = [
        ("pi_hat", f"{estimate.pi_hat:.8g}"),
        ("std_error", f"{estimate.std_error:.5g}"),
        ("n_sims", format_count(estimate.n_sims)),
        ("chunk_size", format_count(estimate.chunk_size)),
        ("n_chunks", str(estimate.n_chunks)),
    ]
    if estimate.seed is not None:
        rows.append(("seed", str(estimate.seed)))
    if estimate.ratios is not None:
        rows.append(("ratios", f"stored (length {len(estimate.ratios)})"))
    return rows


def format_estimate(estimate: CoinPiEstimate) -> str:
    """Render an estimate as a human-readable text block."""
    lines = ["<coin_pi_estimate>"]
    for label, value in _summary_rows(estimate):
        lines.append(f"  {label + ':':<12}{value}")
    return "\n".join(lines)


def estimate_table(estimate: CoinPiEstimate, *, title: str = "Coin-flip pi estimate") -> Table:
    """Build a rich table with the same content as :func:`format_estimate`."""
    table = Table(title=title, show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value", justify="right")
    for label, value in _summary_rows(estimate):
        table.add_row(label, value)
    return table


class ConsoleProgressNotifier:
    """Print one informational line per completed chunk."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def __call__(self, event: ChunkProgressEvent) -> None:
        self.console.print(
            f"[cyan]i[/cyan] chunk {event.chunk_index}/{event.n_chunks}: "
            f"processed {format_count(event.trials_done)}",
            highlight=False,
        )


def export_ratios(estimate: CoinPiEstimate, path: Union[str, Path]) -> Path:
    """Write stored per-trial ratios to CSV with columns ``trial,ratio``."""
    if estimate.ratios is None:
        raise ValueError("Estimate has no stored ratios to export.")
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame(
        {"trial": range(1, len(estimate.ratios) + 1), "ratio": estimate.ratios}
    )
    frame.to_csv(target, index=False)
    LOGGER.info("Exported %d ratios to %s", len(frame), target)
    return target


__all__ = [
    "format_estimate",
    "estimate_table",
    "ConsoleProgressNotifier",
    "export_ratios",
]
