"""Data models for chunk progress reporting."""

from __future__ import annotations

from dataclasses import dataclass, field

import time


@dataclass(frozen=True)
class ChunkProgressEvent:
    """
    Represents a single chunk completion update.

    Emitted after a chunk's ratios have been folded into the running
    statistics; observers receive it purely for display.
    """

    chunk_index: int
    n_chunks: int
    chunk_trials: int
    trials_done: int
    n_sims: int
    running_pi_hat: float
    timestamp: float = field(default_factory=time.time)

    @property
    def fraction_done(self) -> float:
        return self.trials_done / self.n_sims


__all__ = ["ChunkProgressEvent"]
