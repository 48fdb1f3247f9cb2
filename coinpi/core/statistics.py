"""Streaming first/second moment accumulation across chunks."""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt

import numpy as np


@dataclass
class RunningStatistics:
    """Running sums of per-trial ratios, folded in one chunk at a time."""

    total: float = 0.0
    total_sq: float = 0.0
    count: int = 0

    def update(self, values: np.ndarray) -> None:
        """Add a chunk's partial sum and sum of squares."""
        values = np.asarray(values, dtype=float)
        if values.size == 0:
            return
        self.total += float(values.sum())
        self.total_sq += float((values * values).sum())
        self.count += int(values.size)

    @property
    def mean(self) -> float:
        if self.count == 0:
            raise ValueError("No values have been accumulated.")
        return self.total / self.count

    @property
    def variance(self) -> float:
        """Population variance, clamped at zero against cancellation."""
        mean = self.mean
        return max(self.total_sq / self.count - mean * mean, 0.0)

    @property
    def standard_error(self) -> float:
        return sqrt(self.variance / self.count)


__all__ = ["RunningStatistics"]
