"""Result data model for a coin-flip pi estimate."""

from __future__ import annotations

from statistics import NormalDist
from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CoinPiEstimate(BaseModel):
    """Immutable summary of a completed stopping-time simulation."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    pi_hat: float = Field(..., description="Point estimate of pi (4 * mean_ratio)")
    mean_ratio: float = Field(..., description="Mean of H_tau / tau across trials")
    std_error: float = Field(..., ge=0, description="Standard error of pi_hat")
    n_sims: int = Field(..., ge=1, description="Total number of trials")
    chunk_size: int = Field(..., ge=1, description="Trials per chunk after clamping")
    n_chunks: int = Field(..., ge=1, description="Number of chunks simulated")
    ratios: Optional[np.ndarray] = Field(
        None, description="Per-trial ratios in simulation order, when requested"
    )
    seed: Optional[int] = Field(None, description="Seed supplied by the caller, if any")

    @field_validator("ratios", mode="before")
    @classmethod
    def _freeze_ratios(cls, value: Any) -> Optional[np.ndarray]:
        """Store ratios as a read-only float array."""
        if value is None:
            return None
        array = np.array(value, dtype=float)
        array.setflags(write=False)
        return array

    def confidence_interval(self, level: float = 0.95) -> Tuple[float, float]:
        """Normal-approximation interval around ``pi_hat``."""
        if not 0 < level < 1:
            raise ValueError("level must be between 0 and 1")
        z = NormalDist().inv_cdf(0.5 + level / 2)
        return self.pi_hat - z * self.std_error, self.pi_hat + z * self.std_error

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain-python mapping of the estimate."""
        return {
            "pi_hat": self.pi_hat,
            "mean_ratio": self.mean_ratio,
            "std_error": self.std_error,
            "n_sims": self.n_sims,
            "chunk_size": self.chunk_size,
            "n_chunks": self.n_chunks,
            "ratios": None if self.ratios is None else self.ratios.tolist(),
            "seed": self.seed,
        }

    def summary_frame(self) -> pd.DataFrame:
        """Return a one-row summary table (ratios excluded)."""
        row = self.to_dict()
        row.pop("ratios")
        row["ratios_stored"] = self.ratios is not None
        return pd.DataFrame([row])

    def ratio_summary(self) -> pd.Series:
        """Describe the stored per-trial ratios."""
        if self.ratios is None:
            raise ValueError("Ratios were not stored; rerun with return_ratios=True.")
        return pd.Series(self.ratios, name="ratio").describe()

    def __str__(self) -> str:
        from ..reporting.summary import format_estimate

        return format_estimate(self)


__all__ = ["CoinPiEstimate"]
