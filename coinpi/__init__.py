"""Chunked, vectorised pi estimation from stopping-time coin flips."""

from __future__ import annotations

from .core.simulator import simulate_batch
from .core.validator import (
    CoinPiError,
    FlipLimitExceeded,
    InvalidCount,
    InvalidFlag,
    InvalidSeed,
    SimulationError,
    ValidationError,
)
from .engine import plan_chunks, simulate_coin_pi
from .models.estimate import CoinPiEstimate
from .models.progress import ChunkProgressEvent
from .reporting.summary import format_estimate

__version__ = "0.1.0"

__all__ = [
    "simulate_coin_pi",
    "simulate_batch",
    "plan_chunks",
    "CoinPiEstimate",
    "ChunkProgressEvent",
    "format_estimate",
    "CoinPiError",
    "ValidationError",
    "InvalidCount",
    "InvalidSeed",
    "InvalidFlag",
    "SimulationError",
    "FlipLimitExceeded",
]
