"""High-level orchestration for chunked coin-flip pi estimation."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, List, Literal, Optional, Union

import numpy as np

from .config import DEFAULT_CHUNK_SIZE, DEFAULT_N_SIMS, interactive
from .core.simulator import seeded_generator, simulate_batch
from .core.statistics import RunningStatistics
from .core.validator import (
    ValidationError,
    validate_count,
    validate_flag,
    validate_seed,
)
from .models.estimate import CoinPiEstimate
from .models.progress import ChunkProgressEvent
from .reporting.summary import ConsoleProgressNotifier

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[ChunkProgressEvent], None]


def plan_chunks(n_sims: int, chunk_size: int) -> List[int]:
    """Return the size of each chunk; only the last may be short."""
    n_sims = validate_count(n_sims, "n_sims")
    chunk_size = min(validate_count(chunk_size, "chunk_size"), n_sims)
    n_chunks = math.ceil(n_sims / chunk_size)
    sizes = [chunk_size] * n_chunks
    sizes[-1] = n_sims - chunk_size * (n_chunks - 1)
    return sizes


def _resolve_progress(progress: Any) -> bool:
    if isinstance(progress, str) and progress == "auto":
        return interactive()
    return validate_flag(progress, "progress")


def simulate_coin_pi(
    n_sims: int = DEFAULT_N_SIMS,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    seed: Optional[int] = None,
    progress: Union[bool, Literal["auto"]] = "auto",
    return_ratios: bool = False,
    *,
    rng: Optional[np.random.Generator] = None,
    max_flips: Optional[int] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> CoinPiEstimate:
    """
    Estimate pi from stopping-time coin flips.

    Each trial flips a fair coin until heads first outnumber tails and records
    ``H_tau / tau``; ``4 * mean(H_tau / tau)`` estimates pi. Trials are
    simulated in chunks of at most ``chunk_size`` so that peak memory does not
    grow with ``n_sims``.

    Parameters
    ----------
    n_sims:
        Number of independent trials.
    chunk_size:
        Trials simulated per vectorised chunk; clamped to ``n_sims``.
    seed:
        Optional integer seed; negative values are allowed. The whole run is
        then a deterministic function of ``(n_sims, chunk_size, seed)``.
    progress:
        Print a line per completed chunk. ``"auto"`` enables it only for
        interactive terminals.
    return_ratios:
        Keep every per-trial ratio on the returned estimate.
    rng:
        Caller-owned generator to draw from instead of seeding a new one.
        Mutually exclusive with ``seed``.
    max_flips:
        Optional diagnostic ceiling forwarded to :func:`simulate_batch`.
    progress_callback:
        Called with a :class:`ChunkProgressEvent` after each chunk.
    """
    n_sims = validate_count(n_sims, "n_sims")
    chunk_size = validate_count(chunk_size, "chunk_size")
    seed = validate_seed(seed)
    progress = _resolve_progress(progress)
    return_ratios = validate_flag(return_ratios, "return_ratios")
    if max_flips is not None:
        max_flips = validate_count(max_flips, "max_flips")
    if rng is not None:
        if seed is not None:
            raise ValidationError("rng", rng, "cannot be combined with `seed`.")
        if not isinstance(rng, np.random.Generator):
            raise ValidationError("rng", rng, "must be a numpy.random.Generator.")
    else:
        rng = seeded_generator(seed)

    chunk_sizes = plan_chunks(n_sims, chunk_size)
    chunk_size = chunk_sizes[0]
    n_chunks = len(chunk_sizes)

    observers: List[ProgressCallback] = []
    if progress:
        observers.append(ConsoleProgressNotifier())
    if progress_callback is not None:
        observers.append(progress_callback)

    LOGGER.info(
        "Simulating %d trials in %d chunk(s) of up to %d (seed=%s)",
        n_sims,
        n_chunks,
        chunk_size,
        seed,
    )

    stats = RunningStatistics()
    ratios = np.empty(n_sims, dtype=float) if return_ratios else None

    for chunk_index, n_current in enumerate(chunk_sizes, start=1):
        offset = stats.count
        chunk_ratios = simulate_batch(n_current, rng, max_flips=max_flips)
        stats.update(chunk_ratios)
        if ratios is not None:
            ratios[offset : offset + n_current] = chunk_ratios

        LOGGER.debug(
            "chunk %d/%d: processed %d (running mean ratio %.6f)",
            chunk_index,
            n_chunks,
            stats.count,
            stats.mean,
        )
        if observers:
            event = ChunkProgressEvent(
                chunk_index=chunk_index,
                n_chunks=n_chunks,
                chunk_trials=n_current,
                trials_done=stats.count,
                n_sims=n_sims,
                running_pi_hat=4 * stats.mean,
            )
            for observer in observers:
                try:
                    observer(event)
                except Exception as exc:
                    LOGGER.warning("Progress observer failed: %s", exc)

    mean_ratio = stats.mean
    return CoinPiEstimate(
        pi_hat=4 * mean_ratio,
        mean_ratio=mean_ratio,
        std_error=4 * stats.standard_error,
        n_sims=n_sims,
        chunk_size=chunk_size,
        n_chunks=n_chunks,
        ratios=ratios,
        seed=seed,
    )


__all__ = ["simulate_coin_pi", "plan_chunks"]
