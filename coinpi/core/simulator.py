"""Vectorised stopping-time coin flip simulation.

Each trial flips a fair coin until heads first outnumber tails. All trials of
a batch advance together; trials that have stopped are dropped from the
active index set and keep their final heads/flips counts.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..config import STEP_BUDGET
from .validator import FlipLimitExceeded, validate_count

LOGGER = logging.getLogger(__name__)


def seeded_generator(seed: Optional[int] = None) -> np.random.Generator:
    """Return a generator for ``seed``, accepting negative integers.

    Non-negative seeds map straight to ``default_rng(seed)``. Negative seeds use
    their magnitude under a separate spawn key so ``-s`` and ``s`` differ.
    """
    if seed is None or seed >= 0:
        return np.random.default_rng(seed)
    return np.random.default_rng(np.random.SeedSequence(-seed, spawn_key=(1,)))


def _step_width(n: int, n_active: int) -> int:
    """Number of flips to draw per active trial in the next iteration."""
    return max(1, max(n, STEP_BUDGET) // n_active)


def simulate_batch(
    n: int,
    rng: Optional[np.random.Generator] = None,
    *,
    max_flips: Optional[int] = None,
) -> np.ndarray:
    """
    Run ``n`` independent trials to their stopping time.

    Parameters
    ----------
    n:
        Number of trials in the batch.
    rng:
        Random generator supplying the Bernoulli draws. A fresh unseeded
        generator is used when omitted.
    max_flips:
        Optional diagnostic ceiling. When set, :class:`FlipLimitExceeded` is
        raised if any trial is still active after more than ``max_flips``
        flips.

    Returns
    -------
    numpy.ndarray
        ``heads / flips`` at the stopping time for each trial, in ``(0.5, 1]``.
    """
    n = validate_count(n, "n")
    if max_flips is not None:
        max_flips = validate_count(max_flips, "max_flips")
    if rng is None:
        rng = np.random.default_rng()

    heads = np.zeros(n, dtype=np.int64)
    flips = np.zeros(n, dtype=np.int64)
    balance = np.zeros(n, dtype=np.int64)
    active = np.arange(n, dtype=np.int64)

    iterations = 0
    while active.size > 0:
        width = _step_width(n, active.size)
        draws = rng.integers(0, 2, size=(active.size, width), dtype=np.int8)
        path = balance[active, None] + np.cumsum(2 * draws - 1, axis=1, dtype=np.int64)

        crossed = path > 0
        stopped = crossed.any(axis=1)
        # Flips taken this iteration: up to and including the first crossing.
        taken = np.where(stopped, crossed.argmax(axis=1) + 1, width)
        new_balance = path[np.arange(active.size), taken - 1]

        heads[active] += (taken + new_balance - balance[active]) // 2
        flips[active] += taken
        balance[active] = new_balance

        if max_flips is not None:
            # A trial stopping at flip tau was still active after tau - 1 flips.
            active_after = flips[active] - stopped.astype(np.int64)
            over = int(np.count_nonzero(active_after > max_flips))
            if over:
                raise FlipLimitExceeded(max_flips, over)

        active = active[~stopped]
        iterations += 1

    LOGGER.debug(
        "Batch of %d trials stopped after %d iterations (longest run %d flips)",
        n,
        iterations,
        int(flips.max()),
    )
    return heads / flips


__all__ = ["seeded_generator", "simulate_batch"]
