"""Runtime defaults and environment variable names."""

from __future__ import annotations

import sys

DEFAULT_N_SIMS = 1_000_000
DEFAULT_CHUNK_SIZE = 1_000_000

# Upper bound on draws generated per simulator iteration once the active set
# has shrunk below the chunk size.
STEP_BUDGET = 1 << 16

ENV_N_SIMS = "COINPI_N_SIMS"
ENV_CHUNK_SIZE = "COINPI_CHUNK_SIZE"
ENV_SEED = "COINPI_SEED"
ENV_LOG_LEVEL = "COINPI_LOG_LEVEL"


def interactive() -> bool:
    """Return True when both stdin and stdout are attached to a terminal."""
    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except (AttributeError, ValueError):
        # Detached or closed streams (e.g. under some job runners).
        return False


__all__ = [
    "DEFAULT_N_SIMS",
    "DEFAULT_CHUNK_SIZE",
    "STEP_BUDGET",
    "ENV_N_SIMS",
    "ENV_CHUNK_SIZE",
    "ENV_SEED",
    "ENV_LOG_LEVEL",
    "interactive",
]
