"""Numeric helper functions shared across the application."""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np


def is_integer_like(value: Any) -> bool:
    """Return True for a single finite value with no fractional part.

    Booleans are rejected even though they subclass ``int``.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (numbers.Integral, np.integer)):
        return True
    if isinstance(value, (numbers.Real, np.floating)):
        as_float = float(value)
        return math.isfinite(as_float) and as_float.is_integer()
    return False


def format_count(value: int) -> str:
    """Format an integer count with thousands separators."""
    return f"{int(value):,}"


__all__ = ["is_integer_like", "format_count"]
