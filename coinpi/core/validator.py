"""Input validation utilities."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ..utils.numbers import is_integer_like


class CoinPiError(Exception):
    """Base class for all errors raised by the package."""


class ValidationError(CoinPiError, ValueError):
    """Custom error for validation related issues."""

    def __init__(self, argument: str, value: Any, message: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"`{argument}` {message} You provided {value!r}.")


class InvalidCount(ValidationError):
    """A trial or chunk count is not a positive integer-like value."""


class InvalidSeed(ValidationError):
    """A seed is not a single integer-like value."""


class InvalidFlag(ValidationError):
    """A flag is not a single boolean."""


class SimulationError(CoinPiError, RuntimeError):
    """Raised when a simulation cannot run to completion."""


class FlipLimitExceeded(SimulationError):
    """Raised when trials remain active past the configured flip ceiling."""

    def __init__(self, max_flips: int, remaining: int) -> None:
        self.max_flips = max_flips
        self.remaining = remaining
        super().__init__(
            f"{remaining} trial(s) still active after {max_flips:,} flips."
        )


def validate_count(value: Any, argument: str) -> int:
    """Return ``value`` as an ``int`` after checking it is a count >= 1."""
    if not is_integer_like(value):
        raise InvalidCount(
            argument, value, "must be a single finite integer-like value."
        )
    count = int(value)
    if count < 1:
        raise InvalidCount(argument, value, "must be at least 1.")
    return count


def validate_seed(seed: Any) -> Optional[int]:
    """Return the seed as an ``int``; ``None`` passes through untouched."""
    if seed is None:
        return None
    if not is_integer_like(seed):
        raise InvalidSeed(
            "seed", seed, "must be a single finite integer-like value (e.g. seed=123)."
        )
    return int(seed)


def validate_flag(value: Any, argument: str) -> bool:
    """Ensure ``value`` is a single boolean and return it as ``bool``."""
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidFlag(argument, value, "must be either True or False.")
    return bool(value)


__all__ = [
    "CoinPiError",
    "ValidationError",
    "InvalidCount",
    "InvalidSeed",
    "InvalidFlag",
    "SimulationError",
    "FlipLimitExceeded",
    "validate_count",
    "validate_seed",
    "validate_flag",
]
