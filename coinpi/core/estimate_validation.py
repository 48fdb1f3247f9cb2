"""Sanity checks for completed coin-flip pi estimates."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, List, Tuple

import numpy as np

from ..models.estimate import CoinPiEstimate

SMALL_SAMPLE = 30
TOLERANCE_SE = 4.0


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the post-run checks; ``status`` is PASS or FAIL."""

    status: str
    failed_checks: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status == "PASS"

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload["failed_checks"] = list(self.failed_checks)
        payload["warnings"] = list(self.warnings)
        return payload


def _result(failed: List[str], warnings: List[str]) -> ValidationResult:
    return ValidationResult(
        status="FAIL" if failed else "PASS",
        failed_checks=tuple(failed),
        warnings=tuple(warnings),
    )


def check_estimate(estimate: CoinPiEstimate) -> ValidationResult:
    """Run basic consistency checks on an estimate and its stored ratios."""
    failed: List[str] = []
    warnings: List[str] = []

    stats = (estimate.pi_hat, estimate.mean_ratio, estimate.std_error)
    if not all(math.isfinite(value) for value in stats):
        failed.append("nan_or_inf_statistics")
        return _result(failed, warnings)

    if not 0.5 < estimate.mean_ratio <= 1.0:
        failed.append("mean_ratio_out_of_range")
    if estimate.std_error < 0:
        failed.append("negative_std_error")
    if estimate.pi_hat != 4 * estimate.mean_ratio:
        failed.append("pi_hat_inconsistent")

    if estimate.ratios is not None:
        ratios = estimate.ratios
        if ratios.size != estimate.n_sims:
            failed.append("ratio_count_mismatch")
        if ratios.size and (np.any(ratios <= 0.5) or np.any(ratios > 1.0)):
            failed.append("ratio_out_of_range")

    if estimate.n_sims < SMALL_SAMPLE:
        warnings.append("small_sample")
    if abs(estimate.pi_hat - math.pi) > TOLERANCE_SE * estimate.std_error:
        warnings.append("pi_far_from_estimate")

    return _result(failed, warnings)


__all__ = ["ValidationResult", "check_estimate"]
