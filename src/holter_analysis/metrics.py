"""Reduce an ordered HR/HRV sample sequence into aggregate indices."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

import numpy as np

from .errors import DegenerateInputError, EmptySeriesError, NumericRangeError
from .schema import MetricsReport, Sample

# Placeholder kept for compatibility with the dashboard; not derived from data.
RECOVERY_TIME_MINUTES = 30
REPORT_DECIMALS = 1


def round_half_away(value: float, places: int = REPORT_DECIMALS) -> float:
    """Round to ``places`` decimals, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def _as_array(values: Sequence[float], name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.size == 0:
        raise EmptySeriesError(f"{name} requires at least one sample")
    return array


def _require_pairs(array: np.ndarray, name: str) -> None:
    if array.size < 2:
        raise DegenerateInputError(f"{name} requires at least 2 samples, got {array.size}")


def rmssd(values: Sequence[float]) -> float:
    """Root mean square of successive differences, divisor ``n - 1``."""
    array = _as_array(values, "RMSSD")
    _require_pairs(array, "RMSSD")
    diffs = np.diff(array)
    return float(np.sqrt(np.sum(diffs**2) / diffs.size))


def sdnn(values: Sequence[float]) -> float:
    """Bessel-corrected standard deviation."""
    array = _as_array(values, "SDNN")
    _require_pairs(array, "SDNN")
    return float(np.std(array, ddof=1))


def reduce_samples(
    samples: Sequence[Sample],
    *,
    recovery_time: float = RECOVERY_TIME_MINUTES,
) -> MetricsReport:
    """Compute the metrics report for a cleaned sample sequence.

    Raises ``EmptySeriesError`` for an empty sequence and
    ``DegenerateInputError`` when only one sample is available, since RMSSD
    and SDNN are undefined there. Values so large that a statistic overflows
    raise ``NumericRangeError``.

    HRV dropouts were defaulted to ``0`` by the parser and are included in
    the HRV mean, so sustained dropout pulls ``meanHRV`` towards zero.
    """
    if not samples:
        raise EmptySeriesError("No valid samples to analyse")

    hr = np.array([sample.hr for sample in samples], dtype=float)
    hrv = np.array([sample.hrv for sample in samples], dtype=float)

    with np.errstate(over="ignore", invalid="ignore"):
        stats = {
            "meanHR": float(hr.mean()),
            "maxHR": float(hr.max()),
            "rmssd": rmssd(hrv),
            "hrvRange": float(hrv.max() - hrv.min()),
            "meanHRV": float(hrv.mean()),
            "sdnn": sdnn(hrv),
        }
    overflowed = sorted(name for name, value in stats.items() if not math.isfinite(value))
    if overflowed:
        raise NumericRangeError(f"Sample values too large to summarise: {overflowed} overflowed")

    return MetricsReport(
        mean_hr=round_half_away(stats["meanHR"]),
        max_hr=stats["maxHR"],
        rmssd=round_half_away(stats["rmssd"]),
        hrv_range=round_half_away(stats["hrvRange"]),
        mean_hrv=round_half_away(stats["meanHRV"]),
        sdnn=round_half_away(stats["sdnn"]),
        recovery_time=recovery_time,
    )
