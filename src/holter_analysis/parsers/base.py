"""Utility helpers for export parsers."""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from ..errors import ParseError

INVALID_TIME = "Invalid Date"
SAMPLE_COLUMNS = ["time", "hr", "hrv"]


def ensure_required_columns(df: pd.DataFrame, required: Iterable[str], source: str) -> None:
    """Raise if the expected columns are missing so ingestion fails fast."""
    missing = set(required) - set(df.columns)
    if missing:
        raise ParseError(f"{source} export missing required columns: {sorted(missing)}")


def normalize_decimal_comma(series: pd.Series) -> pd.Series:
    """Replace the first decimal comma of each value with a decimal point."""
    return series.str.replace(",", ".", n=1, regex=False)


def to_float(series: pd.Series) -> pd.Series:
    """Coerce text to floats; anything non-numeric or non-finite becomes NaN."""
    values = pd.to_numeric(series.str.strip(), errors="coerce").astype(float)
    return values.where(np.isfinite(values))


def _parse_timestamps(text: pd.Series) -> pd.Series:
    try:
        parsed = pd.to_datetime(text, errors="coerce", format="mixed")
    except (TypeError, ValueError):
        parsed = None
    if parsed is None or not pd.api.types.is_datetime64_any_dtype(parsed):
        # Mixed UTC offsets cannot share one dtype; normalise them to UTC.
        parsed = pd.to_datetime(text, errors="coerce", format="mixed", utc=True)
    return parsed


def render_times(series: pd.Series, time_format: str) -> pd.Series:
    """Render each timestamp as a time-of-day string, or the invalid sentinel."""
    text = series.fillna("").astype(str).str.strip()
    parsed = _parse_timestamps(text)
    rendered = parsed.dt.strftime(time_format).astype(object)
    return rendered.where(parsed.notna(), INVALID_TIME)


def finalize_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    """Return dataframe aligned to the sample columns with a fresh index."""
    df = df[SAMPLE_COLUMNS].copy()
    df["hr"] = df["hr"].astype(float)
    df["hrv"] = df["hrv"].astype(float)
    return df.reset_index(drop=True)
