"""Parser for semicolon-delimited HR/HRV exports (Polar Sensor Logger style).

A typical export looks like::

    Phone timestamp;sensor timestamp [ns];HR [bpm];HRV [ms]
    2024-03-02T10:15:30.120;599618155;72;41,5

Only the timestamp, HR and HRV columns are read. Rows whose HR does not parse
are sensor dropouts and are dropped without raising; a missing or unparsable
HRV value becomes ``0``.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..config import Settings, load_settings
from ..errors import ParseError
from ..schema import Sample
from .base import (
    ensure_required_columns,
    finalize_dataframe,
    normalize_decimal_comma,
    render_times,
    to_float,
)

logger = logging.getLogger(__name__)

SOURCE = "sensor_logger"
DELIMITER = ";"


def _check_size(size: int, settings: Settings) -> None:
    limit = settings.max_input_bytes
    if size > limit:
        raise ParseError(f"{SOURCE} export is {size} bytes, above the {limit} byte limit")


def _read_table(text: str) -> pd.DataFrame:
    try:
        df = pd.read_csv(
            io.StringIO(text.lstrip("\ufeff")),
            sep=DELIMITER,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
        )
    except pd.errors.EmptyDataError as exc:
        raise ParseError(f"{SOURCE} export is empty; a header row is required") from exc
    except pd.errors.ParserError as exc:
        raise ParseError(f"{SOURCE} export is malformed: {exc}") from exc
    df.columns = [str(column).strip() for column in df.columns]
    duplicated = sorted(set(df.columns[df.columns.duplicated()]))
    if duplicated:
        raise ParseError(f"{SOURCE} export has duplicate header columns: {duplicated}")
    return df


def parse_sensor_logger_frame(text: str, *, settings: Optional[Settings] = None) -> pd.DataFrame:
    """Parse export text into a ``time``/``hr``/``hrv`` dataframe in file order."""
    settings = settings or load_settings()
    _check_size(len(text.encode("utf-8")), settings)

    df = _read_table(text)
    ts_col, hr_col, hrv_col = settings.timestamp_column, settings.hr_column, settings.hrv_column
    ensure_required_columns(df, {ts_col, hr_col, hrv_col}, SOURCE)

    frame = pd.DataFrame(index=df.index)
    frame["hr"] = to_float(df[hr_col].fillna(""))
    hrv_text = df[hrv_col].fillna("").str.strip().replace("", "0")
    frame["hrv"] = to_float(normalize_decimal_comma(hrv_text)).fillna(0.0)

    total = len(frame)
    frame = frame.dropna(subset=["hr"]).copy()
    dropped = total - len(frame)
    if dropped:
        logger.debug("Dropped %d of %d rows with unparsable HR", dropped, total)

    frame["time"] = render_times(df.loc[frame.index, ts_col], settings.time_format)
    return finalize_dataframe(frame)


def parse_sensor_logger_text(text: str, *, settings: Optional[Settings] = None) -> List[Sample]:
    """Parse export text into ordered samples."""
    frame = parse_sensor_logger_frame(text, settings=settings)
    return [Sample(**payload) for payload in frame.to_dict(orient="records")]


def parse_sensor_logger_file(path: str | Path, *, settings: Optional[Settings] = None) -> List[Sample]:
    """Read an export from disk and parse it into ordered samples."""
    settings = settings or load_settings()
    path = Path(path)
    _check_size(path.stat().st_size, settings)
    try:
        text = path.read_bytes().decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{SOURCE} export {path} is not valid UTF-8 text") from exc
    logger.info("Parsing %s export from %s", SOURCE, path)
    return parse_sensor_logger_text(text, settings=settings)
