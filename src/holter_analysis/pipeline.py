"""Parse-then-reduce pipeline producing a caller-owned analysis result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .config import Settings, load_settings
from .guidelines import Guidelines, compute_guidelines
from .metrics import reduce_samples
from .parsers import parse_sensor_logger_file, parse_sensor_logger_text
from .risk import RiskAssessment, assess
from .schema import MetricsReport, Sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    samples: List[Sample]
    report: MetricsReport

    @property
    def guidelines(self) -> Guidelines:
        return compute_guidelines(self.report)

    @property
    def risk(self) -> RiskAssessment:
        return assess(self.report)

    def samples_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [sample.model_dump() for sample in self.samples],
            columns=["time", "hr", "hrv"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "samples": len(self.samples),
            "metrics": self.report.model_dump(by_alias=True),
            "guidelines": self.guidelines.to_dict(),
            "risk": {band.name: band.label for band in self.risk.bands()},
        }


def _reduce(samples: List[Sample]) -> AnalysisResult:
    report = reduce_samples(samples)
    logger.info(
        "Analysed %d samples: mean HR %s bpm, RMSSD %s ms",
        len(samples),
        report.mean_hr,
        report.rmssd,
    )
    return AnalysisResult(samples=samples, report=report)


def analyze_text(text: str, *, settings: Optional[Settings] = None) -> AnalysisResult:
    """Parse export text and compute its metrics report."""
    settings = settings or load_settings()
    return _reduce(parse_sensor_logger_text(text, settings=settings))


def analyze_file(path: str | Path, *, settings: Optional[Settings] = None) -> AnalysisResult:
    """Read an export from disk and compute its metrics report."""
    settings = settings or load_settings()
    return _reduce(parse_sensor_logger_file(path, settings=settings))
