"""Heart-rate and HRV analysis for wearable monitor exports."""

from .errors import (
    DegenerateInputError,
    EmptySeriesError,
    HolterAnalysisError,
    NumericRangeError,
    ParseError,
)
from .pipeline import AnalysisResult, analyze_file, analyze_text
from .schema import MetricsReport, Sample

__all__ = [
    "AnalysisResult",
    "DegenerateInputError",
    "EmptySeriesError",
    "HolterAnalysisError",
    "MetricsReport",
    "NumericRangeError",
    "ParseError",
    "Sample",
    "analyze_file",
    "analyze_text",
]
