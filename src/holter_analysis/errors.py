"""Exception types raised by the parsing and metrics engine."""

from __future__ import annotations


class HolterAnalysisError(ValueError):
    """Base class for analysis failures surfaced to callers."""


class ParseError(HolterAnalysisError):
    """The input is not a readable HR/HRV export (encoding, header, structure)."""


class EmptySeriesError(HolterAnalysisError):
    """No valid samples remained after filtering."""


class DegenerateInputError(HolterAnalysisError):
    """Too few samples for a statistic that needs successive values."""


class NumericRangeError(HolterAnalysisError):
    """A statistic overflowed because the sample values are out of range."""
