"""Typed records exchanged between the parser, the reducer and callers."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sample(BaseModel):
    """One observation from the monitor export, in file order."""

    time: str = Field(..., description="Time of day rendered for display.")
    hr: float = Field(..., description="Heart rate in beats per minute.")
    hrv: float = Field(0.0, description="Heart-rate variability in milliseconds.")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("hr")
    @staticmethod
    def validate_hr(value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("hr must be a finite number.")
        return value

    @field_validator("hrv")
    @staticmethod
    def validate_hrv(value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("hrv must be a finite number.")
        return value


class MetricsReport(BaseModel):
    """Aggregate indices for one sample sequence.

    Serialises with the camelCase keys consumed by the dashboard
    (``meanHR``, ``maxHR``, ``rmssd``, ``hrvRange``, ``meanHRV``, ``sdnn``,
    ``recoveryTime``) when dumped with ``by_alias=True``.
    """

    mean_hr: float = Field(..., alias="meanHR")
    max_hr: float = Field(..., alias="maxHR")
    rmssd: float = Field(..., ge=0.0, alias="rmssd")
    hrv_range: float = Field(..., ge=0.0, alias="hrvRange")
    mean_hrv: float = Field(..., alias="meanHRV")
    sdnn: float = Field(..., ge=0.0, alias="sdnn")
    recovery_time: float = Field(..., alias="recoveryTime", description="Minutes; fixed placeholder.")

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
