"""Heuristic autonomic load and post-exertional malaise (PEM) bands.

Bands are for display only. Each one carries a level (``low``, ``moderate``
or ``high``), a label and a fill fraction for gauge-style rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from .schema import MetricsReport

LOW = "low"
MODERATE = "moderate"
HIGH = "high"

SYMPATHETIC_HIGH_HR = 85.0
SYMPATHETIC_MODERATE_HR = 75.0
SYMPATHETIC_FULL_SCALE = 100.0

PARASYMPATHETIC_HIGH_RMSSD = 10.0
PARASYMPATHETIC_MODERATE_RMSSD = 20.0
PARASYMPATHETIC_FULL_SCALE = 30.0

PEM_HIGH_HRV = 20.0
PEM_MODERATE_HRV = 30.0
PEM_FULL_SCALE = 50.0

PEM_LABELS = {HIGH: "High Risk", MODERATE: "Moderate", LOW: "Low Risk"}


@dataclass(frozen=True)
class LoadBand:
    name: str
    level: str
    label: str
    value: float
    fill: float


@dataclass(frozen=True)
class RiskAssessment:
    sympathetic: LoadBand
    parasympathetic: LoadBand
    pem: LoadBand

    def bands(self) -> tuple[LoadBand, LoadBand, LoadBand]:
        return (self.sympathetic, self.parasympathetic, self.pem)


def _fill(value: float, full_scale: float) -> float:
    return max(0.0, min(value / full_scale, 1.0))


def sympathetic_load(report: MetricsReport) -> LoadBand:
    mean_hr = report.mean_hr
    if mean_hr > SYMPATHETIC_HIGH_HR:
        level = HIGH
    elif mean_hr > SYMPATHETIC_MODERATE_HR:
        level = MODERATE
    else:
        level = LOW
    return LoadBand(
        name="Sympathetic Load",
        level=level,
        label=f"Mean HR: {mean_hr} bpm",
        value=mean_hr,
        fill=_fill(mean_hr, SYMPATHETIC_FULL_SCALE),
    )


def parasympathetic_load(report: MetricsReport) -> LoadBand:
    # Low RMSSD means weak vagal activity, so the scale runs opposite to HR.
    value = report.rmssd
    if value < PARASYMPATHETIC_HIGH_RMSSD:
        level = HIGH
    elif value < PARASYMPATHETIC_MODERATE_RMSSD:
        level = MODERATE
    else:
        level = LOW
    return LoadBand(
        name="Parasympathetic",
        level=level,
        label=f"RMSSD: {value} ms",
        value=value,
        fill=_fill(value, PARASYMPATHETIC_FULL_SCALE),
    )


def pem_alert(report: MetricsReport) -> LoadBand:
    value = report.mean_hrv
    if value < PEM_HIGH_HRV:
        level = HIGH
    elif value < PEM_MODERATE_HRV:
        level = MODERATE
    else:
        level = LOW
    return LoadBand(
        name="PEM Alert",
        level=level,
        label=PEM_LABELS[level],
        value=value,
        fill=_fill(value, PEM_FULL_SCALE),
    )


def assess(report: MetricsReport) -> RiskAssessment:
    """Return all three display bands for a report."""
    return RiskAssessment(
        sympathetic=sympathetic_load(report),
        parasympathetic=parasympathetic_load(report),
        pem=pem_alert(report),
    )
