from __future__ import annotations

import pytest

from holter_analysis.guidelines import compute_guidelines
from holter_analysis.risk import HIGH, LOW, MODERATE, assess
from holter_analysis.schema import MetricsReport


def _report(mean_hr: float = 80.0, rmssd: float = 25.0, mean_hrv: float = 40.0) -> MetricsReport:
    return MetricsReport(
        mean_hr=mean_hr,
        max_hr=mean_hr + 20,
        rmssd=rmssd,
        hrv_range=30.0,
        mean_hrv=mean_hrv,
        sdnn=12.0,
        recovery_time=30,
    )


def test_guidelines_from_mean_hr() -> None:
    guidelines = compute_guidelines(_report(mean_hr=80.0))
    assert guidelines.target_hr == 88
    assert guidelines.stop_hr == 92
    assert guidelines.rest_minutes == 8
    assert guidelines.to_dict() == {"target": 88, "stop": 92, "rest": 8}


def test_guidelines_round_half_away() -> None:
    # 65.0 * 0.10 = 6.5 rest minutes
    assert compute_guidelines(_report(mean_hr=65.0)).rest_minutes == 7


@pytest.mark.parametrize(
    ("mean_hr", "expected"),
    [(70.0, LOW), (75.0, LOW), (75.1, MODERATE), (85.0, MODERATE), (85.1, HIGH)],
)
def test_sympathetic_thresholds(mean_hr: float, expected: str) -> None:
    assert assess(_report(mean_hr=mean_hr)).sympathetic.level == expected


@pytest.mark.parametrize(
    ("rmssd", "expected"),
    [(5.0, HIGH), (10.0, MODERATE), (19.9, MODERATE), (20.0, LOW)],
)
def test_parasympathetic_thresholds(rmssd: float, expected: str) -> None:
    assert assess(_report(rmssd=rmssd)).parasympathetic.level == expected


@pytest.mark.parametrize(
    ("mean_hrv", "level", "label"),
    [(12.0, HIGH, "High Risk"), (20.0, MODERATE, "Moderate"), (30.0, LOW, "Low Risk")],
)
def test_pem_alert(mean_hrv: float, level: str, label: str) -> None:
    band = assess(_report(mean_hrv=mean_hrv)).pem
    assert (band.level, band.label) == (level, label)


def test_fill_is_capped() -> None:
    risk = assess(_report(mean_hr=120.0, rmssd=15.0, mean_hrv=100.0))
    assert risk.sympathetic.fill == 1.0
    assert risk.parasympathetic.fill == pytest.approx(0.5)
    assert risk.pem.fill == 1.0
