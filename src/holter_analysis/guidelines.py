"""Exercise guideline thresholds derived from mean heart rate."""

from __future__ import annotations

from dataclasses import dataclass

from .metrics import round_half_away
from .schema import MetricsReport

TARGET_FACTOR = 1.10
STOP_FACTOR = 1.15
REST_FACTOR = 0.10


@dataclass(frozen=True)
class Guidelines:
    target_hr: int
    stop_hr: int
    rest_minutes: int

    def to_dict(self) -> dict[str, int]:
        return {"target": self.target_hr, "stop": self.stop_hr, "rest": self.rest_minutes}


def compute_guidelines(report: MetricsReport) -> Guidelines:
    """Return target and stop heart rates plus rest duration in minutes."""
    mean_hr = report.mean_hr
    return Guidelines(
        target_hr=int(round_half_away(mean_hr * TARGET_FACTOR, places=0)),
        stop_hr=int(round_half_away(mean_hr * STOP_FACTOR, places=0)),
        rest_minutes=int(round_half_away(mean_hr * REST_FACTOR, places=0)),
    )
