"""JSON-lines telemetry for analysis runs."""

from __future__ import annotations

import json
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_OUTPUT = Path("analysis_output")
TELEMETRY_FILE = "telemetry.jsonl"


def log_analysis(
    source: str,
    *,
    start_time: float,
    samples: int = 0,
    metrics: Optional[Dict[str, Any]] = None,
    error: Optional[BaseException] = None,
    output_dir: Path | str = DEFAULT_OUTPUT,
) -> Path:
    """Append one entry per analysis run and return the telemetry file path.

    Failed runs record the exception class and message instead of metrics.
    """

    payload: Dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event": "analyze",
        "source": source,
        "duration_ms": int((time.time() - start_time) * 1000),
        "samples": samples,
        "status": "error" if error is not None else "success",
    }
    if error is not None:
        payload["error"] = {"type": type(error).__name__, "message": str(error)}
    elif metrics:
        payload["metrics"] = metrics

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    telemetry_path = output_path / TELEMETRY_FILE
    with telemetry_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(payload, default=str) + "\n")
    return telemetry_path
