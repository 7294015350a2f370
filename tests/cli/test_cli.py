from __future__ import annotations

import json
from pathlib import Path

from holter_analysis.cli import EXIT_ANALYSIS_ERROR, EXIT_OK, main, parse_args

EXPORT = (
    "Phone timestamp;HR [bpm];HRV [ms]\n"
    "2024-03-02T10:15:30;70;40\n"
    "2024-03-02T10:15:31;80;50\n"
    "2024-03-02T10:15:32;90;60\n"
)


def test_bare_path_defaults_to_analyze() -> None:
    namespace = parse_args(["export.txt", "--verbose"])
    assert namespace.command == "analyze"
    assert namespace.path == "export.txt"
    assert namespace.verbose


def test_analyze_writes_outputs_and_telemetry(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOLTER_TELEMETRY__OUTPUT_DIR", str(tmp_path / "telemetry"))
    export = tmp_path / "export.txt"
    export.write_text(EXPORT)
    out_dir = tmp_path / "out"

    code = main(["analyze", str(export), "--out", str(out_dir), "--config", str(tmp_path / "none.yaml")])

    assert code == EXIT_OK
    assert "Mean HR: 80.0 bpm" in capsys.readouterr().out
    report = json.loads((out_dir / "report.json").read_text())
    assert report["metrics"]["sdnn"] == 10.0
    assert (out_dir / "samples.csv").read_text().count("\n") == 4
    entry = json.loads((tmp_path / "telemetry" / "telemetry.jsonl").read_text().splitlines()[-1])
    assert entry["status"] == "success"
    assert entry["samples"] == 3


def test_analysis_error_returns_exit_code(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOLTER_TELEMETRY__OUTPUT_DIR", str(tmp_path / "telemetry"))
    export = tmp_path / "single.txt"
    export.write_text("Phone timestamp;HR [bpm];HRV [ms]\n2024-03-02T10:15:30;70;40\n")

    code = main([str(export), "--config", str(tmp_path / "none.yaml")])

    assert code == EXIT_ANALYSIS_ERROR
    entry = json.loads((tmp_path / "telemetry" / "telemetry.jsonl").read_text().splitlines()[-1])
    assert entry["status"] == "error"
    assert entry["error"]["type"] == "DegenerateInputError"
