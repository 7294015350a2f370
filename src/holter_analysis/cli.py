#!/usr/bin/env python3
"""Command-line interface for the Holter HR/HRV analysis toolkit."""
from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from .config import load_settings
from .errors import HolterAnalysisError
from .pipeline import AnalysisResult, analyze_file
from .telemetry import log_analysis

COMMAND_ALIASES = {"analyze"}

EXIT_OK = 0
EXIT_ANALYSIS_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Holter HR/HRV analysis CLI")
    subparsers = parser.add_subparsers(dest="command")

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Compute HR/HRV metrics for a semicolon-delimited export",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    analyze_parser.add_argument("path", help="Path to the .txt/.csv export")
    analyze_parser.add_argument(
        "--out",
        default=None,
        help="Directory where samples.csv and report.json are written",
    )
    analyze_parser.add_argument(
        "--config",
        default=None,
        help="Path to a settings YAML file (defaults to config/settings.yaml)",
    )
    analyze_parser.add_argument(
        "--no-telemetry",
        action="store_true",
        help="Do not append a telemetry entry for this run",
    )
    analyze_parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    analyze_parser.set_defaults(command="analyze")

    return parser


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    if args is None:
        args = sys.argv[1:]
    parser = build_parser()
    if args and args[0] in {"-h", "--help"}:
        return parser.parse_args(args=args)
    if not args or args[0] not in COMMAND_ALIASES:
        args = ["analyze", *args]
    return parser.parse_args(args=args)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def write_outputs(result: AnalysisResult, out_dir: Path) -> tuple[Path, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    samples_path = out_dir / "samples.csv"
    report_path = out_dir / "report.json"
    result.samples_frame().to_csv(samples_path, index=False)
    report_path.write_text(json.dumps(result.to_dict(), indent=2))
    return samples_path, report_path


def format_summary(result: AnalysisResult) -> str:
    report = result.report
    guidelines = result.guidelines
    lines = ["Holter Analysis Summary", "=" * 23, ""]
    lines.append(f"Samples: {len(result.samples)}")
    lines.append(f"Mean HR: {report.mean_hr} bpm (max {report.max_hr})")
    lines.append(f"RMSSD: {report.rmssd} ms  SDNN: {report.sdnn} ms")
    lines.append(f"Mean HRV: {report.mean_hrv} ms (range {report.hrv_range})")
    lines.append(f"Recovery time: {report.recovery_time} min")
    lines.append("")
    for band in result.risk.bands():
        lines.append(f"{band.name}: {band.level} ({band.label})")
    lines.append("")
    lines.append(
        f"Guidelines: target {guidelines.target_hr} bpm, stop {guidelines.stop_hr} bpm, "
        f"rest {guidelines.rest_minutes}m"
    )
    return "\n".join(lines)


def run_analyze(args: argparse.Namespace) -> int:
    configure_logging(args.verbose)
    start = time.time()
    settings = load_settings(Path(args.config) if args.config else None)
    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"Export not found: {path}")

    try:
        result = analyze_file(path, settings=settings)
    except HolterAnalysisError as exc:
        logging.error("%s: %s", type(exc).__name__, exc)
        if not args.no_telemetry:
            log_analysis(str(path), start_time=start, error=exc, output_dir=settings.telemetry_output_dir)
        return EXIT_ANALYSIS_ERROR

    print(format_summary(result))
    if args.out:
        samples_path, report_path = write_outputs(result, Path(args.out))
        logging.info("Wrote %s and %s", samples_path, report_path)
    if not args.no_telemetry:
        log_analysis(
            str(path),
            start_time=start,
            samples=len(result.samples),
            metrics=result.report.model_dump(by_alias=True),
            output_dir=settings.telemetry_output_dir,
        )
    return EXIT_OK


def main(args: Optional[list[str]] = None) -> int:
    namespace = parse_args(args=args)
    return run_analyze(namespace)


if __name__ == "__main__":
    raise SystemExit(main())
