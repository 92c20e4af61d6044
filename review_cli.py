#!/usr/bin/env python3
"""
CLI for turning a Sonar issues report into review violations.

Steps:
  - load configuration (.env, sonar_review.yml, SONAR_REVIEW_* variables)
  - parse the report written by the analysis
  - print a per-severity summary
  - write the violations as JSON (to --output / output_path, else stdout)

Usage:
  python review_cli.py
  python review_cli.py --report .sonar/sonar-report.json --output review.json
  python review_cli.py --config ci/sonar_review.yml --verbose
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sonar_review.config import ConfigError, ReviewConfig, load_config
from sonar_review.domain import ReviewResult
from sonar_review.io import write_json_atomic
from tools.sonar import SonarProcessor, SonarReportError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Convert a Sonar issues report into review violations (JSON)."
    )
    p.add_argument("--report", default=None, help="Path to the Sonar JSON report (overrides config).")
    p.add_argument("--config", default=None, help="YAML config file (default: ./sonar_review.yml if present).")
    p.add_argument("--project-dir", default=None, help="Directory the report location is relative to.")
    p.add_argument("--output", default=None, help="Write violations JSON here instead of stdout.")
    p.add_argument("--verbose", action="store_true", help="Log skipped issues and other debug output.")
    return p.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> ReviewConfig:
    cfg = load_config(
        Path(args.config) if args.config else None,
        project_dir=Path(args.project_dir) if args.project_dir else None,
    )
    cfg = cfg.with_overrides(output_path=args.output, log_level="DEBUG" if args.verbose else None)
    if args.report:
        report = Path(args.report)
        cfg = cfg.with_overrides(
            project_dir=str(report.parent),
            sonar_output_dir=".",
            sonar_report_file=report.name,
        )
    return cfg


def _print_summary(result: ReviewResult, report_path: Path) -> None:
    counts = result.count_by_severity()
    summary = ", ".join(f"{sev.value}={n}" for sev, n in counts.items())
    print(f"✅ {len(result)} violation(s) from {report_path} ({summary})", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        cfg = _config_from_args(args)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=cfg.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )

    processor = SonarProcessor(cfg)
    try:
        result = processor.process()
    except SonarReportError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    _print_summary(result, processor.report_path)

    payload = result.to_dict()
    if cfg.output_path:
        write_json_atomic(Path(cfg.output_path), payload)
        print(f"📝 Wrote {cfg.output_path}", file=sys.stderr)
    else:
        json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
