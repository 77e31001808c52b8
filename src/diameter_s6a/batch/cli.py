"""S6a batch CLI: validate messages and report transaction completion."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import time

import yaml

from .config import BatchProfile, BatchProfileError
from .logging_utils import configure_logging, parse_level
from .orchestrator import BatchOrchestrator
from .reader import BatchInputError
from .reporter import SummaryReporter
from .rows import CsvRowParser, CsvValidationError


logger = logging.getLogger("diameter_s6a.batch.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Diameter S6a batch processor")
    parser.add_argument("csv_path", nargs="?", help="Path to the message CSV")
    parser.add_argument("--profile", help="Path to run profile YAML")
    parser.add_argument("--metrics-out", help="Write run metrics JSON to this path")
    parser.add_argument("--log-level", help="Logging level (default from profile, else INFO)")
    args = parser.parse_args(argv)

    try:
        profile = BatchProfile.load(Path(args.profile)) if args.profile else BatchProfile()
    except (OSError, yaml.YAMLError, BatchProfileError) as exc:
        logger.error("Diameter S6a processor could not load profile %s: %s", args.profile, exc)
        return 1
    profile = profile.with_overrides(
        input_path=args.csv_path,
        metrics_path=args.metrics_out,
        log_level=args.log_level,
    )
    try:
        level = parse_level(profile.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(level=level, log_paths=list(profile.log_paths) or None)
    if not profile.input_path:
        parser.error("Provide csv_path or an input_path in --profile")

    logger.info("Diameter S6a processor starting profile=%s", profile.profile_id)
    started = time.monotonic()
    orchestrator = BatchOrchestrator(parser=CsvRowParser(profile.delimiter))
    try:
        run = orchestrator.run(profile.input_path, encoding=profile.encoding)
    except (BatchInputError, CsvValidationError) as exc:
        logger.error("Diameter S6a processor terminated with error: %s", exc)
        return 1

    SummaryReporter().report(run)
    if profile.metrics_path:
        run.metrics.export(profile.metrics_path)
    logger.info(
        "Diameter S6a processor completed in %sms",
        int((time.monotonic() - started) * 1000),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
