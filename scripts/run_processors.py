#!/usr/bin/env python3
"""
Variable Processor Runner

Loads a YAML run configuration, configures every processor it lists against its
named inputs, evaluates all events from a JSON file and writes one output record
per event.

Event file format: a JSON list of objects mapping variable names to a number or
a list of numbers, e.g. ``[{"category": 1, "pt": [12.5, 40.1], "eta": 0.3}]``.
Missing variables count as holding no values.
"""

import argparse
import json
import sys
import traceback
from pathlib import Path

from hep_varproc.config.config_loader import load_processor_config
from hep_varproc.config.logging_config import get_logger, setup_logging
from hep_varproc.pipeline.processor_runner import (
    ProcessorConfigurationError,
    ProcessorRunner,
)


def load_events(events_path: Path) -> list[dict]:
    with open(events_path) as f:
        events = json.load(f)
    if not isinstance(events, list):
        raise ValueError(f"Event file {events_path} must contain a JSON list")
    return events


def run(config_path: Path, events_path: Path, output_path: Path, log_file=None) -> bool:
    run_config = load_processor_config(config_path)
    setup_logging(level=run_config.log_level, log_file=log_file)
    logger = get_logger(__name__)

    events = load_events(events_path)
    logger.info(f"Loaded {len(events)} events from {events_path}")

    records = [{} for _ in events]
    for spec in run_config.processors:
        try:
            runner = ProcessorRunner(
                spec.create_processor(), spec.inputs, spec.input_flags
            )
        except ProcessorConfigurationError as e:
            logger.error(str(e))
            return False

        results = runner.evaluate_events(events, show_progress=run_config.show_progress)
        for record, processor_record in zip(records, runner.to_records(results)):
            record.update(processor_record)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(
            {"source_config_file": run_config.source_config_file, "events": records},
            f,
            indent=2,
        )

    logger.info(f"Wrote {len(records)} output records to {output_path}")
    return True


def main():
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Evaluate variable processors over a file of events",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/run_processors.py --config configs/likelihood.yaml --events events.json
  python scripts/run_processors.py --config configs/likelihood.yaml --events events.json --output out/results.json
        """,
    )

    parser.add_argument(
        "--config", type=str, required=True, help="YAML run configuration"
    )
    parser.add_argument(
        "--events", type=str, required=True, help="JSON file holding the events"
    )
    parser.add_argument(
        "--output",
        type=str,
        default="processor_outputs.json",
        help="Where to write the results (default: processor_outputs.json)",
    )
    parser.add_argument(
        "--log-file", type=str, default=None, help="Optional log file"
    )

    args = parser.parse_args()

    try:
        success = run(
            Path(args.config), Path(args.events), Path(args.output), args.log_file
        )
        sys.exit(0 if success else 1)

    except KeyboardInterrupt:
        print("\n\nProcessor run interrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"\n\nProcessor run failed: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
