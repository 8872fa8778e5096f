#!/usr/bin/env python3
"""
Deduce allergen carriers from a food list and print both results.
Usage: allergen-solve [input.txt | -] [--json] [--report out.json] [--log-level DEBUG]
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNSOLVABLE = 1
EXIT_BAD_INPUT = 2


def _write_report(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.info("Report written to %s", path)


def main(argv=None):
    load_dotenv()

    from allergen_core.config import LOG_LEVELS, get_input_path, get_log_level, get_report_path, log_config

    parser = argparse.ArgumentParser(description="Deduce which ingredient carries each allergen")
    parser.add_argument("input", nargs="?", default=None, help="Food list file, or '-' for stdin")
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    parser.add_argument("--report", type=Path, default=None, help="Also write the JSON report here")
    parser.add_argument(
        "--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
        help="Logging level (default from ALLERGEN_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level or get_log_level())
    log_config()

    from allergen_core.errors import AllergenSolverError
    from allergen_core.evaluation.allergen_engine import AllergenEngine
    from allergen_core.store.food_store import FoodStore

    try:
        if args.input == "-":
            store = FoodStore.from_lines(sys.stdin)
        else:
            store = FoodStore.from_path(Path(args.input) if args.input else get_input_path())
    except FileNotFoundError as e:
        logger.error("Input not found: %s", e.filename)
        return EXIT_BAD_INPUT
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Input could not be read: %s", e)
        return EXIT_BAD_INPUT

    try:
        report = AllergenEngine(store).analyze()
    except AllergenSolverError as e:
        logger.error("Allergen deduction failed: %s", e)
        return EXIT_UNSOLVABLE

    data = report.to_dict()
    if args.json:
        print(json.dumps(data, indent=2))
    else:
        print(f"appearances: {report.safe_appearances}")
        print(report.dangerous_list)

    report_path = args.report or get_report_path()
    if report_path is not None:
        _write_report(report_path, data)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
