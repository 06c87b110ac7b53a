#!/usr/bin/env python
"""
Jal Assistant - Command Line Entry Script

Runs the offline advisory service against the configured dashboard data:
1. Load state/disease and water-quality CSVs
2. Answer a query, print a state health report, list precautions,
   or print a simulated advanced report

Usage:
    python run_assistant.py ask "Which state has the most cases?"
    python run_assistant.py report Assam
    python run_assistant.py measures Cholera
    python run_assistant.py advanced "Groundwater Test" --city Guwahati --seed 7

This script:
- Uses centralized configuration (no magic numbers)
- Includes structured logging to console and a timestamped log file
- Never contacts an external service

Author: Jal Surveillance Team
Version: 0.3.0
"""

import argparse
import asyncio
import json
import logging
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

# =============================================================================
# Project Setup
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# Logging Configuration
# =============================================================================
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure logging for the assistant CLI.

    Logs are written to both console and a timestamped log file.
    """
    log_dir = PROJECT_ROOT / "logs"
    log_dir.mkdir(exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"assistant_{timestamp}.log"

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # File handler
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # Console handler (stderr so stdout carries only answers)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger("jal_assistant")
    logger.info(f"Logging initialized. Log file: {log_file}")

    return logger


# =============================================================================
# Imports (after path setup)
# =============================================================================
from src.config import AdvisoryConfig
from src.data_pipeline import load_assistant_context
from src.advisory import (
    ask_jal_assistant,
    generate_health_report,
    get_advanced_report,
    suggest_preventive_measures,
)


# =============================================================================
# Argument Parsing
# =============================================================================
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Offline Jal Assistant for the water-borne disease dashboard",
    )
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory holding the state and water-quality CSVs")
    parser.add_argument("--log-level", default=None,
                        help="Console log level (DEBUG, INFO, WARNING, ...)")

    sub = parser.add_subparsers(dest="command", required=True)

    ask = sub.add_parser("ask", help="Answer a free-text question")
    ask.add_argument("query")
    ask.add_argument("--language", default=None, help="Language code (accepted, not used)")

    report = sub.add_parser("report", help="Offline health report for a state")
    report.add_argument("state")

    measures = sub.add_parser("measures", help="Preventive measures for a disease")
    measures.add_argument("disease")

    advanced = sub.add_parser("advanced", help="Simulated advanced report as JSON")
    advanced.add_argument("report_type")
    advanced.add_argument("--city", required=True)
    advanced.add_argument("--state", default="")
    advanced.add_argument("--seed", type=int, default=None,
                          help="Seed for a reproducible score")

    return parser


# =============================================================================
# Main
# =============================================================================
def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one assistant command.

    Returns
    -------
    int
        Process exit code (0 on success, 1 on data or lookup errors).
    """
    args = build_parser().parse_args(argv)

    config = AdvisoryConfig.from_env()
    if args.data_dir is not None:
        config.data.data_dir = args.data_dir
    if args.log_level:
        config.assistant.log_level = args.log_level
    config.validate()

    logger = setup_logging(config.assistant.log_level)
    logger.debug(f"Configuration: {config.to_dict()}")

    if args.command == "measures":
        for measure in asyncio.run(suggest_preventive_measures(args.disease)):
            print(f"- {measure}")
        return 0

    if args.command == "advanced":
        rng = random.Random(args.seed) if args.seed is not None else None
        result = asyncio.run(get_advanced_report(
            args.report_type,
            {"city": args.city, "state": args.state},
            rng=rng,
            config=config,
        ))
        print(json.dumps(result, indent=2))
        return 0

    try:
        context = load_assistant_context(config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load dashboard data: {e}")
        print(f"ERROR: {e}")
        return 1

    if args.command == "ask":
        language = args.language or config.assistant.default_language
        print(asyncio.run(ask_jal_assistant(args.query, context, language)))
        return 0

    # report
    matches = [s for s in context.states if s.name.lower() == args.state.lower()]
    if not matches:
        known = ", ".join(s.name for s in context.states)
        print(f"ERROR: Unknown state '{args.state}'. Known states: {known}")
        return 1
    print(asyncio.run(generate_health_report(matches[0])))
    return 0


if __name__ == "__main__":
    sys.exit(main())
