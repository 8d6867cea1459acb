"""
Command-line interface for the task statistics monitor.

Polls the agent once, transforms the statistics and prints line protocol to
standard output. Log records go to standard error so they never mix with
the metrics.
"""

import argparse
import logging
import sys
import tomllib
from typing import List, Optional

from ..collectors import fetch_statistics
from ..config import load_config
from ..models.config import DEFAULT_AGENT_URL, DEFAULT_TIMEOUT_SECONDS
from ..pipeline import run_pipeline
from ..validation import FetchError, ParseError, ValidationError, handle_cli_error

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="mesostasks",
        description="Report averaged per-task resource statistics of a Mesos agent as line protocol.",
    )
    parser.add_argument(
        "url",
        nargs="?",
        default=None,
        help=f"Mesos agent URL, e.g. '{DEFAULT_AGENT_URL}' (default: {DEFAULT_AGENT_URL})",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        help=f"Timeout for the HTTP request in seconds (default: {DEFAULT_TIMEOUT_SECONDS:g})",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to a TOML configuration file; command-line values take precedence.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser


def setup_logging(level: str) -> None:
    """Configure root logging to standard error."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface.

    Loads the configuration, fetches the statistics document once and prints
    the resulting lines.

    Raises:
        SystemExit: With code 1 on configuration, fetch or parse errors.
    """
    args = build_parser().parse_args(argv)

    # Errors while loading the configuration still need a log handler.
    setup_logging(args.log_level or "INFO")

    try:
        app_config = load_config(
            config_path=args.config,
            url=args.url,
            timeout=args.timeout,
            log_level=args.log_level,
        )
    except (FileNotFoundError, tomllib.TOMLDecodeError, ValidationError) as e:
        handle_cli_error(error=e, context="configuration loading", exit_code=1, logger=logger)
        return

    setup_logging(app_config.log_level)

    try:
        raw = fetch_statistics(app_config.agent)
    except FetchError as e:
        handle_cli_error(error=e, context="fetching task statistics", exit_code=1, logger=logger)
        return

    try:
        output = run_pipeline(raw)
    except ParseError as e:
        handle_cli_error(error=e, context="parsing task statistics", exit_code=1, logger=logger)
        return

    print(output)


if __name__ == "__main__":
    main_cli()
