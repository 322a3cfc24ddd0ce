#!/usr/bin/env python3
"""
Command-line interface for caption-e2e.

Runs the end-to-end scenarios against a caption generator deployment.

Usage:
    caption-e2e [OPTIONS] [TESTS_PATH]

Options:
    --base-url URL  Application under test (default: http://localhost:3000)
    --browser NAME  chromium, firefox or webkit
    --headed        Show the browser window
    --debug         Enable debug logging
    -k EXPRESSION   Only run cases matching the pytest expression
    --version       Show version and exit
    --help          Show this message and exit
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import pytest

from caption_e2e import __version__
from caption_e2e.config import DEFAULT_BASE_URL, SUPPORTED_BROWSERS

DEFAULT_TESTS_PATH = os.path.join("tests", "e2e")
PROJECT_ROOT = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_tests_path() -> str:
    """
    Locate the scenarios: ``tests/e2e`` under the current directory,
    else the one in the checkout this package was installed from.
    """
    if os.path.isdir(DEFAULT_TESTS_PATH):
        return DEFAULT_TESTS_PATH
    return os.path.join(PROJECT_ROOT, DEFAULT_TESTS_PATH)


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for a suite run.

    Args:
        debug: Enable debug logging.
    """
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    if not debug:
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="caption-e2e - End-to-end tests for the caption generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Run every scenario against a local dev server:
        caption-e2e

    Run against staging with a visible browser:
        caption-e2e --base-url https://staging.example.com --headed

    Run only the authentication cases:
        caption-e2e -k auth

Environment Variables:
    E2E_BASE_URL            Application under test
    E2E_HEADLESS            Run without a window (true/false)
    E2E_BROWSER             Browser engine
    E2E_CONFIG_FILE         TOML file with additional settings
    E2E_REQUIRE_TARGET      Fail instead of skip when the target is down
        """,
    )

    parser.add_argument(
        "tests_path",
        nargs="?",
        default=None,
        help=(
            f"Directory or file with the scenarios (default: {DEFAULT_TESTS_PATH} "
            "in the current directory, else in the project checkout)"
        ),
    )

    parser.add_argument(
        "--base-url",
        default=None,
        help=f"Application under test (default: {DEFAULT_BASE_URL})",
    )

    parser.add_argument(
        "--browser",
        choices=SUPPORTED_BROWSERS,
        default=None,
        help="Browser engine to drive",
    )

    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "-k",
        dest="keyword",
        default=None,
        help="Only run cases matching the given pytest expression",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"caption-e2e {__version__}",
    )

    args = parser.parse_args(argv)
    if args.tests_path is None:
        args.tests_path = default_tests_path()
    return args


def apply_environment(args: argparse.Namespace) -> None:
    """Export command-line choices as ``E2E_*`` settings."""
    if args.base_url:
        os.environ["E2E_BASE_URL"] = args.base_url
    if args.browser:
        os.environ["E2E_BROWSER"] = args.browser
    if args.headed:
        os.environ["E2E_HEADLESS"] = "false"
    if args.debug:
        os.environ["E2E_LOG_LEVEL"] = "DEBUG"


def build_pytest_args(args: argparse.Namespace) -> List[str]:
    """Translate command-line options into a pytest invocation."""
    level = "DEBUG" if args.debug else "INFO"
    pytest_args = [
        args.tests_path,
        "-o",
        "log_cli=true",
        "--log-cli-level",
        level,
        "--log-cli-format",
        LOG_FORMAT,
    ]
    if args.keyword:
        pytest_args.extend(["-k", args.keyword])
    return pytest_args


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the suite runner.

    Returns:
        Exit code (pytest's exit status).
    """
    args = parse_args(argv)

    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    apply_environment(args)
    logger.info(
        f"Starting caption-e2e v{__version__} against "
        f"{os.environ.get('E2E_BASE_URL', DEFAULT_BASE_URL)}"
    )

    if not os.path.exists(args.tests_path):
        logger.error(f"Tests path not found: {args.tests_path}")
        return 4

    try:
        exit_code = int(pytest.main(build_pytest_args(args)))
    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        return 2

    logger.info(f"Suite finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
