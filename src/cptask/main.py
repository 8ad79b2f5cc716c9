#!/usr/bin/env python3
"""
cptask Main Entry Point

Usage:
    # Fetch samples of task a (contest taken from the current directory name)
    cptask fetch a

    # Fetch samples with an explicit contest, English statement
    cptask fetch abc322 a --lang en

    # Run binary a with sample 2
    cptask run a 2

    # Run the tests of task b only
    cptask test b
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .commands import fetch_samples, run_case, run_tests
from .config import Config
from .errors import CptaskError
from .utils.logger import cleanup_logger, initialize_logger_manager, log_debug


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cptask",
        description="Utilities for an AtCoder contest workspace",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Fetch samples into tests/a
    cptask fetch abc322 a

    # Replace existing samples
    cptask fetch abc322 a --overwrite

    # Run binary a with tests/a/001.in
    cptask run a

    # Run the whole test suite in release mode
    cptask test --release
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true",
                        help="Show debug log messages")
    parser.add_argument("--log_file", "--log-file", dest="log_file", type=str,
                        help="Also write log messages to this file")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    # fetch
    fetch_parser = subparsers.add_parser("fetch", help="Fetch sample test cases from AtCoder")
    fetch_parser.add_argument("identifiers", nargs="+", metavar="IDENT",
                              help="Task identifier(s): pass <task> or <contest> <task>")
    fetch_parser.add_argument("--problem_id", "--problem-id", dest="problem_id", type=str,
                              help="Override the full problem id (defaults to <contest>_<task>)")
    fetch_parser.add_argument("--lang", type=str,
                              help="Language query parameter (ja/en)")
    fetch_parser.add_argument("--out_dir", "--out-dir", dest="out_dir", type=str,
                              help="Output root directory relative to the project (default: tests)")
    fetch_parser.add_argument("--overwrite", action="store_true",
                              help="Overwrite existing sample files")

    # run
    run_parser = subparsers.add_parser("run", help="Run a binary with a sample input")
    run_parser.add_argument("bin", help="Binary name (e.g. a)")
    run_parser.add_argument("case", nargs="?",
                            help="Sample id (e.g. 1 or 001). Defaults to 001 when omitted.")
    run_parser.add_argument("--tests_dir", "--tests-dir", dest="tests_dir", type=str,
                            help="Root directory for tests (default: tests)")
    run_parser.add_argument("--release", action="store_true",
                            help="Run in release mode")

    # test
    test_parser = subparsers.add_parser("test", help="Run tests (optionally scoped to a single task)")
    test_parser.add_argument("target", nargs="?",
                             help="Optional task letter; when omitted runs the entire suite")
    test_parser.add_argument("--release", action="store_true",
                             help="Test in release mode")

    return parser


def dispatch(args: argparse.Namespace, config: Config):
    if args.command == "fetch":
        if args.out_dir:
            config.workspace.out_dir = args.out_dir
        fetch_samples(
            args.identifiers,
            config,
            problem_id=args.problem_id,
            lang=args.lang,
            overwrite=args.overwrite
        )
    elif args.command == "run":
        if args.tests_dir:
            config.workspace.tests_dir = args.tests_dir
        run_case(args.bin, config, case=args.case, release=args.release)
    elif args.command == "test":
        run_tests(config, target=args.target, release=args.release)
    else:
        raise CptaskError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        try:
            initialize_logger_manager(debug=args.debug, log_file=args.log_file)
        except CptaskError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

        try:
            config = Config.from_env()
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

        # Validate configuration
        errors = config.validate()
        if errors:
            print("Configuration errors:", file=sys.stderr)
            for error in errors:
                print(f"  - {error}", file=sys.stderr)
            return 1

        log_debug(f"Configuration: {config.to_dict()}")
        try:
            dispatch(args, config)
        except CptaskError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        return 0
    finally:
        cleanup_logger()


if __name__ == "__main__":
    sys.exit(main())
