"""
Command-line interface for the EPD test-suite runner.
"""

import argparse
import sys
from pathlib import Path

from epdrunner.config import RunConfig, get_default_engine, get_default_go_command, inbuilt_suite_path
from epdrunner.constants import DEFAULT_INBUILT_SUITE, INBUILT_SUITES
from epdrunner.errors import EpdRunnerError
from epdrunner.suite import run_suite


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Run an EPD test suite against a UCI chess engine",
        epilog="Defaults for the engine and --go can be set with EPD_ENGINE and EPD_GO (or in .env). "
               "Inbuilt suites are read from EPD_SUITES_DIR, or epds/ inside the package"
    )
    parser.add_argument("engine", nargs="?", default=None,
                        help="Path to a UCI chess engine to run on the test suite")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--epdpath", type=str, default=None, metavar="PATH",
                        help="Path to an Extended Position Description file to use")
    source.add_argument("--inbuilt", choices=list(INBUILT_SUITES), default=None, metavar="NAME",
                        help="Inbuilt suite to run: winatchess (wac), zugzwangs (zugts) or "
                             f"tablebases (tbs) (default: {DEFAULT_INBUILT_SUITE})")
    parser.add_argument("--option", action="append", default=[], metavar="NAME=VALUE",
                        help="UCI option to set before running the suite (repeatable)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Echo every engine line during searches")
    parser.add_argument("--debug", action="store_true",
                        help="Echo all protocol traffic to stderr")
    parser.add_argument("--go", type=str, default=None, metavar="COMMANDS",
                        help="The string passed with `go` to the engine (default: movetime 1000)")
    parser.add_argument("--earlypass", action="store_true",
                        help="Pass a position as soon as the engine's PV starts with a best move")
    parser.add_argument("--no-colour", action="store_true",
                        help="Disable coloured output")
    return parser


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    engine = args.engine or get_default_engine()
    if engine is None:
        print("Error: No engine given (pass a path or set EPD_ENGINE)")
        sys.exit(1)

    if args.epdpath:
        epd_path = Path(args.epdpath)
        if not epd_path.exists():
            print(f"Error: EPD file not found: {args.epdpath}")
            sys.exit(1)
    else:
        try:
            epd_path = inbuilt_suite_path(args.inbuilt or DEFAULT_INBUILT_SUITE)
        except EpdRunnerError as e:
            print(f"Error: {e}")
            sys.exit(1)

    config = RunConfig(
        engine=engine,
        epd_file=epd_path,
        options=args.option,
        go_command=args.go or get_default_go_command(),
        early_pass=args.earlypass,
        verbose=args.verbose,
        debug=args.debug,
        colour=not args.no_colour,
    )

    try:
        run_suite(config)
    except EpdRunnerError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
