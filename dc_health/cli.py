#!/usr/bin/env python3
"""
dc_health/cli.py — Command-line entry point.

Usage:
    dc-health                          # run every check interactively
    dc-health is_hostname_correct      # run only the named check(s)
    dc-health --list                   # list available checks, run nothing
    dc-health --report                 # run all checks, print a full report
"""

from __future__ import annotations

import argparse
import signal
import sys

from pydantic import ValidationError

from dc_health import PRODUCT_NAME, __version__
from dc_health.registry import DuplicateCheckError, Mode, Registry, default_registry
from dc_health.report import ReportStorageError
from dc_health.runner import dispatch
from dc_health.settings import load_settings

EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PRODUCT_NAME,
        description="Run health checks against a Samba AD domain controller.",
    )
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument("-l", "--list", action="store_true", help="list available checks and exit")
    modes.add_argument(
        "-r", "--report", action="store_true", help="run every check and print a full report"
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"{PRODUCT_NAME} {__version__}"
    )
    parser.add_argument(
        "--env-file", default=".env", help="settings file (default: .env, os.environ wins)"
    )
    parser.add_argument("checks", nargs="*", metavar="CHECK", help="names of checks to run")
    return parser


def select_mode(args: argparse.Namespace) -> Mode:
    if args.list:
        return Mode.LIST
    if args.report:
        return Mode.REPORT
    return Mode.RUN


def _terminate(signum: int, frame: object) -> None:  # noqa: ARG001
    # Turn SIGTERM into SystemExit so context managers clean up on the way out
    raise SystemExit(128 + signum)


def main(argv: list[str] | None = None, registry: Registry | None = None) -> int:
    args = build_parser().parse_args(argv)
    mode = select_mode(args)

    try:
        cfg = load_settings(args.env_file)
        if registry is None:
            registry = default_registry()
    except (ValidationError, DuplicateCheckError, OSError, UnicodeDecodeError) as e:
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    previous = signal.signal(signal.SIGTERM, _terminate)
    try:
        return dispatch(mode, registry, args.checks, cfg)
    except ReportStorageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    finally:
        signal.signal(signal.SIGTERM, previous)


if __name__ == "__main__":
    sys.exit(main())
