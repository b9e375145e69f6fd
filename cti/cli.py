"""Console entry point.

Usage:
    cti-engine [--disable-logging] [--log-file NAME] [--log-dir DIR]
               [--log-level LEVEL] [--log-json] [--log-stderr]

Exit codes:
    0   normal termination, or help-only invocation
    1   bad options, log file cannot be opened, or an unexpected error
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from pydantic import ValidationError

from cti.config import Settings
from cti.engine import EXIT_FAILURE, EXIT_SUCCESS, Engine


class _OptionError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise _OptionError(f"{self.prog}: error: {message}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="cti-engine", description="Options for CTI Engine")
    parser.add_argument("--disable-logging", action="store_true", help="Disable logging")
    parser.add_argument("--log-file", default=None, help="Set log file")
    parser.add_argument("--log-dir", default=None, help="Set log dir")
    parser.add_argument("--log-level", default=None, help="Set log level")
    parser.add_argument("--log-json", action="store_true", help="Write JSON log records")
    parser.add_argument(
        "--log-stderr", action="store_true", help="Also write log records to stderr"
    )
    return parser


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment and .env values, overridden by explicit options."""
    overrides: dict[str, object] = {}
    if args.disable_logging:
        overrides["logging_enabled"] = False
    if args.log_file is not None:
        overrides["log_file"] = args.log_file
    if args.log_dir is not None:
        overrides["log_dir"] = args.log_dir
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.log_json:
        overrides["log_json"] = True
    if args.log_stderr:
        overrides["log_stderr"] = True
    return Settings(**overrides)


def main(
    argv: list[str] | None = None,
    in_stream: TextIO | None = None,
    out_stream: TextIO | None = None,
) -> int:
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
    except _OptionError as e:
        parser.print_usage(sys.stderr)
        print(e, file=sys.stderr)
        return EXIT_FAILURE
    except SystemExit as e:
        # --help prints and exits 0
        return EXIT_SUCCESS if not e.code else EXIT_FAILURE

    try:
        settings = build_settings(args)
    except ValidationError as e:
        print(e, file=sys.stderr)
        return EXIT_FAILURE

    if in_stream is None:
        in_stream = sys.stdin
    if out_stream is None:
        out_stream = sys.stdout

    engine = Engine(settings)
    try:
        return engine.main_loop(in_stream, out_stream)
    except Exception as e:
        print(e, file=sys.stderr)
        return EXIT_FAILURE


def run() -> None:
    sys.exit(main())
