"""
Filename: cli.py
Purpose:  Command line entry point for sample_dir.
          Replicates a directory hierarchy while keeping only a subset of the
          files from each directory.

By default 5 files per file extension per directory are copied; both the
count and the extensions considered are configurable.

Dependencies:
  - PyYAML (only when --config is used)

Usage:
  sample_dir <source_dir> <dest_dir> [sample_size] [sample_exts]

  sample_dir data/ data_examples/
  sample_dir data/ data_examples/ 10 "csv,txt"
  sample_dir data/ data_examples/ 3 '!log,tmp' --strict

Exit codes:
  0  success
  1  usage error (bad arguments or config)
  2  source missing, destination or a mirrored directory could not be created
  3  some files failed to copy (only with --strict / fail_on_copy_error)
"""

# Standard library imports
import argparse
import logging
import sys
from pathlib import Path

from .config_utils import load_config, parse_sample_size
from .errors import ConfigError, SampleDirError
from .runner import run_sample

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SETUP = 2
EXIT_COPY_FAILED = 3

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints the full usage to stdout and exits with 1."""

    def error(self, message):
        self.print_help(sys.stdout)
        self.exit(EXIT_USAGE, f"\nERROR: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        prog="sample_dir",
        description=(
            "Sample Dir replicates a directory hierarchy, while preserving\n"
            "only a subset of files from each directory."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("source_dir", type=Path, help="The parent directory to be sampled")
    parser.add_argument(
        "dest_dir", type=Path,
        help="The new parent for the sampled data (will be created if missing)."
    )
    parser.add_argument(
        "sample_size", nargs="?", default=None,
        help="The number of files for each file extension to copy.\nOptional. Default: 5"
    )
    parser.add_argument(
        "sample_exts", nargs="?", default=None,
        help=(
            "Comma-separated list of extensions to include or exclude from the sample.\n"
            "Optional. Example: 'csv,txt' or '!log,tmp'\n"
            "NOTE: Extension lists MUST be quoted"
        )
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Optional YAML file with sample_size / sample_exts / fail_on_copy_error.\n"
             "Positional arguments take precedence."
    )
    parser.add_argument(
        "--strict", action="store_true",
        help=f"Exit with code {EXIT_COPY_FAILED} if any file fails to copy."
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase logging verbosity (-v for DEBUG)."
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only log warnings and errors."
    )
    return parser


def setup_logging(verbose: int = 0, quiet: bool = False) -> None:
    if quiet:
        log_level = logging.WARNING
    elif verbose >= 1:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def main(argv=None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    setup_logging(args.verbose, args.quiet)

    overrides = {"sample_exts": args.sample_exts}
    if args.strict:
        overrides["fail_on_copy_error"] = True
    try:
        if args.sample_size is not None:
            overrides["sample_size"] = parse_sample_size(args.sample_size)
        cfg = load_config(args.config, overrides)
    except ConfigError as e:
        parser.print_help(sys.stdout)
        print(f"\nERROR: {e}")
        return EXIT_USAGE

    try:
        report = run_sample(args.source_dir, args.dest_dir, cfg)
    except SampleDirError as e:
        logger.error(f"ERROR: {e}")
        return EXIT_SETUP

    if report.failed and cfg.fail_on_copy_error:
        logger.error(f"{report.files_failed} file(s) failed to copy")
        return EXIT_COPY_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
