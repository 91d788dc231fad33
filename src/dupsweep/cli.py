#!/usr/bin/env python3
"""
dupsweep CLI: command line interface for duplicate file detection.
Reports groups of byte-identical files; never modifies or deletes anything.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from typing import List, NoReturn, Optional, TextIO

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from dupsweep.aliases import ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, EPILOG_TEXT
from dupsweep.commands import FindDuplicatesCommand
from dupsweep.core.errors import DupSweepError
from dupsweep.core.models import DEFAULT_CHUNK_SIZE, ErrorPolicy, GroupingResult, ScanParams
from dupsweep.report import write_report, write_skipped
from dupsweep.utils.convert_utils import ConvertUtils


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupsweep",
            description="dupsweep: find byte-for-byte identical files in a directory tree",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "root",
            nargs="?",
            default=".",
            help="Directory to scan. Default: current directory"
        )
        parser.add_argument(
            "patterns",
            nargs="*",
            default=[],
            metavar="PATTERN",
            help="Regular expressions; files whose full path matches any are ignored"
        )

        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="xxh128",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--chunk-size", "-c",
            default=ConvertUtils.bytes_to_human(DEFAULT_CHUNK_SIZE),
            type=str,
            metavar='',
            help="Read buffer size used while hashing (e.g., 64K, 4MB). Default: 1MB"
        )
        parser.add_argument(
            "--jobs", "-j",
            default=1,
            type=int,
            metavar='',
            help="Number of threads hashing independent size classes. Default: 1"
        )
        parser.add_argument(
            "--skip-unreadable",
            action="store_true",
            help="Skip files that cannot be read instead of aborting, and list them on stderr"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and statistics on stderr"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before any traversal."""
        if not os.path.exists(args.root):
            self.error_exit(f"Directory not found: {args.root}")
        if not os.path.isdir(args.root):
            self.error_exit(f"Path is not a directory: {args.root}")

        try:
            chunk_size = ConvertUtils.human_to_bytes(args.chunk_size)
        except ValueError as e:
            self.error_exit(f"Invalid chunk size: {e}")
        if chunk_size <= 0:
            self.error_exit("Chunk size must be positive")

        if args.jobs < 1:
            self.error_exit("Number of jobs must be at least 1")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=os.path.abspath(args.root),
                exclude_patterns=list(args.patterns),
                error_policy=ErrorPolicy.SKIP if args.skip_unreadable else ErrorPolicy.FAIL_FAST,
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                chunk_size=ConvertUtils.human_to_bytes(args.chunk_size),
                jobs=args.jobs
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_detection(self, params: ScanParams) -> GroupingResult:
        """Execute the detection workflow; any core error aborts the run."""
        if self.verbose:
            print(f"Scanning directory: {params.root_dir}", file=self.stderr)
            print(f"Hash algorithm: {params.algorithm.description}", file=self.stderr)
            print(f"Error policy: {params.error_policy.display_name}", file=self.stderr)

        try:
            result = FindDuplicatesCommand().execute(params)
        except DupSweepError as e:
            self.error_exit(str(e))

        if self.verbose:
            print(result.stats.print_summary(), file=self.stderr)

        return result

    def output_results(self, result: GroupingResult) -> None:
        """Report goes to stdout; skipped files (if any) to stderr."""
        write_report(result, self.stdout)
        write_skipped(result, self.stderr)

    def error_exit(self, message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=self.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        if self.verbose:
            logging.getLogger("dupsweep").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        result = self.run_detection(params)
        self.output_results(result)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"Completed in {elapsed:.2f} seconds", file=self.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
