#!/usr/bin/env python3
"""
KUBEDELTA CLI
-------------
Command-line entry point. Translates flags into a DiffConfig, runs the
ComparisonEngine and hands the reports to the DiffFormatter.

Exit codes: 0 no differences, 1 differences found, 2 input/policy error.
"""

import sys
import argparse
import logging
from typing import List, Optional

from rich.console import Console

from kubedelta.config import DiffConfig
from kubedelta.core.engine import ComparisonEngine
from kubedelta.core.errors import KubeDeltaError
from kubedelta.cli.formatter import DiffFormatter

VERSION = "0.1.0"

EXIT_CLEAN = 0
EXIT_DIFFERENCES = 1
EXIT_ERROR = 2

logger = logging.getLogger("kubedelta.cli")


class KubeDeltaCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console
        self.parser = argparse.ArgumentParser(
            prog="kubedelta",
            description="KubeDelta - Semantic diff for multi-document Kubernetes YAML",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-v", "--version", action="version", version=f"kubedelta v{VERSION}")
        self.parser.add_argument("left", nargs="?", default="examples/file1.yaml",
                                 help="First YAML file (default: examples/file1.yaml)")
        self.parser.add_argument("right", nargs="?", default="examples/file2.yaml",
                                 help="Second YAML file (default: examples/file2.yaml)")
        self.parser.add_argument("--config", help="YAML file with default settings")
        self.parser.add_argument("--strict", action="store_true", default=None,
                                 help="Fail on malformed or duplicate documents instead of skipping them")
        self.parser.add_argument("--symmetric", action="store_true", default=None,
                                 help="Also report keys that only exist in the second file")
        self.parser.add_argument("--no-color", dest="color", action="store_false", default=None,
                                 help="Disable colored output")
        self.parser.add_argument("-q", "--quiet", action="store_true", help="Skip header and summary")
        self.parser.add_argument("--verbose", action="store_true", help="Enable informational logging")

    def _build_config(self, args: argparse.Namespace) -> DiffConfig:
        config = DiffConfig.from_file(args.config) if args.config else DiffConfig()
        return config.override(strict=args.strict, symmetric=args.symmetric, color=args.color)

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

        formatter = DiffFormatter(self.console)
        try:
            config = self._build_config(args)
            if not config.color and self.console is None:
                formatter = DiffFormatter(Console(no_color=True, highlight=False))

            if not args.quiet:
                formatter.print_header(VERSION)

            engine = ComparisonEngine(config)
            result = engine.compare_files(args.left, args.right)
        except (KubeDeltaError, OSError) as e:
            logger.debug("Comparison aborted", exc_info=True)
            formatter.print_error(str(e))
            return EXIT_ERROR

        formatter.print_reports(result.reports, result.left_source, result.right_source)
        if not args.quiet:
            formatter.print_summary(engine.generate_summary(result), result.left_source, result.right_source)

        return EXIT_DIFFERENCES if result.has_differences else EXIT_CLEAN


def main():
    """Application entry point with interrupt handling."""
    console = Console(highlight=False)
    try:
        sys.exit(KubeDeltaCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
