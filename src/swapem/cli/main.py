#!/usr/bin/env python3
"""
SWAPEM CLI
----------
Command-line front end: parses flags, loads swap data, picks the input
source and output sink, and turns failures into exit codes.

Author: Swapem Team
Date: 2026-10-18
"""

import sys
import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from swapem.core.engine import SwapEngine
from swapem.core.errors import SwapError
from swapem.core.loader import load_swap_data
from swapem.core.models import SwapConfig, SwapTemplate
from swapem.cli.formatter import SwapFormatter

VERSION = "1.0.1"

# stdout is reserved for the swapped text
console = Console(stderr=True)

EXAMPLES = """examples:
  swapem --input-file input.txt --data-file data.json --template "( . )"
      Reads input.txt and writes its contents to stdout with swap directives
      replaced by their values specified in data.json

  swapem --input-inline "color: var(--color-red);" --template "var(-- - )" --data-inline '{"color": {"red": "#ff0000"}}'
      Writes "color: #ff0000;" to stdout
"""


class SwapemCLI:
    """
    CLI wrapper that translates user flags into Engine actions.
    """

    def __init__(self):
        """Initializes the CLI and sets up the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="swapem",
            description="Swapem - Substitute swap directives in text with values defined in JSON",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=EXAMPLES
        )
        self.formatter = SwapFormatter()
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags."""
        self.parser.add_argument("-v", "--version", action="version", version=f"swapem v{VERSION}")

        data_group = self.parser.add_argument_group("Data input [mutually exclusive] [required]")
        data_sources = data_group.add_mutually_exclusive_group(required=True)
        data_sources.add_argument("--data-file", help="Path to a JSON (or YAML) file containing data to be used when substituting")
        data_sources.add_argument("--data-inline", help="A string containing the JSON representation of the data to be used when substituting")

        input_group = self.parser.add_argument_group("Text input (will use stdin if not specified) [mutually exclusive]")
        input_sources = input_group.add_mutually_exclusive_group()
        input_sources.add_argument("--input-file", help="Path to the input text file possibly containing swap directives to be replaced")
        input_sources.add_argument("--input-inline", help="Input text possibly containing swap directives to be replaced")

        self.parser.add_argument(
            "-t", "--template", required=True,
            help="A swap directive template following the pattern <start> <separator> <end>, where <start> and <end> "
                 "are the start and end sequences of a swap directive and <separator> is a swap path nesting separator"
        )
        self.parser.add_argument("-o", "--output", help="Output file (written atomically). Defaults to stdout")
        self.parser.add_argument("--chunk-size", type=int, default=SwapEngine.DEFAULT_CHUNK_SIZE,
                                 help=f"Characters read per chunk from files and stdin (default: {SwapEngine.DEFAULT_CHUNK_SIZE})")
        self.parser.add_argument("--verbose", action="store_true", help="Debug logging and a run summary on stderr")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit code."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)

        if args.verbose:
            console.print(Panel.fit(
                f"[bold cyan]Swapem v{VERSION}[/bold cyan]",
                title="[bold white]Swap Directive Processor[/bold white]",
                border_style="cyan"
            ))

        try:
            template = SwapTemplate.from_string(args.template)
            swap_data = load_swap_data(data_file=args.data_file, data_inline=args.data_inline)
            engine = SwapEngine(SwapConfig(template=template, swap_data=swap_data), chunk_size=args.chunk_size)

            chunks = engine.iter_input(input_file=args.input_file, input_inline=args.input_inline)
            report = engine.run(chunks, output=args.output)
        except (SwapError, OSError, UnicodeDecodeError) as e:
            self.formatter.display_error(e)
            return 1

        if args.verbose:
            self.formatter.print_summary(report)
        return 0


def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    try:
        code = SwapemCLI().run(argv)
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
