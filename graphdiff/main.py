"""Main CLI entry point for graphdiff.

Provides commands: symdiff
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from graphdiff.cli.symdiff import symdiff_command

logger = logging.getLogger("graphdiff.cli")


def setup_logging(
    verbose: bool = False,
    console: Optional[Console] = None,
    log_file: Optional[str] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
        log_file: Also write log records to this file (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handlers: List[logging.Handler] = [handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] [%(levelname)s] %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphdiff",
        description="Graphdiff - Symmetric difference of attributed graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Output log to file (optional), in addition to console.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    symdiff_parser = subparsers.add_parser(
        "symdiff",
        help="Build a graph holding the edges present in exactly one of two graphs",
    )
    symdiff_parser.add_argument(
        "first",
        help="First graph (node-link JSON). Its nodes are copied into the result.",
    )
    symdiff_parser.add_argument(
        "second",
        help="Second graph (node-link JSON)",
    )
    symdiff_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output graph file (node-link JSON)",
    )
    mode = symdiff_parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--strict",
        dest="strict",
        action="store_const",
        const=True,
        default=None,
        help="Fail when the two graphs do not have the same nodes (default)",
    )
    mode.add_argument(
        "--permissive",
        dest="strict",
        action="store_const",
        const=False,
        help="Only warn when the two graphs do not have the same nodes",
    )
    symdiff_parser.add_argument(
        "--clone",
        choices=["reference", "copy", "deepcopy"],
        help="Payload clone strategy (default: from config, else reference)",
    )
    symdiff_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional configuration. Can be a path to a TOML/JSON file or an "
            "inline TOML/JSON string. When omitted, built-in defaults are used."
        ),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()
    setup_logging(args.verbose, console=console, log_file=args.log_file)

    if args.command == "symdiff":
        return symdiff_command(args, console=console)

    parser.print_help()
    return 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
