"""Symmetric difference command implementation."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from graphdiff.config import SymmetricDifferenceConfig
from graphdiff.graph import (
    SymmetricDifferenceError,
    load_graph,
    save_graph,
    symmetric_difference,
)
from graphdiff.runtime.config_loader import load_symdiff_config

logger = logging.getLogger("graphdiff.cli.symdiff")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_KIND_MISMATCH = 2


def _resolve_config(args) -> SymmetricDifferenceConfig:
    """Build the configuration from ``--config`` then apply flag overrides."""
    config = load_symdiff_config(getattr(args, "config", None))
    overrides = {}
    strict = getattr(args, "strict", None)
    if strict is not None:
        overrides["enforce_identical_node_sets"] = strict
    clone = getattr(args, "clone", None)
    if clone:
        overrides["clone_strategy"] = clone
    if overrides:
        config = SymmetricDifferenceConfig.model_validate({**config.to_dict(), **overrides})
    return config


def _print_summary(console: Console, first, second, result, output_path: Path) -> None:
    table = Table(title="Symmetric difference")
    table.add_column("Graph")
    table.add_column("Kind")
    table.add_column("Nodes", justify="right")
    table.add_column("Edges", justify="right")
    for label, graph in (("first", first), ("second", second), ("result", result)):
        table.add_row(label, type(graph).__name__, str(graph.num_nodes()), str(graph.num_edges()))
    console.print(table)
    console.print(f"Written to {output_path}")


def symdiff_command(args, console: Optional[Console] = None) -> int:
    """Execute symdiff command.

    Args:
        args: Parsed command-line arguments containing:
            - first: Path to the first graph (node-link JSON)
            - second: Path to the second graph (node-link JSON)
            - output: Output file path
            - strict: True/False to override node-set checking, None to keep config
            - clone: Optional clone strategy override
            - config: Optional config file path or inline TOML/JSON

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()

    try:
        config = _resolve_config(args)
    except (ValidationError, ValueError, TypeError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_FAILURE

    first_path = Path(args.first)
    second_path = Path(args.second)
    output_path = Path(args.output)

    try:
        first = load_graph(first_path)
        second = load_graph(second_path)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        logger.error("Failed to load input graphs: %s", exc)
        return EXIT_FAILURE

    if first.directed != second.directed:
        logger.error(
            "Input graphs differ in directedness: %s is %s, %s is %s",
            first_path,
            type(first).__name__,
            second_path,
            type(second).__name__,
        )
        return EXIT_KIND_MISMATCH

    logger.info(
        "Computing symmetric difference (strict=%s, clone=%s)",
        config.enforce_identical_node_sets,
        config.clone_strategy,
    )
    try:
        result = symmetric_difference(first, second, config=config)
    except SymmetricDifferenceError as exc:
        logger.error("Symmetric difference failed: %s", exc)
        return EXIT_FAILURE

    try:
        save_graph(result, output_path)
    except (OSError, TypeError) as exc:
        logger.error("Failed to write %s: %s", output_path, exc)
        return EXIT_FAILURE

    _print_summary(console, first, second, result, output_path)
    return EXIT_OK
