"""Node-link JSON serialization for graph containers.

Documents follow the networkx node-link layout: node ``id`` is the node
handle, edge ``key`` is the edge handle and payloads live under ``payload``.
Container flags are stored in the ``graph`` section. Loading keeps node
handles exactly; edges are re-added in edge-handle order and receive fresh
handles.

JSON objects and arrays in payloads are loaded as ``FrozenDict`` and tuples so
they hash by value, and are written back as plain objects and arrays.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import networkx as nx

from .core.graph import DiGraph, Graph, _BaseGraph
from .errors import GraphError
from .models.schema import freeze_payload, thaw_payload

logger = logging.getLogger("graphdiff.graph.io")


def graph_to_node_link(graph: _BaseGraph) -> Dict[str, Any]:
    """Convert a graph to a JSON-serializable node-link mapping."""
    data = nx.readwrite.json_graph.node_link_data(
        graph.backend.native_graph, edges="edges"
    )
    for entry in data["nodes"]:
        entry["payload"] = thaw_payload(entry.get("payload"))
    # networkx reports undirected edges in adjacency order; restore the
    # orientation and order the edges were created with.
    data["edges"] = [
        {
            "source": source,
            "target": target,
            "key": edge,
            "payload": thaw_payload(payload),
        }
        for edge, source, target, payload in graph.backend.edge_items()
    ]
    graph_section: Dict[str, Any] = {"multigraph": graph.multigraph, "attrs": graph.attrs}
    if isinstance(graph, DiGraph):
        graph_section["check_cycle"] = graph.check_cycle
    data["graph"] = graph_section
    return data


def graph_from_node_link(data: Dict[str, Any]) -> _BaseGraph:
    """Build a ``Graph`` or ``DiGraph`` from a node-link mapping.

    Raises:
        ValueError: If the document is malformed, node ids are not integers or
            an edge references an undefined node.
    """
    if not isinstance(data, dict):
        raise ValueError("Node-link document must be a mapping")

    graph_section = data.get("graph") or {}
    multigraph = bool(graph_section.get("multigraph", True))
    attrs = graph_section.get("attrs")

    graph: _BaseGraph
    if data.get("directed", False):
        graph = DiGraph(multigraph=multigraph, attrs=attrs)
    else:
        graph = Graph(multigraph=multigraph, attrs=attrs)

    for entry in data.get("nodes", []):
        node = entry.get("id")
        if not isinstance(node, int) or isinstance(node, bool) or node < 0:
            raise ValueError(f"Node id must be a non-negative integer, got {node!r}")
        graph.backend.insert_node(node, freeze_payload(entry.get("payload")))

    edge_key = "edges" if "edges" in data else "links"
    links = data.get(edge_key, [])
    if any("key" in link for link in links):
        links = sorted(links, key=lambda link: link.get("key", 0))
    for link in links:
        try:
            source, target = link["source"], link["target"]
        except KeyError as exc:
            raise ValueError(f"Edge entry is missing {exc.args[0]!r}: {link!r}") from exc
        try:
            graph.add_edge(source, target, freeze_payload(link.get("payload")))
        except GraphError as exc:
            raise ValueError(
                f"Edge {source!r} -> {target!r} references a node that is not defined"
            ) from exc

    # Flags that constrain insertion are applied once the document is loaded.
    if isinstance(graph, DiGraph):
        graph.check_cycle = bool(graph_section.get("check_cycle", False))
    return graph


def save_graph(graph: _BaseGraph, output_path: Union[str, Path]) -> None:
    """Write a graph to a node-link JSON file."""
    output_path = Path(output_path)
    logger.info("Exporting graph to JSON: %s", output_path)

    # Serialize first so a bad payload never leaves a partial file behind.
    text = json.dumps(graph_to_node_link(graph), indent=2, ensure_ascii=False)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.info(
        "JSON export completed: %d nodes, %d edges", graph.num_nodes(), graph.num_edges()
    )


def load_graph(path: Union[str, Path]) -> _BaseGraph:
    """Load a graph from a node-link JSON file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    graph = graph_from_node_link(data)
    logger.debug(
        "Loaded %s from %s: %d nodes, %d edges",
        type(graph).__name__,
        path,
        graph.num_nodes(),
        graph.num_edges(),
    )
    return graph


__all__ = ["graph_from_node_link", "graph_to_node_link", "load_graph", "save_graph"]
