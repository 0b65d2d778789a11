"""Symmetric difference of two graphs.

The result keeps every node of the first graph (under fresh handles) and the
edges that appear in exactly one of the two inputs. The entry point is
`symmetric_difference`, with `graph_symmetric_difference` and
`digraph_symmetric_difference` as type-checked variants.

An edge is identified by ``(source handle, target handle, payload)``; its own
handle is ignored because both graphs allocate edge handles independently.
Node handles are treated as a shared identity space between the inputs.
Comparison is set based: parallel edges with the same identity collapse into
a single presence/absence decision, so the output never holds more than one
edge per identity.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set, Tuple, TypeVar

from graphdiff.config import SymmetricDifferenceConfig

from ..core.graph import DiGraph, Graph, _BaseGraph
from ..errors import EndpointNotFound, NodeSetMismatch, UnhashablePayload
from ..models.schema import EdgeIdentity, EdgeRecord, NodeRecord
from .clone import CloneContext

logger = logging.getLogger("graphdiff.graph.ops.symmetric_difference")

GraphT = TypeVar("GraphT", Graph, DiGraph)

# (side, edge) where side is "first" or "second"
SelectedEdge = Tuple[str, EdgeRecord]


def _new_output(first: _BaseGraph) -> _BaseGraph:
    """Allocate the output container, always as a multigraph."""
    if isinstance(first, DiGraph):
        return DiGraph(check_cycle=False, multigraph=True)
    return Graph(multigraph=True)


def copy_nodes(
    first: _BaseGraph, output: _BaseGraph, context: CloneContext
) -> Dict[int, int]:
    """Clone every node of ``first`` into ``output`` in node order.

    Returns:
        Correspondence from ``first`` node handles to ``output`` node handles.

    Raises:
        PayloadCloneFailed: If a payload cannot be cloned.
    """
    node_map: Dict[int, int] = {}
    for record in first.node_items():
        payload = context.clone(record.payload, kind="node", handle=record.handle)
        node_map[record.handle] = output.add_node(payload)
    logger.debug("Copied %d nodes into output graph", len(node_map))
    return node_map


def _node_set(graph: _BaseGraph) -> Set[NodeRecord]:
    records: Set[NodeRecord] = set()
    for record in graph.node_items():
        try:
            records.add(record)
        except TypeError as exc:
            raise UnhashablePayload("node", record.handle, record.payload) from exc
    return records


def node_set_difference(first: _BaseGraph, second: _BaseGraph) -> Set[NodeRecord]:
    """Return node entries present in exactly one graph.

    Entries are compared on the full ``(handle, payload)`` pair.
    """
    return _node_set(first) ^ _node_set(second)


def _edge_identities(edges: List[EdgeRecord], directed: bool) -> Set[EdgeIdentity]:
    identities: Set[EdgeIdentity] = set()
    for edge in edges:
        try:
            identities.add(edge.identity(directed))
        except TypeError as exc:
            raise UnhashablePayload("edge", edge.handle, edge.payload) from exc
    return identities


def edge_set_difference(first: _BaseGraph, second: _BaseGraph) -> List[SelectedEdge]:
    """Select the edges whose identity appears in exactly one graph.

    Edges of ``first`` come before edges of ``second``, each in edge-handle
    order. Only the first edge carrying a given identity is selected.
    """
    directed = first.directed
    first_edges = first.edge_items()
    second_edges = second.edge_items()
    first_ids = _edge_identities(first_edges, directed)
    second_ids = _edge_identities(second_edges, directed)

    selected: List[SelectedEdge] = []
    seen: Set[EdgeIdentity] = set()
    for side, edges, other_ids in (
        ("first", first_edges, second_ids),
        ("second", second_edges, first_ids),
    ):
        for edge in edges:
            identity = edge.identity(directed)
            if identity in other_ids or identity in seen:
                continue
            seen.add(identity)
            selected.append((side, edge))

    logger.debug(
        "Edge comparison: %d + %d edges, %d distinct identities selected",
        len(first_edges),
        len(second_edges),
        len(selected),
    )
    return selected


def translate_edges(
    selected: List[SelectedEdge], node_map: Dict[int, int]
) -> List[Tuple[int, int, EdgeRecord]]:
    """Map selected edge endpoints into output handles.

    Raises:
        EndpointNotFound: If an endpoint has no counterpart in ``node_map``.
    """
    translated: List[Tuple[int, int, EdgeRecord]] = []
    for side, edge in selected:
        try:
            source = node_map[edge.source]
        except KeyError:
            raise EndpointNotFound(edge, side, edge.source) from None
        try:
            target = node_map[edge.target]
        except KeyError:
            raise EndpointNotFound(edge, side, edge.target) from None
        translated.append((source, target, edge))
    return translated


def symmetric_difference(
    first: GraphT,
    second: GraphT,
    *,
    config: Optional[SymmetricDifferenceConfig] = None,
    context: Optional[CloneContext] = None,
) -> GraphT:
    """Return a new graph holding the symmetric difference of two graphs.

    Args:
        first: Graph whose nodes are copied into the result.
        second: Graph compared against ``first``. Must have the same
            directedness.
        config: Operation configuration. Defaults to strict node-set checking.
        context: Clone context used for every payload duplication. Built from
            ``config.clone_strategy`` when omitted.

    Returns:
        A new multigraph of the same kind as ``first``. Inputs are not
        modified.

    Raises:
        TypeError: If the graphs differ in directedness.
        NodeSetMismatch: In strict mode, if the node sets differ.
        EndpointNotFound: If a selected edge cannot be translated.
        PayloadCloneFailed: If a payload cannot be cloned.
        UnhashablePayload: If a payload cannot be compared.
    """
    if first.directed != second.directed:
        raise TypeError(
            f"Cannot compute symmetric difference of {type(first).__name__} "
            f"and {type(second).__name__}"
        )
    config = config or SymmetricDifferenceConfig.default()
    context = context or CloneContext(config.clone_strategy)

    try:
        mismatched = node_set_difference(first, second)
    except UnhashablePayload as exc:
        if config.enforce_identical_node_sets:
            raise
        # Node payloads play no part in edge comparison.
        logger.warning("Skipping node comparison: %s", exc)
        mismatched = set()
    if mismatched:
        if config.enforce_identical_node_sets:
            raise NodeSetMismatch(mismatched)
        logger.warning(
            "The two graphs do not have the same nodes (%d mismatched entries); "
            "continuing because enforce_identical_node_sets is disabled",
            len(mismatched),
        )

    output = _new_output(first)
    node_map = copy_nodes(first, output, context)

    selected = edge_set_difference(first, second)
    translated = translate_edges(selected, node_map)
    for source, target, edge in translated:
        payload = context.clone(edge.payload, kind="edge", handle=edge.handle)
        output.add_edge(source, target, payload)

    logger.info(
        "Symmetric difference built: %d nodes, %d edges (first: %d edges, second: %d edges)",
        output.num_nodes(),
        output.num_edges(),
        first.num_edges(),
        second.num_edges(),
    )
    return output


def graph_symmetric_difference(
    first: Graph,
    second: Graph,
    *,
    config: Optional[SymmetricDifferenceConfig] = None,
    context: Optional[CloneContext] = None,
) -> Graph:
    """Return a new Graph by forming the symmetric difference of two Graphs.

    Payloads are passed by reference from ``first`` and ``second`` unless the
    configuration or context selects another clone strategy.
    """
    for graph in (first, second):
        if not isinstance(graph, Graph):
            raise TypeError(f"Expected Graph, got {type(graph).__name__}")
    return symmetric_difference(first, second, config=config, context=context)


def digraph_symmetric_difference(
    first: DiGraph,
    second: DiGraph,
    *,
    config: Optional[SymmetricDifferenceConfig] = None,
    context: Optional[CloneContext] = None,
) -> DiGraph:
    """Return a new DiGraph by forming the symmetric difference of two DiGraphs.

    The result has ``check_cycle`` disabled.
    """
    for graph in (first, second):
        if not isinstance(graph, DiGraph):
            raise TypeError(f"Expected DiGraph, got {type(graph).__name__}")
    return symmetric_difference(first, second, config=config, context=context)


__all__ = [
    "copy_nodes",
    "digraph_symmetric_difference",
    "edge_set_difference",
    "graph_symmetric_difference",
    "node_set_difference",
    "symmetric_difference",
    "translate_edges",
]
