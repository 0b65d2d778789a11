"""Public graph API surface."""

from graphdiff.graph.core import DiGraph, Graph, GraphBackend, NetworkXBackend
from graphdiff.graph.errors import (
    DAGWouldCycle,
    EdgeNotFound,
    EndpointNotFound,
    GraphError,
    NodeNotFound,
    NodeSetMismatch,
    PayloadCloneFailed,
    SymmetricDifferenceError,
    UnhashablePayload,
)
from graphdiff.graph.io import graph_from_node_link, graph_to_node_link, load_graph, save_graph
from graphdiff.graph.models import EdgeIdentity, EdgeRecord, FrozenDict, IdentityPayload, NodeRecord
from graphdiff.graph.ops import (
    CloneContext,
    digraph_symmetric_difference,
    graph_symmetric_difference,
    symmetric_difference,
)

__all__ = [
    "CloneContext",
    "DAGWouldCycle",
    "DiGraph",
    "EdgeIdentity",
    "EdgeNotFound",
    "EdgeRecord",
    "EndpointNotFound",
    "FrozenDict",
    "Graph",
    "GraphBackend",
    "GraphError",
    "IdentityPayload",
    "NetworkXBackend",
    "NodeNotFound",
    "NodeRecord",
    "NodeSetMismatch",
    "PayloadCloneFailed",
    "SymmetricDifferenceError",
    "UnhashablePayload",
    "digraph_symmetric_difference",
    "graph_from_node_link",
    "graph_to_node_link",
    "graph_symmetric_difference",
    "load_graph",
    "save_graph",
    "symmetric_difference",
]
