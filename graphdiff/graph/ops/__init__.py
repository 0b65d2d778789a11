"""Operations and algorithms built on top of the graph core."""

from .clone import CLONE_STRATEGIES, CloneContext, share_reference
from .symmetric_difference import (
    copy_nodes,
    digraph_symmetric_difference,
    edge_set_difference,
    graph_symmetric_difference,
    node_set_difference,
    symmetric_difference,
    translate_edges,
)

__all__ = [
    "CLONE_STRATEGIES",
    "CloneContext",
    "copy_nodes",
    "digraph_symmetric_difference",
    "edge_set_difference",
    "graph_symmetric_difference",
    "node_set_difference",
    "share_reference",
    "symmetric_difference",
    "translate_edges",
]
