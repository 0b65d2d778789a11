"""graphdiff: symmetric difference of attributed graphs."""

from graphdiff.config import SymmetricDifferenceConfig
from graphdiff.graph import (
    CloneContext,
    DiGraph,
    Graph,
    IdentityPayload,
    digraph_symmetric_difference,
    graph_symmetric_difference,
    symmetric_difference,
)

__version__ = "0.1.0"

__all__ = [
    "CloneContext",
    "DiGraph",
    "Graph",
    "IdentityPayload",
    "SymmetricDifferenceConfig",
    "digraph_symmetric_difference",
    "graph_symmetric_difference",
    "symmetric_difference",
]
