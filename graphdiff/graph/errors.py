"""Exception hierarchy for graph containers and graph operations.

Container lookups raise ``NodeNotFound`` / ``EdgeNotFound``, which are also
``IndexError`` so callers indexing a graph like a sequence keep working.
Algorithm failures derive from ``SymmetricDifferenceError`` and always abort
the whole call.
"""

from typing import Any, Iterable


# =============================================================================
# Container Errors
# =============================================================================

class GraphError(Exception):
    """Base class for all graphdiff errors."""
    pass


class NodeNotFound(GraphError, IndexError):
    """Raised when a node handle is not present in a graph."""

    def __init__(self, node: int) -> None:
        super().__init__(f"No node found for index {node}")
        self.node = node


class EdgeNotFound(GraphError, IndexError):
    """Raised when an edge handle or endpoint pair is not present in a graph."""

    def __init__(self, edge: Any) -> None:
        super().__init__(f"No edge found for {edge}")
        self.edge = edge


class DAGWouldCycle(GraphError):
    """Raised by a cycle-checking DiGraph when an edge would close a cycle."""

    def __init__(self, source: int, target: int) -> None:
        super().__init__(f"Adding edge {source} -> {target} would introduce a cycle")
        self.source = source
        self.target = target


# =============================================================================
# Symmetric Difference Errors
# =============================================================================

class SymmetricDifferenceError(GraphError):
    """Base class for failures of the symmetric difference operation."""
    pass


class EndpointNotFound(SymmetricDifferenceError):
    """A selected edge references a node handle the output graph does not have.

    This happens when an edge that only exists in the second graph points at a
    node handle the first graph never allocated.

    Attributes:
        edge: The offending ``EdgeRecord``.
        side: ``"first"`` or ``"second"``, the graph the edge came from.
        missing: The node handle that could not be translated.
    """

    def __init__(self, edge: Any, side: str, missing: int) -> None:
        super().__init__(
            f"Edge {edge.source} -> {edge.target} from the {side} graph references "
            f"node {missing}, which does not exist in the first graph"
        )
        self.edge = edge
        self.side = side
        self.missing = missing


class PayloadCloneFailed(SymmetricDifferenceError):
    """The clone strategy raised while duplicating a node or edge payload.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, kind: str, handle: int, strategy: str) -> None:
        super().__init__(
            f"Failed to clone payload of {kind} {handle} using strategy {strategy!r}"
        )
        self.kind = kind
        self.handle = handle
        self.strategy = strategy


class NodeSetMismatch(SymmetricDifferenceError):
    """The two graphs do not have the same nodes.

    Only raised when ``enforce_identical_node_sets`` is enabled.

    Attributes:
        mismatched: ``NodeRecord`` entries present in exactly one graph.
    """

    def __init__(self, mismatched: Iterable[Any]) -> None:
        self.mismatched = frozenset(mismatched)
        super().__init__(
            f"The two graphs do not have the same nodes "
            f"({len(self.mismatched)} mismatched entries)"
        )


class UnhashablePayload(SymmetricDifferenceError, TypeError):
    """A payload cannot take part in set comparison because it is unhashable.

    Wrap such payloads in ``IdentityPayload`` to compare them by identity.
    """

    def __init__(self, kind: str, handle: int, payload: Any) -> None:
        super().__init__(
            f"Payload of {kind} {handle} is unhashable ({type(payload).__name__}); "
            f"wrap it in IdentityPayload to compare by identity"
        )
        self.kind = kind
        self.handle = handle
        self.payload = payload


__all__ = [
    "DAGWouldCycle",
    "EdgeNotFound",
    "EndpointNotFound",
    "GraphError",
    "NodeNotFound",
    "NodeSetMismatch",
    "PayloadCloneFailed",
    "SymmetricDifferenceError",
    "UnhashablePayload",
]
