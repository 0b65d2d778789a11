"""Undirected and directed graph containers.

``Graph`` and ``DiGraph`` are thin, handle-based containers over a
``GraphBackend``. Node and edge handles are stable integers; payloads are
arbitrary Python objects owned by the caller.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from ..errors import DAGWouldCycle, EdgeNotFound, NodeNotFound
from ..models.schema import EdgeRecord, NodeRecord
from .backend import GraphBackend, NetworkXBackend

logger = logging.getLogger("graphdiff.graph.core.graph")


class _BaseGraph:
    """Shared container behavior for ``Graph`` and ``DiGraph``."""

    _directed: bool = True

    def __init__(
        self,
        multigraph: bool = True,
        attrs: Any = None,
        backend: Optional[GraphBackend] = None,
    ) -> None:
        """Initialize an empty graph.

        Args:
            multigraph: When False, adding an edge between two already joined
                nodes updates the existing edge payload instead of adding a
                parallel edge.
            attrs: Free-form graph-level payload.
            backend: Optional graph backend. Defaults to NetworkXBackend.
        """
        if backend is not None and backend.directed != self._directed:
            raise ValueError(
                f"{type(self).__name__} requires a backend with directed={self._directed}"
            )
        self._backend: GraphBackend = backend or NetworkXBackend(directed=self._directed)
        self.multigraph = multigraph
        self.attrs = attrs
        self.node_removed = False

    @property
    def backend(self) -> GraphBackend:
        """Return the underlying graph backend."""
        return self._backend

    @property
    def directed(self) -> bool:
        return self._directed

    def __len__(self) -> int:
        return self._backend.node_count()

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and self._backend.has_node(node)

    def __getitem__(self, node: int) -> Any:
        return self._backend.node_payload(node)

    def __setitem__(self, node: int, payload: Any) -> None:
        self._backend.set_node_payload(node, payload)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.num_nodes()}, edges={self.num_edges()}, "
            f"multigraph={self.multigraph})"
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(self, payload: Any = None) -> int:
        return self._backend.add_node(payload)

    def add_nodes_from(self, payloads: Iterable[Any]) -> List[int]:
        return [self._backend.add_node(payload) for payload in payloads]

    def add_edge(self, source: int, target: int, payload: Any = None) -> int:
        """Add an edge and return its handle.

        Raises:
            NodeNotFound: If either endpoint does not exist.
        """
        if not self.multigraph:
            existing = self._backend.find_edge(source, target)
            if existing is not None:
                self._backend.set_edge_payload(existing, payload)
                return existing
        return self._backend.add_edge(source, target, payload)

    def add_edges_from(self, edges: Iterable[Tuple[int, int, Any]]) -> List[int]:
        return [self.add_edge(source, target, payload) for source, target, payload in edges]

    def add_edges_from_no_data(self, edges: Iterable[Tuple[int, int]]) -> List[int]:
        return [self.add_edge(source, target) for source, target in edges]

    def remove_node(self, node: int) -> None:
        self._backend.remove_node(node)
        self.node_removed = True

    def remove_edge(self, source: int, target: int) -> None:
        """Remove one edge joining source and target."""
        edge = self._backend.find_edge(source, target)
        if edge is None:
            raise EdgeNotFound((source, target))
        self._backend.remove_edge(edge)

    def remove_edge_from_index(self, edge: int) -> None:
        self._backend.remove_edge(edge)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def num_nodes(self) -> int:
        return self._backend.node_count()

    def num_edges(self) -> int:
        return self._backend.edge_count()

    def has_node(self, node: int) -> bool:
        return self._backend.has_node(node)

    def has_edge(self, source: int, target: int) -> bool:
        return self._backend.has_edge(source, target)

    def node_indices(self) -> List[int]:
        return [node for node, _ in self._backend.node_items()]

    def edge_indices(self) -> List[int]:
        return [edge for edge, _, _, _ in self._backend.edge_items()]

    def nodes(self) -> List[Any]:
        """Return node payloads in node order."""
        return [payload for _, payload in self._backend.node_items()]

    def edges(self) -> List[Any]:
        """Return edge payloads in edge order."""
        return [payload for _, _, _, payload in self._backend.edge_items()]

    def edge_list(self) -> List[Tuple[int, int]]:
        return [(source, target) for _, source, target, _ in self._backend.edge_items()]

    def weighted_edge_list(self) -> List[Tuple[int, int, Any]]:
        return [
            (source, target, payload)
            for _, source, target, payload in self._backend.edge_items()
        ]

    def node_items(self) -> List[NodeRecord]:
        return [NodeRecord(node, payload) for node, payload in self._backend.node_items()]

    def edge_items(self) -> List[EdgeRecord]:
        return [
            EdgeRecord(source, target, payload, handle=edge)
            for edge, source, target, payload in self._backend.edge_items()
        ]

    def get_edge_data(self, source: int, target: int) -> Any:
        """Return the payload of the lowest-handle edge joining source and target."""
        edge = self._backend.find_edge(source, target)
        if edge is None:
            raise EdgeNotFound((source, target))
        return self._backend.edge_payload(edge)

    def get_edge_data_by_index(self, edge: int) -> Any:
        return self._backend.edge_payload(edge)

    def get_edge_endpoints_by_index(self, edge: int) -> Tuple[int, int]:
        return self._backend.edge_endpoints(edge)

    def degree(self, node: int) -> int:
        if not self._backend.has_node(node):
            raise NodeNotFound(node)
        return self._backend.native_graph.degree(node)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain summary of the graph, mainly for logging."""
        return {
            "directed": self._directed,
            "multigraph": self.multigraph,
            "nodes": self.num_nodes(),
            "edges": self.num_edges(),
        }


class Graph(_BaseGraph):
    """Undirected graph with stable integer handles."""

    _directed = False


class DiGraph(_BaseGraph):
    """Directed graph with stable integer handles.

    When ``check_cycle`` is enabled, ``add_edge`` refuses edges that would make
    the graph cyclic.
    """

    _directed = True

    def __init__(
        self,
        check_cycle: bool = False,
        multigraph: bool = True,
        attrs: Any = None,
        backend: Optional[GraphBackend] = None,
    ) -> None:
        super().__init__(multigraph=multigraph, attrs=attrs, backend=backend)
        self.check_cycle = check_cycle

    def add_edge(self, source: int, target: int, payload: Any = None) -> int:
        if self.check_cycle and self._would_cycle(source, target):
            raise DAGWouldCycle(source, target)
        return super().add_edge(source, target, payload)

    def _would_cycle(self, source: int, target: int) -> bool:
        for node in (source, target):
            if not self._backend.has_node(node):
                raise NodeNotFound(node)
        if source == target:
            return True
        return nx.has_path(self._backend.native_graph, target, source)

    def successors(self, node: int) -> List[int]:
        if not self._backend.has_node(node):
            raise NodeNotFound(node)
        return list(self._backend.native_graph.successors(node))

    def predecessors(self, node: int) -> List[int]:
        if not self._backend.has_node(node):
            raise NodeNotFound(node)
        return list(self._backend.native_graph.predecessors(node))

    def in_degree(self, node: int) -> int:
        if not self._backend.has_node(node):
            raise NodeNotFound(node)
        return self._backend.native_graph.in_degree(node)

    def out_degree(self, node: int) -> int:
        if not self._backend.has_node(node):
            raise NodeNotFound(node)
        return self._backend.native_graph.out_degree(node)


__all__ = ["DiGraph", "Graph"]
