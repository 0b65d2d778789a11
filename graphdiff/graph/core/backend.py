"""Graph backend abstraction layer.

Wraps NetworkX multigraphs behind a handle-based interface: nodes and edges
are addressed by integer handles allocated by the backend, and payloads are
opaque Python objects.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional, Tuple

import networkx as nx

from ..errors import EdgeNotFound, NodeNotFound

logger = logging.getLogger("graphdiff.graph.core.backend")


class GraphBackend(ABC):
    """Abstract graph backend protocol.

    Handles are never reused: once a node or edge is removed its handle stays
    retired for the lifetime of the backend.
    """

    @property
    @abstractmethod
    def directed(self) -> bool:
        """Whether edges are directed."""
        pass

    @property
    @abstractmethod
    def native_graph(self) -> Any:
        """Get native graph object for advanced operations."""
        pass

    @abstractmethod
    def add_node(self, payload: Any = None) -> int:
        """Add node and return its handle."""
        pass

    @abstractmethod
    def insert_node(self, node: int, payload: Any = None) -> None:
        """Add node under an explicit, unused handle."""
        pass

    @abstractmethod
    def add_edge(self, source: int, target: int, payload: Any = None) -> int:
        """Add edge and return its handle."""
        pass

    @abstractmethod
    def remove_node(self, node: int) -> None:
        """Remove node together with its incident edges."""
        pass

    @abstractmethod
    def remove_edge(self, edge: int) -> None:
        """Remove edge by handle."""
        pass

    @abstractmethod
    def has_node(self, node: int) -> bool:
        """Check if node exists."""
        pass

    @abstractmethod
    def has_edge(self, source: int, target: int) -> bool:
        """Check if any edge joins source and target."""
        pass

    @abstractmethod
    def find_edge(self, source: int, target: int) -> Optional[int]:
        """Return the lowest edge handle joining source and target, if any."""
        pass

    @abstractmethod
    def node_payload(self, node: int) -> Any:
        """Get node payload."""
        pass

    @abstractmethod
    def set_node_payload(self, node: int, payload: Any) -> None:
        """Replace node payload."""
        pass

    @abstractmethod
    def edge_payload(self, edge: int) -> Any:
        """Get edge payload."""
        pass

    @abstractmethod
    def set_edge_payload(self, edge: int, payload: Any) -> None:
        """Replace edge payload."""
        pass

    @abstractmethod
    def edge_endpoints(self, edge: int) -> Tuple[int, int]:
        """Get (source, target) of an edge."""
        pass

    @abstractmethod
    def node_items(self) -> Iterator[Tuple[int, Any]]:
        """Iterate over (handle, payload) in insertion order."""
        pass

    @abstractmethod
    def edge_items(self) -> Iterator[Tuple[int, int, int, Any]]:
        """Iterate over (handle, source, target, payload) in handle order."""
        pass

    @abstractmethod
    def node_count(self) -> int:
        """Get number of nodes."""
        pass

    @abstractmethod
    def edge_count(self) -> int:
        """Get number of edges."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all nodes and edges."""
        pass


class NetworkXBackend(GraphBackend):
    """NetworkX-based in-memory graph backend.

    Nodes are stored under their handle with a ``payload`` attribute. Edges
    use their handle as the networkx edge key, and a side index maps each edge
    handle to the endpoints it was created with so endpoint lookup is O(1) and
    keeps the original orientation for undirected graphs.
    """

    def __init__(self, directed: bool = True) -> None:
        """Initialize backend with a NetworkX MultiDiGraph or MultiGraph."""
        self._directed = directed
        self._graph = nx.MultiDiGraph() if directed else nx.MultiGraph()
        self._edges: Dict[int, Tuple[int, int]] = {}
        self._next_node = 0
        self._next_edge = 0
        logger.debug("NetworkXBackend initialized (directed=%s)", directed)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def native_graph(self) -> nx.MultiGraph:
        return self._graph

    def add_node(self, payload: Any = None) -> int:
        node = self._next_node
        self._next_node += 1
        self._graph.add_node(node, payload=payload)
        return node

    def insert_node(self, node: int, payload: Any = None) -> None:
        """Add a node under an explicit handle.

        Used when restoring a serialized graph. The handle counter moves past
        ``node`` so later allocations never collide with it.
        """
        if self._graph.has_node(node):
            raise ValueError(f"Node {node} already exists")
        self._graph.add_node(node, payload=payload)
        self._next_node = max(self._next_node, node + 1)

    def add_edge(self, source: int, target: int, payload: Any = None) -> int:
        for node in (source, target):
            if not self._graph.has_node(node):
                raise NodeNotFound(node)
        edge = self._next_edge
        self._next_edge += 1
        self._graph.add_edge(source, target, key=edge, payload=payload)
        self._edges[edge] = (source, target)
        return edge

    def remove_node(self, node: int) -> None:
        if not self._graph.has_node(node):
            raise NodeNotFound(node)
        incident = {key for _, _, key in self._graph.edges(node, keys=True)}
        if self._directed:
            incident.update(key for _, _, key in self._graph.in_edges(node, keys=True))
        for edge in incident:
            del self._edges[edge]
        self._graph.remove_node(node)

    def remove_edge(self, edge: int) -> None:
        source, target = self.edge_endpoints(edge)
        self._graph.remove_edge(source, target, key=edge)
        del self._edges[edge]

    def has_node(self, node: int) -> bool:
        return self._graph.has_node(node)

    def has_edge(self, source: int, target: int) -> bool:
        return self._graph.has_edge(source, target)

    def find_edge(self, source: int, target: int) -> Optional[int]:
        keys = self._graph.get_edge_data(source, target)
        if not keys:
            return None
        return min(keys)

    def node_payload(self, node: int) -> Any:
        try:
            return self._graph.nodes[node]["payload"]
        except KeyError:
            raise NodeNotFound(node) from None

    def set_node_payload(self, node: int, payload: Any) -> None:
        if not self._graph.has_node(node):
            raise NodeNotFound(node)
        self._graph.nodes[node]["payload"] = payload

    def edge_payload(self, edge: int) -> Any:
        source, target = self.edge_endpoints(edge)
        return self._graph.edges[source, target, edge]["payload"]

    def set_edge_payload(self, edge: int, payload: Any) -> None:
        source, target = self.edge_endpoints(edge)
        self._graph.edges[source, target, edge]["payload"] = payload

    def edge_endpoints(self, edge: int) -> Tuple[int, int]:
        try:
            return self._edges[edge]
        except KeyError:
            raise EdgeNotFound(edge) from None

    def node_items(self) -> Iterator[Tuple[int, Any]]:
        return iter(self._graph.nodes(data="payload"))

    def edge_items(self) -> Iterator[Tuple[int, int, int, Any]]:
        for edge, (source, target) in self._edges.items():
            yield edge, source, target, self._graph.edges[source, target, edge]["payload"]

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return len(self._edges)

    def clear(self) -> None:
        self._graph.clear()
        self._edges.clear()
        logger.debug("Graph backend cleared")
