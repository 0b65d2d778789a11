"""Core graph container APIs."""

from .backend import GraphBackend, NetworkXBackend
from .graph import DiGraph, Graph

__all__ = [
    "DiGraph",
    "Graph",
    "GraphBackend",
    "NetworkXBackend",
]
