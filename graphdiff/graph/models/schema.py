"""Node and edge records exchanged between graph containers and operations.

Records are plain dataclasses. ``EdgeRecord`` deliberately leaves its own
handle out of equality and hashing: two graphs allocate edge handles
independently, so an edge is identified by its endpoints and payload only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, NamedTuple

logger = logging.getLogger("graphdiff.graph.models.schema")


class EdgeIdentity(NamedTuple):
    """Comparison key of an edge: endpoint handles plus payload."""

    source: int
    target: int
    payload: Any


@dataclass(frozen=True)
class NodeRecord:
    """A node handle and its payload.

    Equality covers both fields, so two nodes match only when they share a
    handle and an equal payload.
    """

    handle: int
    payload: Any

    def as_pair(self) -> tuple[int, Any]:
        return (self.handle, self.payload)


@dataclass(frozen=True)
class EdgeRecord:
    """An edge as seen by set operations.

    Attributes:
        source: Source node handle.
        target: Target node handle.
        payload: Edge payload. Must be hashable to take part in set comparison.
        handle: Edge handle inside the owning graph. Not compared.
    """

    source: int
    target: int
    payload: Any
    handle: int = field(default=-1, compare=False)

    def identity(self, directed: bool = True) -> EdgeIdentity:
        """Return the comparison key for this edge.

        For undirected graphs the endpoint pair is unordered, so ``0 - 1`` and
        ``1 - 0`` produce the same key.
        """
        if directed or self.source <= self.target:
            return EdgeIdentity(self.source, self.target, self.payload)
        return EdgeIdentity(self.target, self.source, self.payload)


class IdentityPayload:
    """Wrap a payload so it compares and hashes by object identity.

    Use it for payloads with no natural equality (or unhashable ones such as
    dicts) that should still take part in set comparison. Two wrappers are
    equal only when they wrap the very same object.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityPayload):
            return NotImplemented
        return self.value is other.value

    def __hash__(self) -> int:
        return id(self.value)

    def __repr__(self) -> str:
        return f"IdentityPayload({self.value!r})"


class FrozenDict(dict):
    """Read-only dict that hashes by value.

    Loaded JSON objects are stored as ``FrozenDict`` (and arrays as tuples) so
    attribute payloads compare by content in set operations. It stays a
    ``dict``, so ``json`` serializes it unchanged.
    """

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(frozenset(self.items()))

    def _readonly(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __copy__(self) -> "FrozenDict":
        return self

    def __deepcopy__(self, memo: dict) -> "FrozenDict":
        return self

    def __reduce__(self):
        return (type(self), (dict(self),))

    def __repr__(self) -> str:
        return f"FrozenDict({dict.__repr__(self)})"


def freeze_payload(value: Any) -> Any:
    """Recursively turn JSON containers into hashable equivalents."""
    if isinstance(value, dict):
        return FrozenDict((key, freeze_payload(item)) for key, item in value.items())
    if isinstance(value, list):
        return tuple(freeze_payload(item) for item in value)
    return value


def thaw_payload(value: Any) -> Any:
    """Inverse of ``freeze_payload``: plain dicts and lists again."""
    if isinstance(value, dict):
        return {key: thaw_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw_payload(item) for item in value]
    return value


__all__ = [
    "EdgeIdentity",
    "EdgeRecord",
    "FrozenDict",
    "IdentityPayload",
    "NodeRecord",
    "freeze_payload",
    "thaw_payload",
]
