"""Graph record models."""

from .schema import (
    EdgeIdentity,
    EdgeRecord,
    FrozenDict,
    IdentityPayload,
    NodeRecord,
    freeze_payload,
    thaw_payload,
)

__all__ = [
    "EdgeIdentity",
    "EdgeRecord",
    "FrozenDict",
    "IdentityPayload",
    "NodeRecord",
    "freeze_payload",
    "thaw_payload",
]
