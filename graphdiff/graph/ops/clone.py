"""Payload duplication for graph operations.

Operations that build a new graph from existing ones never copy payloads
implicitly: they go through a ``CloneContext`` supplied by the caller. The
context names the clone strategy and holds the lock every clone runs under,
so payloads shared with other threads can be duplicated safely.
"""

import copy
import logging
import threading
from typing import Any, Callable, Dict, Optional

from ..errors import PayloadCloneFailed

logger = logging.getLogger("graphdiff.graph.ops.clone")

Cloner = Callable[[Any], Any]


def share_reference(payload: Any) -> Any:
    """Return the payload itself; input and output graphs share the object."""
    return payload


CLONE_STRATEGIES: Dict[str, Cloner] = {
    "reference": share_reference,
    "copy": copy.copy,
    "deepcopy": copy.deepcopy,
}


class CloneContext:
    """Execution context for payload clones.

    Args:
        strategy: Name of a registered strategy (``reference``, ``copy``,
            ``deepcopy``) or a custom callable taking a payload and returning
            its duplicate.
        lock: Lock held for the duration of each clone. A private
            ``threading.RLock`` is created when omitted.
    """

    def __init__(
        self,
        strategy: "str | Cloner" = "reference",
        lock: Optional[Any] = None,
    ) -> None:
        if callable(strategy):
            self.name = getattr(strategy, "__name__", "custom")
            self._cloner: Cloner = strategy
        else:
            try:
                self._cloner = CLONE_STRATEGIES[strategy]
            except KeyError:
                raise ValueError(
                    f"Unknown clone strategy {strategy!r}. "
                    f"Valid strategies: {sorted(CLONE_STRATEGIES)}"
                ) from None
            self.name = strategy
        self.lock = lock if lock is not None else threading.RLock()
        self.clone_count = 0

    def clone(self, payload: Any, kind: str = "node", handle: int = -1) -> Any:
        """Duplicate one payload while holding the context lock.

        Raises:
            PayloadCloneFailed: If the strategy raises. The original exception
                is chained as ``__cause__``.
        """
        with self.lock:
            try:
                duplicate = self._cloner(payload)
            except Exception as exc:
                logger.debug("Clone of %s %s failed: %s", kind, handle, exc)
                raise PayloadCloneFailed(kind, handle, self.name) from exc
            self.clone_count += 1
            return duplicate

    def __repr__(self) -> str:
        return f"CloneContext(strategy={self.name!r})"


__all__ = ["CLONE_STRATEGIES", "CloneContext", "Cloner", "share_reference"]
