"""
Analytics Deferred — Pending Event Queue
==========================================
Single-slot-per-kind buffer for events published while the gate
is closed.

Rules:
- At most one pending payload per kind
- A newer payload for a kind overwrites the older one (latest wins)
- Overwriting keeps the kind's original position
- drain() returns kinds in first-enqueued order, then empties
"""

from __future__ import annotations

from typing import Any, Iterator


class DeferredQueue:

    def __init__(self) -> None:
        self._pending: dict[str, Any] = {}

    def enqueue(self, kind: str, payload: Any) -> bool:
        """
        Park a payload for kind.

        Returns True if an older pending payload was replaced.
        """
        replaced = kind in self._pending
        self._pending[kind] = payload
        return replaced

    def drain(self) -> list[tuple[str, Any]]:
        items = list(self._pending.items())
        self._pending.clear()
        return items

    def peek(self, kind: str) -> Any:
        return self._pending.get(kind)

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._pending)

    def __contains__(self, kind: str) -> bool:
        return kind in self._pending

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(list(self._pending.items()))
