"""
Analytics Bus — Session Facade
================================
Composes registry, readiness gate, deferred queue and dispatcher
into the three public operations: subscribe, register, publish.

Flow:
    publish(kind, payload)
        gate OPEN   → dispatch now
        gate CLOSED → park in DeferredQueue (latest wins per kind)

    ReadyHandle.ready()
        last pending participant ready → gate OPEN
        → flush DeferredQueue through the dispatcher, in queue order
        → queue empty

One AnalyticsBus per application session. There is no global
instance; pass the bus (or an AnalyticsContext) to producers and
consumers explicitly.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Optional

from analytics.deferred.queue import DeferredQueue
from analytics.events.dispatcher import dispatch
from analytics.events.kinds import EventKind, normalize_kind
from analytics.events.payloads import check_payload
from analytics.events.registry import SubscriptionHandle, SubscriptionRegistry
from analytics.readiness.gate import GateState, ReadinessGate, ReadyHandle

logger = logging.getLogger("analytics.bus")


class AnalyticsBus:
    """
    In-process analytics event bus with a readiness barrier.

    Usage:
        bus = AnalyticsBus()

        pixel = bus.register("pixel")
        bus.publish(EventKind.PAGE_VIEWED, {"url": "/"})   # parked
        bus.subscribe(EventKind.PAGE_VIEWED, send_beacon)
        pixel.ready()                                       # delivered
    """

    def __init__(self) -> None:
        self._registry = SubscriptionRegistry()
        self._queue = DeferredQueue()
        self._gate = ReadinessGate(on_ready=self._on_participant_ready)

    # ══════════════════════════════════════════════════════════
    # PUBLIC OPERATIONS
    # ══════════════════════════════════════════════════════════

    def subscribe(
        self,
        kind: EventKind | str,
        callback: Callable[[Any], None],
        key: Optional[Hashable] = None,
    ) -> SubscriptionHandle:
        """
        Listen for an event kind.

        Only events delivered after this call reach the callback.
        Events still parked in the queue count as not yet delivered.
        """
        return self._registry.subscribe(kind, callback, key=key)

    def unsubscribe(self, handle: SubscriptionHandle) -> bool:
        return self._registry.unsubscribe(handle)

    def register(self, name: str) -> ReadyHandle:
        """
        Register an integration that must be ready before parked
        events are released. Returns its ready() capability.
        """
        return self._gate.register_participant(name)

    def publish(self, kind: EventKind | str, payload: Any) -> None:
        """
        Publish an event.

        Delivers immediately when the gate is open, otherwise parks
        the payload, replacing any payload already parked for kind.
        The caller cannot observe which path was taken.

        Raises:
            InvalidEventKind:    Unknown kind
            PayloadKindMismatch: Typed payload of another kind
        """
        kind = normalize_kind(kind)
        check_payload(kind, payload)

        if not self._gate.is_open():
            replaced = self._queue.enqueue(kind, payload)
            logger.debug(
                f"Gate closed, parked '{kind}'"
                f"{' (replaced pending payload)' if replaced else ''}; "
                f"waiting on {list(self._gate.pending_participants())}"
            )
            return

        dispatch(kind, payload, self._registry)

    # ══════════════════════════════════════════════════════════
    # FLUSH
    # ══════════════════════════════════════════════════════════

    def _on_participant_ready(self, name: str) -> None:
        if self._gate.is_open() and len(self._queue) > 0:
            self._flush(trigger=name)

    def _flush(self, trigger: str) -> None:
        pending = self._queue.drain()
        results = [
            dispatch(kind, payload, self._registry)
            for kind, payload in pending
        ]

        failed = sum(r["subscribers_failed"] for r in results)
        logger.info(
            f"Gate opened by '{trigger}': flushed {len(results)} "
            f"pending event(s), {failed} subscriber failure(s)"
        )

    # ══════════════════════════════════════════════════════════
    # INSPECTION
    # ══════════════════════════════════════════════════════════

    def is_open(self) -> bool:
        return self._gate.is_open()

    @property
    def state(self) -> GateState:
        return self._gate.state

    @property
    def pending(self) -> DeferredQueue:
        return self._queue
