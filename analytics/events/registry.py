"""
Analytics Event Bus — Subscription Registry
=============================================
Controls which callbacks receive which event kinds.

Rules:
- Subscriptions are keyed by kind, then by subscriber identity
- Identity is structural: two identical callback definitions
  share one slot, so re-subscribing is a no-op, not a duplicate
- Callers may pass an explicit key instead of structural identity
- Subscribing never affects events already delivered
- In-memory only, single-threaded (no locking)
"""

from __future__ import annotations

import functools
import logging
import types
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from analytics.events.errors import InvalidSubscriberError
from analytics.events.kinds import EventKind, normalize_kind

logger = logging.getLogger("analytics.events")


def _code_key(code: types.CodeType) -> tuple:
    # Nested code objects (comprehensions, inner lambdas) carry line
    # numbers; replace them with their own line-free key.
    consts = tuple(
        _code_key(const) if isinstance(const, types.CodeType) else const
        for const in code.co_consts
    )
    return (
        code.co_name,
        code.co_argcount,
        code.co_code,
        consts,
        code.co_names,
        code.co_varnames,
        code.co_freevars,
    )


def _args_key(args: tuple, keywords: dict) -> Hashable:
    key = (args, tuple(sorted(keywords.items())))
    try:
        hash(key)
    except TypeError:
        return (
            tuple(id(arg) for arg in args),
            tuple(sorted((name, id(value)) for name, value in keywords.items())),
        )
    return key


def subscriber_identity(callback: Callable) -> Hashable:
    """
    Derive a structural identity for a callback.

    - Plain functions and lambdas: name + compiled body.
      Identical definitions collide regardless of what they close over.
    - Bound methods: the method's body + the bound instance.
    - Builtin bound methods (list.append): name + the bound instance.
    - functools.partial: identity of the wrapped callable + bound
      arguments (by value when hashable, otherwise by object identity).
    - Anything else (callable objects): object identity. Two instances
      of the same callable class are two subscribers.
    """
    if isinstance(callback, functools.partial):
        return (
            "partial",
            subscriber_identity(callback.func),
            _args_key(callback.args, callback.keywords),
        )

    func = getattr(callback, "__func__", None)
    if func is not None and hasattr(func, "__code__"):
        return ("method", func.__name__, _code_key(func.__code__), id(callback.__self__))

    code = getattr(callback, "__code__", None)
    if code is not None:
        return ("function", callback.__name__, _code_key(code))

    owner = getattr(callback, "__self__", None)
    if owner is not None and hasattr(callback, "__qualname__"):
        return ("builtin", callback.__qualname__, id(owner))

    return ("object", id(callback))


def subscriber_name(callback: Callable) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


@dataclass(frozen=True)
class SubscriptionHandle:
    """Opaque handle returned by subscribe(); pass to unsubscribe()."""

    kind: str
    identity: Hashable


@dataclass(frozen=True)
class Subscription:
    kind: str
    identity: Hashable
    callback: Callable[[Any], None]
    name: str


class SubscriptionRegistry:
    """
    In-memory registry of event subscribers.

    Each kind maps to a dict of identity → Subscription.
    Insertion order is kept but delivery order is not promised.
    """

    def __init__(self):
        self._subscriptions: dict[str, dict[Hashable, Subscription]] = {}

    def subscribe(
        self,
        kind: EventKind | str,
        callback: Callable[[Any], None],
        key: Optional[Hashable] = None,
    ) -> SubscriptionHandle:
        """
        Register a callback for an event kind.

        Args:
            kind:     EventKind or its string value (or custom_*)
            callback: Callable invoked with the payload on delivery
            key:      Explicit subscriber identity, replaces the
                      structural identity when given

        Returns:
            SubscriptionHandle for unsubscribe().

        Raises:
            InvalidEventKind:       Unknown kind
            InvalidSubscriberError: Callback is not callable
        """
        kind = normalize_kind(kind)

        if not callable(callback):
            raise InvalidSubscriberError(kind, callback)

        identity = ("key", key) if key is not None else subscriber_identity(callback)
        name = subscriber_name(callback)

        slots = self._subscriptions.setdefault(kind, {})
        if identity in slots:
            logger.debug(f"Subscriber already registered: {name} → {kind}")
        else:
            slots[identity] = Subscription(
                kind=kind,
                identity=identity,
                callback=callback,
                name=name,
            )
            logger.info(f"Subscriber registered: {name} → {kind}")

        return SubscriptionHandle(kind=kind, identity=identity)

    def unsubscribe(self, handle: SubscriptionHandle) -> bool:
        """Remove a subscription. Returns False if it was not present."""
        slots = self._subscriptions.get(handle.kind)
        if not slots or handle.identity not in slots:
            return False

        removed = slots.pop(handle.identity)
        if not slots:
            del self._subscriptions[handle.kind]

        logger.info(f"Subscriber removed: {removed.name} → {handle.kind}")
        return True

    def subscribers_for(self, kind: EventKind | str) -> list[Subscription]:
        """
        Snapshot of current subscribers for a kind.
        Returns empty list if no subscribers (not an error).
        """
        kind = normalize_kind(kind)
        return list(self._subscriptions.get(kind, {}).values())

    def has_subscribers(self, kind: EventKind | str) -> bool:
        return bool(self._subscriptions.get(normalize_kind(kind)))

    def subscriber_count(self, kind: EventKind | str) -> int:
        return len(self._subscriptions.get(normalize_kind(kind), {}))

    def get_all_kinds(self) -> frozenset[str]:
        """Return all kinds with registered subscribers."""
        return frozenset(self._subscriptions.keys())
