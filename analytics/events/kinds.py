"""
Analytics Event Bus — Event Kinds
===================================
The fixed set of trackable occurrences.

Kinds travel through the bus as their string value.
Besides the enumerated kinds, any name starting with
'custom_' is accepted as a custom event.
"""

from __future__ import annotations

from enum import Enum

from analytics.events.errors import InvalidEventKind


CUSTOM_PREFIX = "custom_"


class EventKind(Enum):
    """Known analytics events."""
    PAGE_VIEWED = "page_viewed"
    PRODUCT_VIEWED = "product_viewed"
    COLLECTION_VIEWED = "collection_viewed"
    CART_VIEWED = "cart_viewed"
    SEARCH_VIEWED = "search_viewed"
    CART_UPDATED = "cart_updated"
    PRODUCT_ADD_TO_CART = "product_added_to_cart"
    PRODUCT_REMOVED_FROM_CART = "product_removed_from_cart"
    CUSTOM_EVENT = "custom_event"


KNOWN_KINDS = frozenset(kind.value for kind in EventKind)


def is_custom_kind(kind: str) -> bool:
    return kind.startswith(CUSTOM_PREFIX)


def normalize_kind(kind: EventKind | str) -> str:
    """
    Resolve an EventKind or string to the canonical string key.

    Raises:
        InvalidEventKind: Unknown kind without the custom_ prefix.
    """
    if isinstance(kind, EventKind):
        return kind.value

    if not isinstance(kind, str) or not kind:
        raise InvalidEventKind(kind)

    if kind in KNOWN_KINDS:
        return kind

    if is_custom_kind(kind) and len(kind) > len(CUSTOM_PREFIX):
        return kind

    raise InvalidEventKind(kind)
