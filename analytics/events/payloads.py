"""
Analytics Event Bus — Payload Contracts
=========================================
One immutable payload type per event kind family.

The bus treats payloads as opaque. The only check made at the
publish boundary is that a typed payload object matches its kind:
publishing a CartUpdatePayload as 'page_viewed' is a programming
error. Raw mappings and other untyped data are accepted for any kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from analytics.events.errors import PayloadKindMismatch
from analytics.events.kinds import EventKind, is_custom_kind
from analytics.shop import ShopAnalytics


# ══════════════════════════════════════════════════════════════
# SHARED FIELDS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class EventPayload:
    """Fields every analytics event carries."""

    shop: Optional[ShopAnalytics] = None
    url: str = ""
    custom_data: Dict[str, Any] = field(default_factory=dict)


# ══════════════════════════════════════════════════════════════
# VIEW PAYLOADS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ProductPayload:
    id: str
    title: str
    price: str
    vendor: str
    variant_id: str
    variant_title: str
    quantity: int = 1
    sku: Optional[str] = None
    product_type: Optional[str] = None


@dataclass(frozen=True)
class CollectionPayload:
    id: str
    handle: str


@dataclass(frozen=True)
class PageViewPayload(EventPayload):
    pass


@dataclass(frozen=True)
class ProductViewPayload(EventPayload):
    products: Tuple[ProductPayload, ...] = ()


@dataclass(frozen=True)
class CollectionViewPayload(EventPayload):
    collection: Optional[CollectionPayload] = None


@dataclass(frozen=True)
class CartViewPayload(EventPayload):
    cart: Optional[Mapping[str, Any]] = None
    prev_cart: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class SearchViewPayload(EventPayload):
    search_term: str = ""
    search_results: Any = None


# ══════════════════════════════════════════════════════════════
# CART PAYLOADS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CartUpdatePayload(EventPayload):
    cart: Optional[Mapping[str, Any]] = None
    prev_cart: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class CartLineUpdatePayload(EventPayload):
    cart: Optional[Mapping[str, Any]] = None
    prev_cart: Optional[Mapping[str, Any]] = None
    current_line: Optional[Mapping[str, Any]] = None
    prev_line: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class CustomEventPayload(EventPayload):
    data: Dict[str, Any] = field(default_factory=dict)


# ══════════════════════════════════════════════════════════════
# KIND → PAYLOAD TYPE
# ══════════════════════════════════════════════════════════════

EVENT_PAYLOAD_TYPES: Dict[str, type] = {
    EventKind.PAGE_VIEWED.value: PageViewPayload,
    EventKind.PRODUCT_VIEWED.value: ProductViewPayload,
    EventKind.COLLECTION_VIEWED.value: CollectionViewPayload,
    EventKind.CART_VIEWED.value: CartViewPayload,
    EventKind.SEARCH_VIEWED.value: SearchViewPayload,
    EventKind.CART_UPDATED.value: CartUpdatePayload,
    EventKind.PRODUCT_ADD_TO_CART.value: CartLineUpdatePayload,
    EventKind.PRODUCT_REMOVED_FROM_CART.value: CartLineUpdatePayload,
    EventKind.CUSTOM_EVENT.value: CustomEventPayload,
}


def payload_type_for(kind: str) -> type:
    """Expected payload type for a normalized kind."""
    expected = EVENT_PAYLOAD_TYPES.get(kind)
    if expected is None and is_custom_kind(kind):
        return CustomEventPayload
    return expected


def check_payload(kind: str, payload: Any) -> None:
    """
    Verify a payload may be published under kind.

    Anything that is not an EventPayload (mappings, None, plain
    objects) passes as opaque data.

    Raises:
        PayloadKindMismatch: Typed payload of another kind.
    """
    if not isinstance(payload, EventPayload):
        return

    expected = payload_type_for(kind)
    if type(payload) is not expected:
        raise PayloadKindMismatch(
            kind=kind,
            expected=expected.__name__,
            actual=type(payload).__name__,
        )
