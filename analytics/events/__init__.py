"""
Analytics Event Bus — Public API
==================================
Event kinds, payload contracts, subscription registry, dispatcher.
"""

from analytics.events.dispatcher import dispatch
from analytics.events.errors import (
    EventBusError,
    InvalidEventKind,
    InvalidParticipantName,
    InvalidSubscriberError,
    PayloadKindMismatch,
)
from analytics.events.kinds import EventKind, normalize_kind
from analytics.events.payloads import (
    EVENT_PAYLOAD_TYPES,
    CartLineUpdatePayload,
    CartUpdatePayload,
    CartViewPayload,
    CollectionPayload,
    CollectionViewPayload,
    CustomEventPayload,
    EventPayload,
    PageViewPayload,
    ProductPayload,
    ProductViewPayload,
    SearchViewPayload,
    check_payload,
)
from analytics.events.registry import (
    Subscription,
    SubscriptionHandle,
    SubscriptionRegistry,
    subscriber_identity,
)

__all__ = [
    "dispatch",
    "EventKind",
    "normalize_kind",
    "SubscriptionRegistry",
    "Subscription",
    "SubscriptionHandle",
    "subscriber_identity",
    "EVENT_PAYLOAD_TYPES",
    "EventPayload",
    "PageViewPayload",
    "ProductPayload",
    "ProductViewPayload",
    "CollectionPayload",
    "CollectionViewPayload",
    "CartViewPayload",
    "SearchViewPayload",
    "CartUpdatePayload",
    "CartLineUpdatePayload",
    "CustomEventPayload",
    "check_payload",
    "EventBusError",
    "InvalidEventKind",
    "InvalidParticipantName",
    "InvalidSubscriberError",
    "PayloadKindMismatch",
]
