"""
Storefront Analytics Bus
=========================
In-process analytics event bus with a readiness barrier.

Producers publish. Integrations register, subscribe, and call
ready() once set up. Nothing is delivered until every registered
integration is ready; one failing subscriber never affects another.
"""

from analytics.bus import AnalyticsBus
from analytics.events import (
    EventBusError,
    EventKind,
    InvalidEventKind,
    PayloadKindMismatch,
    SubscriptionHandle,
)
from analytics.provider import (
    DEFAULT_ANALYTICS_CONTEXT,
    AnalyticsContext,
    Consent,
    ShopAnalytics,
    build_analytics_context,
)
from analytics.readiness import GateState, ReadyHandle

__all__ = [
    "AnalyticsBus",
    "AnalyticsContext",
    "DEFAULT_ANALYTICS_CONTEXT",
    "build_analytics_context",
    "Consent",
    "ShopAnalytics",
    "EventKind",
    "GateState",
    "ReadyHandle",
    "SubscriptionHandle",
    "EventBusError",
    "InvalidEventKind",
    "PayloadKindMismatch",
]
