"""
Analytics Provider — Session Context
======================================
The value handed to producers (views, cart tracking) and
consumers (pixels, beacons, SDKs) for one application session.

The context owns no bus logic. It:
- gates publish() behind the external can_track() predicate,
  checked at call time
- forwards subscribe / unsubscribe / register to the bus
- tracks cart snapshots and publishes cart events
- carries shop identity, consent and custom data

DEFAULT_ANALYTICS_CONTEXT is inert: it tracks nothing, delivers
nothing, and its register() hands out a ready() that does nothing.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, Mapping, Optional

from analytics.bus.session import AnalyticsBus
from analytics.cart.tracker import Cart, CartAnalyticsTracker
from analytics.events.kinds import EventKind
from analytics.events.registry import SubscriptionHandle
from analytics.provider.consent import Consent, normalize_consent
from analytics.shop import ShopAnalytics

logger = logging.getLogger("analytics.provider")


def _never_track() -> bool:
    return False


class _NoopReadyHandle:
    def __init__(self, name: str) -> None:
        self.name = name

    def ready(self) -> None:
        return None


class AnalyticsContext:

    def __init__(
        self,
        bus: Optional[AnalyticsBus],
        can_track: Callable[[], bool] = _never_track,
        shop: Optional[ShopAnalytics] = None,
        consent: Optional[Consent] = None,
        custom_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._bus = bus
        self._can_track = can_track
        self.shop = shop
        self.consent = consent or Consent()
        self._custom_data = dict(custom_data or {})
        self._cart_tracker = CartAnalyticsTracker(
            publish=self.publish,
            shop=shop,
            custom_data=self._custom_data,
        )

    @property
    def bus(self) -> Optional[AnalyticsBus]:
        return self._bus

    @property
    def custom_data(self) -> Mapping[str, Any]:
        """Read-only view; contexts may be shared between callers."""
        return MappingProxyType(self._custom_data)

    def can_track(self) -> bool:
        return bool(self._can_track())

    # ══════════════════════════════════════════════════════════
    # BUS OPERATIONS
    # ══════════════════════════════════════════════════════════

    def publish(self, kind: EventKind | str, payload: Any) -> None:
        """Publish through the bus if tracking is allowed, else drop."""
        if self._bus is None:
            return
        if not self.can_track():
            logger.debug(f"Tracking not allowed, dropped '{kind}'")
            return
        self._bus.publish(kind, payload)

    def subscribe(
        self,
        kind: EventKind | str,
        callback: Callable[[Any], None],
        key: Optional[Hashable] = None,
    ) -> Optional[SubscriptionHandle]:
        if self._bus is None:
            return None
        return self._bus.subscribe(kind, callback, key=key)

    def unsubscribe(self, handle: Optional[SubscriptionHandle]) -> bool:
        if self._bus is None or handle is None:
            return False
        return self._bus.unsubscribe(handle)

    def register(self, name: str):
        if self._bus is None:
            return _NoopReadyHandle(name)
        return self._bus.register(name)

    # ══════════════════════════════════════════════════════════
    # CART
    # ══════════════════════════════════════════════════════════

    def update_cart(self, cart: Optional[Cart]) -> bool:
        """Feed the latest cart; publishes cart events on change."""
        if self._bus is None or self.shop is None:
            return False
        return self._cart_tracker.update(cart)

    @property
    def cart(self) -> Optional[Cart]:
        return self._cart_tracker.cart

    @property
    def prev_cart(self) -> Optional[Cart]:
        return self._cart_tracker.prev_cart


DEFAULT_ANALYTICS_CONTEXT = AnalyticsContext(bus=None)


def build_analytics_context(
    shop: Optional[ShopAnalytics],
    consent: Optional[Consent] = None,
    can_track: Optional[Callable[[], bool]] = None,
    custom_data: Optional[Dict[str, Any]] = None,
    bus: Optional[AnalyticsBus] = None,
    cart: Optional[Cart] = None,
) -> AnalyticsContext:
    """
    Construct the analytics context for one application session.

    Args:
        shop:        Resolved shop identity, or None if not yet known.
        consent:     Consent configuration; validated and defaulted.
        can_track:   Consent predicate; defaults to never tracking.
        custom_data: Extra data exposed to every consumer.
        bus:         Existing bus to reuse; a fresh one by default.
        cart:        Initial cart snapshot.
    """
    context = AnalyticsContext(
        bus=bus if bus is not None else AnalyticsBus(),
        can_track=can_track or _never_track,
        shop=shop,
        consent=normalize_consent(consent or Consent(), shop),
        custom_data=custom_data,
    )
    if cart is not None:
        context.update_cart(cart)
    return context
