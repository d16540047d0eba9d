"""
Analytics Cart — Change Detection
===================================
Turns successive cart snapshots into cart events.

For every new cart snapshot (compared by updatedAt):
- cart_updated                 always
- product_added_to_cart        line is new, or its quantity went up
- product_removed_from_cart    line disappeared, or its quantity went down

Line events are only derived when a previous cart is known.
Cart snapshots are Storefront API shaped mappings:
    {"id": ..., "updatedAt": ..., "lines": {"nodes": [{"id": ..., "quantity": ...}]}}
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from analytics.events.kinds import EventKind
from analytics.events.payloads import CartLineUpdatePayload, CartUpdatePayload
from analytics.shop import ShopAnalytics

logger = logging.getLogger("analytics.cart")

Cart = Mapping[str, Any]


def cart_lines(cart: Optional[Cart]) -> List[Mapping[str, Any]]:
    """Extract line nodes; accepts {'nodes': [...]} or a plain list."""
    if not cart:
        return []
    lines = cart.get("lines") or []
    if isinstance(lines, Mapping):
        lines = lines.get("nodes") or []
    return list(lines)


def _lines_by_id(cart: Optional[Cart]) -> Dict[str, Mapping[str, Any]]:
    return {line["id"]: line for line in cart_lines(cart) if "id" in line}


def _quantity(line: Mapping[str, Any]) -> int:
    return int(line.get("quantity") or 0)


class CartAnalyticsTracker:
    """
    Remembers the last cart seen and publishes the difference
    each time a newer cart arrives.
    """

    def __init__(
        self,
        publish: Callable[[str, Any], None],
        shop: Optional[ShopAnalytics] = None,
        custom_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._publish = publish
        self._shop = shop
        self._custom_data = dict(custom_data or {})
        self._cart: Optional[Cart] = None
        self._prev_cart: Optional[Cart] = None

    @property
    def cart(self) -> Optional[Cart]:
        return self._cart

    @property
    def prev_cart(self) -> Optional[Cart]:
        return self._prev_cart

    def update(self, cart: Optional[Cart]) -> bool:
        """
        Feed a new cart snapshot.

        Returns True if events were published.
        """
        if cart is None:
            return False

        previous = self._cart
        if previous is not None and previous.get("updatedAt") == cart.get("updatedAt"):
            return False

        self._prev_cart = previous
        self._cart = cart

        self._publish(
            EventKind.CART_UPDATED.value,
            CartUpdatePayload(
                shop=self._shop,
                custom_data=self._custom_data,
                cart=cart,
                prev_cart=previous,
            ),
        )

        if previous is not None:
            self._publish_line_changes(previous, cart)
        return True

    def _publish_line_changes(self, previous: Cart, cart: Cart) -> None:
        prev_lines = _lines_by_id(previous)
        current_lines = _lines_by_id(cart)
        added = removed = 0

        for line_id, prev_line in prev_lines.items():
            current_line = current_lines.get(line_id)
            if current_line is None:
                self._publish_line(
                    EventKind.PRODUCT_REMOVED_FROM_CART, previous, cart, None, prev_line
                )
                removed += 1
            elif _quantity(prev_line) < _quantity(current_line):
                self._publish_line(
                    EventKind.PRODUCT_ADD_TO_CART, previous, cart, current_line, prev_line
                )
                added += 1
            elif _quantity(prev_line) > _quantity(current_line):
                self._publish_line(
                    EventKind.PRODUCT_REMOVED_FROM_CART, previous, cart, current_line, prev_line
                )
                removed += 1

        for line_id, current_line in current_lines.items():
            if line_id not in prev_lines:
                self._publish_line(
                    EventKind.PRODUCT_ADD_TO_CART, previous, cart, current_line, None
                )
                added += 1

        logger.debug(
            f"Cart {cart.get('id')} changed: {added} added, {removed} removed"
        )

    def _publish_line(
        self,
        kind: EventKind,
        previous: Cart,
        cart: Cart,
        current_line: Optional[Mapping[str, Any]],
        prev_line: Optional[Mapping[str, Any]],
    ) -> None:
        self._publish(
            kind.value,
            CartLineUpdatePayload(
                shop=self._shop,
                custom_data=self._custom_data,
                cart=cart,
                prev_cart=previous,
                current_line=current_line,
                prev_line=prev_line,
            ),
        )
