"""
Analytics Cart — Change Detection Tests
=========================================
"""

from analytics.cart import CartAnalyticsTracker, cart_lines
from analytics.events import CartLineUpdatePayload, CartUpdatePayload
from analytics.shop import ShopAnalytics


SHOP = ShopAnalytics(
    shop_id="gid://shopify/Shop/1",
    accepted_language="EN",
    currency="USD",
)


def _cart(updated_at, *lines):
    return {
        "id": "gid://shopify/Cart/1",
        "updatedAt": updated_at,
        "lines": {
            "nodes": [{"id": line_id, "quantity": qty} for line_id, qty in lines]
        },
    }


def _tracker():
    published = []
    tracker = CartAnalyticsTracker(
        publish=lambda kind, payload: published.append((kind, payload)),
        shop=SHOP,
    )
    return tracker, published


def _kinds(published):
    return [kind for kind, _ in published]


class TestCartLines:
    def test_nodes_shape(self):
        assert cart_lines(_cart("t1", ("l1", 1))) == [{"id": "l1", "quantity": 1}]

    def test_plain_list_shape(self):
        assert cart_lines({"lines": [{"id": "l1"}]}) == [{"id": "l1"}]

    def test_missing_cart(self):
        assert cart_lines(None) == []


class TestCartAnalyticsTracker:
    def test_none_cart_ignored(self):
        tracker, published = _tracker()
        assert tracker.update(None) is False
        assert published == []

    def test_first_cart_publishes_update_only(self):
        tracker, published = _tracker()
        cart = _cart("t1", ("l1", 1))

        assert tracker.update(cart) is True

        assert _kinds(published) == ["cart_updated"]
        payload = published[0][1]
        assert isinstance(payload, CartUpdatePayload)
        assert payload.cart == cart
        assert payload.prev_cart is None
        assert payload.shop == SHOP

    def test_same_updated_at_ignored(self):
        tracker, published = _tracker()
        tracker.update(_cart("t1", ("l1", 1)))

        assert tracker.update(_cart("t1", ("l1", 5))) is False
        assert len(published) == 1

    def test_new_line_is_added(self):
        tracker, published = _tracker()
        tracker.update(_cart("t1", ("l1", 1)))
        published.clear()

        tracker.update(_cart("t2", ("l1", 1), ("l2", 1)))

        assert _kinds(published) == ["cart_updated", "product_added_to_cart"]
        line_payload = published[1][1]
        assert isinstance(line_payload, CartLineUpdatePayload)
        assert line_payload.current_line == {"id": "l2", "quantity": 1}
        assert line_payload.prev_line is None

    def test_quantity_up_is_added(self):
        tracker, published = _tracker()
        tracker.update(_cart("t1", ("l1", 1)))
        published.clear()

        tracker.update(_cart("t2", ("l1", 3)))

        assert _kinds(published) == ["cart_updated", "product_added_to_cart"]
        assert published[1][1].prev_line == {"id": "l1", "quantity": 1}

    def test_quantity_down_is_removed(self):
        tracker, published = _tracker()
        tracker.update(_cart("t1", ("l1", 3)))
        published.clear()

        tracker.update(_cart("t2", ("l1", 2)))

        assert _kinds(published) == ["cart_updated", "product_removed_from_cart"]

    def test_missing_line_is_removed(self):
        tracker, published = _tracker()
        tracker.update(_cart("t1", ("l1", 1), ("l2", 1)))
        published.clear()

        tracker.update(_cart("t2", ("l1", 1)))

        assert _kinds(published) == ["cart_updated", "product_removed_from_cart"]
        removed = published[1][1]
        assert removed.current_line is None
        assert removed.prev_line == {"id": "l2", "quantity": 1}

    def test_unchanged_lines_publish_no_line_events(self):
        tracker, published = _tracker()
        tracker.update(_cart("t1", ("l1", 1)))
        published.clear()

        tracker.update(_cart("t2", ("l1", 1)))

        assert _kinds(published) == ["cart_updated"]

    def test_tracks_previous_cart(self):
        tracker, _ = _tracker()
        first = _cart("t1")
        second = _cart("t2")
        tracker.update(first)
        tracker.update(second)

        assert tracker.cart == second
        assert tracker.prev_cart == first
