"""
Tests for analytics.events kinds and payload contracts.
"""

import pytest

from analytics.events import (
    EVENT_PAYLOAD_TYPES,
    CartLineUpdatePayload,
    CustomEventPayload,
    EventKind,
    InvalidEventKind,
    PageViewPayload,
    PayloadKindMismatch,
    ProductPayload,
    ProductViewPayload,
    check_payload,
    normalize_kind,
)


class TestNormalizeKind:
    def test_enum_resolves_to_value(self):
        assert normalize_kind(EventKind.PRODUCT_ADD_TO_CART) == "product_added_to_cart"

    def test_known_string_passes(self):
        assert normalize_kind("search_viewed") == "search_viewed"

    def test_custom_prefix_passes(self):
        assert normalize_kind("custom_wishlist_added") == "custom_wishlist_added"

    @pytest.mark.parametrize("kind", ["", "custom_", "PageViewed", None, 7])
    def test_invalid_kinds(self, kind):
        with pytest.raises(InvalidEventKind) as exc_info:
            normalize_kind(kind)
        assert exc_info.value.kind == kind


class TestPayloadContracts:
    def test_every_known_kind_has_payload_type(self):
        assert set(EVENT_PAYLOAD_TYPES) == {kind.value for kind in EventKind}

    def test_add_and_remove_share_line_payload(self):
        assert EVENT_PAYLOAD_TYPES["product_added_to_cart"] is CartLineUpdatePayload
        assert EVENT_PAYLOAD_TYPES["product_removed_from_cart"] is CartLineUpdatePayload

    def test_untyped_payloads_are_opaque(self):
        check_payload("page_viewed", {"url": "/"})
        check_payload("cart_updated", None)
        check_payload("custom_anything", ["raw"])

    def test_matching_typed_payload_passes(self):
        product = ProductPayload(
            id="gid://shopify/Product/1",
            title="Hat",
            price="20.00",
            vendor="Acme",
            variant_id="gid://shopify/ProductVariant/1",
            variant_title="Red",
        )
        check_payload("product_viewed", ProductViewPayload(products=(product,)))

    def test_custom_kinds_take_custom_payload(self):
        check_payload("custom_signup", CustomEventPayload(data={"plan": "pro"}))

        with pytest.raises(PayloadKindMismatch):
            check_payload("custom_signup", PageViewPayload())

    def test_mismatch_carries_details(self):
        with pytest.raises(PayloadKindMismatch) as exc_info:
            check_payload("cart_updated", PageViewPayload(url="/"))

        assert exc_info.value.kind == "cart_updated"
        assert exc_info.value.expected == "CartUpdatePayload"
        assert exc_info.value.actual == "PageViewPayload"
