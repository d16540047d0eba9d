"""
Tests — Django analytics adapter
===================================
Per-request context construction from settings.ANALYTICS.
"""

from django.http import HttpResponse

from adapters.django_analytics.middleware import AnalyticsSessionMiddleware
from adapters.django_analytics.wiring import build_context_for_request
from analytics.provider import AnalyticsContext, reset_once


SHOP_CONFIG = {
    "shop_id": "gid://shopify/Shop/1",
    "accepted_language": "EN",
    "currency": "USD",
}
CONSENT_CONFIG = {
    "checkout_domain": "checkout.example.com",
    "storefront_access_token": "public-token",
}


def _consent_cookie(request):
    return request.COOKIES.get("tracking_consent") == "yes"


class TestBuildContextForRequest:
    def test_shop_and_consent_from_settings(self, rf, settings):
        settings.ANALYTICS = {
            "SHOP": SHOP_CONFIG,
            "CONSENT": CONSENT_CONFIG,
            "CUSTOM_DATA": {"channel": "web"},
        }

        context = build_context_for_request(rf.get("/"))

        assert context.shop.shop_id == "gid://shopify/Shop/1"
        assert context.consent.country == "US"
        assert context.custom_data == {"channel": "web"}

    def test_without_can_track_nothing_is_tracked(self, rf, settings):
        settings.ANALYTICS = {"SHOP": SHOP_CONFIG, "CONSENT": CONSENT_CONFIG}

        context = build_context_for_request(rf.get("/"))

        assert context.can_track() is False

    def test_can_track_receives_request(self, rf, settings):
        settings.ANALYTICS = {
            "SHOP": SHOP_CONFIG,
            "CONSENT": CONSENT_CONFIG,
            "CAN_TRACK": _consent_cookie,
        }
        request = rf.get("/")
        request.COOKIES["tracking_consent"] = "yes"

        context = build_context_for_request(request)

        assert context.can_track() is True

    def test_missing_settings_give_shopless_context(self, rf, settings):
        reset_once()
        del settings.ANALYTICS

        context = build_context_for_request(rf.get("/"))

        assert context.shop is None
        assert context.can_track() is False


class TestAnalyticsSessionMiddleware:
    def test_attaches_fresh_context_per_request(self, rf, settings):
        settings.ANALYTICS = {
            "SHOP": SHOP_CONFIG,
            "CONSENT": CONSENT_CONFIG,
            "CAN_TRACK": lambda request: True,
        }
        seen = []

        def view(request):
            seen.append(request.analytics)
            return HttpResponse("ok")

        middleware = AnalyticsSessionMiddleware(view)
        middleware(rf.get("/"))
        middleware(rf.get("/"))

        assert all(isinstance(context, AnalyticsContext) for context in seen)
        assert seen[0].bus is not seen[1].bus

    def test_events_delivered_within_request(self, rf, settings):
        settings.ANALYTICS = {
            "SHOP": SHOP_CONFIG,
            "CONSENT": CONSENT_CONFIG,
            "CAN_TRACK": lambda request: True,
        }
        received = []

        def view(request):
            pixel = request.analytics.register("pixel")
            request.analytics.subscribe("page_viewed", received.append)
            request.analytics.publish("page_viewed", {"url": request.path})
            pixel.ready()
            return HttpResponse("ok")

        response = AnalyticsSessionMiddleware(view)(rf.get("/products/hat"))

        assert response.status_code == 200
        assert received == [{"url": "/products/hat"}]
