"""
Analytics Django Adapter Wiring
================================
Builds one AnalyticsContext per request from settings.ANALYTICS.

Settings shape:
    ANALYTICS = {
        "SHOP": {"shop_id": ..., "accepted_language": ..., "currency": ...},
        "CONSENT": {"checkout_domain": ..., "storefront_access_token": ...},
        "CUSTOM_DATA": {...},
        "CAN_TRACK": callable(request) -> bool,
    }

Every key is optional. Without CAN_TRACK nothing is tracked.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from django.conf import settings
from django.http import HttpRequest

from analytics.provider import (
    AnalyticsContext,
    Consent,
    ShopAnalytics,
    build_analytics_context,
)


def _analytics_settings() -> Mapping[str, Any]:
    return getattr(settings, "ANALYTICS", None) or {}


def _build_shop(config: Optional[Mapping[str, Any]]) -> Optional[ShopAnalytics]:
    if not config:
        return None
    return ShopAnalytics(**config)


def _build_consent(config: Optional[Mapping[str, Any]]) -> Consent:
    return Consent(**(config or {}))


def build_context_for_request(request: HttpRequest) -> AnalyticsContext:
    config = _analytics_settings()
    can_track_for_request = config.get("CAN_TRACK")

    def can_track() -> bool:
        if can_track_for_request is None:
            return False
        return bool(can_track_for_request(request))

    return build_analytics_context(
        shop=_build_shop(config.get("SHOP")),
        consent=_build_consent(config.get("CONSENT")),
        can_track=can_track,
        custom_data=config.get("CUSTOM_DATA"),
    )
