"""
Analytics Provider — Public API
=================================
Session context, consent configuration, shop identity.
"""

from analytics.provider.consent import Consent, is_mock_shop, normalize_consent
from analytics.provider.context import (
    DEFAULT_ANALYTICS_CONTEXT,
    AnalyticsContext,
    build_analytics_context,
)
from analytics.provider.warnings import error_once, reset_once, warn_once
from analytics.shop import ShopAnalytics, shop_analytics_from_query

__all__ = [
    "AnalyticsContext",
    "DEFAULT_ANALYTICS_CONTEXT",
    "build_analytics_context",
    "Consent",
    "normalize_consent",
    "is_mock_shop",
    "ShopAnalytics",
    "shop_analytics_from_query",
    "warn_once",
    "error_once",
    "reset_once",
]
