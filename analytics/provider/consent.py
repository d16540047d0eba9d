"""
Analytics Provider — Consent Configuration
============================================
The consent configuration handed to the privacy collaborator.

The bus never evaluates consent. It only sees the resulting
can_track() predicate. This module checks that the identifiers
the privacy collaborator needs are present and fills in regional
defaults; missing identifiers are logged once, never raised.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

from analytics.provider.warnings import error_once, warn_once
from analytics.shop import ShopAnalytics


DEFAULT_COUNTRY = "US"
DEFAULT_LANGUAGE = "EN"

MOCK_SHOP_PATTERN = re.compile(r"/68817551382$")

MOCK_SHOP_WARNING = (
    "[analytics:provider] - Mock shop is used. "
    "Analytics will not work properly."
)


@dataclass(frozen=True)
class Consent:
    checkout_domain: Optional[str] = None
    storefront_access_token: Optional[str] = None
    with_privacy_banner: Optional[bool] = None
    country: Optional[str] = None
    language: Optional[str] = None


def missing_setting_message(field_name: str, env_var: str) -> str:
    return (
        f"[analytics:provider] - {field_name} is required. "
        f"Make sure {env_var} is defined in your environment variables."
    )


def is_mock_shop(shop: ShopAnalytics) -> bool:
    return bool(MOCK_SHOP_PATTERN.search(shop.shop_id))


def normalize_consent(
    consent: Consent,
    shop: Optional[ShopAnalytics],
) -> Consent:
    """
    Validate consent against the resolved shop and apply defaults.

    - No shop yet: consent returned untouched.
    - Mock shop: warning logged once, consent untouched.
    - Real shop: missing checkout domain / access token logged once;
      country, language and privacy banner defaults applied.
    """
    if shop is None:
        return consent

    if is_mock_shop(shop):
        warn_once(MOCK_SHOP_WARNING)
        return consent

    if not consent.checkout_domain:
        error_once(
            missing_setting_message(
                "consent.checkout_domain", "PUBLIC_CHECKOUT_DOMAIN"
            )
        )

    if not consent.storefront_access_token:
        error_once(
            missing_setting_message(
                "consent.storefront_access_token", "PUBLIC_STOREFRONT_API_TOKEN"
            )
        )

    return replace(
        consent,
        country=consent.country or DEFAULT_COUNTRY,
        language=consent.language or DEFAULT_LANGUAGE,
        with_privacy_banner=(
            False
            if consent.with_privacy_banner is None
            else consent.with_privacy_banner
        ),
    )
