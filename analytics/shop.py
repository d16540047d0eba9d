"""
Analytics — Shop Identity
===========================
Shop-level analytics identity attached to every event payload.

Resolving the shop (storefront query) happens elsewhere; this
module only models the result and maps an already-fetched
response into it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


DEFAULT_SUBCHANNEL_ID = "0"


@dataclass(frozen=True)
class ShopAnalytics:
    shop_id: str
    accepted_language: str
    currency: str
    hydrogen_subchannel_id: str = DEFAULT_SUBCHANNEL_ID

    def __post_init__(self):
        if not self.shop_id or not isinstance(self.shop_id, str):
            raise ValueError("shop_id must be a non-empty string.")


def shop_analytics_from_query(
    data: Mapping[str, Any],
    public_storefront_id: str = DEFAULT_SUBCHANNEL_ID,
) -> ShopAnalytics:
    """
    Build ShopAnalytics from a storefront shop/localization response.

    Expected shape:
        {
            "shop": {"id": ...},
            "localization": {
                "language": {"isoCode": ...},
                "country": {"currency": {"isoCode": ...}},
            },
        }

    Raises:
        KeyError: Response is missing a required field.
    """
    localization = data["localization"]
    return ShopAnalytics(
        shop_id=data["shop"]["id"],
        accepted_language=localization["language"]["isoCode"],
        currency=localization["country"]["currency"]["isoCode"],
        hydrogen_subchannel_id=public_storefront_id,
    )
