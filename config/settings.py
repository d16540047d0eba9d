"""
Storefront Analytics – Django Settings (Infrastructure Only)
=============================================================
Django hosts the analytics bus for server-rendered storefronts.
The bus is framework-free; Django only builds one analytics
context per request and configures logging.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "analytics-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "adapters.django_analytics",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "adapters.django_analytics.middleware.AnalyticsSessionMiddleware",
]

# ── Database ──────────────────────────────────────────────────
# The bus keeps nothing across requests; SQLite satisfies Django only.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Analytics ─────────────────────────────────────────────────
# SHOP stays None until a shop id is configured; CAN_TRACK is
# supplied by the consent integration (callable taking the request).
_SHOP_ID = os.environ.get("PUBLIC_SHOP_ID")

ANALYTICS = {
    "SHOP": (
        {
            "shop_id": _SHOP_ID,
            "accepted_language": os.environ.get("PUBLIC_LANGUAGE", "EN"),
            "currency": os.environ.get("PUBLIC_CURRENCY", "USD"),
            "hydrogen_subchannel_id": os.environ.get("PUBLIC_STOREFRONT_ID", "0"),
        }
        if _SHOP_ID
        else None
    ),
    "CONSENT": {
        "checkout_domain": os.environ.get("PUBLIC_CHECKOUT_DOMAIN"),
        "storefront_access_token": os.environ.get("PUBLIC_STOREFRONT_API_TOKEN"),
    },
    "CUSTOM_DATA": {},
    "CAN_TRACK": None,
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "analytics": {
            "handlers": ["console"],
            "level": os.environ.get("ANALYTICS_LOG_LEVEL", "INFO"),
        },
    },
}
