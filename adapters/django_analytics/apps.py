"""
Analytics Django Adapter — App Configuration
==============================================
Thin framework glue. The bus itself does not import Django.
"""

from django.apps import AppConfig


class AnalyticsConfig(AppConfig):
    name = "adapters.django_analytics"
    label = "django_analytics"
    verbose_name = "Storefront Analytics"
