"""
Analytics Django Adapter — Session Middleware
===============================================
Attaches a fresh AnalyticsContext to every request as
request.analytics. The context, and the bus inside it, live
exactly as long as the request.
"""

from __future__ import annotations

from typing import Callable

from django.http import HttpRequest, HttpResponse

from adapters.django_analytics.wiring import build_context_for_request


class AnalyticsSessionMiddleware:

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.analytics = build_context_for_request(request)
        return self.get_response(request)
