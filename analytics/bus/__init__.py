"""
Analytics Bus — Public API
============================
"""

from analytics.bus.session import AnalyticsBus

__all__ = ["AnalyticsBus"]
