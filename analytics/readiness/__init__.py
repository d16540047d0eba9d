"""
Analytics Readiness — Public API
==================================
"""

from analytics.readiness.gate import GateState, ReadinessGate, ReadyHandle

__all__ = [
    "GateState",
    "ReadinessGate",
    "ReadyHandle",
]
