"""
Analytics Event Bus — Dispatcher
==================================
Delivers one event to every current subscriber of its kind.

Dispatch behavior:
1. Snapshot subscribers for the kind
2. Invoke each callback with the payload
3. Catch subscriber exceptions per callback
4. Log failure with kind and subscriber identity
5. Continue to next subscriber

Subscriber failure must NOT:
- Break delivery to other subscribers
- Break delivery of other pending kinds in the same flush
- Reach the publisher

Delivery order across subscribers is not part of the contract.
"""

import logging
from typing import Any

from analytics.events.registry import SubscriptionRegistry

logger = logging.getLogger("analytics.events")


def dispatch(kind: str, payload: Any, registry: SubscriptionRegistry) -> dict:
    """
    Dispatch a payload to all subscribers of kind.

    Args:
        kind:     Normalized event kind.
        payload:  Opaque event payload.
        registry: SubscriptionRegistry holding the callbacks.

    Returns:
        dict with dispatch results:
        {
            'kind': str,
            'subscribers_notified': int,
            'subscribers_failed': int,
            'failures': list[dict]
        }

    This function NEVER raises exceptions raised by subscribers.
    """
    subscriptions = registry.subscribers_for(kind)

    result = {
        "kind": kind,
        "subscribers_notified": 0,
        "subscribers_failed": 0,
        "failures": [],
    }

    if not subscriptions:
        logger.debug(f"No subscribers for '{kind}'")
        return result

    for subscription in subscriptions:
        try:
            subscription.callback(payload)
            result["subscribers_notified"] += 1

        except Exception as exc:
            result["subscribers_failed"] += 1
            result["failures"].append({
                "subscriber": subscription.name,
                "identity": subscription.identity,
                "error": str(exc),
                "error_type": type(exc).__name__,
            })

            logger.error(
                f"Analytics publish error: subscriber {subscription.name} "
                f"(identity {subscription.identity!r}) failed for '{kind}': {exc}",
                exc_info=True,
            )

    logger.debug(
        f"Dispatch complete: {kind} — "
        f"{result['subscribers_notified']} notified, "
        f"{result['subscribers_failed']} failed"
    )

    return result
