from analytics.cart.tracker import CartAnalyticsTracker, cart_lines

__all__ = ["CartAnalyticsTracker", "cart_lines"]
