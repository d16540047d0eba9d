from analytics.deferred.queue import DeferredQueue

__all__ = ["DeferredQueue"]
