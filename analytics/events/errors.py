"""
Analytics Event Bus — Errors
==============================
Error types raised at the bus boundary.

Boundary errors only: a bad kind, a payload of the wrong shape,
a non-callable subscriber, a nameless participant.
Delivery itself never raises: subscriber failures are logged
by the dispatcher and swallowed there.
"""


class EventBusError(Exception):
    """Base error for Event Bus operations."""
    pass


class InvalidEventKind(EventBusError):
    """Event kind is neither a known kind nor a custom_* kind."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(
            f"Event kind '{kind}' is not a known analytics event "
            f"and does not start with 'custom_'."
        )


class PayloadKindMismatch(EventBusError):
    """Typed payload object published under the wrong event kind."""

    def __init__(self, kind: str, expected: str, actual: str):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Event kind '{kind}' expects a {expected} payload, "
            f"got {actual}."
        )


class InvalidSubscriberError(EventBusError):
    """Subscriber callback is not callable."""

    def __init__(self, kind: str, callback):
        self.kind = kind
        self.callback = callback
        super().__init__(
            f"Subscriber for '{kind}' must be callable, "
            f"got {type(callback).__name__}."
        )


class InvalidParticipantName(EventBusError):
    """Participant name must be a non-empty string."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Participant name must be a non-empty string, got {name!r}."
        )
