"""
Analytics Readiness — Participant Gate
========================================
Holds back event delivery until every known integration is ready.

Participant lifecycle:
    Unregistered → Registered (not ready) → Ready (terminal)

Gate state is derived, never stored:
    OPEN   : every registered participant is ready
             (vacuously OPEN when nobody has registered)
    CLOSED : at least one participant is not ready

Registering a new participant after the gate opened closes it
again until that participant is ready. A participant that never
calls ready() keeps the gate closed forever; that is accepted,
not detected.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from analytics.events.errors import InvalidParticipantName

logger = logging.getLogger("analytics.readiness")


class GateState(Enum):
    CLOSED = "CLOSED"
    OPEN = "OPEN"


class ReadyHandle:
    """Capability handed to a participant at registration."""

    def __init__(self, name: str, gate: "ReadinessGate") -> None:
        self._name = name
        self._gate = gate

    @property
    def name(self) -> str:
        return self._name

    def ready(self) -> None:
        """Signal that this participant finished its setup."""
        self._gate.mark_ready(self._name)


class ReadinessGate:
    """
    Tracks named participants and whether each one is ready.

    on_ready is called every time a participant becomes ready
    for the first time; the owner decides whether to flush.
    """

    def __init__(self, on_ready: Optional[Callable[[str], None]] = None) -> None:
        self._participants: dict[str, bool] = {}
        self._on_ready = on_ready

    def register_participant(self, name: str) -> ReadyHandle:
        """
        Register a participant (idempotent).

        Re-registering keeps the existing readiness.

        Raises:
            InvalidParticipantName: Empty or non-string name.
        """
        if not name or not isinstance(name, str):
            raise InvalidParticipantName(name)

        if name not in self._participants:
            self._participants[name] = False
            logger.info(f"Participant registered: '{name}'")

        return ReadyHandle(name, self)

    def mark_ready(self, name: str) -> bool:
        """
        Mark a participant ready. Monotonic.

        Returns True if this call changed the participant's state.
        Unregistered names are ignored: only register_participant()
        creates participants.
        """
        if name not in self._participants:
            logger.warning(f"Ignored ready() for unregistered participant '{name}'")
            return False

        if self._participants[name] is True:
            return False

        self._participants[name] = True
        logger.info(
            f"Participant ready: '{name}' "
            f"(gate {self.state.value}, "
            f"{len(self.pending_participants())} pending)"
        )

        if self._on_ready is not None:
            self._on_ready(name)
        return True

    def is_open(self) -> bool:
        return all(self._participants.values())

    @property
    def state(self) -> GateState:
        return GateState.OPEN if self.is_open() else GateState.CLOSED

    def is_ready(self, name: str) -> bool:
        return self._participants.get(name, False)

    def pending_participants(self) -> tuple[str, ...]:
        """Names still holding the gate closed, in registration order."""
        return tuple(
            name for name, ready in self._participants.items() if not ready
        )

    def participants(self) -> dict[str, bool]:
        return dict(self._participants)
