"""EventLog — ordered, structured record of everything that happens.

Insects, cells and the colony never print.  They emit ``Event`` records
into an injected ``EventLog``; whoever drives the game (a shell, the
headless runner, a test) reads or subscribes to them.  Each event is
also forwarded to the module logger at DEBUG level.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Every kind of thing the simulation reports."""

    DEPLOYED = auto()
    REMOVED = auto()
    BOOSTED = auto()
    STING = auto()
    EXPIRED = auto()
    THROW = auto()
    STUCK = auto()
    FROZEN = auto()
    SPRAY = auto()
    SWALLOWED = auto()
    DIGESTED = auto()
    REGURGITATED = auto()
    FOOD_GROWN = auto()
    BOOST_FOUND = auto()
    MOVED = auto()
    FLOODED = auto()
    INVADED = auto()


@dataclass(frozen=True)
class Event:
    """A single simulation event.

    Attributes:
        kind: What happened.
        subject: Display name of the actor (e.g. ``Thrower(tunnel[0,2])``).
        target: Display name of whatever was acted upon, if anything.
        detail: Extra kind-specific values (damage, boost name, ...).
    """

    kind: EventKind
    subject: str
    target: str | None = None
    detail: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        text = f"{self.kind.name} {self.subject}"
        if self.target is not None:
            text += f" -> {self.target}"
        if self.detail:
            extras = ", ".join(f"{k}={v}" for k, v in self.detail.items())
            text += f" ({extras})"
        return text


_Handler = Callable[[Event], None]


class EventLog:
    """Append-only event sink with optional live subscribers."""

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._subscribers: list[_Handler] = []

    @property
    def events(self) -> list[Event]:
        """Events recorded since the last ``drain``/``clear``."""
        return list(self._events)

    def subscribe(self, handler: _Handler) -> None:
        self._subscribers.append(handler)

    def emit(
        self,
        kind: EventKind,
        subject: object,
        target: object | None = None,
        **detail: Any,
    ) -> Event:
        """Record an event and notify subscribers.

        Args:
            kind: The event kind.
            subject: The acting object; stored by its ``str()``.
            target: The affected object, if any.
            **detail: Additional structured values.

        Returns:
            The recorded Event.
        """
        event = Event(
            kind=kind,
            subject=str(subject),
            target=None if target is None else str(target),
            detail=detail,
        )
        self._events.append(event)
        logger.debug("%s", event)
        for handler in self._subscribers:
            handler(event)
        return event

    def drain(self) -> list[Event]:
        """Return all recorded events and empty the log."""
        drained = self._events
        self._events = []
        return drained

    def kinds(self) -> list[EventKind]:
        return [e.kind for e in self._events]

    def clear(self) -> None:
        self._events.clear()
