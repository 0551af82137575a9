"""Insect — what ants and bees have in common.

Every insect has armor and knows which cell it is in.  The cell owns the
insect; the insect's ``cell`` is only a lookup handle and is cleared as
soon as the insect leaves the board.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from colonyguard.simulation.events import EventKind

if TYPE_CHECKING:
    from colonyguard.colony.colony import Colony
    from colonyguard.simulation.events import EventLog
    from colonyguard.world.cell import Cell


@dataclass(eq=False)
class Insect(ABC):
    """Base for every ant and bee.

    Attributes:
        armor: Remaining armor; the insect expires when it drops to 0.
        cell: Cell currently holding this insect, or None once removed.
    """

    armor: int
    cell: Cell | None = field(default=None, repr=False)

    @property
    @abstractmethod
    def name(self) -> str:
        """Short display name, e.g. ``Bee`` or ``Thrower``."""

    @abstractmethod
    def act(self, colony: Colony) -> None:
        """Take this insect's action for the current turn."""

    @abstractmethod
    def detach(self) -> None:
        """Remove this insect from its cell."""

    def reduce_armor(self, amount: int, events: EventLog | None = None) -> bool:
        """Apply damage and remove the insect if its armor is used up.

        An insect that already left the board keeps losing armor but is
        not detached or reported a second time.

        Args:
            amount: Armor to subtract.
            events: Sink for the EXPIRED event.

        Returns:
            True if the insect's armor is at or below zero.
        """
        self.armor -= amount
        if self.armor > 0:
            return False
        self._expire(events)
        return True

    def _expire(self, events: EventLog | None) -> None:
        if self.cell is None:
            return
        if events is not None:
            events.emit(EventKind.EXPIRED, self)
        self.detach()

    def __str__(self) -> str:
        where = self.cell.name if self.cell is not None else ""
        return f"{self.name}({where})"
