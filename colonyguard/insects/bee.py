"""Bee — the attacker walking down a tunnel toward the queen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from colonyguard.insects.insect import Insect
from colonyguard.simulation.events import EventKind

if TYPE_CHECKING:
    from colonyguard.colony.colony import Colony
    from colonyguard.insects.ant import Ant
    from colonyguard.simulation.events import EventLog


class Status(Enum):
    """One-turn condition inflicted by a boosted leaf."""

    NONE = auto()
    STUCK = auto()  # cannot move
    COLD = auto()  # cannot sting


@dataclass(eq=False)
class Bee(Insect):
    """A single attacking bee.

    Attributes:
        damage: Armor removed from an ant per sting.
        status: Condition for this turn; cleared after the bee acts.
    """

    damage: int = 1
    status: Status = Status.NONE

    @property
    def name(self) -> str:
        return "Bee"

    @property
    def is_blocked(self) -> bool:
        """True when an ant (or guard) stands in this bee's cell."""
        return self.cell is not None and self.cell.ant is not None

    def sting(self, ant: Ant, events: EventLog | None = None) -> bool:
        """Sting ``ant`` once.

        Returns:
            True if the sting finished the ant off.
        """
        if events is not None:
            events.emit(EventKind.STING, self, ant, damage=self.damage)
        return ant.reduce_armor(self.damage, events)

    def act(self, colony: Colony) -> None:
        """Sting the blocking ant, or else move one cell toward the queen.

        A COLD bee cannot sting and a STUCK bee cannot move; either way the
        status wears off once the turn is over.
        """
        if self.cell is None:
            return
        events = colony.events
        blocker = self.cell.ant
        if blocker is not None:
            if self.status is not Status.COLD:
                self.sting(blocker, events)
        elif self.armor > 0 and self.status is not Status.STUCK:
            origin = self.cell
            origin.exit_bee(self)
            if self.cell is not origin:
                events.emit(EventKind.MOVED, self, self.cell, origin=origin.name)
        self.status = Status.NONE

    def detach(self) -> None:
        if self.cell is not None:
            self.cell.remove_bee(self)
