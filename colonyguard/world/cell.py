"""Cell — a single place on the board.

A cell holds at most one ant in its base slot, at most one guard in a
separate guard slot, and any number of bees.  Cells are chained into
tunnels: ``exit`` points toward the queen (the way bees walk) and
``entrance`` points toward the hive (the way throwers look).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from colonyguard.simulation.events import EventKind

if TYPE_CHECKING:
    from colonyguard.insects.ant import Ant
    from colonyguard.insects.bee import Bee
    from colonyguard.simulation.events import EventLog


@dataclass(eq=False)
class Cell:
    """A board location.

    Attributes:
        name: Display name, e.g. ``tunnel[0,3]`` or ``water[1,2]``.
        water: Whether non-watersafe ants are flooded out at end of turn.
        exit: Next cell toward the queen, or None at the queen itself.
        entrance: Next cell toward the hive, or None at a tunnel mouth.
        base: Occupant of the regular ant slot.
        guard: Occupant of the guard slot.
        bees: Resident bees in arrival order.
    """

    name: str
    water: bool = False
    exit: Cell | None = field(default=None, repr=False)
    entrance: Cell | None = field(default=None, repr=False)
    base: Ant | None = None
    guard: Ant | None = None
    bees: list[Bee] = field(default_factory=list)

    def link(self, entrance: Cell) -> None:
        """Chain ``entrance`` directly outward (hive-side) of this cell."""
        self.entrance = entrance
        entrance.exit = self

    # -- Ant slots -----------------------------------------------------------

    @property
    def ant(self) -> Ant | None:
        """The ant bees see here: the guard if present, else the base ant."""
        if self.guard is not None:
            return self.guard
        return self.base

    @property
    def guarded_ant(self) -> Ant | None:
        return self.base

    def add_ant(self, ant: Ant) -> bool:
        """Place an ant in its slot.

        Guards go to the guard slot, every other kind to the base slot.

        Returns:
            False if that slot is already taken, True otherwise.
        """
        if ant.is_guard:
            if self.guard is not None:
                return False
            self.guard = ant
        else:
            if self.base is not None:
                return False
            self.base = ant
        ant.cell = self
        return True

    def remove_ant(self) -> Ant | None:
        """Remove the guard if present, otherwise the base ant.

        Returns:
            The removed ant, or None if the cell had no ant.
        """
        if self.guard is not None:
            removed = self.guard
            self.guard = None
        else:
            removed = self.base
            self.base = None
        if removed is not None:
            removed.cell = None
        return removed

    def detach_ant(self, ant: Ant) -> None:
        """Remove exactly ``ant`` from whichever slot holds it."""
        if self.guard is ant:
            self.guard = None
        elif self.base is ant:
            self.base = None
        else:
            return
        ant.cell = None

    # -- Bees ----------------------------------------------------------------

    def add_bee(self, bee: Bee) -> None:
        self.bees.append(bee)
        bee.cell = self

    def remove_bee(self, bee: Bee) -> None:
        """Remove ``bee`` if it lives here; otherwise do nothing."""
        for i, resident in enumerate(self.bees):
            if resident is bee:
                del self.bees[i]
                bee.cell = None
                return

    def remove_all_bees(self) -> None:
        for bee in self.bees:
            bee.cell = None
        self.bees = []

    def exit_bee(self, bee: Bee) -> None:
        """Move ``bee`` one cell toward the queen."""
        if self.exit is None:
            return
        self.remove_bee(bee)
        self.exit.add_bee(bee)

    def closest_bee(self, max_distance: int, min_distance: int = 0) -> Bee | None:
        """Return the nearest bee looking outward along the tunnel.

        Distance 0 is this cell; each ``entrance`` hop adds one.  Within a
        cell the earliest arrival wins.

        Args:
            max_distance: Farthest hop count considered (inclusive).
            min_distance: Nearest hop count considered (inclusive).

        Returns:
            The first qualifying bee, or None.
        """
        cell: Cell | None = self
        distance = 0
        while cell is not None and distance <= max_distance:
            if distance >= min_distance and cell.bees:
                return cell.bees[0]
            cell = cell.entrance
            distance += 1
        return None

    # -- End of turn -----------------------------------------------------------

    def act(self, events: EventLog | None = None) -> None:
        """Flood out ants that cannot swim.

        Guards never swim, so a guard in water always leaves; the base ant
        leaves unless it is watersafe.
        """
        if not self.water:
            return
        if self.guard is not None:
            self._flood(self.guard, events)
        if self.base is not None and not self.base.watersafe:
            self._flood(self.base, events)

    def _flood(self, ant: Ant, events: EventLog | None) -> None:
        if events is not None:
            events.emit(EventKind.FLOODED, ant)
        self.detach_ant(ant)

    def __str__(self) -> str:
        return self.name
