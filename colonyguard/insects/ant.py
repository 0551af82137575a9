"""Ant -- the stationary defenders.

Ants form a closed family of kinds sharing one dataclass.  The ``kind``
tag picks the behaviour each turn:

- **Grower**: rolls once per turn for food or a boost.
- **Thrower** / **Scuba**: throw a leaf at the nearest bee in range.  A
  boost changes the range or adds a status effect; BugSpray wipes out
  every bee in the ant's own cell and the ant with them.  Scuba ants
  also survive in water.
- **Eater**: swallows a bee in its own cell and digests it over the
  following turns.  Being hit early makes it cough the bee back up.
- **Guard**: does nothing itself; it sits in a separate slot and soaks up
  stings aimed at the ant it shields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from colonyguard.insects.bee import Status
from colonyguard.insects.insect import Insect
from colonyguard.simulation.events import EventKind
from colonyguard.world.cell import Cell

if TYPE_CHECKING:
    from colonyguard.colony.colony import Colony
    from colonyguard.insects.bee import Bee
    from colonyguard.simulation.events import EventLog


class AntKind(Enum):
    """The deployable ant types."""

    GROWER = "Grower"
    THROWER = "Thrower"
    EATER = "Eater"
    SCUBA = "Scuba"
    GUARD = "Guard"

    @classmethod
    def parse(cls, name: str) -> AntKind | None:
        """Look up a kind by display name, ignoring case."""
        wanted = name.strip().lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        return None


class Boost(Enum):
    """Single-use consumables handed to an ant."""

    FLYING_LEAF = "FlyingLeaf"
    STICKY_LEAF = "StickyLeaf"
    ICY_LEAF = "IcyLeaf"
    BUG_SPRAY = "BugSpray"

    @classmethod
    def parse(cls, name: str) -> Boost | None:
        """Accept ``FlyingLeaf``, ``flyingleaf`` or ``flying_leaf``."""
        wanted = name.strip().lower()
        for boost in cls:
            if wanted in (boost.value.lower(), boost.name.lower()):
                return boost
        return None


@dataclass(frozen=True)
class AntProfile:
    """Fixed per-kind stats."""

    armor: int
    food_cost: int
    watersafe: bool = False


ANT_PROFILES: dict[AntKind, AntProfile] = {
    AntKind.GROWER: AntProfile(armor=1, food_cost=1),
    AntKind.THROWER: AntProfile(armor=1, food_cost=4),
    AntKind.EATER: AntProfile(armor=2, food_cost=4),
    AntKind.SCUBA: AntProfile(armor=1, food_cost=5, watersafe=True),
    AntKind.GUARD: AntProfile(armor=2, food_cost=4),
}

# -- Constants ---------------------------------------------------------------

_LEAF_DAMAGE = 1
_SPRAY_DAMAGE = 10
_DIGEST_TURNS = 3  # counter value after which the stomach is emptied

# boost -> (range in hops, status inflicted on hit)
_LEAVES: dict[Boost | None, tuple[int, Status | None]] = {
    None: (3, None),
    Boost.FLYING_LEAF: (5, None),
    Boost.STICKY_LEAF: (3, Status.STUCK),
    Boost.ICY_LEAF: (3, Status.COLD),
}

_STATUS_EVENTS = {
    Status.STUCK: EventKind.STUCK,
    Status.COLD: EventKind.FROZEN,
}

_FOOD_CHANCE = 0.6
# cumulative roll thresholds checked after the food roll misses
_BOOST_FINDS: tuple[tuple[float, Boost], ...] = (
    (0.7, Boost.FLYING_LEAF),
    (0.8, Boost.STICKY_LEAF),
    (0.9, Boost.ICY_LEAF),
    (0.95, Boost.BUG_SPRAY),
)


@dataclass(eq=False)
class Ant(Insect):
    """A single deployed ant.

    Attributes:
        kind: Which ant type this is; selects behaviour.
        food_cost: Food debited when the ant is deployed.
        boost: Pending single-use boost, if any.
        turns_eating: Eater digestion counter (0 = empty, 1..4 = digesting).
        stomach: Eater-only private cell holding a swallowed bee.
    """

    kind: AntKind = AntKind.THROWER
    food_cost: int = 0
    boost: Boost | None = None
    turns_eating: int = 0
    stomach: Cell | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.kind is AntKind.EATER and self.stomach is None:
            self.stomach = Cell(name="stomach")

    @classmethod
    def of(cls, kind: AntKind) -> Ant:
        """Create a fresh ant with the stats for ``kind``."""
        profile = ANT_PROFILES[kind]
        return cls(armor=profile.armor, kind=kind, food_cost=profile.food_cost)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def watersafe(self) -> bool:
        return ANT_PROFILES[self.kind].watersafe

    @property
    def is_guard(self) -> bool:
        return self.kind is AntKind.GUARD

    @property
    def guarded(self) -> Ant | None:
        """For a guard, the ant in the base slot of its cell."""
        if not self.is_guard or self.cell is None:
            return None
        return self.cell.guarded_ant

    @property
    def is_full(self) -> bool:
        """True while an eater has a bee in its stomach."""
        return self.stomach is not None and bool(self.stomach.bees)

    def set_boost(self, boost: Boost, events: EventLog | None = None) -> None:
        self.boost = boost
        if events is not None:
            events.emit(EventKind.BOOSTED, self, boost=boost.value)

    def act(self, colony: Colony) -> None:
        """Run this ant's behaviour for the turn."""
        if self.cell is None:
            return
        match self.kind:
            case AntKind.GROWER:
                self._grow(colony)
            case AntKind.THROWER | AntKind.SCUBA:
                self._throw(colony.events)
            case AntKind.EATER:
                self._eat(colony.events)
            case AntKind.GUARD:
                pass

    def detach(self) -> None:
        if self.cell is not None:
            self.cell.detach_ant(self)

    def reduce_armor(self, amount: int, events: EventLog | None = None) -> bool:
        """Apply damage; eaters may cough up their meal first.

        An eater hit on the first turn of digestion and surviving spits the
        bee back into its cell and jumps straight to counter 3.  An eater
        killed within the first two turns spits the bee out before dying.
        """
        if self.kind is not AntKind.EATER:
            return super().reduce_armor(amount, events)

        self.armor -= amount
        if self.armor > 0:
            if self.turns_eating == 1:
                self._regurgitate(events)
                self.turns_eating = 3
            return False

        if 0 < self.turns_eating <= 2:
            self._regurgitate(events)
            self.turns_eating = 0
        self._expire(events)
        return True

    # -- Private behaviour methods --

    def _grow(self, colony: Colony) -> None:
        """Roll once: mostly food, sometimes a boost, occasionally nothing."""
        roll = float(colony.rng.random())
        if roll < _FOOD_CHANCE:
            colony.increase_food(1)
            colony.events.emit(EventKind.FOOD_GROWN, self, amount=1)
            return
        for threshold, boost in _BOOST_FINDS:
            if roll < threshold:
                colony.add_boost(boost)
                colony.events.emit(EventKind.BOOST_FOUND, self, boost=boost.value)
                return

    def _throw(self, events: EventLog) -> None:
        """Throw a leaf at the closest bee, or spray if holding BugSpray."""
        if self.boost is Boost.BUG_SPRAY:
            self._spray(events)
            return

        reach, status = _LEAVES[self.boost]
        target = self.cell.closest_bee(reach) if self.cell is not None else None
        if target is None:
            return

        events.emit(EventKind.THROW, self, target, damage=_LEAF_DAMAGE)
        target.reduce_armor(_LEAF_DAMAGE, events)
        if status is not None:
            target.status = status
            events.emit(_STATUS_EVENTS[status], target)
        self.boost = None

    def _spray(self, events: EventLog) -> None:
        """Kill every bee in this cell, taking the ant down as well."""
        events.emit(EventKind.SPRAY, self)
        cell = self.cell
        target = cell.closest_bee(0) if cell is not None else None
        while target is not None:
            target.reduce_armor(_SPRAY_DAMAGE, events)
            target = cell.closest_bee(0)
        self.reduce_armor(_SPRAY_DAMAGE, events)

    def _eat(self, events: EventLog) -> None:
        if self.turns_eating == 0:
            target = self.cell.closest_bee(0) if self.cell is not None else None
            if target is None:
                return
            events.emit(EventKind.SWALLOWED, self, target)
            self._swallow(target)
            self.turns_eating = 1
        elif self.turns_eating > _DIGEST_TURNS:
            if self.stomach is not None and self.stomach.bees:
                meal = self.stomach.bees[0]
                events.emit(EventKind.DIGESTED, self, meal)
                self.stomach.remove_bee(meal)
            self.turns_eating = 0
        else:
            self.turns_eating += 1

    def _swallow(self, bee: Bee) -> None:
        if self.cell is None or self.stomach is None:
            return
        self.cell.remove_bee(bee)
        self.stomach.add_bee(bee)

    def _regurgitate(self, events: EventLog | None) -> None:
        if self.cell is None or self.stomach is None or not self.stomach.bees:
            return
        meal = self.stomach.bees[0]
        self.stomach.remove_bee(meal)
        self.cell.add_bee(meal)
        if events is not None:
            events.emit(EventKind.REGURGITATED, self, meal)
