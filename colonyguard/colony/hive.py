"""Hive — where bees wait until their wave is due.

Waves are scheduled up front.  On each turn the hive releases the wave
for that turn, sending every bee to a randomly chosen tunnel mouth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from colonyguard.insects.bee import Bee
from colonyguard.simulation.events import EventKind
from colonyguard.world.cell import Cell

if TYPE_CHECKING:
    from colonyguard.colony.colony import Colony

HIVE_NAME = "Hive"


@dataclass
class Hive:
    """Reservoir of scheduled bees.

    Attributes:
        bee_armor: Default armor for new bees.
        bee_damage: Default sting damage for new bees.
        waves: Unreleased bees keyed by the turn they attack.
        reservoir: Cell holding every bee not yet released.
    """

    bee_armor: int = 3
    bee_damage: int = 1
    waves: dict[int, list[Bee]] = field(default_factory=dict)
    reservoir: Cell = field(default_factory=lambda: Cell(name=HIVE_NAME), repr=False)

    @property
    def bee_count(self) -> int:
        return len(self.reservoir.bees)

    def add_wave(
        self,
        attack_turn: int,
        num_bees: int,
        *,
        armor: int | None = None,
        damage: int | None = None,
    ) -> Hive:
        """Schedule ``num_bees`` identical bees to attack on ``attack_turn``.

        Scheduling the same turn twice adds to the existing wave.

        Args:
            attack_turn: Turn number on which the wave is released.
            num_bees: How many bees to create.
            armor: Armor for this wave; defaults to ``bee_armor``.
            damage: Sting damage for this wave; defaults to ``bee_damage``.

        Returns:
            This hive, so calls can be chained.
        """
        wave = self.waves.setdefault(attack_turn, [])
        for _ in range(num_bees):
            bee = Bee(
                armor=self.bee_armor if armor is None else armor,
                damage=self.bee_damage if damage is None else damage,
            )
            self.reservoir.add_bee(bee)
            wave.append(bee)
        return self

    def invade(self, colony: Colony, current_turn: int) -> list[Bee]:
        """Release the wave scheduled for ``current_turn``.

        Args:
            colony: Colony whose tunnel mouths receive the bees.
            current_turn: The turn being played.

        Returns:
            The released bees (empty if nothing was scheduled).
        """
        wave = self.waves.pop(current_turn, None)
        if wave is None:
            return []
        entrances = colony.entrances
        for bee in wave:
            self.reservoir.remove_bee(bee)
            entrance = entrances[int(colony.rng.integers(len(entrances)))]
            entrance.add_bee(bee)
            colony.events.emit(EventKind.INVADED, bee)
        return wave
