"""Game — the turn loop and the player command surface.

Owns the colony, the hive and the turn counter, and advances them in the
fixed turn order:

1. Ants act (a guard's ward before the guard)
2. Bees act (sting or advance)
3. Cells act (water floods out non-swimmers)
4. The hive releases this turn's wave
5. The turn counter increments

Player commands take coordinates as ``"tunnel,step"`` strings or
``(tunnel, step)`` pairs and return a ``Failure`` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.random import Generator

from colonyguard.colony.colony import CellView, Colony
from colonyguard.colony.hive import Hive
from colonyguard.insects.ant import Ant, AntKind
from colonyguard.simulation.config import GameConfig
from colonyguard.simulation.events import EventLog
from colonyguard.simulation.failures import Failure
from colonyguard.world.cell import Cell

Coordinates = str | tuple[int, int]


@dataclass
class Game:
    """One running game.

    Attributes:
        colony: The board and player resources.
        hive: Scheduled, not yet released bees.
        turn: Number of turns played so far.
    """

    colony: Colony
    hive: Hive
    turn: int = 0

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        *,
        rng: Generator | None = None,
        events: EventLog | None = None,
    ) -> Game:
        """Build a colony and hive from a scenario config.

        Args:
            config: Scenario to build.
            rng: Random source; seeded from ``config.seed`` when omitted.
            events: Event sink; a fresh one when omitted.
        """
        colony = Colony(
            food=config.food,
            tunnels=config.tunnels,
            tunnel_length=config.tunnel_length,
            moat_frequency=config.moat_frequency,
            rng=rng if rng is not None else np.random.default_rng(config.seed),
            events=events if events is not None else EventLog(),
        )
        hive = Hive(bee_armor=config.bee_armor, bee_damage=config.bee_damage)
        for attack_turn, count in sorted(config.waves.items()):
            hive.add_wave(attack_turn, count)
        return cls(colony=colony, hive=hive)

    # -- Turn loop -------------------------------------------------------------

    def take_turn(self) -> None:
        """Play one full turn in the canonical order."""
        self.colony.ants_act()
        self.colony.bees_act()
        self.colony.places_act()
        self.hive.invade(self.colony, self.turn)
        self.turn += 1

    def run(self, turns: int) -> bool | None:
        """Play up to ``turns`` turns, stopping early once decided.

        Returns:
            The outcome as reported by ``is_won``.
        """
        for _ in range(turns):
            if self.is_won() is not None:
                break
            self.take_turn()
        return self.is_won()

    def is_won(self) -> bool | None:
        """Return False if a bee reached the queen, True if every bee is
        gone, or None while the game is still undecided.
        """
        if self.colony.queen_has_bees():
            return False
        if not self.colony.all_bees() and self.hive.bee_count == 0:
            return True
        return None

    # -- Commands --------------------------------------------------------------

    def deploy_ant(self, ant_type: str, coordinates: Coordinates) -> Failure | None:
        """Deploy a new ant of type ``ant_type`` (case-insensitive)."""
        kind = AntKind.parse(ant_type)
        if kind is None:
            return Failure.UNKNOWN_ANT_TYPE
        cell = self._resolve(coordinates)
        if cell is None:
            return Failure.ILLEGAL_LOCATION
        return self.colony.deploy_ant(Ant.of(kind), cell)

    def remove_ant(self, coordinates: Coordinates) -> Failure | None:
        """Remove the guard at ``coordinates``, or the ant if unguarded."""
        cell = self._resolve(coordinates)
        if cell is None:
            return Failure.ILLEGAL_LOCATION
        self.colony.remove_ant(cell)
        return None

    def boost_ant(self, boost_name: str, coordinates: Coordinates) -> Failure | None:
        cell = self._resolve(coordinates)
        if cell is None:
            return Failure.ILLEGAL_LOCATION
        return self.colony.apply_boost(boost_name, cell)

    # -- Queries ---------------------------------------------------------------

    @property
    def places(self) -> list[list[Cell]]:
        return self.colony.places

    @property
    def tunnel_length(self) -> int:
        return self.colony.tunnel_length

    @property
    def food(self) -> int:
        return self.colony.food

    @property
    def hive_bee_count(self) -> int:
        return self.hive.bee_count

    def boost_names(self) -> list[str]:
        return self.colony.boost_names()

    def snapshot(self) -> list[list[CellView]]:
        return self.colony.snapshot()

    # -- Helpers ---------------------------------------------------------------

    def _resolve(self, coordinates: Coordinates) -> Cell | None:
        """Turn player coordinates into a cell, or None if they are bad."""
        if isinstance(coordinates, str):
            parts = coordinates.split(",")
            if len(parts) != 2:
                return None
            try:
                tunnel, step = (int(p.strip()) for p in parts)
            except ValueError:
                return None
        else:
            try:
                tunnel, step = coordinates
            except (TypeError, ValueError):
                return None
            if not isinstance(tunnel, int) or not isinstance(step, int):
                return None

        if not (0 <= tunnel < self.colony.tunnels and 0 <= step < self.colony.tunnel_length):
            return None
        return self.colony.places[tunnel][step]
