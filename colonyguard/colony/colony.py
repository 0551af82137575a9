"""Colony — the board, the food store and the boost inventory.

The colony builds the tunnels, keeps track of food and boosts, and runs
the three per-turn action phases.  Each phase works from a list taken
before the phase starts, so insects that die, move or appear mid-phase
are neither skipped nor run twice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.random import Generator
from numpy.typing import NDArray

from colonyguard.insects.ant import Ant, AntKind, Boost
from colonyguard.simulation.events import EventKind, EventLog
from colonyguard.simulation.failures import Failure
from colonyguard.world.cell import Cell

if TYPE_CHECKING:
    from colonyguard.insects.bee import Bee

QUEEN_NAME = "Ant Queen"

_STARTING_BOOSTS: dict[Boost, int] = {
    Boost.FLYING_LEAF: 1,
    Boost.STICKY_LEAF: 1,
    Boost.ICY_LEAF: 1,
    Boost.BUG_SPRAY: 0,
}


@dataclass(frozen=True)
class CellView:
    """Read-only summary of one cell for display code.

    Attributes:
        name: Cell name.
        water: Whether the cell floods.
        ant: Kind of the visible ant (the guard if there is one).
        guarded: Kind of the ant behind a guard, if any.
        bee_count: Number of bees in the cell.
        eater_full: True if an eater here has a bee in its stomach.
    """

    name: str
    water: bool
    ant: AntKind | None
    guarded: AntKind | None
    bee_count: int
    eater_full: bool = False


@dataclass
class Colony:
    """Board state and player resources.

    Attributes:
        food: Food available for deploying ants.
        tunnels: Number of parallel tunnels.
        tunnel_length: Cells per tunnel.
        moat_frequency: Every Nth step of a tunnel is water; 0 for none.
        rng: Random source for growers and the hive.
        events: Sink for everything that happens on the board.
        places: Grid of cells indexed as ``places[tunnel][step]``.
        queen_cell: Shared innermost cell; a bee here loses the game.
        entrances: Outermost cell of each tunnel, where bees arrive.
        boosts: Boost inventory.
    """

    food: int
    tunnels: int
    tunnel_length: int
    moat_frequency: int = 0
    rng: Generator = field(default_factory=np.random.default_rng, repr=False)
    events: EventLog = field(default_factory=EventLog, repr=False)
    places: list[list[Cell]] = field(init=False, repr=False)
    queen_cell: Cell = field(init=False, repr=False)
    entrances: list[Cell] = field(init=False, repr=False)
    boosts: dict[Boost, int] = field(
        default_factory=lambda: dict(_STARTING_BOOSTS),
    )

    def __post_init__(self) -> None:
        """Lay out the tunnels.

        Step 0 of every tunnel exits into the queen's cell; the last step
        is the tunnel mouth.

        Raises:
            ValueError: If the board dimensions or food are invalid.
        """
        if self.tunnels < 1 or self.tunnel_length < 1:
            msg = f"board must be at least 1x1, got {self.tunnels}x{self.tunnel_length}"
            raise ValueError(msg)
        if self.food < 0:
            msg = f"starting food must be non-negative, got {self.food}"
            raise ValueError(msg)

        self.queen_cell = Cell(name=QUEEN_NAME)
        self.places = []
        self.entrances = []
        for tunnel in range(self.tunnels):
            row: list[Cell] = []
            for step in range(self.tunnel_length):
                water = self.moat_frequency != 0 and (step + 1) % self.moat_frequency == 0
                prefix = "water" if water else "tunnel"
                cell = Cell(name=f"{prefix}[{tunnel},{step}]", water=water)
                if row:
                    row[-1].link(cell)
                else:
                    cell.exit = self.queen_cell
                row.append(cell)
            self.places.append(row)
            self.entrances.append(row[-1])

    # -- Resources -------------------------------------------------------------

    def increase_food(self, amount: int) -> None:
        self.food += amount

    def add_boost(self, boost: Boost) -> None:
        self.boosts[boost] = self.boosts.get(boost, 0) + 1

    def boost_names(self) -> list[str]:
        """Names of boosts with at least one unit in stock."""
        return [boost.value for boost, count in self.boosts.items() if count > 0]

    # -- Commands --------------------------------------------------------------

    def deploy_ant(self, ant: Ant, cell: Cell) -> Failure | None:
        """Pay for ``ant`` and place it in ``cell``.

        Returns:
            None on success, otherwise why the ant was not placed.
        """
        if self.food < ant.food_cost:
            return Failure.NOT_ENOUGH_FOOD
        if not cell.add_ant(ant):
            return Failure.OCCUPIED
        self.food -= ant.food_cost
        self.events.emit(EventKind.DEPLOYED, ant, cost=ant.food_cost)
        return None

    def remove_ant(self, cell: Cell) -> Ant | None:
        """Take the visible ant (guard first) off ``cell``."""
        label = str(cell.ant) if cell.ant is not None else None
        removed = cell.remove_ant()
        if removed is not None:
            self.events.emit(EventKind.REMOVED, label)
        return removed

    def apply_boost(self, name: str, cell: Cell) -> Failure | None:
        """Spend one unit of boost ``name`` on the visible ant in ``cell``.

        Returns:
            None on success, otherwise why the boost was not applied.
        """
        boost = Boost.parse(name)
        if boost is None or self.boosts.get(boost, 0) < 1:
            return Failure.UNKNOWN_BOOST
        ant = cell.ant
        if ant is None:
            return Failure.NO_ANT
        self.boosts[boost] -= 1
        ant.set_boost(boost, self.events)
        return None

    # -- Turn phases -----------------------------------------------------------

    def ants_act(self) -> None:
        """Let every ant act once.

        A guard's ward acts first, then the guard itself.
        """
        for ant in self.all_ants():
            if ant.cell is None:
                continue
            if ant.is_guard:
                guarded = ant.guarded
                if guarded is not None:
                    guarded.act(self)
            ant.act(self)

    def bees_act(self) -> None:
        for bee in self.all_bees():
            bee.act(self)

    def places_act(self) -> None:
        for row in self.places:
            for cell in row:
                cell.act(self.events)

    # -- Queries ---------------------------------------------------------------

    def all_ants(self) -> list[Ant]:
        """Visible ant of every cell, tunnel by tunnel, step by step."""
        return [cell.ant for row in self.places for cell in row if cell.ant is not None]

    def all_bees(self) -> list[Bee]:
        """Every bee on the board, excluding the queen's cell."""
        return [bee for row in self.places for cell in row for bee in cell.bees]

    def queen_has_bees(self) -> bool:
        return bool(self.queen_cell.bees)

    def bee_counts(self) -> NDArray[np.int64]:
        """Return a ``(tunnels, tunnel_length)`` array of bee counts."""
        counts = np.zeros((self.tunnels, self.tunnel_length), dtype=np.int64)
        for t, row in enumerate(self.places):
            for s, cell in enumerate(row):
                counts[t, s] = len(cell.bees)
        return counts

    def snapshot(self) -> list[list[CellView]]:
        """Return a read-only view of the whole board."""
        views: list[list[CellView]] = []
        for row in self.places:
            line: list[CellView] = []
            for cell in row:
                visible = cell.ant
                behind = cell.guarded_ant if cell.guard is not None else None
                line.append(
                    CellView(
                        name=cell.name,
                        water=cell.water,
                        ant=visible.kind if visible is not None else None,
                        guarded=behind.kind if behind is not None else None,
                        bee_count=len(cell.bees),
                        eater_full=any(
                            a is not None and a.is_full for a in (cell.base, cell.guard)
                        ),
                    ),
                )
            views.append(line)
        return views
