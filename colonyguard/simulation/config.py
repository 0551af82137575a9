"""Config — load a game scenario from YAML.

A scenario fixes the board shape, starting food, bee stats and the wave
schedule.  Everything has a default so a partial YAML file is enough.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _default_waves() -> dict[int, int]:
    return {2: 1, 3: 1, 4: 2, 6: 2, 8: 3}


@dataclass
class GameConfig:
    """Top-level scenario configuration.

    Attributes:
        seed: RNG seed for growers and hive lane choice.
        food: Starting food.
        tunnels: Number of parallel tunnels.
        tunnel_length: Cells per tunnel.
        moat_frequency: Every Nth step is water; 0 disables water.
        bee_armor: Armor of scheduled bees.
        bee_damage: Sting damage of scheduled bees.
        waves: Number of bees released keyed by turn.
        max_turns: Turn budget for headless runs.
        deployments: Opening ants as ``(ant type, "tunnel,step")`` pairs.
    """

    seed: int = 42
    food: int = 2
    tunnels: int = 3
    tunnel_length: int = 8
    moat_frequency: int = 0
    bee_armor: int = 3
    bee_damage: int = 1
    waves: dict[int, int] = field(default_factory=_default_waves)
    max_turns: int = 100
    deployments: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If ``waves`` is not a turn-to-count mapping.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        raw_waves = data.get("waves")
        if raw_waves is None:
            waves = _default_waves()
        elif isinstance(raw_waves, dict):
            waves = {int(turn): int(count) for turn, count in raw_waves.items()}
        else:
            msg = f"waves must map turn -> bee count, got {type(raw_waves).__name__}"
            raise ValueError(msg)

        return cls(
            seed=data.get("seed", cls.seed),
            food=data.get("food", cls.food),
            tunnels=data.get("tunnels", cls.tunnels),
            tunnel_length=data.get("tunnel_length", cls.tunnel_length),
            moat_frequency=data.get("moat_frequency", cls.moat_frequency),
            bee_armor=data.get("bee_armor", cls.bee_armor),
            bee_damage=data.get("bee_damage", cls.bee_damage),
            waves=waves,
            max_turns=data.get("max_turns", cls.max_turns),
            deployments=[
                (str(entry["ant"]), str(entry["at"]))
                for entry in data.get("deployments") or []
            ],
        )
