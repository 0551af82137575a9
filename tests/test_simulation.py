"""Tests for colonyguard.simulation — config loading and the Game."""

from pathlib import Path

import numpy as np
import pytest

from colonyguard.colony.colony import Colony
from colonyguard.colony.hive import Hive
from colonyguard.insects.ant import AntKind, Boost
from colonyguard.insects.bee import Bee
from colonyguard.simulation.config import GameConfig
from colonyguard.simulation.events import EventLog
from colonyguard.simulation.failures import Failure
from colonyguard.simulation.game import Game


def _game(food: int = 20, tunnels: int = 2, length: int = 4) -> Game:
    colony = Colony(
        food=food,
        tunnels=tunnels,
        tunnel_length=length,
        rng=np.random.default_rng(7),
    )
    return Game(colony=colony, hive=Hive())


class TestGameConfig:
    """Tests for YAML config loading."""

    def test_defaults(self, default_config: GameConfig) -> None:
        assert default_config.seed == 42
        assert default_config.tunnels == 3
        assert default_config.tunnel_length == 8
        assert default_config.waves
        assert default_config.deployments == []

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text(
            "seed: 99\n"
            "tunnels: 1\n"
            "moat_frequency: 2\n"
            "waves:\n  '0': 2\n  3: 1\n"
            "deployments:\n  - {ant: Thrower, at: '0,1'}\n",
        )
        cfg = GameConfig.from_yaml(yaml_file)
        assert cfg.seed == 99
        assert cfg.tunnels == 1
        assert cfg.moat_frequency == 2
        assert cfg.tunnel_length == GameConfig.tunnel_length
        assert cfg.waves == {0: 2, 3: 1}
        assert cfg.deployments == [("Thrower", "0,1")]

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert GameConfig.from_yaml(yaml_file) == GameConfig()

    def test_bad_waves(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("waves: [1, 2]\n")
        with pytest.raises(ValueError):
            GameConfig.from_yaml(yaml_file)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            GameConfig.from_yaml(tmp_path / "nope.yaml")


class TestGameSetup:
    """Tests for building a game from config."""

    def test_from_config(self) -> None:
        cfg = GameConfig(tunnels=2, tunnel_length=5, food=7, waves={1: 2, 4: 3})
        game = Game.from_config(cfg)
        assert game.turn == 0
        assert game.food == 7
        assert game.tunnel_length == 5
        assert len(game.places) == 2
        assert game.hive_bee_count == 5
        assert sorted(game.hive.waves) == [1, 4]

    def test_injected_rng_and_events(self) -> None:
        events = EventLog()
        rng = np.random.default_rng(1)
        game = Game.from_config(GameConfig(), rng=rng, events=events)
        assert game.colony.rng is rng
        assert game.colony.events is events


class TestTurnLoop:
    """Tests for turn order and outcome."""

    def test_take_turn_advances_turn(self) -> None:
        game = _game()
        game.take_turn()
        game.take_turn()
        assert game.turn == 2

    def test_single_lane_scenario(self) -> None:
        colony = Colony(food=5, tunnels=1, tunnel_length=3, rng=np.random.default_rng(0))
        game = Game(colony=colony, hive=Hive())
        assert game.deploy_ant("Thrower", "0,2") is None
        assert game.food == 1
        game.hive.add_wave(0, 1, armor=2, damage=1)
        bee = game.hive.waves[0][0]

        game.take_turn()
        entrance = colony.entrances[0]
        assert entrance is colony.places[0][2]
        assert bee.cell is entrance
        assert bee.armor == 2

        # next ant phase: the thrower finds the bee at distance 0
        colony.ants_act()
        assert bee.armor == 1
        assert bee.cell is entrance

    def test_bees_arrive_after_ants_act(self) -> None:
        game = _game(tunnels=1, length=3)
        game.deploy_ant("Thrower", "0,2")
        game.hive.add_wave(0, 1)
        bee = game.hive.waves[0][0]
        game.take_turn()
        assert bee.armor == 3
        game.take_turn()
        assert bee.armor == 2

    def test_undefended_queen_falls(self) -> None:
        game = _game(tunnels=1, length=2)
        game.hive.add_wave(0, 1)
        assert game.run(10) is False
        assert game.turn == 3

    def test_run_stops_when_decided(self) -> None:
        game = _game()
        assert game.run(10) is True
        assert game.turn == 0

    def test_same_seed_same_game(self) -> None:
        cfg = GameConfig(
            seed=777,
            food=10,
            tunnels=3,
            tunnel_length=5,
            waves={0: 2, 1: 2, 3: 3},
        )
        logs = []
        for _ in range(2):
            events = EventLog()
            game = Game.from_config(cfg, events=events)
            game.deploy_ant("Grower", "0,0")
            game.deploy_ant("Thrower", "1,1")
            game.run(15)
            logs.append([str(e) for e in events.events])
        assert logs[0] == logs[1]


class TestWinCondition:
    """Tests for the three-way outcome."""

    def test_empty_board_is_won(self) -> None:
        assert _game().is_won() is True

    def test_bee_at_queen_is_lost(self) -> None:
        game = _game()
        game.colony.queen_cell.add_bee(Bee(armor=1))
        assert game.is_won() is False

    def test_bee_on_board_is_undecided(self) -> None:
        game = _game()
        game.places[1][2].add_bee(Bee(armor=1))
        assert game.is_won() is None

    def test_bee_in_hive_is_undecided(self) -> None:
        game = _game()
        game.hive.add_wave(5, 1)
        assert game.is_won() is None


class TestCommands:
    """Tests for player commands and coordinate parsing."""

    @pytest.mark.parametrize("name", ["thrower", "THROWER", "Thrower"])
    def test_deploy_ignores_case(self, name: str) -> None:
        game = _game()
        assert game.deploy_ant(name, "1,3") is None
        assert game.places[1][3].ant.kind is AntKind.THROWER

    def test_deploy_unknown_type(self) -> None:
        game = _game()
        assert game.deploy_ant("Queen", "0,0") is Failure.UNKNOWN_ANT_TYPE
        assert game.food == 20

    def test_deploy_with_pair(self) -> None:
        game = _game()
        assert game.deploy_ant("Grower", (0, 1)) is None
        assert game.places[0][1].ant is not None

    @pytest.mark.parametrize(
        "where",
        ["", "0", "a,b", "0,1,2", "2,0", "0,4", "-1,0", "0,-1", (5, 5), (0,), "0;1"],
    )
    def test_illegal_locations(self, where: object) -> None:
        game = _game()
        assert game.deploy_ant("Grower", where) is Failure.ILLEGAL_LOCATION
        assert game.remove_ant(where) is Failure.ILLEGAL_LOCATION
        assert game.boost_ant("IcyLeaf", where) is Failure.ILLEGAL_LOCATION
        assert game.food == 20

    def test_deploy_failures_pass_through(self) -> None:
        game = _game(food=4)
        assert game.deploy_ant("Thrower", "0,0") is None
        assert game.deploy_ant("Grower", "0,0") is Failure.NOT_ENOUGH_FOOD
        game.colony.food = 5
        assert game.deploy_ant("Grower", "0,0") is Failure.OCCUPIED

    def test_remove_guard_first(self) -> None:
        game = _game()
        game.deploy_ant("Thrower", "0,1")
        game.deploy_ant("Guard", "0,1")
        assert game.remove_ant("0,1") is None
        assert game.places[0][1].ant.kind is AntKind.THROWER
        assert game.places[0][1].ant.armor == 1
        assert game.remove_ant("0,1") is None
        assert game.places[0][1].ant is None

    def test_remove_empty_cell_succeeds(self) -> None:
        assert _game().remove_ant("0,0") is None

    def test_boost_ant(self) -> None:
        game = _game()
        game.deploy_ant("Thrower", "1,1")
        assert game.boost_ant("IcyLeaf", "1,1") is None
        assert game.places[1][1].ant.boost is Boost.ICY_LEAF
        assert game.boost_names() == ["FlyingLeaf", "StickyLeaf"]
        assert game.boost_ant("IcyLeaf", "1,1") is Failure.UNKNOWN_BOOST
        assert game.boost_ant("FlyingLeaf", "0,0") is Failure.NO_ANT

    def test_snapshot_passthrough(self) -> None:
        game = _game()
        game.deploy_ant("Scuba", "1,0")
        assert game.snapshot()[1][0].ant is AntKind.SCUBA
