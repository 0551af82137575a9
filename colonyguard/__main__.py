"""Entry point for ``python -m colonyguard``.

Loads a YAML scenario, builds the game and plays it headless until the
bees are beaten, the queen falls, or the turn budget runs out.  The
interactive shell lives elsewhere; this runner only reports what
happened.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from colonyguard.simulation.config import GameConfig
from colonyguard.simulation.events import EventLog
from colonyguard.simulation.game import Game

logger = logging.getLogger("colonyguard")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

_OUTCOMES = {True: "colony survived", False: "queen overrun", None: "undecided"}


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, build the game, play it out.

    Returns:
        Process exit code: 0 if the colony survived, 1 otherwise.
    """
    parser = argparse.ArgumentParser(
        prog="colonyguard",
        description="colonyguard - turn-based tunnel defense simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML scenario file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--turns",
        type=int,
        default=None,
        help="Turn budget (default: max_turns from the scenario)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every simulation event",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig.from_yaml(args.config)
    events = EventLog()
    game = Game.from_config(config, events=events)
    for ant_type, where in config.deployments:
        failure = game.deploy_ant(ant_type, where)
        if failure is not None:
            logger.warning("Could not deploy %s at %s: %s", ant_type, where, failure)

    turns = args.turns if args.turns is not None else config.max_turns

    logger.info(
        "Starting %dx%d board with %d food, %d bees waiting",
        config.tunnels,
        config.tunnel_length,
        game.food,
        game.hive_bee_count,
    )
    outcome = game.run(turns)
    logger.info("Turn %d: %s", game.turn, _OUTCOMES[outcome])
    return 0 if outcome else 1


if __name__ == "__main__":
    raise SystemExit(main())
