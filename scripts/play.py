#!/usr/bin/env python3
"""Interactive CLI for playing Pawns-Only Chess.

Usage:
    python scripts/play.py                            # two players at one terminal
    python scripts/play.py --config my.yaml --verbose
"""

import argparse
import copy
import logging
import os
import sys
from dataclasses import dataclass

import yaml

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pawnchess.game.rules import BoardEngine
from pawnchess.game.state import InvalidInputError, Side

logger = logging.getLogger("pawnchess.play")

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "configs", "play.yaml"
)

DEFAULT_CONFIG = {
    "game": {
        "title": "Pawns-Only Chess",
        "stop_command": "exit",
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict:
    """Load the YAML config, filling in defaults for missing keys.

    A missing default config file is not an error; a missing explicit one is.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return config
        path = DEFAULT_CONFIG_PATH

    with open(path) as f:
        loaded = yaml.safe_load(f) or {}

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


@dataclass
class Player:
    name: str
    side: Side


def read_command(read) -> str | None:
    """Read one line of input, or None at end of input."""
    try:
        return read()
    except EOFError:
        return None


def input_player(side: Side, read=input, write=print) -> Player:
    """Ask for the name of the player controlling side."""
    order = "First" if side == Side.FIRST else "Second"
    write(f"{order} Player's name:")
    name = read_command(read) or ""
    return Player(name, side)


def do_move(player: Player, engine: BoardEngine, read=input, write=print,
            stop_command: str = "exit") -> str | None:
    """Prompt until player enters a legal command and apply it.

    Returns the command played, or None if the player stopped the game.
    """
    while True:
        write(f"{player.name}'s turn:")
        command = read_command(read)
        if command is None or command == stop_command:
            return None
        try:
            engine.validate(command, player.side)
        except InvalidInputError as e:
            write(str(e))
            continue
        engine.apply_move(command, player.side)
        return command


def game_finished(player: Player, engine: BoardEngine, write=print) -> bool:
    """Report and return whether player's last move ended the game."""
    winner = engine.winner()
    if winner is not None:
        write(f"{winner.label.capitalize()} Wins!")
        logger.info("Game over: %s (%s) wins", winner.label, player.name)
        return True
    if engine.is_stalemate(player.side.opposite):
        write("Stalemate!")
        logger.info("Game over: stalemate, %s cannot move", player.side.opposite.label)
        return True
    return False


def play_game(read=input, write=print, config: dict | None = None) -> BoardEngine:
    """Play a full game and return the final engine state."""
    config = config or DEFAULT_CONFIG
    game_cfg = config.get("game", {})
    stop_command = game_cfg.get("stop_command", "exit")

    write(game_cfg.get("title", "Pawns-Only Chess"))
    players = [input_player(side, read, write) for side in Side]
    engine = BoardEngine()
    logger.info("New game: %s vs %s", players[0].name, players[1].name)
    write(engine.render())

    finished = False
    while not finished:
        for player in players:
            if do_move(player, engine, read, write, stop_command) is None:
                logger.info("Game stopped by %s", player.name)
                finished = True
                break
            write(engine.render())
            if game_finished(player, engine, write):
                finished = True
                break

    write("Bye!")
    return engine


def log_level(config: dict, verbose: bool = False):
    """Log level from --verbose or the config, tolerating an empty logging section."""
    if verbose:
        return logging.DEBUG
    return (config.get("logging") or {}).get("level", "WARNING")


def main():
    parser = argparse.ArgumentParser(description="Play Pawns-Only Chess")
    parser.add_argument("--config", default=None,
                        help="Path to config YAML (default: configs/play.yaml)")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every move and en passant change")
    args = parser.parse_args()

    config = load_config(args.config)
    level = log_level(config, args.verbose)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    play_game(config=config)


if __name__ == "__main__":
    main()
