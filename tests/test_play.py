"""Tests for the interactive turn loop and CLI config."""

import logging

import pytest

from pawnchess.game.rules import BoardEngine
from pawnchess.game.state import Side, Cell
from scripts.play import (
    DEFAULT_CONFIG, Player, do_move, game_finished, input_player, load_config, log_level,
    play_game,
)


def _scripted(lines):
    """Input function that returns lines in order, then signals end of input."""
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


@pytest.fixture
def output():
    return []


class TestPlayers:
    def test_input_player(self, output):
        player = input_player(Side.FIRST, _scripted(["Alice"]), output.append)
        assert player == Player("Alice", Side.WHITE)
        assert output == ["First Player's name:"]

    def test_name_kept_as_typed(self, output):
        player = input_player(Side.FIRST, _scripted([" Alice "]), output.append)
        assert player.name == " Alice "

    def test_second_player_prompt(self, output):
        player = input_player(Side.SECOND, _scripted(["Bob"]), output.append)
        assert player.side == Side.BLACK
        assert output == ["Second Player's name:"]


class TestDoMove:
    def test_retries_until_legal(self, output):
        engine = BoardEngine()
        player = Player("Alice", Side.WHITE)
        read = _scripted(["e2-e4", "e7e5", "e2e5", "e2e4"])
        assert do_move(player, engine, read, output.append) == "e2e4"
        assert output == [
            "Alice's turn:", "Invalid input",
            "Alice's turn:", "No white pawn at e7",
            "Alice's turn:", "Invalid input",
            "Alice's turn:",
        ]
        assert engine.piece_at(Cell(3, 4)) == Side.WHITE

    def test_surrounding_whitespace_is_invalid(self, output):
        engine = BoardEngine()
        player = Player("Alice", Side.WHITE)
        read = _scripted([" e2e4", "e2e4 ", " exit", "e2e3"])
        assert do_move(player, engine, read, output.append) == "e2e3"
        assert output == [
            "Alice's turn:", "Invalid input",
            "Alice's turn:", "Invalid input",
            "Alice's turn:", "Invalid input",
            "Alice's turn:",
        ]
        assert engine.piece_at(Cell(3, 4)) is None
        assert engine.piece_at(Cell(2, 4)) == Side.WHITE

    def test_stop_command(self, output):
        engine = BoardEngine()
        player = Player("Bob", Side.BLACK)
        assert do_move(player, engine, _scripted(["exit"]), output.append) is None
        assert engine.count_pawns(Side.BLACK) == 8

    def test_end_of_input_stops(self, output):
        player = Player("Bob", Side.BLACK)
        assert do_move(player, BoardEngine(), _scripted([]), output.append) is None

    def test_custom_stop_command(self, output):
        player = Player("Bob", Side.BLACK)
        read = _scripted(["quit"])
        assert do_move(player, BoardEngine(), read, output.append, stop_command="quit") is None


class TestGameFinished:
    def test_win_message(self, output):
        engine = BoardEngine()
        engine.board = [[None] * 8 for _ in range(8)]
        engine.board[7][6] = Side.WHITE
        engine.board[6][0] = Side.BLACK
        assert game_finished(Player("Alice", Side.WHITE), engine, output.append)
        assert output == ["White Wins!"]

    def test_stalemate_message(self, output):
        engine = BoardEngine()
        engine.board = [[None] * 8 for _ in range(8)]
        engine.board[3][4] = Side.WHITE
        engine.board[4][4] = Side.BLACK
        assert game_finished(Player("Alice", Side.WHITE), engine, output.append)
        assert output == ["Stalemate!"]

    def test_game_continues(self, output):
        assert not game_finished(Player("Alice", Side.WHITE), BoardEngine(), output.append)
        assert output == []


class TestPlayGame:
    def test_exit_immediately(self, output):
        engine = play_game(_scripted(["Alice", "Bob", "exit"]), output.append)
        assert output[0] == "Pawns-Only Chess"
        assert output[1:3] == ["First Player's name:", "Second Player's name:"]
        assert output[3] == BoardEngine().render()
        assert output[4:] == ["Alice's turn:", "Bye!"]
        assert engine.count_pawns(Side.WHITE) == 8

    def test_moves_then_exit(self, output):
        read = _scripted(["Alice", "Bob", "e2e4", "d7d5", "e4d5", "exit"])
        engine = play_game(read, output.append)
        assert engine.piece_at(Cell(4, 3)) == Side.WHITE
        assert engine.count_pawns(Side.BLACK) == 7
        assert output.count("Alice's turn:") == 2
        assert output.count("Bob's turn:") == 2
        assert output[-1] == "Bye!"

    def test_en_passant_game(self, output):
        read = _scripted(["Alice", "Bob", "e2e4", "a7a6", "e4e5", "d7d5", "e5d6", "exit"])
        engine = play_game(read, output.append)
        assert engine.piece_at(Cell(5, 3)) == Side.WHITE
        assert engine.piece_at(Cell(4, 3)) is None

    def test_game_ends_on_win(self, output):
        moves = [
            "b2b4", "a7a5", "b4a5", "h7h6", "a5a6", "h6h5", "a6b7", "h5h4", "b7b8",
        ]
        read = _scripted(["Alice", "Bob"] + moves + ["should not be read"])
        engine = play_game(read, output.append)
        assert engine.winner() == Side.WHITE
        assert output[-2:] == ["White Wins!", "Bye!"]

    def test_end_of_input(self, output):
        play_game(_scripted(["Alice"]), output.append)
        assert output[-1] == "Bye!"

    def test_config_title_and_stop(self, output):
        config = {"game": {"title": "Pawns", "stop_command": "quit"}}
        play_game(_scripted(["A", "B", "exit", "quit"]), output.append, config=config)
        assert output[0] == "Pawns"
        assert "Invalid input" in output
        assert output[-1] == "Bye!"


class TestConfig:
    def test_default_config_file(self):
        config = load_config()
        assert config["game"]["stop_command"] == "exit"
        assert config["game"]["title"] == "Pawns-Only Chess"
        assert config["logging"]["level"] == "WARNING"

    def test_partial_config_keeps_defaults(self, tmp_path):
        path = tmp_path / "play.yaml"
        path.write_text("game:\n  stop_command: quit\n")
        config = load_config(str(path))
        assert config["game"]["stop_command"] == "quit"
        assert config["game"]["title"] == DEFAULT_CONFIG["game"]["title"]
        assert config["logging"] == DEFAULT_CONFIG["logging"]

    def test_empty_config(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_missing_explicit_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_logging_section(self, tmp_path):
        path = tmp_path / "play.yaml"
        path.write_text("logging:\n")
        config = load_config(str(path))
        assert config["logging"] is None
        assert log_level(config) == "WARNING"
        assert log_level(config, verbose=True) == logging.DEBUG

    def test_log_level_from_config(self):
        assert log_level({"logging": {"level": "INFO"}}) == "INFO"
        assert log_level({}) == "WARNING"

    def test_defaults_not_mutated(self, tmp_path):
        path = tmp_path / "play.yaml"
        path.write_text("logging:\n  level: DEBUG\n")
        load_config(str(path))
        assert DEFAULT_CONFIG["logging"]["level"] == "WARNING"
