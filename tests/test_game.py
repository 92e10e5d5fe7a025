import pytest

from simplechess.chessboard import MoveError, MoveResult
from simplechess.game import Game
from simplechess.pieces import Pawn
from simplechess.types import Color, Position


def test_new_game_starts_with_given_color():
    assert Game(Color.BLACK).player_color is Color.BLACK
    assert Game().player_color is Color.WHITE


def test_new_game_uses_standard_board():
    board = Game(Color.WHITE).board_manager.chessboard
    assert board.get_king_position(Color.WHITE) == Position(0, 4)
    assert board.get_king_position(Color.BLACK) == Position(7, 4)


def test_play_passes_turn():
    game = Game(Color.WHITE)
    result = game.play(Position(1, 0), Position(2, 0))
    assert result is MoveResult.NONE
    assert game.player_color is Color.BLACK
    assert game.board_manager.chessboard.get_piece(Position(2, 0)) == Pawn(Color.WHITE)
    game.play(Position(6, 0), Position(5, 0))
    assert game.player_color is Color.WHITE


def test_failed_play_keeps_turn():
    game = Game(Color.WHITE)
    with pytest.raises(MoveError, match="Not your piece"):
        game.play(Position(6, 0), Position(5, 0))
    assert game.player_color is Color.WHITE


def test_upgrade_uses_previous_player_dead_pieces():
    game = Game(Color.WHITE)
    game.play(Position(1, 0), Position(2, 0))
    with pytest.raises(MoveError, match="Invalid index for dead pieces vector"):
        game.upgrade_piece(0, Position(7, 0))
    assert game.player_color is Color.BLACK