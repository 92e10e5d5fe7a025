"""A two-player game: a board plus whose turn it is."""

from __future__ import annotations

from simplechess.board_manager import BoardManager
from simplechess.chessboard import Chessboard, MoveResult
from simplechess.types import Color, Position


class Game:
    """Tracks the player to move and applies their moves to a standard board."""

    def __init__(self, player_color: Color = Color.WHITE) -> None:
        self.player_color = player_color
        self.board_manager = BoardManager(Chessboard.standard())

    def play(self, piece_position: Position, target_position: Position) -> MoveResult:
        """Make a move for the current player and pass the turn on success."""
        result = self.board_manager.move_piece(
            piece_position, target_position, self.player_color
        )
        self.player_color = self.player_color.next()
        return result

    def upgrade_piece(self, piece_index: int, upgrade_position: Position) -> MoveResult:
        """Promote for the player who just moved (the turn has already passed)."""
        return self.board_manager.upgrade_piece(
            piece_index, self.player_color.next(), upgrade_position
        )