"""Move validation on top of the raw board."""

from __future__ import annotations

from collections.abc import Callable

from simplechess.chessboard import Chessboard, MoveError, MoveResult
from simplechess.types import Color, EnPassant, Position, SpecialMoveValidationAction


class BoardManager:
    """Checks moves against the rules before applying them to a chessboard."""

    def __init__(self, chessboard: Chessboard) -> None:
        self.chessboard = chessboard

    def move_piece(
        self, piece_position: Position, target_position: Position, player_color: Color
    ) -> MoveResult:
        """Validate and apply a move; raise :class:`MoveError` when it is not allowed."""
        self._check_move(piece_position, target_position, player_color)
        result = self.chessboard.move_piece(piece_position, target_position)
        if result is MoveResult.CAN_UPGRADE_PIECE:
            return result
        if self._is_king_checked(player_color):
            return MoveResult.CHECK_KING
        return result

    def upgrade_piece(
        self, index: int, player_color: Color, target_position: Position
    ) -> MoveResult:
        """Promote using a dead piece of ``player_color`` and report any check."""
        self.chessboard.upgrade_piece(index, player_color, target_position)
        if self._is_king_checked(player_color):
            return MoveResult.CHECK_KING
        return MoveResult.NONE

    def _check_move(
        self, piece_position: Position, target_position: Position, player_color: Color
    ) -> None:
        piece = self.chessboard.get_piece(piece_position)
        if piece is None:
            raise MoveError("No piece at the given position")
        if not piece.is_of_color(player_color):
            raise MoveError("Not your piece")

        special_move = piece.can_reach_via_special_move(piece_position, target_position)
        can_step = self._step_checker(target_position, player_color)
        can_reach = piece.can_reach(piece_position, target_position, can_step)

        if not can_reach and special_move is None:
            raise MoveError("Invalid move")
        if special_move is not None and not self._validate_special_move(
            special_move, piece_position, target_position
        ):
            raise MoveError("Invalid special move")

    def _step_checker(
        self, target_position: Position, player_color: Color
    ) -> Callable[[Position], bool]:
        def can_step(position: Position) -> bool:
            if position == target_position:
                piece = self.chessboard.get_piece(position)
                return piece is None or not piece.is_of_color(player_color)
            return self.chessboard.is_position_empty(position)

        return can_step

    def _validate_special_move(
        self, special_move: EnPassant, source: Position, target: Position
    ) -> bool:
        if special_move.action is SpecialMoveValidationAction.ENEMY_PIECE_EXISTS:
            return self._enemy_piece_exists(source, target)
        return False

    def _enemy_piece_exists(self, source: Position, target: Position) -> bool:
        target_piece = self.chessboard.get_piece(target)
        if target_piece is None:
            return False
        moving_piece = self.chessboard.get_piece(source)
        return moving_piece is None or not target_piece.is_of_color(moving_piece.color)

    def _is_king_checked(self, player_color: Color) -> bool:
        """Whether any piece of ``player_color`` can reach the opposing king."""
        king_position = self.chessboard.get_king_position(player_color.next())
        if king_position is None:
            return False
        for position in self.chessboard.all_positions():
            piece = self.chessboard.get_piece(position)
            if piece is None or not piece.is_of_color(player_color):
                continue
            try:
                self._check_move(position, king_position, player_color)
            except MoveError:
                continue
            return True
        return False