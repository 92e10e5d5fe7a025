"""The board itself: piece placement, captures and promotions."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from simplechess.pieces import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from simplechess.types import BOARD_SIZE, Color, Position

_FIRST_WHITE_ROW = 0
_WHITE_PAWNS_ROW = 1
_FIRST_BLACK_ROW = 7
_BLACK_PAWNS_ROW = 6

_BACK_ROW = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)

Grid = list[list[Piece | None]]


class MoveResult(Enum):
    """Outcome of a successful move."""

    NONE = "none"
    CAN_UPGRADE_PIECE = "can_upgrade_piece"
    CHECK_KING = "check_king"


class MoveError(Exception):
    """Raised when a move or promotion cannot be carried out."""


def _empty_grid() -> Grid:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class Chessboard:
    """An 8x8 grid of pieces plus the pieces captured from each side."""

    def __init__(
        self,
        board: Grid | None = None,
        white_dead_pieces: Iterable[Piece] | None = None,
        black_dead_pieces: Iterable[Piece] | None = None,
    ) -> None:
        self.board: Grid = board if board is not None else _empty_grid()
        self.white_dead_pieces: list[Piece] = list(white_dead_pieces or ())
        self.black_dead_pieces: list[Piece] = list(black_dead_pieces or ())

    @classmethod
    def empty(cls) -> Chessboard:
        """Return a board with no pieces on it."""
        return cls(_empty_grid(), [], [])

    @classmethod
    def standard(cls) -> Chessboard:
        """Return a board in the usual starting position."""
        board = cls.empty()
        board._place_side(Color.WHITE, _FIRST_WHITE_ROW, _WHITE_PAWNS_ROW)
        board._place_side(Color.BLACK, _FIRST_BLACK_ROW, _BLACK_PAWNS_ROW)
        return board

    def _place_side(self, color: Color, first_row: int, pawns_row: int) -> None:
        for column, piece_type in enumerate(_BACK_ROW):
            self._set_piece(Position(first_row, column), piece_type(color))
        for column in range(BOARD_SIZE):
            self._set_piece(Position(pawns_row, column), Pawn(color))

    def get_piece(self, position: Position) -> Piece | None:
        return self.board[position.x][position.y]

    def _set_piece(self, position: Position, piece: Piece | None) -> None:
        self.board[position.x][position.y] = piece

    def _take_piece(self, position: Position) -> Piece | None:
        piece = self.get_piece(position)
        self._set_piece(position, None)
        return piece

    def is_position_empty(self, position: Position) -> bool:
        return self.get_piece(position) is None

    def _dead_pieces(self, color: Color) -> list[Piece]:
        return self.white_dead_pieces if color is Color.WHITE else self.black_dead_pieces

    def capture_piece(self, target_position: Position) -> None:
        """Remove the piece at ``target_position``, if any, into its side's dead pieces."""
        piece = self._take_piece(target_position)
        if piece is not None:
            self._dead_pieces(piece.color).append(piece)

    def move_piece(self, piece_position: Position, target_position: Position) -> MoveResult:
        """Move a piece, capturing whatever stands on the target square."""
        piece = self._take_piece(piece_position)
        if piece is None:
            raise MoveError("No piece at the given position")
        self.capture_piece(target_position)
        self._set_piece(target_position, piece)
        if isinstance(piece, Pawn) and piece.can_upgrade(target_position):
            return MoveResult.CAN_UPGRADE_PIECE
        return MoveResult.NONE

    def upgrade_piece(self, index: int, color: Color, target_position: Position) -> None:
        """Put the ``index``-th dead piece of ``color`` back on ``target_position``."""
        dead_pieces = self._dead_pieces(color)
        if not 0 <= index < len(dead_pieces):
            raise MoveError("Invalid index for dead pieces vector")
        self._set_piece(target_position, dead_pieces.pop(index))

    def get_king_position(self, color: Color) -> Position | None:
        for position in self.all_positions():
            piece = self.get_piece(position)
            if isinstance(piece, King) and piece.color is color:
                return position
        return None

    def all_positions(self) -> list[Position]:
        """Every square, row by row."""
        return [Position(x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)]