"""Plain-text rendering of pieces, boards and games."""

from __future__ import annotations

from collections.abc import Iterable

from simplechess.chessboard import Chessboard
from simplechess.game import Game
from simplechess.pieces import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from simplechess.types import BOARD_SIZE, Color

_LETTERS: dict[type[Piece], str] = {
    Pawn: "P",
    Knight: "N",
    Bishop: "B",
    Rook: "R",
    Queen: "Q",
    King: "K",
}

_EMPTY_SQUARE = ". "
_COLUMN_LABELS = "abcdefgh"


def render_piece(piece: Piece) -> str:
    """Return the piece's letter and a trailing space; upper case for white."""
    letter = _LETTERS[type(piece)]
    if piece.color is Color.BLACK:
        letter = letter.lower()
    return f"{letter} "


def _render_pieces(pieces: Iterable[Piece]) -> str:
    return "".join(render_piece(piece) for piece in pieces)


def render_board(chessboard: Chessboard) -> str:
    """Return the board, its column labels and both sides' dead pieces."""
    lines = []
    for index, row in enumerate(chessboard.board):
        squares = "".join(
            _EMPTY_SQUARE if piece is None else render_piece(piece) for piece in row
        )
        lines.append(f"{BOARD_SIZE - index:3} {squares}")
    lines.append("    " + "".join(f"{label} " for label in _COLUMN_LABELS))
    lines.append("White dead pieces: " + _render_pieces(chessboard.white_dead_pieces))
    lines.append("Black dead pieces: " + _render_pieces(chessboard.black_dead_pieces))
    return "\n".join(lines) + "\n"


def render_game(game: Game) -> str:
    """Return the current player followed by the rendered board."""
    header = f"Current player: {game.player_color}\n"
    return header + render_board(game.board_manager.chessboard)