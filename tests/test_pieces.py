import pytest

from simplechess.pieces import Bishop, King, Knight, Pawn, Queen, Rook
from simplechess.types import (
    Color,
    EnPassant,
    PatternKind,
    Position,
    SpecialMoveValidationAction,
)

ALL_SQUARES = [Position(x, y) for x in range(8) for y in range(8)]


def _always(_position):
    return True


def reachable(piece, start, can_step_into=_always):
    return {
        target
        for target in ALL_SQUARES
        if target != start and piece.can_reach(start, target, can_step_into)
    }


def test_bishop_moves_center():
    expected = {
        Position(4, 4), Position(5, 5), Position(6, 6), Position(7, 7),
        Position(4, 2), Position(5, 1), Position(6, 0),
        Position(2, 4), Position(1, 5), Position(0, 6),
        Position(2, 2), Position(1, 1), Position(0, 0),
    }
    assert reachable(Bishop(Color.WHITE), Position(3, 3)) == expected


def test_bishop_moves_from_corner():
    expected = {Position(i, i) for i in range(1, 8)}
    assert reachable(Bishop(Color.WHITE), Position(0, 0)) == expected


def test_king_moves_center():
    expected = {
        Position(5, 4), Position(3, 4), Position(4, 5), Position(4, 3),
        Position(5, 5), Position(5, 3), Position(3, 5), Position(3, 3),
    }
    assert reachable(King(Color.WHITE), Position(4, 4)) == expected


def test_king_moves_corner():
    expected = {Position(1, 0), Position(0, 1), Position(1, 1)}
    assert reachable(King(Color.BLACK), Position(0, 0)) == expected


def test_king_has_no_special_move():
    assert King(Color.WHITE).can_reach_via_special_move(Position(4, 4), Position(5, 5)) is None


def test_knight_moves_center():
    expected = {
        Position(6, 5), Position(6, 3), Position(2, 5), Position(2, 3),
        Position(5, 6), Position(5, 2), Position(3, 6), Position(3, 2),
    }
    assert reachable(Knight(Color.WHITE), Position(4, 4)) == expected


def test_knight_moves_near_edge():
    expected = {Position(2, 1), Position(1, 2)}
    assert reachable(Knight(Color.BLACK), Position(0, 0)) == expected


def test_knight_jumps_over_blockers():
    blocked = {Position(3, 4), Position(4, 3), Position(3, 3)}
    moves = reachable(Knight(Color.WHITE), Position(4, 4), lambda p: p not in blocked)
    assert Position(2, 3) in moves
    assert len(moves) == 8


def test_white_pawn_initial_moves():
    expected = {Position(2, 4), Position(3, 4)}
    assert reachable(Pawn(Color.WHITE), Position(1, 4)) == expected


def test_black_pawn_initial_moves():
    expected = {Position(5, 4), Position(4, 4)}
    assert reachable(Pawn(Color.BLACK), Position(6, 4)) == expected


def test_white_pawn_after_move():
    assert reachable(Pawn(Color.WHITE), Position(2, 4)) == {Position(3, 4)}


def test_black_pawn_after_move():
    assert reachable(Pawn(Color.BLACK), Position(5, 4)) == {Position(4, 4)}


def test_pawn_pattern_kind_depends_on_row():
    pawn = Pawn(Color.WHITE)
    assert pawn.movement_pattern(Position(1, 0)).kind is PatternKind.TWICE
    assert pawn.movement_pattern(Position(3, 0)).kind is PatternKind.ONCE


def test_white_pawn_can_reach_via_en_passant():
    pawn = Pawn(Color.WHITE)
    current = Position(4, 4)
    expected = EnPassant(SpecialMoveValidationAction.ENEMY_PIECE_EXISTS)
    assert pawn.can_reach_via_special_move(current, Position(5, 3)) == expected
    assert pawn.can_reach_via_special_move(current, Position(5, 5)) == expected
    assert pawn.can_reach_via_special_move(current, Position(5, 4)) is None


def test_black_pawn_can_reach_via_en_passant():
    pawn = Pawn(Color.BLACK)
    current = Position(3, 4)
    expected = EnPassant(SpecialMoveValidationAction.ENEMY_PIECE_EXISTS)
    assert pawn.can_reach_via_special_move(current, Position(2, 3)) == expected
    assert pawn.can_reach_via_special_move(current, Position(2, 5)) == expected
    assert pawn.can_reach_via_special_move(current, Position(2, 4)) is None


def test_pawn_upgrade():
    assert Pawn(Color.WHITE).can_upgrade(Position(7, 4)) is True
    black = Pawn(Color.BLACK)
    assert black.can_upgrade(Position(0, 4)) is True
    assert black.can_upgrade(Position(1, 4)) is False


def test_queen_moves_from_center():
    start = Position(3, 3)
    expected = {
        p
        for p in ALL_SQUARES
        if p != start
        and (p.x == start.x or p.y == start.y or abs(p.x - start.x) == abs(p.y - start.y))
    }
    moves = reachable(Queen(Color.WHITE), start)
    assert moves == expected
    assert len(moves) == 27


def test_queen_moves_from_corner():
    moves = reachable(Queen(Color.BLACK), Position(0, 0))
    assert len(moves) == 21
    assert Position(7, 7) in moves
    assert Position(0, 7) in moves
    assert Position(7, 0) in moves
    assert Position(1, 2) not in moves


def test_rook_moves_center():
    expected = (
        {Position(x, 4) for x in range(8) if x != 4}
        | {Position(4, y) for y in range(8) if y != 4}
    )
    moves = reachable(Rook(Color.WHITE), Position(4, 4))
    assert moves == expected
    assert len(moves) == 14


def test_rook_moves_from_corner():
    expected = {Position(i, 0) for i in range(1, 8)} | {Position(0, i) for i in range(1, 8)}
    assert reachable(Rook(Color.BLACK), Position(0, 0)) == expected


def test_rook_blocked_path():
    rook = Rook(Color.WHITE)
    blocked = {Position(0, 3)}
    can_step = lambda p: p not in blocked  # noqa: E731
    assert rook.can_reach(Position(0, 0), Position(0, 2), can_step) is True
    assert rook.can_reach(Position(0, 0), Position(0, 3), can_step) is False
    assert rook.can_reach(Position(0, 0), Position(0, 5), can_step) is False


def test_get_path_for_rook():
    assert Rook(Color.WHITE).get_path(Position(0, 0), Position(0, 3)) == [
        Position(0, 1),
        Position(0, 2),
        Position(0, 3),
    ]
    assert Rook(Color.WHITE).get_path(Position(0, 0), Position(1, 1)) is None


@pytest.mark.parametrize("piece_cls", [Pawn, Knight, Bishop, Rook, Queen, King])
def test_is_of_color(piece_cls):
    piece = piece_cls(Color.BLACK)
    assert piece.is_of_color(Color.BLACK) is True
    assert piece.is_of_color(Color.WHITE) is False


def test_pieces_of_different_kind_are_not_equal():
    assert Rook(Color.WHITE) != Bishop(Color.WHITE)
    assert Rook(Color.WHITE) == Rook(Color.WHITE)