"""Chess pieces and the rules for where each may move."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from simplechess.types import (
    Color,
    Direction,
    EnPassant,
    MovementPattern,
    Position,
    SpecialMoveValidationAction,
)

_PAWN_START_ROWS = (1, 6)
_WHITE_PAWN_UPGRADE_ROW = 7
_BLACK_PAWN_UPGRADE_ROW = 0

_STRAIGHT = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
_DIAGONAL = (
    Direction.UP_RIGHT,
    Direction.UP_LEFT,
    Direction.DOWN_RIGHT,
    Direction.DOWN_LEFT,
)
_ALL_WAYS = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.DOWN_LEFT,
    Direction.DOWN_RIGHT,
)
_KNIGHT_JUMPS = (
    Direction.KNIGHT_UP_LEFT,
    Direction.KNIGHT_UP_RIGHT,
    Direction.KNIGHT_DOWN_LEFT,
    Direction.KNIGHT_DOWN_RIGHT,
    Direction.KNIGHT_LEFT_UP,
    Direction.KNIGHT_LEFT_DOWN,
    Direction.KNIGHT_RIGHT_UP,
    Direction.KNIGHT_RIGHT_DOWN,
)


@dataclass(frozen=True)
class Piece(ABC):
    """A chess piece of a given colour."""

    color: Color

    def is_of_color(self, color: Color) -> bool:
        return self.color is color

    @abstractmethod
    def movement_pattern(self, position: Position) -> MovementPattern:
        """Return how this piece moves from ``position``."""

    def get_path(self, current: Position, target: Position) -> list[Position] | None:
        """Return the squares stepped through to reach ``target``, or ``None``."""
        return self.movement_pattern(current).construct_path(current, target)

    def can_reach(
        self,
        current: Position,
        target: Position,
        can_step_into: Callable[[Position], bool],
    ) -> bool:
        """Whether ``target`` is reachable with every square on the path allowed."""
        path = self.get_path(current, target)
        if path is None:
            return False
        return all(can_step_into(position) for position in path)

    def can_reach_via_special_move(
        self, current: Position, target: Position
    ) -> EnPassant | None:
        """Return the special move that reaches ``target``, or ``None``."""
        return None


@dataclass(frozen=True)
class Pawn(Piece):
    def can_upgrade(self, position: Position) -> bool:
        """Whether the pawn stands on its promotion row."""
        if self.color is Color.WHITE:
            return position.x == _WHITE_PAWN_UPGRADE_ROW
        return position.x == _BLACK_PAWN_UPGRADE_ROW

    def movement_pattern(self, position: Position) -> MovementPattern:
        forward = [Direction.DOWN] if self.color is Color.WHITE else [Direction.UP]
        if position.x in _PAWN_START_ROWS:
            return MovementPattern.twice(forward)
        return MovementPattern.once(forward)

    def _capture_directions(self) -> tuple[Direction, ...]:
        if self.color is Color.WHITE:
            return (Direction.DOWN_LEFT, Direction.DOWN_RIGHT)
        return (Direction.UP_LEFT, Direction.UP_RIGHT)

    def can_reach_via_special_move(
        self, current: Position, target: Position
    ) -> EnPassant | None:
        for direction in self._capture_directions():
            offset = direction.to_offset()
            if (current.x + offset.dx, current.y + offset.dy) == (target.x, target.y):
                return EnPassant(SpecialMoveValidationAction.ENEMY_PIECE_EXISTS)
        return None


@dataclass(frozen=True)
class Knight(Piece):
    def movement_pattern(self, position: Position) -> MovementPattern:
        return MovementPattern.once(_KNIGHT_JUMPS)


@dataclass(frozen=True)
class Bishop(Piece):
    def movement_pattern(self, position: Position) -> MovementPattern:
        return MovementPattern.multiple(_DIAGONAL)


@dataclass(frozen=True)
class Rook(Piece):
    def movement_pattern(self, position: Position) -> MovementPattern:
        return MovementPattern.multiple(_STRAIGHT)


@dataclass(frozen=True)
class Queen(Piece):
    def movement_pattern(self, position: Position) -> MovementPattern:
        return MovementPattern.multiple(_ALL_WAYS)


@dataclass(frozen=True)
class King(Piece):
    def movement_pattern(self, position: Position) -> MovementPattern:
        return MovementPattern.once(_ALL_WAYS)