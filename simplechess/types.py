"""Core value types: colours, board positions, directions and movement patterns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 8


class Color(Enum):
    """Side a piece belongs to."""

    WHITE = "White"
    BLACK = "Black"

    def next(self) -> Color:
        """Return the opposing colour."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Offset:
    """A relative displacement on the board (rows, columns)."""

    dx: int
    dy: int


@dataclass(frozen=True, order=True)
class Position:
    """A square on the board, addressed by row ``x`` and column ``y``."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE):
            raise ValueError("Position out of bounds")

    @classmethod
    def from_str(cls, text: str) -> Position:
        """Parse a two-character position: a row digit then a column letter, e.g. ``3A``."""
        if len(text) != 2:
            raise ValueError("Invalid position format")
        row_char, column_char = text
        if not row_char.isdigit():
            raise ValueError("Invalid position format")
        x = int(row_char) - 1
        y = ord(column_char) - ord("A")
        try:
            return cls(x, y)
        except ValueError:
            raise ValueError("Position out of bounds") from None

    def __add__(self, offset: object) -> Position | None:
        """Shift by an offset; ``None`` when the result leaves the board."""
        if not isinstance(offset, Offset):
            return NotImplemented
        new_x = self.x + offset.dx
        new_y = self.y + offset.dy
        if 0 <= new_x < BOARD_SIZE and 0 <= new_y < BOARD_SIZE:
            return Position(new_x, new_y)
        return None


class Direction(Enum):
    """A single-step move direction, valued by its (dx, dy) displacement."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)
    KNIGHT_UP_LEFT = (-2, -1)
    KNIGHT_UP_RIGHT = (-2, 1)
    KNIGHT_DOWN_LEFT = (2, -1)
    KNIGHT_DOWN_RIGHT = (2, 1)
    KNIGHT_LEFT_UP = (-1, -2)
    KNIGHT_LEFT_DOWN = (1, -2)
    KNIGHT_RIGHT_UP = (-1, 2)
    KNIGHT_RIGHT_DOWN = (1, 2)

    def to_offset(self) -> Offset:
        """Return the displacement of this direction."""
        dx, dy = self.value
        return Offset(dx, dy)

    @classmethod
    def from_offset(cls, offset: Offset) -> Direction | None:
        """Return the direction with exactly this displacement, if any."""
        try:
            return cls((offset.dx, offset.dy))
        except ValueError:
            return None


class PatternKind(Enum):
    """How many times a pattern's directions may be applied in one move."""

    ONCE = "once"
    TWICE = "twice"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class MovementPattern:
    """A set of directions together with how far along them a piece may travel."""

    kind: PatternKind
    directions: tuple[Direction, ...]

    @classmethod
    def once(cls, directions) -> MovementPattern:
        return cls(PatternKind.ONCE, tuple(directions))

    @classmethod
    def twice(cls, directions) -> MovementPattern:
        return cls(PatternKind.TWICE, tuple(directions))

    @classmethod
    def multiple(cls, directions) -> MovementPattern:
        return cls(PatternKind.MULTIPLE, tuple(directions))

    def construct_path(self, current: Position, target: Position) -> list[Position] | None:
        """Return the squares stepped through to reach ``target``, ending with it, or ``None``."""
        if self.kind is PatternKind.ONCE:
            direction = Direction.from_offset(
                Offset(target.x - current.x, target.y - current.y)
            )
            if direction is not None and direction in self.directions:
                return [target]
            return None

        max_steps = 2 if self.kind is PatternKind.TWICE else BOARD_SIZE
        for direction in self.directions:
            offset = direction.to_offset()
            path: list[Position] = []
            step = current + offset
            while step is not None and len(path) < max_steps:
                path.append(step)
                if step == target:
                    return path
                step = step + offset
        return None


class SpecialMoveValidationAction(Enum):
    """Board condition a special move requires."""

    ENEMY_PIECE_EXISTS = "enemy_piece_exists"


@dataclass(frozen=True)
class EnPassant:
    """A diagonal pawn capture, valid only when ``action`` holds on the board."""

    action: SpecialMoveValidationAction