"""Piece kinds, shape table, rotation geometry"""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Dict, Tuple

COLS, ROWS = 10, 20
# Hidden rows above row 0; tall enough for the longest pattern.
SPAWN_ROWS = 4

Color = Tuple[int, int, int]
Pattern = List[List[int]]


class PieceKind(Enum):
    I = "I"
    O = "O"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"
    T = "T"
    RANDOM = "RANDOM"
    NEXTRANDOM = "NEXTRANDOM"

    @property
    def is_random(self) -> bool:
        return self in (PieceKind.RANDOM, PieceKind.NEXTRANDOM)


FIXED_KINDS = [PieceKind.I, PieceKind.O, PieceKind.S, PieceKind.Z,
               PieceKind.J, PieceKind.L, PieceKind.T]


class Direction(IntEnum):
    """Orientation; clockwise order so +1 is a right turn."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class MoveDirection(Enum):
    LEFT = (0, -1)
    RIGHT = (0, 1)
    DOWN = (1, 0)


class RotationDirection(Enum):
    LEFT = -1
    RIGHT = 1


@dataclass(frozen=True)
class Position:
    row: int
    column: int


@dataclass(frozen=True)
class Block:
    color: Color
    position: Position


COLORS: Dict[PieceKind, Color] = {
    PieceKind.I: (102, 224, 255),
    PieceKind.O: (255, 224, 102),
    PieceKind.S: (94, 224, 142),
    PieceKind.Z: (255, 102, 119),
    PieceKind.J: (106, 119, 255),
    PieceKind.L: (255, 158, 94),
    PieceKind.T: (200, 119, 255),
    PieceKind.RANDOM: (238, 130, 238),
    PieceKind.NEXTRANDOM: (255, 127, 80),
}

LENGTHS: Dict[PieceKind, int] = {
    PieceKind.I: 4, PieceKind.O: 2,
    PieceKind.S: 3, PieceKind.Z: 3, PieceKind.J: 3, PieceKind.L: 3, PieceKind.T: 3,
    PieceKind.RANDOM: 3, PieceKind.NEXTRANDOM: 3,
}

_O = [[1,1],[1,1]]

SHAPES: Dict[Tuple[PieceKind, Direction], Pattern] = {
    (PieceKind.I, Direction.UP):    [[0,1,0,0],[0,1,0,0],[0,1,0,0],[0,1,0,0]],
    (PieceKind.I, Direction.RIGHT): [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    (PieceKind.I, Direction.DOWN):  [[0,0,1,0],[0,0,1,0],[0,0,1,0],[0,0,1,0]],
    (PieceKind.I, Direction.LEFT):  [[0,0,0,0],[0,0,0,0],[1,1,1,1],[0,0,0,0]],

    (PieceKind.O, Direction.UP): _O,
    (PieceKind.O, Direction.RIGHT): _O,
    (PieceKind.O, Direction.DOWN): _O,
    (PieceKind.O, Direction.LEFT): _O,

    (PieceKind.S, Direction.UP):    [[0,1,1],[1,1,0],[0,0,0]],
    (PieceKind.S, Direction.RIGHT): [[0,1,0],[0,1,1],[0,0,1]],
    (PieceKind.S, Direction.DOWN):  [[0,0,0],[0,1,1],[1,1,0]],
    (PieceKind.S, Direction.LEFT):  [[1,0,0],[1,1,0],[0,1,0]],

    (PieceKind.Z, Direction.UP):    [[1,1,0],[0,1,1],[0,0,0]],
    (PieceKind.Z, Direction.RIGHT): [[0,0,1],[0,1,1],[0,1,0]],
    (PieceKind.Z, Direction.DOWN):  [[0,0,0],[1,1,0],[0,1,1]],
    (PieceKind.Z, Direction.LEFT):  [[0,1,0],[1,1,0],[1,0,0]],

    (PieceKind.J, Direction.UP):    [[1,0,0],[1,1,1],[0,0,0]],
    (PieceKind.J, Direction.RIGHT): [[0,1,1],[0,1,0],[0,1,0]],
    (PieceKind.J, Direction.DOWN):  [[0,0,0],[1,1,1],[0,0,1]],
    (PieceKind.J, Direction.LEFT):  [[0,1,0],[0,1,0],[1,1,0]],

    (PieceKind.L, Direction.UP):    [[0,0,1],[1,1,1],[0,0,0]],
    (PieceKind.L, Direction.RIGHT): [[0,1,0],[0,1,0],[0,1,1]],
    (PieceKind.L, Direction.DOWN):  [[0,0,0],[1,1,1],[1,0,0]],
    (PieceKind.L, Direction.LEFT):  [[1,1,0],[0,1,0],[0,1,0]],

    (PieceKind.T, Direction.UP):    [[0,1,0],[1,1,1],[0,0,0]],
    (PieceKind.T, Direction.RIGHT): [[0,1,0],[0,1,1],[0,1,0]],
    (PieceKind.T, Direction.DOWN):  [[0,0,0],[1,1,1],[0,1,0]],
    (PieceKind.T, Direction.LEFT):  [[0,1,0],[1,1,0],[0,1,0]],
}


def rotate_cw(m: Pattern) -> Pattern: return [list(r) for r in zip(*m[::-1])]


def rotate_to(up: Pattern, direction: Direction) -> Pattern:
    """Derive an orientation from the Up pattern by repeated clockwise turns."""
    m = [r[:] for r in up]
    for _ in range(int(direction)):
        m = rotate_cw(m)
    return m


def turn(direction: Direction, rotation: RotationDirection) -> Direction:
    return Direction((direction + rotation.value) % 4)


def spawn_position(kind: PieceKind) -> Position:
    length = LENGTHS[kind]
    return Position(-length, (COLS - length) // 2)


def pattern(kind: PieceKind, direction: Direction, shapes=None) -> Pattern:
    """Return the occupancy pattern for `kind` at `direction`.

    Random kinds read the Up pattern from the generator slot they index
    (`shapes` is a RandomShapeGenerator). Any combination that cannot be
    resolved is a programming error.
    """
    if kind.is_random:
        if shapes is None:
            raise RuntimeError(f"no shape generator for {kind.name}")
        return rotate_to(shapes.slot(kind), direction)
    try:
        return SHAPES[(kind, direction)]
    except KeyError:
        raise RuntimeError(f"unknown piece {kind!r} {direction!r}") from None


def create_blocks(kind: PieceKind, offset: Position, direction: Direction = Direction.UP, shapes=None) -> List[Block]:
    color = COLORS[kind]
    return [Block(color, Position(offset.row + r, offset.column + c))
            for r, row in enumerate(pattern(kind, direction, shapes))
            for c, v in enumerate(row) if v]


@dataclass
class Piece:
    kind: PieceKind
    direction: Direction
    offset: Position

    @staticmethod
    def spawn(kind: PieceKind) -> "Piece":
        return Piece(kind, Direction.UP, spawn_position(kind))

    def blocks(self, shapes=None) -> List[Block]:
        return create_blocks(self.kind, self.offset, self.direction, shapes)

    def moved(self, d: MoveDirection) -> "Piece":
        dr, dc = d.value
        return Piece(self.kind, self.direction, Position(self.offset.row + dr, self.offset.column + dc))

    def rotated(self, r: RotationDirection) -> "Piece":
        return Piece(self.kind, turn(self.direction, r), self.offset)
