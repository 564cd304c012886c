"""Board helpers (collide, merge, sweep) and the Field that owns the grid"""
import logging
from typing import Optional, List

from tetris_config import CONFIG
from tetris_events import Signal, Observable
from tetris_piece import (Piece, PieceKind, Block, Color, MoveDirection, RotationDirection,
                          COLS, ROWS, SPAWN_ROWS)

log = logging.getLogger(__name__)

# Row 0 of the list is grid row -SPAWN_ROWS; visible row r lives at r + SPAWN_ROWS.
Board = List[List[Optional[Color]]]


def empty_board() -> Board:
    return [[None] * COLS for _ in range(SPAWN_ROWS + ROWS)]


def collide(board: Board, blocks: List[Block]) -> bool:
    """True if any block is outside the columns/floor or on a locked cell.

    Rows above the visible top are always passable.
    """
    for b in blocks:
        r, c = b.position.row, b.position.column
        if c < 0 or c >= COLS or r >= ROWS: return True
        if r >= 0 and board[r + SPAWN_ROWS][c]: return True
    return False


def merge(board: Board, blocks: List[Block]):
    for b in blocks:
        board[b.position.row + SPAWN_ROWS][b.position.column] = b.color


def sweep(board: Board) -> int:
    """Remove full rows bottom-to-top, shifting everything above down by one."""
    c = 0; y = len(board) - 1
    while y >= 0:
        if all(board[y][x] for x in range(COLS)):
            del board[y]; board.insert(0, [None] * COLS); c += 1
        else: y -= 1
    return c


def above_top(board: Board) -> bool:
    return any(v for row in board[:SPAWN_ROWS] for v in row)


class Field:
    """The playing field: locked cells, the active piece and the fall speed.

    Commands (activate/move/rotate/force_fix/fix/speed_up) mutate state and
    notify subscribers synchronously:

      changed      -- grid or active piece changed
      placed(n)    -- a piece locked and n rows were cleared
      game_over()  -- a lock left blocks above the visible top
    """
    def __init__(self, shapes=None):
        self.shapes = shapes
        self.board: Board = empty_board()
        self.piece: Optional[Piece] = None
        self.is_activated = Observable(False)
        self.is_game_over = Observable(False)
        self.interval = Observable(CONFIG["FALL_INTERVAL_MS"])
        self.changed = Signal()
        self.placed = Signal()
        self.game_over = Signal()

    def reset(self):
        self.board = empty_board()
        self.piece = None
        self.is_activated.set(False)
        self.is_game_over.set(False)
        self.interval.set(CONFIG["FALL_INTERVAL_MS"])
        self.changed.emit()

    def activate(self, kind: PieceKind):
        if self.piece is not None or self.is_game_over.value:
            log.debug("activate(%s) ignored: piece already active or game over", kind.name)
            return
        self.piece = Piece.spawn(kind)
        self.is_activated.set(True)
        self.changed.emit()

    def blocks(self) -> List[Block]:
        if self.piece is None:
            return []
        return self.piece.blocks(self.shapes)

    def _try(self, candidate: Piece) -> bool:
        blocks = candidate.blocks(self.shapes)
        # A shapeless random piece has nothing to move; it locks on the next fall.
        if not blocks or collide(self.board, blocks):
            return False
        self.piece = candidate
        self.changed.emit()
        return True

    def move(self, direction: MoveDirection) -> bool:
        if self.piece is None:
            return False
        return self._try(self.piece.moved(direction))

    def rotate(self, direction: RotationDirection) -> bool:
        if self.piece is None:
            return False
        return self._try(self.piece.rotated(direction))

    def force_fix(self):
        if self.piece is None:
            return
        while self.move(MoveDirection.DOWN):
            pass
        self.fix()

    def fix(self):
        """Lock the active piece, clear full rows and check the top limit."""
        if self.piece is None:
            return
        merge(self.board, self.blocks())
        self.piece = None
        cleared = sweep(self.board)
        if cleared:
            log.debug("cleared %d row(s)", cleared)
        over = above_top(self.board)
        if over:
            self.is_game_over.set(True)
            self.is_activated.set(False)
        self.changed.emit()
        self.placed.emit(cleared)
        if over:
            self.game_over.emit()

    def speed_up(self):
        self.interval.set(max(CONFIG["FALL_MIN_MS"], self.interval.value - CONFIG["FALL_STEP_MS"]))
        log.info("speed up: fall interval %d ms", self.interval.value)

    def colors(self) -> Board:
        """Visible ROWS x COLS grid of colors with the active piece drawn in."""
        grid = [row[:] for row in self.board[SPAWN_ROWS:]]
        for b in self.blocks():
            if b.position.row >= 0:
                grid[b.position.row][b.position.column] = b.color
        return grid


class PreviewField:
    """Small grid showing the queued piece at its Up orientation."""
    SIZE = 4

    def __init__(self):
        self.cells: Board = [[None] * self.SIZE for _ in range(self.SIZE)]
        self.changed = Signal()

    def show(self, blocks: List[Block]):
        self.cells = [[None] * self.SIZE for _ in range(self.SIZE)]
        if blocks:
            h = max(b.position.row for b in blocks) - min(b.position.row for b in blocks) + 1
            w = max(b.position.column for b in blocks) - min(b.position.column for b in blocks) + 1
            top = min(b.position.row for b in blocks) - (self.SIZE - h) // 2
            left = min(b.position.column for b in blocks) - (self.SIZE - w) // 2
            for b in blocks:
                self.cells[b.position.row - top][b.position.column - left] = b.color
        self.changed.emit()

    def colors(self) -> Board:
        return [row[:] for row in self.cells]
