"""Game orchestrator: mode, piece queue, speed ramp and result"""
import logging
import random
from enum import Enum
from typing import Optional

from tetris_board import Field, PreviewField
from tetris_config import CONFIG
from tetris_events import Observable
from tetris_piece import PieceKind, MoveDirection, RotationDirection, Position, create_blocks
from tetris_rng import UniformRandom, RandomShapeGenerator

log = logging.getLogger(__name__)

# Points per lock by rows cleared, multiplied by (level + 1)
SCORE_TABLE = {1: 40, 2: 100, 3: 300, 4: 1200}


class GameMode(Enum):
    NORMAL = "normal"
    CRAZY = "crazy"


class GameResult:
    def __init__(self):
        self.total_rows = Observable(0)
        self.score = Observable(0)

    def clear(self):
        self.total_rows.set(0)
        self.score.set(0)

    def add_row_count(self, count: int):
        if count <= 0:
            return
        level = self.total_rows.value // CONFIG["LINES_PER_LEVEL"]
        self.score.set(self.score.value + SCORE_TABLE[count] * (level + 1))
        self.total_rows.set(self.total_rows.value + count)


class Game:
    """Top-level state machine driving a Field.

    Idle -> play() -> Playing -> (lock above the top) -> GameOver -> play() ...

    Commands are ignored unless a game is in progress. The front-end reads
    `field`, `next_field`, `result`, `next_kind`, `is_playing` and `is_over`,
    subscribing to their signals for redraws.
    """
    def __init__(self, mode: GameMode = GameMode.NORMAL, seed: Optional[int] = None):
        self.mode = mode
        self.rng = random.Random(seed)
        self.randomizer = UniformRandom(self.rng)
        self.shapes = RandomShapeGenerator(self.rng)
        self.field = Field(self.shapes)
        self.next_field = PreviewField()
        self.result = GameResult()
        self.next_kind = Observable(None)
        self.previous_level = 0
        # Result must see the row count before the speed check runs.
        self.field.placed.subscribe(self.result.add_row_count)
        self.field.placed.subscribe(self._on_placed)
        self.field.game_over.subscribe(self._on_game_over)

    @property
    def is_playing(self) -> bool:
        return self.field.is_activated.value

    @property
    def is_over(self) -> bool:
        return self.field.is_game_over.value

    def play(self):
        if self.is_playing:
            return
        log.info("new game (%s)", self.mode.value)
        self.field.reset()
        self.result.clear()
        self.previous_level = 0
        if self.mode is GameMode.CRAZY:
            self.shapes.set_current_pattern()
            self._queue(PieceKind.RANDOM)
            self.shapes.set_next_pattern()
            self.field.activate(PieceKind.RANDOM)
        else:
            self.field.activate(self.randomizer.next_piece())
            self._queue(self.randomizer.next_piece())

    def move(self, direction: MoveDirection) -> bool:
        return self.is_playing and self.field.move(direction)

    def rotate(self, direction: RotationDirection) -> bool:
        return self.is_playing and self.field.rotate(direction)

    def force_fix(self):
        if self.is_playing:
            self.field.force_fix()

    def tick(self):
        """One fall step; a piece that cannot descend is locked."""
        if not self.is_playing:
            return
        if not self.field.move(MoveDirection.DOWN):
            self.field.fix()

    def _queue(self, kind: PieceKind):
        self.next_kind.set(kind)
        self.next_field.show(create_blocks(kind, Position(0, 0), shapes=self.shapes))

    def _on_placed(self, _cleared: int):
        if self.is_over:
            return
        level = self.result.total_rows.value // CONFIG["LINES_PER_LEVEL"]
        if level > self.previous_level:
            self.previous_level = level
            self.field.speed_up()

        kind = self.next_kind.value
        if self.mode is GameMode.CRAZY:
            # Refill the slot not backing the spawning piece and queue it.
            if kind is PieceKind.NEXTRANDOM:
                self.shapes.set_current_pattern()
                self._queue(PieceKind.RANDOM)
            else:
                self.shapes.set_next_pattern()
                self._queue(PieceKind.NEXTRANDOM)
        else:
            self._queue(self.randomizer.next_piece())
        self.field.activate(kind)

    def _on_game_over(self):
        log.info("game over: %d rows, score %d", self.result.total_rows.value, self.result.score.value)
