from tetris_board import SPAWN_ROWS
from tetris_config import CONFIG
from tetris_game import Game, GameMode, GameResult
from tetris_piece import (Piece, PieceKind, FIXED_KINDS, MoveDirection, RotationDirection, COLORS,
                          COLS, ROWS)

GREY = (90, 90, 90)


def drop(game, kind, shift, rotation=None):
    """Replace the active piece with `kind`, shift it sideways and force-fix it."""
    game.field.piece = Piece.spawn(kind)
    if rotation is not None:
        assert game.rotate(rotation)
    d = MoveDirection.RIGHT if shift > 0 else MoveDirection.LEFT
    for _ in range(abs(shift)):
        assert game.move(d)
    game.force_fix()


def filled(pattern):
    return sum(v for row in pattern for v in row)


def test_play_normal_starts_clean():
    g = Game(GameMode.NORMAL, seed=1)
    g.play()
    assert g.is_playing
    assert not g.is_over
    assert g.result.total_rows.value == 0
    assert g.field.piece.kind in FIXED_KINDS
    assert g.next_kind.value in FIXED_KINDS
    assert filled([[1 if v else 0 for v in row] for row in g.next_field.colors()]) == 4


def test_play_while_playing_is_noop():
    g = Game(seed=2)
    g.play()
    g.move(MoveDirection.DOWN)
    piece = g.field.piece
    g.play()
    assert g.field.piece is piece


def test_commands_ignored_before_play():
    g = Game(seed=3)
    assert not g.move(MoveDirection.LEFT)
    assert not g.rotate(RotationDirection.RIGHT)
    g.tick()
    g.force_fix()
    assert g.field.piece is None


def test_completing_one_row_counts_and_removes_it():
    g = Game(GameMode.NORMAL, seed=4)
    g.play()
    drop(g, PieceKind.I, -3, RotationDirection.RIGHT)
    drop(g, PieceKind.I, 1, RotationDirection.RIGHT)
    assert g.result.total_rows.value == 0
    drop(g, PieceKind.O, 4)
    grid = g.field.colors()
    assert g.result.total_rows.value == 1
    assert g.result.score.value == 40
    assert [c for c in range(COLS) if grid[ROWS - 1][c]] == [8, 9]
    assert grid[ROWS - 1][8] == COLORS[PieceKind.O]
    assert all(v is None for v in grid[ROWS - 2])
    assert g.is_playing and not g.is_over


def test_lock_spawns_queued_kind_and_draws_next():
    g = Game(GameMode.NORMAL, seed=5)
    g.play()
    queued = g.next_kind.value
    g.force_fix()
    assert g.field.piece.kind is queued
    assert g.next_kind.value in FIXED_KINDS


def test_speed_up_once_per_ten_rows():
    g = Game(seed=6)
    g.play()
    speedups = []
    g.field.interval.subscribe(speedups.append)
    for n in (4, 4, 0):
        g.field.placed.emit(n)
    assert speedups == []
    g.field.placed.emit(4)
    assert len(speedups) == 1
    g.field.placed.emit(0)
    g.field.placed.emit(3)
    g.field.placed.emit(4)
    assert g.result.total_rows.value == 19
    assert len(speedups) == 1
    g.field.placed.emit(4)
    assert g.result.total_rows.value == 23
    assert len(speedups) == 2
    assert g.field.interval.value == CONFIG["FALL_INTERVAL_MS"] - 2 * CONFIG["FALL_STEP_MS"]


def test_tick_falls_then_locks():
    g = Game(seed=7)
    g.play()
    placed = []
    g.field.placed.subscribe(placed.append)
    row = g.field.piece.offset.row
    g.tick()
    assert g.field.piece.offset.row == row + 1
    for _ in range(30):
        g.tick()
    assert placed
    assert g.field.piece is not None


def test_game_over_blocks_commands_until_play():
    g = Game(seed=8)
    g.play()
    for r in range(ROWS):
        for c in (3, 4, 5, 6):
            g.field.board[r + SPAWN_ROWS][c] = GREY
    g.force_fix()
    assert g.is_over
    assert not g.is_playing
    assert not g.move(MoveDirection.LEFT)
    g.tick()
    assert g.field.piece is None
    g.play()
    assert g.is_playing and not g.is_over
    assert g.result.total_rows.value == 0
    assert all(v is None for row in g.field.board for v in row)


def test_crazy_mode_alternates_slots():
    g = Game(GameMode.CRAZY, seed=9)
    g.play()
    assert g.field.piece.kind is PieceKind.RANDOM
    assert g.next_kind.value is PieceKind.RANDOM
    preview = [[1 if v else 0 for v in row] for row in g.next_field.colors()]
    assert filled(preview) == filled(g.shapes.current)

    current, upcoming = g.shapes.current, g.shapes.next
    g.force_fix()
    assert g.field.piece.kind is PieceKind.RANDOM
    assert g.next_kind.value is PieceKind.NEXTRANDOM
    assert g.shapes.current is current
    assert g.shapes.next is not upcoming

    upcoming = g.shapes.next
    g.force_fix()
    assert g.field.piece.kind is PieceKind.NEXTRANDOM
    assert g.next_kind.value is PieceKind.RANDOM
    assert g.shapes.next is upcoming
    assert g.shapes.current is not current

    g.force_fix()
    assert g.field.piece.kind is PieceKind.RANDOM
    assert g.next_kind.value is PieceKind.NEXTRANDOM


def test_result_scores_by_level():
    r = GameResult()
    r.add_row_count(2)
    assert r.score.value == 100
    r.add_row_count(4)
    r.add_row_count(4)
    r.add_row_count(1)
    assert r.total_rows.value == 11
    assert r.score.value == 100 + 1200 + 1200 + 40 * 2
    r.clear()
    assert (r.total_rows.value, r.score.value) == (0, 0)


def test_restart_resets_speed_level():
    g = Game(seed=10)
    g.play()
    for n in (4, 4, 2):
        g.field.placed.emit(n)
    assert g.field.interval.value == CONFIG["FALL_INTERVAL_MS"] - CONFIG["FALL_STEP_MS"]
    for r in range(ROWS):
        for c in (3, 4, 5, 6):
            g.field.board[r + SPAWN_ROWS][c] = GREY
    g.force_fix()
    assert g.is_over

    g.play()
    assert g.field.interval.value == CONFIG["FALL_INTERVAL_MS"]
    assert g.previous_level == 0
    for n in (4, 4, 2):
        g.field.placed.emit(n)
    assert g.result.total_rows.value == 10
    assert g.field.interval.value == CONFIG["FALL_INTERVAL_MS"] - CONFIG["FALL_STEP_MS"]
