# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_board import PreviewField
from tetris_piece import COLS, ROWS

MARGIN = 16
PANEL_W = 200

@dataclass
class Dims:
    cell: int
    preview_cell: int
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_y: int
    panel_w: int
    preview_x: int
    preview_y: int
    total_w: int
    total_h: int

def compute_dims() -> Dims:
    """Board on the left, side panel with the next-piece preview on the right."""
    cell, preview_cell = int(CONFIG["CELL_SIZE"]), int(CONFIG["PREVIEW_CELL_SIZE"])
    board_w, board_h = COLS * cell, ROWS * cell
    panel_x = MARGIN + board_w + MARGIN
    return Dims(
        cell=cell, preview_cell=preview_cell,
        board_x=MARGIN, board_y=MARGIN, board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_y=MARGIN, panel_w=PANEL_W,
        preview_x=panel_x + (PANEL_W - PreviewField.SIZE * preview_cell) // 2,
        preview_y=MARGIN + 40,
        total_w=panel_x + PANEL_W + MARGIN,
        total_h=MARGIN + board_h + MARGIN,
    )
