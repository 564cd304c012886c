"""
Rendering helpers for the pygame front-end.

- Pre-render the static background (grid, panel, preview frame) once per Dims.
- Cache one cell Surface per (color, size); cells are blitted, never redrawn.
- Cache HUD text surfaces; re-render only when the values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLS, ROWS, Color

BG = (10,13,34)
GRID = (40,50,90)
TEXT = (200,210,240)
HINT = (165,175,215)

@dataclass
class HudCache:
    lines: int = -1
    score: int = -1
    lines_s: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._cells: Dict[Tuple[Color,int], pygame.Surface] = {}
        self.hud = HudCache()
        self._make_static()

    # ---------- Static background (grid + panel + preview frame) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        side = d.preview_cell*4
        frame = pygame.Rect(d.preview_x-6, d.preview_y-6, side+12, side+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)
        self.bg.blit(self.font.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 12))

    def cell_surf(self, color: Color, size: int) -> pygame.Surface:
        key = (color, size)
        if key not in self._cells:
            s = pygame.Surface((size-2, size-2))
            s.fill(color)
            self._cells[key] = s
        return self._cells[key]

    def draw_grid(self, screen: pygame.Surface, colors: List[List[Optional[Color]]], x0: int, y0: int, size: int):
        for y, row in enumerate(colors):
            for x, col in enumerate(row):
                if col:
                    screen.blit(self.cell_surf(col, size), (x0 + x*size + 1, y0 + y*size + 1))

    def draw(self, screen: pygame.Surface, game):
        d = self.dims
        screen.blit(self.bg, (0,0))
        self.draw_grid(screen, game.field.colors(), d.board_x, d.board_y, d.cell)
        self.draw_grid(screen, game.next_field.colors(), d.preview_x, d.preview_y, d.preview_cell)
        self.draw_hud(screen, game.result.total_rows.value, game.result.score.value)
        if game.is_over:
            self.draw_banner(screen, "GAME OVER (Enter to Restart)")

    def draw_banner(self, screen: pygame.Surface, text: str):
        d = self.dims
        msg = self.big_font.render(text, True, (255,220,220))
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w//2, d.board_y + d.board_h//2)))

    # ---------- HUD / Panel ----------
    def draw_hud(self, screen: pygame.Surface, lines: int, score: int):
        d = self.dims
        f = self.font
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        y = d.preview_y + d.preview_cell*4 + 24
        screen.blit(self.hud.lines_s, (d.panel_x + 12, y))
        screen.blit(self.hud.score_s, (d.panel_x + 12, y + 24))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→/↓ Move", True, HINT),
                f.render("↑/X Rot right", True, HINT),
                f.render("Z Rot left", True, HINT),
                f.render("Space Drop", True, HINT),
                f.render("Esc Menu", True, HINT),
            ]
        y += 72
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_menu(self, screen: pygame.Surface):
        d = self.dims
        screen.fill(BG)
        lines = [
            (self.big_font, "Tetris", (230,240,255)),
            (self.font, "N  Regular", TEXT),
            (self.font, "C  Crazy", TEXT),
            (self.font, "Esc  Quit", HINT),
        ]
        y = d.total_h//3
        for font, text, col in lines:
            s = font.render(text, True, col)
            screen.blit(s, s.get_rect(center=(d.total_w//2, y)))
            y += s.get_height() + 16
