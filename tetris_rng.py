"""Piece randomizers: uniform 7-kind draw and crazy-mode shape generator"""
import logging
import random
from typing import Optional, Tuple

from tetris_piece import PieceKind, FIXED_KINDS, Pattern

log = logging.getLogger(__name__)

SIZE = 3


class UniformRandom:
    """Independent uniform draw over the 7 fixed kinds (no bag, no rerolls)."""
    PIECES = FIXED_KINDS

    def __init__(self, rng: random.Random):
        self.rng = rng

    def next_piece(self) -> PieceKind:
        return self.rng.choice(self.PIECES)


def make_pattern_valid(p: Pattern) -> Pattern:
    """Keep only the 4-connected component holding the first set cell.

    The anchor is the first set cell in row-major order; membership is
    decided by reachability from it. Returns a new pattern; an all-zero
    input comes back all zero.
    """
    n = len(p)
    start: Optional[Tuple[int, int]] = next(
        ((r, c) for r in range(n) for c in range(n) if p[r][c]), None)
    keep = set()
    if start is not None:
        stack = [start]
        while stack:
            r, c = stack.pop()
            if (r, c) in keep:
                continue
            keep.add((r, c))
            for dr, dc in ((-1, 0), (0, -1), (1, 0), (0, 1)):
                nr, nc = r + dr, c + dc
                if 0 <= nr < n and 0 <= nc < n and p[nr][nc] and (nr, nc) not in keep:
                    stack.append((nr, nc))
    return [[1 if (r, c) in keep else 0 for c in range(n)] for r in range(n)]


class RandomShapeGenerator:
    """Owns the "current" and "next" crazy-mode Up patterns.

    RANDOM pieces read the current slot and NEXTRANDOM pieces the next
    slot, so the upcoming shape can be previewed while the other slot is
    still in play.
    """
    def __init__(self, rng: random.Random):
        self.rng = rng
        self.current: Pattern = [[0] * SIZE for _ in range(SIZE)]
        self.next: Pattern = [[0] * SIZE for _ in range(SIZE)]

    def generate(self) -> Pattern:
        raw = [[self.rng.randint(0, 1) for _ in range(SIZE)] for _ in range(SIZE)]
        valid = make_pattern_valid(raw)
        log.debug("random pattern %s -> %s", raw, valid)
        return valid

    def set_current_pattern(self):
        self.current = self.generate()

    def set_next_pattern(self):
        self.next = self.generate()

    def slot(self, kind: PieceKind) -> Pattern:
        if kind is PieceKind.RANDOM: return self.current
        if kind is PieceKind.NEXTRANDOM: return self.next
        raise RuntimeError(f"{kind!r} has no random pattern slot")

