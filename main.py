import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_game import Game, GameMode
from tetris_layout import compute_dims
from tetris_piece import MoveDirection, RotationDirection
from tetris_render import RenderAssets

FALL = pygame.USEREVENT + 1

MOVES = {
    pygame.K_LEFT: MoveDirection.LEFT,
    pygame.K_RIGHT: MoveDirection.RIGHT,
    pygame.K_DOWN: MoveDirection.DOWN,
}
ROTATIONS = {
    pygame.K_z: RotationDirection.LEFT,
    pygame.K_x: RotationDirection.RIGHT,
    pygame.K_UP: RotationDirection.RIGHT,
}
MODES = {pygame.K_n: GameMode.NORMAL, pygame.K_c: GameMode.CRAZY}


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def start(mode):
    game = Game(mode, CONFIG["SEED"])
    # Fall cadence follows the field's interval; set_timer replaces the old period.
    game.field.interval.subscribe(lambda ms: pygame.time.set_timer(FALL, ms))
    game.play()
    pygame.time.set_timer(FALL, game.field.interval.value)
    return game


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, FALL])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 34)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    game = None
    if CONFIG["MODE"]:
        game = start(GameMode(CONFIG["MODE"]))

    while True:
        clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if game is None:
                if e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        pygame.quit(); sys.exit()
                    if e.key in MODES:
                        game = start(MODES[e.key])
                continue
            if e.type == FALL:
                game.tick()
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.time.set_timer(FALL, 0)
                    game = None
                elif e.key in MOVES: game.move(MOVES[e.key])
                elif e.key in ROTATIONS: game.rotate(ROTATIONS[e.key])
                elif e.key == pygame.K_SPACE: game.force_fix()
                elif e.key == pygame.K_RETURN and game.is_over: game.play()

        if game is None:
            render.draw_menu(screen)
        else:
            render.draw(screen, game)
        pygame.display.flip()


if __name__ == '__main__':
    main()
