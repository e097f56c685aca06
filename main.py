import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_events import Game
from tetris_input import command_for_key
from tetris_layout import compute_dims
from tetris_piece import ShapeCatalog
from tetris_render import RenderAssets
from tetris_rng import PieceRandom

logger = logging.getLogger("tetris")


def get_args(argv=None):
    parser = argparse.ArgumentParser("""Falling-block puzzle (pygame)""")
    parser.add_argument("--width", type=int, default=CONFIG["COLS"])
    parser.add_argument("--height", type=int, default=CONFIG["ROWS"])
    parser.add_argument("--tick-ms", type=int, default=CONFIG["TICK_MS"],
                        help="Milliseconds between gravity ticks")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"],
                        help="Seed for the piece randomizer")
    parser.add_argument("--block-size", type=int, default=None,
                        help="Pixel size of a block (default: fit the canvas)")
    parser.add_argument("--log-level", type=str, default=CONFIG["LOG_LEVEL"])
    return parser.parse_args(argv)


def main(argv=None):
    opt = get_args(argv)
    logging.basicConfig(level=getattr(logging, opt.log_level.upper(), logging.INFO),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if opt.block_size:
        dims = compute_dims(opt.width, opt.height, opt.width * opt.block_size, opt.height * opt.block_size)
    else:
        dims = compute_dims(opt.width, opt.height)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    game = Game(ShapeCatalog(rng=PieceRandom(opt.seed)), opt.width, opt.height, opt.tick_ms)
    latest = [game.snapshot()]

    def on_snapshot(snap):
        latest[0] = snap

    game.subscribe(on_snapshot)
    logger.info("starting %dx%d board, tick %d ms, seed %s", opt.width, opt.height, opt.tick_ms, opt.seed)

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_r and game.state.game_over:
                    game.reset()
                    continue
                game.post(command_for_key(e.key))

        if not game.state.game_over:
            game.update(dt)
        else:
            game.process_pending()

        render.draw(screen, latest[0])
        pygame.display.flip()


if __name__ == "__main__":
    main()
