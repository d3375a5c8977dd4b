# main.py
import argparse
import logging

import pygame # type: ignore

from .config import WIDTH, HEIGHT, FPS, BG, Config
from .game import Game, GameClock
from .render import draw_game, draw_game_over, draw_info, draw_instructions

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Grid snake arcade game")
    parser.add_argument("--grid-size", type=int, default=defaults.grid_size)
    parser.add_argument("--speed", type=int, default=defaults.start_speed,
                        help="starting tick interval in ms")
    parser.add_argument("--min-speed", type=int, default=defaults.min_speed,
                        help="fastest tick interval in ms")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed food placement for a reproducible game")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(
        seed=args.seed,
        grid_size=args.grid_size,
        start_speed=args.speed,
        min_speed=args.min_speed,
    )
    game = Game(cfg)

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    screen.fill(BG)
    draw_instructions(screen, font)

    ticker = GameClock(game)
    ticker.start()
    logger.info("Started: grid=%d speed=%dms", cfg.grid_size, cfg.start_speed)

    try:
        while not game.quit_requested.is_set():
            # 1) input (keys act on release)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.request_quit()
                elif event.type == pygame.KEYUP:
                    game.handle_key(event.scancode, key_up=True)

            # 2) render; the ticker thread drives the simulation
            snap = game.snapshot()
            draw_game(screen, snap)
            if snap.game_over:
                draw_game_over(screen, font, snap)
            if game.consume_info_changed():
                draw_info(screen, font, snap)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        ticker.stop()
        pygame.quit()


if __name__ == "__main__":
    main()
