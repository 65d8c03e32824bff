# main.py
import argparse
import logging
import random

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config
from .game import GamePhase, SnakeEaterGame
from .grid import Direction
from .render import Renderer

TICK_EVENT = pygame.USEREVENT + 1

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class PygameTimer:
    """Posts TICK_EVENT every interval_ms while started."""

    def __init__(self, interval_ms: int):
        self.interval_ms = interval_ms

    def start(self) -> None:
        pygame.time.set_timer(TICK_EVENT, self.interval_ms)

    def stop(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 0)


def handle_event(event: pygame.event.Event, game: SnakeEaterGame, renderer: Renderer) -> bool:
    """Translate one pygame event into a game command. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == TICK_EVENT:
        game.on_tick()
    elif event.type == pygame.KEYDOWN:
        if event.key in KEY_DIRECTIONS:
            game.submit_direction(KEY_DIRECTIONS[event.key])
        elif event.key == pygame.K_s:
            game.submit_start()
        elif event.key == pygame.K_r:
            game.submit_reset()
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if game.current_phase() is GamePhase.NOT_STARTED and renderer.play_button.collidepoint(event.pos):
            game.submit_start()
    return True


def run(cfg: Config = CFG) -> None:
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake Eater Game")
    clock = pygame.time.Clock()

    renderer = Renderer(screen, cfg.asset_dir)
    game = SnakeEaterGame(cfg, rng=random.Random(cfg.seed), timer=PygameTimer(cfg.tick_ms))
    game.on_feed = renderer.recolor

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(event, game, renderer):
                running = False
                break

        renderer.draw(game)
        pygame.display.flip()
        clock.tick(60)  # movement is driven by TICK_EVENT, not frame rate

    pygame.quit()


def main():
    parser = argparse.ArgumentParser(description="Play Snake Eater.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--assets", type=str, default=CFG.asset_dir, help="directory holding banana.png / lips.jpg")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(Config(seed=args.seed, asset_dir=args.assets))


if __name__ == "__main__":
    main()
