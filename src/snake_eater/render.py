# render.py
import logging
import os
import random
from typing import Optional, Tuple

import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, TILE_SIZE,
    BG, GREEN, RED, PINK, TEXT, BUTTON, BUTTON_TEXT,
    FOOD_IMAGE, HEAD_IMAGE,
)
from .game import GamePhase, SnakeEaterGame

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def load_image(asset_dir: str, name: str, size: int) -> Optional[pygame.Surface]:
    path = os.path.join(asset_dir, name)
    if not os.path.exists(path):
        logger.info("Asset %s not found; drawing shapes instead", path)
        return None
    return pygame.transform.smoothscale(pygame.image.load(path).convert_alpha(), (size, size))


def random_color(rng: random.Random) -> Color:
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256))


class Renderer:
    """Draws a SnakeEaterGame onto a pygame surface, one frame per call."""

    def __init__(self, screen: pygame.Surface, asset_dir: str = "."):
        self.screen = screen
        self.font = pygame.font.SysFont("Arial", 16, bold=True)
        self.big_font = pygame.font.SysFont("Arial", 20, bold=True)
        self.button_font = pygame.font.SysFont("Arial", 24, bold=True)
        self.food_image = load_image(asset_dir, FOOD_IMAGE, TILE_SIZE * 2)
        self.head_image = load_image(asset_dir, HEAD_IMAGE, TILE_SIZE)
        self.body_color: Color = GREEN
        self.play_button = pygame.Rect(WIDTH // 2 - 100, HEIGHT // 2 - 30, 200, 60)
        self._rng = random.Random()

    def recolor(self) -> None:
        """Feed hook: pick a fresh body colour."""
        self.body_color = random_color(self._rng)

    def draw(self, game: SnakeEaterGame) -> None:
        self.screen.fill(BG)
        phase = game.current_phase()
        if phase is GamePhase.NOT_STARTED:
            self._draw_start(game)
        elif phase is GamePhase.RUNNING:
            self._draw_game(game)
        else:
            self._draw_game_over(game)

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)

    def _draw_start(self, game: SnakeEaterGame) -> None:
        pygame.draw.rect(self.screen, BUTTON, self.play_button)
        label = self.button_font.render("Play Now", True, BUTTON_TEXT)
        self.screen.blit(label, label.get_rect(center=self.play_button.center))

        msg = self.big_font.render("HELLO PLAYER :)", True, TEXT)
        self.screen.blit(msg, msg.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 80)))

    def _draw_game(self, game: SnakeEaterGame) -> None:
        fx, fy = game.current_food()
        if self.food_image is not None:
            # twice the tile size, centred on the food tile
            self.screen.blit(self.food_image, (fx * TILE_SIZE - TILE_SIZE // 2, fy * TILE_SIZE - TILE_SIZE // 2))
        else:
            pygame.draw.rect(self.screen, RED, self._cell_rect(fx, fy))

        snake = game.current_snake()
        for x, y in snake[1:]:
            pygame.draw.rect(self.screen, self.body_color, self._cell_rect(x, y))
        hx, hy = snake[0]
        if self.head_image is not None:
            self.screen.blit(self.head_image, (hx * TILE_SIZE, hy * TILE_SIZE))
        else:
            pygame.draw.rect(self.screen, PINK, self._cell_rect(hx, hy))

        score = self.font.render(f"Score: {game.current_score()}", True, TEXT)
        high = self.font.render(f"High Score: {game.high_score()}", True, TEXT)
        self.screen.blit(score, (10, 6))
        self.screen.blit(high, (150, 6))

    def _draw_game_over(self, game: SnakeEaterGame) -> None:
        msg = self.big_font.render(
            f"Game Over! Score: {game.current_score()}. Press R to Restart.", True, TEXT
        )
        self.screen.blit(msg, msg.get_rect(center=(WIDTH // 2, HEIGHT // 2)))
