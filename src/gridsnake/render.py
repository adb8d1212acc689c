from __future__ import annotations

import pygame

from . import config
from .state import GameStatus, Snapshot


def draw_state(surface: pygame.Surface, snap: Snapshot, tile: int = config.TILE_SIZE) -> None:
    surface.fill(config.BLACK)

    if snap.status is GameStatus.GAME_OVER:
        draw_game_over(surface, snap)
        return

    for i, (x, y) in enumerate(snap.snake):
        rect = pygame.Rect(x * tile, y * tile, tile, tile)
        pygame.draw.rect(surface, config.HEAD if i == 0 else config.BODY, rect)

    if snap.food is not None:
        fx, fy = snap.food
        pygame.draw.ellipse(surface, config.FOOD, pygame.Rect(fx * tile, fy * tile, tile, tile))


def draw_game_over(surface: pygame.Surface, snap: Snapshot) -> None:
    w, h = surface.get_size()
    title = pygame.font.Font(None, 48).render("Game Over", True, config.TEXT)
    surface.blit(title, title.get_rect(center=(w // 2, h // 2)))

    small = pygame.font.Font(None, 24)
    score = small.render(f"Score: {snap.score}   R to restart", True, config.SCORE_TEXT)
    surface.blit(score, score.get_rect(center=(w // 2, h // 2 + title.get_height())))
