from __future__ import annotations

import pygame

from . import config
from .state import Snapshot


def cell_rect(row: int, col: int, cell: int) -> pygame.Rect:
    return pygame.Rect((col - 1) * cell, (row - 1) * cell, cell, cell)


def draw_arena(screen: pygame.Surface, snap: Snapshot, cell: int) -> None:
    w, h = snap.cols * cell, snap.rows * cell
    screen.fill(config.BG, pygame.Rect(0, 0, w, h))
    pygame.draw.rect(screen, config.WALL, (0, 0, w, cell))
    pygame.draw.rect(screen, config.WALL, (0, h - cell, w, cell))
    pygame.draw.rect(screen, config.WALL, (0, 0, cell, h))
    pygame.draw.rect(screen, config.WALL, (w - cell, 0, cell, h))
    for row, col in snap.walls:
        pygame.draw.rect(screen, config.WALL, cell_rect(row, col, cell))


def draw_number(screen: pygame.Surface, snap: Snapshot, cell: int, font: pygame.font.Font) -> None:
    rect = cell_rect(snap.number.row, snap.number.col, cell)
    pygame.draw.rect(screen, config.NUMBER, rect)
    label = font.render(str(snap.number_value), True, config.TEXT)
    screen.blit(label, label.get_rect(center=rect.center))


def draw_hud(screen: pygame.Surface, snap: Snapshot, cell: int, font: pygame.font.Font) -> None:
    top = snap.rows * cell
    screen.fill((0, 0, 0), pygame.Rect(0, top, snap.cols * cell, config.HUD_HEIGHT))
    text = f"Score: {snap.score}   Lives: {snap.lives}   Level: {snap.level}"
    label = font.render(text, True, config.TEXT)
    screen.blit(label, (4, top + (config.HUD_HEIGHT - label.get_height()) // 2))


def draw_overlay(screen: pygame.Surface, snap: Snapshot, cell: int, fonts: dict[str, pygame.font.Font]) -> None:
    cx, cy = snap.cols * cell // 2, snap.rows * cell // 2
    if snap.game_over:
        title = fonts["big"].render("Game Over", True, config.TEXT)
        hint = fonts["small"].render("Press R to restart", True, config.TEXT)
        screen.blit(title, title.get_rect(center=(cx, cy)))
        screen.blit(hint, hint.get_rect(center=(cx, cy + 40)))
    elif not snap.alive:
        title = fonts["big"].render("Life lost", True, config.TEXT)
        hint = fonts["small"].render(f"{snap.lives} left", True, config.TEXT)
        screen.blit(title, title.get_rect(center=(cx, cy)))
        screen.blit(hint, hint.get_rect(center=(cx, cy + 40)))
    elif snap.paused:
        title = fonts["big"].render("Paused", True, config.TEXT)
        screen.blit(title, title.get_rect(center=(cx, cy)))


def draw_state(screen: pygame.Surface, snap: Snapshot, cell: int, fonts: dict[str, pygame.font.Font]) -> None:
    draw_arena(screen, snap, cell)
    for row, col in snap.body:
        pygame.draw.rect(screen, config.SNAKE, cell_rect(row, col, cell))
    draw_number(screen, snap, cell, fonts["cell"])
    draw_hud(screen, snap, cell, fonts["small"])
    draw_overlay(screen, snap, cell, fonts)
    pygame.display.flip()
