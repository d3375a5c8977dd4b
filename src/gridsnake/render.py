# render.py
from typing import Tuple
import pygame # type: ignore

from .config import (
    WIDTH, BOARD_PX, MARGIN,
    BG, BOARD, GRID, SNAKE, HEAD, APPLE, TEXT, HINT,
)
from .game import Snapshot

PANEL_X = BOARD_PX + 2 * MARGIN + 20
INFO_RECT = pygame.Rect(PANEL_X, 0, WIDTH - PANEL_X, 150)

INSTRUCTIONS = (
    "Arrows: turn",
    "Enter: play again",
    "Esc: quit",
    "Corner food x4, edge food x2",
)


def cell_rect(gx: int, gy: int, grid_size: int) -> pygame.Rect:
    # Row 0 is drawn at the top, so the y = +1 direction walks down the screen.
    size = BOARD_PX // grid_size
    return pygame.Rect(MARGIN + gx * size + 1, MARGIN + gy * size + 1, size - 2, size - 2)


def draw_cell(screen: pygame.Surface, gx: int, gy: int, grid_size: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy, grid_size), border_radius=4)


def draw_board(screen: pygame.Surface, grid_size: int) -> None:
    board = pygame.Rect(MARGIN, MARGIN, BOARD_PX, BOARD_PX)
    pygame.draw.rect(screen, BOARD, board)
    step = BOARD_PX // grid_size
    for i in range(1, grid_size):
        pygame.draw.line(screen, GRID, (MARGIN + i * step, MARGIN), (MARGIN + i * step, MARGIN + BOARD_PX))
        pygame.draw.line(screen, GRID, (MARGIN, MARGIN + i * step), (MARGIN + BOARD_PX, MARGIN + i * step))


def draw_game(screen: pygame.Surface, snap: Snapshot) -> None:
    draw_board(screen, snap.grid_size)
    # food
    if snap.food is not None:
        draw_cell(screen, snap.food.x, snap.food.y, snap.grid_size, APPLE)
    # snake
    for i, (x, y) in enumerate(snap.body):
        draw_cell(screen, x, y, snap.grid_size, HEAD if i == 0 else SNAKE)


def draw_info(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Score panel; only redrawn when the game says it changed."""
    screen.fill(BG, INFO_RECT)
    lines = (
        f"Your score: {snap.score}",
        f"You ate food: {snap.food_eaten}",
        f"Your speed: {snap.level}",
    )
    for i, line in enumerate(lines):
        screen.blit(font.render(line, True, TEXT), (PANEL_X, 40 + i * 35))


def draw_instructions(screen: pygame.Surface, font: pygame.font.Font) -> None:
    for i, line in enumerate(INSTRUCTIONS):
        screen.blit(font.render(line, True, HINT), (PANEL_X, 200 + i * 30))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    # Dim the board with a translucent overlay
    overlay = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (MARGIN, MARGIN))

    center = MARGIN + BOARD_PX // 2
    title = font.render("YOU WIN" if snap.grid_full else "GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press Enter to restart", True, HINT)
    sco   = font.render(f"Score: {snap.score}", True, HINT)

    screen.blit(title, title.get_rect(center=(center, center - 16)))
    screen.blit(sub, sub.get_rect(center=(center, center + 16)))
    screen.blit(sco, sco.get_rect(center=(center, center + 44)))
