"""Countdown, combo row, queue counter and key-bindings bar."""
from __future__ import annotations

import pygame

from combo_dance import GameView, Phase

from ui.constants import (
    ARROWS,
    BONUS_COLOR,
    CURRENT_BORDER,
    HUD_BG,
    HUD_H,
    SCREEN_W,
    STAGE_H,
    STATUS_BG,
    STATUS_H,
    STEP_COLORS,
    STEP_GAP,
    STEP_SIZE,
    TEXT_COLOR,
    TEXT_DIM,
    WARNING_COLOR,
)


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    big_font: pygame.font.Font,
    view: GameView,
) -> None:
    """Draw the panel under the stage."""
    y = STAGE_H
    pygame.draw.rect(surface, HUD_BG, (0, y, SCREEN_W, HUD_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    if view.countdown is not None:
        color = WARNING_COLOR if view.warning else TEXT_COLOR
        surface.blit(big_font.render(view.countdown, True, color), (16, y + 10))
    if view.bonus is not None:
        surface.blit(big_font.render(view.bonus, True, BONUS_COLOR), (110, y + 10))

    queue_label = f"Queue: {view.remaining}"
    if view.finishing:
        queue_label += "  (finishing)"
    label = font.render(queue_label, True, TEXT_DIM)
    surface.blit(label, (SCREEN_W - label.get_width() - 16, y + 14))

    if view.phase is Phase.READY:
        prompt = "Game over! [Enter] New game" if view.can_new_game else "[Enter] Start"
        text = big_font.render(prompt, True, TEXT_COLOR)
        surface.blit(text, (SCREEN_W // 2 - text.get_width() // 2, y + 70))
        return

    _draw_steps(surface, big_font, view, y + 60)


def _draw_steps(
    surface: pygame.Surface,
    font: pygame.font.Font,
    view: GameView,
    y: int,
) -> None:
    n = len(view.steps)
    width = n * STEP_SIZE + (n - 1) * STEP_GAP
    x = SCREEN_W // 2 - width // 2
    for step in view.steps:
        rect = pygame.Rect(x, y, STEP_SIZE, STEP_SIZE)
        pygame.draw.rect(surface, STEP_COLORS[step.status.value], rect, border_radius=8)
        if step.current:
            pygame.draw.rect(surface, CURRENT_BORDER, rect, width=3, border_radius=8)
        glyph = font.render(ARROWS[step.direction.value], True, TEXT_COLOR)
        surface.blit(glyph, glyph.get_rect(center=rect.center))
        x += STEP_SIZE + STEP_GAP


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, paused: bool) -> None:
    """Draw bottom key-bindings bar."""
    y = STAGE_H + HUD_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[Arrows] Dance  [Enter] Start  [P] Pause  [Esc] Quit"
    if paused:
        text = "PAUSED  " + text
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
