"""Dance stage: a stand-in dancer whose pose follows the clip progress."""
from __future__ import annotations

import math

import pygame

from combo_dance import GameView, LoopMode
from combo_dance.playback import TimedPlayback

from ui.constants import (
    DANCER_COLOR,
    FLOOR_COLOR,
    SCREEN_W,
    STAGE_BG,
    STAGE_H,
    TEXT_DIM,
)


def draw_stage(
    surface: pygame.Surface,
    font: pygame.font.Font,
    view: GameView,
    playback: TimedPlayback,
) -> None:
    pygame.draw.rect(surface, STAGE_BG, (0, 0, SCREEN_W, STAGE_H))
    pygame.draw.rect(surface, FLOOR_COLOR, (0, STAGE_H - 60, SCREEN_W, 60))

    # Each clip gets its own bounce rhythm so changes are visible.
    clip = playback.clip if playback.clip is not None else 0
    phase = playback.progress * math.tau * (1 + clip % 3)
    cx = SCREEN_W // 2 + int(40 * math.sin(phase)) * (clip % 2)
    cy = STAGE_H - 110 - int(abs(20 * math.sin(phase)))

    pygame.draw.circle(surface, DANCER_COLOR, (cx, cy - 50), 16)
    pygame.draw.line(surface, DANCER_COLOR, (cx, cy - 34), (cx, cy + 10), 4)
    arm = int(24 * math.cos(phase))
    pygame.draw.line(surface, DANCER_COLOR, (cx, cy - 20), (cx - 26, cy - 20 - arm), 4)
    pygame.draw.line(surface, DANCER_COLOR, (cx, cy - 20), (cx + 26, cy - 20 + arm), 4)
    pygame.draw.line(surface, DANCER_COLOR, (cx, cy + 10), (cx - 14, cy + 48), 4)
    pygame.draw.line(surface, DANCER_COLOR, (cx, cy + 10), (cx + 14, cy + 48), 4)

    name = view.clip_name or "-"
    loop = "loop" if view.loop is LoopMode.REPEAT else "once"
    label = font.render(f"{name} ({loop})", True, TEXT_DIM)
    surface.blit(label, (12, 10))
