"""Dance Floor - directional combo minigame with pygame.

Exercises combo_dance.Engine with a timed stand-in playback engine.

Controls:
  Arrows  Enter the combo shown on screen
  Enter   Start / start a new game after game over
  P       Pause / resume the dancer
  Esc     Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from combo_dance import Engine, GameConfig
from combo_dance.log import setup_logging
from combo_dance.playback import TimedPlayback

from game.audio import MixerMusic
from game.clips import CLIP_DURATIONS, CLIP_NAMES
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.hud import draw_hud, draw_status_bar
from ui.stage import draw_stage

KEY_NAMES = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_UP: "ArrowUp",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_DOWN: "ArrowDown",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = GameConfig()
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--combo-length", type=int, default=defaults.combo_length)
    p.add_argument("--start-time", type=float, default=defaults.start_time_ms, help="ms")
    p.add_argument("--reward", type=float, default=defaults.combo_reward_ms, help="ms")
    p.add_argument("--timeout", type=float, default=defaults.combo_timeout_ms, help="ms")
    p.add_argument("--music", default="assets/audio/Music.mp3")
    p.add_argument("-q", "--quiet", action="store_true")
    p.add_argument("-v", "--debug", action="store_true")
    return p.parse_args(argv)


class GameState:
    """Holds the engine and the stand-ins it drives."""

    def __init__(self, args: argparse.Namespace) -> None:
        config = GameConfig(
            combo_length=args.combo_length,
            start_time_ms=args.start_time,
            combo_reward_ms=args.reward,
            combo_timeout_ms=args.timeout,
            music_url=args.music,
        )
        self.playback = TimedPlayback(CLIP_DURATIONS)
        self.audio = MixerMusic(config.music_url)
        self.engine = Engine(config, seed=args.seed, playback=self.playback, audio=self.audio)

        # Playback runs on the same frame delta as the countdown.
        self.playback.on_finished = self.engine.clip_finished
        self.engine.on_frame(self.playback.advance)
        self.engine.load_catalog(CLIP_NAMES)

    def on_enter(self) -> None:
        if self.engine.state.can_new_game:
            self.engine.new_game()
        self.engine.start()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(quiet=args.quiet, debug=args.debug)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Dance Floor - combo_dance demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 28, bold=True)

    state = GameState(args)
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    state.on_enter()
                elif event.key == pygame.K_p:
                    state.engine.set_paused(not state.engine.paused)
                else:
                    state.engine.press(KEY_NAMES.get(event.key, pygame.key.name(event.key)))

        # --- Frame ---
        state.engine.frame()

        # --- Render ---
        view = state.engine.view
        screen.fill(BG_COLOR)
        draw_stage(screen, font, view, state.playback)
        draw_hud(screen, font, big_font, view)
        draw_status_bar(screen, font, state.engine.paused)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
