"""Easing Gallery - Interactive easing curve visualizer.

One lane per easing: linear, ease-in, ease-out, ease-in-out and a custom
threshold function. Every lane is a tweens.Tween advanced by the step system
at a fixed TPS.

Controls:
  Space   Launch a new wave
  A       Toggle auto-wave (relaunch once every lane settles)
  +/-     Adjust steps per wave
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from tweens import Tween, make_tween_system

from game.spawner import Lane, launch_wave
from ui.constants import (
    BG_COLOR,
    DEFAULT_STEPS,
    FPS,
    MAX_STEPS,
    MIN_STEPS,
    SCREEN_H,
    SCREEN_W,
    STEPS_DELTA,
    TPS,
)
from ui.lanes import draw_lanes
from ui.status import draw_sidebar, draw_status_bar


class GameState:
    """Holds the lanes and wave stats."""

    def __init__(self) -> None:
        self.steps = DEFAULT_STEPS
        self.wave_count = 0
        self.complete_count = 0
        self.auto_wave = False
        self.lanes: list[Lane] = []
        self.active: list[Tween] = []

        self.tween_system = make_tween_system(on_complete=self._on_tween_complete)
        self.launch_wave()

    def _on_tween_complete(self, tween: Tween) -> None:
        self.complete_count += 1

    def launch_wave(self) -> None:
        self.lanes = launch_wave(self.steps)
        self.active = [lane.tween for lane in self.lanes]
        self.wave_count += 1

    def step(self) -> None:
        self.active = self.tween_system(self.active)
        if not self.active and self.auto_wave:
            self.launch_wave()


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery - tweens demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GameState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_SPACE:
                    state.launch_wave()

                elif event.key == pygame.K_a:
                    state.auto_wave = not state.auto_wave

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.steps = min(state.steps + STEPS_DELTA, MAX_STEPS)

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.steps = max(state.steps - STEPS_DELTA, MIN_STEPS)

        # --- Tick ---
        while accumulator >= tick_interval:
            state.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, state.lanes, font)
        draw_sidebar(screen, font, state.lanes)
        draw_status_bar(
            screen,
            font,
            wave_count=state.wave_count,
            complete_count=state.complete_count,
            steps=state.steps,
            auto_wave=state.auto_wave,
        )

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
