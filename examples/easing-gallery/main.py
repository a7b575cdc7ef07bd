"""Easing Gallery — Bezier easing preset visualizer.

Exercises tick-microtween on a tick-frames FrameLoop stepped once per
display frame.

Controls:
  Space   Launch a wave (one orb per preset)
  +/-     Adjust tween duration
  J       Jump running orbs to their end (cancel)
  C       Clear all orbs
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from tick_frames import FrameLoop

from game.orbs import Orb, jump_to_end, launch_wave
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.lanes import draw_lanes
from ui.status import draw_sidebar, draw_status_bar


class GalleryState:
    """Holds the frame loop, orbs, and counters."""

    def __init__(self) -> None:
        self.frames = FrameLoop(fps=FPS)
        self.orbs: list[Orb] = []
        self.duration_ms = 1000
        self.wave_count = 0
        self.complete_count = 0
        self.cancelled_count = 0

    def _on_orb_done(self, handle) -> None:
        if handle.cancelled:
            self.cancelled_count += 1
        else:
            self.complete_count += 1

    def launch_wave(self) -> None:
        # One wave on screen at a time.
        jump_to_end(self.orbs)
        self.orbs = launch_wave(self.frames, self.duration_ms)
        for orb in self.orbs:
            orb.handle.add_done_callback(self._on_orb_done)
        self.wave_count += 1

    def jump_to_end(self) -> None:
        jump_to_end(self.orbs)

    def clear_orbs(self) -> None:
        jump_to_end(self.orbs)
        self.orbs = []


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery — tick-microtween demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()
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

                elif event.key == pygame.K_SPACE:
                    state.launch_wave()

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.duration_ms = min(state.duration_ms + 250, 4000)

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.duration_ms = max(state.duration_ms - 250, 250)

                elif event.key == pygame.K_j:
                    state.jump_to_end()

                elif event.key == pygame.K_c:
                    state.clear_orbs()

        # --- Frame ---
        state.frames.step()

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, state.orbs, font)
        draw_sidebar(
            screen,
            font,
            wave_count=state.wave_count,
            complete_count=state.complete_count,
            cancelled_count=state.cancelled_count,
            duration_ms=state.duration_ms,
            fps=FPS,
            pending=state.frames.pending,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
