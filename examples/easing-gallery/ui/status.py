"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from tick_microtween import PRESETS

from ui.constants import (
    LABEL_COLOR,
    LANE_COUNT,
    LANE_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    wave_count: int,
    complete_count: int,
    cancelled_count: int,
    duration_ms: int,
    fps: int,
    pending: int,
) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    h = LANE_H * LANE_COUNT

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("INFO", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    surface.blit(font.render(f"Wave: {wave_count}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Done: {complete_count}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Cut: {cancelled_count}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render(f"Dur: {duration_ms}ms", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"FPS: {fps}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Pending: {pending}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render("Curves:", True, TEXT_DIM), (cx, cy))
    cy += line_h
    for x1, y1, x2, y2 in PRESETS.values():
        surface.blit(font.render(f"{x1:g},{y1:g},{x2:g},{y2:g}", True, TEXT_DIM), (cx, cy))
        cy += line_h - 4


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = LANE_H * LANE_COUNT
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[Space] Wave  [+/-] Duration  [J] Jump to end  [C] Clear  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
