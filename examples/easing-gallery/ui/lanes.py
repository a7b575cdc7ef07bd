"""Lane-based rendering: one lane per preset."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ui.constants import (
    CURVE_W,
    EASING_COLORS,
    EASING_NAMES,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    ORB_RADIUS,
    TRACK_BG,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
)
from ui.curves import draw_curve_plot

if TYPE_CHECKING:
    from game.orbs import Orb


def draw_lanes(surface: pygame.Surface, orbs: list[Orb], font: pygame.font.Font) -> None:
    """Draw every lane with its label, curve plot, and orb track."""
    lane_orbs: dict[int, list[Orb]] = {i: [] for i in range(len(EASING_NAMES))}
    for orb in orbs:
        lane_orbs.setdefault(orb.lane, []).append(orb)

    track_x = LABEL_W + CURVE_W
    row_w = LABEL_W + CURVE_W + TRACK_W

    for i, easing in enumerate(EASING_NAMES):
        lane_y = i * LANE_H

        # Lane background
        pygame.draw.rect(surface, LANE_BG, (0, lane_y, row_w, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (row_w, lane_y + LANE_H - 1))

        # Label
        label = font.render(easing, True, LABEL_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height() // 2))

        # Curve plot tracks the latest orb
        current_t = max((orb.t for orb in lane_orbs[i]), default=-1.0)
        draw_curve_plot(surface, easing, LABEL_W, lane_y + 6, CURVE_W, LANE_H - 12, current_t)

        # Track
        pygame.draw.rect(surface, TRACK_BG, (track_x, lane_y, TRACK_W, LANE_H))
        rail_y = lane_y + LANE_H // 2
        rail_left = track_x + TRACK_PAD
        rail_right = track_x + TRACK_W - TRACK_PAD
        pygame.draw.line(surface, TRACK_RAIL, (rail_left, rail_y), (rail_right, rail_y), 2)

        color = EASING_COLORS.get(easing, (200, 200, 200))
        dim_color = tuple(c // 3 for c in color)
        pygame.draw.circle(surface, dim_color, (rail_left, rail_y), 4)
        pygame.draw.circle(surface, dim_color, (rail_right, rail_y), 4)

        for orb in lane_orbs[i]:
            fill = (255, 255, 255) if orb.finished else color
            pygame.draw.circle(surface, fill, (int(orb.x), int(orb.y)), ORB_RADIUS)
            pygame.draw.circle(surface, color, (int(orb.x), int(orb.y)), ORB_RADIUS, 2)
