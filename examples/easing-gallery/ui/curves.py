"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from tick_microtween import EASINGS

from ui.constants import CONTROL_COLOR, CURVE_BG, EASING_COLORS, PLOT_Y_MAX, PLOT_Y_MIN, TEXT_DIM


def draw_curve_plot(
    surface: pygame.Surface,
    easing_name: str,
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
) -> None:
    """Draw a Bezier easing curve, its control points, and a tracking dot."""
    pad = 8
    plot_x = x + pad
    plot_y = y + pad
    plot_w = w - 2 * pad
    plot_h = h - 2 * pad

    def to_screen(t: float, v: float) -> tuple[float, float]:
        frac = (v - PLOT_Y_MIN) / (PLOT_Y_MAX - PLOT_Y_MIN)
        return plot_x + t * plot_w, plot_y + plot_h - frac * plot_h

    # Background
    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))

    # Unit box
    x0, y0 = to_screen(0.0, 0.0)
    x1, y1 = to_screen(1.0, 1.0)
    pygame.draw.line(surface, TEXT_DIM, (x0, y0), (x1, y0))
    pygame.draw.line(surface, TEXT_DIM, (x0, y1), (x1, y1))

    curve = EASINGS.get(easing_name)
    if curve is None:
        return

    # Control polygon
    p1 = to_screen(curve.x1, curve.y1)
    p2 = to_screen(curve.x2, curve.y2)
    pygame.draw.line(surface, CONTROL_COLOR, (x0, y0), p1)
    pygame.draw.line(surface, CONTROL_COLOR, (x1, y1), p2)
    pygame.draw.circle(surface, CONTROL_COLOR, (int(p1[0]), int(p1[1])), 3)
    pygame.draw.circle(surface, CONTROL_COLOR, (int(p2[0]), int(p2[1])), 3)

    # Curve polyline
    color = EASING_COLORS.get(easing_name, (200, 200, 200))
    samples = 80
    points = [to_screen(i / samples, curve(i / samples)) for i in range(samples + 1)]
    pygame.draw.lines(surface, color, False, points, 2)

    # Moving dot
    if 0.0 <= current_t <= 1.0:
        dot_x, dot_y = to_screen(current_t, curve(current_t))
        pygame.draw.circle(surface, (255, 255, 255), (int(dot_x), int(dot_y)), 4)
        pygame.draw.circle(surface, color, (int(dot_x), int(dot_y)), 3)
