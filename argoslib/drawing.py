"""Sprites and drawing primitives for LED panel animations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from argoslib.panel import Color, Mask, Panel, Strip


@dataclass
class Animation:
    """A custom LED animation: a callable producing strip colors for a block of LEDs."""

    update: Callable[[], Strip]
    num_leds: int
    offset: int


@dataclass
class Sprite:
    """Colors plus a per-pixel transparency mask."""

    colors: Panel
    alpha: Mask


AnimatedSprite = Callable[[], Sprite]


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def _constrain_angle(angle: float, low: float, high: float) -> float:
    """Wrap an angle in degrees into the interval [low, high)."""
    span = high - low
    return low + (angle - low) % span


def draw_rectangle(
    dest: Panel, rect_width: int, rect_height: int, x: float, y: float, color: Color
) -> None:
    """Fill an axis-aligned rectangle centred at (x, y); pixels outside the panel are skipped."""
    x_start = int(max(0.0, x - rect_width / 2.0))
    x_end = min(dest.width, max(0, _round(x + rect_width / 2.0)))
    y_start = int(max(0.0, y - rect_height / 2.0))
    y_end = min(dest.height, max(0, _round(y + rect_height / 2.0)))
    for ix in range(x_start, x_end):
        for iy in range(y_start, y_end):
            dest[ix, iy] = color


def draw_circle_sprite(radius: float, color: Color, feathered: bool = False) -> Sprite:
    """A circle on a transparent square canvas of side ceil(2 * radius)."""
    dim = math.ceil(radius * 2)
    colors = Panel(dim, dim, color)
    alpha = Mask(dim, dim, 0.0)

    center = dim / 2.0
    radius_squared = radius * radius
    for x in range(dim):
        for y in range(dim):
            dx = x - center
            dy = y - center
            distance_squared = dx * dx + dy * dy
            if distance_squared <= radius_squared:
                alpha[x, y] = 1.0
            elif feathered:
                alpha[x, y] = max(0.0, 1.0 - distance_squared - radius_squared)
    return Sprite(colors, alpha)


def render_sprite(dest: Panel, sprite: Sprite, x: float, y: float, alpha: float = 1.0) -> None:
    """Blend a sprite onto a panel centred at (x, y), aligned to the nearest pixel."""
    sprite_w = sprite.colors.width
    sprite_h = sprite.colors.height
    x_align = _round(x - sprite_w / 2.0)
    y_align = _round(y - sprite_h / 2.0)

    first_sprite_x = max(0, -x_align)
    first_sprite_y = max(0, -y_align)
    first_panel_x = max(0, x_align)
    first_panel_y = max(0, y_align)

    cols = max(0, min(sprite_w - first_sprite_x, dest.width - first_panel_x))
    rows = max(0, min(sprite_h - first_sprite_y, dest.height - first_panel_y))

    for dx in range(cols):
        for dy in range(rows):
            sx, sy = dx + first_sprite_x, dy + first_sprite_y
            px, py = dx + first_panel_x, dy + first_panel_y
            dest_pixel = dest[px, py]
            a = sprite.alpha[sx, sy] * alpha
            src = sprite.colors[sx, sy]
            dest[px, py] = Color(
                dest_pixel.r * (1.0 - a) + src.r * a,
                dest_pixel.g * (1.0 - a) + src.g * a,
                dest_pixel.b * (1.0 - a) + src.b * a,
            )


def draw_circle(
    dest: Panel, radius: float, x: float, y: float, color: Color, feathered: bool = False
) -> None:
    """Draw a filled circle centred at (x, y)."""
    render_sprite(dest, draw_circle_sprite(radius, color, feathered), x, y, 1.0)


def draw_pac_man(
    radius: float,
    color: Color,
    direction: float,
    mouth_angle: float,
    feathered: bool = False,
) -> Sprite:
    """PacMan sprite facing `direction` degrees with the mouth open `mouth_angle` degrees."""
    pac_man = draw_circle_sprite(radius, color, feathered)

    if mouth_angle <= 3.0:
        return pac_man

    if mouth_angle >= 360.0:
        pac_man.alpha = Mask(pac_man.alpha.width, pac_man.alpha.height, 0.0)
        return pac_man

    half_mouth = mouth_angle / 2.0
    mouth_max = direction + half_mouth
    mouth_min = direction - half_mouth
    half_w = pac_man.alpha.width / 2.0
    half_h = pac_man.alpha.height / 2.0

    for (x, y), value in list(pac_man.alpha):
        if value <= 0:
            continue
        pixel_angle = _constrain_angle(
            math.degrees(math.atan2(y - half_h, x - half_w)),
            direction - 180.0,
            direction + 180.0,
        )
        if mouth_min < pixel_angle < mouth_max:
            pac_man.alpha[x, y] = 0.0
        elif feathered:
            pac_man.alpha[x, y] = min(1.0, (abs(pixel_angle - direction) - half_mouth) / 5.0)
    return pac_man