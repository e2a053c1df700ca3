"""Animated LED panel patterns: a bouncing ball and a pacing PacMan."""

from __future__ import annotations

import math
import random
import time
from typing import Callable, Protocol

from argoslib.drawing import (
    AnimatedSprite,
    Animation,
    Sprite,
    draw_circle,
    draw_pac_man,
    draw_rectangle,
    render_sprite,
)
from argoslib.geometry import flip_horizontal, flip_vertical, segment_intersection
from argoslib.panel import (
    Color,
    Panel,
    PanelScanParams,
    PrimaryScanDirection,
    Strip,
    serialize,
)

Clock = Callable[[], float]
"""Returns the current time in milliseconds from an arbitrary fixed origin."""

_MAX_MOUTH_ANGLE = 90.0
_WHITE = Color(255, 255, 255)


class RandomSource(Protocol):
    """Anything offering randrange(n), such as random.Random."""

    def randrange(self, stop: int) -> int: ...


def _steady_clock_ms() -> float:
    return float(time.monotonic_ns() // 1_000_000)


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def _random_hue_color(rng: RandomSource) -> Color:
    return Color.from_hsv(rng.randrange(180), 255, 255)


def pong(
    offset: int,
    width: int,
    height: int,
    ball_size: int,
    rainbow: bool,
    ball_color: Color,
    background_color: Color,
    frame_time: float,
    scan_params: PanelScanParams,
    clock: Clock | None = None,
    rng: RandomSource | None = None,
) -> Animation:
    """A square ball bouncing around the panel, moving one pixel every `frame_time` ms.

    With `rainbow`, the ball takes a random hue on every bounce.
    """
    clock = clock if clock is not None else _steady_clock_ms
    rng = rng if rng is not None else random.Random()

    right = width - 1
    top = height - 1
    # (wall segment, test for having crossed it, reflection applied on a hit)
    walls = (
        ((0, 0, 0, top), lambda nx, ny: nx < 0, flip_vertical),
        ((right, 0, right, top), lambda nx, ny: nx > right, flip_vertical),
        ((0, 0, right, 0), lambda nx, ny: ny < 0, flip_horizontal),
        ((0, top, right, top), lambda nx, ny: ny > top, flip_horizontal),
    )

    x = width / 2.0
    y = height / 2.0
    direction = float(rng.randrange(360))
    last_time = clock()
    color = ball_color

    def step(from_x: float, from_y: float, distance: float) -> tuple[float, float]:
        rad = math.radians(direction)
        return from_x + distance * math.cos(rad), from_y + distance * math.sin(rad)

    def outside(px: float, py: float) -> bool:
        return px < 0 or py < 0 or px > right or py > top

    def update() -> Strip:
        nonlocal x, y, direction, last_time, color
        now = clock()
        travel = 1.0 if frame_time < 0.001 else (now - last_time) / frame_time
        new_x, new_y = step(x, y, travel)

        # Several bounces may happen in one update when a lot of time has passed.
        while outside(new_x, new_y):
            hit = None
            for (ax, ay, bx, by), crossed, flip in walls:
                if crossed(new_x, new_y):
                    hit = segment_intersection(ax, ay, bx, by, x, y, new_x, new_y)
                    if hit is not None:
                        direction = flip(direction)
                        break
            if hit is None:
                # Degenerate geometry: keep the ball on the panel rather than spin forever.
                new_x = min(max(new_x, 0.0), float(right))
                new_y = min(max(new_y, 0.0), float(top))
                break
            if rainbow:
                color = _random_hue_color(rng)
            travel -= math.hypot(hit[0] - x, hit[1] - y)
            x, y = hit
            new_x, new_y = step(x, y, travel)

        x, y = new_x, new_y
        last_time = now

        panel = Panel(width, height, background_color)
        draw_rectangle(panel, ball_size, ball_size, _round(x), _round(y), color)
        return serialize(panel, scan_params)

    return Animation(update, width * height, offset)


def chomping_pac_man(
    radius: float,
    color: Color,
    direction: float,
    chomp_period: float,
    feathered: bool = False,
    clock: Clock | None = None,
) -> AnimatedSprite:
    """PacMan whose mouth opens and closes once every `chomp_period` ms."""
    clock = clock if clock is not None else _steady_clock_ms

    def sprite() -> Sprite:
        time_within_period = math.fmod(clock(), chomp_period)
        half_period = chomp_period / 2.0
        mouth_angle = _MAX_MOUTH_ANGLE * abs(time_within_period - half_period) / half_period
        return draw_pac_man(radius, color, direction, mouth_angle, feathered)

    return sprite


def dying_pac_man(
    radius: float,
    color: Color,
    direction: float,
    initial_mouth_angle: float,
    animation_time: float,
    feathered: bool = False,
    clock: Clock | None = None,
) -> AnimatedSprite:
    """PacMan whose mouth widens until he vanishes, over 90% of `animation_time` ms."""
    clock = clock if clock is not None else _steady_clock_ms
    start_time = clock()

    def sprite() -> Sprite:
        percent_complete = (clock() - start_time) / (animation_time * 0.9)
        if percent_complete > 1.0:
            return draw_pac_man(radius, color, direction, 360.0, feathered)
        mouth_angle = initial_mouth_angle + (360.0 - initial_mouth_angle) * percent_complete
        return draw_pac_man(radius, color, direction, mouth_angle, feathered)

    return sprite


def pac_man_pacing(
    offset: int,
    width: int,
    height: int,
    rainbow: bool,
    pac_man_color: Color,
    pace_direction: PrimaryScanDirection,
    chomp_period: float,
    move_speed: float,
    scan_params: PanelScanParams,
    feathered: bool = False,
    clock: Clock | None = None,
    rng: RandomSource | None = None,
) -> Animation:
    """PacMan pacing back and forth eating pips until he runs into a wall and dies.

    `move_speed` is the time in ms to travel one pixel.
    """
    clock = clock if clock is not None else _steady_clock_ms
    rng = rng if rng is not None else random.Random()

    horizontal = pace_direction is PrimaryScanDirection.HORIZONTAL
    radius = int(min(width, height) / 2.0)
    visible_travel = width if horizontal else height
    travel_dist = 4 * radius + visible_travel
    dying_time = travel_dist * move_speed
    pip_radius = 1
    pip_spacing = pip_radius * 6
    num_pips = max(1, visible_travel // pip_spacing)
    first_pip_offset = _round(visible_travel / 2.0 - ((num_pips - 1) / 2.0) * pip_spacing)

    color = pac_man_color
    drawn_pips = num_pips
    pace_index = 0
    death_index = rng.randrange(5) + 2
    dying = False
    start_time = clock()
    sprite: AnimatedSprite = chomping_pac_man(radius, color, 0.0, chomp_period, False, clock)

    def update() -> Strip:
        nonlocal color, drawn_pips, pace_index, death_index, dying, start_time, sprite
        canvas = Panel(width, height, Color())

        now = clock()
        cumulative = now - start_time
        old_pace_index = pace_index
        pace_index = int(math.floor(cumulative / dying_time))
        pace_dist = math.fmod(cumulative, dying_time) / move_speed

        orientation_index = pace_index - 1 if pace_index == death_index else pace_index
        forward = orientation_index % 2 == 0  # right or up
        if horizontal:
            orientation = 0.0 if forward else 180.0
        else:
            orientation = 90.0 if forward else 270.0

        was_dying = dying
        dying = pace_index >= death_index or (
            pace_index == death_index - 1 and pace_dist >= travel_dist - 4 * radius
        )
        if dying and not was_dying:
            sprite = dying_pac_man(radius, color, orientation, 90.0, dying_time, feathered, clock)

        # The wall stays put through the extra pace spent on the death animation.
        if pace_index >= death_index - 1:
            if horizontal:
                draw_rectangle(
                    canvas, 1, canvas.height, canvas.width if forward else 0, canvas.height / 2.0, _WHITE
                )
            else:
                draw_rectangle(
                    canvas, canvas.width, 1, canvas.width / 2.0, canvas.height if forward else 0, _WHITE
                )

        if pace_index > death_index:
            start_time = now
            death_index = rng.randrange(5) + 2
            if rainbow:
                color = _random_hue_color(rng)
            dying = False
            pace_index = 1000  # forces a fresh sprite on the next update
            return serialize(canvas, scan_params)

        if pace_index == death_index or dying:
            if horizontal:
                render_sprite(
                    canvas,
                    sprite(),
                    canvas.width - radius if forward else radius,
                    canvas.height / 2.0,
                )
            else:
                render_sprite(
                    canvas,
                    sprite(),
                    canvas.width / 2.0,
                    canvas.height - radius if forward else radius,
                )
            return serialize(canvas, scan_params)

        if old_pace_index != pace_index:
            sprite = chomping_pac_man(radius, color, orientation, chomp_period, feathered, clock)

        prev_drawn_pips = drawn_pips
        drawn_pips = 0
        for pip_offset in (first_pip_offset + i * pip_spacing for i in range(num_pips)):
            if pace_dist - 2 * radius >= pip_offset:
                continue  # already eaten
            drawn_pips += 1
            if horizontal:
                pip_x = pip_offset if forward else canvas.width - 1 - pip_offset
                draw_circle(canvas, pip_radius, pip_x, canvas.height / 2.0, _WHITE, feathered)
            else:
                pip_y = pip_offset if forward else canvas.height - 1 - pip_offset
                draw_circle(canvas, pip_radius, canvas.width / 2.0, pip_y, _WHITE, feathered)

        if drawn_pips < prev_drawn_pips and rainbow:
            color = _random_hue_color(rng)
            sprite = chomping_pac_man(radius, color, orientation, chomp_period, feathered, clock)

        if horizontal:
            if forward:
                pac_x = pace_dist - 2.0 * radius
            else:
                pac_x = float(canvas.width) - 1.0 - pace_dist + 2 * radius
            render_sprite(canvas, sprite(), pac_x, canvas.height / 2.0)
        else:
            if forward:
                pac_y = pace_dist - 2 * radius
            else:
                pac_y = float(canvas.height) - 1.0 - pace_dist + 2.0 * radius
            render_sprite(canvas, sprite(), canvas.width / 2.0, pac_y)

        return serialize(canvas, scan_params)

    return Animation(update, width * height, offset)