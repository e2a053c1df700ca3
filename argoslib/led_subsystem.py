"""LED controller subsystem that sends only changed blocks of LEDs."""

from __future__ import annotations

import dataclasses
import itertools
from dataclasses import dataclass, field

from argoslib.config_types import CANAddress
from argoslib.drawing import Animation
from argoslib.panel import Color

NUM_INTEGRATED_LEDS = 8


@dataclass(frozen=True)
class LEDState:
    """Color and animation status of one LED; color is only used when not animated."""

    animated: bool = False
    color: Color = Color()


@dataclass(frozen=True)
class LEDUpdateGroup:
    """A contiguous block of LEDs sharing one color."""

    start_index: int
    num_leds: int
    color: Color


@dataclass
class StockAnimation:
    """A built-in controller animation applied to a block of LEDs."""

    name: str
    num_led: int
    led_offset: int = 0


@dataclass
class LEDController:
    """In-memory LED controller keeping pixel values, animation slots and sent commands."""

    address: CANAddress = CANAddress(1, "rio")
    pixels: dict[int, tuple[int, int, int, int]] = field(default_factory=dict)
    animations: dict[int, StockAnimation] = field(default_factory=dict)
    history: list[tuple[int, int, int, int, int, int]] = field(default_factory=list)

    def set_leds(self, r: int, g: int, b: int, w: int, start_index: int, count: int) -> None:
        """Set `count` LEDs starting at `start_index` to one color."""
        if start_index < 0 or count < 0:
            raise ValueError("start index and count must be non-negative")
        self.history.append((r, g, b, w, start_index, count))
        for index in range(start_index, start_index + count):
            self.pixels[index] = (r, g, b, w)

    def animate(self, animation: StockAnimation, slot: int) -> None:
        """Run a stock animation in the given slot."""
        if slot < 0:
            raise ValueError("animation slot must be non-negative")
        self.animations[slot] = animation


def get_delta_update(prev: list[LEDState], current: list[LEDState]) -> list[LEDUpdateGroup]:
    """Blocks of identical LEDs in `current` that hold at least one non-animated change."""
    changed = [
        not cur.animated and cur != old for old, cur in zip(prev, current)
    ]
    changed.extend([False] * (len(current) - len(changed)))

    groups: list[LEDUpdateGroup] = []
    offset = 0
    for state, run in itertools.groupby(current):
        length = sum(1 for _ in run)
        if any(changed[offset:offset + length]):
            groups.append(LEDUpdateGroup(offset, length, state.color))
        offset += length
    return groups


class LEDSubsystem:
    """Drives integrated LEDs plus an attached strip through an LED controller."""

    def __init__(self, num_aux_leds: int, controller: LEDController | None = None) -> None:
        total = num_aux_leds + NUM_INTEGRATED_LEDS
        self._current = [LEDState()] * total
        self._prev = [LEDState()] * total
        self._custom_animations: list[Animation] = []
        self.controller = controller if controller is not None else LEDController()

    @property
    def leds(self) -> tuple[LEDState, ...]:
        """LED states to be sent on the next update."""
        return tuple(self._current)

    @property
    def custom_animations(self) -> tuple[Animation, ...]:
        """Active custom animations."""
        return tuple(self._custom_animations)

    def periodic(self) -> None:
        """Advance custom animations and send changed LED blocks to the controller."""
        for animation in self._custom_animations:
            strip = animation.update()[:animation.num_leds]
            for index, color in enumerate(strip, start=animation.offset):
                if index < len(self._current):
                    self._current[index] = dataclasses.replace(self._current[index], color=color)
        for update in get_delta_update(self._prev, self._current):
            self.controller.set_leds(
                update.color.r, update.color.g, update.color.b, 0, update.start_index, update.num_leds
            )
        self._prev = list(self._current)

    def _fill(self, start: int, count: int, state: LEDState) -> None:
        end = min(len(self._current), start + max(0, count))
        for index in range(max(0, start), end):
            self._current[index] = state

    def stock_animate_aux_leds(self, animation: StockAnimation, slot: int) -> None:
        """Run a stock animation on the attached strip, offset 0 being its first LED."""
        animation.led_offset += NUM_INTEGRATED_LEDS
        self._fill(animation.led_offset, animation.num_led, LEDState(True, Color()))
        self.controller.animate(animation, slot)

    def stock_animate_integrated_leds(self, animation: StockAnimation, slot: int) -> None:
        """Run a stock animation on the integrated LEDs only."""
        self._fill(0, NUM_INTEGRATED_LEDS, LEDState(True, Color()))
        animation.num_led = NUM_INTEGRATED_LEDS
        animation.led_offset = 0
        self.controller.animate(animation, slot)

    def custom_animate_aux_leds(self, animation: Animation) -> None:
        """Run a custom animation on the attached strip, updated every periodic call."""
        offset = animation.offset + NUM_INTEGRATED_LEDS
        num_leds = min(max(0, len(self._current) - offset), animation.num_leds)
        animation = dataclasses.replace(animation, offset=offset, num_leds=num_leds)
        self._fill(offset, num_leds, LEDState(False, Color()))
        self._custom_animations.append(animation)

    def custom_animate_integrated_leds(self, animation: Animation) -> None:
        """Run a custom animation on the integrated LEDs, updated every periodic call."""
        num_leds = min(animation.num_leds, NUM_INTEGRATED_LEDS)
        animation = dataclasses.replace(animation, offset=0, num_leds=num_leds)
        self._fill(0, num_leds, LEDState(False, Color()))
        self._custom_animations.append(animation)