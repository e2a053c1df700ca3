import pytest

from argoslib.drawing import Animation
from argoslib.led_subsystem import (
    NUM_INTEGRATED_LEDS,
    LEDController,
    LEDState,
    LEDSubsystem,
    LEDUpdateGroup,
    StockAnimation,
    get_delta_update,
)
from argoslib.panel import Color

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


def test_delta_of_empty_is_empty():
    assert get_delta_update([], []) == []


def test_delta_of_identical_states_is_empty():
    states = [LEDState(False, RED)] * 5
    assert get_delta_update(states, list(states)) == []


def test_delta_groups_changed_run():
    prev = [LEDState()] * 4
    current = [LEDState(False, RED)] * 2 + [LEDState()] * 2
    assert get_delta_update(prev, current) == [LEDUpdateGroup(0, 2, RED)]


def test_delta_sends_whole_block_when_part_changed():
    prev = [LEDState(False, RED), LEDState(False, BLUE), LEDState(False, BLUE)]
    current = [LEDState(False, BLUE)] * 3
    assert get_delta_update(prev, current) == [LEDUpdateGroup(0, 3, BLUE)]


def test_delta_ignores_animated_leds():
    prev = [LEDState()] * 3
    current = [LEDState(True, Color())] * 2 + [LEDState(False, RED)]
    assert get_delta_update(prev, current) == [LEDUpdateGroup(2, 1, RED)]


def test_delta_groups_cover_disjoint_ranges():
    prev = [LEDState()] * 6
    current = [LEDState(False, RED), LEDState(False, BLUE), LEDState(False, BLUE),
               LEDState(False, RED), LEDState(False, RED), LEDState(False, BLUE)]
    groups = get_delta_update(prev, current)
    assert sum(g.num_leds for g in groups) == len(current)
    starts = [g.start_index for g in groups]
    assert starts == sorted(starts)
    for group in groups:
        for index in range(group.start_index, group.start_index + group.num_leds):
            assert current[index].color == group.color


def test_periodic_sends_custom_aux_animation():
    controller = LEDController()
    subsystem = LEDSubsystem(4, controller)
    subsystem.custom_animate_aux_leds(Animation(lambda: [RED] * 4, 4, 0))
    subsystem.periodic()
    assert controller.history == [(255, 0, 0, 0, NUM_INTEGRATED_LEDS, 4)]
    assert controller.pixels[NUM_INTEGRATED_LEDS] == (255, 0, 0, 0)
    subsystem.periodic()
    assert len(controller.history) == 1


def test_custom_aux_animation_is_clamped_and_not_mutated():
    subsystem = LEDSubsystem(4, LEDController())
    original = Animation(lambda: [RED] * 10, 10, 1)
    subsystem.custom_animate_aux_leds(original)
    stored = subsystem.custom_animations[0]
    assert stored.offset == NUM_INTEGRATED_LEDS + 1
    assert stored.num_leds == 3
    assert original.offset == 1 and original.num_leds == 10


def test_custom_aux_animation_past_end_controls_nothing():
    subsystem = LEDSubsystem(2, LEDController())
    subsystem.custom_animate_aux_leds(Animation(lambda: [RED] * 3, 3, 5))
    assert subsystem.custom_animations[0].num_leds == 0
    subsystem.periodic()
    assert subsystem.controller.history == []


def test_custom_integrated_animation_is_clamped():
    subsystem = LEDSubsystem(4, LEDController())
    subsystem.custom_animate_integrated_leds(Animation(lambda: [BLUE] * 12, 12, 3))
    stored = subsystem.custom_animations[0]
    assert stored.offset == 0
    assert stored.num_leds == NUM_INTEGRATED_LEDS
    subsystem.periodic()
    assert subsystem.controller.history == [(0, 0, 255, 0, 0, NUM_INTEGRATED_LEDS)]


def test_stock_aux_animation_offsets_and_marks_animated():
    controller = LEDController()
    subsystem = LEDSubsystem(6, controller)
    animation = StockAnimation("rainbow", num_led=2, led_offset=2)
    subsystem.stock_animate_aux_leds(animation, 1)
    assert animation.led_offset == NUM_INTEGRATED_LEDS + 2
    assert controller.animations[1] is animation
    leds = subsystem.leds
    assert all(state.animated for state in leds[10:12])
    assert not any(state.animated for state in leds[:10])
    subsystem.periodic()
    assert controller.history == []


def test_stock_integrated_animation_covers_integrated_leds():
    controller = LEDController()
    subsystem = LEDSubsystem(3, controller)
    animation = StockAnimation("fire", num_led=30, led_offset=5)
    subsystem.stock_animate_integrated_leds(animation, 0)
    assert animation.num_led == NUM_INTEGRATED_LEDS
    assert animation.led_offset == 0
    assert controller.animations[0] is animation
    assert [s.animated for s in subsystem.leds] == [True] * NUM_INTEGRATED_LEDS + [False] * 3


def test_controller_rejects_negative_ranges():
    controller = LEDController()
    with pytest.raises(ValueError):
        controller.set_leds(1, 2, 3, 0, -1, 2)
    with pytest.raises(ValueError):
        controller.animate(StockAnimation("fade", 1), -1)


def test_default_controller_address():
    subsystem = LEDSubsystem(0)
    assert subsystem.controller.address.address == 1
    assert subsystem.controller.address.bus_name == "rio"
    assert len(subsystem.leds) == NUM_INTEGRATED_LEDS