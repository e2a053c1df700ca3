# argoslib

Building blocks for robot LED displays and for keeping a mechanism's home position on disk.
The package has no third-party dependencies.

## Modules

### `argoslib.geometry`

- `flip_horizontal(angle)` and `flip_vertical(angle)` reflect a direction given in degrees. The
  first is a bounce off a horizontal surface (`360 - angle`). The second is a bounce off a
  vertical surface (`180 - angle`).
- `point_in_box(c1x, c1y, c2x, c2y, px, py)` tells whether a point lies inside the axis-aligned
  box spanned by two opposite corners. Points on the edges count as inside.
- `segment_intersection(...)` returns the `(x, y)` point where two segments cross. It returns
  `None` when the segments are parallel or colinear, or when they do not meet.

### `argoslib.panel`

- `Color(r, g, b)` is a frozen RGB colour with integer channels.
- `Color.from_hsv(hue, saturation, value)` builds a colour from a hue in `[0, 180)` and a
  saturation and value in `[0, 255]`.
- `Array2D(width, height, fill_value)` is a fixed-size grid with its origin at the bottom left.
  - Index it as `grid[x, y]`. An index outside the grid raises `IndexError`.
  - Iterating yields `((x, y), value)`, column by column.
  - It has `width` and `height` properties.
- `Panel` is a grid of `Color`. `Mask` is a grid of opacities in `[0, 1]`.
- `serialize(panel, params)` flattens a panel into a serpentine strip, which is a list of
  `Color` in LED address order.
  - `PanelScanParams(first_pixel, scan_direction)` sets the order.
  - `first_pixel` is one of `FirstPixelPosition.TOP_RIGHT`, `TOP_LEFT`, `BOTTOM_LEFT` or
    `BOTTOM_RIGHT`.
  - `scan_direction` is one of `PrimaryScanDirection.HORIZONTAL` or `VERTICAL`.

### `argoslib.config_types`

- `RobotInstance.COMPETITION` and `RobotInstance.PRACTICE` tell the two robots apart.
- `CANAddress(address, bus_name="rio")` holds a device address on a named bus.
- `get_can_addr(comp, practice, instance)` returns the address that belongs to the given robot.
- `get_can_bus(comp, practice, instance)` returns the bus name that belongs to the given robot.

### `argoslib.drawing`

- `Animation(update, num_leds, offset)` holds a callable that returns a strip of colours for a
  block of LEDs.
- `Sprite(colors, alpha)` is a `Panel` of colours paired with a `Mask` of opacities.
- `draw_rectangle(dest, w, h, x, y, color)` fills a rectangle centred at `(x, y)`. Any part that
  falls outside the panel is clipped.
- `draw_circle_sprite(radius, color, feathered=False)` returns a circle on a transparent square
  canvas whose side is `ceil(2 * radius)`.
- `render_sprite(dest, sprite, x, y, alpha=1.0)` alpha-blends a sprite onto a panel. The sprite
  is centred at `(x, y)` and snapped to the nearest pixel.
- `draw_circle(dest, radius, x, y, color, feathered=False)` draws a circle straight onto a panel.
- `draw_pac_man(radius, color, direction, mouth_angle, feathered=False)` returns a PacMan sprite.
  - `direction` is the way he faces, in degrees.
  - A `mouth_angle` of 3° or less draws a full circle.
  - A `mouth_angle` of 360° or more makes the sprite fully transparent.

### `argoslib.animation`

These are animations driven by time. Every function accepts a `clock`, which is a callable that
returns the current time in milliseconds. The default clock is the monotonic clock. `pong` and
`pac_man_pacing` also accept an `rng`, which is anything with `randrange(n)`, such as
`random.Random`. Pass a fixed clock and a seeded `rng` to get output you can reproduce.

- `pong(...)` returns an `Animation` of a square ball bouncing around the panel.
  - The ball moves one pixel every `frame_time` ms.
  - With `rainbow=True` the ball takes a random hue on each bounce.
- `pac_man_pacing(...)` returns an `Animation` of PacMan pacing back and forth and eating pips.
  - After a random number of laps he runs into a wall and dies, and then the animation starts
    over.
  - It runs horizontally or vertically, as set by its `PrimaryScanDirection`.
- `chomping_pac_man(...)` returns a sprite callable whose mouth opens and closes once every
  `chomp_period` ms.
- `dying_pac_man(...)` returns a sprite callable whose mouth widens until PacMan vanishes. This
  takes 90% of `animation_time`.

### `argoslib.led_subsystem`

- `LEDSubsystem(num_aux_leds, controller=None)` tracks eight integrated LEDs, followed by
  `num_aux_leds` LEDs on an attached strip.
- The `leds` property gives the current `LEDState` tuple. Each `LEDState` has an `animated` flag
  and a `color`.
- These methods assign LEDs to an animation:
  - `custom_animate_aux_leds(animation)` and `custom_animate_integrated_leds(animation)` take an
    `Animation`. The LED count is clipped to fit the LEDs that exist.
  - `stock_animate_aux_leds(animation, slot)` and `stock_animate_integrated_leds(animation, slot)`
    take a `StockAnimation(name, num_led, led_offset=0)`. The animation is handed to the
    controller's slot, and its LEDs are marked as animated.
- `periodic()` does three things:
  - It runs each custom animation.
  - It sends the controller only the blocks of LEDs that changed.
  - It remembers the result for the next call.
- `get_delta_update(prev, current)` returns the `LEDUpdateGroup(start_index, num_leds, color)`
  blocks. Each block is a run of identical LEDs that holds at least one changed LED which is not
  animated.
- `LEDController` is an in-memory controller. It records everything it is sent:
  - `pixels` maps each index to `(r, g, b, w)`.
  - `animations` maps each slot to its animation.
  - `history` lists every `set_leds` call.
  - A negative index, count or slot raises `ValueError`.

### `argoslib.homing`

- `HomingStorage` is the abstract interface. It has two methods, `save(position)` and `load()`.
- `FSHomingStorage(home_file_path, root_dir="/home/lvuser")` keeps one number in a text file at
  `root_dir / home_file_path`.
  - `file_path()` creates the file, and any missing directories, if the file does not exist yet.
  - `save` writes the value with six significant digits.
  - `load` returns the stored float, or `None` when the file is empty.
  - Three failures raise `HomingStorageError`: an I/O error, an unreadable file, and a file that
    does not hold a number.

## Example

```python
import random

from argoslib.animation import pong
from argoslib.led_subsystem import LEDSubsystem
from argoslib.panel import Color, FirstPixelPosition, PanelScanParams, PrimaryScanDirection

now = [0.0]
params = PanelScanParams(FirstPixelPosition.TOP_LEFT, PrimaryScanDirection.HORIZONTAL)
ball = pong(0, 8, 8, 2, True, Color(255, 0, 0), Color(), 50.0, params,
            clock=lambda: now[0], rng=random.Random(1))

leds = LEDSubsystem(64)
leds.custom_animate_aux_leds(ball)
for _ in range(10):
    now[0] += 20.0
    leds.periodic()

print(leds.controller.history[-1])  # (r, g, b, w, start_index, count)
```

## What it does not do

- The package does not talk to LED hardware. `LEDController` only records in memory what it
  would send.
- Stock animations are only names and LED ranges. Nothing renders them.
- There is no motor or sensor configuration.
- Home positions are stored only as a single number in a local file. There is no network-table
  or swerve-module storage.

## Tests

```
pip install -e .[test]
pytest
```