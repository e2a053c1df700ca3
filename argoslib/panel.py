"""LED panel representation and serialization to strip address order."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Color:
    """An RGB LED color with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, int(getattr(self, name)))

    @classmethod
    def from_hsv(cls, hue: int, saturation: int, value: int) -> "Color":
        """Build a color from hue in [0, 180) and saturation/value in [0, 255]."""
        hue, saturation, value = int(hue), int(saturation), int(value)
        if saturation == 0:
            return cls(value, value, value)
        chroma = (saturation * value) >> 8
        region = (hue // 30) % 6
        remainder = int((hue % 30) * (255 / 30.0))
        m = value - chroma
        x = (chroma * remainder) >> 8
        if region == 0:
            return cls(value, x + m, m)
        if region == 1:
            return cls(value - x, value, m)
        if region == 2:
            return cls(m, value, x + m)
        if region == 3:
            return cls(m, value - x, value)
        if region == 4:
            return cls(x + m, m, value)
        return cls(value, m, value - x)


class Array2D(Generic[T]):
    """Fixed-size 2D grid indexed by (x, y) with the origin at the bottom left."""

    def __init__(self, width: int, height: int, fill_value: Any = None) -> None:
        self._cells: list[list[T]] = [[fill_value] * height for _ in range(width)]

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        x, y = key
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} array")
        return x, y

    def __getitem__(self, key: tuple[int, int]) -> T:
        x, y = self._check(key)
        return self._cells[x][y]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        x, y = self._check(key)
        self._cells[x][y] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array2D):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[tuple[tuple[int, int], T]]:
        """Yield ((x, y), value) for every cell, column by column."""
        for x, column in enumerate(self._cells):
            for y, value in enumerate(column):
                yield (x, y), value

    @property
    def width(self) -> int:
        """Number of cells along the horizontal axis."""
        return len(self._cells)

    @property
    def height(self) -> int:
        """Number of cells along the vertical axis."""
        return len(self._cells[0]) if self._cells else 0


class Panel(Array2D[Color]):
    """Grid of LED colors."""

    def __init__(self, width: int, height: int, fill_value: Color = Color()) -> None:
        super().__init__(width, height, fill_value)


class Mask(Array2D[float]):
    """Per-pixel opacity in [0, 1], 0 fully transparent, 1 fully opaque."""

    def __init__(self, width: int, height: int, fill_value: float = 0.0) -> None:
        super().__init__(width, height, fill_value)


Strip = list[Color]


class PrimaryScanDirection(enum.Enum):
    """Direction in which sequential strip addresses run across the panel."""

    VERTICAL = enum.auto()
    HORIZONTAL = enum.auto()


class FirstPixelPosition(enum.Enum):
    """Panel corner holding the lowest strip address."""

    TOP_RIGHT = enum.auto()
    TOP_LEFT = enum.auto()
    BOTTOM_LEFT = enum.auto()
    BOTTOM_RIGHT = enum.auto()


@dataclass(frozen=True)
class PanelScanParams:
    """How a panel's pixels map onto strip addresses."""

    first_pixel: FirstPixelPosition
    scan_direction: PrimaryScanDirection


def _scan_order(width: int, height: int, params: PanelScanParams) -> Iterator[tuple[int, int]]:
    horizontal = params.scan_direction is PrimaryScanDirection.HORIZONTAL
    first = params.first_pixel
    if first is FirstPixelPosition.TOP_RIGHT:
        if horizontal:
            for y in range(height, 0, -1):
                for x in range(width, 0, -1):
                    yield (x - 1 if y % 2 == 0 else width - x), y - 1
        else:
            for x in range(width, 0, -1):
                for y in range(height, 0, -1):
                    yield x - 1, (y - 1 if x % 2 == 0 else height - y)
    elif first is FirstPixelPosition.TOP_LEFT:
        if horizontal:
            for y in range(height, 0, -1):
                for x in range(width):
                    yield (x if y % 2 == 0 else width - x - 1), y - 1
        else:
            for x in range(width):
                for y in range(height, 0, -1):
                    yield x, (y - 1 if x % 2 == 0 else height - y)
    elif first is FirstPixelPosition.BOTTOM_LEFT:
        if horizontal:
            for y in range(height):
                for x in range(width):
                    yield (x if y % 2 == 0 else width - x - 1), y
        else:
            for x in range(width):
                for y in range(height):
                    yield x, (y if x % 2 == 0 else height - y - 1)
    else:
        if horizontal:
            for y in range(height):
                for x in range(width, 0, -1):
                    yield (x - 1 if y % 2 == 0 else width - x), y
        else:
            for x in range(width, 0, -1):
                for y in range(height):
                    yield x - 1, (y if x % 2 == 0 else height - y - 1)


def serialize(panel: Panel, params: PanelScanParams) -> Strip:
    """Flatten a panel into a serpentine strip in LED address order."""
    return [panel[coord] for coord in _scan_order(panel.width, panel.height, params)]