"""RGB colours with channels in [0, 1]."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Color:
    """An RGB colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> Color:
        """Build a colour from hue in degrees, saturation and value."""
        hue = math.fmod(hue, 360.0)
        saturation = min(max(saturation, 0.0), 1.0)
        value = min(max(value, 0.0), 1.0)

        chroma = value * saturation
        temp = chroma * (1.0 - abs(math.fmod(hue / 60.0, 2.0) - 1.0))
        offset = value - chroma

        index = int(hue / 60.0)
        channels = {
            0: (chroma, temp, 0.0),
            1: (temp, chroma, 0.0),
            2: (0.0, chroma, temp),
            3: (0.0, temp, chroma),
            4: (temp, 0.0, chroma),
            5: (chroma, 0.0, temp),
        }.get(index)
        if channels is None:
            raise ValueError(f"Expected hue to be in the range [0, 360): {hue}")
        return cls(*channels) + offset

    @classmethod
    def from_string(cls, name: str) -> Color:
        """Look up a named colour, ignoring case."""
        key = name.lower()
        try:
            r, g, b = _COLOR_MAP[key]
        except KeyError:
            raise ValueError(f"color does not exist: {key}") from None
        return cls(r, g, b)

    def invert(self) -> Color:
        """The complementary colour."""
        return Color(1.0 - self.r, 1.0 - self.g, 1.0 - self.b)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.r
        if index == 1:
            return self.g
        if index == 2:
            return self.b
        raise IndexError("Out of bounds")

    def __mul__(self, value: float) -> Color:
        return Color(self.r * value, self.g * value, self.b * value)

    def __add__(self, value: float) -> Color:
        return Color(self.r + value, self.g + value, self.b + value)

    def __str__(self) -> str:
        return f"{{{self.r:g}, {self.g:g}, {self.b:g}}}"


_COLOR_MAP = {
    "red": (1.0, 0.0, 0.0),
    "yellow": (1.0, 1.0, 0.0),
    "green": (0.0, 1.0, 0.0),
    "cyan": (0.0, 1.0, 1.0),
    "blue": (0.0, 0.0, 1.0),
    "magenta": (1.0, 0.0, 1.0),
    "black": (0.0, 0.0, 0.0),
    "white": (1.0, 1.0, 1.0),
}