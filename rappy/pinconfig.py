"""Pin modes, pin configuration and the board pin numbering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PinMode(Enum):
    NONE = 0
    IN = 1
    OUT = 2
    PWM = 3
    SERVO = 4


@dataclass
class PwmConfig:
    """PWM settings; the frequency is snapped by the driver to a supported value."""

    range: int = 255
    freq: int = 1000


@dataclass
class PinConfig:
    pin: int = -1
    mode: PinMode = PinMode.NONE
    invert: bool = False
    pwm: PwmConfig = field(default_factory=PwmConfig)


_MODE_MAP = {
    "in": PinMode.IN,
    "out": PinMode.OUT,
    "digital": PinMode.OUT,
    "pwm": PinMode.PWM,
    "servo": PinMode.SERVO,
}

_PIN_MAP = (
    2, 3, 4, 17, 27, 22, 10, 9, 11, 0, 5, 6, 13, 19,
    26, 21, 20, 16, 12, 1, 7, 8, 25, 24, 23, 18, 15, 14,
)


def mode_from_string(mode: str) -> PinMode:
    """Look up a pin mode by name, ignoring case."""
    key = mode.lower()
    try:
        return _MODE_MAP[key]
    except KeyError:
        raise ValueError(f"Unrecognized pin mode: {key}") from None


def pin_remap(pin: int) -> int:
    """Convert a board pin index (0-27) to its GPIO number."""
    if not 0 <= pin < len(_PIN_MAP):
        raise ValueError(f"Pin is out of range 0-27: {pin}")
    return _PIN_MAP[pin]