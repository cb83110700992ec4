"""The state of a game controller's buttons, triggers and sticks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag


class Direction(IntFlag):
    NONE = 0
    UP = 0x1
    LEFT = 0x2
    DOWN = 0x4
    RIGHT = 0x8
    UP_LEFT = UP | LEFT
    UP_RIGHT = UP | RIGHT
    DOWN_LEFT = DOWN | LEFT
    DOWN_RIGHT = DOWN | RIGHT


_DIRECTION_NAMES = (
    (Direction.UP, "up"),
    (Direction.DOWN, "down"),
    (Direction.LEFT, "left"),
    (Direction.RIGHT, "right"),
)


def format_direction(direction: int) -> str:
    """Names of the directions set in ``direction``, or ``None`` if none are."""
    value = Direction(direction)
    names = [name for flag, name in _DIRECTION_NAMES if value & flag]
    return " ".join(names) if names else "None"


@dataclass
class ButtonState:
    pressed: bool = False
    down: bool = False


@dataclass
class ControllerState:
    """Buttons, the directional pad, triggers (0..65535) and sticks (-32768..32767)."""

    x_button: ButtonState = field(default_factory=ButtonState)
    circle_button: ButtonState = field(default_factory=ButtonState)
    triangle_button: ButtonState = field(default_factory=ButtonState)
    square_button: ButtonState = field(default_factory=ButtonState)

    left_bumper: ButtonState = field(default_factory=ButtonState)
    right_bumper: ButtonState = field(default_factory=ButtonState)

    share_button: ButtonState = field(default_factory=ButtonState)
    options_button: ButtonState = field(default_factory=ButtonState)
    playstation_button: ButtonState = field(default_factory=ButtonState)

    left_stick: ButtonState = field(default_factory=ButtonState)
    right_stick: ButtonState = field(default_factory=ButtonState)

    directional_pad: Direction = Direction.NONE

    left_trigger: int = 0
    right_trigger: int = 0

    x_left_joy: int = 0
    y_left_joy: int = 0
    x_right_joy: int = 0
    y_right_joy: int = 0

    def __str__(self) -> str:
        face = (
            ("X:        ", self.x_button),
            ("Circle:   ", self.circle_button),
            ("Triangle: ", self.triangle_button),
            ("Square:   ", self.square_button),
        )
        other = (
            ("L1:      ", self.left_bumper),
            ("R1:      ", self.right_bumper),
            ("Share:   ", self.share_button),
            ("Options: ", self.options_button),
            ("PS:      ", self.playstation_button),
            ("LS:      ", self.left_stick),
            ("RS:      ", self.right_stick),
        )
        lines = [f"{label}{str(button.pressed).lower()}" for label, button in face]
        lines.append("")
        lines.extend(f"{label}{str(button.pressed).lower()}" for label, button in other)
        lines.extend(
            [
                "",
                f"L2: {self.left_trigger}",
                f"R2: {self.right_trigger}",
                "",
                f"Left Joy X:  {self.x_left_joy}",
                f"Left Joy Y:  {self.y_left_joy}",
                f"Right Joy X: {self.x_right_joy}",
                f"Right Joy Y: {self.y_right_joy}",
                "",
                f"DPad: {format_direction(self.directional_pad)}",
            ]
        )
        return "\n".join(lines)