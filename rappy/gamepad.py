"""A game controller read from a joystick device's event stream."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from rappy.controller_state import ButtonState, ControllerState, Direction
from rappy.endpoints import Input, Producer
from rappy.helpers import INT16_MAX, UINT16_MAX, enum_from_string, normalize
from rappy.socket_io import Socket

EVENT_SIZE = 8
_EVENT_FORMAT = "<IHBB"
_INT32_MAX = 2**31 - 1

_BUTTON_EVENT = 1
_AXIS_EVENT = 2

_PRESSED = 1
_RELEASED = 0

# Button ids 6 and 7 are the trigger buttons, which are read as axes instead.
_BUTTON_FIELDS: dict[int, str | None] = {
    0: "x_button",
    1: "circle_button",
    2: "triangle_button",
    3: "square_button",
    4: "left_bumper",
    5: "right_bumper",
    6: None,
    7: None,
    8: "share_button",
    9: "options_button",
    10: "playstation_button",
    11: "left_stick",
    12: "right_stick",
}

_X_LEFT_JOY = 0
_Y_LEFT_JOY = 1
_LEFT_TRIGGER = 2
_X_RIGHT_JOY = 3
_Y_RIGHT_JOY = 4
_RIGHT_TRIGGER = 5
_X_DPAD = 6
_Y_DPAD = 7


def _int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _uint16(value: int) -> int:
    return value & 0xFFFF


class _Source(Protocol):
    def read(self) -> bytes: ...


class ControllerBind(Enum):
    X = auto()
    CIRCLE = auto()
    TRIANGLE = auto()
    SQUARE = auto()
    LB = auto()
    RB = auto()
    SHARE = auto()
    OPTIONS = auto()
    PS = auto()
    LSTICK = auto()
    RSTICK = auto()
    LT = auto()
    RT = auto()
    LJOY = auto()
    RJOY = auto()
    DPAD = auto()


class ControllerJoy(Enum):
    X = auto()
    Y = auto()
    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()


_BIND_BUTTONS = {
    ControllerBind.X: "x_button",
    ControllerBind.CIRCLE: "circle_button",
    ControllerBind.TRIANGLE: "triangle_button",
    ControllerBind.SQUARE: "square_button",
    ControllerBind.LB: "left_bumper",
    ControllerBind.RB: "right_bumper",
    ControllerBind.SHARE: "share_button",
    ControllerBind.OPTIONS: "options_button",
    ControllerBind.PS: "playstation_button",
    ControllerBind.LSTICK: "left_stick",
    ControllerBind.RSTICK: "right_stick",
}

_BIND_TRIGGERS = {
    ControllerBind.LT: "left_trigger",
    ControllerBind.RT: "right_trigger",
}

_BIND_JOYSTICKS = {
    ControllerBind.LJOY: ("x_left_joy", "y_left_joy"),
    ControllerBind.RJOY: ("x_right_joy", "y_right_joy"),
}


@dataclass(frozen=True)
class ControllerEvent:
    """One 8-byte joystick event."""

    timestamp: int = 0
    data: int = 0
    event_type: int = 0
    event_id: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> ControllerEvent:
        """Decode an event; the initial-state flag is dropped from the type."""
        if len(data) != EVENT_SIZE:
            raise ValueError("Assumed controller events are 8 bytes")
        timestamp, value, event_type, event_id = struct.unpack(_EVENT_FORMAT, data)
        return cls(timestamp, value, event_type & 0x7F, event_id)


def decode_events(data: bytes) -> list[ControllerEvent]:
    """Split a buffer into its events."""
    if len(data) % EVENT_SIZE != 0:
        raise ValueError("Assumed controller events are 8 bytes")
    return [
        ControllerEvent.from_bytes(data[start : start + EVENT_SIZE])
        for start in range(0, len(data), EVENT_SIZE)
    ]


class Controller(Input):
    """A controller whose state is updated from its device's events."""

    def __init__(self, device_id: str, source: _Source | None = None) -> None:
        super().__init__(device_id)
        if source is None:
            source = Socket(os.open(f"/dev/input/{device_id}", os.O_RDONLY))
        self._source = source
        self._state = ControllerState()

    @property
    def state(self) -> ControllerState:
        return self._state

    def apply_event(self, event: ControllerEvent) -> None:
        """Update the state from one event."""
        if event.event_type == _BUTTON_EVENT:
            self._apply_button(event)
        elif event.event_type == _AXIS_EVENT:
            self._apply_axis(event)
        else:
            raise ValueError(f"Unknown controller event type: {event.event_type}")

    def _apply_button(self, event: ControllerEvent) -> None:
        if event.event_id not in _BUTTON_FIELDS:
            raise ValueError(f"Unknown controller button id: {event.event_id}")
        name = _BUTTON_FIELDS[event.event_id]
        if name is None:
            return
        if event.data == _PRESSED:
            pressed = True
        elif event.data == _RELEASED:
            pressed = False
        else:
            raise ValueError("Unknown controller data")
        button: ButtonState = getattr(self._state, name)
        button.pressed = pressed

    def _apply_axis(self, event: ControllerEvent) -> None:
        state = self._state
        value = _int16(event.data)
        axis = event.event_id
        if axis == _X_LEFT_JOY:
            state.x_left_joy = value
        elif axis == _Y_LEFT_JOY:
            state.y_left_joy = _int16(-value)
        elif axis == _LEFT_TRIGGER:
            state.left_trigger = _uint16(value + INT16_MAX)
        elif axis == _X_RIGHT_JOY:
            state.x_right_joy = value
        elif axis == _Y_RIGHT_JOY:
            state.y_right_joy = _int16(-value)
        elif axis == _RIGHT_TRIGGER:
            state.right_trigger = _uint16(value + INT16_MAX)
        elif axis == _X_DPAD:
            horizontal = Direction.LEFT if value < 0 else Direction.RIGHT if value > 0 else Direction.NONE
            state.directional_pad = horizontal | (
                state.directional_pad & (Direction.UP | Direction.DOWN)
            )
        elif axis == _Y_DPAD:
            vertical = Direction.UP if value < 0 else Direction.DOWN if value > 0 else Direction.NONE
            state.directional_pad = vertical | (
                state.directional_pad & (Direction.LEFT | Direction.RIGHT)
            )
        else:
            raise ValueError(f"Unknown controller axis id: {axis}")

    def poll(self) -> None:
        """Apply every event waiting on the device."""
        for event in decode_events(self._source.read()):
            self.apply_event(event)

    def get_producer(self, key: str) -> Producer:
        """A producer for a bind such as ``x``, ``lt``, ``ljoy.x`` or ``dpad.up``."""
        period = key.find(".")
        bind_str = key if period < 0 else key[:period]
        bind = enum_from_string(ControllerBind, bind_str)
        state = self._state

        if bind in _BIND_BUTTONS:
            button: ButtonState = getattr(state, _BIND_BUTTONS[bind])
            return lambda: 1.0 if button.pressed else 0.0

        if bind in _BIND_TRIGGERS:
            trigger = _BIND_TRIGGERS[bind]
            return lambda: normalize(getattr(state, trigger), UINT16_MAX)

        if period < 0:
            raise ValueError("All axis binds must contain at least one period")
        value_str = key[period + 1 :].lower()
        value = enum_from_string(ControllerJoy, value_str)

        if bind in _BIND_JOYSTICKS:
            x_name, y_name = _BIND_JOYSTICKS[bind]
            return self._joystick_producer(x_name, y_name, value)

        if bind is ControllerBind.DPAD:
            return self._dpad_producer(value)

        raise ValueError(f"Unrecognized controller bind: {key}")

    def _joystick_producer(self, x_name: str, y_name: str, value: ControllerJoy) -> Producer:
        state = self._state

        def x() -> int:
            return getattr(state, x_name)

        def y() -> int:
            return getattr(state, y_name)

        # Negated readings are widened before scaling, so they use the wider maximum.
        producers: dict[ControllerJoy, Producer] = {
            ControllerJoy.X: lambda: normalize(x()),
            ControllerJoy.Y: lambda: normalize(y()),
            ControllerJoy.LEFT: lambda: normalize(-x() if x() < 0 else 0, _INT32_MAX),
            ControllerJoy.UP: lambda: normalize(y() if y() > 0 else 0),
            ControllerJoy.RIGHT: lambda: normalize(x() if x() > 0 else 0),
            ControllerJoy.DOWN: lambda: normalize(-y() if y() < 0 else 0, _INT32_MAX),
        }
        return producers[value]

    def _dpad_producer(self, value: ControllerJoy) -> Producer:
        state = self._state

        def has(direction: Direction) -> float:
            return 1.0 if state.directional_pad & direction else 0.0

        producers: dict[ControllerJoy, Producer] = {
            ControllerJoy.X: lambda: has(Direction.RIGHT) - has(Direction.LEFT),
            ControllerJoy.Y: lambda: has(Direction.UP) - has(Direction.DOWN),
            ControllerJoy.LEFT: lambda: has(Direction.LEFT),
            ControllerJoy.UP: lambda: has(Direction.UP),
            ControllerJoy.RIGHT: lambda: has(Direction.RIGHT),
            ControllerJoy.DOWN: lambda: has(Direction.DOWN),
        }
        return producers[value]