import struct

import pytest

from rappy.controller_state import ControllerState, Direction
from rappy.gamepad import Controller, ControllerEvent, decode_events
from rappy.helpers import normalize

BUTTON = 1
AXIS = 2


def pack(data, event_type, event_id, timestamp=0):
    return struct.pack("<IHBB", timestamp, data & 0xFFFF, event_type, event_id)


class _Source:
    def __init__(self, *chunks):
        self.chunks = list(chunks)

    def read(self):
        return self.chunks.pop(0) if self.chunks else b""


def make(*chunks):
    return Controller("js0", _Source(*chunks))


def test_event_round_trip():
    event = ControllerEvent.from_bytes(pack(513, AXIS, 4, timestamp=123456))
    assert event == ControllerEvent(123456, 513, AXIS, 4)


def test_event_type_drops_initial_flag():
    event = ControllerEvent.from_bytes(pack(1, 0x80 | BUTTON, 0))
    assert event.event_type == BUTTON


def test_decode_events_splits_buffer():
    data = pack(1, BUTTON, 0) + pack(0, BUTTON, 1)
    events = decode_events(data)
    assert [e.event_id for e in events] == [0, 1]
    assert [e.data for e in events] == [1, 0]


def test_decode_events_rejects_partial():
    with pytest.raises(ValueError):
        decode_events(b"\x00" * 7)


def test_button_press_and_release():
    pad = make(pack(1, BUTTON, 0), pack(0, BUTTON, 0))
    producer = pad.get_producer("x")
    assert producer() == 0.0
    pad.poll()
    assert pad.state.x_button.pressed is True
    assert producer() == 1.0
    pad.poll()
    assert producer() == 0.0


def test_trigger_buttons_are_ignored():
    pad = make(pack(1, BUTTON, 6) + pack(1, BUTTON, 7))
    pad.poll()
    assert pad.state == ControllerState()


def test_unknown_button_id_raises():
    with pytest.raises(ValueError):
        make(pack(1, BUTTON, 20)).poll()


def test_unknown_button_data_raises():
    with pytest.raises(ValueError):
        make(pack(2, BUTTON, 0)).poll()


def test_unknown_event_type_raises():
    with pytest.raises(ValueError):
        make(pack(0, 3, 0)).poll()


def test_unknown_axis_raises():
    with pytest.raises(ValueError):
        make(pack(0, AXIS, 8)).poll()


def test_joystick_axes():
    pad = make(pack(1000, AXIS, 0) + pack(1000, AXIS, 1))
    pad.poll()
    assert pad.state.x_left_joy == 1000
    assert pad.state.y_left_joy == -1000
    assert pad.get_producer("ljoy.x")() == pytest.approx(normalize(1000))
    assert pad.get_producer("LJOY.Y")() == pytest.approx(normalize(-1000))
    assert pad.get_producer("ljoy.right")() == pytest.approx(normalize(1000))
    assert pad.get_producer("ljoy.left")() == 0.0
    assert pad.get_producer("ljoy.up")() == 0.0
    assert pad.get_producer("ljoy.down")() > 0.0


def test_right_joystick_reads_its_own_axes():
    pad = make(pack(-500, AXIS, 3))
    pad.poll()
    assert pad.state.x_right_joy == -500
    assert pad.get_producer("rjoy.x")() == pytest.approx(normalize(-500))
    assert pad.get_producer("ljoy.x")() == 0.0
    assert pad.get_producer("rjoy.left")() > 0.0
    assert pad.get_producer("rjoy.right")() == 0.0


def test_trigger_at_rest_is_midpoint():
    pad = make(pack(0, AXIS, 2))
    pad.poll()
    assert pad.state.left_trigger == 32767
    assert 0.0 < pad.get_producer("lt")() < 1.0


def test_trigger_fully_pressed():
    pad = make(pack(32767, AXIS, 5))
    pad.poll()
    rest = make(pack(0, AXIS, 5))
    rest.poll()
    assert pad.state.right_trigger > rest.state.right_trigger
    assert pad.get_producer("rt")() > rest.get_producer("rt")()


def test_dpad_combines_directions():
    pad = make(pack(-1, AXIS, 6), pack(1, AXIS, 7), pack(0, AXIS, 6))
    pad.poll()
    assert pad.state.directional_pad == Direction.LEFT
    assert pad.get_producer("dpad.x")() == -1.0
    assert pad.get_producer("dpad.left")() == 1.0
    pad.poll()
    assert pad.state.directional_pad == Direction.LEFT | Direction.DOWN
    assert pad.get_producer("dpad.y")() == -1.0
    pad.poll()
    assert pad.state.directional_pad == Direction.DOWN
    assert pad.get_producer("dpad.left")() == 0.0
    assert pad.get_producer("dpad.down")() == 1.0


def test_unknown_bind_raises():
    with pytest.raises(ValueError):
        make().get_producer("foo")


def test_axis_bind_needs_period():
    with pytest.raises(ValueError):
        make().get_producer("ljoy")


def test_unknown_joystick_value_raises():
    with pytest.raises(ValueError):
        make().get_producer("ljoy.z")


def test_kind_is_device_id():
    assert make().kind == "js0"