from rappy.controller_state import (
    ButtonState,
    ControllerState,
    Direction,
    format_direction,
)


def test_no_direction_formats_as_none():
    assert format_direction(Direction.NONE) == "None"


def test_single_direction():
    assert format_direction(Direction.RIGHT) == "right"


def test_combined_direction_order_is_up_down_left_right():
    everything = Direction.UP | Direction.DOWN | Direction.LEFT | Direction.RIGHT
    assert format_direction(everything) == "up down left right"
    assert format_direction(Direction.UP_LEFT) == "up left"


def test_plain_int_is_accepted():
    assert format_direction(int(Direction.DOWN_RIGHT)) == format_direction(Direction.DOWN_RIGHT)


def test_composite_directions_are_unions():
    assert format_direction(Direction.UP | Direction.LEFT) == format_direction(Direction.UP_LEFT)
    assert format_direction(Direction.DOWN | Direction.RIGHT) == "down right"
    assert format_direction(Direction.DOWN_RIGHT) == "down right"


def test_button_state_defaults():
    assert ButtonState() == ButtonState(pressed=False, down=False)


def test_buttons_are_independent():
    state = ControllerState()
    state.x_button.pressed = True
    assert not state.circle_button.pressed
    assert not ControllerState().x_button.pressed


def test_default_state_text():
    lines = str(ControllerState()).split("\n")
    assert lines[0] == "X:        false"
    assert lines[-1] == "DPad: None"
    assert "L2: 0" in lines


def test_state_text_reflects_values():
    state = ControllerState(left_trigger=65535, x_left_joy=-32768)
    state.square_button.pressed = True
    state.directional_pad = Direction.UP_RIGHT
    text = str(state)
    assert "Square:   true" in text
    assert "L2: 65535" in text
    assert "Left Joy X:  -32768" in text
    assert text.endswith("DPad: up right")