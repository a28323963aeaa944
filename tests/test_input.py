import pytest

from tlib.input import (
    Action,
    ActionControl,
    ActionType,
    InputState,
    Keymod,
    MouseButton,
    control_to_string,
    control_to_string_short,
    mod_to_string,
)


def test_action_control_default_invalid_and_clear():
    ctrl = ActionControl(ActionType.MOUSE, MouseButton.LEFT, Keymod.LCTRL)
    assert ctrl.valid()
    ctrl.clear()
    assert not ctrl.valid()
    assert ctrl == ActionControl()


def test_action_accepts_single_control():
    ctrl = ActionControl(ActionType.KEYBOARD, 4)
    action = Action("Jump", ctrl)
    assert action.controls == [ctrl]


def test_key_just_pressed_transition():
    state = InputState()
    state.update_keyboard([0, 1])
    state.update_keyboard([1, 1])
    assert state.is_key_just_pressed(0)
    assert state.is_key_pressed(1)
    assert not state.is_key_just_pressed(1)


def test_key_just_released_transition():
    state = InputState()
    state.update_keyboard([1])
    state.update_keyboard([0])
    assert state.is_key_just_released(0)
    assert state.is_key_released(0)


def test_unknown_key_is_released():
    state = InputState()
    state.update_keyboard([1])
    assert not state.is_key_pressed(50)


def test_mouse_mask_and_flipped_position():
    state = InputState(window_height=100)
    state.update_mouse(1 << MouseButton.LEFT, 10, 20, 3, 4)
    assert state.is_mouse_pressed(MouseButton.LEFT)
    assert state.is_mouse_just_pressed(MouseButton.LEFT)
    assert not state.is_mouse_pressed(MouseButton.RIGHT)
    assert state.mouse_pos == (10, 100 - 20)
    assert state.mouse_delta == (3, 4)


def test_mouse_just_released():
    state = InputState(window_height=100)
    state.update_mouse(1 << MouseButton.RIGHT, 0, 0)
    state.update_mouse(0, 0, 0)
    assert state.is_mouse_just_released(MouseButton.RIGHT)


def test_wheel_applies_on_next_update_only():
    state = InputState()
    state.handle_wheel(1)
    assert not state.is_mouse_pressed(MouseButton.WHEEL_UP)
    state.update_mouse(0, 0, 0)
    assert state.is_mouse_just_pressed(MouseButton.WHEEL_UP)
    assert state.last_input() == ActionControl(ActionType.MOUSE, MouseButton.WHEEL_UP)
    state.update_mouse(0, 0, 0)
    assert not state.is_mouse_pressed(MouseButton.WHEEL_UP)


def test_wheel_down():
    state = InputState()
    state.handle_wheel(-2)
    state.update_mouse(0, 0, 0)
    assert state.is_mouse_pressed(MouseButton.WHEEL_DOWN)
    assert state.last_input().id == MouseButton.WHEEL_DOWN


def test_last_input_from_events():
    state = InputState()
    state.handle_mouse_up(1)
    assert state.last_input() == ActionControl(ActionType.MOUSE, MouseButton.LEFT)
    state.handle_key_up(7, Keymod.LSHIFT)
    assert state.last_input() == ActionControl(ActionType.KEYBOARD, 7, Keymod.LSHIFT)
    state.clear_last_input()
    assert not state.last_input().valid()


def test_action_requires_matching_modifier():
    state = InputState()
    state.update_keyboard([0, 0, 0, 0, 1])
    action = Action("Up", [ActionControl(ActionType.KEYBOARD, 4, Keymod.LSHIFT)])
    assert not state.is_action_pressed(action, Keymod.NONE)
    assert state.is_action_pressed(action, Keymod.LSHIFT)
    assert state.is_action_pressed(action, Keymod.LSHIFT | Keymod.NUM)


def test_action_any_control_and_release():
    state = InputState()
    state.update_keyboard([0, 0])
    state.update_mouse(1 << MouseButton.MIDDLE, 0, 0)
    action = Action(
        "Fire",
        [ActionControl(ActionType.KEYBOARD, 1), ActionControl(ActionType.MOUSE, MouseButton.MIDDLE)],
    )
    assert state.is_action_pressed(action)
    assert state.is_action_just_pressed(action)
    assert not state.is_action_released(action)


def test_action_just_released_first_control():
    state = InputState()
    state.update_keyboard([1])
    state.update_keyboard([0])
    action = Action("Jump", ActionControl(ActionType.KEYBOARD, 0))
    assert state.is_action_just_released(action)


def test_empty_action_is_never_active():
    state = InputState()
    action = Action("Nothing", [])
    assert not state.is_action_pressed(action)
    assert not state.is_action_released(action)
    assert not state.is_action_just_released(action)


def test_mod_to_string():
    assert mod_to_string(Keymod.LCTRL | Keymod.LSHIFT) == "LShift + LCtrl"
    assert mod_to_string(Keymod.NONE) == ""


def test_control_to_string_short_mouse_with_modifier():
    ctrl = ActionControl(ActionType.MOUSE, MouseButton.LEFT, Keymod.LCTRL)
    assert control_to_string_short(ctrl) == "LCtrl+LMB"


def test_control_to_string_long():
    ctrl = ActionControl(ActionType.MOUSE, MouseButton.WHEEL_UP)
    assert control_to_string(ctrl) == "Mouse Wheel Up"
    ctrl = ActionControl(ActionType.MOUSE, MouseButton.RIGHT, Keymod.RALT)
    assert control_to_string(ctrl) == "RAlt + Mouse Right"


@pytest.mark.parametrize("func", [control_to_string, control_to_string_short])
def test_keyboard_names_and_unknown(func):
    names = {4: "A", 5: ""}
    assert func(ActionControl(ActionType.KEYBOARD, 4), names) == "A"
    assert func(ActionControl(ActionType.KEYBOARD, 5), names) == "?"
    assert func(ActionControl(ActionType.KEYBOARD, 9), names) == "?"
    assert func(ActionControl(ActionType.MOUSE, 42)) == "?"