"""Keyboard and mouse state tracking with named, modifier-aware actions."""

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag

__all__ = [
    "ActionType",
    "Keymod",
    "MouseButton",
    "ActionControl",
    "Action",
    "InputState",
    "mod_to_string",
    "control_to_string_short",
    "control_to_string",
    "MOUSE_BUTTON_NAMES",
    "MOUSE_BUTTON_NAMES_SHORT",
]


class ActionType(Enum):
    MOUSE = "mouse"
    KEYBOARD = "keyboard"


class Keymod(IntFlag):
    """Keyboard modifier bits."""

    NONE = 0x0000
    LSHIFT = 0x0001
    RSHIFT = 0x0002
    LCTRL = 0x0040
    RCTRL = 0x0080
    LALT = 0x0100
    RALT = 0x0200
    LGUI = 0x0400
    RGUI = 0x0800
    NUM = 0x1000
    CAPS = 0x2000
    MODE = 0x4000
    SCROLL = 0x8000
    CTRL = LCTRL | RCTRL
    SHIFT = LSHIFT | RSHIFT
    ALT = LALT | RALT
    GUI = LGUI | RGUI


class MouseButton(IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2
    X1 = 3
    X2 = 4
    WHEEL_DOWN = 5
    WHEEL_UP = 6


MOUSE_BUTTON_COUNT = len(MouseButton)

_MOD_KEYS = Keymod.CTRL | Keymod.SHIFT | Keymod.ALT | Keymod.GUI

MOUSE_BUTTON_NAMES = {
    MouseButton.LEFT: "Mouse Left",
    MouseButton.MIDDLE: "Mouse Middle",
    MouseButton.RIGHT: "Mouse Right",
    MouseButton.X1: "Mouse X1",
    MouseButton.X2: "Mouse X2",
    MouseButton.WHEEL_DOWN: "Mouse Wheel Down",
    MouseButton.WHEEL_UP: "Mouse Wheel Up",
}

MOUSE_BUTTON_NAMES_SHORT = {
    MouseButton.LEFT: "LMB",
    MouseButton.MIDDLE: "MMB",
    MouseButton.RIGHT: "RMB",
    MouseButton.X1: "MX1",
    MouseButton.X2: "MX2",
    MouseButton.WHEEL_DOWN: "Wheel Down",
    MouseButton.WHEEL_UP: "Wheel Up",
}

_MOD_NAMES = (
    (Keymod.NONE, "None"),
    (Keymod.LSHIFT, "LShift"),
    (Keymod.RSHIFT, "RShift"),
    (Keymod.LCTRL, "LCtrl"),
    (Keymod.RCTRL, "RCtrl"),
    (Keymod.LALT, "LAlt"),
    (Keymod.RALT, "RAlt"),
    (Keymod.LGUI, "LGui"),
    (Keymod.RGUI, "RGui"),
    (Keymod.NUM, "Num"),
    (Keymod.CAPS, "Caps"),
    (Keymod.MODE, "Mode"),
    (Keymod.SCROLL, "Scroll"),
)


@dataclass
class ActionControl:
    """One physical control: a key scancode or mouse button, plus modifiers."""

    type: ActionType = ActionType.KEYBOARD
    id: int = -1
    modifier: int = Keymod.NONE

    def valid(self):
        return self.id != -1

    def clear(self):
        self.type = ActionType.KEYBOARD
        self.id = -1
        self.modifier = Keymod.NONE


class Action:
    """A named action triggered by any of its controls."""

    def __init__(self, name, controls):
        self.name = name
        if isinstance(controls, ActionControl):
            self.controls = [controls]
        else:
            self.controls = list(controls)

    def __repr__(self):
        return f"Action({self.name!r}, {self.controls!r})"


def _flag(states, index):
    return 0 <= index < len(states) and bool(states[index])


class InputState:
    """Current and previous keyboard and mouse state, fed once per frame."""

    def __init__(self, window_height=0):
        self.window_height = window_height
        self.mouse_pos = (0, 0)
        self.prev_mouse_pos = (0, 0)
        self.mouse_delta = (0, 0)
        self._kb = []
        self._prev_kb = []
        self._mouse = [False] * MOUSE_BUTTON_COUNT
        self._prev_mouse = [False] * MOUSE_BUTTON_COUNT
        self._wheel_up_next = False
        self._wheel_down_next = False
        self._last_input = ActionControl()

    # Events

    def handle_wheel(self, dy):
        """Record a wheel event; it shows up as a button on the next mouse update."""
        if dy > 0:
            self._wheel_up_next = True
            self._last_input = ActionControl(ActionType.MOUSE, MouseButton.WHEEL_UP)
        elif dy < 0:
            self._wheel_down_next = True
            self._last_input = ActionControl(ActionType.MOUSE, MouseButton.WHEEL_DOWN)

    def handle_key_up(self, scancode, mod=Keymod.NONE):
        self._last_input = ActionControl(ActionType.KEYBOARD, scancode, mod)

    def handle_mouse_up(self, button):
        """Record a released mouse button, numbered from 1 (1 is the left button)."""
        self._last_input = ActionControl(ActionType.MOUSE, button - 1)

    # Polling

    def update_keyboard(self, keys):
        """Store a snapshot of key states indexed by scancode."""
        self._prev_kb = self._kb
        self._kb = [bool(k) for k in keys]

    def update_mouse(self, buttons_mask, x, y, dx=0, dy=0):
        """Store a mouse snapshot; ``y`` is flipped so that it grows upwards."""
        self._prev_mouse = list(self._mouse)
        self.prev_mouse_pos = self.mouse_pos
        self.mouse_pos = (x, self.window_height - y)
        for button in range(MouseButton.X2 + 1):
            self._mouse[button] = bool(buttons_mask & (1 << button))
        self.mouse_delta = (dx, dy)
        self._mouse[MouseButton.WHEEL_UP] = self._wheel_up_next
        self._mouse[MouseButton.WHEEL_DOWN] = self._wheel_down_next
        self._wheel_up_next = False
        self._wheel_down_next = False

    def last_input(self):
        return self._last_input

    def clear_last_input(self):
        self._last_input = ActionControl()

    # Raw keyboard

    def is_key_pressed(self, key):
        return _flag(self._kb, key)

    def is_key_just_pressed(self, key):
        return _flag(self._kb, key) and not _flag(self._prev_kb, key)

    def is_key_released(self, key):
        return not self.is_key_pressed(key)

    def is_key_just_released(self, key):
        return not _flag(self._kb, key) and _flag(self._prev_kb, key)

    # Raw mouse

    def is_mouse_pressed(self, button):
        return _flag(self._mouse, button)

    def is_mouse_just_pressed(self, button):
        if button >= MouseButton.WHEEL_DOWN:
            return self.is_mouse_pressed(button)
        return _flag(self._mouse, button) and not _flag(self._prev_mouse, button)

    def is_mouse_released(self, button):
        return not self.is_mouse_pressed(button)

    def is_mouse_just_released(self, button):
        if button >= MouseButton.WHEEL_DOWN:
            return self.is_mouse_released(button)
        return not _flag(self._mouse, button) and _flag(self._prev_mouse, button)

    # Actions

    @staticmethod
    def _modifier_matches(ctrl, mod_state):
        return ctrl.modifier == (mod_state & _MOD_KEYS)

    def _any_control(self, action, mod_state, mouse_check, key_check):
        if not action.controls:
            return False
        for ctrl in action.controls:
            if not self._modifier_matches(ctrl, mod_state):
                return False
            if ctrl.type is ActionType.MOUSE:
                if mouse_check(ctrl.id):
                    return True
            elif ctrl.type is ActionType.KEYBOARD:
                if key_check(ctrl.id):
                    return True
            else:
                return False
        return False

    def is_action_pressed(self, action, mod_state=Keymod.NONE):
        return self._any_control(
            action, mod_state, self.is_mouse_pressed, self.is_key_pressed
        )

    def is_action_just_pressed(self, action, mod_state=Keymod.NONE):
        return self._any_control(
            action, mod_state, self.is_mouse_just_pressed, self.is_key_just_pressed
        )

    def is_action_released(self, action, mod_state=Keymod.NONE):
        if not action.controls:
            return False
        return not self.is_action_pressed(action, mod_state)

    def is_action_just_released(self, action, mod_state=Keymod.NONE):
        """Checks only the first control, as the action's primary binding."""
        if not action.controls:
            return False
        ctrl = action.controls[0]
        if not self._modifier_matches(ctrl, mod_state):
            return False
        if ctrl.type is ActionType.MOUSE:
            return self.is_mouse_just_released(ctrl.id)
        if ctrl.type is ActionType.KEYBOARD:
            return self.is_key_just_released(ctrl.id)
        return False


def mod_to_string(mod):
    """Readable modifier combination, e.g. ``"LShift + LCtrl"``."""
    return " + ".join(name for flag, name in _MOD_NAMES if flag & mod)


def _control_name(ctrl, scancode_names, mouse_names):
    if ctrl.type is ActionType.MOUSE:
        return mouse_names.get(ctrl.id, "?")
    if ctrl.type is ActionType.KEYBOARD:
        name = (scancode_names or {}).get(ctrl.id, "")
        return name or "?"
    return "?"


def control_to_string_short(ctrl, scancode_names=None):
    """Compact label for a control; ``scancode_names`` maps scancodes to key names."""
    prefix = ""
    if ctrl.modifier != Keymod.NONE:
        prefix = mod_to_string(ctrl.modifier) + "+"
    return prefix + _control_name(ctrl, scancode_names, MOUSE_BUTTON_NAMES_SHORT)


def control_to_string(ctrl, scancode_names=None):
    """Full label for a control; ``scancode_names`` maps scancodes to key names."""
    prefix = ""
    if ctrl.modifier != Keymod.NONE:
        prefix = mod_to_string(ctrl.modifier) + " + "
    return prefix + _control_name(ctrl, scancode_names, MOUSE_BUTTON_NAMES)