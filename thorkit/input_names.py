"""Input identifiers (keys, mouse buttons, joystick axes) and their names."""

from __future__ import annotations

from enum import IntEnum
from typing import Type, TypeVar, Union

from thorkit.exceptions import StringConversionError

_KEY_NAMES = (
    "Unknown",
    "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M",
    "N", "O", "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z",
    "Num0", "Num1", "Num2", "Num3", "Num4",
    "Num5", "Num6", "Num7", "Num8", "Num9",
    "Escape",
    "LControl", "LShift", "LAlt", "LSystem",
    "RControl", "RShift", "RAlt", "RSystem",
    "Menu",
    "LBracket", "RBracket", "SemiColon", "Comma", "Period", "Quote",
    "Slash", "BackSlash", "Tilde", "Equal", "Dash",
    "Space", "Return", "BackSpace", "Tab",
    "PageUp", "PageDown", "End", "Home", "Insert", "Delete",
    "Add", "Subtract", "Multiply", "Divide",
    "Left", "Right", "Up", "Down",
    "Numpad0", "Numpad1", "Numpad2", "Numpad3", "Numpad4",
    "Numpad5", "Numpad6", "Numpad7", "Numpad8", "Numpad9",
    "F1", "F2", "F3", "F4", "F5", "F6", "F7", "F8",
    "F9", "F10", "F11", "F12", "F13", "F14", "F15",
    "Pause",
)

#: Keyboard keys; ``Unknown`` is -1, the real keys are numbered from 0.
Key = IntEnum("Key", [(name, value) for value, name in enumerate(_KEY_NAMES, start=-1)])

#: Number of real keyboard keys (``Unknown`` not counted).
KEY_COUNT = len(_KEY_NAMES) - 1


class MouseButton(IntEnum):
    """Mouse buttons."""

    Left = 0
    Right = 1
    Middle = 2
    XButton1 = 3
    XButton2 = 4


class JoystickAxis(IntEnum):
    """Joystick axes."""

    X = 0
    Y = 1
    Z = 2
    R = 3
    U = 4
    V = 5
    PovX = 6
    PovY = 7


_E = TypeVar("_E", bound=IntEnum)


def _name_of(enum_type: Type[_E], value: Union[_E, int]) -> str:
    try:
        return enum_type(value).name
    except ValueError:
        raise StringConversionError(
            f"no {enum_type.__name__} matches the value {value!r}"
        ) from None


def _member_named(enum_type: Type[_E], name: str) -> _E:
    try:
        return enum_type.__members__[name]
    except KeyError:
        raise StringConversionError(
            f"no {enum_type.__name__} matches the string {name!r}"
        ) from None


def key_to_string(key: Union[int, IntEnum]) -> str:
    """Name of a keyboard key."""
    return _name_of(Key, key)


def mouse_button_to_string(button: Union[MouseButton, int]) -> str:
    """Name of a mouse button."""
    return _name_of(MouseButton, button)


def joystick_axis_to_string(axis: Union[JoystickAxis, int]) -> str:
    """Name of a joystick axis."""
    return _name_of(JoystickAxis, axis)


def to_keyboard_key(name: str):
    """Keyboard key with the given name."""
    return _member_named(Key, name)


def to_mouse_button(name: str) -> MouseButton:
    """Mouse button with the given name."""
    return _member_named(MouseButton, name)


def to_joystick_axis(name: str) -> JoystickAxis:
    """Joystick axis with the given name."""
    return _member_named(JoystickAxis, name)