"""Joystick button and axis descriptions with a small fluent builder."""

from __future__ import annotations

from dataclasses import dataclass

from thorkit.input_names import JoystickAxis


@dataclass(frozen=True)
class JoystickButton:
    """A button on a particular joystick."""

    joystick_id: int
    button: int


@dataclass(frozen=True)
class JoystickAxisCondition:
    """An axis position above or below a threshold on a particular joystick."""

    joystick_id: int
    axis: JoystickAxis
    threshold: float
    above: bool


@dataclass(frozen=True)
class AxisBuilder:
    """Intermediate step selecting a joystick axis."""

    joystick_id: int
    axis: JoystickAxis

    def above(self, threshold: float) -> JoystickAxisCondition:
        return JoystickAxisCondition(self.joystick_id, self.axis, threshold, True)

    def below(self, threshold: float) -> JoystickAxisCondition:
        return JoystickAxisCondition(self.joystick_id, self.axis, threshold, False)


@dataclass(frozen=True)
class JoystickBuilder:
    """Intermediate step selecting a joystick."""

    joystick_id: int

    def button(self, button: int) -> JoystickButton:
        return JoystickButton(self.joystick_id, button)

    def axis(self, axis: JoystickAxis) -> AxisBuilder:
        return AxisBuilder(self.joystick_id, axis)


def joystick(joystick_id: int) -> JoystickBuilder:
    """Start describing an input of the given joystick."""
    return JoystickBuilder(joystick_id)