"""Mouse state tracking: buttons, holds, double clicks, wheel and movement."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .vectors import Vector2

_ABSOLUTE_RANGE = 65535.0
_DEFAULT_CLICK_LIMIT = 0.2
_DEFAULT_SENSITIVITY = 0.07
_WHEEL_UP = 120


class MouseButton(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    FOUR = 3
    FIVE = 4


@dataclass(frozen=True)
class MouseEvent:
    """One raw input packet from the mouse.

    For relative events `last_x`/`last_y` are movement deltas; for absolute
    events they are positions in the 0-65535 range, scaled to the screen size.
    `wheel` holds the wheel data when the wheel moved, otherwise None.
    """

    last_x: float = 0.0
    last_y: float = 0.0
    absolute: bool = False
    screen_width: int = 0
    screen_height: int = 0
    pressed: frozenset = field(default_factory=frozenset)
    released: frozenset = field(default_factory=frozenset)
    wheel: int | None = None


class Mouse:
    """Mouse with held-button tracking, double clicks and wheel movement."""

    def __init__(self):
        self.is_awake = True
        self.absolute_position = Vector2()
        self.absolute_position_bounds = Vector2()
        self.relative_position = Vector2()
        self._buttons = [False] * len(MouseButton)
        self._hold_buttons = [False] * len(MouseButton)
        self._double_clicks = [False] * len(MouseButton)
        self._last_click_time = [0.0] * len(MouseButton)
        self._frame_wheel = 0
        self.click_limit = _DEFAULT_CLICK_LIMIT
        self.sensitivity = _DEFAULT_SENSITIVITY
        self._set_absolute = False

    def update(self, event: MouseEvent) -> None:
        """Apply a raw input event; ignored while the mouse is asleep."""
        if not self.is_awake:
            return

        if event.absolute:
            previous = self.absolute_position
            self.absolute_position = Vector2(
                event.last_x / _ABSOLUTE_RANGE * event.screen_width,
                event.last_y / _ABSOLUTE_RANGE * event.screen_height,
            )
            if self._set_absolute:
                self.relative_position = (self.absolute_position - previous) * self.sensitivity
            self._set_absolute = True
        else:
            self.relative_position = Vector2(
                self.relative_position.x + event.last_x * self.sensitivity,
                self.relative_position.y + event.last_y * self.sensitivity,
            )
            bounds = self.absolute_position_bounds
            x = min(max(self.absolute_position.x + event.last_x, 0.0), bounds.x)
            y = min(max(self.absolute_position.y + event.last_y, 0.0), bounds.y)
            self.absolute_position = Vector2(x, y)

        if event.wheel is not None:
            self._frame_wheel = 1 if event.wheel == _WHEEL_UP else -1

        for button in MouseButton:
            if button in event.pressed:
                self._buttons[button] = True
                if self._last_click_time[button] > 0:
                    self._double_clicks[button] = True
                self._last_click_time[button] = self.click_limit
            elif button in event.released:
                self._buttons[button] = False
                self._hold_buttons[button] = False

    def update_holds(self) -> None:
        """Start a new frame: remember pressed buttons, clear movement and wheel."""
        self._hold_buttons = list(self._buttons)
        self.relative_position = Vector2()
        self._frame_wheel = 0

    def sleep(self) -> None:
        self.is_awake = False
        self.click_limit = _DEFAULT_CLICK_LIMIT
        self._hold_buttons = [False] * len(MouseButton)
        self._buttons = [False] * len(MouseButton)

    def wake(self) -> None:
        self.is_awake = True

    def update_double_click(self, dt: float) -> None:
        """Run down the double click timers by `dt` seconds."""
        for button in MouseButton:
            if self._last_click_time[button] > 0:
                self._last_click_time[button] -= dt
                if self._last_click_time[button] <= 0.0:
                    self._double_clicks[button] = False
                    self._last_click_time[button] = 0.0

    def set_sensitivity(self, amount: float) -> None:
        """Set the movement sensitivity; zero is replaced by one."""
        self.sensitivity = 1.0 if amount == 0.0 else amount

    def set_absolute_position(self, x: float, y: float) -> None:
        self.absolute_position = Vector2(float(x), float(y))

    def set_absolute_position_bounds(self, max_x: float, max_y: float) -> None:
        self.absolute_position_bounds = Vector2(float(max_x), float(max_y))

    def button_down(self, button: MouseButton) -> bool:
        return self._buttons[button]

    def button_held(self, button: MouseButton) -> bool:
        return self._hold_buttons[button]

    def double_clicked(self, button: MouseButton) -> bool:
        return self._buttons[button] and self._double_clicks[button]

    def wheel_moved(self) -> bool:
        return self._frame_wheel != 0

    def wheel_movement(self) -> int:
        """Wheel movement this frame: 1 up, -1 down, 0 none."""
        return self._frame_wheel