"""Per-frame input state: mouse, keyboard, touches and recorded events."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Hashable, Optional

from quadgame.events import InputEvent, InputEventKind, KeyMods, MouseButton, TouchPhase
from quadgame.geometry import Vec2

__all__ = ["Touch", "InputState"]


@dataclass(frozen=True)
class Touch:
    """One touch point and its current phase."""

    id: int
    phase: TouchPhase
    position: Vec2


class InputState:
    """Collects window input events and answers queries about the current frame.

    Events are fed in through the ``on_*`` methods. Per-frame information
    (pressed and released keys and buttons, wheel, quit requests) lasts until
    :meth:`end_frame` is called.
    """

    def __init__(self, screen_width: float, screen_height: float, dpi_scale: float = 1.0) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.dpi_scale = dpi_scale
        self.simulate_mouse_with_touch = True
        self.cursor_grabbed = False

        self._keys_down: set[Hashable] = set()
        self._keys_pressed: dict[Hashable, None] = {}
        self._keys_released: set[Hashable] = set()
        self._mouse_down: set[MouseButton] = set()
        self._mouse_pressed: set[MouseButton] = set()
        self._mouse_released: set[MouseButton] = set()
        self._touches: dict[int, Touch] = {}
        self._chars_pressed: list[str] = []
        self._mouse_position = Vec2(0.0, 0.0)
        self._mouse_wheel = Vec2(0.0, 0.0)

        self._prevent_quit = False
        self._quit_requested = False

        self._subscribers: list[list[InputEvent]] = []

    # Event intake

    def _publish(self, event: InputEvent) -> None:
        for queue in self._subscribers:
            queue.append(event)

    def resize(self, width: float, height: float) -> None:
        """Record a new screen size."""
        self.screen_width = width
        self.screen_height = height

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window; raw motion then moves the cursor."""
        self.cursor_grabbed = grab

    def on_raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative mouse motion; only used while the cursor is grabbed."""
        if not self.cursor_grabbed:
            return
        self._mouse_position = self._mouse_position + Vec2(x, y)
        self._publish(
            InputEvent(
                InputEventKind.MOUSE_MOTION,
                x=self._mouse_position.x,
                y=self._mouse_position.y,
            )
        )

    def on_mouse_motion(self, x: float, y: float) -> None:
        """Absolute mouse motion; ignored while the cursor is grabbed."""
        if self.cursor_grabbed:
            return
        self._mouse_position = Vec2(x, y)
        self._publish(InputEvent(InputEventKind.MOUSE_MOTION, x=x, y=y))

    def on_mouse_wheel(self, x: float, y: float) -> None:
        self._mouse_wheel = Vec2(x, y)
        self._publish(InputEvent(InputEventKind.MOUSE_WHEEL, x=x, y=y))

    def on_mouse_button_down(self, button: MouseButton, x: float, y: float) -> None:
        self._mouse_down.add(button)
        self._mouse_pressed.add(button)
        self._publish(InputEvent(InputEventKind.MOUSE_BUTTON_DOWN, x=x, y=y, button=button))
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)

    def on_mouse_button_up(self, button: MouseButton, x: float, y: float) -> None:
        self._mouse_down.discard(button)
        self._mouse_released.add(button)
        self._publish(InputEvent(InputEventKind.MOUSE_BUTTON_UP, x=x, y=y, button=button))
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)

    def on_touch(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        """Record a touch; optionally also simulate the left mouse button."""
        self._touches[touch_id] = Touch(touch_id, phase, Vec2(x, y))

        if self.simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.on_mouse_button_down(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.on_mouse_button_up(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.on_mouse_motion(x, y)

        self._publish(
            InputEvent(InputEventKind.TOUCH, x=x, y=y, phase=phase, touch_id=touch_id)
        )

    def on_char(self, character: str, modifiers: KeyMods, repeat: bool) -> None:
        event = InputEvent(
            InputEventKind.CHAR, character=character, modifiers=modifiers, repeat=repeat
        )
        self._chars_pressed.append(character)
        self._publish(event)

    def on_key_down(self, keycode: Hashable, modifiers: KeyMods, repeat: bool) -> None:
        self._keys_down.add(keycode)
        if not repeat:
            self._keys_pressed[keycode] = None
        self._publish(
            InputEvent(InputEventKind.KEY_DOWN, keycode=keycode, modifiers=modifiers, repeat=repeat)
        )

    def on_key_up(self, keycode: Hashable, modifiers: KeyMods) -> None:
        self._keys_down.discard(keycode)
        self._keys_released.add(keycode)
        self._publish(InputEvent(InputEventKind.KEY_UP, keycode=keycode, modifiers=modifiers))

    def on_quit_requested(self) -> bool:
        """Handle a quit request; return whether the quit should go ahead."""
        if self._prevent_quit:
            self._quit_requested = True
            return False
        return True

    def end_frame(self) -> None:
        """Forget per-frame state and age the touches."""
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self._quit_requested = False

        self._touches = {
            touch_id: (
                replace(touch, phase=TouchPhase.STATIONARY)
                if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED)
                else touch
            )
            for touch_id, touch in self._touches.items()
            if touch.phase not in (TouchPhase.ENDED, TouchPhase.CANCELLED)
        }

    # Queries

    def _to_local(self, pixel_pos: Vec2) -> Vec2:
        return Vec2(
            pixel_pos.x / self.screen_width, pixel_pos.y / self.screen_height
        ) * 2.0 - Vec2(1.0, 1.0)

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in pixels."""
        return (
            self._mouse_position.x / self.dpi_scale,
            self._mouse_position.y / self.dpi_scale,
        )

    def mouse_position_local(self) -> Vec2:
        """Mouse position in the range [-1, 1]."""
        return self._to_local(Vec2(*self.mouse_position()))

    def touches(self) -> list[Touch]:
        """Touches with positions in pixels."""
        return list(self._touches.values())

    def touches_local(self) -> list[Touch]:
        """Touches with positions in the range [-1, 1]."""
        return [
            replace(touch, position=self._to_local(touch.position))
            for touch in self._touches.values()
        ]

    def mouse_wheel(self) -> tuple[float, float]:
        return (self._mouse_wheel.x, self._mouse_wheel.y)

    def is_key_pressed(self, key: Hashable) -> bool:
        """Whether ``key`` went down this frame (repeats do not count)."""
        return key in self._keys_pressed

    def is_key_down(self, key: Hashable) -> bool:
        return key in self._keys_down

    def is_key_released(self, key: Hashable) -> bool:
        return key in self._keys_released

    def get_char_pressed(self) -> Optional[str]:
        """Take the most recently typed character off the queue."""
        return self._chars_pressed.pop() if self._chars_pressed else None

    def get_last_key_pressed(self) -> Optional[Hashable]:
        """The most recent key pressed this frame, if any."""
        return next(reversed(self._keys_pressed), None) if self._keys_pressed else None

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        return button in self._mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return button in self._mouse_released

    def prevent_quit(self) -> None:
        """Turn quit requests into a flag instead of quitting."""
        self._prevent_quit = True

    def is_quit_requested(self) -> bool:
        return self._quit_requested

    def register_input_subscriber(self) -> int:
        """Start recording events for a new subscriber; return its id."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def drain_events(self, subscriber: int) -> list[InputEvent]:
        """Return and forget the events recorded for ``subscriber``."""
        queue = self._subscribers[subscriber]
        events = list(queue)
        queue.clear()
        return events