"""Recorded input events that can be replayed to an event handler."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

__all__ = [
    "TouchPhase",
    "MouseButton",
    "KeyMods",
    "InputEventKind",
    "InputEvent",
]


class TouchPhase(enum.Enum):
    """Lifecycle stage of a touch point."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class MouseButton(enum.Enum):
    """Mouse buttons."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyMods:
    """Modifier keys held while a key or character event happened."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    logo: bool = False


class InputEventKind(enum.Enum):
    """The kinds of input events that are recorded for subscribers."""

    MOUSE_MOTION = "mouse_motion"
    MOUSE_WHEEL = "mouse_wheel"
    MOUSE_BUTTON_DOWN = "mouse_button_down"
    MOUSE_BUTTON_UP = "mouse_button_up"
    CHAR = "char"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    TOUCH = "touch"


_BUTTON_KINDS = {InputEventKind.MOUSE_BUTTON_DOWN, InputEventKind.MOUSE_BUTTON_UP}
_KEY_KINDS = {InputEventKind.KEY_DOWN, InputEventKind.KEY_UP}


@dataclass(frozen=True)
class InputEvent:
    """One input event; which fields matter depends on ``kind``."""

    kind: InputEventKind
    x: float = 0.0
    y: float = 0.0
    button: Optional[MouseButton] = None
    character: Optional[str] = None
    keycode: Optional[Hashable] = None
    modifiers: KeyMods = field(default_factory=KeyMods)
    repeat: bool = False
    phase: Optional[TouchPhase] = None
    touch_id: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, InputEventKind):
            raise TypeError(f"kind must be an InputEventKind, not {self.kind!r}")
        if self.kind in _BUTTON_KINDS and self.button is None:
            raise ValueError(f"{self.kind.value} event needs a button")
        if self.kind is InputEventKind.CHAR:
            if self.character is None or len(self.character) != 1:
                raise ValueError("char event needs exactly one character")
        if self.kind in _KEY_KINDS and self.keycode is None:
            raise ValueError(f"{self.kind.value} event needs a keycode")
        if self.kind is InputEventKind.TOUCH:
            if self.phase is None or self.touch_id is None:
                raise ValueError("touch event needs a phase and a touch id")

    def replay(self, handler: Any) -> None:
        """Deliver this event to the matching ``*_event`` method of ``handler``.

        Handlers need only define the methods they care about; events for
        which the handler has no method are ignored.
        """
        kind = self.kind
        if kind is InputEventKind.MOUSE_MOTION:
            self._call(handler, "mouse_motion_event", self.x, self.y)
        elif kind is InputEventKind.MOUSE_WHEEL:
            self._call(handler, "mouse_wheel_event", self.x, self.y)
        elif kind is InputEventKind.MOUSE_BUTTON_DOWN:
            self._call(handler, "mouse_button_down_event", self.button, self.x, self.y)
        elif kind is InputEventKind.MOUSE_BUTTON_UP:
            self._call(handler, "mouse_button_up_event", self.button, self.x, self.y)
        elif kind is InputEventKind.CHAR:
            self._call(handler, "char_event", self.character, self.modifiers, self.repeat)
        elif kind is InputEventKind.KEY_DOWN:
            self._call(handler, "key_down_event", self.keycode, self.modifiers, self.repeat)
        elif kind is InputEventKind.KEY_UP:
            self._call(handler, "key_up_event", self.keycode, self.modifiers)
        else:
            self._call(handler, "touch_event", self.phase, self.touch_id, self.x, self.y)

    @staticmethod
    def _call(handler: Any, name: str, *args: Any) -> None:
        method = getattr(handler, name, None)
        if method is not None:
            method(*args)