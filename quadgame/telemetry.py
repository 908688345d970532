"""Frame profiling: nested timing zones and logged strings."""

from __future__ import annotations

import copy
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional

__all__ = ["Zone", "Frame", "Profiler"]


@dataclass
class Zone:
    """A named, timed region of a frame with nested child zones."""

    name: str
    start_time: float
    duration: float = 0.0
    children: list[Zone] = field(default_factory=list)


@dataclass
class Frame:
    """The zones recorded during one frame."""

    full_frame_time: float = 0.0
    zones: list[Zone] = field(default_factory=list)
    _open: list[Zone] = field(default_factory=list, init=False, repr=False, compare=False)

    def try_clone(self) -> Optional[Frame]:
        """A deep copy of the frame, or ``None`` while a zone is still open."""
        if self._open:
            return None
        return Frame(self.full_frame_time, copy.deepcopy(self.zones))


class Profiler:
    """Records zones per frame; enabling and disabling take effect on reset."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._frame = Frame()
        self._prev_frame = Frame()
        self._enabled = False
        self._enable_request: Optional[bool] = None
        self._strings: list[str] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        """Request recording to start at the next reset."""
        self._enable_request = True

    def disable(self) -> None:
        """Request recording to stop at the next reset."""
        self._enable_request = False

    def begin_zone(self, name: str) -> None:
        """Open a zone inside the currently open one, if recording."""
        if not self._enabled:
            return
        zone = Zone(name=name, start_time=self._clock())
        parent = self._frame._open[-1].children if self._frame._open else self._frame.zones
        parent.append(zone)
        self._frame._open.append(zone)

    def end_zone(self) -> None:
        """Close the innermost open zone, if recording."""
        if not self._enabled:
            return
        if not self._frame._open:
            raise RuntimeError("end_zone called without begin_zone")
        zone = self._frame._open.pop()
        zone.duration = self._clock() - zone.start_time

    @contextmanager
    def zone(self, name: str) -> Iterator[None]:
        """Record the enclosed block as a zone."""
        self.begin_zone(name)
        try:
            yield
        finally:
            self.end_zone()

    def reset(self, frame_time: float) -> None:
        """Finish the current frame and start a new one."""
        if self._frame._open:
            raise RuntimeError("New frame started with unpaired begin/end zones.")
        self._frame.full_frame_time = frame_time
        self._prev_frame = self._frame
        self._frame = Frame()
        if self._enable_request is not None:
            self._enabled = self._enable_request
            self._enable_request = None

    def frame(self) -> Frame:
        """A copy of the last finished frame."""
        finished = self._prev_frame.try_clone()
        return finished if finished is not None else Frame()

    def log_string(self, string: str) -> None:
        """Append a string to the log."""
        self._strings.append(string)

    def strings(self) -> list[str]:
        """All logged strings, oldest first."""
        return list(self._strings)

    @contextmanager
    def log_time(self, name: str) -> Iterator[None]:
        """Log how long the enclosed block took."""
        start = self._clock()
        try:
            yield
        finally:
            self.log_string(f"Time query: {name}, {self._clock() - start:.1f}s")