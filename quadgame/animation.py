"""Sprite-sheet animations laid out as rows of equally sized tiles."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from quadgame.geometry import Vec2
from quadgame.rect import Rect

__all__ = ["Animation", "AnimationFrame", "AnimatedSprite"]


@dataclass
class Animation:
    """One animation: a row of the sheet with a frame count and speed."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass
class AnimationFrame:
    """Where to read the current frame from and how large to draw it."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """Plays animations from a sprite sheet of fixed-size tiles."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Iterable[Animation],
        playing: bool,
    ) -> None:
        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._animations = list(animations)
        self._current_animation = 0
        self._time = 0.0
        self._frame = 0
        self.playing = playing

    def set_animation(self, animation: int) -> None:
        """Switch to the animation at index ``animation``."""
        current = self._animations[animation]
        self._current_animation = animation
        self._frame %= current.frames

    def current_animation(self) -> int:
        """Index of the animation being played."""
        return self._current_animation

    def set_frame(self, frame: int) -> None:
        """Jump to ``frame``; it wraps on the next update."""
        self._frame = frame

    def update(self, frame_time: float) -> None:
        """Advance by ``frame_time`` seconds if playing."""
        animation = self._animations[self._current_animation]
        if self.playing:
            self._time += frame_time
            if self._time > 1.0 / animation.fps:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The current frame's source rectangle and destination size."""
        animation = self._animations[self._current_animation]
        return AnimationFrame(
            source_rect=Rect(
                self._tile_width * self._frame,
                self._tile_height * animation.row,
                self._tile_width,
                self._tile_height,
            ),
            dest_size=Vec2(self._tile_width, self._tile_height),
        )