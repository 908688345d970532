import pytest

from quadgame.animation import AnimatedSprite, Animation
from quadgame.geometry import Vec2
from quadgame.rect import Rect

TILE_W = 32
TILE_H = 16


def make_sprite(playing=True):
    animations = [
        Animation(name="idle", row=0, frames=3, fps=10),
        Animation(name="run", row=2, frames=2, fps=10),
    ]
    return AnimatedSprite(TILE_W, TILE_H, animations, playing)


def test_initial_frame():
    frame = make_sprite().frame()
    assert frame.source_rect == Rect(0.0, 0.0, TILE_W, TILE_H)
    assert frame.dest_size == Vec2(TILE_W, TILE_H)


def test_update_advances_after_frame_period():
    sprite = make_sprite()
    sprite.update(0.2)
    assert sprite.frame().source_rect.x == TILE_W * 1


def test_short_update_does_not_advance():
    sprite = make_sprite()
    sprite.update(0.05)
    assert sprite.frame().source_rect.x == 0.0


def test_frames_wrap_around():
    sprite = make_sprite()
    for _ in range(3):
        sprite.update(0.2)
    assert sprite.frame().source_rect.x == 0.0


def test_not_playing_does_not_advance():
    sprite = make_sprite(playing=False)
    sprite.update(1.0)
    assert sprite.frame().source_rect.x == 0.0


def test_set_animation_uses_row_and_wraps_frame():
    sprite = make_sprite()
    sprite.set_frame(2)
    sprite.set_animation(1)
    assert sprite.current_animation() == 1
    frame = sprite.frame()
    assert frame.source_rect.y == TILE_H * 2
    assert frame.source_rect.x == 0.0


def test_set_frame_wraps_on_update_even_when_paused():
    sprite = make_sprite(playing=False)
    sprite.set_frame(4)
    sprite.update(0.0)
    assert sprite.frame().source_rect.x == TILE_W * 1


def test_set_animation_out_of_range():
    sprite = make_sprite()
    with pytest.raises(IndexError):
        sprite.set_animation(5)
    assert sprite.current_animation() == 0