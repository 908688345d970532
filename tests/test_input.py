import pytest

from quadgame.events import InputEventKind, KeyMods, MouseButton, TouchPhase
from quadgame.geometry import Vec2
from quadgame.input import InputState, Touch


@pytest.fixture
def state():
    return InputState(800.0, 600.0)


def test_key_down_sets_pressed_and_down(state):
    state.on_key_down("a", KeyMods(), False)
    assert state.is_key_down("a")
    assert state.is_key_pressed("a")
    assert not state.is_key_released("a")


def test_repeat_key_is_not_pressed(state):
    state.on_key_down("a", KeyMods(), True)
    assert state.is_key_down("a")
    assert not state.is_key_pressed("a")


def test_key_up_and_end_frame(state):
    state.on_key_down("a", KeyMods(), False)
    state.on_key_up("a", KeyMods())
    assert not state.is_key_down("a")
    assert state.is_key_released("a")
    state.end_frame()
    assert not state.is_key_released("a")
    assert not state.is_key_pressed("a")


def test_key_down_persists_across_frames(state):
    state.on_key_down("b", KeyMods(), False)
    state.end_frame()
    assert state.is_key_down("b")
    assert not state.is_key_pressed("b")


def test_last_key_pressed(state):
    assert state.get_last_key_pressed() is None
    state.on_key_down("a", KeyMods(), False)
    state.on_key_down("b", KeyMods(), False)
    assert state.get_last_key_pressed() == "b"


def test_chars_are_consumed_last_first(state):
    state.on_char("x", KeyMods(), False)
    state.on_char("y", KeyMods(), False)
    assert state.get_char_pressed() == "y"
    assert state.get_char_pressed() == "x"
    assert state.get_char_pressed() is None


def test_mouse_buttons(state):
    state.on_mouse_button_down(MouseButton.RIGHT, 10.0, 20.0)
    assert state.is_mouse_button_down(MouseButton.RIGHT)
    assert state.is_mouse_button_pressed(MouseButton.RIGHT)
    assert state.mouse_position() == (10.0, 20.0)
    state.on_mouse_button_up(MouseButton.RIGHT, 30.0, 40.0)
    assert not state.is_mouse_button_down(MouseButton.RIGHT)
    assert state.is_mouse_button_released(MouseButton.RIGHT)
    assert state.mouse_position() == (30.0, 40.0)
    state.end_frame()
    assert not state.is_mouse_button_pressed(MouseButton.RIGHT)
    assert not state.is_mouse_button_released(MouseButton.RIGHT)


def test_mouse_motion_ignored_when_grabbed(state):
    state.on_mouse_motion(5.0, 6.0)
    state.set_cursor_grab(True)
    state.on_mouse_motion(100.0, 100.0)
    assert state.mouse_position() == (5.0, 6.0)


def test_raw_motion_only_when_grabbed(state):
    state.on_raw_mouse_motion(3.0, 4.0)
    assert state.mouse_position() == (0.0, 0.0)
    state.set_cursor_grab(True)
    state.on_raw_mouse_motion(3.0, 4.0)
    state.on_raw_mouse_motion(3.0, 4.0)
    x, y = state.mouse_position()
    assert x == 3.0 + 3.0
    assert y == 4.0 + 4.0


def test_dpi_scale_divides_position():
    scaled = InputState(800.0, 600.0, dpi_scale=2.0)
    scaled.on_mouse_motion(100.0, 50.0)
    x, y = scaled.mouse_position()
    assert x * 2.0 == 100.0
    assert y * 2.0 == 50.0


def test_mouse_position_local_corners(state):
    state.on_mouse_motion(0.0, 0.0)
    assert state.mouse_position_local() == Vec2(-1.0, -1.0)
    state.on_mouse_motion(800.0, 600.0)
    assert state.mouse_position_local() == Vec2(1.0, 1.0)


def test_resize_changes_local_mapping(state):
    state.resize(400.0, 300.0)
    state.on_mouse_motion(400.0, 300.0)
    assert state.mouse_position_local() == Vec2(1.0, 1.0)


def test_mouse_wheel_reset_each_frame(state):
    state.on_mouse_wheel(0.0, 2.0)
    assert state.mouse_wheel() == (0.0, 2.0)
    state.end_frame()
    assert state.mouse_wheel() == (0.0, 0.0)


def test_touch_simulates_mouse(state):
    state.on_touch(TouchPhase.STARTED, 7, 10.0, 20.0)
    assert state.is_mouse_button_down(MouseButton.LEFT)
    assert state.mouse_position() == (10.0, 20.0)
    state.on_touch(TouchPhase.MOVED, 7, 15.0, 25.0)
    assert state.mouse_position() == (15.0, 25.0)
    state.on_touch(TouchPhase.ENDED, 7, 15.0, 25.0)
    assert not state.is_mouse_button_down(MouseButton.LEFT)
    assert state.is_mouse_button_released(MouseButton.LEFT)


def test_touch_without_mouse_simulation(state):
    state.simulate_mouse_with_touch = False
    state.on_touch(TouchPhase.STARTED, 1, 10.0, 20.0)
    assert not state.is_mouse_button_down(MouseButton.LEFT)
    assert state.touches() == [Touch(1, TouchPhase.STARTED, Vec2(10.0, 20.0))]


def test_touch_aging_on_end_frame(state):
    state.on_touch(TouchPhase.STARTED, 1, 1.0, 1.0)
    state.on_touch(TouchPhase.MOVED, 2, 2.0, 2.0)
    state.on_touch(TouchPhase.ENDED, 3, 3.0, 3.0)
    state.on_touch(TouchPhase.CANCELLED, 4, 4.0, 4.0)
    state.end_frame()
    touches = {t.id: t.phase for t in state.touches()}
    assert touches == {1: TouchPhase.STATIONARY, 2: TouchPhase.STATIONARY}


def test_touches_local(state):
    state.on_touch(TouchPhase.STARTED, 1, 800.0, 0.0)
    (touch,) = state.touches_local()
    assert touch.id == 1
    assert touch.position == Vec2(1.0, -1.0)
    assert state.touches()[0].position == Vec2(800.0, 0.0)


def test_quit_not_prevented_by_default(state):
    assert state.on_quit_requested() is True
    assert not state.is_quit_requested()


def test_prevent_quit(state):
    state.prevent_quit()
    assert state.on_quit_requested() is False
    assert state.is_quit_requested()
    state.end_frame()
    assert not state.is_quit_requested()


def test_subscribers_receive_events(state):
    first = state.register_input_subscriber()
    second = state.register_input_subscriber()
    assert first != second
    state.on_key_down("a", KeyMods(shift=True), False)
    state.on_mouse_wheel(1.0, 0.0)
    events = state.drain_events(first)
    assert [e.kind for e in events] == [InputEventKind.KEY_DOWN, InputEventKind.MOUSE_WHEEL]
    assert events[0].keycode == "a"
    assert events[0].modifiers == KeyMods(shift=True)
    assert state.drain_events(first) == []
    assert len(state.drain_events(second)) == 2


def test_subscriber_only_sees_later_events(state):
    state.on_char("z", KeyMods(), False)
    sub = state.register_input_subscriber()
    assert state.drain_events(sub) == []


def test_touch_events_order(state):
    sub = state.register_input_subscriber()
    state.on_touch(TouchPhase.STARTED, 5, 1.0, 2.0)
    kinds = [e.kind for e in state.drain_events(sub)]
    assert kinds == [InputEventKind.MOUSE_BUTTON_DOWN, InputEventKind.TOUCH]


def test_grabbed_raw_motion_event_carries_position(state):
    sub = state.register_input_subscriber()
    state.set_cursor_grab(True)
    state.on_raw_mouse_motion(3.0, 4.0)
    (event,) = state.drain_events(sub)
    assert event.kind is InputEventKind.MOUSE_MOTION
    assert (event.x, event.y) == (3.0, 4.0)


def test_drained_events_replay(state):
    sub = state.register_input_subscriber()
    state.on_key_up("q", KeyMods())

    class Handler:
        def __init__(self):
            self.seen = []

        def key_up_event(self, keycode, modifiers):
            self.seen.append(keycode)

    handler = Handler()
    for event in state.drain_events(sub):
        event.replay(handler)
    assert handler.seen == ["q"]


def test_unknown_subscriber_raises(state):
    with pytest.raises(IndexError):
        state.drain_events(3)