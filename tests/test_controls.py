import pytest

from wirefdf.controls import KeyState, apply_keys, default_key_table
from wirefdf.model import DELTA_ROTATE, DELTA_SCALE, DELTA_TRANSLATE, Camera, KeyFlag


def test_default_table_matches_source_bindings():
    table = default_key_table()
    assert table[123] is KeyFlag.UP
    assert table[53] is KeyFlag.ESC
    assert table[6] is KeyFlag.ZOOM_IN
    assert len(table) == 13


def test_table_flags_are_distinct():
    flags = list(default_key_table().values())
    assert len(set(flags)) == len(flags)
    assert KeyFlag.UNDEFINED not in flags


def test_press_sets_flag():
    state = KeyState()
    state.press(123)
    assert state.flags == KeyFlag.UP


def test_press_then_release_clears():
    state = KeyState()
    state.press(124)
    state.press(6)
    state.release(124)
    assert state.flags == KeyFlag.ZOOM_IN


def test_repeated_press_is_idempotent():
    state = KeyState()
    state.press(91)
    state.press(91)
    assert state.flags == KeyFlag.ROTATE_UP


def test_release_without_press_toggles_on():
    state = KeyState()
    state.release(53)
    assert state.flags == KeyFlag.ESC


def test_unknown_key_is_ignored():
    state = KeyState()
    state.press(999)
    state.release(999)
    assert state.flags == KeyFlag.NONE


@pytest.mark.parametrize(
    "flag, attribute, expected",
    [
        (KeyFlag.UP, "x", -DELTA_TRANSLATE),
        (KeyFlag.DOWN, "x", DELTA_TRANSLATE),
        (KeyFlag.LEFT, "y", DELTA_TRANSLATE),
        (KeyFlag.RIGHT, "y", -DELTA_TRANSLATE),
        (KeyFlag.ROTATE_UP, "rotation_angle_x", -DELTA_ROTATE),
        (KeyFlag.ROTATE_DOWN, "rotation_angle_x", DELTA_ROTATE),
        (KeyFlag.ROTATE_LEFT, "rotation_angle_y", -DELTA_ROTATE),
        (KeyFlag.ROTATE_RIGHT, "rotation_angle_y", DELTA_ROTATE),
    ],
)
def test_translate_and_rotate(flag, attribute, expected):
    camera = Camera()
    assert apply_keys(flag, camera) is False
    assert getattr(camera, attribute) == expected


def test_zoom_in_scales_all_axes():
    camera = Camera()
    apply_keys(KeyFlag.ZOOM_IN, camera)
    assert camera.scale_x == camera.scale_y == camera.scale_z == 1.0 + DELTA_SCALE
    assert camera.altitude == 1.0


def test_altitude_keys():
    camera = Camera()
    apply_keys(KeyFlag.INCREASE_ALT, camera)
    assert camera.altitude == 1.0 + DELTA_SCALE
    apply_keys(KeyFlag.DECREASE_ALT, camera)
    apply_keys(KeyFlag.DECREASE_ALT, camera)
    assert camera.altitude == 1.0 - DELTA_SCALE


def test_opposite_keys_cancel():
    camera = Camera()
    apply_keys(KeyFlag.UP | KeyFlag.DOWN | KeyFlag.ZOOM_IN | KeyFlag.ZOOM_OUT, camera)
    assert camera == Camera()


def test_escape_requests_exit():
    camera = Camera()
    assert apply_keys(KeyFlag.ESC | KeyFlag.UP, camera) is True
    assert camera.x == -DELTA_TRANSLATE