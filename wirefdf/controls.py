"""Keyboard state and how held keys move the camera."""

from __future__ import annotations

from dataclasses import dataclass, field

from .model import DELTA_ROTATE, DELTA_SCALE, DELTA_TRANSLATE, Camera, KeyFlag


def default_key_table() -> dict[int, KeyFlag]:
    """Map keycodes to the control flags they drive."""
    return {
        123: KeyFlag.UP,
        124: KeyFlag.DOWN,
        125: KeyFlag.LEFT,
        126: KeyFlag.RIGHT,
        91: KeyFlag.ROTATE_UP,
        84: KeyFlag.ROTATE_DOWN,
        86: KeyFlag.ROTATE_LEFT,
        88: KeyFlag.ROTATE_RIGHT,
        47: KeyFlag.INCREASE_ALT,
        43: KeyFlag.DECREASE_ALT,
        6: KeyFlag.ZOOM_IN,
        7: KeyFlag.ZOOM_OUT,
        53: KeyFlag.ESC,
    }


@dataclass
class KeyState:
    """The set of control flags currently held down."""

    table: dict[int, KeyFlag] = field(default_factory=default_key_table)
    flags: KeyFlag = KeyFlag.NONE

    def press(self, key: int) -> None:
        """Set the flag bound to ``key``; unknown keys are ignored."""
        self.flags |= self.table.get(key, KeyFlag.NONE)

    def release(self, key: int) -> None:
        """Toggle the flag bound to ``key``, which clears it after a press."""
        self.flags ^= self.table.get(key, KeyFlag.NONE)


def _translate(flags: KeyFlag, camera: Camera) -> None:
    if flags & KeyFlag.UP:
        camera.x -= DELTA_TRANSLATE
    if flags & KeyFlag.DOWN:
        camera.x += DELTA_TRANSLATE
    if flags & KeyFlag.LEFT:
        camera.y += DELTA_TRANSLATE
    if flags & KeyFlag.RIGHT:
        camera.y -= DELTA_TRANSLATE


def _rotate(flags: KeyFlag, camera: Camera) -> None:
    if flags & KeyFlag.ROTATE_UP:
        camera.rotation_angle_x -= DELTA_ROTATE
    if flags & KeyFlag.ROTATE_DOWN:
        camera.rotation_angle_x += DELTA_ROTATE
    if flags & KeyFlag.ROTATE_LEFT:
        camera.rotation_angle_y -= DELTA_ROTATE
    if flags & KeyFlag.ROTATE_RIGHT:
        camera.rotation_angle_y += DELTA_ROTATE


def _scale(flags: KeyFlag, camera: Camera) -> None:
    if flags & KeyFlag.INCREASE_ALT:
        camera.altitude += DELTA_SCALE
    if flags & KeyFlag.DECREASE_ALT:
        camera.altitude -= DELTA_SCALE
    if flags & KeyFlag.ZOOM_IN:
        camera.scale_x += DELTA_SCALE
        camera.scale_y += DELTA_SCALE
        camera.scale_z += DELTA_SCALE
    if flags & KeyFlag.ZOOM_OUT:
        camera.scale_x -= DELTA_SCALE
        camera.scale_y -= DELTA_SCALE
        camera.scale_z -= DELTA_SCALE


def apply_keys(flags: KeyFlag, camera: Camera) -> bool:
    """Move the camera for every held key; return True when exit is requested."""
    _translate(flags, camera)
    _rotate(flags, camera)
    _scale(flags, camera)
    return bool(flags & KeyFlag.ESC)