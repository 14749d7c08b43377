"""Projection of map points to screen coordinates."""

from __future__ import annotations

import math
import struct

from .model import Camera, Point


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def scale_point(point: Point, camera: Camera) -> None:
    """Set the point's screen position from its map position scaled by the camera."""
    point.sx = int(point.x * camera.scale_x)
    point.sy = int(point.y * camera.scale_y)
    point.sz = int(point.z * camera.scale_z * camera.altitude)


def rotate_point(point: Point, camera: Camera) -> None:
    """Rotate the screen position about the X axis, then about the Y axis."""
    x_angle = _float32(camera.rotation_angle_x * math.pi / 180)
    y_angle = _float32(camera.rotation_angle_y * math.pi / 180)
    old_y = point.sy
    old_z = point.sz
    point.sy = int(math.cos(x_angle) * old_y - math.sin(x_angle) * old_z)
    point.sz = int(math.sin(x_angle) * old_y + math.cos(x_angle) * old_z)
    point.sx = int(math.cos(y_angle) * point.sx + math.sin(y_angle) * point.sz)


def translate_point(point: Point, camera: Camera) -> None:
    """Shift the screen position by the camera offset."""
    point.sx -= camera.x
    point.sy -= camera.y


def transform_points(points, camera: Camera) -> None:
    """Scale, rotate and translate every point of the grid."""
    for row in points:
        for point in row:
            scale_point(point, camera)
            rotate_point(point, camera)
            translate_point(point, camera)