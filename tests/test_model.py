from wirefdf.model import Camera, Point


def test_camera_defaults_are_identity():
    camera = Camera()
    assert (camera.rotation_angle_x, camera.rotation_angle_y) == (0, 0)
    assert (camera.x, camera.y) == (0, 0)
    assert (camera.scale_x, camera.scale_y, camera.scale_z, camera.altitude) == (1, 1, 1, 1)


def test_camera_reset_restores_defaults():
    camera = Camera()
    camera.rotation_angle_x = 14
    camera.rotation_angle_y = -7
    camera.x = 100
    camera.y = -50
    camera.scale_x = camera.scale_y = camera.scale_z = 2.5
    camera.altitude = 0.25
    camera.reset()
    assert camera == Camera()


def test_point_default_colour_and_screen():
    point = Point(1, 2, 3)
    assert point.rgb == 0xFFFFFF
    assert point.screen == [0, 0, 0]


def test_point_screen_properties_alias_list():
    point = Point(0, 0, 0)
    point.sx, point.sy, point.sz = 4, 5, 6
    assert point.screen == [4, 5, 6]
    point.screen[1] = 9
    assert point.sy == 9


def test_points_do_not_share_screen_storage():
    a = Point(0, 0, 0)
    b = Point(0, 0, 0)
    a.sx = 10
    assert b.sx == 0