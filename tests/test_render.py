from wirefdf.model import OFFSET_X, OFFSET_Y, Camera, Point
from wirefdf.parsing import parse_map
from wirefdf.render import change_point, draw_line, draw_lines, get_color_delta


def _pt(sx, sy, rgb=0xFFFFFF):
    return Point(x=0, y=0, z=0, rgb=rgb, screen=[sx, sy, 0])


def _collect(p1, p2):
    pixels = []
    draw_line(p1, p2, lambda x, y, c: pixels.append((x, y, c)))
    return pixels


def test_color_delta_same_color_is_zero():
    assert get_color_delta(_pt(0, 0, 0x123456), _pt(9, 3, 0x123456), True) == 0


def test_color_delta_without_distance_is_plain_difference():
    assert get_color_delta(_pt(0, 0, 0xFF0000), _pt(0, 0, 0), True) == 0xFF0000
    assert get_color_delta(_pt(0, 0, 0xFF0000), _pt(0, 1, 0), True) == 0xFF0000
    assert get_color_delta(_pt(0, 0, 0), _pt(0, 0, 0x0000FF), False) == -0x0000FF


def test_color_delta_axis_choice():
    p1, p2 = _pt(0, 0, 0xFF0000), _pt(7, 0, 0)
    assert get_color_delta(p1, p2, False) == 0xFF0000
    assert get_color_delta(p1, p2, True) < 0xFF0000


def test_change_point():
    assert change_point(1, 10, 4, 0) == (10 - 4, 0 + 1)
    assert change_point(-2, 10, 4, 0) == (10 + 4, 0 - 1)
    assert change_point(0, 10, 4, 7) == (10, 7)


def test_horizontal_line_pixels():
    pixels = _collect(_pt(0, 0), _pt(5, 0))
    assert [(x, y) for x, y, _ in pixels] == [(x + OFFSET_X, OFFSET_Y) for x in range(1, 6)]
    assert {c for _, _, c in pixels} == {0xFFFFFF}


def test_diagonal_and_steep_lines_are_continuous():
    for p1, p2 in [(_pt(0, 0), _pt(4, 4)), (_pt(0, 0), _pt(1, 5)), (_pt(0, 5), _pt(5, 0))]:
        pixels = _collect(p1, p2)
        assert len(pixels) == max(abs(p1.sx - p2.sx), abs(p1.sy - p2.sy))
        positions = [(x, y) for x, y, _ in pixels]
        for (ax, ay), (bx, by) in zip(positions, positions[1:]):
            assert abs(ax - bx) <= 1 and abs(ay - by) <= 1


def test_line_reaches_far_endpoint_and_is_symmetric():
    p1, p2 = _pt(0, 5), _pt(5, 0)
    forward = {(x, y) for x, y, _ in _collect(p1, p2)}
    backward = {(x, y) for x, y, _ in _collect(p2, p1)}
    assert forward == backward
    assert (p1.sx + OFFSET_X, p1.sy + OFFSET_Y) in forward


def test_degenerate_line_draws_nothing():
    assert _collect(_pt(3, 3), _pt(3, 3)) == []


def test_color_ramp_steps_by_delta():
    p1, p2 = _pt(0, 0, 0xFF0000), _pt(5, 0, 0)
    colors = [c for _, _, c in _collect(p1, p2)]
    step = get_color_delta(p1, p2, True)
    assert colors[0] == 0xFF0000
    assert all(a - b == step for a, b in zip(colors, colors[1:]))


def test_draw_line_does_not_modify_points():
    p1, p2 = _pt(0, 0), _pt(6, 2)
    _collect(p1, p2)
    assert (p1.screen, p2.screen) == ([0, 0, 0], [6, 2, 0])


def test_draw_lines_covers_grid_edges():
    grid = parse_map(["0 0", "0 0"])
    pixels = set()
    draw_lines(grid, Camera(), lambda x, y, c: pixels.add((x, y)))
    for point in (grid[0][1], grid[1][0], grid[1][1]):
        assert (point.sx + OFFSET_X, point.sy + OFFSET_Y) in pixels
    far = grid[1][1]
    assert all(OFFSET_X <= x <= far.sx + OFFSET_X for x, _ in pixels)
    assert all(OFFSET_Y <= y <= far.sy + OFFSET_Y for _, y in pixels)


def test_draw_lines_camera_translation_shifts_image():
    grid = parse_map(["0 0 0", "0 0 0"])
    plain, moved = set(), set()
    draw_lines(grid, Camera(), lambda x, y, c: plain.add((x, y)))
    draw_lines(grid, Camera(x=50, y=-30), lambda x, y, c: moved.add((x, y)))
    assert moved == {(x - 50, y + 30) for x, y in plain}