import pytest

from wirefdf.model import GREEN, OFFSET_X, OFFSET_Y, WHITE, WINDOW_HEIGHT, WINDOW_WIDTH
from wirefdf.parsing import (
    MapFormatError,
    a_to_color,
    count_points,
    fetch_hexadecimal,
    normalize_points,
    parse_map,
    parse_point,
    parse_row,
    read_map,
)


def test_fetch_hexadecimal_reads_prefixed_digits():
    assert fetch_hexadecimal(",0xFF00FF rest") == "FF00FF"
    assert fetch_hexadecimal(",0X1a") == "1a"
    assert fetch_hexadecimal(",0xzz") == ""


def test_fetch_hexadecimal_requires_comma_and_prefix():
    assert fetch_hexadecimal("0xFF") is None
    assert fetch_hexadecimal(",FF") is None


def test_a_to_color_known_values():
    assert a_to_color("FF0000") == 0xFF0000
    assert a_to_color("ff00") == 0x00FF00
    assert a_to_color("") == 0


@pytest.mark.parametrize("value", [0, 1, 0xABCDEF, 0x123456, 0xFFFFFF])
def test_a_to_color_round_trip(value):
    assert a_to_color(format(value, "06x")) == value
    assert a_to_color(format(value, "06X")) == value


@pytest.mark.parametrize("values", [[0], [1, 2, 3], [-4, 0, 10, 22], [5] * 19])
def test_count_points_matches_number_of_values(values):
    line = "  " + "   ".join(str(v) for v in values) + " "
    assert count_points(line) == len(values)


def test_count_points_with_colors():
    items = ["1,0xFF", "2", "-3,0x00ff00", "0,0XABCDEF"]
    assert count_points(" ".join(items)) == len(items)


@pytest.mark.parametrize("line", ["1 a 2", "1,abc", "3 +4"])
def test_count_points_rejects_garbage(line):
    with pytest.raises(MapFormatError):
        count_points(line)


def test_parse_point_with_color():
    text = "42,0xFF0000 7"
    point, index = parse_point(text, 3, 5, 0)
    assert (point.x, point.y, point.z) == (3, 5, 42)
    assert point.rgb == 0xFF0000
    assert index == len("42,0xFF0000")


def test_parse_point_default_colors():
    flat, _ = parse_point("0", 0, 0, 0)
    raised, index = parse_point("-5", 0, 0, 0)
    assert flat.rgb == WHITE
    assert raised.rgb == GREEN
    assert raised.z == -5
    assert index == len("-5")


@pytest.mark.parametrize("text", ["5x", "1,zz"])
def test_parse_point_rejects_bad_value(text):
    with pytest.raises(MapFormatError):
        parse_point(text, 0, 0, 0)


def test_parse_row_builds_points():
    row = parse_row("  1 2 3", 4, 3)
    assert [p.z for p in row] == [1, 2, 3]
    assert [p.x for p in row] == [0, 1, 2]
    assert all(p.y == 4 for p in row)


def test_parse_row_count_mismatch_returns_none():
    assert parse_row("1 2 3", 0, 2) is None
    assert parse_row("1", 0, 2) is None


def test_parse_row_far_too_many_points_raises():
    with pytest.raises(MapFormatError):
        parse_row("1 2 3 4", 0, 2)


def test_normalize_points_spreads_evenly():
    grid = [parse_row("0 0 0", r, 3) for r in range(2)]
    normalize_points(grid, 3, 2)
    xs = [p.x for p in grid[0]]
    assert xs[0] == 0
    assert xs[-1] == WINDOW_WIDTH - 2 * OFFSET_X
    assert xs == sorted(xs)
    assert [p.y for p in grid[0]] == [0, 0, 0]
    assert all(p.y == WINDOW_HEIGHT - 2 * OFFSET_Y for p in grid[1])


def test_normalize_single_column_and_row():
    grid = [parse_row("7", 0, 1)]
    normalize_points(grid, 1, 1)
    assert (grid[0][0].x, grid[0][0].y, grid[0][0].z) == (0, 0, 7)


def test_parse_map_grid():
    grid = parse_map(["0 0\n", "0 10\n"])
    assert len(grid) == 2
    assert [len(row) for row in grid] == [2, 2]
    assert grid[1][1].z == 10
    assert grid[1][1].rgb == GREEN
    assert grid[0][0].rgb == WHITE
    assert grid[1][1].x == WINDOW_WIDTH - 2 * OFFSET_X
    assert grid[1][1].y == WINDOW_HEIGHT - 2 * OFFSET_Y


def test_parse_map_stops_at_short_row():
    grid = parse_map(["0 0", "0", "0 0"])
    assert len(grid) == 1


def test_parse_map_errors():
    with pytest.raises(MapFormatError):
        parse_map([])
    with pytest.raises(MapFormatError):
        parse_map(["0 0", "0 q"])


def test_read_map_matches_parse_map(tmp_path):
    lines = ["0 1 2", "3 4,0xff 5", "6 7 8"]
    path = tmp_path / "sample.fdf"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    from_file = read_map(path)
    from_lines = parse_map(lines)
    assert [[(p.x, p.y, p.z, p.rgb) for p in row] for row in from_file] == [
        [(p.x, p.y, p.z, p.rgb) for p in row] for row in from_lines
    ]
    assert from_file[1][1].rgb == 0xFF