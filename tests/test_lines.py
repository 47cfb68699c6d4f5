import pytest

from tileoled.lines import (
    TextCanvas,
    copy_line,
    draw_line,
    draw_lines,
    line_at,
    line_count,
)


def test_line_count_of_none_is_zero():
    assert line_count(None) == 0


@pytest.mark.parametrize("parts", [["a"], ["abc", "xyz"], ["", "", ""], ["one", "", "three"]])
def test_line_count_matches_parts(parts):
    assert line_count("\n".join(parts)) == len(parts)


def test_line_at_worked_example():
    assert line_at(1, "abc\nxyz") == "xyz"


def test_line_at_returns_rest_of_string():
    text = "a\nb\nc"
    assert line_at(0, text) == text
    assert line_at(1, text).startswith("b\n")
    assert line_at(3, text) is None


@pytest.mark.parametrize("parts", [["abc", "xyz"], ["first", "", "third", "x"]])
def test_copy_line_round_trip(parts):
    text = "\n".join(parts)
    for index, part in enumerate(parts):
        assert copy_line(index, text) == part
    assert copy_line(len(parts), text) == ""


def test_canvas_draw_utf8_stops_at_newline():
    canvas = TextCanvas(10, 2)
    drawn = canvas.draw_utf8(0, 0, "hi\nthere")
    assert drawn == canvas.utf8_len("hi\nthere")
    assert canvas.row_text(0).rstrip() == "hi"


def test_canvas_clips_and_tracks_inverse():
    canvas = TextCanvas(4, 1)
    canvas.set_inverse_font(True)
    canvas.draw_utf8(2, 0, "xyz")
    assert canvas.row_text(0) == "  xy"
    assert canvas.is_inverse(2, 0)
    assert not canvas.is_inverse(0, 0)
    canvas.clear()
    assert canvas.row_text(0) == " " * 4
    assert not canvas.is_inverse(2, 0)


def test_canvas_rejects_empty_size():
    with pytest.raises(ValueError):
        TextCanvas(0, 3)


def test_draw_line_centres_and_fills_width():
    canvas = TextCanvas(12, 1)
    used = draw_line(canvas, 0, 0, 12, "ab")
    row = canvas.row_text(0)
    assert used == 12
    assert row.strip() == "ab"
    left = len(row) - len(row.lstrip())
    right = len(row) - len(row.rstrip())
    assert abs(left - right) <= 1


def test_draw_line_longer_than_width_is_not_padded():
    canvas = TextCanvas(20, 1)
    used = draw_line(canvas, 0, 0, 3, "abcdef")
    assert used == len("abcdef")
    assert canvas.row_text(0).startswith("abcdef")


def test_draw_lines_draws_each_line():
    canvas = TextCanvas(10, 4)
    text = "top\nmid\nlow"
    count = draw_lines(canvas, 0, 1, 10, text)
    assert count == line_count(text)
    assert canvas.row_text(0).strip() == ""
    for row, part in enumerate(text.split("\n"), start=1):
        assert canvas.row_text(row).strip() == part


def test_draw_lines_none_draws_nothing():
    canvas = TextCanvas(5, 2)
    assert draw_lines(canvas, 0, 0, 5, None) == line_count(None)
    assert canvas.row_text(0) == " " * 5