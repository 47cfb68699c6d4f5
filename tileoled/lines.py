"""Newline-separated string lists and centred text lines on a character grid."""

from __future__ import annotations


class TextCanvas:
    """A grid of character cells, each drawn normal or inverse."""

    def __init__(self, cols: int, rows: int) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError("canvas must have at least one column and one row")
        self.cols = cols
        self.rows = rows
        self.inverse = False
        self._cells = [[" "] * cols for _ in range(rows)]
        self._inverse = [[False] * cols for _ in range(rows)]

    def clear(self) -> None:
        """Blank every cell."""
        for row_cells, row_inv in zip(self._cells, self._inverse):
            row_cells[:] = [" "] * self.cols
            row_inv[:] = [False] * self.cols

    def set_inverse_font(self, inverse: bool) -> None:
        """Select whether following text is drawn inverted."""
        self.inverse = bool(inverse)

    @staticmethod
    def utf8_len(text: str | None) -> int:
        """Number of characters up to the first newline."""
        if text is None:
            return 0
        return len(text.split("\n", 1)[0])

    def draw_utf8(self, x: int, y: int, text: str | None) -> int:
        """Draw text up to its first newline; return the characters drawn."""
        line = "" if text is None else text.split("\n", 1)[0]
        if 0 <= y < self.rows:
            for offset, char in enumerate(line):
                cx = x + offset
                if 0 <= cx < self.cols:
                    self._cells[y][cx] = char
                    self._inverse[y][cx] = self.inverse
        return len(line)

    def row_text(self, y: int) -> str:
        """Characters of row *y* as a string."""
        return "".join(self._cells[y])

    def is_inverse(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) was drawn inverted."""
        return self._inverse[y][x]


def line_count(text: str | None) -> int:
    """Number of newline-separated lines; zero for None."""
    if text is None:
        return 0
    return text.count("\n") + 1


def line_at(index: int, text: str | None) -> str | None:
    """Text from the start of line *index* to the end, or None if absent."""
    if index == 0:
        return text
    if text is None:
        return None
    parts = text.split("\n", index)
    if len(parts) <= index:
        return None
    return parts[index]


def copy_line(index: int, text: str | None) -> str:
    """Line *index* alone, or an empty string if it does not exist."""
    rest = line_at(index, text)
    if rest is None:
        return ""
    return rest.split("\n", 1)[0]


def draw_line(canvas: TextCanvas, x: int, y: int, width: int, text: str | None) -> int:
    """Draw text centred in *width* cells, padding with spaces; return cells used."""
    text_len = canvas.utf8_len(text)
    lead = (width - text_len) // 2 if text_len < width else 0
    cx = x
    while cx < x + lead:
        canvas.draw_utf8(cx, y, " ")
        cx += 1
    cx += canvas.draw_utf8(cx, y, text)
    while cx < x + width:
        canvas.draw_utf8(cx, y, " ")
        cx += 1
    return cx - x


def draw_lines(canvas: TextCanvas, x: int, y: int, width: int, text: str | None) -> int:
    """Draw each line of *text* centred on successive rows; return the line count."""
    count = line_count(text)
    for index in range(count):
        draw_line(canvas, x, y + index, width, line_at(index, text))
    return count