"""Modal menus on a character grid: message boxes, value input and selection lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from tileoled.debounce import MenuEvent
from tileoled.lines import TextCanvas, draw_line, draw_lines, line_at, line_count
from tileoled.numfmt import u8toa


def _events(events: Iterable[Optional[MenuEvent]]) -> Iterator[MenuEvent]:
    """Yield real events, skipping empty polls; raise if the source runs dry."""
    for event in events:
        if event is not None:
            yield event
    raise RuntimeError("event source ended before a choice was made")


def _top_offset(canvas: TextCanvas, height: int) -> int:
    return (canvas.rows - height) // 2 if height < canvas.rows else 0


@dataclass
class SelectionList:
    """Cursor and scroll window over a list of *total* lines, *visible* at a time."""

    visible: int
    total: int
    first_pos: int = 0
    current_pos: int = 0
    x: int = 0
    y: int = 0

    def next(self) -> None:
        """Move the cursor down, wrapping to the top and scrolling as needed."""
        self.current_pos += 1
        if self.current_pos >= self.total:
            self.current_pos = 0
            self.first_pos = 0
        elif self.first_pos + self.visible <= self.current_pos + 1:
            self.first_pos = self.current_pos - self.visible + 1

    def prev(self) -> None:
        """Move the cursor up, wrapping to the bottom and scrolling as needed."""
        if self.current_pos == 0:
            self.current_pos = self.total - 1
            self.first_pos = 0
            if self.total > self.visible:
                self.first_pos = self.total - self.visible
        else:
            self.current_pos -= 1
            if self.first_pos > self.current_pos:
                self.first_pos = self.current_pos


def _draw_string_line(
    canvas: TextCanvas, selection: SelectionList, index: int, items: Optional[str]
) -> None:
    row = selection.y + index - selection.first_pos
    canvas.set_inverse_font(index == selection.current_pos)
    text = line_at(index, items)
    draw_line(canvas, selection.x, row, canvas.cols, "" if text is None else text)
    canvas.set_inverse_font(False)


def draw_selection_list(
    canvas: TextCanvas, selection: SelectionList, items: Optional[str]
) -> None:
    """Draw the visible window of *items*, highlighting the cursor line."""
    for offset in range(max(selection.visible, 0)):
        _draw_string_line(canvas, selection, offset + selection.first_pos, items)


def draw_button_line(
    canvas: TextCanvas, y: int, width: int, cursor: int, buttons: Optional[str]
) -> int:
    """Draw newline-separated buttons centred in *width*; return the button count."""
    count = line_count(buttons)
    labels = [line_at(index, buttons) for index in range(count)]
    total = sum(canvas.utf8_len(label) for label in labels) + max(count - 1, 0)
    x = (width - total) // 2 if total < width else 0

    canvas.set_inverse_font(False)
    for index, label in enumerate(labels):
        if index == cursor:
            canvas.set_inverse_font(True)
        x += canvas.draw_utf8(x, y, label)
        canvas.set_inverse_font(False)
        x += canvas.draw_utf8(x, y, " ")
    return count


def user_interface_message(
    canvas: TextCanvas,
    events: Iterable[Optional[MenuEvent]],
    title1: Optional[str],
    title2: Optional[str],
    title3: Optional[str],
    buttons: Optional[str],
) -> int:
    """Show a message box; return the chosen button (from 1) or 0 on HOME."""
    canvas.set_inverse_font(False)

    height = 1 + line_count(title1) + line_count(title3)
    if title2 is not None:
        height += 1
    y = _top_offset(canvas, height)

    canvas.clear()
    y += draw_lines(canvas, 0, y, canvas.cols, title1)
    if title2 is not None:
        draw_line(canvas, 0, y, canvas.cols, title2)
        y += 1
    y += draw_lines(canvas, 0, y, canvas.cols, title3)

    cursor = 0
    button_count = draw_button_line(canvas, y, canvas.cols, cursor, buttons)

    for event in _events(events):
        if event is MenuEvent.SELECT:
            return cursor + 1
        if event is MenuEvent.HOME:
            return 0
        if event in (MenuEvent.NEXT, MenuEvent.UP):
            cursor += 1
            if cursor >= button_count:
                cursor = 0
            draw_button_line(canvas, y, canvas.cols, cursor, buttons)
        elif event in (MenuEvent.PREV, MenuEvent.DOWN):
            if cursor == 0:
                cursor = button_count
            cursor -= 1
            draw_button_line(canvas, y, canvas.cols, cursor, buttons)
    return 0  # unreachable: _events raises when exhausted


def user_interface_input_value(
    canvas: TextCanvas,
    events: Iterable[Optional[MenuEvent]],
    title: Optional[str],
    pre: Optional[str],
    value: int,
    lo: int,
    hi: int,
    digits: int,
    post: Optional[str],
) -> Optional[int]:
    """Let the user step a value between *lo* and *hi*.

    Returns the selected value, or None when HOME cancels the input.
    """
    height = 1 + line_count(title)
    y = _top_offset(canvas, height)

    width = canvas.utf8_len(pre) + digits + canvas.utf8_len(post)
    x = (canvas.cols - width) // 2 if width < canvas.cols else 0

    canvas.clear()
    canvas.set_inverse_font(False)
    y += draw_lines(canvas, 0, y, canvas.cols, title)
    x += canvas.draw_utf8(x, y, pre)
    canvas.draw_utf8(x + digits, y, post)
    canvas.set_inverse_font(True)

    current = value
    canvas.draw_utf8(x, y, u8toa(current, digits))
    result: Optional[int] = None
    for event in _events(events):
        if event is MenuEvent.SELECT:
            result = current
            break
        if event is MenuEvent.HOME:
            break
        if event in (MenuEvent.NEXT, MenuEvent.UP):
            current = lo if current >= hi else current + 1
            canvas.draw_utf8(x, y, u8toa(current, digits))
        elif event in (MenuEvent.PREV, MenuEvent.DOWN):
            current = hi if current <= lo else current - 1
            canvas.draw_utf8(x, y, u8toa(current, digits))

    canvas.set_inverse_font(False)
    return result


def user_interface_selection_list(
    canvas: TextCanvas,
    events: Iterable[Optional[MenuEvent]],
    title: Optional[str],
    start_pos: int,
    items: Optional[str],
) -> int:
    """Let the user pick a line of *items*; return its number (from 1) or 0 on HOME.

    *start_pos* is the initially highlighted line, counted from 1.
    """
    if start_pos > 0:
        start_pos -= 1

    selection = SelectionList(
        visible=canvas.rows, total=line_count(items), current_pos=start_pos
    )
    canvas.set_inverse_font(False)

    if title is not None:
        title_lines = draw_lines(canvas, selection.x, selection.y, canvas.cols, title)
        selection.y += title_lines
        selection.visible -= title_lines

    if selection.current_pos >= selection.total:
        selection.current_pos = selection.total - 1

    draw_selection_list(canvas, selection, items)

    for event in _events(events):
        if event is MenuEvent.SELECT:
            return selection.current_pos + 1
        if event is MenuEvent.HOME:
            return 0
        if event in (MenuEvent.NEXT, MenuEvent.DOWN):
            selection.next()
            draw_selection_list(canvas, selection, items)
        elif event in (MenuEvent.PREV, MenuEvent.UP):
            selection.prev()
            draw_selection_list(canvas, selection, items)
    return 0  # unreachable: _events raises when exhausted