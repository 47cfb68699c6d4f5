"""Debouncing of low-active menu buttons into menu events."""

from __future__ import annotations

import enum
from typing import Callable

_DEBOUNCE_WAIT = 2
_ALL_HIGH = 0xFF


class MenuEvent(enum.IntEnum):
    """Menu buttons, valued by the index of their input pin."""

    SELECT = 0
    NEXT = 1
    PREV = 2
    HOME = 3
    UP = 4
    DOWN = 5


class _Phase(enum.Enum):
    IDLE = "idle"
    PRESSED = "pressed"
    CONFIRMED = "confirmed"
    HELD = "held"


def _check_count(input_count: int) -> None:
    if not 1 <= input_count <= 8:
        raise ValueError(f"input_count must be between 1 and 8, got {input_count}")


def read_pin_state(read_pin: Callable[[int], int], input_count: int) -> int:
    """Pack the input pins into a byte; pin 0 lands in the highest used bit."""
    _check_count(input_count)
    state = _ALL_HIGH
    for index in range(input_count):
        state = ((state << 1) & 0xFF) | (int(read_pin(index)) & 1)
    return state


def find_first_diff(a: int, b: int, input_count: int) -> int:
    """Index of the first differing pin, scanning from the lowest bit.

    Returns *input_count* when the used bits are equal.
    """
    _check_count(input_count)
    for bit in range(input_count):
        if (a >> bit) & 1 != (b >> bit) & 1:
            return input_count - 1 - bit
    return input_count


class Debouncer:
    """Turns polled pin levels into one event per press-and-release."""

    def __init__(
        self,
        read_pin: Callable[[int], int],
        input_count: int = len(MenuEvent),
        default_state: int = _ALL_HIGH,
    ) -> None:
        if not 1 <= input_count <= len(MenuEvent):
            raise ValueError(
                f"input_count must be between 1 and {len(MenuEvent)}, got {input_count}"
            )
        self.read_pin = read_pin
        self.input_count = input_count
        self.default_state = default_state
        self.last_state = _ALL_HIGH
        self._phase = _Phase.IDLE
        self._wait = 0

    def poll(self) -> MenuEvent | None:
        """Sample the pins once; return the event of a completed press, if any."""
        pins = read_pin_state(self.read_pin, self.input_count)

        if self._wait:
            self._wait -= 1
            return None

        if self._phase is _Phase.IDLE:
            if pins != self.default_state:
                self._phase, self._wait = _Phase.PRESSED, _DEBOUNCE_WAIT
        elif self._phase is _Phase.PRESSED:
            if pins == self.default_state:
                self._phase = _Phase.IDLE
            else:
                self.last_state = pins
                self._phase, self._wait = _Phase.CONFIRMED, _DEBOUNCE_WAIT
        elif self._phase is _Phase.CONFIRMED:
            self._phase = _Phase.IDLE if pins != self.last_state else _Phase.HELD
        elif pins == self.default_state:
            self._phase = _Phase.IDLE
            index = find_first_diff(self.default_state, self.last_state, self.input_count)
            if index < self.input_count:
                return MenuEvent(index)
        return None