"""A display that renders its tiles as '*' and '.' text."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from tileoled.display import DisplayMessage, U8x8

_TILE_BYTES = 8


class AsciiDisplay:
    """Display callback holding a tile bitmap that prints on power-up."""

    def __init__(
        self,
        width_tiles: int = 8,
        height_tiles: int = 2,
        stream: Optional[TextIO] = None,
    ) -> None:
        if width_tiles <= 0 or height_tiles <= 0:
            raise ValueError("display must be at least one tile in each direction")
        self.width_tiles = width_tiles
        self.height_tiles = height_tiles
        self.stream = stream
        self.bitmap = bytearray(width_tiles * height_tiles * _TILE_BYTES)

    def place_tile(self, x: int, y: int, tile: bytes) -> None:
        """Store the first 8 bytes of *tile* at tile position (x, y)."""
        if not (0 <= x < self.width_tiles and 0 <= y < self.height_tiles):
            raise ValueError(f"tile position ({x}, {y}) outside the display")
        data = bytes(tile[:_TILE_BYTES])
        if len(data) != _TILE_BYTES:
            raise ValueError("a tile is exactly 8 bytes")
        start = x * _TILE_BYTES + y * self.width_tiles * _TILE_BYTES
        self.bitmap[start:start + _TILE_BYTES] = data

    def render(self) -> str:
        """The bitmap as text, one line per pixel row."""
        width = self.width_tiles * _TILE_BYTES
        rows = []
        for y in range(self.height_tiles * 8):
            base = (y // 8) * width
            mask = 1 << (y & 7)
            rows.append(
                "".join("*" if self.bitmap[base + x] & mask else "." for x in range(width))
            )
        return "".join(row + "\n" for row in rows)

    def __call__(self, device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
        if msg is DisplayMessage.SET_POWER_SAVE:
            if arg == 0:
                (self.stream or sys.stdout).write(self.render())
        elif msg is DisplayMessage.DRAW_TILE:
            self.place_tile(payload.x, payload.y, payload.data)
        return True


def setup_stdio(stream: Optional[TextIO] = None) -> U8x8:
    """A device whose display prints to *stream* (standard output by default)."""
    return U8x8(display_cb=AsciiDisplay(stream=stream))