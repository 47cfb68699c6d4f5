"""Tile display abstraction: device state, message dispatch and standard helpers.

A display is driven through a callback ``cb(device, msg, arg, payload)``
that receives a :class:`DisplayMessage`. The callback talks to the
controller through the device's command/argument/data bus and to the
reset line and delays through the device's GPIO callback.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Iterable, Optional

MessageCallback = Callable[["U8x8", Any, int, Any], Any]

_TILE_BYTES = 8


class DisplayMessage(enum.Enum):
    """Messages sent to a display callback."""

    SETUP_MEMORY = enum.auto()
    INIT = enum.auto()
    SET_POWER_SAVE = enum.auto()
    SET_FLIP_MODE = enum.auto()
    SET_CONTRAST = enum.auto()
    DRAW_TILE = enum.auto()
    REFRESH = enum.auto()


class GpioMessage(enum.Enum):
    """Messages sent to the GPIO-and-delay callback."""

    INIT = enum.auto()
    DELAY_MILLI = enum.auto()
    RESET = enum.auto()


@dataclass(frozen=True)
class DisplayInfo:
    """Static timing and geometry of a display controller."""

    chip_enable_level: int
    chip_disable_level: int
    post_chip_enable_wait_ns: int
    pre_chip_disable_wait_ns: int
    reset_pulse_width_ms: int
    post_reset_wait_ms: int
    sda_setup_time_ns: int
    sck_pulse_width_ns: int
    sck_clock_hz: int
    spi_mode: int
    i2c_bus_clock_100khz: int
    data_setup_time_ns: int
    write_pulse_width_ns: int
    tile_width: int
    tile_height: int
    default_x_offset: int
    flipmode_x_offset: int
    pixel_width: int
    pixel_height: int


@dataclass
class Tile:
    """A run of *cnt* 8x8 tiles at tile position (x, y); *data* holds cnt*8 bytes."""

    x: int
    y: int
    cnt: int
    data: bytes


_NULL_DISPLAY_INFO = DisplayInfo(
    chip_enable_level=0,
    chip_disable_level=1,
    post_chip_enable_wait_ns=0,
    pre_chip_disable_wait_ns=0,
    reset_pulse_width_ms=0,
    post_reset_wait_ms=0,
    sda_setup_time_ns=0,
    sck_pulse_width_ns=0,
    sck_clock_hz=4_000_000,
    spi_mode=0,
    i2c_bus_clock_100khz=4,
    data_setup_time_ns=0,
    write_pulse_width_ns=0,
    tile_width=1,
    tile_height=1,
    default_x_offset=0,
    flipmode_x_offset=0,
    pixel_width=8,
    pixel_height=8,
)

# Messages the placeholder callback accepts: none of them.
_DUMMY_HANDLED: FrozenSet[Any] = frozenset()


def dummy_cb(device: "U8x8", msg: Any, arg: int, payload: Any) -> bool:
    """Callback that handles nothing and fails every message.

    Returns whether *msg* was handled, which it never is.
    """
    return msg in _DUMMY_HANDLED


def null_display_cb(device: "U8x8", msg: Any, arg: int, payload: Any) -> bool:
    """A display that accepts every message and draws nothing."""
    if msg is DisplayMessage.SETUP_MEMORY:
        device.helper_setup_memory(_NULL_DISPLAY_INFO)
    elif msg is DisplayMessage.INIT:
        device.helper_display_init()
    return True


class RecordingBus:
    """Command/argument/data bus that records every operation in :attr:`log`.

    Entries are tuples: ``("init",)``, ``("start",)``, ``("end",)``,
    ``("cmd", value)``, ``("arg", value)`` and ``("data", bytes)``.
    """

    def __init__(self) -> None:
        self.log: list[tuple] = []

    def init(self) -> None:
        self.log.append(("init",))

    def start_transfer(self) -> None:
        self.log.append(("start",))

    def end_transfer(self) -> None:
        self.log.append(("end",))

    def send_cmd(self, value: int) -> None:
        self.log.append(("cmd", _byte(value)))

    def send_arg(self, value: int) -> None:
        self.log.append(("arg", _byte(value)))

    def send_data(self, data: bytes) -> None:
        self.log.append(("data", bytes(data)))

    def send_sequence(self, sequence: Iterable[tuple]) -> None:
        """Replay a sequence of ``(op, *values)`` tuples.

        Ops are ``"start"``, ``"end"``, ``"cmd"`` (one or more command bytes),
        ``"arg"`` (one or more argument bytes) and ``"data"`` (one byte string).
        """
        for op, *values in sequence:
            if op == "start":
                self.start_transfer()
            elif op == "end":
                self.end_transfer()
            elif op == "cmd":
                for value in values:
                    self.send_cmd(value)
            elif op == "arg":
                for value in values:
                    self.send_arg(value)
            elif op == "data":
                for value in values:
                    self.send_data(value)
            else:
                raise ValueError(f"unknown sequence operation {op!r}")


def _byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value {value} outside 0..255")
    return value


class U8x8:
    """A tile display device: callbacks plus the state they share."""

    def __init__(
        self,
        display_cb: MessageCallback = dummy_cb,
        bus: Optional[RecordingBus] = None,
        gpio_cb: MessageCallback = dummy_cb,
    ) -> None:
        self.display_cb = display_cb
        self.bus = bus if bus is not None else RecordingBus()
        self.gpio_cb = gpio_cb
        self.display_info: Optional[DisplayInfo] = None
        self.x_offset = 0
        self.is_font_inverse_mode = False
        self.utf8_state = 0
        self.bus_clock = 0
        self.i2c_address = 255
        self.debounce_default_pin_state = 255
        self.gpio_result = 1
        self.setup_memory()

    def _info(self) -> DisplayInfo:
        if self.display_info is None:
            raise RuntimeError("display memory has not been set up")
        return self.display_info

    def gpio_call(self, msg: Any, arg: int) -> Any:
        """Forward a message to the GPIO-and-delay callback."""
        return self.gpio_cb(self, msg, arg, None)

    def setup_memory(self) -> None:
        """Ask the display to install its display info."""
        self.display_cb(self, DisplayMessage.SETUP_MEMORY, 0, None)

    def helper_setup_memory(self, info: DisplayInfo) -> None:
        """Install *info* and reset the x offset to its default."""
        self.display_info = info
        self.x_offset = info.default_x_offset

    def helper_display_init(self) -> None:
        """Initialise GPIO and bus, then pulse the reset line."""
        info = self._info()
        self.init_interface()
        self.gpio_call(GpioMessage.RESET, 1)
        self.gpio_call(GpioMessage.DELAY_MILLI, info.reset_pulse_width_ms)
        self.gpio_call(GpioMessage.RESET, 0)
        self.gpio_call(GpioMessage.DELAY_MILLI, info.reset_pulse_width_ms)
        self.gpio_call(GpioMessage.RESET, 1)
        self.gpio_call(GpioMessage.DELAY_MILLI, info.post_reset_wait_ms)

    def init_interface(self) -> None:
        """Initialise GPIO and bus without resetting the display."""
        self.gpio_call(GpioMessage.INIT, 0)
        self.bus.init()

    def init_display(self) -> None:
        """Initialise interface, reset the display and send its init code."""
        self.display_cb(self, DisplayMessage.INIT, 0, None)

    def draw_tile(self, x: int, y: int, tiles: bytes) -> Any:
        """Draw consecutive 8-byte tiles starting at tile position (x, y)."""
        data = bytes(tiles)
        if not data or len(data) % _TILE_BYTES:
            raise ValueError("tile data must be a non-empty multiple of 8 bytes")
        tile = Tile(x, y, len(data) // _TILE_BYTES, data)
        return self.display_cb(self, DisplayMessage.DRAW_TILE, 1, tile)

    def set_power_save(self, enable: int) -> None:
        self.display_cb(self, DisplayMessage.SET_POWER_SAVE, int(enable), None)

    def set_flip_mode(self, mode: int) -> None:
        self.display_cb(self, DisplayMessage.SET_FLIP_MODE, int(mode), None)

    def set_contrast(self, value: int) -> None:
        self.display_cb(self, DisplayMessage.SET_CONTRAST, _byte(value), None)

    def refresh_display(self) -> None:
        self.display_cb(self, DisplayMessage.REFRESH, 0, None)

    def clear_display_with_tile(self, tile: bytes) -> None:
        """Repeat one 8-byte tile across every tile row of the display."""
        data = bytes(tile)
        if len(data) != _TILE_BYTES:
            raise ValueError("a tile is exactly 8 bytes")
        info = self._info()
        for y in range(max(info.tile_height, 1)):
            self.display_cb(
                self, DisplayMessage.DRAW_TILE, info.tile_width, Tile(0, y, 1, data)
            )

    def clear_display(self) -> None:
        self.clear_display_with_tile(bytes(_TILE_BYTES))

    def fill_display(self) -> None:
        self.clear_display_with_tile(b"\xff" * _TILE_BYTES)

    def clear_line(self, line: int) -> None:
        """Blank one tile row; rows beyond the display are ignored."""
        info = self._info()
        if line < info.tile_height:
            self.display_cb(
                self,
                DisplayMessage.DRAW_TILE,
                info.tile_width,
                Tile(0, line, 1, bytes(_TILE_BYTES)),
            )