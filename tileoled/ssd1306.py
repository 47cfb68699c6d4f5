"""Display callbacks for 128x64 SSD1306, SSD1312 and SH1106 OLED controllers."""

from __future__ import annotations

from itertools import chain
from typing import Any, Iterable

from tileoled.display import DisplayInfo, DisplayMessage, Tile, U8x8

_TILE_BYTES = 8


def _c(value: int) -> list[tuple]:
    return [("cmd", value)]


def _ca(cmd: int, arg: int) -> list[tuple]:
    return [("cmd", cmd), ("arg", arg)]


def _transfer(*parts: Iterable[tuple]) -> tuple:
    """Wrap commands in a start/end transfer pair."""
    return (("start",), *chain.from_iterable(parts), ("end",))


_SSD1306_NONAME_INIT = _transfer(
    _c(0xAE),  # display off
    _ca(0xD5, 0x80),  # clock divide ratio and oscillator frequency
    _ca(0xA8, 0x3F),  # multiplex ratio
    _ca(0xD3, 0x00),  # display offset
    _c(0x40),  # display start line 0
    _ca(0x8D, 0x14),  # charge pump enabled
    _ca(0x20, 0x00),  # horizontal addressing mode
    _c(0xA1),  # segment remap
    _c(0xC8),  # reverse scan direction
    _ca(0xDA, 0x12),  # com pin hardware configuration
    _ca(0x81, 0xCF),  # contrast
    _ca(0xD9, 0xF1),  # pre-charge period
    _ca(0xDB, 0x40),  # vcomh deselect level
    _c(0x2E),  # deactivate scroll
    _c(0xA4),  # output RAM to display
    _c(0xA6),  # normal, non-inverted display
)

# Widest contrast range; vcomh at 0 does not suit every panel.
_SSD1306_VCOMH0_INIT = _transfer(
    _c(0xAE),
    _ca(0xD5, 0x80),
    _ca(0xA8, 0x3F),
    _ca(0xD3, 0x00),
    _c(0x40),
    _ca(0x8D, 0x14),
    _ca(0x20, 0x00),
    _c(0xA1),
    _c(0xC8),
    _ca(0xDA, 0x12),
    _ca(0x81, 0xEF),
    _ca(0xD9, 0xA1),
    _ca(0xDB, 0x00),
    _c(0x2E),
    _c(0xA4),
    _c(0xA6),
)

# Same as the noname sequence but without the alternative COM configuration.
_SSD1306_ALT0_INIT = _transfer(
    _c(0xAE),
    _ca(0xD5, 0x80),
    _ca(0xA8, 0x3F),
    _ca(0xD3, 0x00),
    _c(0x40),
    _ca(0x8D, 0x14),
    _ca(0x20, 0x00),
    _c(0xA1),
    _c(0xC8),
    _ca(0xDA, 0x02),
    _ca(0x81, 0xCF),
    _ca(0xD9, 0xF1),
    _ca(0xDB, 0x40),
    _c(0x2E),
    _c(0xA4),
    _c(0xA6),
)

_SH1106_WINSTAR_INIT = _transfer(
    _c(0xAE),  # display off
    _c(0xA4),  # entire display off
    _ca(0xD5, 0x50),  # divide ratio / oscillator frequency
    _ca(0xA8, 0x3F),  # multiplex ratio 64
    _ca(0xD3, 0x00),  # display offset 0
    _c(0x40),  # start line 0
    _ca(0xAD, 0x8B),  # built-in DC-DC
    _ca(0xD9, 0x22),  # dis-charge / pre-charge period
    _ca(0xDB, 0x35),  # vcom deselect level
    _c(0x32),  # pump voltage 8.0 V
    _ca(0x81, 0xFF),  # contrast
    _c(0xA6),  # normal display
    _ca(0xDA, 0x12),  # com pin hardware configuration
)

_SSD1312_NONAME_INIT = _transfer(
    _c(0xAE),
    _ca(0xD5, 0x80),
    _ca(0xA8, 0x3F),
    _ca(0xD3, 0x00),
    _c(0x40),
    _ca(0x8D, 0x14),
    _ca(0x20, 0x00),
    _c(0xA1),
    _c(0xC0),
    _ca(0xDA, 0x12),
    _ca(0x81, 0xCF),
    _ca(0xD9, 0xF1),
    _ca(0xDB, 0x40),
    _c(0x2E),
    _c(0xA4),
    _c(0xA6),
)

_POWERSAVE0 = _transfer(_c(0xAF))  # display on
_POWERSAVE1 = _transfer(_c(0xAE))  # display off

_SSD1306_FLIP0 = _transfer(_c(0xA1), _c(0xC8))
_SSD1306_FLIP1 = _transfer(_c(0xA0), _c(0xC0))
_SSD1312_FLIP0 = _transfer(_c(0xA1), _c(0xC0))
_SSD1312_FLIP1 = _transfer(_c(0xA0), _c(0xC8))


_SSD1306_INFO = DisplayInfo(
    chip_enable_level=0,
    chip_disable_level=1,
    post_chip_enable_wait_ns=20,
    pre_chip_disable_wait_ns=10,
    reset_pulse_width_ms=100,
    post_reset_wait_ms=100,
    sda_setup_time_ns=50,
    sck_pulse_width_ns=50,
    sck_clock_hz=8_000_000,
    spi_mode=0,
    i2c_bus_clock_100khz=4,
    data_setup_time_ns=40,
    write_pulse_width_ns=150,
    tile_width=16,
    tile_height=8,
    default_x_offset=0,
    flipmode_x_offset=0,
    pixel_width=128,
    pixel_height=64,
)

_SH1106_INFO = DisplayInfo(
    chip_enable_level=0,
    chip_disable_level=1,
    post_chip_enable_wait_ns=20,
    pre_chip_disable_wait_ns=10,
    reset_pulse_width_ms=100,
    post_reset_wait_ms=100,
    sda_setup_time_ns=50,
    sck_pulse_width_ns=50,
    sck_clock_hz=4_000_000,
    spi_mode=0,
    i2c_bus_clock_100khz=4,
    data_setup_time_ns=40,
    write_pulse_width_ns=150,
    tile_width=16,
    tile_height=8,
    default_x_offset=2,
    flipmode_x_offset=2,
    pixel_width=128,
    pixel_height=64,
)


def _set_flip(device: U8x8, mode: int, flip0: tuple, flip1: tuple) -> None:
    info = device._info()
    if mode == 0:
        device.bus.send_sequence(flip0)
        device.x_offset = info.default_x_offset
    else:
        device.bus.send_sequence(flip1)
        device.x_offset = info.flipmode_x_offset


def _draw_tile(device: U8x8, repeat: int, tile: Tile) -> None:
    bus = device.bus
    bus.start_transfer()
    x = (tile.x * 8 + device.x_offset) & 0xFF
    bus.send_cmd(0x40)  # line offset 0
    bus.send_cmd(0x10 | (x >> 4))
    bus.send_arg(x & 0x0F)
    bus.send_arg(0xB0 | tile.y)
    data = bytes(tile.data[: tile.cnt * _TILE_BYTES])
    for _ in range(max(repeat, 1)):
        bus.send_data(data)
    bus.end_transfer()


def _generic(device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
    """Messages shared by all controllers here; False if *msg* is not one of them."""
    if msg is DisplayMessage.SET_POWER_SAVE:
        device.bus.send_sequence(_POWERSAVE0 if arg == 0 else _POWERSAVE1)
    elif msg is DisplayMessage.SET_FLIP_MODE:
        _set_flip(device, arg, _SSD1306_FLIP0, _SSD1306_FLIP1)
    elif msg is DisplayMessage.SET_CONTRAST:
        bus = device.bus
        bus.start_transfer()
        bus.send_cmd(0x81)
        bus.send_arg(arg)
        bus.end_transfer()
    elif msg is DisplayMessage.DRAW_TILE:
        _draw_tile(device, arg, payload)
    else:
        return False
    return True


def _variant(
    device: U8x8, msg: Any, arg: int, payload: Any, init_seq: tuple, info: DisplayInfo
) -> bool:
    if _generic(device, msg, arg, payload):
        return True
    if msg is DisplayMessage.INIT:
        device.helper_display_init()
        device.bus.send_sequence(init_seq)
    elif msg is DisplayMessage.SETUP_MEMORY:
        device.helper_setup_memory(info)
    else:
        return False
    return True


def ssd1306_128x64_noname(device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
    """SSD1306 128x64 with the common init sequence."""
    return _variant(device, msg, arg, payload, _SSD1306_NONAME_INIT, _SSD1306_INFO)


def ssd1312_128x64_noname(device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
    """SSD1312 128x64; accepts every message."""
    if msg is DisplayMessage.SET_FLIP_MODE:
        _set_flip(device, arg, _SSD1312_FLIP0, _SSD1312_FLIP1)
    elif msg is DisplayMessage.INIT:
        device.helper_display_init()
        device.bus.send_sequence(_SSD1312_NONAME_INIT)
    elif msg is DisplayMessage.SETUP_MEMORY:
        device.helper_setup_memory(_SSD1306_INFO)
    else:
        _generic(device, msg, arg, payload)
    return True


def ssd1306_128x64_vcomh0(device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
    """SSD1306 128x64 with vcomh at 0 for the widest contrast range."""
    return _variant(device, msg, arg, payload, _SSD1306_VCOMH0_INIT, _SSD1306_INFO)


def ssd1306_128x64_alt0(device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
    """SSD1306 128x64 without the alternative COM pin configuration."""
    return _variant(device, msg, arg, payload, _SSD1306_ALT0_INIT, _SSD1306_INFO)


def sh1106_128x64_noname(device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
    """SH1106 128x64 using the SSD1306 init sequence and a 2-pixel x offset."""
    return _variant(device, msg, arg, payload, _SSD1306_NONAME_INIT, _SH1106_INFO)


def sh1106_128x64_vcomh0(device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
    """SH1106 128x64 with vcomh at 0."""
    return _variant(device, msg, arg, payload, _SSD1306_VCOMH0_INIT, _SH1106_INFO)


def sh1106_128x64_winstar(device: U8x8, msg: Any, arg: int, payload: Any) -> bool:
    """SH1106 128x64 with the dedicated Winstar init sequence."""
    return _variant(device, msg, arg, payload, _SH1106_WINSTAR_INIT, _SH1106_INFO)