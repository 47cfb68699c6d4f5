import pytest

from tileoled.display import DisplayMessage, GpioMessage, RecordingBus, U8x8
from tileoled.ssd1306 import (
    sh1106_128x64_noname,
    sh1106_128x64_vcomh0,
    sh1106_128x64_winstar,
    ssd1306_128x64_alt0,
    ssd1306_128x64_noname,
    ssd1306_128x64_vcomh0,
    ssd1312_128x64_noname,
)

ALL_DRIVERS = [
    ssd1306_128x64_noname,
    ssd1312_128x64_noname,
    ssd1306_128x64_vcomh0,
    ssd1306_128x64_alt0,
    sh1106_128x64_noname,
    sh1106_128x64_vcomh0,
    sh1106_128x64_winstar,
]


def make_device(driver):
    gpio_log = []

    def gpio(device, msg, arg, payload):
        gpio_log.append((msg, arg))
        return True

    device = U8x8(display_cb=driver, bus=RecordingBus(), gpio_cb=gpio)
    return device, gpio_log


def commands(log):
    return [entry[1] for entry in log if entry[0] == "cmd"]


@pytest.mark.parametrize("driver", ALL_DRIVERS)
def test_setup_memory_gives_128x64_geometry(driver):
    device, _ = make_device(driver)
    info = device.display_info
    assert (info.pixel_width, info.pixel_height) == (128, 64)
    assert (info.tile_width, info.tile_height) == (16, 8)


def test_sh1106_has_x_offset_two():
    device, _ = make_device(sh1106_128x64_noname)
    assert device.x_offset == 2
    assert device.display_info.sck_clock_hz == 4000000


def test_ssd1306_has_no_x_offset():
    device, _ = make_device(ssd1306_128x64_noname)
    assert device.x_offset == 0
    assert device.display_info.sck_clock_hz == 8000000


@pytest.mark.parametrize("driver", ALL_DRIVERS)
def test_init_resets_and_wraps_sequence(driver):
    device, gpio_log = make_device(driver)
    device.init_display()
    log = device.bus.log
    assert log[0] == ("init",)
    assert log[1] == ("start",)
    assert log[-1] == ("end",)
    assert log[2] == ("cmd", 0xAE)
    resets = [arg for msg, arg in gpio_log if msg is GpioMessage.RESET]
    assert resets == [1, 0, 1]
    delays = [arg for msg, arg in gpio_log if msg is GpioMessage.DELAY_MILLI]
    assert delays == [100, 100, 100]


def test_noname_init_contains_charge_pump_and_contrast():
    device, _ = make_device(ssd1306_128x64_noname)
    device.init_display()
    log = device.bus.log
    pump = log.index(("cmd", 0x8D))
    assert log[pump + 1] == ("arg", 0x14)
    contrast = log.index(("cmd", 0x81))
    assert log[contrast + 1] == ("arg", 0xCF)


def test_vcomh0_init_sets_vcomh_to_zero():
    device, _ = make_device(ssd1306_128x64_vcomh0)
    device.init_display()
    log = device.bus.log
    vcomh = log.index(("cmd", 0xDB))
    assert log[vcomh + 1] == ("arg", 0x00)


def test_alt0_differs_only_in_com_config():
    a, _ = make_device(ssd1306_128x64_noname)
    b, _ = make_device(ssd1306_128x64_alt0)
    a.init_display()
    b.init_display()
    diffs = [(x, y) for x, y in zip(a.bus.log, b.bus.log) if x != y]
    assert len(a.bus.log) == len(b.bus.log)
    assert diffs == [(("arg", 0x12), ("arg", 0x02))]


def test_sh1106_noname_uses_ssd1306_init():
    a, _ = make_device(ssd1306_128x64_noname)
    b, _ = make_device(sh1106_128x64_noname)
    a.init_display()
    b.init_display()
    assert a.bus.log == b.bus.log


def test_winstar_init_has_dc_dc_setting():
    device, _ = make_device(sh1106_128x64_winstar)
    device.init_display()
    log = device.bus.log
    dcdc = log.index(("cmd", 0xAD))
    assert log[dcdc + 1] == ("arg", 0x8B)
    assert ("cmd", 0x8D) not in log


def test_ssd1312_init_scan_direction_normal():
    device, _ = make_device(ssd1312_128x64_noname)
    device.init_display()
    cmds = commands(device.bus.log)
    assert 0xC0 in cmds
    assert 0xC8 not in cmds


@pytest.mark.parametrize("driver", ALL_DRIVERS)
def test_power_save(driver):
    device, _ = make_device(driver)
    device.set_power_save(0)
    device.set_power_save(1)
    assert device.bus.log == [
        ("start",), ("cmd", 0xAF), ("end",),
        ("start",), ("cmd", 0xAE), ("end",),
    ]


def test_ssd1306_flip_modes():
    device, _ = make_device(ssd1306_128x64_noname)
    device.set_flip_mode(1)
    device.set_flip_mode(0)
    assert commands(device.bus.log) == [0xA0, 0xC0, 0xA1, 0xC8]


def test_ssd1312_flip_modes():
    device, _ = make_device(ssd1312_128x64_noname)
    device.set_flip_mode(0)
    device.set_flip_mode(1)
    assert commands(device.bus.log) == [0xA1, 0xC0, 0xA0, 0xC8]


def test_sh1106_flip_keeps_offset():
    device, _ = make_device(sh1106_128x64_noname)
    device.set_flip_mode(1)
    assert device.x_offset == 2
    device.set_flip_mode(0)
    assert device.x_offset == 2


def test_contrast():
    device, _ = make_device(ssd1306_128x64_noname)
    device.set_contrast(0x7F)
    assert device.bus.log == [("start",), ("cmd", 0x81), ("arg", 0x7F), ("end",)]


def test_draw_tile_addressing():
    device, _ = make_device(ssd1306_128x64_noname)
    tile = bytes(range(8))
    assert device.draw_tile(2, 3, tile)
    assert device.bus.log == [
        ("start",),
        ("cmd", 0x40),
        ("cmd", 0x11),
        ("arg", 0x00),
        ("arg", 0xB3),
        ("data", tile),
        ("end",),
    ]


def test_draw_tile_applies_sh1106_offset():
    device, _ = make_device(sh1106_128x64_noname)
    device.draw_tile(0, 0, bytes(8))
    log = device.bus.log
    assert log[2] == ("cmd", 0x10)
    assert log[3] == ("arg", 0x02)


def test_clear_display_repeats_tile_per_row():
    device, _ = make_device(ssd1306_128x64_noname)
    device.clear_display()
    log = device.bus.log
    data = [entry for entry in log if entry[0] == "data"]
    assert len(data) == 16 * 8
    assert all(entry[1] == bytes(8) for entry in data)
    rows = [entry[1] for entry in log if entry[0] == "arg" and entry[1] & 0xF0 == 0xB0]
    assert rows == [0xB0 | y for y in range(8)]


@pytest.mark.parametrize(
    "driver",
    [d for d in ALL_DRIVERS if d is not ssd1312_128x64_noname],
)
def test_unhandled_message_returns_false(driver):
    device, _ = make_device(driver)
    assert driver(device, DisplayMessage.REFRESH, 0, None) is False
    assert device.bus.log == []


def test_ssd1312_accepts_every_message():
    device, _ = make_device(ssd1312_128x64_noname)
    assert ssd1312_128x64_noname(device, DisplayMessage.REFRESH, 0, None) is True
    assert device.bus.log == []