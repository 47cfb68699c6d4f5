# tileoled

A small toolkit for monochrome displays that are addressed in 8×8 pixel
tiles. It targets 128×64 OLED panels based on SSD1306, SSD1312 and SH1106.

## What it contains

- `tileoled.display` holds the device side.
  - `U8x8` is the device object. You plug a display callback, a bus and a
    GPIO-and-delay callback into it. Each callback has the form
    `cb(device, msg, arg, payload)`.
  - `DisplayMessage` and `GpioMessage` are the messages passed to those
    callbacks.
  - `DisplayInfo` holds a controller's timing and geometry. `Tile` is a run
    of 8-byte tiles.
  - `dummy_cb` handles no message. `null_display_cb` accepts every message
    and draws nothing.
  - `RecordingBus` records every start, end, command, argument and data
    operation in its `log` list.
- `tileoled.ssd1306` holds the panel drivers: `ssd1306_128x64_noname`,
  `ssd1312_128x64_noname`, `ssd1306_128x64_vcomh0`, `ssd1306_128x64_alt0`,
  `sh1106_128x64_noname`, `sh1106_128x64_vcomh0` and
  `sh1106_128x64_winstar`. Each one is a display callback. It answers
  memory setup, init, power save, flip mode, contrast and tile drawing by
  sending the controller's command bytes over the device's bus.
- `tileoled.stdio_display` holds a text-mode display.
  - `AsciiDisplay` keeps a tile bitmap. Its default size is 8×2 tiles.
  - `AsciiDisplay.render()` returns the bitmap as `*` and `.` characters.
    The display also writes that text to its stream when power save is
    switched off.
  - `setup_stdio(stream)` returns a `U8x8` driven by an `AsciiDisplay`.
- `tileoled.lines` holds helpers for newline-separated text.
  - `line_count`, `line_at` and `copy_line` work on the text itself.
  - `TextCanvas` is a character grid in which each cell is drawn normal or
    inverse.
  - `draw_line` and `draw_lines` draw text centred on a canvas.
- `tileoled.numfmt` formats numbers at a fixed width: `u8toa`, `s8toa`,
  `u16toa` and `utoa`. A value outside its range raises `ValueError`.
- `tileoled.debounce` turns button pin levels into events.
  - `Debouncer(read_pin, input_count=6, default_state=0xFF)` reads
    low-active button pins.
  - `Debouncer.poll()` returns a `MenuEvent` once a press has been
    released. Otherwise it returns `None`.
  - `read_pin_state` and `find_first_diff` are the helpers that
    `Debouncer.poll()` uses.
- `tileoled.ui` holds text-mode dialogs on a `TextCanvas`. Each dialog is
  driven by an iterable of `MenuEvent`s, in which `None` entries are
  skipped.
  - `user_interface_message` returns the chosen button, counted from 1, or
    0 on HOME.
  - `user_interface_input_value` returns the chosen value, or `None` on
    HOME.
  - `user_interface_selection_list` returns the chosen line, counted from
    1, or 0 on HOME.
  - If the events run out before a choice is made, each dialog raises
    `RuntimeError`.
  - `SelectionList`, `draw_selection_list` and `draw_button_line` are the
    building blocks of the dialogs.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Examples

Drive an SSD1306 panel and capture what would go over the wire:

    from tileoled.display import RecordingBus, U8x8
    from tileoled.ssd1306 import ssd1306_128x64_noname

    bus = RecordingBus()
    device = U8x8(ssd1306_128x64_noname, bus)
    device.init_display()
    device.set_power_save(0)
    device.clear_display()
    print(bus.log[:3])

Render tiles as text:

    import io
    from tileoled.stdio_display import setup_stdio

    out = io.StringIO()
    device = setup_stdio(out)
    device.draw_tile(0, 0, b"\xff" * 8)
    device.set_power_save(0)   # writes the bitmap to `out`

Format numbers:

    from tileoled.numfmt import s8toa, u8toa, utoa

    u8toa(7, 3)    # "007"
    s8toa(-5, 2)   # "-05"
    utoa(1234)     # "1234"

## What it does not do

- There is no pixel graphics layer. The package has no fonts, no frame
  buffer and no drawing of lines, shapes or strings in pixels. Text is
  drawn only on a `TextCanvas` character grid.
- No bus talks to real hardware. `RecordingBus` only records what a driver
  sends. To drive a panel, supply an object with the same methods that
  writes to your own I2C or SPI connection.
- The package has no command-line program.