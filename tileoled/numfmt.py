"""Fixed-width decimal formatting of small integers for tile displays."""

_U8_WIDTH = 3
_U16_WIDTH = 5


def _check_range(value: int, lo: int, hi: int, kind: str) -> None:
    if not lo <= value <= hi:
        raise ValueError(f"{kind} value {value} outside {lo}..{hi}")


def _check_digits(digits: int, most: int) -> None:
    if not 0 <= digits <= most:
        raise ValueError(f"digits must be between 0 and {most}, got {digits}")


def u8toa(value: int, digits: int) -> str:
    """Format an unsigned 8-bit value as its last *digits* zero-padded digits."""
    _check_range(value, 0, 0xFF, "unsigned 8-bit")
    _check_digits(digits, _U8_WIDTH)
    return f"{value:0{_U8_WIDTH}d}"[_U8_WIDTH - digits:]


def s8toa(value: int, digits: int) -> str:
    """Format a signed 8-bit value with a leading sign.

    A *digits* of 1 or 2 keeps that many trailing digits; any other
    value keeps all three.
    """
    _check_range(value, -0x80, 0x7F, "signed 8-bit")
    sign = "-" if value < 0 else "+"
    body = f"{abs(value):0{_U8_WIDTH}d}"
    if digits in (1, 2):
        body = body[-digits:]
    return sign + body


def u16toa(value: int, digits: int) -> str:
    """Format an unsigned 16-bit value as its last *digits* zero-padded digits."""
    _check_range(value, 0, 0xFFFF, "unsigned 16-bit")
    _check_digits(digits, _U16_WIDTH)
    return f"{value:0{_U16_WIDTH}d}"[_U16_WIDTH - digits:]


def utoa(value: int) -> str:
    """Format an unsigned 16-bit value without leading zeros."""
    return u16toa(value, _U16_WIDTH).lstrip("0") or "0"