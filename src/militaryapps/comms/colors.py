# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""ARGB color encoding for Geomessage reports.

Colors arrive as packed 32-bit ARGB integers (0xAARRGGBB).  Values from
signed-int sources (negative numbers) are masked to their unsigned form.
"""

from __future__ import annotations

# Chem light colors understood by AFM GeoEvent processors
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
YELLOW = 0xFFFFFF00

_AFM_COLOR_CODES: dict[int, str] = {
    RED: "1",
    GREEN: "2",
    BLUE: "3",
    YELLOW: "4",
}

COLORS_BY_NAME: dict[str, int] = {
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
}

_MIN_SIGNED = -(1 << 31)
_MAX_UNSIGNED = (1 << 32) - 1


def to_unsigned_argb(argb: int) -> int:
    """Validate a packed ARGB value and return it as an unsigned 32-bit int."""
    if isinstance(argb, bool) or not isinstance(argb, int):
        raise ValueError(f"ARGB color must be an int, got {type(argb).__name__}")
    if argb < _MIN_SIGNED or argb > _MAX_UNSIGNED:
        raise ValueError(f"ARGB color out of 32-bit range: {argb}")
    return argb & 0xFFFFFFFF


def afm_geoevent_color_string(argb: int) -> str:
    """Return the AFM GeoEvent color string for a packed ARGB color.

    Red, green, blue and yellow map to the GeoEvent chem light codes
    "1" through "4".  Any other color is sent as ``#AARRGGBB``.
    """
    unsigned = to_unsigned_argb(argb)
    code = _AFM_COLOR_CODES.get(unsigned)
    if code is not None:
        return code
    return f"#{unsigned:08X}"


def parse_color(text: str) -> int:
    """Parse a color name ("red") or hex literal ("0xFFFF0000", "#FF00FF00")."""
    value = text.strip().lower()
    if value in COLORS_BY_NAME:
        return COLORS_BY_NAME[value]
    if value.startswith("#"):
        value = value[1:]
    elif value.startswith("0x"):
        value = value[2:]
    try:
        return to_unsigned_argb(int(value, 16))
    except ValueError:
        raise ValueError(f"Unrecognized color: {text!r}") from None
