from __future__ import annotations

import re
from typing import Any

from compareseries.errors import CompareConfigError


RGBA = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


def parse_color(value: Any) -> RGBA:
    """Coerce a colorspec (`#RRGGBB`, `#RRGGBBAA`, RGB or RGBA tuple) to RGBA."""

    if isinstance(value, str):
        return _parse_hex_rgba(value)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        channels = list(value)
        if not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in channels):
            raise CompareConfigError(f"invalid color: {value!r}")
        if len(channels) == 3:
            channels.append(255)
        r, g, b, a = channels
        return (r, g, b, a)
    raise CompareConfigError(f"invalid color: {value!r}")


def rgba_to_hex(value: RGBA) -> str:
    if value[3] == 255:
        return f"#{value[0]:02X}{value[1]:02X}{value[2]:02X}"
    return f"#{value[0]:02X}{value[1]:02X}{value[2]:02X}{value[3]:02X}"


def _parse_hex_rgba(value: str) -> RGBA:
    raw = value.strip()
    if not _HEX_COLOR.match(raw):
        raise CompareConfigError(f"invalid color: {value}")
    h = raw[1:]
    if len(h) == 6:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), 255)
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), int(h[6:8], 16))
