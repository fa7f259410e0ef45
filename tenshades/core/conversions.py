#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/core/conversions.py

from typing import Tuple

from . import config as c
from .rounding import round_half_away
from tenshades.shared.clamping import _clamp255
from tenshades.shared.formatting import format_colorspace


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert a 6-digit hex string (with or without '#') to an RGB tuple."""
    h = hex_code[1:] if hex_code.startswith("#") else hex_code
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to a lowercase '#rrggbb' string."""
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSL. Hue is rounded to whole degrees, s and l to 2 decimals."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        s = delta / (c.UNIT - abs(c.DIV_2 * L - c.UNIT))
        if cmax == r_f:
            h = (g_f - b_f) / delta + (c.HSL_HUE_MOD if g_f < b_f else 0.0)
        elif cmax == g_f:
            h = (b_f - r_f) / delta + c.HUE_OFFSET_GREEN
        else:
            h = (r_f - g_f) / delta + c.HUE_OFFSET_BLUE
        h *= c.HUE_SECTOR
    return (
        round_half_away(h, c.HUE_DECIMALS) % c.HUE_MAX,
        round_half_away(s),
        round_half_away(L),
    )


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[int, int, int]:
    """Convert HSL to integer RGB channels in [0, 255]."""
    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = L - chroma / c.DIV_2

    if h < 60:
        r_p, g_p, b_p = chroma, x, 0
    elif h < 120:
        r_p, g_p, b_p = x, chroma, 0
    elif h < 180:
        r_p, g_p, b_p = 0, chroma, x
    elif h < 240:
        r_p, g_p, b_p = 0, x, chroma
    elif h < 300:
        r_p, g_p, b_p = x, 0, chroma
    else:
        r_p, g_p, b_p = chroma, 0, x

    def add_m(v: float) -> int:
        return int(_clamp255(round_half_away((v + m) * c.RGB_MAX, 0)))

    return add_m(r_p), add_m(g_p), add_m(b_p)


def hex_to_hsl(hex_code: str) -> Tuple[float, float, float]:
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, L: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, L))


def hsl_to_rgb_string(h: float, s: float, L: float) -> str:
    """Format an HSL triple as 'rgb(r, g, b)'."""
    return format_colorspace("rgb", *hsl_to_rgb(h, s, L))


def hsl_to_hsl_string(h: float, s: float, L: float) -> str:
    """Format an HSL triple as 'hsl(h, s, l)' using its own (unscaled) numbers."""
    return format_colorspace("hsl", h, s, L)
