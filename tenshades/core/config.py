#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/core/config.py

# ==========================================
# Color Math Constants
# ==========================================

UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees, hue lies in [0, HUE_MAX)
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector count, wraps the red-max branch
HUE_OFFSET_GREEN = 2.0             # Sector offset when green is the max channel
HUE_OFFSET_BLUE = 4.0              # Sector offset when blue is the max channel

ROUND_DECIMALS = 2                 # Default precision for saturation / lightness
HUE_DECIMALS = 0                   # Hue is kept in whole degrees

# ==========================================
# Shade Ladder
# ==========================================

SHADE_LABELS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)  # Lower label = lighter
SHADE_SCALE = 1000                 # Closeness of a label is SHADE_SCALE - label
RAMP_SPAN = 11                     # steps_to_white + steps_to_black

# ==========================================
# Input Patterns
# ==========================================

HEX_ALPHA_PATTERN = r"#([0-9a-fA-F]{4}){1,2}"   # #rgba / #rrggbbaa
HEX_OPAQUE_PATTERN = r"#([0-9a-fA-F]{3}){1,2}"  # #rgb / #rrggbb
HEX_SHORT_PATTERN = r"#[0-9a-fA-F]{3}"

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)

# ==========================================
# CLI UI
# ==========================================

DEFAULT_FORMAT = "hex"
OUTPUT_FORMATS = ("hex", "rgb", "hsl")
OUTPUT_MODES = ("text", "json", "prettyjson")

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
