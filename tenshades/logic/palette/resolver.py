#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/logic/palette/resolver.py

import re
from typing import Optional

from tenshades.core import config as c
from tenshades.core.errors import (
    InvalidHexColor,
    InvalidShade,
    MissingColor,
    OpaqueValueRequired,
)


def resolve_color_input(color: Optional[str]) -> str:
    """Validate a raw color argument and return it as a 6-digit '#rrggbb' string."""
    if color is None or color == "":
        raise MissingColor()

    if re.fullmatch(c.HEX_ALPHA_PATTERN, color):
        raise OpaqueValueRequired(color)

    if not re.fullmatch(c.HEX_OPAQUE_PATTERN, color):
        raise InvalidHexColor(color)

    if re.fullmatch(c.HEX_SHORT_PATTERN, color):
        # '#abc' becomes '#aabbcc'
        return "#" + "".join(ch * 2 for ch in color[1:])

    return color


def resolve_shade_input(shade: Optional[int]) -> Optional[int]:
    if shade is not None and shade not in c.SHADE_LABELS:
        raise InvalidShade(shade)
    return shade
