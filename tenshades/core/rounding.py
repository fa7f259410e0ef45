#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/core/rounding.py

import math

from . import config as c


def round_half_away(value: float, decimals: int = c.ROUND_DECIMALS) -> float:
    """Round to `decimals` places, halves away from zero (round(0.125) == 0.13)."""
    factor = 10 ** decimals
    scaled = math.floor(abs(value) * factor + 0.5)
    return math.copysign(scaled, value) / factor + 0.0
