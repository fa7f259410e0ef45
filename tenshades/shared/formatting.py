#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/shared/formatting.py


def format_number(value: float) -> str:
    """Render a number the way it reads: 339.0 -> '339', 0.830 -> '0.83'."""
    value = value + 0.0
    if value == int(value):
        return str(int(value))
    return repr(value)


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({format_number(h)}, {format_number(s)}, {format_number(l)})"

    return ""
