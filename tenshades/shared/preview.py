#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/shared/preview.py

import re
from typing import Optional

from tenshades.core.conversions import hex_to_rgb
from tenshades.core import config as c


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def print_color_block(value: str, title: str, hex_code: Optional[str] = None, end: str = "\n") -> None:
    """Print `title: value`, with a truecolor block for `hex_code` when given."""
    vis_len = get_visible_len(title)
    padding = " " * max(0, 8 - vis_len)
    block = ""
    if hex_code:
        r, g, b = hex_to_rgb(hex_code)
        block = f"\033[48;2;{r};{g};{b}m                {c.RESET}  "

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {block}{c.BOLD_WHITE}{value}{c.RESET}", end=end)
