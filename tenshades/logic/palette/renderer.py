#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/logic/palette/renderer.py

import json
from typing import Dict, Optional

from tenshades.core import config as c
from tenshades.shared.preview import print_color_block


def _expand_short_hex(hex_code: str) -> str:
    if len(hex_code) == 4:
        return "#" + "".join(ch * 2 for ch in hex_code[1:])
    return hex_code


def render_palette(
    palette: Dict[int, str],
    output: str = "text",
    swatches: Optional[Dict[int, str]] = None,
) -> None:
    """
    Print the generated palette to the terminal.

    `swatches` maps each label to a hex value used for the preview block;
    without it only labels and values are printed.
    """
    if output == "json":
        print(json.dumps({str(label): value for label, value in palette.items()}))
        return
    if output == "prettyjson":
        print(json.dumps({str(label): value for label, value in palette.items()}, indent=4))
        return

    print()
    for label, value in palette.items():
        title = f"{c.MSG_BOLD_COLORS['info']}{label:>5}{c.RESET}"
        swatch = _expand_short_hex(swatches[label]) if swatches else None
        print_color_block(value, title, swatch)
    print()
