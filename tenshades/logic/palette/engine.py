#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/logic/palette/engine.py

from typing import Dict, List, NamedTuple, Optional, Tuple

from tenshades.core import config as c
from tenshades.core import conversions as conv
from tenshades.core.rounding import round_half_away
from tenshades.shared.clamping import _clamp01
from .resolver import resolve_color_input, resolve_shade_input


class AnchorPosition(NamedTuple):
    """Where the input color sits on the shade ladder."""
    index: int
    label: int
    steps_to_white: int
    steps_to_black: int


def _shade_anchor(shade: int) -> AnchorPosition:
    index = c.SHADE_LABELS.index(shade)
    return AnchorPosition(
        index=index,
        label=shade,
        steps_to_white=index + 1,
        steps_to_black=c.RAMP_SPAN - index,
    )


def _nearest_anchor(lightness: float) -> AnchorPosition:
    """
    Scan the ladder from lightest to darkest for the label whose closeness
    (SHADE_SCALE - label) is nearest to the color's lightness on the same
    0..1000 scale. Ties keep the lighter label.
    """
    target = c.SHADE_SCALE * lightness
    best_index = -1
    best_distance = None
    steps_to_white = 0

    for index, label in enumerate(c.SHADE_LABELS):
        distance = abs((c.SHADE_SCALE - label) - target)
        if best_index == -1 or distance < best_distance:
            best_index = index
            best_distance = distance
            steps_to_white += 1

    return AnchorPosition(
        index=best_index,
        label=c.SHADE_LABELS[best_index],
        steps_to_white=steps_to_white,
        steps_to_black=c.RAMP_SPAN - steps_to_white,
    )


def locate_anchor(lightness: float, shade: Optional[int] = None) -> AnchorPosition:
    """Pin the input color to `shade` when given, otherwise to its nearest label."""
    if shade is not None:
        return _shade_anchor(shade)
    return _nearest_anchor(lightness)


def build_lightness_ramp(lightness: float, anchor: AnchorPosition) -> List[float]:
    """Lightness for every ladder label, interpolated toward white and black from the anchor."""
    step_to_black = lightness / anchor.steps_to_black
    step_to_white = round_half_away((c.UNIT - lightness) / anchor.steps_to_white)

    ramp = []
    for index in range(len(c.SHADE_LABELS)):
        if index <= anchor.index:
            value = lightness + (anchor.index - index) * step_to_white
        else:
            value = lightness - (index - anchor.index) * step_to_black
        ramp.append(_clamp01(round_half_away(value, 2)))
    return ramp


def format_shade(hsl: Tuple[float, float, float], fmt: str) -> str:
    if fmt == "hsl":
        return conv.hsl_to_hsl_string(*hsl)
    if fmt == "rgb":
        return conv.hsl_to_rgb_string(*hsl)
    return conv.hsl_to_hex(*hsl)


def generate_palette(
    color: Optional[str],
    fmt: str = c.DEFAULT_FORMAT,
    shade: Optional[int] = None,
) -> Dict[int, str]:
    """
    Build the ten-step shade ramp for `color`.

    Hue and saturation are held at the input's values; only lightness moves.
    In hex output the anchor label echoes `color` exactly as given instead of
    a value re-derived from the rounded HSL triple.
    """
    hex_code = resolve_color_input(color)
    shade = resolve_shade_input(shade)

    h, s, L = conv.hex_to_hsl(hex_code)
    anchor = locate_anchor(L, shade)
    ramp = build_lightness_ramp(L, anchor)

    palette: Dict[int, str] = {}
    for label, lightness in zip(c.SHADE_LABELS, ramp):
        if fmt not in ("hsl", "rgb") and label == anchor.label:
            palette[label] = color
        else:
            palette[label] = format_shade((h, s, lightness), fmt)
    return palette
