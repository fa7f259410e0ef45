#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/core/errors.py


class PaletteError(ValueError):
    """Base class for rejected palette input."""


class MissingColor(PaletteError):
    """No color value was provided."""

    def __init__(self):
        super().__init__("")


class OpaqueValueRequired(PaletteError):
    """An alpha-carrying hex value (#rgba / #rrggbbaa) was supplied."""

    def __init__(self, value: str):
        self.value = value
        super().__init__("please provide an opaque entry value")


class InvalidHexColor(PaletteError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"'{value}' is not a valid hexadecimal color")


class InvalidShade(PaletteError):
    def __init__(self, shade):
        self.shade = shade
        super().__init__(f"'{shade}' is not a valid shade (expected one of 50, 100, 200 ... 900)")
