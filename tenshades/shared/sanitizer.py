#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tenshades/shared/sanitizer.py

import argparse
import re

from tenshades.core import config as c


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_positive_only_int(value: str) -> int:
    """
    Extracts a strictly positive integer from a string by stripping out
    all non-numeric characters (including minus signs).
    """
    if value is None:
        return None

    # Regex [^0-9] matches anything that is NOT a digit (0-9) and removes it
    digits_only = re.sub(r"[^0-9]", "", str(value))

    if not digits_only:
        return None
    return int(digits_only)


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., output modes)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_format(v: str) -> str:
    """Output notation; anything unrecognized falls back to hex."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.OUTPUT_FORMATS:
        return c.DEFAULT_FORMAT
    return cleaned


def handle_shade(v: str) -> int:
    """Validator for the target shade label (50, 100, 200 ... 900)."""
    stripped = str(v).strip() if v is not None else ""
    val = int(stripped) if re.fullmatch(r"[0-9]+", stripped) else None
    if val not in c.SHADE_LABELS:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid shade: '{raw}' (choose from {', '.join(str(s) for s in c.SHADE_LABELS)})"
        )
    return val


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_positive_only_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "format": handle_format,
    "shade": handle_shade,
    "output": handle_string_clean,
    "seed": handle_int_range(0, 999_999_999_999_999_999),
}
