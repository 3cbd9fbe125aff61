# -*- coding: utf-8 -*-
"""Typed sort keys: numeric, human-numeric (k/M/G/...) and month name.

Every parser here is total: malformed text degrades to a zero value and is
never reported as an error, so a sort can never abort halfway through.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Tuple

MONTHS: Mapping[str, int] = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

SUFFIX_ORDER: Mapping[str, int] = {
    "k": 1, "K": 1, "M": 2, "G": 3, "T": 4, "P": 5, "E": 6, "Z": 7, "Y": 8,
}

_DIGITS = "0123456789"


@dataclass(frozen=True)
class NumericValue:
    sign: int
    magnitude: float
    original_text: str


@dataclass(frozen=True)
class HumanValue:
    sign: int
    suffix_order: int
    magnitude: float
    original_text: str


@dataclass(frozen=True)
class MonthValue:
    month_index: int
    original_text: str


# ----------------------------
# numeric scan
# ----------------------------
def _scan_number(text: str) -> Tuple[bool, str, bool, int]:
    """Scan the longest numeric prefix of ``text``.

    Returns ``(negative, number_text, has_digit, end)`` where ``number_text``
    excludes the leading sign and ``end`` is the index just past the scan.
    """
    i = 0
    negative = False
    if text[:1] == "-":
        negative = True
        i = 1
    elif text[:1] == "+":
        i = 1
    start = i

    has_digit = has_dot = has_exp = False
    while i < len(text):
        c = text[i]
        if c in _DIGITS:
            has_digit = True
        elif c == "." and not has_dot and not has_exp:
            has_dot = True
        elif c in "eE" and has_digit and not has_exp:
            has_exp = True
        elif c in "+-" and has_exp and text[i - 1] in "eE":
            pass
        else:
            break
        i += 1
    return negative, text[start:i], has_digit, i


def _to_float(number_text: str, has_digit: bool) -> float:
    if not has_digit:
        return 0.0
    try:
        v = float(number_text)
    except ValueError:
        return 0.0
    # out of range counts as a failed parse
    if math.isinf(v) or math.isnan(v):
        return 0.0
    return v


def _sign_and_magnitude(negative: bool, v: float) -> Tuple[int, float]:
    if v < 0:
        v = -v
        negative = True
    if negative:
        return -1, v
    return (1 if v != 0 else 0), v


def parse_numeric(text: str, original: str) -> NumericValue:
    negative, number_text, has_digit, _ = _scan_number(text)
    sign, magnitude = _sign_and_magnitude(negative, _to_float(number_text, has_digit))
    return NumericValue(sign, magnitude, original)


def parse_human(text: str, original: str) -> HumanValue:
    negative, number_text, has_digit, end = _scan_number(text)
    sign, magnitude = _sign_and_magnitude(negative, _to_float(number_text, has_digit))
    suffix = SUFFIX_ORDER.get(text[end:end + 1], 0) if has_digit else 0
    return HumanValue(sign, suffix, magnitude, original)


def parse_month(text: str, original: str) -> MonthValue:
    prefix = text[:3]
    # ASCII only: str.upper() maps e.g. "ſ" (U+017F) to "S"
    if len(prefix) < 3 or not prefix.isascii():
        return MonthValue(0, original)
    return MonthValue(MONTHS.get(prefix.upper(), 0), original)


__all__ = [
    "MONTHS",
    "SUFFIX_ORDER",
    "NumericValue",
    "HumanValue",
    "MonthValue",
    "parse_numeric",
    "parse_human",
    "parse_month",
]
