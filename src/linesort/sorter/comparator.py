# -*- coding: utf-8 -*-
from __future__ import annotations

import functools
from typing import List, Optional, Sequence

from .keys import HumanValue, NumericValue, parse_human, parse_month, parse_numeric
from .options import Mode, SortOptions

_BLANKS = " \t"


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def _raw(s: str) -> bytes:
    # undecodable input bytes are held as surrogateescape code points
    try:
        return s.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return s.encode("utf-8", "surrogatepass")


def _cmp_bytes(a: str, b: str) -> int:
    return _cmp(_raw(a), _raw(b))


def _numeric_cmp(a: NumericValue, b: NumericValue) -> int:
    c = _cmp(a.sign, b.sign)
    if c:
        return c
    c = _cmp(a.magnitude, b.magnitude)
    if a.sign == -1:
        c = -c
    return c or _cmp_bytes(a.original_text, b.original_text)


def _human_cmp(a: HumanValue, b: HumanValue) -> int:
    c = _cmp(a.sign, b.sign) or _cmp(a.suffix_order, b.suffix_order)
    if c:
        return c
    c = _cmp(a.magnitude, b.magnitude)
    if a.sign == -1:
        c = -c
    return c or _cmp_bytes(a.original_text, b.original_text)


class Comparator:
    """Three-way ordering of lines under one fixed ``SortOptions``."""

    def __init__(self, options: SortOptions):
        self.options = options

    def key(self, line: str) -> str:
        column = self.options.column
        if column <= 0:
            return line
        fields = line.split("\t")
        if column > len(fields):
            return ""
        return fields[column - 1]

    def compare_keys(self, a: str, b: str) -> int:
        if self.options.ignore_trailing_blanks:
            a = a.rstrip(_BLANKS)
            b = b.rstrip(_BLANKS)
        mode = self.options.mode
        if mode is Mode.LEXICOGRAPHIC:
            return _cmp_bytes(a, b)

        ta, tb = a.lstrip(_BLANKS), b.lstrip(_BLANKS)
        if mode is Mode.NUMERIC:
            return _numeric_cmp(parse_numeric(ta, a), parse_numeric(tb, b))
        if mode is Mode.HUMAN:
            return _human_cmp(parse_human(ta, a), parse_human(tb, b))
        ma, mb = parse_month(ta, a), parse_month(tb, b)
        return _cmp(ma.month_index, mb.month_index) or _cmp_bytes(ma.original_text, mb.original_text)

    def compare(self, a: str, b: str) -> int:
        c = self.compare_keys(self.key(a), self.key(b))
        return -c if self.options.reverse else c

    def is_less(self, a: str, b: str) -> bool:
        return self.compare(a, b) < 0

    def sort_in_place(self, lines: List[str]) -> None:
        # list.sort is stable: lines with identical keys keep their input order
        lines.sort(key=functools.cmp_to_key(self.compare))

    def first_unsorted(self, lines: Sequence[str]) -> Optional[int]:
        for i in range(1, len(lines)):
            if self.is_less(lines[i], lines[i - 1]):
                return i
        return None

    def is_sorted(self, lines: Sequence[str]) -> bool:
        return self.first_unsorted(lines) is None


def dedupe_adjacent(lines: Sequence[str]) -> List[str]:
    """Drop each line equal to the one right before it (run after sorting)."""
    out: List[str] = []
    for line in lines:
        if not out or line != out[-1]:
            out.append(line)
    return out


__all__ = ["Comparator", "dedupe_adjacent"]
