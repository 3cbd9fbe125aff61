# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .comparator import Comparator, dedupe_adjacent
from .options import SortOptions


@dataclass
class SortResult:
    lines: List[str]
    is_sorted: bool
    first_unsorted: Optional[int] = None


class SorterEngine:
    def __init__(self, options: SortOptions, logger: Optional[logging.Logger] = None):
        self.options = options
        self.comparator = Comparator(options)
        self.logger = logger or logging.getLogger("linesort")

    def check(self, lines: Sequence[str]) -> SortResult:
        idx = self.comparator.first_unsorted(lines)
        if idx is None:
            self.logger.debug(f"check passed: {len(lines)} lines in order ({self.options.describe()})")
            return SortResult(list(lines), True)
        # 1-based, like an editor would show it
        self.logger.info(f"data is not sorted: line {idx + 1} sorts before line {idx}")
        return SortResult(list(lines), False, idx)

    def sort(self, lines: Sequence[str]) -> SortResult:
        out = list(lines)
        start = time.time()
        self.comparator.sort_in_place(out)
        self.logger.debug(f"sorted {len(out)} lines ({self.options.describe()}) in {time.time() - start:.3f}s")

        if self.options.unique:
            before = len(out)
            out = dedupe_adjacent(out)
            self.logger.debug(f"unique: dropped {before - len(out)} duplicate lines")
        return SortResult(out, True)

    def run(self, lines: Sequence[str]) -> SortResult:
        if self.options.check:
            return self.check(lines)
        return self.sort(lines)


__all__ = ["SortResult", "SorterEngine"]
