# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping


class ConfigurationError(ValueError):
    """Bad flags or config values, raised before any input is read."""


class Mode(Enum):
    LEXICOGRAPHIC = "lexicographic"
    NUMERIC = "numeric"
    HUMAN = "human"
    MONTH = "month"


_MODE_FLAGS = (("numeric", Mode.NUMERIC), ("human", Mode.HUMAN), ("month", Mode.MONTH))

_BOOL_KEYS = ("reverse", "unique", "ignore_trailing_blanks", "check")


@dataclass(frozen=True)
class SortOptions:
    column: int = 0
    mode: Mode = Mode.LEXICOGRAPHIC
    ignore_trailing_blanks: bool = False
    reverse: bool = False
    unique: bool = False
    check: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SortOptions":
        """Build options from flat flag-style keys (``numeric``, ``human``, ...)."""
        known = {"column"} | {k for k, _ in _MODE_FLAGS} | set(_BOOL_KEYS)
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigurationError(f"unknown sort option(s): {', '.join(unknown)}")

        column = mapping.get("column", 0)
        if column is None:
            column = 0
        if isinstance(column, bool) or not isinstance(column, int):
            raise ConfigurationError(f"column must be an integer, got {column!r}")
        if column < 0:
            raise ConfigurationError(f"column must be >= 0, got {column}")

        for k in [k for k, _ in _MODE_FLAGS] + list(_BOOL_KEYS):
            v = mapping.get(k)
            if v is not None and not isinstance(v, bool):
                raise ConfigurationError(f"{k} must be true or false, got {v!r}")

        selected = [m for k, m in _MODE_FLAGS if mapping.get(k)]
        if len(selected) > 1:
            names = " and ".join(m.value for m in selected)
            raise ConfigurationError(f"cannot combine {names} sort")
        mode = selected[0] if selected else Mode.LEXICOGRAPHIC

        return cls(column=column, mode=mode, **{k: bool(mapping.get(k, False)) for k in _BOOL_KEYS})

    def describe(self) -> str:
        parts = [self.mode.value]
        parts.append(f"column={self.column}" if self.column else "whole line")
        parts.extend(f.name for f in fields(self) if f.name in _BOOL_KEYS and getattr(self, f.name))
        return ", ".join(parts)


__all__ = ["ConfigurationError", "Mode", "SortOptions"]
