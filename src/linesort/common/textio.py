# -*- coding: utf-8 -*-
"""Line-oriented byte I/O.

Lines are split on ``\\n`` only (one trailing ``\\r`` is dropped) and decoded
as UTF-8 with ``surrogateescape``, so arbitrary bytes survive a round trip.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Sequence

from tqdm import tqdm

from ..sorter.options import ConfigurationError

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def open_input(paths: Sequence[str]) -> BinaryIO:
    if len(paths) > 1:
        raise ConfigurationError("too many input files; only one file or stdin is supported")
    if not paths or paths[0] == "-":
        return sys.stdin.buffer
    return Path(paths[0]).expanduser().open("rb")


def input_size(paths: Sequence[str]) -> Optional[int]:
    if not paths or paths[0] == "-":
        return None
    try:
        return Path(paths[0]).expanduser().stat().st_size
    except OSError:
        return None


def read_lines(stream: BinaryIO, progress: Optional[tqdm] = None) -> List[str]:
    lines: List[str] = []
    for raw in stream:
        if progress is not None:
            progress.update(len(raw))
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        lines.append(raw.decode(ENCODING, ERRORS))
    return lines


def write_lines(lines: Iterable[str], stream: BinaryIO) -> None:
    for line in lines:
        stream.write(line.encode(ENCODING, ERRORS))
        stream.write(b"\n")
    stream.flush()


__all__ = ["open_input", "input_size", "read_lines", "write_lines"]
