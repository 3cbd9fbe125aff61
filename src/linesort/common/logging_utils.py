from __future__ import annotations
import logging
import sys

def setup_logger(name: str = "linesort", level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    if logger.handlers:
        return logger
    # stdout carries the sorted lines
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    logger.addHandler(h)
    return logger
