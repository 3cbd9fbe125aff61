from __future__ import annotations
import sys
from typing import Optional
from tqdm import tqdm

def make_progress(total: Optional[int], desc: str, enabled: bool = True) -> tqdm:
    return tqdm(
        total=total,
        desc=desc,
        leave=False,
        file=sys.stderr,
        disable=not enabled,
        unit="B",
        unit_scale=True,
        bar_format="{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]"
    )
