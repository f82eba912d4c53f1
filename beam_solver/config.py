# beam_solver/config.py
# Centralized defaults and configuration helpers.
# Keeps "magic values" (file conventions, report/export defaults) in one place.

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Defaults:
    # Lengths are integers in this unit everywhere
    unit: str = "mm"

    # Input files
    comment_prefix: str = "#"

    # Report / export
    report_format: str = "text"   # "text" or "markdown"
    export_prefix: str = "beams"
    png_dpi: int = 200


DEFAULTS = Defaults()

REPORT_FORMATS = ("text", "markdown")


def parse_weld_list(text: str) -> Tuple[int, ...]:
    """
    Parse '0,1,2' -> (0, 1, 2)
    Order is kept; duplicates and negatives are rejected.
    """
    vals = [v.strip() for v in text.split(",") if v.strip() != ""]
    if not vals:
        raise ValueError("weld list must be like '0,1,2'")
    try:
        welds = tuple(int(v) for v in vals)
    except ValueError:
        raise ValueError(f"weld list must contain integers, got {text!r}") from None
    if any(w < 0 for w in welds):
        raise ValueError(f"weld limits must be >= 0, got {text!r}")
    if len(set(welds)) != len(welds):
        raise ValueError(f"duplicate weld limits in {text!r}")
    return welds
