# beam_solver/io_json.py
# Load a whole job (requirements + offcut pool) from one JSON file.
#
# Expected JSON shape:
# {
#   "offcuts": [5000, 3000, 2200, 1800, 1000],
#   "beams": [{"size": 5000, "welds": [0]}, {"size": 4000, "welds": [1, 2]}]
# }

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .types import BeamRequirement


@dataclass(frozen=True)
class JobLoadResult:
    requirements: List[BeamRequirement]
    offcuts: List[int]


def load_job_json(path: str | Path) -> JobLoadResult:
    """
    Load job definition from JSON.
    - "beams[].size" -> BeamRequirement.size
    - "beams[].welds" -> BeamRequirement.welds (order kept; "weld" accepted for a single value)
    - "offcuts" -> pool lengths
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"JSON job must be an object, got {type(data).__name__}")

    beams = data.get("beams")
    if beams is None:
        raise ValueError("JSON missing 'beams'.")
    if not isinstance(beams, list):
        raise ValueError(f"'beams' must be a list, got {beams!r}")

    offcuts_raw = data.get("offcuts")
    if offcuts_raw is None:
        raise ValueError("JSON missing 'offcuts'.")
    if not isinstance(offcuts_raw, list):
        raise ValueError(f"'offcuts' must be a list, got {offcuts_raw!r}")

    requirements: List[BeamRequirement] = []
    for i, b in enumerate(beams):
        if not isinstance(b, dict):
            raise ValueError(f"beams[{i}] must be an object, got {b!r}")
        if "size" not in b:
            raise ValueError(f"beams[{i}] missing 'size': {b}")
        welds = b.get("welds")
        if welds is None:
            welds = [b["weld"]] if "weld" in b else []
        elif not isinstance(welds, list):
            raise ValueError(f"beams[{i}].welds must be a list, got {welds!r}")
        try:
            requirements.append(BeamRequirement(size=b["size"], welds=tuple(welds)))
        except ValueError as e:
            raise ValueError(f"beams[{i}]: {e}") from None

    offcuts: List[int] = []
    for i, v in enumerate(offcuts_raw):
        if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
            raise ValueError(f"offcuts[{i}] must be a positive integer, got {v!r}")
        offcuts.append(v)

    return JobLoadResult(requirements=requirements, offcuts=offcuts)


def dump_job_json(requirements: List[BeamRequirement], offcuts: List[int], path: str | Path) -> None:
    """
    Write requirements + offcuts in the shape load_job_json reads.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "offcuts": list(offcuts),
        "beams": [{"size": r.size, "welds": list(r.welds)} for r in requirements],
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
