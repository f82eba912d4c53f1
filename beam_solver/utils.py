# beam_solver/utils.py
# Small utilities used across the project:
# - timing context manager
# - JSON export for results (plans + leftovers + summary)
#
# Keeps dependencies minimal (stdlib only).

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .metrics import RunSummary
from .types import BeamPlan, RequirementResult


@contextmanager
def timer(label: str = "timer") -> Iterator[Dict[str, float]]:
    """
    Usage:
      with timer("plan") as t:
          ...
      print(t["seconds"])
    """
    t0 = time.perf_counter()
    payload: Dict[str, float] = {}
    try:
        yield payload
    finally:
        payload["seconds"] = time.perf_counter() - t0


def results_to_dict(
    results: List[RequirementResult],
    summary: Optional[RunSummary] = None,
    remaining: Optional[List[int]] = None,
) -> Dict[str, Any]:
    """
    Convert results to a JSON-friendly dict.
    Not-found variants are kept (found=false) so every weld variant has an entry.
    """
    out: Dict[str, Any] = {"beams": []}

    for res in results:
        variants = []
        for max_welds, outcome in res.pairs():
            entry: Dict[str, Any] = {"max_welds": max_welds, "found": outcome.found}
            if isinstance(outcome, BeamPlan):
                entry.update(
                    {
                        "total": outcome.total,
                        "welds": outcome.welds,
                        "waste": outcome.waste,
                        "used_offcuts": list(outcome.used_offcuts),
                        "source_indices": list(outcome.source_indices),
                    }
                )
            variants.append(entry)
        out["beams"].append({"size": res.requirement.size, "variants": variants})

    if remaining is not None:
        out["remaining_offcuts"] = list(remaining)

    if summary is not None:
        totals = asdict(summary)
        totals["weld_distribution"] = {str(k): v for k, v in summary.weld_distribution.items()}
        totals["consumed_material"] = summary.consumed_material
        totals["material_efficiency"] = round(summary.material_efficiency, 1)
        out["summary"] = totals

    return out


def save_results_json(
    results: List[RequirementResult],
    path: str | Path,
    *,
    summary: Optional[RunSummary] = None,
    remaining: Optional[List[int]] = None,
    indent: int = 2,
) -> None:
    """Save results (+ optional summary and leftovers) into JSON for integration."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = results_to_dict(results, summary=summary, remaining=remaining)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=indent)
