# beam_solver/io_csv.py
# CSV export helpers:
# - one row per (beam, weld variant) outcome
# - leftover offcuts after the run
# - one-row run summary
#
# (Plotting is handled in plotting.py.)

from __future__ import annotations

import csv
from pathlib import Path
from typing import List

from .metrics import RunSummary
from .types import BeamPlan, RequirementResult


def export_plans_csv(results: List[RequirementResult], path: str | Path) -> None:
    """
    Write every outcome into a CSV file, not-found variants included.
    used_offcuts is a '+'-joined chain in selection order, e.g. '3000+1000'.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "beam_index",
        "size",
        "max_welds",
        "found",
        "total",
        "welds",
        "waste",
        "used_offcuts",
    ]

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for beam_index, res in enumerate(results):
            for max_welds, outcome in res.pairs():
                row = {
                    "beam_index": beam_index,
                    "size": res.requirement.size,
                    "max_welds": max_welds,
                    "found": int(outcome.found),
                    "total": "",
                    "welds": "",
                    "waste": "",
                    "used_offcuts": "",
                }
                if isinstance(outcome, BeamPlan):
                    row.update(
                        {
                            "total": outcome.total,
                            "welds": outcome.welds,
                            "waste": outcome.waste,
                            "used_offcuts": "+".join(str(v) for v in outcome.used_offcuts),
                        }
                    )
                w.writerow(row)


def export_remaining_csv(remaining: List[int], path: str | Path) -> None:
    """Leftover offcuts, longest first."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["length"])
        for length in sorted(remaining, reverse=True):
            w.writerow([length])


def export_summary_csv(summary: RunSummary, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "beams_required",
        "beams_solved",
        "variants_attempted",
        "variants_found",
        "initial_offcuts",
        "remaining_offcuts",
        "initial_material_mm",
        "remaining_material_mm",
        "consumed_material_mm",
        "total_waste_mm",
        "material_efficiency_pct",
    ]

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        w.writerow(
            {
                "beams_required": summary.beams_required,
                "beams_solved": summary.beams_solved,
                "variants_attempted": summary.variants_attempted,
                "variants_found": summary.variants_found,
                "initial_offcuts": summary.initial_offcuts,
                "remaining_offcuts": summary.remaining_offcuts,
                "initial_material_mm": summary.initial_material,
                "remaining_material_mm": summary.remaining_material,
                "consumed_material_mm": summary.consumed_material,
                "total_waste_mm": summary.total_waste,
                "material_efficiency_pct": f"{summary.material_efficiency:.1f}",
            }
        )


def export_all(
    results: List[RequirementResult],
    summary: RunSummary,
    remaining: List[int],
    out_dir: str | Path,
    prefix: str = "beams",
) -> None:
    """
    Export plans, leftovers, and the run summary into out_dir.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    export_plans_csv(results, out_dir / f"{prefix}_plans.csv")
    export_remaining_csv(remaining, out_dir / f"{prefix}_remaining.csv")
    export_summary_csv(summary, out_dir / f"{prefix}_summary.csv")
