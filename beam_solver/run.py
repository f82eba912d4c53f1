# beam_solver/run.py
# High-level convenience runner that ties together:
# - processor (greedy planner over one shared pool)
# - validation
# - metrics + summary
# - optional CSV + JSON export
# - optional matplotlib figure
#
# This is meant to be called from the CLI or your own scripts.
# Example:
#   from beam_solver.run import run_planning
#   res = run_planning(requirements, [5000, 3000, 2200], out_dir="out")

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .io_csv import export_all
from .logger import get_logger
from .metrics import RunSummary, compute_summary
from .plotting import PlotStyle, plot_results
from .pool import OffcutPool
from .processor import process_requirements
from .types import BeamRequirement, RequirementResult
from .utils import save_results_json, timer
from .validate import raise_on_errors, validate_results


@dataclass(frozen=True)
class RunResult:
    results: List[RequirementResult]
    summary: RunSummary
    remaining: List[int]   # leftover lengths, longest first
    elapsed_s: float


def run_planning(
    requirements: List[BeamRequirement],
    offcuts: Iterable[int],
    *,
    validate: bool = True,
    out_dir: Optional[str | Path] = None,
    export_prefix: str = "beams",
    show_plot: bool = False,
    plot_style: Optional[PlotStyle] = None,
):
    """
    Plan all requirements end-to-end against one pool built from `offcuts`.

    Returns RunResult. If show_plot=True, returns (RunResult, fig); fig is None
    when nothing was committed.
    """
    initial = list(offcuts)
    pool = OffcutPool.from_lengths(initial)

    with timer("plan") as t:
        results = process_requirements(requirements, pool)

    remaining = pool.lengths()

    if validate:
        issues = validate_results(results, initial, remaining)
        for issue in issues:
            if issue.level.upper() == "WARN":
                get_logger().warn(issue.message)
        raise_on_errors(issues)

    summary = compute_summary(results, initial, remaining)
    get_logger().info(
        f"Solved {summary.beams_solved}/{summary.beams_required} beams, "
        f"{summary.variants_found}/{summary.variants_attempted} variants, "
        f"{summary.remaining_offcuts} offcuts left ({t['seconds']:.3f} s)"
    )

    res = RunResult(results=results, summary=summary, remaining=remaining, elapsed_s=t["seconds"])

    # Export CSVs + JSON if requested
    if out_dir is not None:
        out = Path(out_dir)
        export_all(results, summary, remaining, out_dir=out, prefix=export_prefix)
        save_results_json(results, out / f"{export_prefix}.json", summary=summary, remaining=remaining)

    # Plot if requested
    if show_plot:
        fig = plot_results(results, style=plot_style or PlotStyle()) if summary.variants_found else None
        return res, fig

    return res
