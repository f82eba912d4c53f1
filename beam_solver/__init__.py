# beam_solver/__init__.py
"""
Beam solver package (welding required beams out of offcuts).

Current state:
- Greedy planner per (beam, max welds) pair:
  - smallest offcut that completes the beam, else largest that fits
  - at most max_welds + 1 pieces
  - provisional removals rolled back when the beam cannot be reached
- One shared offcut pool for the whole run (order of beams and weld limits matters)
- Deterministic tie-break: equal lengths are taken in input order
- Text / markdown reports, CSV + JSON export, matplotlib chart of committed plans
"""

from .types import (
    Offcut,
    expand_offcuts,
    BeamRequirement,
    BeamPlan,
    NotFound,
    PlanOutcome,
    RequirementResult,
)

from .pool import OffcutPool

from .solver_greedy import plan_beam

from .processor import process_requirements

from .metrics import (
    RunSummary,
    compute_plan_waste,
    compute_summary,
    compute_weld_distribution,
)

from .plotting import (
    PlotStyle,
    plot_results,
    show_results,
    save_results_png,
)

from .run import RunResult, run_planning

__all__ = [
    # types
    "Offcut",
    "expand_offcuts",
    "BeamRequirement",
    "BeamPlan",
    "NotFound",
    "PlanOutcome",
    "RequirementResult",
    # pool
    "OffcutPool",
    # planner
    "plan_beam",
    "process_requirements",
    # metrics
    "RunSummary",
    "compute_plan_waste",
    "compute_summary",
    "compute_weld_distribution",
    # plotting
    "PlotStyle",
    "plot_results",
    "show_results",
    "save_results_png",
    # runner
    "RunResult",
    "run_planning",
]
