# beam_solver/metrics.py
# Run metrics:
# - waste per committed plan (overshoot past the target)
# - beams solved, variants found
# - material consumed vs. remaining, material efficiency
# - weld distribution across committed plans
#
# These are planner-agnostic: they only look at results and pool contents.

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .types import BeamPlan, RequirementResult


@dataclass(frozen=True)
class RunSummary:
    beams_required: int
    beams_solved: int
    variants_attempted: int
    variants_found: int
    initial_offcuts: int
    remaining_offcuts: int
    initial_material: int
    remaining_material: int
    total_waste: int
    weld_distribution: Dict[int, int] = field(default_factory=dict)

    @property
    def consumed_material(self) -> int:
        return self.initial_material - self.remaining_material

    @property
    def material_efficiency(self) -> float:
        """Share of the initial material consumed by committed plans (percent)."""
        if self.initial_material <= 0:
            return 0.0
        return self.consumed_material / self.initial_material * 100.0


def compute_plan_waste(plan: BeamPlan) -> int:
    """Overshoot of a committed plan; never negative for a valid plan."""
    waste = plan.total - plan.target
    if waste < 0:
        raise ValueError(f"Plan for {plan.target} mm is short by {-waste} mm: {list(plan.used_offcuts)}")
    return waste


def committed_plans(results: Iterable[RequirementResult]) -> List[BeamPlan]:
    out: List[BeamPlan] = []
    for res in results:
        out.extend(res.plans())
    return out


def compute_weld_distribution(plans: Iterable[BeamPlan]) -> Dict[int, int]:
    counts = Counter(p.welds for p in plans)
    return {w: counts[w] for w in sorted(counts)}


def compute_summary(
    results: List[RequirementResult],
    initial_lengths: Iterable[int],
    remaining_lengths: Iterable[int],
) -> RunSummary:
    initial = list(initial_lengths)
    remaining = list(remaining_lengths)
    plans = committed_plans(results)

    return RunSummary(
        beams_required=len(results),
        beams_solved=sum(1 for r in results if r.solved()),
        variants_attempted=sum(len(r.outcomes) for r in results),
        variants_found=len(plans),
        initial_offcuts=len(initial),
        remaining_offcuts=len(remaining),
        initial_material=sum(initial),
        remaining_material=sum(remaining),
        total_waste=sum(compute_plan_waste(p) for p in plans),
        weld_distribution=compute_weld_distribution(plans),
    )
