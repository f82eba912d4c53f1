# beam_solver/validate.py
# Validation utilities for a finished run:
# - every committed plan adds up and stays within its weld limit
# - no offcut instance is used by two plans
# - the pool accounting balances (initial == consumed + remaining)
# - one outcome per weld variant
#
# Useful both in tests and to sanity-check planner output before exporting it.

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .types import BeamPlan, RequirementResult


@dataclass(frozen=True)
class ValidationIssue:
    level: str   # "ERROR" or "WARN"
    message: str
    target: Optional[int] = None
    max_welds: Optional[int] = None


def validate_plan(plan: BeamPlan) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    def err(msg: str) -> None:
        issues.append(ValidationIssue("ERROR", msg, target=plan.target, max_welds=plan.max_welds))

    if not plan.used_offcuts:
        err("Plan uses no offcuts")
        return issues
    if plan.total != sum(plan.used_offcuts):
        err(f"total={plan.total} but offcuts sum to {sum(plan.used_offcuts)}")
    if plan.total < plan.target:
        err(f"total={plan.total} is short of target {plan.target}")
    if plan.welds != len(plan.used_offcuts) - 1:
        err(f"welds={plan.welds} but {len(plan.used_offcuts)} offcuts were used")
    if plan.welds > plan.max_welds:
        err(f"welds={plan.welds} exceeds limit {plan.max_welds}")
    if plan.source_indices and len(plan.source_indices) != len(plan.used_offcuts):
        err("source_indices and used_offcuts differ in length")
    return issues


def validate_outcome_counts(results: Iterable[RequirementResult]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for res in results:
        req = res.requirement
        if len(res.outcomes) != len(req.welds):
            issues.append(
                ValidationIssue(
                    "ERROR",
                    f"{len(res.outcomes)} outcomes for {len(req.welds)} weld variants",
                    target=req.size,
                )
            )
            continue
        for max_welds, outcome in res.pairs():
            if outcome.target != req.size or outcome.max_welds != max_welds:
                issues.append(
                    ValidationIssue(
                        "ERROR",
                        f"outcome for ({outcome.target}, {outcome.max_welds}) recorded in slot ({req.size}, {max_welds})",
                        target=req.size,
                        max_welds=max_welds,
                    )
                )
    return issues


def validate_consumption(
    plans: List[BeamPlan],
    initial_lengths: List[int],
    remaining_lengths: List[int],
) -> List[ValidationIssue]:
    """At-most-once use of each input offcut and a balanced multiset."""
    issues: List[ValidationIssue] = []

    seen: Dict[int, BeamPlan] = {}
    for plan in plans:
        for idx, length in zip(plan.source_indices, plan.used_offcuts):
            if idx in seen:
                other = seen[idx]
                issues.append(
                    ValidationIssue(
                        "ERROR",
                        f"offcut #{idx} ({length} mm) also used for {other.target} mm / max {other.max_welds}",
                        target=plan.target,
                        max_welds=plan.max_welds,
                    )
                )
            elif 0 <= idx < len(initial_lengths) and initial_lengths[idx] != length:
                issues.append(
                    ValidationIssue(
                        "ERROR",
                        f"offcut #{idx} is {initial_lengths[idx]} mm in the input, plan says {length} mm",
                        target=plan.target,
                        max_welds=plan.max_welds,
                    )
                )
            seen[idx] = plan

    used = Counter(length for p in plans for length in p.used_offcuts)
    if Counter(initial_lengths) != used + Counter(remaining_lengths):
        issues.append(ValidationIssue("ERROR", "Pool does not balance: initial != used + remaining"))

    return issues


def validate_results(
    results: List[RequirementResult],
    initial_lengths: Iterable[int],
    remaining_lengths: Iterable[int],
) -> List[ValidationIssue]:
    """
    Validate a whole run.
    Returns a list of issues (empty if OK).
    """
    issues: List[ValidationIssue] = []
    plans: List[BeamPlan] = []

    for res in results:
        for plan in res.plans():
            issues.extend(validate_plan(plan))
            plans.append(plan)

    issues.extend(validate_outcome_counts(results))
    issues.extend(validate_consumption(plans, list(initial_lengths), list(remaining_lengths)))

    if not results:
        issues.append(ValidationIssue(level="WARN", message="No beam requirements were processed."))

    return issues


def raise_on_errors(issues: List[ValidationIssue]) -> None:
    errs = [i for i in issues if i.level.upper() == "ERROR"]
    if errs:
        msg = "\n".join(
            f"[{e.level}] target={e.target} max_welds={e.max_welds} :: {e.message}" for e in errs
        )
        raise ValueError("Validation failed:\n" + msg)
