# beam_solver/processor.py
# Drive the planner over every (requirement, weld variant) pair against ONE pool.
#
# The pool is never reset: an offcut committed for an earlier variant or
# requirement is gone for everything after it, so results depend on the
# order of the requirements and of their weld lists.

from __future__ import annotations

from typing import Iterable, List, Union

from .logger import get_logger
from .pool import OffcutPool
from .solver_greedy import plan_beam
from .types import BeamPlan, BeamRequirement, PlanOutcome, RequirementResult


def process_requirements(
    requirements: Iterable[BeamRequirement],
    pool: Union[OffcutPool, Iterable[int]],
) -> List[RequirementResult]:
    """
    Plan every requirement in input order, every weld variant in listed order.
    A raw iterable of lengths is turned into a fresh pool first; an OffcutPool is
    mutated in place and holds the leftovers afterwards.
    """
    if not isinstance(pool, OffcutPool):
        pool = OffcutPool.from_lengths(pool)

    log = get_logger()
    log.info(f"Pool: {len(pool)} offcuts, {pool.total_length():,} mm")

    results: List[RequirementResult] = []
    for req in requirements:
        outcomes: List[PlanOutcome] = []
        for max_welds in req.welds:
            outcome = plan_beam(req.size, max_welds, pool)
            outcomes.append(outcome)
            if isinstance(outcome, BeamPlan):
                log.info(
                    f"{req.size} mm / max {max_welds} weld: {list(outcome.used_offcuts)} "
                    f"= {outcome.total} mm ({len(pool)} offcuts left)"
                )
            else:
                log.info(f"{req.size} mm / max {max_welds} weld: not found")
        results.append(RequirementResult(requirement=req, outcomes=tuple(outcomes)))

    return results
