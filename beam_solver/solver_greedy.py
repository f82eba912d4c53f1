# beam_solver/solver_greedy.py
# Greedy planner: build one beam out of offcuts from the shared pool.
#
# Per piece, in this order:
#   1) the smallest offcut that completes the beam on its own (least overshoot)
#   2) otherwise the largest offcut that still fits the remaining distance
#      (most material per weld)
# until the target is reached or the piece budget (max_welds + 1) runs out.
#
# Removals are provisional: they are collected in `taken` and either kept
# (success) or put back with pool.restore (failure). A miss is a normal
# NotFound outcome, not an exception.
#
# NOTE: this is a heuristic, not an optimizer. Overshoot is only minimized on
# the closing piece, and which offcuts it burns decides what later beams can
# still get. Keep the selection rule as-is so results stay comparable between runs.

from __future__ import annotations

from typing import List

from .logger import get_logger
from .pool import OffcutPool
from .types import BeamPlan, NotFound, Offcut, PlanOutcome, require_length, require_welds


def plan_beam(target: int, max_welds: int, pool: OffcutPool) -> PlanOutcome:
    """
    Try to cover `target` mm with at most max_welds + 1 offcuts taken from `pool`.

    On success the used offcuts stay removed from the pool.
    On failure the pool is left exactly as it was before the call.
    """
    require_length(target, "Beam target")
    require_welds(max_welds)

    max_pieces = max_welds + 1
    taken: List[Offcut] = []
    total = 0

    while total < target and len(taken) < max_pieces:
        remaining = target - total

        oc = pool.take_smallest_completing(remaining)
        if oc is None:
            oc = pool.take_largest_fitting(remaining)
        if oc is None:
            # pool is empty; nothing completes and nothing fits
            break

        taken.append(oc)
        total += oc.length

    if total >= target:
        return BeamPlan(
            target=target,
            max_welds=max_welds,
            total=total,
            welds=len(taken) - 1,
            used_offcuts=tuple(oc.length for oc in taken),
            source_indices=tuple(oc.source_index for oc in taken),
        )

    if taken:
        get_logger().info(
            f"{target} mm / max {max_welds} weld: rolled back {[oc.length for oc in taken]} "
            f"(reached {total} mm)"
        )
    pool.restore(taken)
    return NotFound(target=target, max_welds=max_welds)
