# beam_solver/sample_data.py
# Utilities to generate sample / random jobs for quick benchmarking and property tests.
# Lets you stress the planner (pool depletion, rollbacks) without real input files.

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

from .types import BeamRequirement


@dataclass(frozen=True)
class RandomJobConfig:
    seed: int = 123

    # offcut pool
    n_offcuts: int = 40
    offcut_range: Tuple[int, int] = (200, 6000)   # mm
    p_duplicate: float = 0.25   # chance an offcut repeats an earlier length (same-profile cut-offs)

    # beam requirements
    n_beams: int = 12
    beam_range: Tuple[int, int] = (1500, 12000)   # mm
    max_weld_limit: int = 3
    variants_range: Tuple[int, int] = (1, 3)


def generate_random_offcuts(cfg: RandomJobConfig) -> List[int]:
    rnd = random.Random(cfg.seed)
    out: List[int] = []
    for _ in range(cfg.n_offcuts):
        if out and rnd.random() < cfg.p_duplicate:
            out.append(rnd.choice(out))
        else:
            out.append(rnd.randint(*cfg.offcut_range))
    return out


def generate_random_requirements(cfg: RandomJobConfig) -> List[BeamRequirement]:
    """
    Random beams, each with a few distinct weld limits in random order.
    Uses its own stream (seed + 1) so changing the offcut count does not reshuffle beams.
    """
    rnd = random.Random(cfg.seed + 1)
    reqs: List[BeamRequirement] = []
    for _ in range(cfg.n_beams):
        size = rnd.randint(*cfg.beam_range)
        k = rnd.randint(*cfg.variants_range)
        k = min(k, cfg.max_weld_limit + 1)
        welds = rnd.sample(range(cfg.max_weld_limit + 1), k)
        reqs.append(BeamRequirement(size=size, welds=tuple(welds)))
    return reqs
