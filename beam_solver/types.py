# beam_solver/types.py
# Core data structures for welding beams out of offcuts.
# Keep this file dependency-light so it can be imported everywhere.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union


def _require_int(value: object, what: str) -> int:
    # bool is an int subclass; a True length is always a caller bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def require_length(value: object, what: str = "length") -> int:
    """Fail fast on anything that is not a positive integer length."""
    v = _require_int(value, what)
    if v <= 0:
        raise ValueError(f"{what} must be > 0, got {v}")
    return v


def require_welds(value: object, what: str = "max_welds") -> int:
    v = _require_int(value, what)
    if v < 0:
        raise ValueError(f"{what} must be >= 0, got {v}")
    return v


# ----------------------------
# Inputs
# ----------------------------

@dataclass(frozen=True)
class Offcut:
    """One physical piece of leftover material (mm)."""
    length: int
    source_index: int  # input position; breaks ties between equal lengths

    def __post_init__(self):
        require_length(self.length, "Offcut length")


def expand_offcuts(lengths) -> List[Offcut]:
    """Number raw lengths by input position (stable order)."""
    return [Offcut(length=length, source_index=i) for i, length in enumerate(lengths)]


@dataclass(frozen=True)
class BeamRequirement:
    """A required beam length and the weld limits to try, in order."""
    size: int
    welds: Tuple[int, ...] = ()

    def __post_init__(self):
        require_length(self.size, "Beam size")
        # accept any sequence, store a tuple so the requirement stays hashable
        object.__setattr__(self, "welds", tuple(self.welds))
        for w in self.welds:
            require_welds(w, f"Weld limit for beam {self.size}")
        if len(set(self.welds)) != len(self.welds):
            raise ValueError(f"Duplicate weld limits for beam {self.size}: {list(self.welds)}")


# ----------------------------
# Outputs
# ----------------------------

@dataclass(frozen=True)
class BeamPlan:
    """A committed combination of offcuts reaching the target length."""
    target: int
    max_welds: int
    total: int
    welds: int
    used_offcuts: Tuple[int, ...]       # lengths, in selection order
    source_indices: Tuple[int, ...] = ()  # input positions of the consumed offcuts

    found = True

    @property
    def waste(self) -> int:
        return self.total - self.target

    @property
    def pieces(self) -> int:
        return len(self.used_offcuts)


@dataclass(frozen=True)
class NotFound:
    """No combination within the weld limit for the pool at that moment."""
    target: int
    max_welds: int

    found = False


PlanOutcome = Union[BeamPlan, NotFound]


@dataclass(frozen=True)
class RequirementResult:
    """One requirement with an outcome per weld variant (same order as requirement.welds)."""
    requirement: BeamRequirement
    outcomes: Tuple[PlanOutcome, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "outcomes", tuple(self.outcomes))

    def plans(self) -> List[BeamPlan]:
        return [o for o in self.outcomes if isinstance(o, BeamPlan)]

    def solved(self) -> bool:
        return any(o.found for o in self.outcomes)

    def pairs(self) -> List[Tuple[int, PlanOutcome]]:
        """(max_welds, outcome) in listed order."""
        return list(zip(self.requirement.welds, self.outcomes))
