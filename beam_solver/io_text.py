# beam_solver/io_text.py
# Plain-text inputs.
#
# Beam requirements, one per line: size followed by the weld limits to try.
#   # size  max_welds...
#   5000 0 1
#   4000 1 2
#
# Offcuts: whitespace-separated lengths in any layout.
#   5000 3000 2200
#   1800 1000
#
# Blank lines and lines starting with '#' are skipped in both files.
# Numbers are plain unsigned decimal digits ("+5", "1_000", "-1" are rejected).
# Requirements keep their file order (it decides which beams get material first).

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Tuple

from .config import DEFAULTS
from .types import BeamRequirement


def _data_lines(path: Path) -> Iterator[Tuple[int, str]]:
    with path.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith(DEFAULTS.comment_prefix):
                continue
            yield lineno, line


def _parse_ints(path: Path, lineno: int, line: str) -> List[int]:
    out: List[int] = []
    for tok in line.split():
        if not (tok.isascii() and tok.isdigit()):
            raise ValueError(f"{path}:{lineno}: not an unsigned integer: {tok!r}")
        out.append(int(tok))
    return out


def load_beam_requirements(path: str | Path) -> List[BeamRequirement]:
    path = Path(path)
    requirements: List[BeamRequirement] = []
    for lineno, line in _data_lines(path):
        size, *welds = _parse_ints(path, lineno, line)
        try:
            requirements.append(BeamRequirement(size=size, welds=tuple(welds)))
        except ValueError as e:
            raise ValueError(f"{path}:{lineno}: {e}") from None
    return requirements


def load_offcuts(path: str | Path) -> List[int]:
    path = Path(path)
    lengths: List[int] = []
    for lineno, line in _data_lines(path):
        for v in _parse_ints(path, lineno, line):
            if v <= 0:
                raise ValueError(f"{path}:{lineno}: offcut length must be > 0, got {v}")
            lengths.append(v)
    return lengths


def write_beam_requirements(requirements: List[BeamRequirement], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        for req in requirements:
            f.write(" ".join(str(v) for v in (req.size, *req.welds)) + "\n")


def write_offcuts(lengths: List[int], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(" ".join(str(v) for v in lengths) + "\n")
