# beam_solver/tests_smoke.py
# Very small smoke tests you can run with:
#   python -m beam_solver.tests_smoke
#
# These are not full unit tests, but they quickly tell you if
# the planner, validation, metrics and reports are wired correctly.

from __future__ import annotations

from beam_solver.report import format_markdown, format_text
from beam_solver.run import run_planning
from beam_solver.sample_data import RandomJobConfig, generate_random_offcuts, generate_random_requirements
from beam_solver.types import BeamRequirement


def test_basic_run() -> None:
    reqs = [
        BeamRequirement(5000, (0, 1)),
        BeamRequirement(4000, (1, 2)),
    ]
    res = run_planning(reqs, [5000, 4500, 3000, 2200, 1800, 1000], validate=True)

    assert res.summary.beams_solved == 2
    assert res.remaining == [2200]
    assert format_text(res.results).startswith("5000 mm")
    assert "## Summary" in format_markdown(res.results, res.summary)


def test_random_job() -> None:
    cfg = RandomJobConfig(seed=42, n_offcuts=60, n_beams=20)
    res = run_planning(generate_random_requirements(cfg), generate_random_offcuts(cfg), validate=True)

    # validation already ran; check the accounting from the summary side too
    s = res.summary
    assert s.beams_required == 20
    assert s.initial_offcuts == 60
    assert s.consumed_material + s.remaining_material == s.initial_material
    assert sum(s.weld_distribution.values()) == s.variants_found


def main() -> None:
    print("Running smoke tests...")
    test_basic_run()
    test_random_job()
    print("OK")


if __name__ == "__main__":
    main()
