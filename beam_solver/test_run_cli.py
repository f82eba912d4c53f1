# beam_solver/test_run_cli.py
# End-to-end: runner, validation, CLI.

from __future__ import annotations

import json

import matplotlib

matplotlib.use("Agg")

import pytest

from beam_solver.cli import main
from beam_solver.run import RunResult, run_planning
from beam_solver.types import BeamPlan, BeamRequirement, NotFound, RequirementResult
from beam_solver.validate import raise_on_errors, validate_results

BEAMS = "5000 0\n4000 1\n10000 1\n"
OFFCUTS = "5000 3000 2200 1800 1000\n"


@pytest.fixture
def job_files(tmp_path):
    beams = tmp_path / "beams.txt"
    offcuts = tmp_path / "offcuts.txt"
    beams.write_text(BEAMS, encoding="utf-8")
    offcuts.write_text(OFFCUTS, encoding="utf-8")
    return beams, offcuts


def test_run_planning(tmp_path) -> None:
    reqs = [BeamRequirement(5000, (0,)), BeamRequirement(4000, (1,)), BeamRequirement(10000, (1,))]
    res = run_planning(reqs, [5000, 3000, 2200, 1800, 1000], out_dir=tmp_path / "out")

    assert isinstance(res, RunResult)
    assert res.remaining == [2200, 1800]
    assert res.summary.beams_solved == 2
    assert res.elapsed_s >= 0
    for name in ("beams_plans.csv", "beams_remaining.csv", "beams_summary.csv", "beams.json"):
        assert (tmp_path / "out" / name).exists()


def test_run_planning_with_plot() -> None:
    res, fig = run_planning([BeamRequirement(1000, (0,))], [1200], show_plot=True)
    assert res.summary.variants_found == 1
    assert fig is not None

    res, fig = run_planning([BeamRequirement(5000, (0,))], [1200], show_plot=True)
    assert fig is None


def test_validation_catches_broken_results() -> None:
    req = BeamRequirement(4000, (1,))
    bad = BeamPlan(target=4000, max_welds=0, total=4000, welds=1, used_offcuts=(3000, 1000), source_indices=(0, 1))
    results = [RequirementResult(req, [bad])]
    issues = validate_results(results, [3000, 1000], [])
    messages = [i.message for i in issues]
    assert any("exceeds limit" in m for m in messages)
    assert any("recorded in slot" in m for m in messages)
    with pytest.raises(ValueError):
        raise_on_errors(issues)


def test_validation_catches_double_use_and_imbalance() -> None:
    req = BeamRequirement(3000, (0, 1))
    p1 = BeamPlan(target=3000, max_welds=0, total=3000, welds=0, used_offcuts=(3000,), source_indices=(0,))
    p2 = BeamPlan(target=3000, max_welds=1, total=3000, welds=0, used_offcuts=(3000,), source_indices=(0,))
    issues = validate_results([RequirementResult(req, [p1, p2])], [3000], [])
    messages = [i.message for i in issues]
    assert any("also used" in m for m in messages)
    assert any("does not balance" in m for m in messages)


def test_validation_ok_and_missing_outcome() -> None:
    req = BeamRequirement(3000, (0, 1))
    ok = [RequirementResult(req, [NotFound(3000, 0), NotFound(3000, 1)])]
    assert validate_results(ok, [1000], [1000]) == []

    missing = [RequirementResult(req, [NotFound(3000, 0)])]
    assert any(i.level == "ERROR" for i in validate_results(missing, [1000], [1000]))

    assert [i.level for i in validate_results([], [], [])] == ["WARN"]


def test_cli_text_report(job_files, capsys) -> None:
    beams, offcuts = job_files
    main([str(beams), str(offcuts)])
    out = capsys.readouterr().out
    assert "4000 mm, max 1 weld: BeamPlan { total: 4000, welds: 1, used_offcuts: [3000, 1000] }" in out
    assert "10000 mm with 1 weld - not found" in out


def test_cli_markdown_and_exports(job_files, tmp_path, capsys) -> None:
    beams, offcuts = job_files
    out_dir = tmp_path / "out"
    png = tmp_path / "plans.png"
    main([str(beams), str(offcuts), "--format", "markdown", "--out", str(out_dir), "--png", str(png)])
    out = capsys.readouterr().out
    assert "# Beam Welding Solutions" in out
    assert "- **Beams solved**: 2/3" in out
    assert (out_dir / "beams_plans.csv").exists()
    assert png.exists()


def test_cli_weld_override(job_files, capsys) -> None:
    beams, offcuts = job_files
    main([str(beams), str(offcuts), "--welds", "0"])
    out = capsys.readouterr().out
    assert "4000 mm with 0 weld - not found" in out
    assert "10000 mm with 0 weld - not found" in out


def test_cli_job_json(tmp_path, capsys) -> None:
    job = tmp_path / "job.json"
    job.write_text(json.dumps({"offcuts": [2500, 2500], "beams": [{"size": 5000, "welds": [1]}]}), encoding="utf-8")
    main(["--job", str(job)])
    out = capsys.readouterr().out
    assert "used_offcuts: [2500, 2500]" in out


def test_cli_verbose_logs_to_stderr(job_files, capsys) -> None:
    beams, offcuts = job_files
    main([str(beams), str(offcuts), "--verbose"])
    captured = capsys.readouterr()
    assert "[BEAMS]" in captured.err
    assert "rolled back" in captured.err
    assert "[BEAMS]" not in captured.out
    main([str(beams), str(offcuts)])  # quiet again for other tests


def test_cli_errors(tmp_path, job_files) -> None:
    beams, offcuts = job_files
    with pytest.raises(SystemExit):
        main([])
    with pytest.raises(SystemExit):
        main([str(beams), str(tmp_path / "missing.txt")])

    bad = tmp_path / "bad.txt"
    bad.write_text("4000 one\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(bad), str(offcuts)])
    assert "not an unsigned integer" in str(exc.value.code)


@pytest.mark.parametrize(
    "payload",
    [
        {"offcuts": [1000], "beams": [{"size": 500, "welds": 1}]},
        {"offcuts": [1000], "beams": [500]},
        [1, 2],
    ],
)
def test_cli_rejects_malformed_job(tmp_path, payload) -> None:
    job = tmp_path / "job.json"
    job.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--job", str(job)])
    assert "Invalid input" in str(exc.value.code)


def test_cli_png_without_plans_reports_error(tmp_path, capsys) -> None:
    beams = tmp_path / "beams.txt"
    offcuts = tmp_path / "offcuts.txt"
    beams.write_text("9000 0\n", encoding="utf-8")
    offcuts.write_text("1000\n", encoding="utf-8")
    png = tmp_path / "plans.png"
    main([str(beams), str(offcuts), "--png", str(png)])
    assert "ERROR: No committed plans, PNG not written" in capsys.readouterr().err
    assert not png.exists()
