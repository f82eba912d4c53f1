# beam_solver/test_io.py
# Text + JSON loaders, CSV / JSON exports.

from __future__ import annotations

import csv
import json

import pytest

from beam_solver.config import parse_weld_list
from beam_solver.io_csv import export_all
from beam_solver.io_json import dump_job_json, load_job_json
from beam_solver.io_text import (
    load_beam_requirements,
    load_offcuts,
    write_beam_requirements,
    write_offcuts,
)
from beam_solver.metrics import compute_summary
from beam_solver.pool import OffcutPool
from beam_solver.processor import process_requirements
from beam_solver.types import BeamRequirement
from beam_solver.utils import save_results_json


def test_load_beam_requirements_keeps_file_order(tmp_path) -> None:
    p = tmp_path / "beams.txt"
    p.write_text("# size welds...\n\n4000 1 2\n6000 0\n  5000   2 0 1  \n7000\n", encoding="utf-8")

    reqs = load_beam_requirements(p)
    assert reqs == [
        BeamRequirement(4000, (1, 2)),
        BeamRequirement(6000, (0,)),
        BeamRequirement(5000, (2, 0, 1)),
        BeamRequirement(7000, ()),
    ]


@pytest.mark.parametrize(
    "line,fragment",
    [
        ("4000 x 1", "not an unsigned integer"),
        ("0 1", "must be > 0"),
        ("4000 -1", "not an unsigned integer"),
        ("4000 +1", "not an unsigned integer"),
        ("1_000 1", "not an unsigned integer"),
        ("\u0663000 1", "not an unsigned integer"),
        ("4000 1 1", "Duplicate"),
    ],
)
def test_load_beam_requirements_rejects_bad_lines(tmp_path, line, fragment) -> None:
    p = tmp_path / "beams.txt"
    p.write_text(f"5000 0\n{line}\n", encoding="utf-8")
    with pytest.raises(ValueError) as exc:
        load_beam_requirements(p)
    assert ":2:" in str(exc.value)
    assert fragment in str(exc.value)


def test_load_offcuts_any_layout(tmp_path) -> None:
    p = tmp_path / "offcuts.txt"
    p.write_text("# stock\n5000 3000\n2200\n\n1800    1000\n", encoding="utf-8")
    assert load_offcuts(p) == [5000, 3000, 2200, 1800, 1000]


@pytest.mark.parametrize("content", ["1000 abc\n", "1000 0\n", "1000 -20\n", "+1000\n", "1_000\n", "\u0661\u0662\n"])
def test_load_offcuts_rejects_bad_values(tmp_path, content) -> None:
    p = tmp_path / "offcuts.txt"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_offcuts(p)


def test_text_writers_round_trip(tmp_path) -> None:
    reqs = [BeamRequirement(4000, (1, 0)), BeamRequirement(900)]
    write_beam_requirements(reqs, tmp_path / "b.txt")
    write_offcuts([1200, 800], tmp_path / "o.txt")
    assert load_beam_requirements(tmp_path / "b.txt") == reqs
    assert load_offcuts(tmp_path / "o.txt") == [1200, 800]


def test_load_job_json(tmp_path) -> None:
    p = tmp_path / "job.json"
    p.write_text(
        json.dumps(
            {
                "offcuts": [5000, 3000, 1000],
                "beams": [{"size": 5000, "welds": [0, 1]}, {"size": 2000, "weld": 1}, {"size": 800}],
            }
        ),
        encoding="utf-8",
    )
    job = load_job_json(p)
    assert job.offcuts == [5000, 3000, 1000]
    assert job.requirements == [
        BeamRequirement(5000, (0, 1)),
        BeamRequirement(2000, (1,)),
        BeamRequirement(800, ()),
    ]


@pytest.mark.parametrize(
    "payload",
    [
        {"beams": []},
        {"offcuts": []},
        {"offcuts": [1000], "beams": [{"welds": [0]}]},
        {"offcuts": [1000, -1], "beams": []},
        {"offcuts": [1000.5], "beams": []},
        {"offcuts": [1000], "beams": [{"size": 500, "welds": [0, 0]}]},
        [1, 2],
        {"offcuts": [1000], "beams": [500]},
        {"offcuts": [1000], "beams": [{"size": 500, "welds": 1}]},
        {"offcuts": [1000], "beams": [{"size": 500, "weld": [1]}]},
        {"offcuts": [1000], "beams": {"size": 500}},
        {"offcuts": 1000, "beams": []},
    ],
)
def test_load_job_json_rejects(tmp_path, payload) -> None:
    p = tmp_path / "job.json"
    p.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError):
        load_job_json(p)


def test_load_job_json_names_bad_entry(tmp_path) -> None:
    p = tmp_path / "job.json"
    p.write_text(json.dumps({"offcuts": [1000], "beams": [{"size": 500}, {"size": 600, "welds": 1}]}), encoding="utf-8")
    with pytest.raises(ValueError, match=r"beams\[1\]\.welds"):
        load_job_json(p)


def test_dump_job_json(tmp_path) -> None:
    reqs = [BeamRequirement(4000, (1,))]
    dump_job_json(reqs, [3000, 1000], tmp_path / "sub" / "job.json")
    job = load_job_json(tmp_path / "sub" / "job.json")
    assert job.requirements == reqs
    assert job.offcuts == [3000, 1000]


def test_parse_weld_list() -> None:
    assert parse_weld_list("2, 0,1") == (2, 0, 1)
    for bad in ("", "a,1", "1,-1", "1,1"):
        with pytest.raises(ValueError):
            parse_weld_list(bad)


def test_exports(tmp_path) -> None:
    initial = [5000, 3000, 2200, 1800, 1000]
    reqs = [BeamRequirement(4000, (0, 1)), BeamRequirement(10000, (1,))]
    pool = OffcutPool.from_lengths(initial)
    results = process_requirements(reqs, pool)
    remaining = pool.lengths()
    summary = compute_summary(results, initial, remaining)

    export_all(results, summary, remaining, tmp_path, prefix="job")
    save_results_json(results, tmp_path / "job.json", summary=summary, remaining=remaining)

    with (tmp_path / "job_plans.csv").open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    # 4000 / max 0: the 5000 is the smallest completing offcut
    assert rows[0]["used_offcuts"] == "5000"
    assert rows[0]["waste"] == "1000"
    assert rows[1]["used_offcuts"] == "3000+1000"
    assert rows[2]["found"] == "0"
    assert rows[2]["total"] == ""

    with (tmp_path / "job_remaining.csv").open(newline="", encoding="utf-8") as f:
        assert [r["length"] for r in csv.DictReader(f)] == ["2200", "1800"]

    with (tmp_path / "job_summary.csv").open(newline="", encoding="utf-8") as f:
        (row,) = list(csv.DictReader(f))
    assert row["beams_solved"] == "1"
    assert row["total_waste_mm"] == "1000"

    payload = json.loads((tmp_path / "job.json").read_text(encoding="utf-8"))
    assert payload["remaining_offcuts"] == [2200, 1800]
    assert payload["beams"][0]["variants"][1]["used_offcuts"] == [3000, 1000]
    assert payload["beams"][1]["variants"][0] == {"max_welds": 1, "found": False}
    assert payload["summary"]["weld_distribution"] == {"0": 1, "1": 1}
