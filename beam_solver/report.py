# beam_solver/report.py
# Human-readable rendering of a run:
# - plain text: one line per weld variant, BeamPlan-style
# - markdown: input summary, one section per beam, run summary
#
# Both formatters return strings; print_results writes to stdout.

from __future__ import annotations

from typing import List, Optional

from .config import DEFAULTS
from .metrics import RunSummary
from .types import BeamPlan, RequirementResult


def _weld_word(n: int) -> str:
    return "weld" if n == 1 else "welds"


def format_plan_line(plan: BeamPlan) -> str:
    used = ", ".join(str(v) for v in plan.used_offcuts)
    return (
        f"{plan.target} {DEFAULTS.unit}, max {plan.max_welds} weld: "
        f"BeamPlan {{ total: {plan.total}, welds: {plan.welds}, used_offcuts: [{used}] }}"
    )


def format_text(results: List[RequirementResult]) -> str:
    blocks: List[str] = []
    for res in results:
        size = res.requirement.size
        lines = [f"{size} {DEFAULTS.unit}"]
        for max_welds, outcome in res.pairs():
            if isinstance(outcome, BeamPlan):
                lines.append(format_plan_line(outcome))
            else:
                lines.append(f"{size} {DEFAULTS.unit} with {max_welds} weld - not found")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def _format_markdown_plan(plan: BeamPlan) -> List[str]:
    pct = plan.waste / plan.total * 100.0
    chain = " + ".join(f"{v} {DEFAULTS.unit}" for v in plan.used_offcuts)
    return [
        f"✅ **Max {plan.max_welds} {_weld_word(plan.max_welds)}** - Solution found",
        f"- **Actual length**: {plan.total} {DEFAULTS.unit}",
        f"- **Welds used**: {plan.welds}",
        f"- **Waste**: {plan.waste} {DEFAULTS.unit} ({pct:.1f}%)",
        f"- **Offcuts used**: {chain} = {plan.total} {DEFAULTS.unit}",
        "",
    ]


def format_markdown(results: List[RequirementResult], summary: RunSummary) -> str:
    lines: List[str] = [
        "# Beam Welding Solutions",
        "",
        "## Input Summary",
        "",
        f"- **Total beams required**: {summary.beams_required}",
        f"- **Available offcuts**: {summary.initial_offcuts}",
        f"- **Total material**: {summary.initial_material} {DEFAULTS.unit}",
        "",
    ]

    for idx, res in enumerate(results):
        lines.append(f"## Beam {idx + 1} - {res.requirement.size} {DEFAULTS.unit}")
        lines.append("")
        for max_welds, outcome in res.pairs():
            if isinstance(outcome, BeamPlan):
                lines.extend(_format_markdown_plan(outcome))
            else:
                lines.append(f"❌ **Max {max_welds} {_weld_word(max_welds)}** - No solution found")
                lines.append("")
        if idx < len(results) - 1:
            lines.append("---")
            lines.append("")

    lines.extend(
        [
            "",
            "## Summary",
            "",
            f"- **Beams solved**: {summary.beams_solved}/{summary.beams_required}",
            f"- **Remaining offcuts**: {summary.remaining_offcuts}",
            f"- **Total waste**: {summary.total_waste} {DEFAULTS.unit}",
            f"- **Remaining material**: {summary.remaining_material} {DEFAULTS.unit}",
            f"- **Material efficiency**: {summary.material_efficiency:.1f}%",
        ]
    )
    return "\n".join(lines)


def print_results(
    results: List[RequirementResult],
    summary: Optional[RunSummary] = None,
    fmt: str = DEFAULTS.report_format,
) -> None:
    if fmt == "markdown":
        if summary is None:
            raise ValueError("markdown report needs a RunSummary")
        print(format_markdown(results, summary))
    elif fmt == "text":
        print(format_text(results))
    else:
        raise ValueError(f"Unknown report format: {fmt}")
