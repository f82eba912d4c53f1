# beam_solver/plotting.py
# Minimal matplotlib visualization: one horizontal bar per committed plan,
# split into the welded offcuts, with a tick at the required length.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .config import DEFAULTS
from .metrics import committed_plans
from .types import BeamPlan, RequirementResult


@dataclass(frozen=True)
class PlotStyle:
    show_labels: bool = True      # offcut length inside each segment
    show_target: bool = True      # red tick at the required length
    show_grid: bool = False
    font_size: int = 7
    bar_height: float = 0.6
    row_height_in: float = 0.45   # figure height per plan (inches)


def _hash_color(key: str) -> Tuple[float, float, float]:
    """Deterministic pastel-ish color from a string."""
    h = 2166136261
    for ch in key.encode("utf-8"):
        h ^= ch
        h *= 16777619
        h &= 0xFFFFFFFF
    # map to [0.3..0.9] range for readability
    r = 0.3 + ((h >> 0) & 0xFF) / 255 * 0.6
    g = 0.3 + ((h >> 8) & 0xFF) / 255 * 0.6
    b = 0.3 + ((h >> 16) & 0xFF) / 255 * 0.6
    return (r, g, b)


def _row_label(plan: BeamPlan) -> str:
    return f"{plan.target} {DEFAULTS.unit} / max {plan.max_welds}"


def plot_results(
    results: List[RequirementResult],
    style: Optional[PlotStyle] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> plt.Figure:
    """
    Draw every committed plan as a bar (top row = first plan).
    Not-found variants are not drawn.
    """
    style = style or PlotStyle()

    plans = committed_plans(results)
    n = len(plans)
    if n == 0:
        raise ValueError("No committed plans to plot")

    if figsize is None:
        figsize = (10, max(2.0, style.row_height_in * n + 1.0))

    fig, ax = plt.subplots(figsize=figsize)
    half = style.bar_height / 2
    x_max = 0

    for row, plan in enumerate(plans):
        y = n - 1 - row
        x = 0
        for length in plan.used_offcuts:
            rect = Rectangle(
                (x, y - half),
                length,
                style.bar_height,
                facecolor=_hash_color(str(length)),
                edgecolor="black",
                linewidth=0.8,
            )
            ax.add_patch(rect)
            if style.show_labels:
                ax.text(
                    x + length / 2,
                    y,
                    f"{length}",
                    ha="center",
                    va="center",
                    fontsize=style.font_size,
                    color="black",
                )
            x += length

        if style.show_target:
            ax.plot([plan.target, plan.target], [y - half - 0.1, y + half + 0.1], color="red", linewidth=1.2)

        x_max = max(x_max, plan.total, plan.target)

    ax.set_yticks(range(n))
    ax.set_yticklabels([_row_label(p) for p in reversed(plans)], fontsize=style.font_size + 1)
    ax.set_xlim(0, x_max * 1.05)
    ax.set_ylim(-1, n)
    ax.set_xlabel(DEFAULTS.unit)
    ax.set_title(f"Committed beam plans: {n}", fontsize=10)

    if style.show_grid:
        ax.grid(True, axis="x", linewidth=0.3)
    else:
        ax.grid(False)

    fig.tight_layout()
    return fig


def show_results(results: List[RequirementResult], style: Optional[PlotStyle] = None) -> None:
    """Convenience wrapper: plot and show."""
    plot_results(results, style=style)
    plt.show()


def save_results_png(
    results: List[RequirementResult],
    path: str,
    style: Optional[PlotStyle] = None,
    dpi: int = 200,
) -> None:
    """Save the plan figure to PNG."""
    fig = plot_results(results, style=style)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
