# beam_solver/cli.py
# Command line front end:
# - reads beam requirements + offcuts (two text files, or one JSON job)
# - plans every beam / weld variant against one shared pool
# - prints a text or markdown report
# - optional CSV + JSON export folder, PNG, interactive plot
#
# Run:
#   python -m beam_solver beams.txt offcuts.txt
#   python -m beam_solver --job job.json --format markdown --out out/
#
# beams.txt: "size max_welds..." per line, e.g. "5000 0 1"
# offcuts.txt: whitespace-separated lengths

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path
from typing import List, Optional

from .config import DEFAULTS, REPORT_FORMATS, parse_weld_list
from .io_json import load_job_json
from .io_text import load_beam_requirements, load_offcuts
from .logger import get_logger, set_enabled
from .plotting import PlotStyle, save_results_png
from .report import print_results
from .run import run_planning


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Plan welded beams from a pool of offcuts (greedy, shared pool)")
    p.add_argument("beams", nargs="?", default="", help="Beam requirements file: 'size max_welds...' per line")
    p.add_argument("offcuts", nargs="?", default="", help="Offcuts file: whitespace-separated lengths")
    p.add_argument("--job", type=str, default="", help="JSON job with 'beams' and 'offcuts' (instead of the two files)")
    p.add_argument("--welds", type=str, default="", help="Override weld limits for every beam, e.g. 0,1,2")
    p.add_argument("--format", type=str, default=DEFAULTS.report_format, choices=REPORT_FORMATS, help="Report format")
    p.add_argument("--out", type=str, default="", help="Output directory for CSV + JSON exports (optional)")
    p.add_argument("--prefix", type=str, default=DEFAULTS.export_prefix, help="Export filename prefix")
    p.add_argument("--png", type=str, default="", help="Save plan chart as PNG (optional)")
    p.add_argument("--plot", action="store_true", help="Show plan chart (matplotlib window)")
    p.add_argument("--no_labels", action="store_true", help="Hide offcut lengths in the chart")
    p.add_argument("--no_validate", action="store_true", help="Skip result validation")
    p.add_argument("--verbose", action="store_true", help="Log every attempt and rollback to stderr")
    return p


def _load_inputs(args: argparse.Namespace, parser: argparse.ArgumentParser):
    if args.job:
        if args.beams or args.offcuts:
            parser.error("use either --job or BEAMS OFFCUTS, not both")
        job_path = Path(args.job)
        if not job_path.exists():
            raise SystemExit(f"Job JSON not found: {job_path}")
        loaded = load_job_json(job_path)
        return loaded.requirements, loaded.offcuts

    if not (args.beams and args.offcuts):
        parser.error("provide BEAMS and OFFCUTS files, or --job job.json")
    for path in (Path(args.beams), Path(args.offcuts)):
        if not path.exists():
            raise SystemExit(f"Input file not found: {path}")
    return load_beam_requirements(args.beams), load_offcuts(args.offcuts)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_argparser()
    args = parser.parse_args(argv)
    set_enabled(args.verbose)

    try:
        requirements, offcuts = _load_inputs(args, parser)
        if args.welds.strip():
            welds = parse_weld_list(args.welds)
            requirements = [dataclasses.replace(r, welds=welds) for r in requirements]
    except ValueError as e:
        raise SystemExit(f"Invalid input: {e}") from None

    if not requirements:
        raise SystemExit("No beam requirements found.")

    style = PlotStyle(show_labels=not args.no_labels)
    out_dir = args.out.strip() or None

    result = run_planning(
        requirements,
        offcuts,
        validate=not args.no_validate,
        out_dir=out_dir,
        export_prefix=args.prefix,
        show_plot=bool(args.plot),
        plot_style=style,
    )

    # run_planning returns (RunResult, fig) if show_plot else RunResult
    if isinstance(result, tuple):
        res, fig = result
    else:
        res, fig = result, None

    print_results(res.results, res.summary, fmt=args.format)

    if out_dir is not None:
        get_logger().info(f"Exported CSV + JSON to: {out_dir}")

    if args.png.strip():
        if res.summary.variants_found:
            save_results_png(res.results, args.png.strip(), style=style, dpi=DEFAULTS.png_dpi)
            get_logger().info(f"Chart saved to: {args.png.strip()}")
        else:
            get_logger().error(f"No committed plans, PNG not written: {args.png.strip()}")

    # If plotting is enabled, show the figure
    if fig is not None:
        import matplotlib.pyplot as plt
        plt.show()


if __name__ == "__main__":
    main()
