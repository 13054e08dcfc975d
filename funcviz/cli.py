"""Command line entry point: plot expressions and save the picture to a file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from funcviz.graph import DEFAULT_STEP, DEFAULT_THRESHOLD, Viewport
from funcviz.settings import default_save_path, load_workspace, save_workspace
from funcviz.workspace import FunctionLimitError, Workspace

SUPPORTED_SUFFIXES = {".png": "png", ".jpg": "jpeg", ".jpeg": "jpeg", ".pdf": "pdf"}
TICK_COUNT = 20
FIGURE_SIZE = (8.0, 5.0)
FIGURE_DPI = 100
CURVE_WIDTH = 3.0
EXTREMUM_SIZE = 4.0


def resolve_output_path(path: str | Path) -> Path:
    """Keep a png, jpg, jpeg or pdf path as it is; append ``.png`` to any other."""
    target = Path(path)
    if target.suffix.lower() in SUPPORTED_SUFFIXES:
        return target
    return target.with_name(target.name + ".png")


def default_plot_name(now: datetime) -> str:
    """File name stem for a plot saved at ``now``."""
    return "plot_" + now.strftime("%Y%m%d_%H%M%S")


def render_plot(workspace: Workspace, path: str | Path) -> Path:
    """Draw every visible function of ``workspace`` into an image file.

    Returns the path actually written, which may carry an added ``.png``.
    """
    target = resolve_output_path(path)
    image_format = SUPPORTED_SUFFIXES[target.suffix.lower()]
    view = workspace.viewport

    figure = Figure(figsize=FIGURE_SIZE, dpi=FIGURE_DPI, facecolor="white")
    axes = figure.add_axes((0.0, 0.0, 1.0, 1.0))
    axes.set_facecolor("white")
    axes.set_xlim(view.x_lower, view.x_upper)
    axes.set_ylim(view.y_lower, view.y_upper)
    axes.xaxis.set_major_locator(MaxNLocator(nbins=TICK_COUNT))
    axes.yaxis.set_major_locator(MaxNLocator(nbins=TICK_COUNT))
    axes.tick_params(direction="in", length=10, pad=-15)
    axes.grid(True, color="#c8c8c8", linewidth=0.5)
    axes.axhline(0.0, color="black", linewidth=1.0)
    axes.axvline(0.0, color="black", linewidth=1.0)

    for entry, plot in zip(workspace.entries, workspace.build()):
        color = entry.color.name()
        for curve in plot.curves:
            axes.plot(curve.xs, curve.ys, color=color, linewidth=CURVE_WIDTH)
        if plot.extremums:
            xs, ys = zip(*plot.extremums)
            axes.plot(
                xs, ys, linestyle="none", marker="o",
                markersize=EXTREMUM_SIZE, color=color,
            )

    target.parent.mkdir(parents=True, exist_ok=True)
    figure.savefig(target, format=image_format, facecolor="white")
    return target


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="funcviz", description="Plot functions of x and save the graph as an image."
    )
    parser.add_argument("expressions", nargs="*", help="expressions in x, e.g. 'sin(x)'")
    parser.add_argument("-o", "--output", help="image file (png, jpg, jpeg or pdf)")
    parser.add_argument("--settings", help="JSON settings file to read and update")
    parser.add_argument("--x-range", nargs=2, type=float, metavar=("LOW", "HIGH"))
    parser.add_argument("--y-range", nargs=2, type=float, metavar=("LOW", "HIGH"))
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    for name, bounds in (("--x-range", args.x_range), ("--y-range", args.y_range)):
        if bounds is not None and not bounds[0] < bounds[1]:
            parser.error(f"{name}: LOW must be less than HIGH")

    try:
        if args.settings:
            workspace, save_path = load_workspace(args.settings)
        else:
            workspace, save_path = Workspace(), default_save_path()
        if args.expressions:
            workspace.entries.clear()
            for expression in args.expressions:
                workspace.add_function(expression)
    except FunctionLimitError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Could not read settings: {exc}", file=sys.stderr)
        return 1

    if args.x_range or args.y_range:
        view = workspace.viewport
        x_lower, x_upper = args.x_range or (view.x_lower, view.x_upper)
        y_lower, y_upper = args.y_range or (view.y_lower, view.y_upper)
        workspace.viewport = Viewport(x_lower, x_upper, y_lower, y_upper)
        factor = workspace.viewport.width / Viewport().width
        workspace.step = DEFAULT_STEP * factor
        workspace.threshold = DEFAULT_THRESHOLD * factor

    if args.output:
        output = Path(args.output)
    else:
        output = Path(save_path) / (default_plot_name(datetime.now()) + ".png")

    for number, plot in enumerate(workspace.build(), start=1):
        if plot.error is not None:
            print(f"function {number}: {plot.error}", file=sys.stderr)

    try:
        written = render_plot(workspace, output)
    except (OSError, ValueError):
        print("Failed to save file to:\n" + str(resolve_output_path(output)), file=sys.stderr)
        return 1

    print(f"Image was saved to {written}")
    if args.settings:
        save_workspace(workspace, args.settings, str(written.resolve().parent))
    return 0