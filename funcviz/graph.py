"""Sampling of expressions into drawable curve segments."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from funcviz.parser import ParseError, SimpleParser

DEFAULT_STEP = 0.005
DEFAULT_THRESHOLD = 1.0
EXTREMUM_RANGE_LIMIT = 1e3


@dataclass(frozen=True)
class Viewport:
    """Visible axis ranges of the plot."""

    x_lower: float = -20.0
    x_upper: float = 20.0
    y_lower: float = -20.0
    y_upper: float = 20.0

    @property
    def width(self) -> float:
        return self.x_upper - self.x_lower

    @property
    def height(self) -> float:
        return self.y_upper - self.y_lower


@dataclass(frozen=True)
class Curve:
    """A continuous run of sampled points."""

    xs: tuple[float, ...]
    ys: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.xs)


@dataclass
class FunctionPlot:
    """The drawable result for one expression."""

    expression: str
    error: str | None = None
    curves: list[Curve] = field(default_factory=list)
    extremums: list[tuple[float, float]] = field(default_factory=list)


def find_extremums(xs: Sequence[float], ys: Sequence[float]) -> list[tuple[float, float]]:
    """Return the strict local maxima and minima of a sampled curve."""
    if len(xs) < 3 or len(ys) < 3:
        return []
    return [
        (x, y)
        for before, y, after, x in zip(ys, ys[1:], ys[2:], xs[1:])
        if (y > before and y > after) or (y < before and y < after)
    ]


def _abscissas(start: float, stop: float, step: float) -> Iterator[float]:
    x = start
    while x <= stop:
        yield x
        x += step


def _value_at(parser: SimpleParser, x: float) -> float:
    try:
        return parser.evaluate(x)
    except ParseError:
        return math.nan


def sample_segments(
    parser: SimpleParser,
    viewport: Viewport,
    step: float = DEFAULT_STEP,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[Curve]:
    """Sample the expression across the viewport, splitting it at jumps.

    A jump is a change of at least ``threshold`` between neighbouring finite
    values; the segment before it is closed at the edge of the viewport.
    """
    if step <= 0:
        raise ValueError("step must be positive")

    segments: list[tuple[list[float], list[float]]] = []
    current_x: list[float] = []
    current_y: list[float] = []
    prev_was_jump = False
    prev_value = math.nan
    first_found = False

    for x in _abscissas(viewport.x_lower - step, viewport.x_upper, step):
        value = _value_at(parser, x)
        if not math.isfinite(value):
            continue
        if not first_found:
            prev_value = value
            first_found = True
            continue

        if abs(prev_value - value) >= threshold:
            prev_was_jump = True
            current_x.append(x)
            current_y.append(viewport.y_upper if value > 0 else viewport.y_lower)
            segments.append((current_x, current_y))
            current_x, current_y = [], []
        else:
            if prev_was_jump and segments and len(segments[-1][0]) == 1:
                last_x, last_y = segments[-1]
                current_x.append(last_x[0])
                current_y.append(last_y[0])
            current_x.append(x)
            current_y.append(
                min(value, viewport.y_upper) if value > 0 else max(value, viewport.y_lower)
            )
            prev_was_jump = False
        prev_value = value

    if current_x:
        segments.append((current_x, current_y))

    return [Curve(tuple(xs), tuple(ys)) for xs, ys in segments]


def plot_function(
    expression: str,
    viewport: Viewport,
    step: float = DEFAULT_STEP,
    threshold: float = DEFAULT_THRESHOLD,
    visible: bool = True,
) -> FunctionPlot:
    """Check and sample one expression into curves and extremum markers."""
    plot = FunctionPlot(expression)
    if not expression.strip():
        return plot

    parser = SimpleParser(expression)
    try:
        parser.evaluate(viewport.x_lower)
    except ParseError as exc:
        plot.error = str(exc)
        return plot

    if not visible:
        return plot

    show_extremums = viewport.width < EXTREMUM_RANGE_LIMIT
    for curve in sample_segments(parser, viewport, step, threshold):
        if len(curve) < 2:
            continue
        plot.curves.append(curve)
        if show_extremums:
            plot.extremums.extend(find_extremums(curve.xs, curve.ys))
    return plot


def build_graph(
    expressions: Sequence[str],
    visibility: Sequence[bool],
    viewport: Viewport,
    step: float = DEFAULT_STEP,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[FunctionPlot]:
    """Plot every expression; ``visibility`` must match ``expressions`` in length."""
    return [
        plot_function(expression, viewport, step, threshold, visible)
        for expression, visible in zip(expressions, visibility, strict=True)
    ]