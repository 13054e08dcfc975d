"""Zooming the plot view and reordering function rows by dragging."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

from funcviz.graph import DEFAULT_THRESHOLD, Viewport
from funcviz.workspace import Workspace

ZOOM_STEP = 1.05
MIN_ZOOM_RANGE = 1e-5
MAX_ZOOM_RANGE = 1e10
RESET_STEP = 0.03
SWAP_MARGIN = 25


class ZoomModifier(enum.Enum):
    """Keyboard modifier held while the wheel turns."""

    NONE = "none"
    ALT = "alt"
    CONTROL = "control"


def _scale(lower: float, upper: float, factor: float, center: float) -> tuple[float, float]:
    return (lower - center) * factor + center, (upper - center) * factor + center


def zoom(
    workspace: Workspace,
    zoom_in: bool,
    x_mouse: float | None = None,
    y_mouse: float | None = None,
    modifier: ZoomModifier = ZoomModifier.NONE,
    horizontal_in: bool = False,
) -> bool:
    """Apply one wheel step to the workspace view; return whether it changed.

    Without a modifier both axes scale about the mouse position; with CONTROL
    only the x axis scales about its centre; with ALT only the y axis scales
    about its centre, and a horizontal wheel turn towards positive inverts it.
    The sampling step and jump threshold scale along with the view.
    """
    view = workspace.viewport
    if view.width < MIN_ZOOM_RANGE and zoom_in:
        return False
    if view.width > MAX_ZOOM_RANGE and not zoom_in:
        return False

    factor = 1.0 / ZOOM_STEP if zoom_in else ZOOM_STEP

    if modifier is ZoomModifier.ALT:
        if horizontal_in:
            factor = 1.0 / factor
        y_lower, y_upper = _scale(
            view.y_lower, view.y_upper, factor, (view.y_lower + view.y_upper) / 2
        )
        new_view = replace(view, y_lower=y_lower, y_upper=y_upper)
    elif modifier is ZoomModifier.CONTROL:
        x_lower, x_upper = _scale(
            view.x_lower, view.x_upper, factor, (view.x_lower + view.x_upper) / 2
        )
        new_view = replace(view, x_lower=x_lower, x_upper=x_upper)
    else:
        x_center = (view.x_lower + view.x_upper) / 2 if x_mouse is None else x_mouse
        y_center = (view.y_lower + view.y_upper) / 2 if y_mouse is None else y_mouse
        x_lower, x_upper = _scale(view.x_lower, view.x_upper, factor, x_center)
        y_lower, y_upper = _scale(view.y_lower, view.y_upper, factor, y_center)
        new_view = Viewport(x_lower, x_upper, y_lower, y_upper)

    workspace.viewport = new_view
    workspace.step *= factor
    workspace.threshold *= factor
    return True


def reset_view(workspace: Workspace) -> None:
    """Restore the default axis ranges, sampling step and jump threshold."""
    workspace.viewport = Viewport()
    workspace.step = RESET_STEP
    workspace.threshold = DEFAULT_THRESHOLD


@dataclass
class ReorderDrag:
    """A drag of one function row up or down the list of rows.

    Rows swap places as the dragged row passes the middle of a neighbour;
    the workspace is reordered only when the drag finishes.
    """

    workspace: Workspace
    index: int
    start_y: int = 0
    finished: bool = field(default=False, init=False)
    _order: list[int] = field(default_factory=list, init=False, repr=False)
    _current: int = field(default=0, init=False, repr=False)
    _total: int = field(default=0, init=False, repr=False)
    _max_y: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        count = len(self.workspace.entries)
        if not 0 <= self.index < count:
            raise IndexError(f"no function at index {self.index}")
        self._order = list(range(count))
        self._current = self.index
        heights = [entry.height for entry in self.workspace.entries]
        self._max_y = sum(heights) - heights[self.index]

    @property
    def current_index(self) -> int:
        """Position the dragged row would take if the drag finished now."""
        return self._current

    def _height_at(self, position: int) -> int:
        return self.workspace.entries[self._order[position]].height

    def move(self, delta_y: int) -> int:
        """Track a drag offset; return the dragged row's clamped vertical position."""
        if self.finished:
            raise RuntimeError("drag already finished")
        last = len(self._order) - 1
        if self._current > 0 and delta_y < self._total - SWAP_MARGIN:
            i = self._current
            self._order[i], self._order[i - 1] = self._order[i - 1], self._order[i]
            self._current -= 1
            self._total -= self._height_at(self._current + 1)
        elif self._current < last and delta_y > self._total + SWAP_MARGIN:
            i = self._current
            self._order[i], self._order[i + 1] = self._order[i + 1], self._order[i]
            self._current += 1
            self._total += self._height_at(self._current - 1)
        return min(max(self.start_y + delta_y, 0), self._max_y)

    def finish(self) -> int:
        """Move the row to its new place in the workspace; return that index."""
        if self.finished:
            raise RuntimeError("drag already finished")
        self.finished = True
        self.workspace.move_function(self.index, self._current)
        return self._current