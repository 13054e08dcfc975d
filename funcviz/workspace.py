"""The set of functions being edited and plotted, with their per-row state."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from funcviz.graph import (
    DEFAULT_STEP,
    DEFAULT_THRESHOLD,
    FunctionPlot,
    Viewport,
    build_graph,
)
from funcviz.resizing import TEXT_EDIT_MIN_HEIGHT
from funcviz.styles import Color, generate_pastel_colors

MAX_FUNCTIONS = 10


class FunctionLimitError(RuntimeError):
    """Raised when a function is added to a workspace that is already full."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"You cannot add more than {limit} functions")
        self.limit = limit


@dataclass
class FunctionEntry:
    """One function row: its text, colour, visibility and box height."""

    color: Color
    text: str = ""
    visible: bool = True
    height: int = TEXT_EDIT_MIN_HEIGHT


@dataclass
class Workspace:
    """An ordered list of function entries plus the current view of the plot."""

    max_functions: int = MAX_FUNCTIONS
    palette: list[Color] = field(default_factory=list)
    rng: random.Random | None = field(default=None, repr=False)
    viewport: Viewport = field(default_factory=Viewport)
    step: float = DEFAULT_STEP
    threshold: float = DEFAULT_THRESHOLD
    entries: list[FunctionEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_functions < 1:
            raise ValueError("max_functions must be at least 1")
        if not self.palette:
            self.palette = generate_pastel_colors(self.max_functions, self.rng)
        if len(self.entries) > self.max_functions:
            raise FunctionLimitError(self.max_functions)

    def __len__(self) -> int:
        return len(self.entries)

    def _check_index(self, index: int) -> FunctionEntry:
        if not 0 <= index < len(self.entries):
            raise IndexError(f"no function at index {index}")
        return self.entries[index]

    def add_function(self, text: str = "") -> FunctionEntry:
        """Append a new function; raise FunctionLimitError when full."""
        if len(self.entries) >= self.max_functions:
            raise FunctionLimitError(self.max_functions)
        color = self.palette[len(self.entries) % len(self.palette)]
        entry = FunctionEntry(color=color, text=text)
        self.entries.append(entry)
        return entry

    def remove_function(self, index: int) -> FunctionEntry:
        """Remove and return the function at ``index``."""
        self._check_index(index)
        return self.entries.pop(index)

    def toggle_visibility(self, index: int) -> bool:
        """Flip whether the function at ``index`` is drawn; return the new state."""
        entry = self._check_index(index)
        entry.visible = not entry.visible
        return entry.visible

    def set_color(self, index: int, color: Color) -> None:
        """Change the colour of the function at ``index``."""
        self._check_index(index).color = color

    def set_text(self, index: int, text: str) -> None:
        """Replace the expression text of the function at ``index``."""
        self._check_index(index).text = text

    def move_function(self, old_index: int, new_index: int) -> None:
        """Move a function, with its colour and visibility, to a new position."""
        entry = self._check_index(old_index)
        self._check_index(new_index)
        if old_index == new_index:
            return
        del self.entries[old_index]
        self.entries.insert(new_index, entry)

    def neighbour_index(self, index: int, direction: int) -> int | None:
        """Index of the row above (-1) or below (+1), or None at either end."""
        if direction not in (-1, 1):
            raise ValueError("direction must be -1 or 1")
        self._check_index(index)
        target = index + direction
        if 0 <= target < len(self.entries):
            return target
        return None

    def build(self) -> list[FunctionPlot]:
        """Sample every function over the current viewport."""
        expressions: Sequence[str] = [entry.text for entry in self.entries]
        visibility: Sequence[bool] = [entry.visible for entry in self.entries]
        return build_graph(expressions, visibility, self.viewport, self.step, self.threshold)