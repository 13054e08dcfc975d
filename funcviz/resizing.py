"""Edge-drag resizing of panels and function boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

EDGE_MARGIN = 7
TEXT_EDIT_MIN_HEIGHT = 50
TEXT_EDIT_MAX_HEIGHT = 120
PANEL_MIN_WIDTH = 300
PANEL_MAX_WIDTH = 1135


def clamp_resize(initial: int, delta: float, minimum: int, maximum: int) -> int:
    """Return ``initial + delta`` clamped; a bound of zero or less is ignored."""
    size = int(initial + delta)
    if minimum > 0:
        size = max(size, minimum)
    if maximum > 0:
        size = min(size, maximum)
    return size


def near_edge(position: float, extent: float, margin: float = EDGE_MARGIN) -> bool:
    """Whether ``position`` lies within ``margin`` of the far edge at ``extent``."""
    return position >= extent - margin


@dataclass
class ResizeDrag:
    """State of a resize gesture along one axis."""

    minimum: int
    maximum: int
    margin: int = EDGE_MARGIN
    resizing: bool = field(default=False, init=False)
    _start: float = field(default=0.0, init=False, repr=False)
    _initial: int = field(default=0, init=False, repr=False)

    def press(self, position: float, global_position: float, current_size: int) -> bool:
        """Begin resizing if the press is at the edge; return whether it began."""
        if not near_edge(position, current_size, self.margin):
            return False
        self.resizing = True
        self._start = global_position
        self._initial = current_size
        return True

    def move(self, global_position: float) -> int | None:
        """Return the new size while resizing, or None when not resizing."""
        if not self.resizing:
            return None
        return clamp_resize(
            self._initial, global_position - self._start, self.minimum, self.maximum
        )

    def release(self) -> bool:
        """End the gesture; return whether a resize was in progress."""
        was_resizing = self.resizing
        self.resizing = False
        return was_resizing