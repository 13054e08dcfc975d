"""Parse expressions in x, sample them into curves, and render plots to image files."""

__version__ = "0.1.0"