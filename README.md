# funcviz

funcviz plots functions of `x` that you type as ordinary expressions,
such as `2x^2 - 3`, `sin(x)/x` or `tg(x)`. Each curve is split wherever it
jumps, so asymptotes are not joined by a stray vertical line. Local minima
and maxima are marked when the visible x range is narrower than 1000.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Expressions

The expression language is small:

* numbers such as `3` or `2.5`, the variable `x`, and the constants `pi` and `e`
* `+`, `-`, `*`, `/` and `^` (power, right-associative), with unary `+` and `-`
  (a leading minus applies after the power, so `-x^2` is `-(x^2)`)
* parentheses
* the functions `sin`, `cos`, `tan`/`tg`, `ctg`/`ctan`, `log`/`ln`
  (natural log), `lg` (base 10), `sqrt` and `abs`; a function's argument
  must be in parentheses
* implicit multiplication, written without a space: `2x`, `x2`, `3(x+1)`,
  `(x+1)(x-1)`, `2sin(x)`, `xcos(x)`. It applies after a digit, `x` or `)`
  when followed by a digit, `x`, `(` or one of `sin`, `cos`, `tan`, `tg`,
  `ln`, `lg`, `log`; use `*` in every other case (for example `2*sqrt(x)`
  or `x * sin(x)`).

Division by a value that is exactly zero, unbalanced parentheses, a missing
`(` after a function name, unknown names and leftover characters raise
`funcviz.parser.ParseError` (a `ValueError`). Values outside a function's
domain, such as `sqrt(-1)` or `ln(-1)`, give `nan` rather than an error.

## Using the library

```python
from funcviz.parser import ParseError, SimpleParser, evaluate
from funcviz.graph import find_extremums

evaluate("2x^2 - 3", 2.0)          # 5.0

parser = SimpleParser("sin(x)/x")
values = [parser.evaluate(x) for x in (0.5, 1.0, 1.5)]

try:
    evaluate("1/(x-1)", 1.0)
except ParseError as error:
    print(error)                    # Division by zero

find_extremums([0, 1, 2], [0, 1, 0])  # [(1, 1)]
```

`funcviz.graph` turns expressions into drawable data. `Viewport` holds the
visible x and y ranges (default -20 to 20 on both axes). `sample_segments`
samples a parser across the viewport with a given step and splits the
result into `Curve` segments wherever neighbouring values differ by at least
the threshold. `plot_function` checks and samples one expression into a
`FunctionPlot` with its curves, extremum points and any parse error, and
`build_graph` does the same for a list of expressions with their visibility
flags.

`funcviz.workspace.Workspace` keeps an ordered list of up to ten
`FunctionEntry` rows, each with its text, colour, visibility and box height.
It can add (raising `FunctionLimitError` when full), remove, reorder,
recolour and hide them, and `build()` samples them all over its viewport.

`funcviz.navigation` changes a workspace's view: `zoom` applies one wheel
step of 1.05 (both axes about the mouse, only x with `ZoomModifier.CONTROL`,
only y with `ZoomModifier.ALT`), scaling the sampling step and threshold
along with it, and `reset_view` restores the default view. `ReorderDrag`
tracks dragging a row up or down and applies the new order on `finish()`.

`funcviz.settings` converts a workspace to and from plain data
(`workspace_to_dict`, `workspace_from_dict`) and stores it as JSON
(`save_workspace`, `load_workspace`; a missing file gives a fresh workspace
with one blank function).

`funcviz.styles` has the `Color` type (with `name()` and `from_hsv`),
random pastel palettes from `generate_pastel_colors`, the style-sheet
strings `scrollbar_style` and `focus_style`, and `recolor_svg`.
`funcviz.resizing` has the edge-drag resize logic: `clamp_resize`,
`near_edge` and `ResizeDrag`.

## Command line

The `funcviz` command renders functions to an image file:

```
funcviz "sin(x)" "x^2/10" -o plot.png
funcviz "tg(x)" --x-range -5 5 --y-range -3 3 -o plot.pdf
funcviz --settings session.json
```

Options:

* `expressions` — zero or more expressions; when given they replace the
  functions loaded from settings
* `-o`, `--output` — the image file; `.png`, `.jpg`, `.jpeg` and `.pdf` are
  kept, any other name gets `.png` appended. Without it the image goes to
  the remembered save folder (by default `~/Documents/The Visualizer`) as
  `plot_YYYYMMDD_HHMMSS.png`
* `--settings FILE` — a JSON file to read functions from and, after a
  successful save, to write the functions and save folder back to
* `--x-range LOW HIGH`, `--y-range LOW HIGH` — the visible ranges; the
  sampling step and jump threshold scale with the x range

Expressions that fail to parse are reported on standard error and left out
of the picture. The command exits with status 1 when there are more than ten
functions, when the settings cannot be read, or when the image cannot be
saved.

## What it does not do

funcviz has no interactive window. Functions are not edited, dragged,
zoomed or panned on screen; the navigation and resizing modules provide the
logic for such interaction, but the only way to see a plot is the image file
the `funcviz` command writes. There is no help viewer and no save dialog.