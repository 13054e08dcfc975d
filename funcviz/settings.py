"""Persisting the function list and last save folder between sessions."""

from __future__ import annotations

import json
import random
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from funcviz.styles import Color
from funcviz.workspace import FunctionLimitError, Workspace

_COLOR_PATTERN = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def default_save_path() -> str:
    """The folder plots go to when none has been remembered."""
    return str(Path.home() / "Documents" / "The Visualizer")


def _parse_color(text: Any) -> Color:
    if not isinstance(text, str):
        raise ValueError(f"invalid colour: {text!r}")
    match = _COLOR_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid colour: {text!r}")
    return Color(*(int(part, 16) for part in match.groups()))


def workspace_to_dict(workspace: Workspace, save_path: str | None = None) -> dict[str, Any]:
    """Describe the workspace's functions, and the save folder, as plain data."""
    return {
        "lastSavePath": save_path if save_path is not None else default_save_path(),
        "textEdits": [
            {
                "text": entry.text,
                "color": entry.color.name(),
                "visibility": entry.visible,
                "height": entry.height,
            }
            for entry in workspace.entries
        ],
    }


def workspace_from_dict(
    data: Mapping[str, Any], rng: random.Random | None = None
) -> tuple[Workspace, str]:
    """Rebuild a workspace and save folder; an empty list yields one blank function."""
    if not isinstance(data, Mapping):
        raise ValueError("settings must be a mapping")
    items = data.get("textEdits", [])
    if not isinstance(items, list):
        raise ValueError("textEdits must be a list")

    workspace = Workspace(rng=rng)
    if len(items) > workspace.max_functions:
        raise FunctionLimitError(workspace.max_functions)

    for position, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ValueError("each function must be a mapping")
        if "color" in item:
            workspace.palette[position] = _parse_color(item["color"])
        entry = workspace.add_function(str(item.get("text", "")))
        entry.visible = bool(item.get("visibility", False))
        if "height" in item:
            entry.height = int(item["height"])

    if not workspace.entries:
        workspace.add_function()

    save_path = data.get("lastSavePath") or default_save_path()
    return workspace, str(save_path)


def save_workspace(workspace: Workspace, path: str | Path, save_path: str | None = None) -> None:
    """Write the workspace settings to ``path`` as JSON."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(workspace_to_dict(workspace, save_path), handle, indent=2)


def load_workspace(
    path: str | Path, rng: random.Random | None = None
) -> tuple[Workspace, str]:
    """Read settings from ``path``; a missing file gives a fresh workspace."""
    source = Path(path)
    if not source.exists():
        return workspace_from_dict({}, rng)
    with source.open(encoding="utf-8") as handle:
        data = json.load(handle)
    return workspace_from_dict(data, rng)