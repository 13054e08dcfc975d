import json
import random

import pytest

from funcviz.settings import (
    load_workspace,
    save_workspace,
    workspace_from_dict,
    workspace_to_dict,
)
from funcviz.styles import Color
from funcviz.workspace import FunctionLimitError, Workspace


def sample_workspace():
    ws = Workspace(rng=random.Random(7))
    ws.add_function("sin(x)")
    ws.add_function("x^2")
    ws.add_function("")
    ws.set_color(1, Color(10, 200, 30))
    ws.toggle_visibility(1)
    ws.entries[2].height = 90
    return ws


def summary(ws):
    return [(e.text, e.color, e.visible, e.height) for e in ws.entries]


def test_dict_round_trip():
    ws = sample_workspace()
    data = workspace_to_dict(ws, "/tmp/plots")
    restored, save_path = workspace_from_dict(data, random.Random(3))
    assert summary(restored) == summary(ws)
    assert save_path == "/tmp/plots"


def test_dict_uses_colour_names():
    ws = sample_workspace()
    data = workspace_to_dict(ws, "here")
    assert data["textEdits"][1]["color"] == Color(10, 200, 30).name()
    assert data["textEdits"][1]["visibility"] is False
    assert [item["text"] for item in data["textEdits"]] == ["sin(x)", "x^2", ""]


def test_file_round_trip(tmp_path):
    ws = sample_workspace()
    target = tmp_path / "conf" / "settings.json"
    save_workspace(ws, target, "saved-here")
    assert json.loads(target.read_text(encoding="utf-8"))["lastSavePath"] == "saved-here"
    restored, save_path = load_workspace(target, random.Random(1))
    assert summary(restored) == summary(ws)
    assert save_path == "saved-here"


def test_missing_file_gives_one_blank_function(tmp_path):
    ws, save_path = load_workspace(tmp_path / "absent.json", random.Random(2))
    assert [e.text for e in ws.entries] == [""]
    assert save_path.endswith("The Visualizer")


def test_empty_list_gives_one_blank_function():
    ws, _ = workspace_from_dict({"textEdits": []}, random.Random(2))
    assert len(ws) == 1
    assert ws.entries[0].visible is True


def test_too_many_functions_rejected():
    items = [{"text": "x", "color": "#000000", "visibility": True}] * 11
    with pytest.raises(FunctionLimitError):
        workspace_from_dict({"textEdits": items})


def test_bad_colour_rejected():
    with pytest.raises(ValueError):
        workspace_from_dict({"textEdits": [{"text": "x", "color": "blue"}]})


def test_bad_structure_rejected():
    with pytest.raises(ValueError):
        workspace_from_dict({"textEdits": "x"})
    with pytest.raises(ValueError):
        workspace_from_dict({"textEdits": [3]})


def test_stored_colour_is_used_by_entry():
    data = {"textEdits": [{"text": "x", "color": "#0a0b0c", "visibility": True}]}
    ws, _ = workspace_from_dict(data, random.Random(4))
    assert ws.entries[0].color == Color(10, 11, 12)
    assert ws.entries[0].visible is True