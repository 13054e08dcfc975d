from datetime import datetime
from pathlib import Path

import pytest

from funcviz.cli import default_plot_name, main, render_plot, resolve_output_path
from funcviz.settings import load_workspace, save_workspace
from funcviz.workspace import Workspace

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize("name", ["plot.png", "plot.jpg", "plot.jpeg", "plot.pdf", "plot.PDF"])
def test_resolve_keeps_supported_suffix(name):
    assert resolve_output_path(name) == Path(name)


@pytest.mark.parametrize("name", ["plot", "plot.txt", "plot.svg"])
def test_resolve_appends_png(name):
    assert resolve_output_path(name) == Path(name + ".png")


def test_default_plot_name_format():
    assert default_plot_name(datetime(2024, 1, 2, 3, 4, 5)) == "plot_20240102_030405"


def test_render_png(tmp_path):
    workspace = Workspace()
    workspace.add_function("sin(x)")
    written = render_plot(workspace, tmp_path / "out.png")
    assert written == tmp_path / "out.png"
    assert written.read_bytes().startswith(PNG_SIGNATURE)


def test_render_pdf(tmp_path):
    workspace = Workspace()
    workspace.add_function("x^2")
    written = render_plot(workspace, tmp_path / "out.pdf")
    assert written.read_bytes().startswith(b"%PDF")


def test_render_unknown_suffix_becomes_png(tmp_path):
    workspace = Workspace()
    workspace.add_function("1/x")
    written = render_plot(workspace, tmp_path / "out.txt")
    assert written.name == "out.txt.png"
    assert written.read_bytes().startswith(PNG_SIGNATURE)


def test_render_with_invalid_expression(tmp_path):
    workspace = Workspace()
    workspace.add_function("sin(")
    written = render_plot(workspace, tmp_path / "sub" / "bad.png")
    assert written.read_bytes().startswith(PNG_SIGNATURE)


def test_main_writes_output(tmp_path, capsys):
    out = tmp_path / "graph.png"
    assert main(["x^2", "sin(x)", "-o", str(out)]) == 0
    assert out.read_bytes().startswith(PNG_SIGNATURE)
    assert str(out) in capsys.readouterr().out


def test_main_reports_parse_error(tmp_path, capsys):
    assert main(["x+", "-o", str(tmp_path / "e.png")]) == 0
    assert "Unexpected character" in capsys.readouterr().err


def test_main_rejects_too_many_functions(tmp_path, capsys):
    assert main(["x"] * 11 + ["-o", str(tmp_path / "many.png")]) == 1
    assert "You cannot add more than 10 functions" in capsys.readouterr().err
    assert not (tmp_path / "many.png").exists()


def test_main_rejects_reversed_range(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["x", "--x-range", "5", "1", "-o", str(tmp_path / "r.png")])
    assert info.value.code == 2


def test_main_updates_settings(tmp_path):
    settings = tmp_path / "settings.json"
    workspace = Workspace()
    workspace.add_function("cos(x)")
    save_workspace(workspace, settings, str(tmp_path))

    out_dir = tmp_path / "images"
    assert main(["--settings", str(settings), "-o", str(out_dir / "c.png")]) == 0
    loaded, save_path = load_workspace(settings)
    assert [entry.text for entry in loaded.entries] == ["cos(x)"]
    assert Path(save_path) == out_dir.resolve()


def test_main_default_output_in_save_folder(tmp_path):
    settings = tmp_path / "settings.json"
    workspace = Workspace()
    workspace.add_function("x")
    save_workspace(workspace, settings, str(tmp_path / "saved"))

    assert main(["--settings", str(settings), "--x-range", "-2", "2"]) == 0
    images = list((tmp_path / "saved").glob("plot_*.png"))
    assert len(images) == 1
    assert images[0].read_bytes().startswith(PNG_SIGNATURE)