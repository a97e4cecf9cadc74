"""Tests for the main.py command line."""
from __future__ import annotations

import io
import json
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from main import main


@pytest.fixture
def tree_file(tmp_path: Path, canada_tree) -> Path:
    p = tmp_path / "canada.json"
    p.write_text(json.dumps(canada_tree), encoding="utf-8")
    return p


def test_main_help_lists_options() -> None:
    result = subprocess.run(
        [sys.executable, "main.py", "--help"],
        cwd=Path(__file__).resolve().parent.parent,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    for flag in ("--zoom", "--iframe", "--fragment", "--d3-script"):
        assert flag in result.stdout


def test_main_prints_page(tree_file: Path, capsys) -> None:
    assert main([str(tree_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<!DOCTYPE html>")
    assert '"Charlottetown"' in out


def test_main_passes_options(tree_file: Path) -> None:
    with patch("main.d3_tree") as mock_render:
        ret = main([str(tree_file), "--zoom", "--fragment", "--height", "300", "--link-colour", "red"])
    assert ret == 0
    kwargs = mock_render.call_args.kwargs
    assert kwargs["zoom"] is True
    assert kwargs["stand_alone"] is False
    assert kwargs["height"] == 300
    assert kwargs["link_colour"] == "red"
    assert kwargs["iframe"] is False
    assert kwargs["file"] is None


def test_main_iframe_writes_file(tree_file: Path, tmp_path: Path, capsys) -> None:
    target = tmp_path / "graph.html"
    assert main([str(tree_file), "--file", str(target), "--iframe"]) == 0
    assert target.is_file()
    assert capsys.readouterr().out.strip() == f"<iframe src='{target}' height=642 width=927></iframe>"


def test_main_conflict_returns_1(tree_file: Path, capsys) -> None:
    assert main([str(tree_file), "--iframe", "--fragment"]) == 1
    assert capsys.readouterr().out == ""


def test_main_bad_json_returns_1(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert main([str(bad)]) == 1


def test_main_missing_file_returns_1(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.json")]) == 1


def test_main_non_mapping_root_returns_1(tmp_path: Path) -> None:
    p = tmp_path / "list.json"
    p.write_text("[1, 2]", encoding="utf-8")
    assert main([str(p)]) == 1


def test_main_reads_stdin(monkeypatch, capsys, canada_tree) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(canada_tree)))
    assert main(["-"]) == 0
    assert '"Charlottetown"' in capsys.readouterr().out
