"""Tests for :mod:`ginit.ignore`."""

from __future__ import annotations

import os

from ginit.ignore import IgnoreFileGenerator


def _populate(root, names):
    for name in names:
        if name in ("node_modules", ".git", "venv"):
            (root / name).mkdir()
        else:
            (root / name).write_text("x")


def test_selection_is_written_verbatim(tmp_path, prompter_factory):
    _populate(tmp_path, ["node_modules", "README.md", ".git"])
    prompter = prompter_factory([["node_modules"]])

    path = IgnoreFileGenerator(prompter, tmp_path).generate()

    assert path.read_text() == "node_modules"
    assert prompter.checkbox_choices == ["README.md", "node_modules"]


def test_defaults_only_include_present_entries(tmp_path, prompter_factory):
    _populate(tmp_path, ["node_modules", "venv", "setup.py"])
    prompter = prompter_factory([None])

    path = IgnoreFileGenerator(prompter, tmp_path).generate()

    assert prompter.checkbox_default == ["node_modules", "venv"]
    assert path.read_text() == "node_modules\nvenv"


def test_existing_ignore_file_is_not_offered(tmp_path, prompter_factory):
    _populate(tmp_path, ["main.py", ".gitignore"])
    prompter = prompter_factory([["main.py"]])
    IgnoreFileGenerator(prompter, tmp_path).generate()
    assert prompter.checkbox_choices == ["main.py"]


def test_empty_listing_touches_without_prompt(tmp_path, prompter_factory):
    (tmp_path / ".git").mkdir()
    prompter = prompter_factory()

    path = IgnoreFileGenerator(prompter, tmp_path).generate()

    assert path.exists()
    assert path.read_text() == ""
    assert prompter.asked == []


def test_empty_selection_keeps_existing_content(tmp_path, prompter_factory):
    (tmp_path / ".gitignore").write_text("*.log")
    (tmp_path / "app.py").write_text("x")
    os.utime(tmp_path / ".gitignore", (0, 0))

    path = IgnoreFileGenerator(prompter_factory([[]]), tmp_path).generate()

    assert path.read_text() == "*.log"
    assert path.stat().st_mtime > 0
