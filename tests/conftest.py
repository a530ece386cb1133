"""Shared fixtures for kindlefy tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Keep rich output free of ANSI codes so it can be compared as text."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.delenv("KINDLEFY_LOG_LEVEL", raising=False)


@pytest.fixture
def make_tree(tmp_path: Path):
    """Write a {relative_path: content} mapping under tmp_path and return the root."""

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
