"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path_factory, monkeypatch):
    """Never read the developer's real ~/.mdparse/config.yml."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr("mdparse.config.USER_CONFIG_PATH", home / "config.yml")
    return home / "config.yml"


@pytest.fixture
def md_file(tmp_path):
    """Helper that writes markdown to a temp file and returns its Path."""

    def _write(content: str, name: str = "doc.md") -> Path:
        fp = tmp_path / name
        fp.parent.mkdir(parents=True, exist_ok=True)
        fp.write_text(content, encoding="utf-8")
        return fp

    return _write
