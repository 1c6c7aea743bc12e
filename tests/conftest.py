"""Shared pytest fixtures for deps-finder tests."""

import json

import pytest


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    monkeypatch.setenv("DEPS_FINDER_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("DEPS_FINDER_IGNORE", raising=False)


@pytest.fixture
def make_project(tmp_path):
    """Write a package.json plus source files under tmp_path.

    ``make_project(manifest, {"src/index.ts": "import x from 'x'"})``
    """

    def _make(manifest: dict, files: dict[str, str] | None = None):
        (tmp_path / "package.json").write_text(json.dumps(manifest))
        for rel, content in (files or {}).items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path

    return _make
