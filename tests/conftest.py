"""Shared pytest fixtures for khulnasoft-migrate tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import structlog


class FakeRunner:
    """Records commands instead of running them.

    ``outputs`` maps the joined command line to its stdout; ``failures`` maps
    it to an exception to raise.
    """

    def __init__(self, outputs: dict[str, str] | None = None, failures: dict | None = None):
        self.outputs = outputs or {}
        self.failures = failures or {}
        self.calls: list[tuple[list[str], Path]] = []

    async def __call__(self, cmd: list[str], cwd: Path) -> str:
        self.calls.append((cmd, cwd))
        key = " ".join(cmd)
        if key in self.failures:
            raise self.failures[key]
        return self.outputs.get(key, "")

    @property
    def commands(self) -> list[str]:
        return [" ".join(cmd) for cmd, _ in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_project(tmp_path: Path):
    """Create a package.json (and optional lockfile) under tmp_path."""

    def _make(
        dependencies: dict | None = None,
        dev_dependencies: dict | None = None,
        lockfile: str | None = None,
        extra: dict | None = None,
    ) -> Path:
        manifest: dict = {"name": "demo-app", "version": "1.0.0"}
        if dependencies is not None:
            manifest["dependencies"] = dependencies
        if dev_dependencies is not None:
            manifest["devDependencies"] = dev_dependencies
        if extra:
            manifest.update(extra)
        (tmp_path / "package.json").write_text(json.dumps(manifest, indent=2) + "\n")
        if lockfile:
            (tmp_path / lockfile).write_text("")
        return tmp_path

    return _make


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
