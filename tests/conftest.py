"""
Shared test fixtures and configuration.
"""

import json
import logging
from pathlib import Path

import pytest


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    d = tmp_path / "project"
    d.mkdir()
    return d


@pytest.fixture
def write_config(project_dir: Path):
    """Write ``.ai-switch.json`` into ``project_dir``.

    Dicts/lists are JSON-encoded; strings are written as-is.
    """

    def _write(content) -> Path:
        path = project_dir / ".ai-switch.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_root_logging():
    """Drop handlers installed by setup_logging during a test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)
