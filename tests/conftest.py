"""Global pytest fixtures for casekit."""

from __future__ import annotations

from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]


@pytest.fixture
def modules_dir() -> Path:
    """The real modules directory shipped with the repository."""
    return ROOT_DIR / "modules"


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Write a ``module.yaml`` under ``tmp_path/<dirname>`` and return its directory."""

    def _write(dirname: str, content: str) -> Path:
        module_dir = tmp_path / dirname
        module_dir.mkdir(parents=True, exist_ok=True)
        (module_dir / "module.yaml").write_text(content, encoding="utf-8")
        return module_dir

    return _write
