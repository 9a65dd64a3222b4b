"""Root test configuration: session-level cleanup of runtime artifacts"""

import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = ["dist"]


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove default output directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Keep developer MDFORGE_* env vars from leaking into tests."""
    for name in ("OUTPUT_DIR", "OUTPUT_FORMAT", "CLEAN_MARKDOWN", "FLUSH_UNTERMINATED", "LOG_LEVEL"):
        monkeypatch.delenv(f"MDFORGE_{name}", raising=False)
