import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]

src_dir = repo_root / "src"
# Project uses a "src/" layout with top-level modules (core, settings,
# inventory, ...); make that directory importable for the tests.
if src_dir.exists() and str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    # Never touch the real per-user settings file from tests
    monkeypatch.setenv("COMBO_FINDER_HOME", str(tmp_path / "settings"))
    yield
