from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parents[1]


def test_package_find_covers_namespace_ui():
    # src/ui ships without __init__.py, so it is found only as a namespace package
    assert not (ROOT / "src" / "ui" / "__init__.py").exists()
    cfg = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    find = cfg["tool"]["setuptools"]["packages"]["find"]
    assert find["namespaces"] is True
    assert "ui*" in find["include"]
