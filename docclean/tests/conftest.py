from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "a.md").write_text("Hello 🚀 World ✅!", encoding="utf-8")
    (docs / "b.md").write_text("# Plain\n\nJust ASCII text.\n", encoding="utf-8")
    (docs / "notes.txt").write_text("Keep ⭐ here", encoding="utf-8")
    return docs


@pytest.fixture(autouse=True)
def _clear_source_env(monkeypatch):
    monkeypatch.delenv("DOCCLEAN_SOURCE_DIR", raising=False)
