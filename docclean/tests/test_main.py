from __future__ import annotations

from pathlib import Path

import pytest

from docclean import main as cli
from docclean.config import StripperConfig, resolve_source_dir


def test_main_cleans_directory(docs_dir: Path, capsys):
    assert cli.main([str(docs_dir)]) == 0

    out = capsys.readouterr().out
    assert "Processed: a.md (2 characters removed)" in out
    assert "Processed: b.md (0 characters removed)" in out
    assert "notes.txt" not in out
    assert f"Done: 2 characters removed from 1 of 2 files in {docs_dir}" in out
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "Hello  World !"


def test_main_missing_directory(tmp_path: Path, caplog):
    missing = tmp_path / "docs"
    assert cli.main([str(missing)]) == 1
    assert f"Source directory not found: {missing}" in caplog.text


def test_main_uses_env_directory(docs_dir: Path, monkeypatch, capsys):
    monkeypatch.setenv("DOCCLEAN_SOURCE_DIR", str(docs_dir))
    assert cli.main([]) == 0
    assert "Processed: a.md" in capsys.readouterr().out


def test_main_check_mode(docs_dir: Path, capsys):
    assert cli.main([str(docs_dir), "--check"]) == 1
    assert "[dry-run] Processed: a.md (2 characters removed)" in capsys.readouterr().out
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "Hello 🚀 World ✅!"

    cli.main([str(docs_dir)])
    assert cli.main([str(docs_dir), "--check"]) == 0


def test_main_abort_on_bad_file(docs_dir: Path, caplog):
    (docs_dir / "0-bad.md").write_bytes(b"\xff")
    assert cli.main([str(docs_dir)]) == 1
    assert "Aborted" in caplog.text


def test_main_skip_bad_file(docs_dir: Path, capsys):
    (docs_dir / "0-bad.md").write_bytes(b"\xff")
    assert cli.main([str(docs_dir), "--on-error", "skip"]) == 0
    assert "1 skipped: 0-bad.md" in capsys.readouterr().out


def test_resolve_source_dir_order(tmp_path: Path, monkeypatch):
    config = StripperConfig(source_dir=tmp_path / "default")
    assert resolve_source_dir(None, config) == tmp_path / "default"

    monkeypatch.setenv("DOCCLEAN_SOURCE_DIR", str(tmp_path / "env"))
    assert resolve_source_dir(None, config) == tmp_path / "env"
    assert resolve_source_dir(tmp_path / "cli", config) == tmp_path / "cli"


def test_main_dry_run(docs_dir: Path, capsys):
    assert cli.main([str(docs_dir), "--dry-run"]) == 0
    out = capsys.readouterr().out
    assert "[dry-run] Processed: a.md (2 characters removed)" in out
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "Hello 🚀 World ✅!"


def test_main_backup_suffix(docs_dir: Path):
    assert cli.main([str(docs_dir), "--backup-suffix", ".bak"]) == 0
    assert (docs_dir / "a.md.bak").read_text(encoding="utf-8") == "Hello 🚀 World ✅!"
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "Hello  World !"


def test_main_rejects_backup_suffix_matching_extension(docs_dir: Path, caplog):
    assert cli.main([str(docs_dir), "--backup-suffix", ".md"]) == 1
    assert "Backup suffix" in caplog.text
    assert not (docs_dir / "a.md.md").exists()
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "Hello 🚀 World ✅!"


def test_main_custom_extension(docs_dir: Path, capsys):
    assert cli.main([str(docs_dir), "--extension", ".txt"]) == 0
    out = capsys.readouterr().out
    assert "Processed: notes.txt (1 characters removed)" in out
    assert "a.md" not in out
    assert (docs_dir / "notes.txt").read_text(encoding="utf-8") == "Keep  here"
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "Hello 🚀 World ✅!"


def test_main_rejects_empty_extension(docs_dir: Path, capsys):
    with pytest.raises(SystemExit) as ei:
        cli.main([str(docs_dir), "--extension", ""])
    assert ei.value.code == 2
    assert "extension must not be empty" in capsys.readouterr().err
    assert (docs_dir / "notes.txt").read_text(encoding="utf-8") == "Keep ⭐ here"
