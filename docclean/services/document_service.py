"""Service for locating, reading and rewriting markdown documents on disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

LOGGER = logging.getLogger(__name__)


@dataclass
class Document:
    """A single markdown file and its text content."""

    path: Path
    content: str

    @property
    def name(self) -> str:
        return self.path.name


@dataclass
class RemovalReport:
    """Per-file outcome of a cleaning pass."""

    filename: str
    removed: int
    written: bool = False


class DocumentError(RuntimeError):
    """Base error for document access failures."""


class SourceDirectoryMissingError(DocumentError):
    """Raised when the documents directory does not exist."""

    def __init__(self, source_dir: Path) -> None:
        super().__init__(f"Source directory not found: {source_dir}")
        self.source_dir = source_dir


class DocumentReadError(DocumentError):
    """Raised when a document cannot be read as text."""


class DocumentWriteError(DocumentError):
    """Raised when a document cannot be written back."""


def ensure_source_dir(source_dir: Path) -> Path:
    if not source_dir.is_dir():
        raise SourceDirectoryMissingError(source_dir)
    return source_dir


def list_documents(source_dir: Path, extension: str = ".md") -> List[Path]:
    """Return the immediate child files of ``source_dir`` ending with ``extension``.

    Subdirectories are never entered. Results are sorted by name so runs are
    reproducible across filesystems.
    """

    ensure_source_dir(source_dir)
    paths = sorted(
        (path for path in source_dir.iterdir() if path.name.endswith(extension) and path.is_file()),
        key=lambda path: path.name,
    )
    LOGGER.debug("Found %d %s documents in %s", len(paths), extension, source_dir)
    return paths


def read_document(path: Path, encoding: str = "utf-8") -> Document:
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(f"Unable to read {path}: {exc}") from exc
    return Document(path=path, content=content)


def write_document(document: Document, encoding: str = "utf-8") -> None:
    # newline="" on both read and write keeps line endings byte-for-byte
    try:
        with document.path.open("w", encoding=encoding, newline="") as handle:
            handle.write(document.content)
    except (OSError, UnicodeEncodeError) as exc:
        raise DocumentWriteError(f"Unable to write {document.path}: {exc}") from exc


def backup_document(document: Document, suffix: str, encoding: str = "utf-8") -> Path:
    """Save ``document``'s current content next to it as ``<name><suffix>``."""

    backup_path = document.path.with_name(f"{document.name}{suffix}")
    write_document(Document(path=backup_path, content=document.content), encoding=encoding)
    LOGGER.debug("Backed up %s to %s", document.path, backup_path)
    return backup_path
