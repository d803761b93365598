"""Directory pass that removes emoji from every markdown document in place."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from docclean.config import DEFAULT_CONFIG, StripperConfig
from docclean.postprocessing.emoji_cleaner import strip_emoji
from docclean.services.document_service import (
    Document,
    DocumentError,
    RemovalReport,
    backup_document,
    list_documents,
    read_document,
    write_document,
)

LOGGER = logging.getLogger(__name__)

ERROR_POLICIES = ("abort", "skip")


@dataclass
class StripResult:
    """Collected reports for one run over a source directory."""

    source_dir: Path
    reports: List[RemovalReport] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def total_removed(self) -> int:
        return sum(report.removed for report in self.reports)

    @property
    def changed(self) -> int:
        return sum(1 for report in self.reports if report.removed)


def clean_document(document: Document, config: Optional[StripperConfig] = None) -> RemovalReport:
    """Strip one document and write it back unless nothing changed or this is a dry run."""

    cfg = config or DEFAULT_CONFIG
    cleaned = strip_emoji(document.content)
    # Code points, not encoded units: "🚀" counts as 1
    removed = len(document.content) - len(cleaned)

    written = False
    if removed and not cfg.dry_run:
        if cfg.backup_suffix:
            backup_document(document, cfg.backup_suffix, encoding=cfg.encoding)
        write_document(Document(path=document.path, content=cleaned), encoding=cfg.encoding)
        written = True

    return RemovalReport(filename=document.name, removed=removed, written=written)


def strip_directory(
    source_dir: Path,
    *,
    config: Optional[StripperConfig] = None,
    on_report: Optional[Callable[[RemovalReport], None]] = None,
) -> StripResult:
    """Remove emoji from every qualifying document directly inside ``source_dir``.

    Raises ``SourceDirectoryMissingError`` before touching anything when the
    directory is absent. With ``on_error="abort"`` the first unreadable or
    unwritable document stops the run; documents already rewritten stay
    rewritten. With ``on_error="skip"`` the document is logged and recorded in
    ``StripResult.skipped``.
    """

    cfg = config or DEFAULT_CONFIG
    if cfg.on_error not in ERROR_POLICIES:
        raise ValueError(f"Unsupported error policy: {cfg.on_error}")
    if cfg.backup_suffix and cfg.backup_suffix.endswith(cfg.extension):
        raise ValueError(
            f"Backup suffix {cfg.backup_suffix!r} ends with {cfg.extension!r}; backups would be cleaned on the next run"
        )

    source_dir = Path(source_dir)
    paths = list_documents(source_dir, cfg.extension)
    result = StripResult(source_dir=source_dir)

    for path in paths:
        try:
            report = clean_document(read_document(path, encoding=cfg.encoding), cfg)
        except DocumentError as exc:
            if cfg.on_error == "abort":
                raise
            LOGGER.warning("Skipping %s: %s", path.name, exc)
            result.skipped.append(path.name)
            continue

        LOGGER.debug("%s: removed %d characters", report.filename, report.removed)
        result.reports.append(report)
        if on_report is not None:
            on_report(report)

    LOGGER.info(
        "Removed %d characters from %d of %d documents in %s",
        result.total_removed,
        result.changed,
        len(result.reports),
        source_dir,
    )
    return result
