"""Global configuration defaults for the docs emoji stripper."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class StripperConfig:
    """Configuration for cleaning a directory of markdown documents."""

    source_dir: Path = Path("docs")
    extension: str = ".md"
    encoding: str = "utf-8"
    # Report counts without touching any file
    dry_run: bool = False
    # When set, the original content is saved to <name><suffix> before rewriting
    backup_suffix: Optional[str] = None
    # "abort" stops on the first unreadable/unwritable file, "skip" logs and continues
    on_error: str = "abort"
    source_dir_env_vars: tuple[str, ...] = ("DOCCLEAN_SOURCE_DIR",)


DEFAULT_CONFIG = StripperConfig()


def resolve_source_dir(
    explicit: Optional[Path] = None,
    config: Optional[StripperConfig] = None,
) -> Path:
    """Pick the documents directory: explicit value, then environment, then config default."""

    if explicit is not None:
        return Path(explicit)

    cfg = config or DEFAULT_CONFIG
    for var in cfg.source_dir_env_vars:
        value = os.environ.get(var, "").strip()
        if value:
            return Path(value)
    return cfg.source_dir
