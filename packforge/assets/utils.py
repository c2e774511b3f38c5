"""Shared text helpers used by asset synthesis."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def normalize_text(content: str) -> str:
    """Trim surrounding whitespace and convert line endings to ``\\n``."""

    return content.strip().replace("\r\n", "\n").replace("\r", "\n")


def read_normalized_text(path: Path) -> str:
    """Read a template file, trimmed and with ``\\n`` line endings."""

    return normalize_text(path.read_text(encoding="utf-8"))


def write_text(path: Path, content: str, *, newline: Optional[str] = None) -> None:
    """Write text to file ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline=newline)
