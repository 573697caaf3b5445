"""Infrastructure adapter for reading uploaded export files into text."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_upload_text(path: str | Path) -> str:
    """Read an export file fully into memory; undecodable bytes are replaced."""
    upload_path = Path(path)
    if not upload_path.exists():
        raise FileNotFoundError(f"Upload file not found: {upload_path}")
    text = upload_path.read_bytes().decode("utf-8-sig", errors="replace")
    logger.info("read %s (%d chars)", upload_path.name, len(text))
    return text
