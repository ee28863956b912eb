"""Per-document sidecar metadata scanning.

A document `talk.pdf` may have a companion `talk.pdfpc` in the same
directory. The only value read from it here is the presentation duration:

    [duration]
    25
"""

from __future__ import annotations

import logging
from pathlib import Path

from twinslide.common.settings import settings

logger = logging.getLogger(__name__)

__all__ = [
    "sidecarPath_get",
    "durationHint_read",
    "durationHint_parse",
]


def sidecarPath_get(document_path: str | Path) -> Path:
    """
    Derive the sidecar path for a document.

    Args:
        document_path: Path to the presentation document.

    Returns:
        Same directory and base name with the sidecar extension.
    """
    return Path(document_path).with_suffix(settings.SIDECAR_EXTENSION)


def durationHint_read(document_path: str | Path) -> int | None:
    """
    Read the duration hint from a document's sidecar file.

    Missing or unreadable sidecars are normal and only noted at info level.

    Args:
        document_path: Path to the presentation document.

    Returns:
        Duration in minutes, or None when there is no usable hint.
    """
    sidecar_path = sidecarPath_get(document_path)
    try:
        text = sidecar_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.info(f"No sidecar metadata at {sidecar_path}")
        return None

    hint = durationHint_parse(text.split("\n"))
    if hint is None:
        logger.debug(f"No duration hint in {sidecar_path}")
    else:
        logger.info(f"Duration hint from {sidecar_path}: {hint} minutes")
    return hint


def durationHint_parse(lines: list[str]) -> int | None:
    """
    Find the duration marker and parse the line after it.

    Args:
        lines: Sidecar file lines.

    Returns:
        Non-negative minutes, or None if the marker is absent or the next
        line is not an integer.
    """
    for index, line in enumerate(lines):
        if line.strip() != settings.SIDECAR_DURATION_MARKER:
            continue
        if index + 1 >= len(lines):
            return None
        value = lines[index + 1].strip()
        if not (value.isascii() and value.isdigit()):
            return None
        return int(value)
    return None
