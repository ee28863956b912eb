"""
Launcher logging setup.

Logging is configured once, after config.yml is loaded, from its `logging`
section. A `--debug`/`--info`/... flag replaces the configured level. Every
record carries the twinslide version so bug reports can be matched to a
build.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from twinslide import __version__
from twinslide.common.config import LoggingConfig

logger = logging.getLogger(__name__)

__all__ = [
    "logging_configure",
    "versionTag_insert",
]


def logging_configure(logging_config: LoggingConfig, level_override: str | None = None) -> None:
    """
    Install root handlers for the launcher process.

    Records go to stderr and, when `logging.file` is set, to that file as
    well. A log file that cannot be opened is reported and skipped; the
    launcher keeps running with stderr only.

    Args:
        logging_config: The `logging` section of config.yml.
        level_override: Level chosen on the command line, None to use the
            configured level.
    """
    level_name: str = (level_override or logging_config.level).upper()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    file_error: OSError | None = None
    log_path: Path | None = None
    if logging_config.file:
        log_path = Path(logging_config.file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
        except OSError as e:
            file_error = e

    logging.basicConfig(
        level=getattr(logging, level_name),
        format=versionTag_insert(logging_config.format),
        handlers=handlers,
        force=True,
    )

    if file_error is not None:
        logger.warning(f"Cannot open log file {log_path}: {file_error}")


def versionTag_insert(log_format: str) -> str:
    """
    Add the version tag to a record format.

    The tag follows the timestamp when the format has one, otherwise it
    leads the line.

    Args:
        log_format: Base formatter string.

    Returns:
        Formatter string with the version tag.
    """
    tag = f"[twinslide v{__version__}]"
    if "%(asctime)s" in log_format:
        return log_format.replace("%(asctime)s", f"%(asctime)s {tag}", 1)
    return f"{tag} {log_format}"
