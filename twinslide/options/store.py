"""
Persisted option store.

Reads and writes the small line-oriented file remembering the options a
user last launched with:

    # comment
    switch_screens 1
    last_minutes 5
    current_size 60

A legacy `duration` line is accepted and ignored. Loading never raises:
outcomes are reported through StoreLoadResult so callers can fall back to
defaults. Saving is best effort.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from twinslide.common.settings import settings
from twinslide.common.types import PersistedSubset

logger = logging.getLogger(__name__)

__all__ = [
    "LoadStatus",
    "PersistedStore",
    "StoreLoadResult",
    "storePathDefault_get",
]

_KEY_SWITCH_SCREENS: str = "switch_screens"
_KEY_LAST_MINUTES: str = "last_minutes"
_KEY_CURRENT_SIZE: str = "current_size"
_KEY_LEGACY_DURATION: str = "duration"


class LoadStatus(Enum):
    """Outcome of reading the persisted store"""
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    READ_ERROR = "read_error"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class StoreLoadResult:
    """Result of PersistedStore.subset_load().

    `subset` holds whatever was parsed before a parse error; it is None when
    the file was missing or unreadable. `line` is the 1-based line number of
    a parse error.
    """

    status: LoadStatus
    path: Path
    subset: PersistedSubset | None = None
    line: int | None = None

    def describe(self) -> str:
        """Human readable one-line summary for logging."""
        if self.status is LoadStatus.PARSE_ERROR:
            return f"Invalid parameter in config file {self.path} (line {self.line})"
        if self.status is LoadStatus.READ_ERROR:
            return f"Cannot read config file {self.path}"
        if self.status is LoadStatus.NOT_FOUND:
            return f"No config file at {self.path}, using defaults"
        return f"Loaded config file {self.path}"


def storePathDefault_get() -> Path:
    """
    Resolve the per-user store path.

    Returns:
        `$XDG_CONFIG_HOME/twinslide/twinslide.cfg`, or the same under
        `~/.config` when XDG_CONFIG_HOME is unset.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    root = Path(xdg) if xdg else Path.home() / ".config"
    return root / settings.STORE_DIR_NAME / settings.STORE_FILE_NAME


class PersistedStore:
    """Reads and writes the persisted option subset"""

    def __init__(self, path: Path | None = None) -> None:
        """
        Initialize store

        Args:
            path: Store file path, None for the per-user default
        """
        self._path: Path = path if path is not None else storePathDefault_get()

    @property
    def path(self) -> Path:
        """Get store file path"""
        return self._path

    def subset_load(self) -> StoreLoadResult:
        """
        Read the store file.

        Returns:
            Load result; never raises for I/O or format problems.
        """
        if not self._path.exists():
            return StoreLoadResult(status=LoadStatus.NOT_FOUND, path=self._path)

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Store read failed: {e}")
            return StoreLoadResult(status=LoadStatus.READ_ERROR, path=self._path)

        return self.text_parse(text)

    def text_parse(self, text: str) -> StoreLoadResult:
        """
        Parse store file contents.

        Parsing stops at the first unrecognised line; values read up to that
        point are kept. Keys absent from the text stay None.

        Args:
            text: File contents.

        Returns:
            LOADED or PARSE_ERROR result.
        """
        subset = PersistedSubset()

        # Only newline ends a line; form feeds and other separators stay inside it
        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            key, _, value = line.partition(" ")
            value = value.strip()
            if not value:
                return self._parseError_build(subset, line_number)

            if key == _KEY_SWITCH_SCREENS:
                subset = replace(subset, display_switch=(value == "1"))
            elif key == _KEY_LEGACY_DURATION:
                continue
            elif key in (_KEY_LAST_MINUTES, _KEY_CURRENT_SIZE):
                number = _nonNegativeInt_parse(value)
                if number is None:
                    return self._parseError_build(subset, line_number)
                if key == _KEY_LAST_MINUTES:
                    subset = replace(subset, last_minutes_alert=number)
                else:
                    subset = replace(subset, current_slide_size_pct=min(number, 100))
            else:
                return self._parseError_build(subset, line_number)

        return StoreLoadResult(status=LoadStatus.LOADED, path=self._path, subset=subset)

    def _parseError_build(self, subset: PersistedSubset, line_number: int) -> StoreLoadResult:
        """Build a parse error result keeping the partial subset."""
        return StoreLoadResult(
            status=LoadStatus.PARSE_ERROR,
            path=self._path,
            subset=subset,
            line=line_number,
        )

    def subset_save(self, subset: PersistedSubset) -> bool:
        """
        Overwrite the store file with the given subset.

        The file is written to a temporary sibling and moved into place, so a
        failed write never leaves a truncated store behind. Fields that are
        None are not written.

        Args:
            subset: Values to persist.

        Returns:
            True on success, False if the file could not be written.
        """
        lines: list[str] = []
        if subset.display_switch is not None:
            lines.append(f"{_KEY_SWITCH_SCREENS} {1 if subset.display_switch else 0}\n")
        if subset.last_minutes_alert is not None:
            lines.append(f"{_KEY_LAST_MINUTES} {subset.last_minutes_alert:d}\n")
        if subset.current_slide_size_pct is not None:
            lines.append(f"{_KEY_CURRENT_SIZE} {subset.current_slide_size_pct:d}\n")

        directory = self._path.parent
        try:
            directory.mkdir(mode=settings.STORE_DIR_MODE, parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=".twinslide-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write("".join(lines))
                # mkstemp creates 0600; the store is a plain user config file
                os.chmod(tmp_name, settings.STORE_FILE_MODE)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.warning(f"Could not save options to {self._path}: {e}")
            return False

        logger.debug(f"Saved options to {self._path}")
        return True


def _nonNegativeInt_parse(value: str) -> int | None:
    """Parse a non-negative decimal integer, None if malformed."""
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)
