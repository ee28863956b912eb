"""Common types and data structures for twinslide"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DURATION_UNSET: int = 987654321
"""Reserved duration value meaning "no fixed duration".

A command-line duration equal to this value is indistinguishable from an
unset duration and is treated as unset.
"""


class WindowRole(Enum):
    """Logical window roles of a presentation session"""
    PRESENTER = "presenter"
    PRESENTATION = "presentation"


class TimerMode(Enum):
    """What drives the presenter timer"""
    DURATION = "duration"  # Count down a fixed number of minutes
    END_TIME = "end_time"  # Count down to a wall-clock time
    ELAPSED = "elapsed"    # No target, count up


class SessionState(Enum):
    """Launch session lifecycle states"""
    IDLE = "idle"
    LAUNCHING = "launching"
    ACTIVE = "active"
    CLOSING = "closing"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class EffectiveOptions:
    """Fully resolved configuration for one launch"""
    duration_minutes: int = DURATION_UNSET
    end_time: Optional[str] = None
    last_minutes_alert: int = 5
    start_time: Optional[str] = None
    current_slide_size_pct: int = 60
    min_overview_tile_width_px: int = 150
    display_switch: bool = False
    display_unswitch: bool = False
    disable_caching: bool = False
    disable_cache_compression: bool = False
    black_on_end: bool = False
    single_screen: bool = False
    windowed: bool = False
    list_actions: bool = False
    run_now: bool = False

    def duration_isSet(self) -> bool:
        """Check if a fixed duration drives the timer"""
        return self.duration_minutes != DURATION_UNSET

    def timerMode_get(self) -> TimerMode:
        """Select the timer mode; an end time masks any duration"""
        if self.end_time is not None:
            return TimerMode.END_TIME
        if self.duration_isSet():
            return TimerMode.DURATION
        return TimerMode.ELAPSED


@dataclass(frozen=True)
class PersistedSubset:
    """Options remembered across runs

    A field of None was not present in the store and leaves the resolved
    value untouched.
    """
    display_switch: Optional[bool] = None
    last_minutes_alert: Optional[int] = None
    current_slide_size_pct: Optional[int] = None


@dataclass(frozen=True)
class MonitorLayout:
    """Physical display facts reported by the platform"""
    count: int
    primary_index: int = 0


@dataclass(frozen=True)
class MonitorAssignment:
    """Mapping of window roles onto physical displays

    A monitor of None means the window is not tied to a physical output and
    placement is left to the window manager.
    """
    presenter_monitor: Optional[int]
    presentation_monitor: Optional[int]
    presenter_enabled: bool
    presentation_enabled: bool

    def roles_get(self) -> list[WindowRole]:
        """Window roles to create, in show order"""
        roles: list[WindowRole] = []
        if self.presentation_enabled:
            roles.append(WindowRole.PRESENTATION)
        if self.presenter_enabled:
            roles.append(WindowRole.PRESENTER)
        return roles


@dataclass(frozen=True)
class ActionCatalog:
    """Interactive actions recognised in key binding configuration"""
    entries: tuple[tuple[str, str], ...]

    def lines_format(self) -> list[str]:
        """Format catalog entries as aligned listing lines"""
        lines: list[str] = []
        for name, description in self.entries:
            tab_alignment = "\t" if len(name) >= 8 else "\t\t"
            lines.append(f"\t{name}{tab_alignment}=> {description}")
        return lines

    def names_get(self) -> set[str]:
        """Get the set of recognised action names"""
        return {name for name, _ in self.entries}
