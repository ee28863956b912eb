"""Typed runtime models for command-line and chooser input."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandLineOptions:
    """Parsed command line; None means the flag was not given."""

    duration_minutes: int | None = None
    end_time: str | None = None
    last_minutes_alert: int | None = None
    start_time: str | None = None
    current_slide_size_pct: int | None = None
    min_overview_tile_width_px: int | None = None
    display_switch: bool = False
    display_unswitch: bool = False
    disable_caching: bool = False
    disable_cache_compression: bool = False
    black_on_end: bool = False
    single_screen: bool = False
    list_actions: bool = False
    windowed: bool = False
    run_now: bool = False
    document_path: str | None = None
    config_path: str | None = None
    log_level: str | None = None


@dataclass(frozen=True)
class InteractiveOverrides:
    """Values confirmed in the chooser; None means unchanged."""

    document_path: str | None = None
    display_switch: bool | None = None
    black_on_end: bool | None = None
    duration_minutes: int | None = None
    last_minutes_alert: int | None = None
    current_slide_size_pct: int | None = None
