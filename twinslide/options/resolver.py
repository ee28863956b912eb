"""
Option resolution engine.

Merges the configuration layers into one immutable EffectiveOptions value.
Precedence, lowest first:

1. compiled defaults (EffectiveOptions())
2. persisted store subset
3. command-line flags
4. sidecar duration hint (only if the command line set no duration or end time)
5. interactive chooser overrides

Each layer only overrides the fields it actually carries. A layer that sets
an end time resets the duration to DURATION_UNSET and a layer that sets a
duration clears the end time, so at most one of them is active.
"""

from __future__ import annotations

import argparse
import logging
import re
from dataclasses import replace
from typing import Any, Callable

from twinslide.common.errors import OptionValueError
from twinslide.common.runtime_models import CommandLineOptions, InteractiveOverrides
from twinslide.common.types import (
    DURATION_UNSET,
    ActionCatalog,
    EffectiveOptions,
    PersistedSubset,
)
from twinslide.options.sidecar import durationHint_read
from twinslide.options.store import StoreLoadResult

logger = logging.getLogger(__name__)

__all__ = [
    "cliDuration_isGiven",
    "clockTime_parse",
    "commandLineLayer_apply",
    "interactiveLayer_apply",
    "launchResolution_run",
    "nonNegativeInt_parse",
    "options_resolve",
    "persistedLayer_apply",
    "persistedSubset_extract",
    "positiveInt_parse",
    "sidecarLayer_apply",
]

_CLOCK_TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")


# =============================================================================
# Value validation (argparse `type=` callables)
# =============================================================================


def nonNegativeInt_parse(value: str) -> int:
    """
    Parse a non-negative integer command-line value.

    Args:
        value: Raw argument text.

    Returns:
        Parsed integer.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer >= 0.
    """
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got '{value}'")
    return int(text)


def positiveInt_parse(value: str) -> int:
    """
    Parse a strictly positive integer command-line value.

    Args:
        value: Raw argument text.

    Returns:
        Parsed integer.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer > 0.
    """
    number = nonNegativeInt_parse(value)
    if number == 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    return number


def clockTime_parse(value: str) -> str:
    """
    Validate a 24-hour HH:MM clock time.

    Args:
        value: Raw argument text.

    Returns:
        The validated time string.

    Raises:
        argparse.ArgumentTypeError: If the value is not HH:MM.
    """
    text = value.strip()
    if _CLOCK_TIME_PATTERN.match(text) is None:
        raise argparse.ArgumentTypeError(f"expected a time as HH:MM (24h), got '{value}'")
    return text


def _percent_clamp(value: int) -> int:
    """Clamp a percentage into [0, 100]."""
    return max(0, min(value, 100))


def _nonNegative_check(name: str, value: int | None) -> None:
    """Reject negative interactive values."""
    if value is not None and value < 0:
        raise OptionValueError(f"{name} must be >= 0, got {value}")


# =============================================================================
# Layers
# =============================================================================


def persistedLayer_apply(options: EffectiveOptions, subset: PersistedSubset) -> EffectiveOptions:
    """
    Apply the persisted store subset.

    Only keys the store actually contained override earlier values.

    Args:
        options: Options resolved so far.
        subset: Values read from the store.

    Returns:
        Updated options.
    """
    changes: dict[str, Any] = {}
    if subset.display_switch is not None:
        changes["display_switch"] = subset.display_switch
    if subset.last_minutes_alert is not None:
        changes["last_minutes_alert"] = subset.last_minutes_alert
    if subset.current_slide_size_pct is not None:
        changes["current_slide_size_pct"] = _percent_clamp(subset.current_slide_size_pct)
    return replace(options, **changes)


def cliDuration_isGiven(cli: CommandLineOptions) -> bool:
    """
    Check whether the command line supplied a real duration.

    A duration equal to DURATION_UNSET counts as not given.

    Args:
        cli: Parsed command line.

    Returns:
        True if a duration was given.
    """
    return cli.duration_minutes is not None and cli.duration_minutes != DURATION_UNSET


def commandLineLayer_apply(options: EffectiveOptions, cli: CommandLineOptions) -> EffectiveOptions:
    """
    Apply command-line flags.

    When both a duration and an end time are given the end time wins.
    `--no-switch-screens` is applied last and forces screens unswitched.

    Args:
        options: Options resolved so far.
        cli: Parsed command line.

    Returns:
        Updated options.
    """
    changes: dict[str, Any] = {}

    if cliDuration_isGiven(cli):
        changes["duration_minutes"] = cli.duration_minutes
        changes["end_time"] = None
    if cli.end_time is not None:
        changes["end_time"] = cli.end_time
        changes["duration_minutes"] = DURATION_UNSET
    if cli.last_minutes_alert is not None:
        changes["last_minutes_alert"] = cli.last_minutes_alert
    if cli.start_time is not None:
        changes["start_time"] = cli.start_time
    if cli.current_slide_size_pct is not None:
        changes["current_slide_size_pct"] = _percent_clamp(cli.current_slide_size_pct)
    if cli.min_overview_tile_width_px is not None:
        changes["min_overview_tile_width_px"] = cli.min_overview_tile_width_px

    # Boolean flags can only switch a behaviour on
    for name in (
        "display_switch",
        "display_unswitch",
        "disable_caching",
        "disable_cache_compression",
        "black_on_end",
        "single_screen",
        "windowed",
        "list_actions",
        "run_now",
    ):
        if getattr(cli, name):
            changes[name] = True

    resolved = replace(options, **changes)
    if resolved.display_unswitch:
        resolved = replace(resolved, display_switch=False)
    return resolved


def sidecarLayer_apply(
    options: EffectiveOptions, hint: int | None, cli: CommandLineOptions
) -> EffectiveOptions:
    """
    Apply the sidecar duration hint.

    Args:
        options: Options resolved so far.
        hint: Duration from the sidecar file, or None.
        cli: Parsed command line; an explicit duration or end time there
            suppresses the hint.

    Returns:
        Updated options.
    """
    if hint is None or hint == DURATION_UNSET:
        return options
    if cliDuration_isGiven(cli) or cli.end_time is not None:
        logger.debug("Command line timer settings take precedence over sidecar duration")
        return options
    return replace(options, duration_minutes=hint, end_time=None)


def interactiveLayer_apply(
    options: EffectiveOptions, overrides: InteractiveOverrides
) -> EffectiveOptions:
    """
    Apply values confirmed in the chooser.

    Args:
        options: Options resolved so far.
        overrides: Chooser values.

    Returns:
        Updated options.

    Raises:
        OptionValueError: If a numeric value is negative.
    """
    _nonNegative_check("duration_minutes", overrides.duration_minutes)
    _nonNegative_check("last_minutes_alert", overrides.last_minutes_alert)
    _nonNegative_check("current_slide_size_pct", overrides.current_slide_size_pct)

    changes: dict[str, Any] = {}
    if overrides.display_switch is not None:
        changes["display_switch"] = overrides.display_switch
    if overrides.black_on_end is not None:
        changes["black_on_end"] = overrides.black_on_end
    if overrides.duration_minutes is not None:
        changes["duration_minutes"] = overrides.duration_minutes
        if overrides.duration_minutes != DURATION_UNSET:
            changes["end_time"] = None
    if overrides.last_minutes_alert is not None:
        changes["last_minutes_alert"] = overrides.last_minutes_alert
    if overrides.current_slide_size_pct is not None:
        changes["current_slide_size_pct"] = _percent_clamp(overrides.current_slide_size_pct)
    return replace(options, **changes)


# =============================================================================
# Full resolution passes
# =============================================================================


def options_resolve(
    store_result: StoreLoadResult | None,
    cli: CommandLineOptions,
    sidecar_hint: int | None = None,
    overrides: InteractiveOverrides | None = None,
    defaults: EffectiveOptions | None = None,
) -> EffectiveOptions:
    """
    Run one full resolution pass.

    Args:
        store_result: Persisted store read result; a partial subset from a
            parse error is still applied.
        cli: Parsed command line.
        sidecar_hint: Duration hint for the chosen document.
        overrides: Chooser values confirmed at launch time.
        defaults: Base values, compiled defaults if None.

    Returns:
        Effective options for one launch.
    """
    options = defaults if defaults is not None else EffectiveOptions()
    if store_result is not None and store_result.subset is not None:
        options = persistedLayer_apply(options, store_result.subset)
    options = commandLineLayer_apply(options, cli)
    options = sidecarLayer_apply(options, sidecar_hint, cli)
    if overrides is not None:
        options = interactiveLayer_apply(options, overrides)
    return options


def launchResolution_run(
    store_result: StoreLoadResult | None,
    cli: CommandLineOptions,
    catalog_get: Callable[[], ActionCatalog],
    hint_read: Callable[[str], int | None] = durationHint_read,
) -> EffectiveOptions | ActionCatalog:
    """
    Resolve startup options, or return the action catalog in list mode.

    Args:
        store_result: Persisted store read result.
        cli: Parsed command line.
        catalog_get: Provider of the controller's action catalog.
        hint_read: Sidecar reader for the command-line document.

    Returns:
        The action catalog when `--list-actions` was given, else the
        effective options.
    """
    if cli.list_actions:
        return catalog_get()

    hint = hint_read(cli.document_path) if cli.document_path else None
    return options_resolve(store_result, cli, sidecar_hint=hint)


def persistedSubset_extract(options: EffectiveOptions) -> PersistedSubset:
    """
    Project effective options onto the persisted subset.

    Args:
        options: Effective options.

    Returns:
        Values to write to the store.
    """
    return PersistedSubset(
        display_switch=options.display_switch,
        last_minutes_alert=options.last_minutes_alert,
        current_slide_size_pct=options.current_slide_size_pct,
    )
