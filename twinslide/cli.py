"""twinslide command-line interface"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence

from twinslide import __version__
from twinslide.common.runtime_models import CommandLineOptions
from twinslide.options.resolver import clockTime_parse, nonNegativeInt_parse, positiveInt_parse

__all__ = [
    "arguments_parse",
    "commandLineOptions_build",
    "logLevelOverride_get",
    "main",
    "parser_create",
]


class UsageErrorParser(argparse.ArgumentParser):
    """Argument parser reporting errors with full usage and exit status 1"""

    def error(self, message: str) -> NoReturn:
        """
        Print the error and help text to stderr, then exit

        Args:
            message: Error description from argparse.
        """
        sys.stderr.write(f"\n{message}\n\n")
        self.print_help(sys.stderr)
        sys.exit(1)


def parser_create() -> argparse.ArgumentParser:
    """
    Create fully populated argument parser.

    Returns:
        Configured argument parser.
    """
    parser: argparse.ArgumentParser = UsageErrorParser(
        prog="twinslide",
        description="Dual-screen presentation launcher",
    )
    parser.add_argument("--version", action="version", version=f"twinslide {__version__}")
    timerArgs_populate(parser)
    layoutArgs_populate(parser)
    behaviourArgs_populate(parser)
    ambientArgs_populate(parser)
    parser.add_argument(
        "document",
        nargs="?",
        default=None,
        metavar="DOCUMENT",
        help="Presentation document to open",
    )
    return parser


def timerArgs_populate(parser: argparse.ArgumentParser) -> None:
    """
    Populate timer arguments.

    Args:
        parser: Target argument parser.
    """
    parser.add_argument(
        "-d",
        "--duration",
        type=nonNegativeInt_parse,
        default=None,
        metavar="N",
        help="Duration in minutes of the presentation used for timer display.",
    )
    parser.add_argument(
        "-e",
        "--end-time",
        type=clockTime_parse,
        default=None,
        dest="end_time",
        metavar="T",
        help="End time of the presentation. (Format: HH:MM (24h))",
    )
    parser.add_argument(
        "-l",
        "--last-minutes",
        type=nonNegativeInt_parse,
        default=None,
        dest="last_minutes",
        metavar="N",
        help="Time in minutes, from which on the timer changes its color. (Default 5 minutes)",
    )
    parser.add_argument(
        "-t",
        "--start-time",
        type=clockTime_parse,
        default=None,
        dest="start_time",
        metavar="T",
        help="Start time of the presentation to be used as a countdown. (Format: HH:MM (24h))",
    )


def layoutArgs_populate(parser: argparse.ArgumentParser) -> None:
    """
    Populate presenter layout and screen arguments.

    Args:
        parser: Target argument parser.
    """
    parser.add_argument(
        "-u",
        "--current-size",
        type=nonNegativeInt_parse,
        default=None,
        dest="current_size",
        metavar="N",
        help="Percentage of the presenter screen to be used for the current slide. (Default 60)",
    )
    parser.add_argument(
        "-o",
        "--overview-min-size",
        type=positiveInt_parse,
        default=None,
        dest="overview_min_size",
        metavar="N",
        help="Minimum width for the overview miniatures, in pixels. (Default 150)",
    )
    parser.add_argument(
        "-s",
        "--switch-screens",
        action="store_true",
        dest="switch_screens",
        help="Switch the presentation and the presenter screen.",
    )
    parser.add_argument(
        "-n",
        "--no-switch-screens",
        action="store_true",
        dest="no_switch_screens",
        help="Unswitch the presentation and the presenter screen. It disables a previous -s parameter.",
    )
    parser.add_argument(
        "-S",
        "--single-screen",
        action="store_true",
        dest="single_screen",
        help="Force to use only one screen",
    )
    parser.add_argument(
        "-w",
        "--windowed",
        action="store_true",
        help="Run in windowed mode (devel tool)",
    )


def behaviourArgs_populate(parser: argparse.ArgumentParser) -> None:
    """
    Populate cache, slide and run-mode arguments.

    Args:
        parser: Target argument parser.
    """
    parser.add_argument(
        "-c",
        "--disable-cache",
        action="store_true",
        dest="disable_cache",
        help="Disable caching and pre-rendering of slides to save memory at the cost of speed.",
    )
    parser.add_argument(
        "-z",
        "--disable-compression",
        action="store_true",
        dest="disable_compression",
        help="Disable the compression of slide images to trade memory consumption for speed. (Avg. factor 30)",
    )
    parser.add_argument(
        "-b",
        "--black-on-end",
        action="store_true",
        dest="black_on_end",
        help="Add an additional black slide at the end of the presentation",
    )
    parser.add_argument(
        "-L",
        "--list-actions",
        action="store_true",
        dest="list_actions",
        help="List actions supported in the config file(s)",
    )
    parser.add_argument(
        "-r",
        "--run-now",
        action="store_true",
        dest="run_now",
        help="Launch the presentation directly, without showing the user interface",
    )


def ambientArgs_populate(parser: argparse.ArgumentParser) -> None:
    """
    Populate config file and logging arguments.

    Args:
        parser: Target argument parser.
    """
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Extra config file merged over the standard locations",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging (overrides config)"
    )
    parser.add_argument(
        "--info", action="store_true", help="Enable info logging (overrides config)"
    )
    parser.add_argument(
        "--warning", action="store_true", help="Enable warning logging (overrides config)"
    )
    parser.add_argument(
        "--error", action="store_true", help="Enable error logging (overrides config)"
    )
    parser.add_argument(
        "--critical", action="store_true", help="Enable critical logging (overrides config)"
    )


def logLevelOverride_get(args: argparse.Namespace) -> str | None:
    """
    Resolve explicit log level override flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Most restrictive selected log level, or None.
    """
    if args.critical:
        return "CRITICAL"
    if args.error:
        return "ERROR"
    if args.warning:
        return "WARNING"
    if args.info:
        return "INFO"
    if args.debug:
        return "DEBUG"
    return None


def commandLineOptions_build(args: argparse.Namespace) -> CommandLineOptions:
    """
    Convert parsed arguments into typed command-line options.

    Args:
        args: Parsed CLI args.

    Returns:
        Command-line options.
    """
    return CommandLineOptions(
        duration_minutes=args.duration,
        end_time=args.end_time,
        last_minutes_alert=args.last_minutes,
        start_time=args.start_time,
        current_slide_size_pct=args.current_size,
        min_overview_tile_width_px=args.overview_min_size,
        display_switch=args.switch_screens,
        display_unswitch=args.no_switch_screens,
        disable_caching=args.disable_cache,
        disable_cache_compression=args.disable_compression,
        black_on_end=args.black_on_end,
        single_screen=args.single_screen,
        list_actions=args.list_actions,
        windowed=args.windowed,
        run_now=args.run_now,
        document_path=args.document,
        config_path=args.config,
        log_level=logLevelOverride_get(args),
    )


def arguments_parse(argv: Sequence[str] | None = None) -> CommandLineOptions:
    """
    Parse command line arguments.

    Malformed input prints the error and usage to stderr and exits with
    status 1.

    Args:
        argv: Arguments without program name, None for sys.argv.

    Returns:
        Command-line options.
    """
    parser = parser_create()
    return commandLineOptions_build(parser.parse_args(argv))


def main() -> NoReturn:
    """Main entry point for the twinslide command"""
    from twinslide.app import application_run

    try:
        sys.exit(application_run(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(0)


if __name__ == "__main__":
    main()
