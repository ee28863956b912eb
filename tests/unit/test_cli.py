"""Unit tests for command-line parsing."""

from __future__ import annotations

from argparse import Namespace

import pytest

from twinslide.cli import arguments_parse, logLevelOverride_get


class TestLogLevelOverride:
    """Tests for CLI log-level precedence."""

    def test_info_overrides_debug_when_both_set(self) -> None:
        """
        `--info` should suppress debug noise when both flags are present.

        Returns:
            None.
        """
        args = Namespace(
            debug=True,
            info=True,
            warning=False,
            error=False,
            critical=False,
        )
        assert logLevelOverride_get(args) == "INFO"

    def test_warning_overrides_info(self) -> None:
        """
        More restrictive levels should take precedence.

        Returns:
            None.
        """
        args = Namespace(
            debug=True,
            info=True,
            warning=True,
            error=False,
            critical=False,
        )
        assert logLevelOverride_get(args) == "WARNING"

    def test_no_flags_returns_none(self) -> None:
        """Without flags the config level applies."""
        args = Namespace(debug=False, info=False, warning=False, error=False, critical=False)
        assert logLevelOverride_get(args) is None


class TestArgumentsParse:
    """Tests for flag to CommandLineOptions mapping."""

    def test_no_arguments_gives_unset_values(self) -> None:
        """Absent flags stay None or False."""
        cli = arguments_parse([])
        assert cli.duration_minutes is None
        assert cli.end_time is None
        assert cli.last_minutes_alert is None
        assert cli.current_slide_size_pct is None
        assert cli.display_switch is False
        assert cli.run_now is False
        assert cli.document_path is None

    def test_long_flags(self) -> None:
        """Long flags fill the matching fields."""
        cli = arguments_parse(
            [
                "--duration", "30",
                "--last-minutes", "3",
                "--start-time", "09:15",
                "--current-size", "70",
                "--overview-min-size", "200",
                "--switch-screens",
                "--disable-cache",
                "--disable-compression",
                "--black-on-end",
                "--windowed",
                "--run-now",
                "talk.pdf",
            ]
        )
        assert cli.duration_minutes == 30
        assert cli.last_minutes_alert == 3
        assert cli.start_time == "09:15"
        assert cli.current_slide_size_pct == 70
        assert cli.min_overview_tile_width_px == 200
        assert cli.display_switch is True
        assert cli.disable_caching is True
        assert cli.disable_cache_compression is True
        assert cli.black_on_end is True
        assert cli.windowed is True
        assert cli.run_now is True
        assert cli.document_path == "talk.pdf"

    def test_short_flags(self) -> None:
        """Short flags, including the case-sensitive pairs."""
        cli = arguments_parse(["-e", "17:45", "-n", "-S", "-L", "-s"])
        assert cli.end_time == "17:45"
        assert cli.display_unswitch is True
        assert cli.single_screen is True
        assert cli.list_actions is True
        assert cli.display_switch is True

    def test_log_level_flag_is_carried(self) -> None:
        """Log-level flags end up in log_level."""
        cli = arguments_parse(["--debug", "--config", "extra.yml"])
        assert cli.log_level == "DEBUG"
        assert cli.config_path == "extra.yml"


class TestArgumentsParseErrors:
    """Malformed input exits with status 1 and usage on stderr."""

    @pytest.mark.parametrize(
        "argv",
        [
            ["--duration", "abc"],
            ["--duration", "-5"],
            ["--end-time", "25:00"],
            ["--end-time", "9:30"],
            ["--start-time", "12:60"],
            ["--overview-min-size", "0"],
            ["--last-minutes"],
            ["--no-such-flag"],
        ],
    )
    def test_invalid_input_exits_1(self, argv, capsys) -> None:
        """Each malformed command line is fatal."""
        with pytest.raises(SystemExit) as exc_info:
            arguments_parse(argv)
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "usage:" in err

    def test_error_message_names_problem(self, capsys) -> None:
        """The argparse message precedes the help text."""
        with pytest.raises(SystemExit):
            arguments_parse(["--end-time", "noon"])
        err = capsys.readouterr().err
        assert "HH:MM" in err
        assert err.index("HH:MM") < err.index("usage:")
