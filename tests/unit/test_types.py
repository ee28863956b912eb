"""Unit tests for common types (EffectiveOptions, MonitorAssignment, ActionCatalog)"""

import pytest
from twinslide.common.types import (
    DURATION_UNSET,
    ActionCatalog,
    EffectiveOptions,
    MonitorAssignment,
    TimerMode,
    WindowRole,
)


class TestEffectiveOptions:
    """Test EffectiveOptions dataclass"""

    def test_defaults(self):
        """Test compiled defaults"""
        options = EffectiveOptions()
        assert options.duration_minutes == DURATION_UNSET
        assert options.end_time is None
        assert options.last_minutes_alert == 5
        assert options.current_slide_size_pct == 60
        assert options.min_overview_tile_width_px == 150
        assert options.display_switch is False

    def test_immutable(self):
        """Test EffectiveOptions is immutable"""
        options = EffectiveOptions()
        with pytest.raises(AttributeError):
            options.duration_minutes = 10

    def test_duration_isSet(self):
        """Test sentinel detection"""
        assert EffectiveOptions().duration_isSet() is False
        assert EffectiveOptions(duration_minutes=0).duration_isSet() is True
        assert EffectiveOptions(duration_minutes=45).duration_isSet() is True

    @pytest.mark.parametrize(
        "options, mode",
        [
            (EffectiveOptions(), TimerMode.ELAPSED),
            (EffectiveOptions(duration_minutes=30), TimerMode.DURATION),
            (EffectiveOptions(end_time="17:30"), TimerMode.END_TIME),
            (EffectiveOptions(duration_minutes=30, end_time="17:30"), TimerMode.END_TIME),
        ],
    )
    def test_timerMode_get(self, options, mode):
        """Test end time masks any duration"""
        assert options.timerMode_get() is mode


class TestMonitorAssignment:
    """Test MonitorAssignment dataclass"""

    def test_roles_in_show_order(self):
        """Test presentation comes before presenter"""
        plan = MonitorAssignment(
            presenter_monitor=0,
            presentation_monitor=1,
            presenter_enabled=True,
            presentation_enabled=True,
        )
        assert plan.roles_get() == [WindowRole.PRESENTATION, WindowRole.PRESENTER]

    def test_disabled_roles_omitted(self):
        """Test disabled windows are not listed"""
        plan = MonitorAssignment(
            presenter_monitor=None,
            presentation_monitor=None,
            presenter_enabled=False,
            presentation_enabled=True,
        )
        assert plan.roles_get() == [WindowRole.PRESENTATION]


class TestActionCatalog:
    """Test ActionCatalog listing"""

    def test_short_names_get_two_tabs(self):
        """Test names under 8 characters are padded with an extra tab"""
        catalog = ActionCatalog(entries=(("next", "Go to next slide"),))
        assert catalog.lines_format() == ["\tnext\t\t=> Go to next slide"]

    def test_long_names_get_one_tab(self):
        """Test names of 8 or more characters use one tab"""
        catalog = ActionCatalog(entries=(("freezeOn", "Freeze"), ("resetTimer", "Reset the timer")))
        assert catalog.lines_format() == [
            "\tfreezeOn\t=> Freeze",
            "\tresetTimer\t=> Reset the timer",
        ]

    def test_entry_order_kept(self):
        """Test lines follow catalog order"""
        catalog = ActionCatalog(entries=(("prev", "Back"), ("next", "Forward")))
        assert [line.split("\t")[1] for line in catalog.lines_format()] == ["prev", "next"]

    def test_names_get(self):
        """Test action names"""
        catalog = ActionCatalog(entries=(("prev", "Back"), ("next", "Forward")))
        assert catalog.names_get() == {"prev", "next"}
