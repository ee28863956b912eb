"""Unit tests for monitor assignment"""

import pytest

from twinslide.common.types import EffectiveOptions, MonitorAssignment, MonitorLayout, WindowRole
from twinslide.session.monitors import (
    monitorAssignmentFromOptions_compute,
    monitorAssignment_compute,
)

TWO_MONITORS = MonitorLayout(count=2, primary_index=0)


class TestDualMonitor:
    """Two or more displays, full-screen mode"""

    def test_presenter_on_primary(self):
        """Unswitched: presenter 0, presentation 1"""
        plan = monitorAssignment_compute(False, False, False, TWO_MONITORS)
        assert plan == MonitorAssignment(
            presenter_monitor=0,
            presentation_monitor=1,
            presenter_enabled=True,
            presentation_enabled=True,
        )

    def test_switched(self):
        """Switched: presenter 1, presentation 0"""
        plan = monitorAssignment_compute(True, False, False, TWO_MONITORS)
        assert plan.presenter_monitor == 1
        assert plan.presentation_monitor == 0

    def test_primary_second_monitor(self):
        """A primary of 1 puts the presenter there"""
        plan = monitorAssignment_compute(False, False, False, MonitorLayout(count=2, primary_index=1))
        assert plan.presenter_monitor == 1
        assert plan.presentation_monitor == 0

    @pytest.mark.parametrize("switch", [False, True])
    def test_extra_monitors_ignored(self, switch):
        """Only monitors 0 and 1 are ever used"""
        plan = monitorAssignment_compute(switch, False, False, MonitorLayout(count=3, primary_index=0))
        assert {plan.presenter_monitor, plan.presentation_monitor} == {0, 1}


class TestSingleWindow:
    """Single screen forced, or only one display"""

    def test_single_screen_forced(self):
        """Exactly one window, unconstrained"""
        plan = monitorAssignment_compute(False, True, False, TWO_MONITORS)
        assert plan.roles_get() == [WindowRole.PRESENTER]
        assert plan.presenter_monitor is None

    def test_single_screen_switched_shows_presentation(self):
        """Switching picks the presentation window instead"""
        plan = monitorAssignment_compute(True, True, False, TWO_MONITORS)
        assert plan.roles_get() == [WindowRole.PRESENTATION]
        assert plan.presentation_monitor is None

    @pytest.mark.parametrize("count", [0, 1])
    def test_one_or_no_display(self, count):
        """Fewer than two displays gives one window"""
        plan = monitorAssignment_compute(False, False, False, MonitorLayout(count=count))
        assert plan.roles_get() == [WindowRole.PRESENTER]

    def test_windowed_single_screen(self):
        """single_screen beats windowed"""
        plan = monitorAssignment_compute(False, True, True, TWO_MONITORS)
        assert plan.roles_get() == [WindowRole.PRESENTER]


class TestWindowed:
    """Windowed development mode"""

    @pytest.mark.parametrize("count", [1, 2])
    def test_both_windows_unconstrained(self, count):
        """Both windows, neither bound to a monitor"""
        plan = monitorAssignment_compute(False, False, True, MonitorLayout(count=count))
        assert plan.roles_get() == [WindowRole.PRESENTATION, WindowRole.PRESENTER]
        assert plan.presenter_monitor is None
        assert plan.presentation_monitor is None


class TestFromOptions:
    """Wrapper over EffectiveOptions"""

    def test_uses_option_flags(self):
        options = EffectiveOptions(display_switch=True)
        plan = monitorAssignmentFromOptions_compute(options, TWO_MONITORS)
        assert plan.presenter_monitor == 1
