"""Unit tests for X11 monitor discovery with a fake display"""

from types import SimpleNamespace

import pytest

from twinslide.common.types import MonitorLayout
from twinslide.x11.display import DisplayManager


class _FakeRoot:
    def __init__(self, monitors):
        self._monitors = monitors
        self.queries = []

    def xrandr_get_monitors(self, is_active=False):
        self.queries.append(is_active)
        return SimpleNamespace(monitors=self._monitors)


class _FakeDisplay:
    """Minimal stand-in for Xlib.display.Display"""

    def __init__(self, monitors=(), randr=True, version=(1, 5)):
        self.root = _FakeRoot(list(monitors))
        self._randr = randr
        self._version = version
        self.closed = False

    def has_extension(self, name):
        return self._randr and name == "RANDR"

    def xrandr_query_version(self):
        return SimpleNamespace(major_version=self._version[0], minor_version=self._version[1])

    def screen(self):
        return SimpleNamespace(root=self.root)

    def close(self):
        self.closed = True


def _manager(display: _FakeDisplay) -> DisplayManager:
    manager = DisplayManager()
    manager._display = display
    return manager


def _monitor(primary=False):
    return SimpleNamespace(primary=primary)


class TestDisplayManager:
    """Test connection handling"""

    def test_display_get_requires_connection(self):
        """Test display_get before connect"""
        with pytest.raises(RuntimeError):
            DisplayManager().display_get()

    def test_close_releases_display(self):
        """Test connection_close closes and forgets the display"""
        display = _FakeDisplay()
        manager = _manager(display)
        manager.connection_close()
        assert display.closed is True
        with pytest.raises(RuntimeError):
            manager.display_get()


class TestMonitorLayout:
    """Test RandR monitor queries"""

    def test_two_monitors_primary_second(self):
        """Test count and primary index"""
        display = _FakeDisplay(monitors=[_monitor(), _monitor(primary=True)])
        assert _manager(display).monitorLayout_get() == MonitorLayout(count=2, primary_index=1)
        assert display.root.queries == [True]

    def test_no_primary_defaults_to_first(self):
        """Test index 0 when no monitor is marked primary"""
        display = _FakeDisplay(monitors=[_monitor(), _monitor(), _monitor()])
        assert _manager(display).monitorLayout_get() == MonitorLayout(count=3, primary_index=0)

    def test_no_active_monitors(self):
        """Test an empty list falls back to one monitor"""
        assert _manager(_FakeDisplay(monitors=[])).monitorLayout_get() == MonitorLayout(count=1)

    @pytest.mark.parametrize("randr, version", [(False, (1, 5)), (True, (1, 4))])
    def test_randr_unavailable(self, randr, version):
        """Test missing RandR 1.5 falls back to one monitor"""
        display = _FakeDisplay(monitors=[_monitor(), _monitor()], randr=randr, version=version)
        manager = _manager(display)
        assert manager.randrMonitors_isSupported() is False
        assert manager.monitorLayout_get() == MonitorLayout(count=1)
        assert display.root.queries == []
