"""X11 display connection and monitor discovery"""

import logging
from typing import Optional

from Xlib import display as xdisplay
from Xlib.display import Display

from twinslide.common.types import MonitorLayout

logger = logging.getLogger(__name__)

_RANDR_MONITORS_MIN_VERSION = (1, 5)


class DisplayManager:
    """Manages X11 display connection and monitor information"""

    def __init__(self, display_name: Optional[str] = None) -> None:
        """
        Initialize display manager

        Args:
            display_name: X11 display name (e.g., ':0'), None for default
        """
        self._display: Optional[Display] = None
        self._display_name: Optional[str] = display_name

    def connection_establish(self) -> None:
        """Establish connection to X11 display"""
        self._display = xdisplay.Display(self._display_name)

    def connection_close(self) -> None:
        """Close X11 display connection"""
        if self._display is not None:
            self._display.close()
            self._display = None

    def display_get(self) -> Display:
        """
        Get X11 display object

        Returns:
            X11 Display object

        Raises:
            RuntimeError: If not connected to display
        """
        if self._display is None:
            raise RuntimeError("Not connected to X11 display")
        return self._display

    def __enter__(self) -> "DisplayManager":
        """Context manager entry"""
        self.connection_establish()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit"""
        self.connection_close()

    def randrMonitors_isSupported(self) -> bool:
        """
        Check for RandR 1.5 monitor queries

        Returns:
            True if the server supports RRGetMonitors
        """
        display = self.display_get()
        if not display.has_extension("RANDR"):
            return False
        version = display.xrandr_query_version()
        return (version.major_version, version.minor_version) >= _RANDR_MONITORS_MIN_VERSION

    def monitorLayout_get(self) -> MonitorLayout:
        """
        Get active monitor count and primary monitor index

        Falls back to a single monitor when RandR monitors are unavailable.

        Returns:
            Monitor layout

        Raises:
            RuntimeError: If not connected to display
        """
        if not self.randrMonitors_isSupported():
            logger.info("RandR 1.5 not available, assuming a single monitor")
            return MonitorLayout(count=1, primary_index=0)

        root = self.display_get().screen().root
        monitors = root.xrandr_get_monitors(is_active=True).monitors
        if not monitors:
            return MonitorLayout(count=1, primary_index=0)

        primary_index = 0
        for index, monitor in enumerate(monitors):
            if monitor.primary:
                primary_index = index
                break

        return MonitorLayout(count=len(monitors), primary_index=primary_index)
