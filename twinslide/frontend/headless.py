"""
Headless frontend.

Implements every frontend collaborator without a GUI toolkit: windows and
the controller only log what they are asked to do, and the event loop is a
plain callback queue. A headless run walks the complete launch lifecycle:
the controller requests close as soon as the loop runs, and the chooser
confirms once and exits on its next appearance.

Monitor facts come from X11 (RandR) when a display is reachable.
"""

from __future__ import annotations

import logging
import os
from collections import deque
from dataclasses import dataclass
from typing import Callable

from Xlib.error import DisplayError

from twinslide.common.runtime_models import InteractiveOverrides
from twinslide.common.types import ActionCatalog, EffectiveOptions, MonitorLayout, WindowRole
from twinslide.session.collaborators import CacheStatus, CloseListener, ConfirmCallback
from twinslide.x11.display import DisplayManager

logger = logging.getLogger(__name__)

__all__ = [
    "ACTION_DESCRIPTIONS",
    "HeadlessCacheStatus",
    "HeadlessChooser",
    "HeadlessController",
    "HeadlessFrontend",
    "HeadlessLoop",
    "HeadlessMetadata",
    "HeadlessWindow",
    "frontend_create",
]

ACTION_DESCRIPTIONS: tuple[tuple[str, str], ...] = (
    ("next", "Go to next slide"),
    ("next10", "Jump 10 slides forward"),
    ("lastSlide", "Jump to the last slide"),
    ("prev", "Go to previous slide"),
    ("prev10", "Jump 10 slides back"),
    ("firstSlide", "Jump to the first slide"),
    ("goto", "Ask for a page to jump to"),
    ("overview", "Show the overview mode"),
    ("blank", "Blank presentation screen"),
    ("freeze", "Toggle freeze presentation screen"),
    ("freezeOn", "Freeze presentation screen if unfrozen"),
    ("pause", "Pause timer"),
    ("resetTimer", "Reset the timer"),
    ("reset", "Reset the presentation"),
    ("exitState", "Exit \"special\" state (pause, freeze, blank)"),
    ("quit", "Exit the presentation"),
)


class HeadlessLoop:
    """Callback queue standing in for a GUI event loop"""

    def __init__(self) -> None:
        """Initialize empty queue"""
        self._queue: deque[Callable[[], None]] = deque()
        self._running: bool = False

    def callback_schedule(self, callback: Callable[[], None]) -> None:
        """
        Queue a callback for the running loop

        Args:
            callback: Function to call
        """
        self._queue.append(callback)

    def run(self) -> None:
        """Run queued callbacks until quit() or the queue drains"""
        self._running = True
        while self._running and self._queue:
            callback = self._queue.popleft()
            callback()
        self._running = False

    def quit(self) -> None:
        """Stop after the current callback"""
        self._running = False


@dataclass(frozen=True)
class HeadlessMetadata:
    """Document metadata"""
    document_path: str
    duration_minutes: int | None = None


class HeadlessCacheStatus:
    """Cache-status tracker remembering its observers"""

    def __init__(self) -> None:
        self.windows: list[HeadlessWindow] = []

    def window_register(self, window: HeadlessWindow) -> None:
        """Register an observing window"""
        self.windows.append(window)


class HeadlessController:
    """Presentation controller that ends the presentation once the loop runs"""

    def __init__(self, loop: HeadlessLoop, metadata: HeadlessMetadata, options: EffectiveOptions) -> None:
        """
        Initialize controller

        Args:
            loop: Event loop to schedule the close request on
            metadata: Document metadata
            options: Effective options for this launch
        """
        self._loop = loop
        self.metadata = metadata
        self.options = options
        self.bindings: dict[str, str] = {}
        self._close_listeners: list[CloseListener] = []
        loop.callback_schedule(self.close_request)

    @staticmethod
    def actionCatalog_get() -> ActionCatalog:
        """Get the static action catalog"""
        return ActionCatalog(entries=ACTION_DESCRIPTIONS)

    @property
    def close_listeners(self) -> list[CloseListener]:
        """Get connected close listeners"""
        return list(self._close_listeners)

    def closeListener_connect(self, listener: CloseListener) -> None:
        """Subscribe a close listener"""
        self._close_listeners.append(listener)

    def closeListener_disconnect(self, listener: CloseListener) -> None:
        """Unsubscribe a close listener"""
        if listener in self._close_listeners:
            self._close_listeners.remove(listener)

    def binding_add(self, key: str, action: str) -> None:
        """Bind a key to an action"""
        self.bindings[key] = action
        logger.debug(f"Bound {key} => {action}")

    def close_request(self) -> None:
        """Notify close listeners"""
        for listener in list(self._close_listeners):
            listener()


class HeadlessWindow:
    """Window that logs instead of drawing"""

    def __init__(
        self,
        role: WindowRole,
        metadata: HeadlessMetadata,
        monitor: int | None,
        controller: HeadlessController,
    ) -> None:
        self.role = role
        self.metadata = metadata
        self.monitor = monitor
        self.controller = controller
        self.cache_status: CacheStatus | None = None
        self.shown: bool = False
        self.update_count: int = 0
        self.destroyed: bool = False

    def cacheObserver_attach(self, cache_status: CacheStatus) -> None:
        self.cache_status = cache_status
        cache_status.window_register(self)

    def show(self) -> None:
        placement = "unconstrained" if self.monitor is None else f"monitor {self.monitor}"
        logger.info(f"{self.role.value} window shown ({placement})")
        self.shown = True

    def update(self) -> None:
        self.update_count += 1

    def destroy(self) -> None:
        logger.info(f"{self.role.value} window destroyed")
        self.destroyed = True
        self.shown = False


class HeadlessChooser:
    """Chooser that confirms on first show and exits on the next"""

    def __init__(self, loop: HeadlessLoop, on_confirm: ConfirmCallback, on_exit: Callable[[], None]) -> None:
        self._loop = loop
        self._on_confirm = on_confirm
        self._on_exit = on_exit
        self.show_count: int = 0
        self.visible: bool = False

    def show(self, options: EffectiveOptions, document_path: str | None) -> None:
        """
        Show the chooser

        Args:
            options: Current effective options
            document_path: Pre-selected document
        """
        self.show_count += 1
        self.visible = True
        if self.show_count == 1 and document_path is not None:
            overrides = InteractiveOverrides(document_path=document_path)
            self._loop.callback_schedule(lambda: self._on_confirm(overrides))
            return
        if document_path is None:
            logger.warning("No document selected")
        self._loop.callback_schedule(self._on_exit)

    def hide(self) -> None:
        """Hide the chooser"""
        self.visible = False


class HeadlessFrontend:
    """Frontend creating headless collaborators"""

    def __init__(self, layout: MonitorLayout | None = None) -> None:
        """
        Initialize frontend

        Args:
            layout: Fixed monitor layout, None to query X11
        """
        self.loop = HeadlessLoop()
        self._layout: MonitorLayout | None = layout
        self.windows: list[HeadlessWindow] = []
        self.controllers: list[HeadlessController] = []

    def actionCatalog_get(self) -> ActionCatalog:
        return HeadlessController.actionCatalog_get()

    def monitorLayout_get(self) -> MonitorLayout:
        if self._layout is not None:
            return self._layout
        if not os.environ.get("DISPLAY"):
            logger.info("No X11 display, assuming a single monitor")
            return MonitorLayout(count=1, primary_index=0)
        try:
            with DisplayManager() as display_manager:
                return display_manager.monitorLayout_get()
        except DisplayError as e:
            logger.info(f"Cannot query X11 monitors ({e}), assuming a single monitor")
            return MonitorLayout(count=1, primary_index=0)

    def metadata_create(self, document_path: str, duration_minutes: int | None) -> HeadlessMetadata:
        return HeadlessMetadata(document_path=document_path, duration_minutes=duration_minutes)

    def controller_create(self, metadata: HeadlessMetadata, options: EffectiveOptions) -> HeadlessController:
        controller = HeadlessController(self.loop, metadata, options)
        self.controllers.append(controller)
        return controller

    def cacheStatus_create(self) -> HeadlessCacheStatus:
        return HeadlessCacheStatus()

    def presenterWindow_create(
        self, metadata: HeadlessMetadata, monitor: int | None, controller: HeadlessController
    ) -> HeadlessWindow:
        window = HeadlessWindow(WindowRole.PRESENTER, metadata, monitor, controller)
        self.windows.append(window)
        return window

    def presentationWindow_create(
        self, metadata: HeadlessMetadata, monitor: int | None, controller: HeadlessController
    ) -> HeadlessWindow:
        window = HeadlessWindow(WindowRole.PRESENTATION, metadata, monitor, controller)
        self.windows.append(window)
        return window

    def chooser_create(self, on_confirm: ConfirmCallback, on_exit: Callable[[], None]) -> HeadlessChooser:
        return HeadlessChooser(self.loop, on_confirm, on_exit)

    def mainLoop_run(self) -> None:
        self.loop.run()

    def mainLoop_quit(self) -> None:
        self.loop.quit()


def frontend_create() -> HeadlessFrontend:
    """Create the headless frontend"""
    return HeadlessFrontend()
