"""
Launch session lifecycle.

A session walks IDLE -> LAUNCHING -> ACTIVE -> CLOSING -> IDLE, or ends in
TERMINATED when started in run-now mode (there is no chooser to go back to).

Launch ordering constraints:
1. Controller and cache-status tracker exist before any window.
2. Every window observes the tracker before it is shown.
3. Windows are shown and updated only after all of them are created.

Closing is driven by the controller's close notification. The listener is
disconnected as the first teardown step, so a session never leaves a
subscription behind.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from twinslide.common.errors import SessionStateError
from twinslide.common.types import (
    EffectiveOptions,
    MonitorAssignment,
    SessionState,
    WindowRole,
)
from twinslide.session.collaborators import (
    CacheStatus,
    Frontend,
    PresentationController,
    SlideWindow,
)
from twinslide.session.monitors import monitorAssignmentFromOptions_compute

logger = logging.getLogger(__name__)

__all__ = ["LaunchSession"]


class LaunchSession:
    """Owns the windows and shared collaborators of one presentation run"""

    def __init__(
        self,
        frontend: Frontend,
        run_now: bool,
        on_idle: Callable[[], None],
        bindings: Mapping[str, str] | None = None,
    ) -> None:
        """
        Initialize session

        Args:
            frontend: Collaborator factory and event loop
            run_now: Exit the event loop when the presentation closes
            on_idle: Called after closing when returning to the chooser
            bindings: Key name to action name bindings for the controller
        """
        self._frontend: Frontend = frontend
        self._run_now: bool = run_now
        self._on_idle: Callable[[], None] = on_idle
        self._bindings: dict[str, str] = dict(bindings or {})

        self._state: SessionState = SessionState.IDLE
        self._controller: PresentationController | None = None
        self._cache_status: CacheStatus | None = None
        self._presenter_window: SlideWindow | None = None
        self._presentation_window: SlideWindow | None = None
        self._assignment: MonitorAssignment | None = None

    @property
    def state(self) -> SessionState:
        """Get current lifecycle state"""
        return self._state

    @property
    def assignment(self) -> MonitorAssignment | None:
        """Get monitor assignment of the active launch"""
        return self._assignment

    @property
    def controller(self) -> PresentationController | None:
        """Get shared controller while active"""
        return self._controller

    @property
    def cache_status(self) -> CacheStatus | None:
        """Get shared cache-status tracker while active"""
        return self._cache_status

    def window_get(self, role: WindowRole) -> SlideWindow | None:
        """
        Get the window for a role

        Args:
            role: Window role

        Returns:
            Window, or None if not created
        """
        if role is WindowRole.PRESENTER:
            return self._presenter_window
        return self._presentation_window

    def session_launch(self, options: EffectiveOptions, document_path: str) -> MonitorAssignment:
        """
        Create and show the windows for a document

        Args:
            options: Effective options for this launch
            document_path: Document to present

        Returns:
            Monitor assignment used

        Raises:
            SessionStateError: If the session is not idle
        """
        if self._state is not SessionState.IDLE:
            raise SessionStateError(f"Cannot launch from state {self._state.value}")

        self._state = SessionState.LAUNCHING
        logger.info("Initializing rendering...")

        layout = self._frontend.monitorLayout_get()
        assignment = monitorAssignmentFromOptions_compute(options, layout)
        logger.info(
            f"Monitors: {layout.count} available, primary {layout.primary_index}; "
            f"presenter={assignment.presenter_monitor if assignment.presenter_enabled else '-'} "
            f"presentation={assignment.presentation_monitor if assignment.presentation_enabled else '-'}"
        )

        duration = options.duration_minutes if options.duration_isSet() else None
        metadata = self._frontend.metadata_create(document_path, duration)

        # Shared collaborators first; windows must never see a missing tracker
        self._controller = self._frontend.controller_create(metadata, options)
        self._cache_status = self._frontend.cacheStatus_create()
        self._controller.closeListener_connect(self.presentation_close)
        self._bindings_apply(self._controller)

        if assignment.presentation_enabled:
            self._presentation_window = self._frontend.presentationWindow_create(
                metadata, assignment.presentation_monitor, self._controller
            )
            self._presentation_window.cacheObserver_attach(self._cache_status)
        if assignment.presenter_enabled:
            self._presenter_window = self._frontend.presenterWindow_create(
                metadata, assignment.presenter_monitor, self._controller
            )
            self._presenter_window.cacheObserver_attach(self._cache_status)

        for window in (self._presentation_window, self._presenter_window):
            if window is not None:
                window.show()
                window.update()

        self._assignment = assignment
        self._state = SessionState.ACTIVE
        return assignment

    def _bindings_apply(self, controller: PresentationController) -> None:
        """Register configured key bindings with the controller"""
        known_actions = self._frontend.actionCatalog_get().names_get()
        for key, action in self._bindings.items():
            if action not in known_actions:
                logger.warning(f"Ignoring binding '{key}': unknown action '{action}'")
                continue
            controller.binding_add(key, action)

    def presentation_close(self) -> None:
        """
        Tear down the active presentation

        Connected as the controller's close listener. Does nothing unless the
        session is active.
        """
        if self._state is not SessionState.ACTIVE:
            logger.debug(f"Close request ignored in state {self._state.value}")
            return

        self._state = SessionState.CLOSING
        if self._controller is not None:
            self._controller.closeListener_disconnect(self.presentation_close)

        if self._presentation_window is not None:
            self._presentation_window.destroy()
            self._presentation_window = None
        if self._presenter_window is not None:
            self._presenter_window.destroy()
            self._presenter_window = None

        self._controller = None
        self._cache_status = None
        self._assignment = None

        if self._run_now:
            self._state = SessionState.TERMINATED
            logger.info("Presentation closed, exiting")
            self._frontend.mainLoop_quit()
        else:
            self._state = SessionState.IDLE
            logger.info("Presentation closed, returning to chooser")
            self._on_idle()
