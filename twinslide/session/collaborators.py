"""Frontend protocols for windows, controller, cache status and chooser."""

from __future__ import annotations

from typing import Callable, Protocol

from twinslide.common.runtime_models import InteractiveOverrides
from twinslide.common.types import ActionCatalog, EffectiveOptions, MonitorLayout

CloseListener = Callable[[], None]
ConfirmCallback = Callable[[InteractiveOverrides], None]


class DocumentMetadata(Protocol):
    """Document information shared by both windows."""

    @property
    def document_path(self) -> str:
        """Path of the presented document."""


class CacheStatus(Protocol):
    """Tracks pre-rendering progress for the windows observing it."""

    def window_register(self, window: SlideWindow) -> None:
        """
        Start reporting cache progress to a window.

        Args:
            window: Window observing the cache.
        """


class PresentationController(Protocol):
    """Coordinates navigation between the two windows."""

    def closeListener_connect(self, listener: CloseListener) -> None:
        """
        Subscribe to the "close presentation" notification.

        Args:
            listener: Callback run when the presentation should close.
        """

    def closeListener_disconnect(self, listener: CloseListener) -> None:
        """
        Unsubscribe a close listener.

        Args:
            listener: Previously connected callback.
        """

    def binding_add(self, key: str, action: str) -> None:
        """
        Bind a key name to an action from the action catalog.

        Args:
            key: Key name.
            action: Action name.
        """


class SlideWindow(Protocol):
    """Presenter or presentation window."""

    def cacheObserver_attach(self, cache_status: CacheStatus) -> None:
        """
        Attach the shared cache-status tracker.

        Args:
            cache_status: Shared tracker.
        """

    def show(self) -> None:
        """Show the window."""

    def update(self) -> None:
        """Render the current slide."""

    def destroy(self) -> None:
        """Destroy the window."""


class Chooser(Protocol):
    """Start-up dialog that collects interactive overrides."""

    def show(self, options: EffectiveOptions, document_path: str | None) -> None:
        """
        Show the chooser pre-filled with resolved options.

        Args:
            options: Current effective options.
            document_path: Pre-selected document, if any.
        """

    def hide(self) -> None:
        """Hide the chooser."""


class Frontend(Protocol):
    """Factory for every GUI collaborator plus the event loop."""

    def actionCatalog_get(self) -> ActionCatalog:
        """
        Get the controller's static action catalog.

        Returns:
            Action names with descriptions.
        """

    def monitorLayout_get(self) -> MonitorLayout:
        """
        Get the physical display layout.

        Returns:
            Display count and primary index.
        """

    def metadata_create(self, document_path: str, duration_minutes: int | None) -> DocumentMetadata:
        """
        Create document metadata.

        Args:
            document_path: Path of the document.
            duration_minutes: Fixed duration override, None to keep the
                document's own.

        Returns:
            Document metadata.
        """

    def controller_create(
        self, metadata: DocumentMetadata, options: EffectiveOptions
    ) -> PresentationController:
        """
        Create the shared presentation controller.

        Args:
            metadata: Document metadata.
            options: Effective options for this launch.

        Returns:
            Controller.
        """

    def cacheStatus_create(self) -> CacheStatus:
        """
        Create the shared cache-status tracker.

        Returns:
            Tracker.
        """

    def presenterWindow_create(
        self,
        metadata: DocumentMetadata,
        monitor: int | None,
        controller: PresentationController,
    ) -> SlideWindow:
        """
        Create the presenter window.

        Args:
            metadata: Document metadata.
            monitor: Physical monitor index, None for unconstrained.
            controller: Shared controller.

        Returns:
            Window.
        """

    def presentationWindow_create(
        self,
        metadata: DocumentMetadata,
        monitor: int | None,
        controller: PresentationController,
    ) -> SlideWindow:
        """
        Create the presentation window.

        Args:
            metadata: Document metadata.
            monitor: Physical monitor index, None for unconstrained.
            controller: Shared controller.

        Returns:
            Window.
        """

    def chooser_create(self, on_confirm: ConfirmCallback, on_exit: Callable[[], None]) -> Chooser:
        """
        Create the chooser.

        Args:
            on_confirm: Called with the chooser values when the user launches.
            on_exit: Called when the user leaves the chooser.

        Returns:
            Chooser.
        """

    def mainLoop_run(self) -> None:
        """Run the event loop until mainLoop_quit()."""

    def mainLoop_quit(self) -> None:
        """Stop the event loop."""
