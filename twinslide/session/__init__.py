"""Launch orchestration: monitor assignment, frontend collaborators, lifecycle."""

from twinslide.session.collaborators import (
    CacheStatus,
    Chooser,
    DocumentMetadata,
    Frontend,
    PresentationController,
    SlideWindow,
)
from twinslide.session.frontend_factory import frontend_load
from twinslide.session.lifecycle import LaunchSession
from twinslide.session.monitors import (
    monitorAssignmentFromOptions_compute,
    monitorAssignment_compute,
)

__all__ = [
    "CacheStatus",
    "Chooser",
    "DocumentMetadata",
    "Frontend",
    "LaunchSession",
    "PresentationController",
    "SlideWindow",
    "frontend_load",
    "monitorAssignmentFromOptions_compute",
    "monitorAssignment_compute",
]
