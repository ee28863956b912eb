"""Frontend factory functions."""

from __future__ import annotations

import importlib
import logging

from twinslide.common.errors import FrontendLoadError
from twinslide.session.collaborators import Frontend

logger = logging.getLogger(__name__)

FRONTEND_FACTORY_NAME = "frontend_create"


def frontend_load(module_path: str) -> Frontend:
    """
    Import a frontend module and create its frontend.

    The module must expose a `frontend_create()` function returning an
    object implementing the Frontend protocol.

    Args:
        module_path: Dotted module path (e.g., "twinslide.frontend.headless")

    Returns:
        Frontend instance

    Raises:
        FrontendLoadError: If the module cannot be imported or has no factory
    """
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise FrontendLoadError(f"Cannot import frontend '{module_path}': {e}") from e

    factory = getattr(module, FRONTEND_FACTORY_NAME, None)
    if not callable(factory):
        raise FrontendLoadError(
            f"Frontend module '{module_path}' does not define {FRONTEND_FACTORY_NAME}()"
        )

    logger.info(f"Frontend: {module_path}")
    return factory()
