"""Application settings singleton - single source of truth for configuration

This module provides a singleton Settings class that consolidates:
1. File-format constants (persisted store, sidecar metadata, locks)
2. Runtime configuration from config.yml

Option defaults are not kept here: they are the field defaults of
EffectiveOptions, and resolved options travel as immutable values.

Usage:
    from twinslide.common.settings import settings

    # Initialize once at startup with loaded config
    config = ConfigLoader.config_load()
    settings.initialize(config)

    # Use anywhere in the application
    bindings = settings.config.bindings
"""

from typing import Optional

from twinslide.common.config import AppConfig


class Settings:
    """Singleton settings manager combining config.yml and launcher constants

    The singleton pattern ensures all parts of the application use the same
    configuration values and file-format constants.
    """

    _instance: Optional["Settings"] = None

    def __new__(cls) -> "Settings":
        """Ensure only one Settings instance exists"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize settings singleton (only runs once)"""
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self._config: Optional[AppConfig] = None

    def initialize(self, config: AppConfig) -> None:
        """
        Initialize with loaded configuration

        Args:
            config: Loaded application configuration
        """
        self._config = config

    # =========================================================================
    # Persisted Store
    # =========================================================================

    STORE_DIR_NAME: str = "twinslide"
    """Directory under the per-user config root holding the store"""

    STORE_FILE_NAME: str = "twinslide.cfg"
    """File name of the persisted option store"""

    STORE_DIR_MODE: int = 0o755
    """Permissions for directories created when saving the store"""

    STORE_FILE_MODE: int = 0o644
    """Permissions of the saved store file"""

    # =========================================================================
    # Sidecar Metadata
    # =========================================================================

    SIDECAR_EXTENSION: str = ".pdfpc"
    """Extension replacing the document extension to find its sidecar file"""

    SIDECAR_DURATION_MARKER: str = "[duration]"
    """Sidecar section line followed by the duration in minutes"""

    # =========================================================================
    # Locks
    # =========================================================================

    LOCK_NAMES: tuple[str, ...] = ("render", "cache")
    """Named process-wide locks guarding the shared render cache"""

    # =========================================================================
    # Runtime Configuration Access
    # These properties delegate to the loaded config.yml
    # =========================================================================

    @property
    def config(self) -> AppConfig:
        """
        Get loaded configuration object

        Raises:
            RuntimeError: If initialize() has not been called
        """
        if self._config is None:
            raise RuntimeError("Settings not initialized. Call settings.initialize(config) first.")
        return self._config


# Global singleton instance
settings = Settings()
"""Global settings singleton instance

Import this anywhere in the application:
    from twinslide.common.settings import settings
"""
