"""Unit tests for settings singleton"""

import pytest
from twinslide.common.config import AppConfig, LoggingConfig
from twinslide.common.settings import Settings, settings
from twinslide.common.types import DURATION_UNSET, EffectiveOptions


class TestSettingsSingleton:
    """Test Settings singleton pattern"""

    def test_singleton_same_instance(self, reset_settings):
        """Test that Settings() returns same instance"""
        s1 = Settings()
        s2 = Settings()
        assert s1 is s2

    def test_global_settings_is_singleton(self, reset_settings):
        """Test that global 'settings' is the singleton"""
        s = Settings()
        assert settings is s


class TestSettingsConstants:
    """Test that constants are accessible and agree with the data model"""

    def test_no_duplicated_option_defaults(self):
        """Option defaults come only from EffectiveOptions"""
        assert not hasattr(settings, "DEFAULT_LAST_MINUTES")
        assert not hasattr(settings, "DEFAULT_OVERVIEW_MIN_WIDTH_PX")
        assert EffectiveOptions().duration_minutes == DURATION_UNSET

    def test_file_format_constants(self):
        """Test sidecar and store constants"""
        assert settings.SIDECAR_EXTENSION == ".pdfpc"
        assert settings.SIDECAR_DURATION_MARKER == "[duration]"
        assert settings.STORE_DIR_MODE == 0o755
        assert settings.STORE_FILE_MODE == 0o644


class TestSettingsInitialization:
    """Test settings initialization with config"""

    def test_initialize_with_config(self, reset_settings, sample_config):
        """Test settings can be initialized with config"""
        settings.initialize(sample_config)
        assert settings.config is sample_config

    def test_config_property_before_init_raises(self, reset_settings):
        """Test accessing config before initialization raises error"""
        with pytest.raises(RuntimeError, match="Settings not initialized"):
            _ = settings.config

    def test_initialize_multiple_times(self, reset_settings, sample_config):
        """Test that initialize can be called multiple times"""
        settings.initialize(sample_config)
        config1 = settings.config

        different_config = AppConfig(logging=LoggingConfig(level="DEBUG"))
        settings.initialize(different_config)
        config2 = settings.config

        assert config2 is different_config
        assert config2 is not config1
