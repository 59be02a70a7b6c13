# ABOUTME: Unit tests for ChainSettings class and the settings singleton
# ABOUTME: Tests inheritance, caching and environment overrides

from unittest.mock import patch

import pytest

from request_chain.config._base import BaseChainSettings
from request_chain.config.settings import ChainSettings, get_settings


class TestChainSettings:
    """Test suite for ChainSettings class."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_chainsettings_inheritance(self):
        """Test that ChainSettings properly inherits from BaseChainSettings."""
        settings = ChainSettings()

        assert isinstance(settings, BaseChainSettings)
        assert settings.APP_NAME == "request-chain"
        assert settings.UNKNOWN_STATUS_TEXT == "omit"

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_settings_is_cached(self):
        """Test that get_settings returns a singleton."""
        assert get_settings() is get_settings()

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_settings_cache_clear_rereads_environment(self):
        """Test that clearing the cache picks up environment changes."""
        first = get_settings()

        with patch.dict("os.environ", {"REQUEST_CHAIN_VALIDATION_EXTRA": "forbid"}):
            get_settings.cache_clear()
            second = get_settings()

        assert first is not second
        assert second.VALIDATION_EXTRA == "forbid"
