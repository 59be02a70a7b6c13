# ABOUTME: Main configuration composition for the request chain package.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseChainSettings


class ChainSettings(BaseChainSettings):
    """Represents the complete, composed configuration for the package.

    This class is the final aggregator for all configuration settings. Hosts
    that need extra settings extend it through inheritance:

        class ServiceSettings(ChainSettings):
            DB_URL: str = "sqlite:///./test.db"

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> ChainSettings:
    """Provides a singleton instance of the package settings.

    The cache ensures the environment and `.env` file are read once, giving
    every handler a consistent configuration. Tests call
    ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        A single, cached instance of the ChainSettings class.
    """
    return ChainSettings()
