# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the request chain package

from request_chain.config.settings import ChainSettings, get_settings
from request_chain.config.logging import (
    LoggerConfig,
    LoggingSettings,
    logger_config_from_settings,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "ChainSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "logger_config_from_settings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
