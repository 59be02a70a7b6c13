# ABOUTME: Loguru configuration for the request chain package
# ABOUTME: Provides unified logging setup with console colorization and optional file output

import sys
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from request_chain.config.settings import ChainSettings, get_settings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Default value of the bound ``name`` extra
    app_name: str = "request_chain"

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_serialize: bool = False
    console_backtrace: bool = True
    console_diagnose: bool = True

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/request-chain.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: str = "gz"
    file_serialize: bool = False

    # Performance settings
    enqueue: bool = False
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """Logging sink settings that can be configured via environment variables."""

    log_file_enabled: bool = Field(default=False, validation_alias="LOG_FILE_ENABLED")
    log_file_path: str = Field(default="logs/request-chain.log", validation_alias="LOG_FILE_PATH")
    log_console_colorize: bool = Field(default=True, validation_alias="LOG_CONSOLE_COLORIZE")

    model_config = {"env_prefix": "REQUEST_CHAIN_"}


def logger_config_from_settings(settings: Optional[ChainSettings] = None) -> LoggerConfig:
    """
    Build a LoggerConfig from the package settings.

    ``DEBUG`` forces the debug level, ``LOG_FORMAT=json`` serializes records,
    and the production environment turns off backtraces and variable
    diagnosis. ``APP_NAME`` becomes the default logger name.

    Args:
        settings: Settings to read. Defaults to ``get_settings()``.

    Returns:
        LoggerConfig: The derived configuration.
    """
    settings = settings or get_settings()
    sinks = LoggingSettings()

    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    structured = settings.LOG_FORMAT == "json"
    verbose_traces = settings.ENV != "production"

    return LoggerConfig(
        app_name=settings.APP_NAME,
        console_level=level,
        console_colorize=sinks.log_console_colorize and not structured,
        console_serialize=structured,
        console_backtrace=verbose_traces,
        console_diagnose=verbose_traces,
        file_enabled=sinks.log_file_enabled,
        file_path=sinks.log_file_path,
        file_level=level,
        file_serialize=structured,
    )


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    The package never calls this on import; hosts call it (or one of the
    ``configure_for_*`` helpers) once at startup.

    Args:
        config: Logger configuration. If None, derived from ``get_settings()``.
    """
    if config is None:
        config = logger_config_from_settings()

    # Remove default handler
    logger.remove()
    logger.configure(extra={"name": config.app_name})

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format="{message}" if config.console_serialize else config.console_format,
            colorize=config.console_colorize,
            serialize=config.console_serialize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        # Ensure log directory exists
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            serialize=config.file_serialize,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.configure(extra={"name": "request_chain"})
    logger.add(
        sys.stdout,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{extra[name]}</cyan> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )


def configure_for_production() -> None:
    """Configure logging for production environment."""
    config = LoggerConfig(
        console_level="INFO",
        console_colorize=False,
        console_serialize=True,
        console_backtrace=False,
        console_diagnose=False,
    )
    setup_logging(config)


def configure_for_development() -> None:
    """Configure logging for development environment."""
    config = LoggerConfig(
        console_level="DEBUG",
        console_colorize=True,
        console_backtrace=True,
        console_diagnose=True,
    )
    setup_logging(config)
