"""
Logging configuration
"""
import sys

from loguru import logger

from jwt_cli.config import Settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

CONSOLE_FORMAT = "<level>{message}</level>"


def _is_console_record(record: dict) -> bool:
    return bool(record["extra"].get("console"))


def _is_diagnostic_record(record: dict) -> bool:
    return not record["extra"].get("console")


def setup_logging(settings: Settings):
    """
    Configure loguru sinks for one invocation

    Diagnostics go to stderr at the configured level. Records bound with
    ``console=True`` are user-facing lines and are written bare.
    """
    # Remove default logger
    logger.remove()

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=settings.log_level.upper(),
        colorize=settings.color,
        filter=_is_diagnostic_record
    )

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="ERROR",
        colorize=settings.color,
        filter=_is_console_record
    )

    logger.debug(f"Logging configured: level={settings.log_level}")


console = logger.bind(console=True)
