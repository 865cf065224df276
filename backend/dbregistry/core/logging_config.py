"""
Centralized logging configuration for the database registry.

This module provides a standardized logging setup for all registry modules.
Logs are formatted consistently and can be configured via environment variables.
"""
import logging
import sys
from pathlib import Path
from typing import Optional
import os

# Default log level from environment or INFO
DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# File logging is opt-in so importing the package never writes to disk
DEFAULT_FILE_LOGGING = os.getenv("LOG_TO_FILE", "false").lower() == "true"

# Log directory
LOG_DIR = Path("logs")


def setup_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    enable_file_logging: bool = DEFAULT_FILE_LOGGING
) -> None:
    """
    Configure logging for the registry.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (defaults to logs/dbregistry.log)
        enable_file_logging: Whether to enable file logging
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Configure the package logger, leaving the host application's root logger alone
    package_logger = logging.getLogger("dbregistry")
    package_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()

    # Console handler (always enabled)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(simple_formatter)
    package_logger.addHandler(console_handler)

    # File handler (optional)
    if enable_file_logging:
        if log_file is None:
            log_file = LOG_DIR / "dbregistry.log"
        else:
            log_file = Path(log_file)

        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # File gets all logs
        file_handler.setFormatter(detailed_formatter)
        package_logger.addHandler(file_handler)

    # Reduce noise from the sqlite driver thread
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


# Initialize logging on module import
setup_logging()
