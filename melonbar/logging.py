"""
Unified Logging Configuration

This module sets up a centralized logging system for the whole client core.
All modules should import and use the logger from this module instead of
using print() statements.

Usage:
    from melonbar.logging import logger, get_logger

    logger.info("General informational messages")

    log = get_logger(__name__)
    log.error("Exception [%s] thrown while parsing: [%s]", "JSONDecodeError", body)

Log Levels (from most to least verbose):
    DEBUG    - Request/response traces (e.g., "API Request: coinbase /products")
    INFO     - General informational messages (e.g., "Fetched 300 candles")
    WARNING  - Suspicious but tolerated situations (e.g., "Dispatching invalid request")
    ERROR    - Swallowed failures (e.g., "Exception thrown while parsing content as json")

Configuration:
    Importing this module only attaches a NullHandler to the "melonbar" logger;
    handlers and levels of the host application are left alone. Applications
    that want console output call setup_logging() once at startup, which uses
    the LOG_LEVEL setting from the .env file unless a level is passed.
"""

import logging
import sys
from typing import Optional


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    include_timestamp: bool = True,
    include_module: bool = True
) -> logging.Logger:
    """
    Configure and return the library logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            defaults to settings.log_level
        log_format: Custom log format string (uses default if None)
        include_timestamp: Include timestamp in log messages
        include_module: Include logger name in log messages

    Returns:
        logging.Logger: Configured logger instance

    Example:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.info("Client started")
        2024-01-01 12:00:00 [INFO] melonbar: Client started
    """
    if log_level is None:
        from melonbar.config import settings
        log_level = settings.log_level

    if log_format is None:
        format_parts = []

        if include_timestamp:
            format_parts.append("%(asctime)s")

        format_parts.append("[%(levelname)s]")

        if include_module:
            format_parts.append("%(name)s:")

        format_parts.append("%(message)s")

        log_format = " ".join(format_parts)

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True
    )

    logger = logging.getLogger("melonbar")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    return logger


# ============================================
# Library Logger
# ============================================

logger = logging.getLogger("melonbar")
if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
    logger.addHandler(logging.NullHandler())


# ============================================
# Convenience Functions
# ============================================

def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger of the library logger.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        logging.Logger: Logger named "melonbar.<name>" (names already inside
        the melonbar hierarchy are used as-is)

    Example:
        >>> get_logger("exchanges.coinbase.api_client").name
        'melonbar.exchanges.coinbase.api_client'
    """
    if name == "melonbar" or name.startswith("melonbar."):
        return logging.getLogger(name)
    return logging.getLogger(f"melonbar.{name}")


def set_log_level(level: str) -> None:
    """
    Change the library log level at runtime. The root logger is not touched.

    Args:
        level: New log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


# ============================================
# Log Helper Functions
# ============================================

def log_api_request(exchange: str, endpoint: str, params: dict = None) -> None:
    """
    Log an API request with consistent formatting.

    Example:
        >>> log_api_request("coinbase", "/products/BTC-USD/candles", {"granularity": 60})
        [DEBUG] API Request: coinbase /products/BTC-USD/candles | Params: {'granularity': 60}
    """
    if params:
        logger.debug(f"API Request: {exchange} {endpoint} | Params: {params}")
    else:
        logger.debug(f"API Request: {exchange} {endpoint}")


def log_api_response(exchange: str, endpoint: str, status: int, response_time: float = None) -> None:
    """
    Log an API response with status and timing information.

    Example:
        >>> log_api_response("coinbase", "/products", 200, 0.342)
        [DEBUG] API Response: coinbase /products | Status: 200 | Time: 0.342s
    """
    time_str = f" | Time: {response_time:.3f}s" if response_time else ""
    logger.debug(f"API Response: {exchange} {endpoint} | Status: {status}{time_str}")


logger.debug("Logging system initialized")
