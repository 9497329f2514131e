"""
Configuration Management Module

This module handles loading, validating, and providing access to client
configuration from environment variables (.env file).

Uses Pydantic Settings for automatic validation and type conversion.

Usage:
    from melonbar.config import settings

    print(settings.coinbase_base_url)
    print(settings.products_list)  # Returns a list of strings
"""

import re
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


PRODUCT_ID_PATTERN = re.compile(r"^[A-Z0-9]+-[A-Z0-9]+$")


class Settings(BaseSettings):
    """
    Client Settings

    Values are automatically loaded from environment variables or .env file.

    Attributes:
        coinbase_base_url: Base URL for the Coinbase Exchange REST API
        supported_products: Comma-separated product ids (e.g., "BTC-USD,ETH-USD")
        environment: Current environment (development, production)
        debug: Enable debug mode
        log_level: Logging level for the melonbar logger
        request_timeout: Timeout for HTTP requests in seconds
    """

    # ============================================
    # Coinbase API Configuration
    # ============================================

    coinbase_base_url: str = Field(
        default="https://api.exchange.coinbase.com",
        description="Coinbase Exchange REST API base URL"
    )

    supported_products: str = Field(
        default="BTC-USD,ETH-USD",
        description="Comma-separated list of product ids"
    )

    # ============================================
    # Application Configuration
    # ============================================

    environment: str = Field(
        default="development",
        description="Application environment (development, production)"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    request_timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

    @property
    def products_list(self) -> List[str]:
        """
        Convert comma-separated products string to a list.

        Example:
            >>> settings.products_list
            ['BTC-USD', 'ETH-USD']
        """
        return [p.strip().upper() for p in self.supported_products.split(",") if p.strip()]

    def get_default_headers(self) -> dict:
        """Headers sent with every request by the reference transport."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }


settings = Settings()


def validate_configuration() -> None:
    """
    Validate critical configuration settings.

    Raises:
        ValueError: If required configuration is missing or invalid
    """
    # logging.py imports config.py
    from melonbar.guard import not_empty
    from melonbar.logging import logger

    not_empty(settings.products_list)

    for product_id in settings.products_list:
        if not PRODUCT_ID_PATTERN.match(product_id):
            raise ValueError(
                f"Product '{product_id}' must look like BASE-QUOTE (e.g., BTC-USD). "
                f"Please update SUPPORTED_PRODUCTS in .env"
            )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if settings.log_level.upper() not in valid_log_levels:
        raise ValueError(
            f"Invalid LOG_LEVEL: '{settings.log_level}'. "
            f"Must be one of: {', '.join(valid_log_levels)}"
        )

    if settings.request_timeout <= 0:
        raise ValueError(f"Invalid REQUEST_TIMEOUT: {settings.request_timeout}. Must be positive")

    if not settings.coinbase_base_url.startswith("http"):
        raise ValueError(f"Invalid COINBASE_BASE_URL: '{settings.coinbase_base_url}'")

    logger.info("Configuration validated successfully")
    logger.info(f"Products: {', '.join(settings.products_list)}")
    logger.info(f"Coinbase API: {settings.coinbase_base_url}")
    logger.info(f"Log level: {settings.log_level.upper()}")
