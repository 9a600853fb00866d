#!/usr/bin/env python3
"""
Configuration Management for Fairs

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .currency import get_currency, is_known_currency

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ScanConfig:
    """Receipt scanning configuration."""

    # Prices above this are treated as misread OCR output
    max_price: int = 999


@dataclass
class Config:
    """
    Main configuration class for Fairs.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Where the group collection and backups live
    data_dir: Path

    # Display currency (ISO code from the currency catalog)
    currency_code: str

    scan: ScanConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("FAIRS_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_fairs"
            data_dir = Path(os.getenv("FAIRS_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("FAIRS_DATA_DIR", "./data")).expanduser().resolve()

        data_dir.mkdir(parents=True, exist_ok=True)

        scan = ScanConfig(max_price=int(os.getenv("FAIRS_SCAN_MAX_PRICE", "999")))

        return cls(
            environment=env,
            data_dir=data_dir,
            currency_code=os.getenv("FAIRS_CURRENCY", "EUR").upper(),
            scan=scan,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def currency_symbol(self) -> str:
        """Display symbol for the configured currency."""
        return get_currency(self.currency_code).symbol

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if not is_known_currency(self.currency_code):
            errors.append(f"Unknown currency code: {self.currency_code}")

        if self.scan.max_price <= 0:
            errors.append("Scan max price must be positive")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        return {
            "environment": self.environment.value,
            "data_dir": str(self.data_dir),
            "currency_code": self.currency_code,
            "scan": {"max_price": self.scan.max_price},
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
