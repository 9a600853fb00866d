"""
Core Utilities Package

Shared building blocks used by the allocation engine, receipt parser and CLI.

This package provides:
- Currency handling with integer arithmetic for precision
- The Money value type
- Configuration management for environment-specific settings
- JSON file helpers
"""

from .config import (
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    CURRENCIES,
    CurrencyInfo,
    InvalidAmountError,
    cents_to_amount_str,
    format_cents,
    get_currency,
    parse_amount_to_cents,
    parse_decimal,
    parse_percentage,
    safe_amount_to_cents,
    split_evenly,
)
from .money import Money

__all__ = [
    "CURRENCIES",
    # Configuration
    "Config",
    "CurrencyInfo",
    "Environment",
    "InvalidAmountError",
    "Money",
    "cents_to_amount_str",
    "format_cents",
    "get_config",
    "get_currency",
    # Currency utilities
    "parse_amount_to_cents",
    "parse_decimal",
    "parse_percentage",
    "reload_config",
    "safe_amount_to_cents",
    "split_evenly",
]
