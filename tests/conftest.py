"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from typing import Any

import pytest

import fairs.core.config as config_module


@pytest.fixture
def dinner_group_dict() -> dict[str, Any]:
    """
    Stored group with two items, a 10% tip and two people.

    Alice takes the first item; Bob takes the second item and the tip.
    """
    return {
        "id": "group-1",
        "name": "Friday dinner",
        "emoji": "beer",
        "date": "2024-08-15",
        "items": [
            {"id": "item-1", "name": "Pizza", "price": "10.00"},
            {"id": "item-2", "name": "Beer", "price": "5.00", "multiplier": 2},
        ],
        "people": [
            {"id": "alice", "name": "Alice", "selectedItems": ["item-1"], "isPaid": False},
            {"id": "bob", "name": "Bob", "selectedItems": ["item-2", "tip"], "isPaid": True},
        ],
        "tipValue": "10",
        "tipMode": "percent",
        "splitMode": "separate",
    }


@pytest.fixture
def receipt_lines() -> list[str]:
    """OCR lines from a simple receipt with one price per line."""
    return [
        "THE CORNER DINER",
        "Table 12",
        "Burger 8.50",
        "Fries 3.00",
        "Subtotal 11.50",
        "Tax 0.92",
        "TOTAL 12.42",
        "Thank you!",
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh configuration."""
    # Ensure tests never touch real data
    monkeypatch.setenv("FAIRS_ENV", "test")
    monkeypatch.setenv("FAIRS_DATA_DIR", str(tmp_path / "fairs_data"))
    monkeypatch.setenv("FAIRS_CURRENCY", "EUR")
    monkeypatch.delenv("FAIRS_SCAN_MAX_PRICE", raising=False)

    # Configuration is cached globally
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "allocation: Tests for bill allocation")
    config.addinivalue_line("markers", "receipts: Tests for receipt line parsing")
