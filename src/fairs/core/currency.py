#!/usr/bin/env python3
"""
Currency Parsing and Handling Utilities

All monetary calculations in Fairs use integer arithmetic on minor units (cents)
to avoid floating-point errors.

Amount Representations:
- Persisted/user-entered amounts are strings: "12.34", "$12.34", "12,34"
- Internal calculations use cents: 100 cents = 1.00
- Display uses a currency symbol prefix: "€12.34"

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Validate user input once, at the boundary where a string enters the domain
- Round only once, when a fractional amount (e.g. a percentage) becomes cents
- Split amounts with remainder allocation so shares always sum to the whole
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union


class InvalidAmountError(ValueError):
    """Raised when a user-supplied amount string cannot be parsed"""

    pass


@dataclass(frozen=True)
class CurrencyInfo:
    """Display information for a supported currency."""

    code: str
    symbol: str
    name: str


CURRENCIES: list[CurrencyInfo] = [
    CurrencyInfo("USD", "$", "US Dollar"),
    CurrencyInfo("EUR", "€", "Euro"),
    CurrencyInfo("GBP", "£", "British Pound"),
    CurrencyInfo("JPY", "¥", "Japanese Yen"),
    CurrencyInfo("CAD", "C$", "Canadian Dollar"),
    CurrencyInfo("AUD", "A$", "Australian Dollar"),
    CurrencyInfo("CHF", "CHF", "Swiss Franc"),
    CurrencyInfo("CNY", "¥", "Chinese Yuan"),
    CurrencyInfo("INR", "₹", "Indian Rupee"),
    CurrencyInfo("MXN", "$", "Mexican Peso"),
    CurrencyInfo("BRL", "R$", "Brazilian Real"),
    CurrencyInfo("ZAR", "R", "South African Rand"),
    CurrencyInfo("SEK", "kr", "Swedish Krona"),
    CurrencyInfo("NOK", "kr", "Norwegian Krone"),
    CurrencyInfo("DKK", "kr", "Danish Krone"),
    CurrencyInfo("PLN", "zł", "Polish Zloty"),
    CurrencyInfo("ILS", "₪", "Israeli Shekel"),
    CurrencyInfo("KRW", "₩", "South Korean Won"),
    CurrencyInfo("SGD", "S$", "Singapore Dollar"),
    CurrencyInfo("NZD", "NZ$", "New Zealand Dollar"),
]

_CURRENCY_SYMBOL_CHARS = "$€£¥₹₪₩"

# Optional sign, digits, optional single decimal separator with digits
_AMOUNT_PATTERN = re.compile(r"^-?(\d+([.,]\d*)?|[.,]\d+)$")


def get_currency(code: str | None) -> CurrencyInfo:
    """
    Look up a currency by ISO code.

    Unknown or missing codes fall back to the first catalog entry.
    """
    if code:
        for currency in CURRENCIES:
            if currency.code == code.upper():
                return currency
    return CURRENCIES[0]


def is_known_currency(code: str) -> bool:
    """Check whether a currency code is in the catalog."""
    return any(currency.code == code.upper() for currency in CURRENCIES)


def _clean_amount_string(amount_str: str) -> str:
    """Strip currency symbols and whitespace from an amount string."""
    clean = str(amount_str).strip()
    for symbol in _CURRENCY_SYMBOL_CHARS:
        clean = clean.replace(symbol, "")
    return clean.replace(" ", "")


def parse_decimal(amount_str: str) -> Decimal:
    """
    Parse a user-entered numeric string into a Decimal.

    Accepts "." or "," as the decimal separator and an optional leading
    currency symbol.

    Args:
        amount_str: String like "12.34", "$12.34", "12,5", "-3"

    Returns:
        Decimal value

    Raises:
        InvalidAmountError: If the string is empty or not numeric
    """
    clean = _clean_amount_string(amount_str)
    if not clean or not _AMOUNT_PATTERN.match(clean):
        raise InvalidAmountError(f"Invalid amount: {amount_str!r}")

    try:
        return Decimal(clean.replace(",", "."))
    except InvalidOperation as e:
        raise InvalidAmountError(f"Invalid amount: {amount_str!r}") from e


def decimal_to_cents(amount: Decimal) -> int:
    """
    Convert a Decimal amount to integer cents, rounding half-up.

    Example:
        decimal_to_cents(Decimal("2.005")) -> 201
    """
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_amount_to_cents(amount_str: str) -> int:
    """
    Parse a user-entered amount string to cents, strictly.

    Args:
        amount_str: String like "8.50", "€8,50" or "12"

    Returns:
        Amount in cents

    Raises:
        InvalidAmountError: If the string is empty or not numeric

    Examples:
        parse_amount_to_cents("8.50") -> 850
        parse_amount_to_cents("8,5") -> 850
        parse_amount_to_cents("12") -> 1200
    """
    return decimal_to_cents(parse_decimal(amount_str))


def safe_amount_to_cents(amount: Union[str, int, None]) -> int:
    """
    Permissively convert a stored amount to cents.

    Mirrors how persisted values were always read: anything unparseable,
    including an empty string, counts as zero.

    Examples:
        safe_amount_to_cents('45.99') -> 4599
        safe_amount_to_cents('FREE') -> 0
        safe_amount_to_cents('') -> 0
    """
    if amount is None:
        return 0
    if isinstance(amount, int):
        return amount * 100
    try:
        return parse_amount_to_cents(amount)
    except InvalidAmountError:
        return 0


def parse_percentage(value_str: str) -> Decimal:
    """
    Parse a percentage string such as "15" or "12.5" into a Decimal.

    Raises:
        InvalidAmountError: If the string is empty or not numeric
    """
    return parse_decimal(str(value_str).replace("%", ""))


def cents_to_amount_str(cents: int) -> str:
    """
    Convert cents to a fixed two-decimal string using pure integer arithmetic.

    Example:
        cents_to_amount_str(4599) -> "45.99"
        cents_to_amount_str(-5) -> "-0.05"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    units = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{units}.{remainder:02d}"
    return f"{units}.{remainder:02d}"


def format_cents(cents: int, symbol: str = "$") -> str:
    """Format cents as an amount string with a currency symbol prefix."""
    return f"{symbol}{cents_to_amount_str(cents)}"


def split_evenly(total: int, parts: int) -> list[int]:
    """
    Split an amount into equal integer shares that sum exactly to the total.

    Remainder cents go one each to the leading shares. Works for negative
    totals as well (floor division keeps the sum exact).

    Args:
        total: Amount in cents
        parts: Number of shares

    Returns:
        List of shares, or an empty list when parts <= 0

    Example:
        split_evenly(1000, 3) -> [334, 333, 333]
    """
    if parts <= 0:
        return []

    base, remainder = divmod(total, parts)
    return [base + 1 if i < remainder else base for i in range(parts)]
