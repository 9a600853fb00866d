#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    cents_to_amount_str,
    decimal_to_cents,
    format_cents,
    parse_amount_to_cents,
    safe_amount_to_cents,
    split_evenly,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in minor units (cents).

    Supports both positive and negative amounts (a negative tip reduces a total).
    Uses integer arithmetic throughout to prevent floating-point errors.

    Examples:
        >>> burger = Money.from_amount("8.50")
        >>> str(burger)
        '8.50'

        >>> (burger * 2).format("€")
        '€17.00'

        >>> [str(share) for share in Money.from_cents(1000).split(3)]
        ['3.34', '3.33', '3.33']
    """

    cents: int

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero amount."""
        return cls(cents=0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_amount(cls, amount: str | int) -> "Money":
        """
        Parse from an amount string like '8.50' / '€8,50', or integer units.

        Args:
            amount: String amount or integer whole units

        Returns:
            Money object

        Raises:
            InvalidAmountError: If the string is not a valid amount
        """
        if isinstance(amount, int):
            return cls(cents=amount * 100)
        return cls(cents=parse_amount_to_cents(amount))

    @classmethod
    def from_amount_or_zero(cls, amount: str | int | None) -> "Money":
        """Parse an amount permissively; anything unparseable is zero."""
        return cls(cents=safe_amount_to_cents(amount))

    @classmethod
    def from_decimal(cls, amount: Decimal) -> "Money":
        """Create Money from a Decimal amount, rounding half-up to the cent."""
        return cls(cents=decimal_to_cents(amount))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value as an exact Decimal amount."""
        return Decimal(self.cents) / 100

    def to_amount_str(self) -> str:
        """Get fixed two-decimal string, the persisted form of a price."""
        return cents_to_amount_str(self.cents)

    def format(self, symbol: str = "$") -> str:
        """Format with a currency symbol prefix."""
        return format_cents(self.cents, symbol)

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def split(self, parts: int) -> list["Money"]:
        """
        Split into equal shares that sum exactly to this amount.

        Leading shares absorb the remainder cents. Returns an empty list when
        parts <= 0.
        """
        return [Money(cents=share) for share in split_evenly(self.cents, parts)]

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(cents=self.cents * scalar)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __hash__(self) -> int:
        return hash(self.cents)

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as plain two-decimal string."""
        return cents_to_amount_str(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
