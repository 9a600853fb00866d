#!/usr/bin/env python3
"""
Receipt Line Parser Module

Turns OCR text lines from a photographed receipt into candidate items.

OCR output is noisy and receipt layouts vary, so parsing is a two-tier
heuristic tuned for recall over precision (every candidate is reviewed by the
user before it becomes an item):

1. Inline: each line carries its own trailing price ("Burger 8.50").
2. Split-column: names and prices sit on separate lines. Only tried when the
   inline pass finds nothing.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

logger = logging.getLogger(__name__)

DEFAULT_MAX_PRICE = 999

# Receipt boilerplate that must never be read as an item: totals, taxes,
# payment details, order metadata and contact info.
NOISE_PATTERN = re.compile(
    r"\b(?:"
    r"sub\s*-?\s*total|total|tax|vat|gst|hst|discount|"
    r"service\s+charge|service|gratuity|tip|"
    r"balance(?:\s+due)?|amount\s+due|change|cash|card|credit|debit|"
    r"payment|paid|tender(?:ed)?|"
    r"visa|mastercard|master\s+card|amex|american\s+express|maestro|"
    r"thank\s*you|thanks|"
    r"order|table|server|cashier|receipt|invoice|"
    r"tel|phone|fax|email|e-mail|www|http|https"
    r")\b"
    r"|\.com\b",
    re.IGNORECASE,
)

_CURRENCY = r"[$€£¥₹₪₩]"
_AMOUNT = r"\d{1,4}[.,]\d{2}"

PRICE_ONLY_PATTERN = re.compile(rf"^{_CURRENCY}?\s*{_AMOUNT}$")
TRAILING_PRICE_PATTERN = re.compile(rf"(?<![\d.,]){_CURRENCY}?\s*(?P<amount>{_AMOUNT})\s*$")
LEADING_PRICE_PATTERN = re.compile(rf"^{_CURRENCY}?\s*(?P<amount>{_AMOUNT})(?![\d])")
TIME_PATTERN = re.compile(r"^\d{1,2}:\d{2}(?::\d{2})?$")
DATE_LABEL_PATTERN = re.compile(r"^date\s*:", re.IGNORECASE)

# "2x Beer", "2 × Beer", "1. Beer", "3 - Beer"
QUANTITY_PREFIX_PATTERN = re.compile(r"^\d+\s*[x×.\-]\s*", re.IGNORECASE)
BULLET_PATTERN = re.compile(r"[•·●▪■►◦*]")
TRAILING_LEADER_PATTERN = re.compile(r"[\s.:]+$")

# Latin (incl. accented) and Greek/Coptic letters
LETTER_PATTERN = re.compile(r"[A-Za-zÀ-ɏͰ-Ͽ]")

MIN_LINE_LENGTH = 2
MIN_NAME_LENGTH = 2


@dataclass
class ScannedItem:
    """A candidate item read from a receipt, pending user review."""

    id: str
    name: str
    price: str  # Fixed two-decimal string, e.g. "8.50"
    selected: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {"id": self.id, "name": self.name, "price": self.price, "selected": self.selected}


class ReceiptLineParser:
    """
    Parser for OCR text lines of a receipt.

    Stateless apart from its price bound; one instance can parse any number
    of scans.
    """

    def __init__(self, max_price: int | Decimal = DEFAULT_MAX_PRICE):
        """
        Initialize parser.

        Args:
            max_price: Largest plausible item price; larger reads are treated
                as OCR errors (or grand totals) and ignored
        """
        self.max_price = Decimal(max_price)

    def parse(self, lines: Iterable[str]) -> list[ScannedItem]:
        """
        Parse receipt lines into candidate items.

        Args:
            lines: Text lines in top-to-bottom order, as segmented by OCR

        Returns:
            Candidate items (all selected), or an empty list if nothing
            looked like an item
        """
        cleaned = self._preprocess(lines)

        pairs = self._parse_inline(cleaned)
        strategy = "inline"
        if not pairs:
            pairs = self._parse_split_columns(cleaned)
            strategy = "split-column"

        logger.debug("Receipt parse: %d candidate items via %s strategy", len(pairs), strategy)

        return [
            ScannedItem(id=f"scan-{index}", name=name, price=self._format_price(price))
            for index, (name, price) in enumerate(pairs)
        ]

    def _preprocess(self, lines: Iterable[str]) -> list[str]:
        """Trim lines; drop non-text entries and lines too short to mean anything."""
        trimmed = (line.strip() for line in lines if isinstance(line, str))
        return [line for line in trimmed if len(line) >= MIN_LINE_LENGTH]

    def _parse_inline(self, lines: list[str]) -> list[tuple[str, Decimal]]:
        """Strategy A: a trailing price on the same line as the item name."""
        pairs = []

        for line in lines:
            if self._is_noise(line) or PRICE_ONLY_PATTERN.match(line):
                continue

            match = TRAILING_PRICE_PATTERN.search(line)
            if not match:
                continue

            price = self._parse_price(match.group("amount"))
            if price is None:
                continue

            name = self._clean_name(line[: match.start()])
            if len(name) < MIN_NAME_LENGTH:
                continue

            pairs.append((name, price))

        return pairs

    def _parse_split_columns(self, lines: list[str]) -> list[tuple[str, Decimal]]:
        """
        Strategy B: names and prices on separate lines, paired by position.

        When there are more prices than names, the largest prices are dropped
        first on the assumption that they are totals or tax lines. Pairing
        assumes names and prices appear in the same top-to-bottom order; this
        holds for typical layouts but is a best-effort guess.
        """
        names: list[str] = []
        prices: list[Decimal] = []

        for line in lines:
            if self._is_noise(line) or TIME_PATTERN.match(line) or DATE_LABEL_PATTERN.match(line):
                continue

            match = LEADING_PRICE_PATTERN.match(line)
            if match:
                price = self._parse_price(match.group("amount"))
                if price is not None:
                    prices.append(price)
                continue

            if LETTER_PATTERN.search(line):
                names.append(line)

        while len(prices) > len(names):
            prices.remove(max(prices))

        return list(zip(names, prices))

    def _is_noise(self, line: str) -> bool:
        return NOISE_PATTERN.search(line) is not None

    def _parse_price(self, amount: str) -> Decimal | None:
        """Parse a matched price numeral; None if implausible."""
        try:
            price = Decimal(amount.replace(",", "."))
        except InvalidOperation:
            return None
        if price <= 0 or price > self.max_price:
            return None
        return price

    def _clean_name(self, raw: str) -> str:
        """Strip quantity prefixes, bullets and leader dots from an item name."""
        name = BULLET_PATTERN.sub("", raw).strip()
        name = QUANTITY_PREFIX_PATTERN.sub("", name)
        name = TRAILING_LEADER_PATTERN.sub("", name)
        return name.strip()

    @staticmethod
    def _format_price(price: Decimal) -> str:
        return f"{price.quantize(Decimal('0.01'))}"


def parse_receipt_lines(lines: Iterable[str], max_price: int | Decimal = DEFAULT_MAX_PRICE) -> list[ScannedItem]:
    """
    Parse OCR receipt lines into candidate items.

    Convenience wrapper around ReceiptLineParser.
    """
    return ReceiptLineParser(max_price=max_price).parse(lines)
