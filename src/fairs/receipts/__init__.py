"""
Receipt Scanning Package

Converts OCR text lines from a receipt photo into candidate items for the
user to review. Text recognition itself happens on the device; this package
only consumes its line output.
"""

from .parser import ReceiptLineParser, ScannedItem, parse_receipt_lines

__all__ = [
    "ReceiptLineParser",
    "ScannedItem",
    "parse_receipt_lines",
]
