"""
Fairs - Expense Splitting

Split a shared bill between friends: add priced items (typed in or scanned
from a receipt), assign them to people, add a tip, and see who owes what.

Domain Packages:
- core: Currency handling, Money type, configuration
- groups: Group models, allocation engine, editing, summary export, storage
- receipts: OCR receipt line parsing
- cli: Command-line interface

Example Usage:
    from fairs.groups import Group, compute_allocation
    from fairs.receipts import parse_receipt_lines

    allocation = compute_allocation(Group.from_dict(data))
    print(allocation.total, allocation.balanced)
"""

__version__ = "0.1.0"
__author__ = "Fairs Developers"

from .core.config import Environment, get_config
from .core.money import Money
from .groups.allocation import Allocation, compute_allocation
from .groups.models import Group, Item, Person, TipSpec
from .receipts.parser import ScannedItem, parse_receipt_lines

__all__ = [
    "Allocation",
    "Environment",
    "Group",
    "Item",
    "Money",
    "Person",
    "ScannedItem",
    "TipSpec",
    "compute_allocation",
    "get_config",
    "parse_receipt_lines",
]
