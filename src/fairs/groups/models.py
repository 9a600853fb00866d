#!/usr/bin/env python3
"""
Group Domain Models

Type-safe models for a bill-splitting group: its items, people, and tip.
Models are immutable; editing operations return new instances.

The dict form of each model matches the persisted group format, so
``Group.from_dict(group.to_dict()) == group`` holds for any group.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..core.money import Money

TIP_REF = "tip"


class TipMode(Enum):
    """How a tip value is interpreted."""

    MONEY = "money"
    PERCENT = "percent"

    @classmethod
    def parse(cls, value: str | None) -> "TipMode":
        """Parse a stored mode; anything other than 'percent' is money."""
        return cls.PERCENT if value == cls.PERCENT.value else cls.MONEY


class SplitMode(Enum):
    """How the group total is divided."""

    EQUAL = "equal"
    SEPARATE = "separate"

    @classmethod
    def parse(cls, value: str | None) -> "SplitMode":
        """Parse a stored mode; anything other than 'separate' is equal."""
        return cls.SEPARATE if value == cls.SEPARATE.value else cls.EQUAL


def normalize_multiplier(value: Any) -> int:
    """
    Coerce a stored quantity into a positive integer.

    Missing, non-integer and non-positive values count as 1.
    """
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        return value if value > 0 else 1
    if isinstance(value, str) and value.strip().isdigit():
        parsed = int(value.strip())
        return parsed if parsed > 0 else 1
    return 1


@dataclass(frozen=True)
class Item:
    """A single priced line on the bill."""

    id: str
    name: str
    price: Money
    multiplier: int = 1

    @property
    def line_cost(self) -> Money:
        """Effective cost of the line: price times quantity."""
        return self.price * normalize_multiplier(self.multiplier)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """
        Create Item from its stored dict.

        Prices are read permissively: an unparseable price counts as zero.
        """
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            price=Money.from_amount_or_zero(data.get("price")),
            multiplier=normalize_multiplier(data.get("multiplier", 1)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to stored dict; price is a fixed two-decimal string."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price.to_amount_str(),
            "multiplier": self.multiplier,
        }


@dataclass(frozen=True)
class Person:
    """A participant and the item ids (or the tip sentinel) they share."""

    id: str
    name: str
    selected_items: tuple[str, ...] = ()
    is_paid: bool = False

    def has_selected(self, ref: str) -> bool:
        """Check whether this person shares an item id or the tip."""
        return ref in self.selected_items

    @property
    def shares_tip(self) -> bool:
        return TIP_REF in self.selected_items

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Person":
        """Create Person from its stored dict, dropping duplicate references."""
        refs = [str(ref) for ref in data.get("selectedItems", [])]
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            selected_items=tuple(dict.fromkeys(refs)),
            is_paid=bool(data.get("isPaid", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to stored dict."""
        return {
            "id": self.id,
            "name": self.name,
            "selectedItems": list(self.selected_items),
            "isPaid": self.is_paid,
        }


@dataclass(frozen=True)
class TipSpec:
    """
    Tip configuration as entered by the user.

    ``value`` is kept as the raw decimal string; an empty or unparseable
    value means no tip.
    """

    value: str = ""
    mode: TipMode = TipMode.MONEY


@dataclass(frozen=True)
class Group:
    """A single bill-splitting session."""

    id: str
    name: str
    date: str = ""
    emoji: str = "beer"
    items: tuple[Item, ...] = ()
    people: tuple[Person, ...] = ()
    tip: TipSpec = field(default_factory=TipSpec)
    split_mode: SplitMode = SplitMode.EQUAL

    def find_item(self, item_id: str) -> Item | None:
        """Look up an item by id; None if it was deleted."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def find_person(self, person_id: str) -> Person | None:
        """Look up a person by id."""
        for person in self.people:
            if person.id == person_id:
                return person
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Group":
        """
        Create Group from its stored dict.

        Args:
            data: Dictionary in the persisted group format
                (tipValue/tipMode/splitMode at the top level)

        Returns:
            Group instance
        """
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            date=data.get("date", ""),
            emoji=data.get("emoji") or "beer",
            items=tuple(Item.from_dict(item) for item in data.get("items", [])),
            people=tuple(Person.from_dict(person) for person in data.get("people", [])),
            tip=TipSpec(
                value=str(data.get("tipValue") or ""),
                mode=TipMode.parse(data.get("tipMode")),
            ),
            split_mode=SplitMode.parse(data.get("splitMode")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to stored dict."""
        return {
            "id": self.id,
            "name": self.name,
            "emoji": self.emoji,
            "date": self.date,
            "items": [item.to_dict() for item in self.items],
            "people": [person.to_dict() for person in self.people],
            "tipValue": self.tip.value,
            "tipMode": self.tip.mode.value,
            "splitMode": self.split_mode.value,
        }
