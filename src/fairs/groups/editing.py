#!/usr/bin/env python3
"""
Group Editing Operations

Pure functions that return an updated copy of a group. This is the boundary
where user-entered strings become domain values: malformed prices and tips
raise InvalidAmountError here, so the allocation engine only ever sees
validated amounts.

Deleting an item leaves any references to it in people's selections in place;
the allocation engine treats such dangling references as contributing zero.
"""

import uuid
from dataclasses import replace
from datetime import date
from typing import Iterable

from ..core.currency import InvalidAmountError, parse_decimal, parse_percentage
from ..core.money import Money
from ..receipts.parser import ScannedItem
from .models import Group, Item, Person, SplitMode, TipMode, TipSpec


def _new_id() -> str:
    return uuid.uuid4().hex


def _clean_name(name: str, what: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValueError(f"{what} name must not be blank")
    return cleaned


def _item_index(group: Group, item_id: str) -> int:
    for index, item in enumerate(group.items):
        if item.id == item_id:
            return index
    raise KeyError(f"No item {item_id!r} in group {group.id!r}")


def _person_index(group: Group, person_id: str) -> int:
    for index, person in enumerate(group.people):
        if person.id == person_id:
            return index
    raise KeyError(f"No person {person_id!r} in group {group.id!r}")


def _parse_price(price: str) -> Money:
    """Parse a user-entered item price; prices are never negative."""
    money = Money.from_amount(price)
    if money.to_cents() < 0:
        raise InvalidAmountError(f"Price must not be negative: {price!r}")
    return money


def _replace_at(entries: tuple, index: int, entry: object) -> tuple:
    return entries[:index] + (entry,) + entries[index + 1 :]


def new_group(name: str, group_date: str | None = None, emoji: str = "beer") -> Group:
    """
    Create an empty group.

    Args:
        name: Display name, e.g. "Friday dinner"
        group_date: Display date string (default: today, ISO format)
        emoji: Icon name shown next to the group

    Returns:
        Group with no items or people, no tip, split mode equal
    """
    return Group(
        id=_new_id(),
        name=_clean_name(name, "Group"),
        date=group_date if group_date is not None else date.today().isoformat(),
        emoji=emoji,
    )


def rename_group(group: Group, name: str, emoji: str | None = None) -> Group:
    return replace(group, name=_clean_name(name, "Group"), emoji=emoji or group.emoji)


def add_item(group: Group, name: str, price: str) -> Group:
    """
    Add an item with quantity 1.

    Raises:
        ValueError: If the name is blank
        InvalidAmountError: If the price is not a valid, non-negative amount
    """
    item = Item(id=_new_id(), name=_clean_name(name, "Item"), price=_parse_price(price))
    return replace(group, items=group.items + (item,))


def edit_item(group: Group, item_id: str, name: str, price: str) -> Group:
    """Change an item's name and price, keeping its id and quantity."""
    index = _item_index(group, item_id)
    updated = replace(group.items[index], name=_clean_name(name, "Item"), price=_parse_price(price))
    return replace(group, items=_replace_at(group.items, index, updated))


def set_item_multiplier(group: Group, item_id: str, multiplier: int) -> Group:
    """Set an item's quantity; values below 1 clamp to 1."""
    index = _item_index(group, item_id)
    updated = replace(group.items[index], multiplier=max(1, int(multiplier)))
    return replace(group, items=_replace_at(group.items, index, updated))


def delete_item(group: Group, item_id: str) -> Group:
    _item_index(group, item_id)
    return replace(group, items=tuple(item for item in group.items if item.id != item_id))


def add_person(group: Group, name: str) -> Group:
    person = Person(id=_new_id(), name=_clean_name(name, "Person"))
    return replace(group, people=group.people + (person,))


def rename_person(group: Group, person_id: str, name: str) -> Group:
    index = _person_index(group, person_id)
    updated = replace(group.people[index], name=_clean_name(name, "Person"))
    return replace(group, people=_replace_at(group.people, index, updated))


def delete_person(group: Group, person_id: str) -> Group:
    _person_index(group, person_id)
    return replace(group, people=tuple(person for person in group.people if person.id != person_id))


def toggle_person_paid(group: Group, person_id: str) -> Group:
    index = _person_index(group, person_id)
    person = group.people[index]
    return replace(group, people=_replace_at(group.people, index, replace(person, is_paid=not person.is_paid)))


def toggle_assignment(group: Group, person_id: str, ref: str) -> Group:
    """
    Add or remove an item id (or the tip sentinel) from a person's selection.

    Newly selected references are appended, so selection order is preserved.
    """
    index = _person_index(group, person_id)
    person = group.people[index]
    if person.has_selected(ref):
        selected = tuple(r for r in person.selected_items if r != ref)
    else:
        selected = person.selected_items + (ref,)
    return replace(group, people=_replace_at(group.people, index, replace(person, selected_items=selected)))


def set_tip(group: Group, value: str, mode: TipMode | str) -> Group:
    """
    Set the tip value and mode.

    An empty value clears the tip. Anything else must be numeric; percent
    values may carry a trailing "%", which is dropped.

    Raises:
        InvalidAmountError: If a non-empty value is not numeric
    """
    tip_mode = mode if isinstance(mode, TipMode) else TipMode(mode)
    value = value.strip()
    if tip_mode == TipMode.PERCENT:
        value = value.rstrip("%").strip()
        if value:
            parse_percentage(value)
    elif value:
        parse_decimal(value)
    return replace(group, tip=TipSpec(value=value, mode=tip_mode))


def set_split_mode(group: Group, mode: SplitMode | str) -> Group:
    split_mode = mode if isinstance(mode, SplitMode) else SplitMode(mode)
    return replace(group, split_mode=split_mode)


def accept_scanned_items(group: Group, scanned: Iterable[ScannedItem]) -> Group:
    """
    Turn reviewed receipt candidates into items.

    Only candidates still marked selected are added, in order, each with a
    fresh id. Candidates with an unusable or negative price are skipped.
    """
    new_items = []
    for candidate in scanned:
        if not candidate.selected or not candidate.name.strip():
            continue
        try:
            price = _parse_price(candidate.price)
        except InvalidAmountError:
            continue
        new_items.append(Item(id=_new_id(), name=candidate.name.strip(), price=price))
    return replace(group, items=group.items + tuple(new_items))

