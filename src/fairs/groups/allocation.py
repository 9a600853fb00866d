#!/usr/bin/env python3
"""
Bill Allocation Engine

Turns a group's items, tip and per-person assignments into amounts owed.

Every function here is a pure function of its inputs and never raises for
any domain value:
- Unparseable tip values count as no tip
- References to deleted items contribute nothing
- Amounts shared by nobody contribute nothing (no division by zero)

Allocation is equal-split-per-item: each item's line cost is divided only
among the people who selected that item, and the tip only among the people
who selected the tip sentinel. Shares are integer cents with remainder cents
going to the earliest sharers in group order, so the shares of an item always
add back up to its line cost exactly.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Sequence

from ..core.currency import InvalidAmountError, parse_decimal, parse_percentage
from ..core.money import Money
from .models import TIP_REF, Group, Item, Person, TipMode, TipSpec


@dataclass(frozen=True)
class TipAssignmentStatus:
    """Whether a non-zero tip has been given to at least one person."""

    assigned: bool
    count: int


@dataclass(frozen=True)
class Allocation:
    """Result of allocating a group's bill."""

    subtotal: Money
    tip_amount: Money
    total: Money
    per_person: dict[str, Money] = field(default_factory=dict)
    total_assigned: Money = field(default_factory=Money.zero)
    balanced: bool = True
    equal_share: Money = field(default_factory=Money.zero)

    @property
    def difference(self) -> Money:
        """Unassigned remainder: total minus what people have been given."""
        return self.total - self.total_assigned

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict with amounts as decimal strings."""
        return {
            "subtotal": self.subtotal.to_amount_str(),
            "tipAmount": self.tip_amount.to_amount_str(),
            "total": self.total.to_amount_str(),
            "perPerson": {pid: amount.to_amount_str() for pid, amount in self.per_person.items()},
            "totalAssigned": self.total_assigned.to_amount_str(),
            "difference": self.difference.to_amount_str(),
            "balanced": self.balanced,
            "equalShare": self.equal_share.to_amount_str(),
        }


def _tip_value(tip: TipSpec) -> Decimal | None:
    """Parse a tip value for its mode; None if it is empty or unparseable."""
    parse = parse_percentage if tip.mode == TipMode.PERCENT else parse_decimal
    try:
        return parse(tip.value)
    except InvalidAmountError:
        return None


def subtotal(items: Iterable[Item]) -> Money:
    """Sum of price times quantity over all items."""
    result = Money.zero()
    for item in items:
        result += item.line_cost
    return result


def tip_amount(subtotal_amount: Money, tip: TipSpec) -> Money:
    """
    Compute the tip for a subtotal.

    Percent tips are ``subtotal * value / 100`` rounded half-up to the cent;
    money tips are the value itself. Negative values are accepted and reduce
    the total.
    """
    value = _tip_value(tip)
    if value is None:
        return Money.zero()

    if tip.mode == TipMode.PERCENT:
        return Money.from_decimal(subtotal_amount.to_decimal() * value / 100)
    return Money.from_decimal(value)


def total(items: Sequence[Item], tip: TipSpec) -> Money:
    """Subtotal plus tip."""
    items_subtotal = subtotal(items)
    return items_subtotal + tip_amount(items_subtotal, tip)


def _share_for(person: Person, ref: str, amount: Money, people: Sequence[Person]) -> Money:
    """This person's cut of an amount shared by everyone who selected ``ref``."""
    sharer_ids = [p.id for p in people if p.has_selected(ref)]
    if person.id not in sharer_ids:
        sharer_ids.append(person.id)

    shares = amount.split(len(sharer_ids))
    return shares[sharer_ids.index(person.id)]


def person_amount(
    person: Person,
    items: Sequence[Item],
    people: Sequence[Person],
    tip: TipSpec,
) -> Money:
    """
    Amount one person owes.

    Args:
        person: The person to compute for
        items: All items in the group
        people: All people in the group (used to count sharers)
        tip: The group's tip configuration

    Returns:
        Sum of the person's share of each selected item and of the tip
    """
    items_by_id = {item.id: item for item in items}
    amount = Money.zero()

    for ref in person.selected_items:
        if ref == TIP_REF:
            if not any(p.shares_tip for p in people):
                continue
            amount += _share_for(person, ref, tip_amount(subtotal(items), tip), people)
        else:
            item = items_by_id.get(ref)
            if item is None:
                # Item was deleted after being assigned
                continue
            amount += _share_for(person, ref, item.line_cost, people)

    return amount


def total_assigned(people: Sequence[Person], items: Sequence[Item], tip: TipSpec) -> Money:
    """Sum of every person's amount."""
    result = Money.zero()
    for person in people:
        result += person_amount(person, items, people, tip)
    return result


def is_balanced(total_amount: Money, assigned_amount: Money) -> bool:
    """Exact comparison; amounts are whole cents so no epsilon is needed."""
    return total_amount == assigned_amount


def equal_split_per_person(total_amount: Money, headcount: int | None) -> Money:
    """
    Per-head share when the total is divided evenly by a headcount.

    Rounded down to the cent; zero when the headcount is absent or <= 0.
    Use ``equal_split_shares`` when the shares must add up to the total.
    """
    if not headcount or headcount <= 0:
        return Money.zero()
    return Money.from_cents(total_amount.to_cents() // headcount)


def equal_split_shares(total_amount: Money, headcount: int | None) -> list[Money]:
    """All shares of an even split; leading shares absorb remainder cents."""
    if not headcount or headcount <= 0:
        return []
    return total_amount.split(headcount)


def tip_assignment_status(group: Group) -> TipAssignmentStatus:
    """
    Report whether a positive tip has been given to anyone.

    A missing, unparseable or non-positive tip needs no assignment.
    """
    value = _tip_value(group.tip)
    if value is None or value <= 0:
        return TipAssignmentStatus(assigned=True, count=0)

    count = sum(1 for person in group.people if person.shares_tip)
    return TipAssignmentStatus(assigned=count > 0, count=count)


def selected_item_names(person: Person, items: Sequence[Item]) -> list[str]:
    """Display names of what a person selected; deleted items are skipped."""
    items_by_id = {item.id: item for item in items}
    names = []
    for ref in person.selected_items:
        if ref == TIP_REF:
            names.append("Tip")
        elif ref in items_by_id:
            names.append(items_by_id[ref].name)
    return names


def compute_allocation(group: Group) -> Allocation:
    """
    Allocate a group's bill.

    A group with no people yet is reported as balanced.

    Args:
        group: Point-in-time snapshot of the group

    Returns:
        Allocation with totals, per-person amounts and balance status
    """
    items_subtotal = subtotal(group.items)
    tip = tip_amount(items_subtotal, group.tip)
    grand_total = items_subtotal + tip

    per_person = {
        person.id: person_amount(person, group.items, group.people, group.tip) for person in group.people
    }
    assigned = Money.zero()
    for amount in per_person.values():
        assigned += amount

    return Allocation(
        subtotal=items_subtotal,
        tip_amount=tip,
        total=grand_total,
        per_person=per_person,
        total_assigned=assigned,
        balanced=not group.people or is_balanced(grand_total, assigned),
        equal_share=equal_split_per_person(grand_total, len(group.people)),
    )
