#!/usr/bin/env python3
"""
Group Summary Export

Plain-text rendering of a group for sharing (messages, notes, email).
"""

from .allocation import compute_allocation, selected_item_names
from .models import Group, TipMode

RULE = "-" * 40
FOOTER = "# Exported from Fairs"


def format_group_summary(group: Group, currency_symbol: str = "$") -> str:
    """
    Render a group as shareable text.

    Lists items with their line cost, the subtotal, tip and total, then each
    person's amount, paid status and selected items.

    Args:
        group: Group to render
        currency_symbol: Symbol prefixed to every amount

    Returns:
        Multi-line summary text
    """
    allocation = compute_allocation(group)

    def fmt(money) -> str:
        return money.format(currency_symbol)

    lines = [f"{group.name}  -  ({group.date})", "", "ITEMS:", RULE]

    if group.items:
        for item in group.items:
            if item.multiplier > 1:
                lines.append(f"{item.name} (×{item.multiplier})  {fmt(item.line_cost)}")
            else:
                lines.append(f"{item.name}  {fmt(item.price)}")

        lines.append(RULE)
        lines.append(f"| Subtotal: {fmt(allocation.subtotal)}")
        if allocation.tip_amount.to_cents() > 0:
            if group.tip.mode == TipMode.PERCENT:
                lines.append(f"| Tip ({group.tip.value.rstrip('%')}%): {fmt(allocation.tip_amount)}")
            else:
                lines.append(f"| Tip: {fmt(allocation.tip_amount)}")
        lines.append(f"TOTAL: {fmt(allocation.total)}")
    else:
        lines.append("No items added yet")

    if group.people:
        lines.append("")
        lines.append("PEOPLE:")
        for person in group.people:
            status = "✓ PAID" if person.is_paid else "UNPAID"
            lines.append(f"| {person.name} - {fmt(allocation.per_person[person.id])} [{status}]")
            names = selected_item_names(person, group.items)
            if names:
                lines.append(f"|    Items: {', '.join(names)}")

    lines.append("")
    lines.append(FOOTER)
    return "\n".join(lines)
