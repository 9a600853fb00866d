#!/usr/bin/env python3
"""
Bill CLI - Allocation and Summary for a Group File

A group file is either a single stored group (as kept in groups.json) or a
backup file; for a backup holding several groups, pick one with --group-id.
"""

from pathlib import Path
from typing import Any

import click

from ..core.currency import get_currency
from ..core.json_utils import format_json, read_json
from ..groups.allocation import compute_allocation, tip_assignment_status
from ..groups.datastore import BackupFormatError, import_backup
from ..groups.models import Group, SplitMode
from ..groups.summary import format_group_summary


def load_group_file(path: Path, group_id: str | None = None) -> Group:
    """
    Load one group from a group or backup file.

    Raises:
        click.ClickException: If the file is unreadable or the group is ambiguous/missing
    """
    try:
        data: Any = read_json(path)
    except ValueError as e:
        raise click.ClickException(f"Invalid JSON in {path}: {e}")

    if isinstance(data, dict) and "groups" in data:
        try:
            groups = import_backup(data)
        except BackupFormatError as e:
            raise click.ClickException(str(e))
    elif isinstance(data, dict):
        try:
            groups = [Group.from_dict(data)]
        except (KeyError, TypeError, AttributeError) as e:
            raise click.ClickException(f"Invalid group in {path}: {e}")
    else:
        raise click.ClickException(f"{path} does not contain a group")

    if group_id:
        for group in groups:
            if group.id == group_id:
                return group
        raise click.ClickException(f"No group with id {group_id} in {path}")

    if len(groups) != 1:
        raise click.ClickException(f"{path} holds {len(groups)} groups; choose one with --group-id")
    return groups[0]


def _currency_symbol(ctx: click.Context, currency: str | None) -> str:
    if currency:
        return get_currency(currency).symbol
    return ctx.obj["config"].currency_symbol


@click.command()
@click.argument("group_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--group-id", help="Group to use when the file is a backup with several groups")
@click.option("--currency", help="Currency code for display (default: configured currency)")
@click.option("--json", "as_json", is_flag=True, help="Print the allocation as JSON")
@click.pass_context
def allocate(
    ctx: click.Context, group_file: Path, group_id: str | None, currency: str | None, as_json: bool
) -> None:
    """
    Show subtotal, tip, total and what each person owes.

    Examples:
      fairs allocate dinner.json
      fairs allocate backup.json --group-id 1700000000000 --currency USD
    """
    group = load_group_file(group_file, group_id)
    allocation = compute_allocation(group)

    if as_json:
        click.echo(format_json(allocation.to_dict()))
        return

    symbol = _currency_symbol(ctx, currency)

    click.echo(f"{group.name} ({group.date})")
    click.echo("=" * 40)
    click.echo(f"Subtotal: {allocation.subtotal.format(symbol)}")
    click.echo(f"Tip:      {allocation.tip_amount.format(symbol)}")
    click.echo(f"Total:    {allocation.total.format(symbol)}")

    if group.split_mode == SplitMode.EQUAL:
        click.echo(f"\nSplit equally between {len(group.people)} people:")
        click.echo(f"  Per person: {allocation.equal_share.format(symbol)}")

    if group.people:
        click.echo("\nPer person:")
        for person in group.people:
            paid = " (paid)" if person.is_paid else ""
            click.echo(f"  {person.name}: {allocation.per_person[person.id].format(symbol)}{paid}")

        if allocation.balanced:
            click.echo("\nBalanced: everything is assigned.")
        else:
            click.echo(f"\nNot balanced! Difference: {allocation.difference.abs().format(symbol)}")

        tip_status = tip_assignment_status(group)
        if not tip_status.assigned:
            click.echo("Tip is not assigned to anyone.")


@click.command()
@click.argument("group_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--group-id", help="Group to use when the file is a backup with several groups")
@click.option("--currency", help="Currency code for display (default: configured currency)")
@click.pass_context
def summary(ctx: click.Context, group_file: Path, group_id: str | None, currency: str | None) -> None:
    """
    Print the shareable text summary of a group.

    Example:
      fairs summary dinner.json
    """
    group = load_group_file(group_file, group_id)
    click.echo(format_group_summary(group, _currency_symbol(ctx, currency)))
