#!/usr/bin/env python3
"""
Groups CLI - Stored Group Collection

List stored groups and move them in and out of backup files.
"""

from pathlib import Path

import click

from ..groups.allocation import compute_allocation
from ..groups.datastore import BackupFormatError, GroupDataStore, read_backup, write_backup


def _store(ctx: click.Context) -> GroupDataStore:
    return GroupDataStore(ctx.obj["config"].data_dir)


@click.group()
def groups() -> None:
    """Stored group commands."""
    pass


@groups.command(name="list")
@click.pass_context
def list_groups(ctx: click.Context) -> None:
    """
    List stored groups with their totals.

    Example:
      fairs groups list
    """
    store = _store(ctx)
    try:
        stored = store.load_groups()
    except ValueError as e:
        raise click.ClickException(str(e))

    if not stored:
        click.echo("No groups saved.")
        return

    symbol = ctx.obj["config"].currency_symbol
    for group in stored:
        allocation = compute_allocation(group)
        click.echo(f"{group.name} ({group.date})  {allocation.total.format(symbol)}  [{group.id}]")
    click.echo(f"\n{store.summary_text()}")


@groups.command(name="export")
@click.argument("backup_file", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def export_groups(ctx: click.Context, backup_file: Path) -> None:
    """
    Write all stored groups to a backup file.

    Example:
      fairs groups export fairs-backup.json
    """
    try:
        stored = _store(ctx).load_groups()
    except ValueError as e:
        raise click.ClickException(str(e))

    write_backup(backup_file, stored)
    click.echo(f"Exported {len(stored)} groups to {backup_file}")


@groups.command(name="import")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--replace", is_flag=True, help="Replace stored groups instead of merging")
@click.pass_context
def import_groups(ctx: click.Context, backup_file: Path, replace: bool) -> None:
    """
    Load groups from a backup file into the store.

    Groups are merged by id (imported groups win) unless --replace is given.

    Example:
      fairs groups import fairs-backup.json
    """
    try:
        imported = read_backup(backup_file)
    except BackupFormatError as e:
        raise click.ClickException(str(e))

    store = _store(ctx)
    if replace:
        store.save(imported)
    else:
        for group in imported:
            store.upsert_group(group)

    click.echo(f"Imported {len(imported)} groups from {backup_file}")
