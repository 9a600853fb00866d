#!/usr/bin/env python3
"""
Scan CLI - Receipt Text to Candidate Items

Reads OCR output (one recognized line per text line) and prints the items
the receipt parser found.
"""

from pathlib import Path

import click

from ..core.json_utils import format_json
from ..receipts.parser import ReceiptLineParser


@click.command()
@click.argument("lines_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print candidates as JSON")
@click.pass_context
def scan(ctx: click.Context, lines_file: Path, as_json: bool) -> None:
    """
    Parse receipt text lines into candidate items.

    Examples:
      fairs scan receipt.txt
      fairs scan receipt.txt --json
    """
    config = ctx.obj["config"]
    lines = lines_file.read_text(encoding="utf-8").splitlines()

    parser = ReceiptLineParser(max_price=config.scan.max_price)
    candidates = parser.parse(lines)

    if as_json:
        click.echo(format_json([candidate.to_dict() for candidate in candidates]))
        return

    if not candidates:
        click.echo("No items found on receipt.")
        return

    click.echo(f"Found {len(candidates)} items:")
    for candidate in candidates:
        click.echo(f"  {candidate.name}  {config.currency_symbol}{candidate.price}")
