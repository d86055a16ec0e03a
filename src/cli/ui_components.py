"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same messages/tables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.domain.models import ImportRecord

QUICKSTART_URL = "https://registry.terraform.io/providers/auth0/auth0/latest/docs/guides/quickstart"


def print_generation_success(console: Console) -> None:
    console.print("[green]Terraform config files generated successfully.[/green]")
    console.print(
        f"Follow this [link={QUICKSTART_URL}]quickstart[/link] ({QUICKSTART_URL}) "
        "to go through setting up an Auth0 application for the provider to "
        "authenticate against and manage resources.",
        soft_wrap=True,
    )


def print_error(console: Console, error: BaseException) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True, highlight=False)


def build_import_table(records: Sequence[ImportRecord], paths: Sequence[Path] = ()) -> Table:
    """Summary of exported resources, shown in verbose mode."""

    table = Table(title="Terraform Imports")
    table.add_column("Resource", style="cyan", no_wrap=True)
    table.add_column("Import ID", style="magenta")
    for record in records:
        table.add_row(record.resource_name, record.import_id)
    if paths:
        table.caption = ", ".join(str(p) for p in paths)
    return table
