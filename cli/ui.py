# cli/ui.py
from __future__ import annotations
from typing import List

from rich.console import Console
from rich.table import Table
from rich import box

from core.contacts import Contact
from core.errors import ContactStoreError
from settings.config import AppConfig

console = Console(highlight=False, markup=False)


def cprint(msg: str, style: str | None = None) -> None:
    # single place to control console output
    console.print(msg, style=style, soft_wrap=True)


def _contacts_table(title: str, contacts: List[Contact]) -> Table:
    table = Table(title=title, title_style="bold green", box=box.ROUNDED, header_style="bold")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Phone")
    for c in contacts:
        table.add_row(c.id, c.name, c.email, c.phone)
    return table


def print_contacts(contacts: List[Contact]) -> None:
    if not contacts:
        cprint("Empty contacts list.", style="yellow")
        return
    console.print(_contacts_table("List of contacts:", contacts))


def print_contact(contact: Contact, title: str) -> None:
    table = Table(title=title, title_style="bold green", box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in contact.to_dict().items():
        table.add_row(key, value)
    console.print(table)


def print_not_found(contact_id: str) -> None:
    cprint(f"Contact with id {contact_id} not exist!", style="red")


def print_store_error(err: ContactStoreError) -> None:
    cprint(f"{err.kind}: {err.path}: {err.reason}", style="bold red")


def print_config(cfg: AppConfig) -> None:
    for line in cfg.pretty_lines():
        cprint(line)
