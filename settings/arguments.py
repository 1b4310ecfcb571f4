# settings/arguments.py
from __future__ import annotations
import argparse
from typing import Sequence


def _str2bool(v: str) -> bool:
    s = v.strip().lower()
    if s in ("1", "true", "t", "yes", "y", "on"):
        return True
    if s in ("0", "false", "f", "no", "n", "off"):
        return False
    raise argparse.ArgumentTypeError("Boolean value expected (true/false).")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="contacts", description="Manage contacts stored in a JSON file.")
    p.add_argument(
        "-j",
        "--json",
        dest="json_path",
        help="Path to contacts.json (defaults to config / CONTACTS_JSON)",
    )
    p.add_argument("-d", "--debug", type=_str2bool, default=False)
    p.add_argument("-l", "--logs", type=_str2bool, default=True)
    p.add_argument(
        "--show-config",
        action="store_true",
        help="print resolved config paths and exit",
    )

    sub = p.add_subparsers(dest="action", metavar="ACTION")

    sub.add_parser("list", help="List all contacts")

    get = sub.add_parser("get", help="Show one contact by id")
    get.add_argument("id")

    add = sub.add_parser("add", help="Add a contact")
    add.add_argument("name")
    add.add_argument("email")
    add.add_argument("phone")

    remove = sub.add_parser("remove", help="Remove a contact by id")
    remove.add_argument("id")

    init = sub.add_parser("init", help="Create an empty contacts file")
    init.add_argument("-f", "--force", action="store_true", help="overwrite an existing file")

    export = sub.add_parser("export", help="Export contacts to an .xlsx workbook")
    export.add_argument("-o", "--output", help="output .xlsx path (defaults to exports dir)")

    return p


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.show_config and args.action is None:
        parser.error("an action is required (list, get, add, remove, init, export)")
    return args
