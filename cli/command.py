# cli/command.py
from __future__ import annotations
import logging

from adapters.excel_io import default_export_path, resolve_xlsx
from core.contacts import ContactStore, RemoveOutcome
from core.errors import ContactStoreError
from core.export import export_contacts
from settings.config import AppConfig
from settings.logging_setup import cli_logging, flog
from cli.ui import cprint, print_contact, print_contacts, print_not_found, print_store_error

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_FAILURE = 2


def _list(store: ContactStore, args, cfg: AppConfig) -> int:
    print_contacts(store.list())
    return EXIT_OK


def _get(store: ContactStore, args, cfg: AppConfig) -> int:
    contact = store.find_by_id(args.id)
    if contact is None:
        print_not_found(args.id)
        return EXIT_NOT_FOUND
    print_contact(contact, title=f"Contact by id {args.id}:")
    return EXIT_OK


def _add(store: ContactStore, args, cfg: AppConfig) -> int:
    contact = store.add(args.name, args.email, args.phone)
    print_contact(contact, title="Contact has been added.")
    return EXIT_OK


def _remove(store: ContactStore, args, cfg: AppConfig) -> int:
    if store.remove_by_id(args.id) is RemoveOutcome.NOT_FOUND:
        print_not_found(args.id)
        return EXIT_NOT_FOUND
    cprint(f"Contact with id {args.id} has been deleted.", style="bold green")
    return EXIT_OK


def _init(store: ContactStore, args, cfg: AppConfig) -> int:
    if not store.init(force=args.force):
        cprint(f"{store.path} already exists (use --force to overwrite).", style="yellow")
        return EXIT_FAILURE
    cprint(f"Created empty contacts file: {store.path}", style="green")
    return EXIT_OK


def _export(store: ContactStore, args, cfg: AppConfig) -> int:
    try:
        out_path = resolve_xlsx(args.output) if args.output else default_export_path(cfg.exports_dir)
    except ValueError as e:
        cprint(f"Export error: {e}", style="bold red")
        return EXIT_FAILURE

    contacts = store.list()
    try:
        rows = export_contacts(contacts, out_path)
    except OSError as e:
        flog(f"Export error: {out_path}: {e}", level=logging.ERROR)
        cprint(f"Export error: {out_path}: {e}", style="bold red")
        return EXIT_FAILURE
    cprint(f"Exported {rows} contact(s) to {out_path}", style="green")
    return EXIT_OK


ACTIONS = {
    "list": _list,
    "get": _get,
    "add": _add,
    "remove": _remove,
    "init": _init,
    "export": _export,
}


def run_command(args, cfg: AppConfig) -> int:
    """
    Dispatch one subcommand against the configured contacts file.
    Returns process-like exit code (0=ok, 1=not found, 2=store failure).
    """
    with cli_logging(cfg.logs_dir, enable_logs=args.logs, debug=args.debug) as logfile:
        flog(f"Action: {args.action} | file: {cfg.contacts_json}")
        store = ContactStore(cfg.contacts_json)
        try:
            code = ACTIONS[args.action](store, args, cfg)
        except ContactStoreError as e:
            flog(f"[FAIL] {args.action}: {e.kind}: {e}", level=logging.ERROR)
            print_store_error(e)
            code = EXIT_FAILURE

        flog(f"=== {args.action} end (exit {code}) ===")
        if args.debug and logfile is not None:
            cprint(f"(log: {logfile})")
        return code
