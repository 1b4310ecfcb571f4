# cli/main.py
from __future__ import annotations
from typing import Sequence

from settings.arguments import parse_args
from settings.config import AppConfig
from cli.ui import print_config
from cli.command import run_command


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    cfg = AppConfig.from_args(args)

    if args.show_config:
        print_config(cfg)
        return

    exit_code = run_command(args, cfg)
    if exit_code != 0:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
