# settings/logging_setup.py
from __future__ import annotations
import logging
import os
import platform
import sys
from datetime import datetime
from pathlib import Path
from contextlib import contextmanager


def setup_logging(log_dir: Path, enable_logs: bool, debug: bool = False) -> Path | None:
    if not enable_logs:
        return None
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = log_dir / f"{ts}.log"

    fmt = "%(asctime)s [%(levelname)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    handler = logging.FileHandler(logfile, encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.addHandler(handler)

    logging.info("=== Contact book start ===")
    logging.info("Python exe : %s", sys.executable)
    logging.info("Python ver : %s", sys.version.replace("\n", " "))
    logging.info("Platform   : %s %s (%s)", platform.system(), platform.release(), platform.machine())
    return logfile


def flog(msg: str, level: int = logging.INFO) -> None:
    if logging.getLogger().handlers:
        logging.log(level, msg)


def teardown_logging(logfile: Path, level: int | None = None) -> None:
    root = logging.getLogger()
    if level is not None:
        root.setLevel(level)
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(logfile):
            root.removeHandler(handler)
            handler.close()


@contextmanager
def cli_logging(log_dir: Path, enable_logs: bool, debug: bool = False):
    prev_level = logging.getLogger().level
    logfile = setup_logging(log_dir, enable_logs=enable_logs, debug=debug)
    try:
        yield logfile
    finally:
        if enable_logs and logfile is not None:
            flog(f"Log saved to: {logfile}")
            teardown_logging(logfile, level=prev_level)
