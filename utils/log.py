"""
Color-coded logging utilities for the catalog tooling.

Provides consistent, color-coded console output for the database CLI and the
API server. Uses colorama for cross-platform terminal color support.
"""

import datetime
import logging
import os
import sys

from colorama import Fore, Style, init

# Initialize colorama (auto-reset after each print)
init(autoreset=True)


# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------

class C:
    """Color shortcuts for console output."""
    HEADER = Fore.CYAN + Style.BRIGHT
    STEP = Fore.BLUE + Style.BRIGHT
    OK = Fore.GREEN + Style.BRIGHT
    WARN = Fore.YELLOW + Style.BRIGHT
    ERR = Fore.RED + Style.BRIGHT
    INFO = Fore.WHITE
    DIM = Style.DIM
    VALUE = Fore.GREEN
    RESET = Style.RESET_ALL


def _ts() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------

def header(msg: str) -> None:
    """Banner that opens a CLI run (e.g. "FIREARMS CATALOG: Database Setup")."""
    print(f"\n{C.HEADER}{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}{C.RESET}\n")


def step(msg: str) -> None:
    """A setup stage starting: opening the database, seeding."""
    print(f"{C.STEP}[{_ts()}] >> {msg}{C.RESET}")


def info(msg: str) -> None:
    print(f"{C.DIM}[{_ts()}]{C.RESET} {msg}")


def ok(msg: str) -> None:
    print(f"{C.OK}[{_ts()}] OK {msg}{C.RESET}")


def warn(msg: str) -> None:
    """Non-fatal condition, such as reference records skipped as duplicates."""
    print(f"{C.WARN}[{_ts()}] WARN {msg}{C.RESET}")


def err(msg: str) -> None:
    print(f"{C.ERR}[{_ts()}] ERR {msg}{C.RESET}")


def summary_table(title: str, rows: list[tuple[str, str]]) -> None:
    """Row counts before and after a run, one aligned label per line."""
    print(f"\n{C.HEADER}{title}{C.RESET}")
    max_label = max(len(r[0]) for r in rows) if rows else 0
    for label, value in rows:
        print(f"  {label:<{max_label}}  {C.VALUE}{value}{C.RESET}")
    print()


# ---------------------------------------------------------------------------
# Verbose logging setup
# ---------------------------------------------------------------------------

def setup_verbose_logging(name: str = "catalog", level: int = logging.DEBUG) -> logging.Logger:
    """
    Logger for the catalog CLI: INFO to stdout, DEBUG to logs/<name>.log.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers on re-import
    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # stdout
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # logs/<name>.log
    log_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs")
    os.makedirs(log_dir, exist_ok=True)
    fh = logging.FileHandler(os.path.join(log_dir, f"{name}.log"))
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    return logger
