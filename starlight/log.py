"""Command log kept in the global variables and flushed to dated files."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from starlight.document import GLV_LOG, GLV_USERNAME, LOG_HEADER
from starlight.paths import ConfigPaths
from starlight.writer import conandwrite

LOG_FOOTER = "\n Copyright StarCorporation @ 2099"


def log_file_name(when: datetime | None = None) -> str:
    """Name of the log file for the given day, e.g. ``log-3_7_2024.txt``."""
    when = when or datetime.now()
    return f"log-{when.month}_{when.day}_{when.year}.txt"


def log_add(paths: ConfigPaths, command: str) -> str:
    """Append an entry for ``command`` to the stored log and return it."""
    glv = paths.load_globals()
    entry = f"[LOG] {glv.get_str(GLV_USERNAME)} executed '{command}'"
    glv.get_str_array(GLV_LOG).append(entry)
    conandwrite(glv, paths.glv_path())
    return entry


def log_end(paths: ConfigPaths, when: datetime | None = None) -> Path:
    """Write the stored log to the day's file, reset it, and return the file path."""
    glv = paths.load_globals()
    target = paths.log_path() / log_file_name(when)
    entries = glv.get_str_array(GLV_LOG)
    with target.open("w", encoding="utf-8") as stream:
        for entry in entries:
            stream.write(entry + "\n")
        stream.write(LOG_FOOTER)

    glv.set_str_array(GLV_LOG, [LOG_HEADER])
    conandwrite(glv, paths.glv_path())
    return target