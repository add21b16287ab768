"""Reading user input for console commands."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from starlight.document import GLV_CONFIG
from starlight.log import log_add
from starlight.paths import ConfigPaths

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass
class InputResult:
    """What an input function produced."""

    text: str | None = None
    path: Path | None = None
    number: int | None = None
    config: str | None = None


def _read_raw(stream: TextIO) -> str:
    line = stream.readline()
    if not line:
        raise EOFError("no more input")
    return line.rstrip("\n").rstrip("\r")


def _argument(param: str, start: int) -> str:
    """Text from ``start`` up to the first ')' (or the end if it comes earlier or not at all)."""
    if len(param) < start:
        raise ValueError(f"{param!r} is too short")
    end = param.find(")")
    return param[start:] if end < start else param[start:end]


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def read_line(paths: ConfigPaths | None = None, stream: TextIO | None = None) -> str:
    """Read one line of user input and record it in the log."""
    paths = paths or ConfigPaths()
    line = _read_raw(stream if stream is not None else sys.stdin)
    log_add(paths, line)
    return line


def parse_file_input(line: str, cwd: Path | str | None = None) -> Path:
    """Turn ``file(name)`` into a path; names not starting with 'C' are relative to ``cwd``."""
    name = _argument(line, 5)
    if not name:
        raise ValueError(f"no file name in {line!r}")
    if name[0] != "C":
        return Path(cwd if cwd is not None else Path.cwd()) / name
    return Path(name)


def run_input_func(
    param: str,
    paths: ConfigPaths | None = None,
    stream: TextIO | None = None,
    cwd: Path | str | None = None,
    out: TextIO | None = None,
) -> InputResult:
    """Run one of the ``input(...)`` functions and return its result."""
    paths = paths or ConfigPaths()
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    base = Path(cwd) if cwd is not None else Path.cwd()

    if "string" in param:
        return InputResult(text=_argument(param, 7))
    if "file" in param:
        return InputResult(path=parse_file_input(_read_raw(stream), base))
    if "integer" in param:
        return InputResult(number=_parse_int(_argument(param, 8)))
    if "config" in param:
        config_file = base / "Console_Config" / "system" / "config" / _argument(param, 7)
        if not config_file.exists():
            print("Error/FileNotFound The system could not find this file", file=out)
            return InputResult()
        glv = paths.load_globals()
        glv.set_str(GLV_CONFIG, "custom")
        return InputResult(path=config_file, config=glv.get_str(GLV_CONFIG))
    return InputResult(text=read_line(paths, stream))