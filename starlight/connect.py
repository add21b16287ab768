"""Remote connection to the mobile station."""

from __future__ import annotations

import random
import sys
import time
from typing import Callable, TextIO

from starlight.document import GLV_CONNECTED, GLV_LOGGED_IN
from starlight.login import login
from starlight.paths import ConfigPaths

Ask = Callable[[str], str]


def _stdin_ask(out: TextIO) -> Ask:
    def ask(prompt: str) -> str:
        out.write(prompt)
        out.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\n").rstrip("\r")

    return ask


def _first_char(text: str) -> str:
    return text.lstrip()[:1]


def _digits(rng: random.Random, count: int) -> str:
    return "".join(chr(rng.randint(48, 57)) for _ in range(count))


def connecting(
    paths: ConfigPaths | None = None,
    ask: Ask | None = None,
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> bool:
    """Connect to the station; return True when the connection is accepted."""
    paths = paths or ConfigPaths()
    out = out if out is not None else sys.stdout
    ask = ask or _stdin_ask(out)
    glv = paths.load_globals()

    print("<Remote connection to Kikais Garden Mobile Station>", file=out)
    answer = _first_char(ask("Do you want to proceed? (Y/N) "))
    print(file=out)

    if answer == "N":
        print("exiting...", file=out)
        return False
    if answer != "Y":
        print("Error 404: Command not found", file=out)
        return False

    rng = rng if rng is not None else random.Random(int(time.time()))
    print("Searching for available connection ports...", file=out)
    port = _digits(rng, 4)
    print(f"Port: {port} is currently available.", file=out)
    print(f"Establishing connection over Port {port}...", file=out)
    print("Testing Port Bandwidth...", file=out)
    bandwidth = _digits(rng, 3)
    print(f"Bandwidth is: {bandwidth} Hz", file=out)
    print(file=out)
    print("Sending Test Package...", file=out)
    print("Package Arrived, no failures", file=out)
    print("Connection Established", file=out)
    print(file=out)

    if glv.get_bool(GLV_LOGGED_IN):
        glv.set_bool(GLV_CONNECTED, True)
        return True

    print("Error/AccDenied: This system only accepts messages from logged in users.", file=out)
    print("Do you wish to get redirected to the login screen? (Y/N)", file=out)
    answer = _first_char(ask(">"))
    print(file=out)
    if answer == "Y":
        login(paths, ask, out)
    elif answer == "N":
        print("exiting...", file=out)
    else:
        print("Error 404: Command not found", file=out)
    return False