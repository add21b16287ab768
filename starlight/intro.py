"""Start-up banners shown for the different system versions."""

from __future__ import annotations

import sys
from typing import TextIO

from starlight.document import GLV_VERSION, Document
from starlight.paths import ConfigPaths


def _emit(out: TextIO, *lines: str) -> None:
    for line in lines:
        print(line, file=out)


def intro(
    version: int,
    paths: ConfigPaths | None = None,
    out: TextIO | None = None,
) -> Document:
    """Print the banner for ``version`` and return the globals with the version applied."""
    paths = paths or ConfigPaths()
    out = out if out is not None else sys.stdout
    glv = paths.load_globals()

    if 2056 <= version <= 2071:
        _emit(out, "# Starlight Electronics", "E.DATE/TIME: 0/0/2033", "")
        glv.set_int(GLV_VERSION, version)
    elif version >= 2072:
        _emit(
            out,
            "StarlightOS: consumer version/Kikai communication system active",
            "Issued 2099 by Starcorp Corperation",
            "Do not distribute",
            "",
        )
    elif 2041 <= version <= 2055:
        _emit(
            out,
            ">>SDC QuickComputerAccessProgram  V2.5",
            ">client license active\t\t\t0/0/2039",
            ">Registered 2039 by SDC",
            "",
        )
        glv.set_int(GLV_VERSION, version)
    else:
        _emit(out, "Err/BackupNotFound")
    return glv


def paradox(out: TextIO | None = None) -> None:
    """Report a detected paradox."""
    print("Paradox Detected", file=out if out is not None else sys.stdout)