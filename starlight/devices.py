"""Random identifiers for the station's devices."""

from __future__ import annotations

import random
import sys
import time
from os import PathLike
from typing import TextIO, Union

from starlight.document import DEV_CAMS, DEV_CC, DEV_FAC, DEV_O2, DEV_PP, Document
from starlight.writer import conandwrite

PathArg = Union[str, PathLike]

_O2_KINDS = "PCR"  # plant, chemical, recycling
_FACTORY_KINDS = "MTB"  # metal, technology, biological
_CONTROL_KINDS = "CO"  # control, observation
_POWER_KINDS = "NWCFT"  # fusion, water, coal, wind, tritium
_EXTRA_CAMERAS = {1: 2, 2: 4, 3: 5}


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random(int(time.time()))


def _digits(rng: random.Random) -> str:
    return "".join(str(rng.randint(0, 9)) for _ in range(4))


def _device_id(prefix: str, kinds: str, rng: random.Random | None) -> str:
    rng = _rng(rng)
    kind = kinds[rng.randint(1, len(kinds)) - 1]
    return f"{prefix}{kind}{_digits(rng)}SV"


def gen_o2(rng: random.Random | None = None) -> str:
    return _device_id("O", _O2_KINDS, rng)


def gen_factory(rng: random.Random | None = None) -> str:
    return _device_id("F", _FACTORY_KINDS, rng)


def gen_control_panel(rng: random.Random | None = None) -> str:
    return _device_id("E", _CONTROL_KINDS, rng)


def gen_power_plant(rng: random.Random | None = None) -> str:
    return _device_id("P", _POWER_KINDS, rng)


def gen_cameras(rng: random.Random | None = None) -> list[str]:
    """Identifiers for three, five or six cameras."""
    rng = _rng(rng)
    count = 1 + _EXTRA_CAMERAS[rng.randint(1, 3)]
    return [f"E{_digits(rng)}SV" for _ in range(count)]


def gen_ids(
    path: PathArg = "devices.json",
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> Document:
    """Discover the station's devices, report them and save them to ``path``."""
    rng = _rng(rng)
    out = out if out is not None else sys.stdout

    print("searching for O2 Generator...", file=out)
    o2 = gen_o2(rng)
    print(f"O2 generator: {o2} found", file=out)

    print("searching for Factory...", file=out)
    factory = gen_factory(rng)
    print(f"Factory: {factory} found", file=out)

    print("searching for Control Panel...", file=out)
    control_panel = gen_control_panel(rng)
    print(f"Control Panel: {control_panel} found", file=out)

    print("searching for Power Plant...", file=out)
    power_plant = gen_power_plant(rng)
    print(f"Power Plant: {power_plant} found", file=out)

    print("searching for Camera(s)...", file=out)
    cameras = gen_cameras(rng)
    print("Camera(s): " + "".join(f"{camera}," for camera in cameras) + " found", file=out)

    doc = Document.from_template("devices")
    doc.set_str(DEV_O2, o2)
    doc.set_str(DEV_FAC, factory)
    doc.set_str(DEV_CC, control_panel)
    doc.set_str(DEV_PP, power_plant)
    doc.set_str_array(DEV_CAMS, cameras)
    conandwrite(doc, path)
    return doc