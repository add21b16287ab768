"""In-memory form of the console's configuration documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, NamedTuple

KIND_STRING = "string"
KIND_INT = "int"
KIND_BOOL = "bool"
KIND_ARRAY_STRING = "array-string"
KIND_ARRAY_OBJECT = "array-object"
KIND_OBJECT = "object"

# account documents
ACC_USERNAME = "Username"
ACC_PASSWORD = "Password"
ACC_STATUS = "status"
ACC_IS_ADMIN = "is_admin"
ACC_IS_LOCKED = "locked"

# global variables
GLV_CONFIG = "config"
GLV_USERNAME = "username"
GLV_LOG = "log"
GLV_LOGGED_IN = "logged_in"
GLV_CONNECTED = "connected"
GLV_ACC_N_LOCKED = "acc_n_locked"
GLV_HACKED = "hacked"
GLV_UNLOCKED = "unlocked"
GLV_VERSION = "version"

# banned addresses
BAN_IPS = "Banned"

# devices
DEV_O2 = "O2 Generator"
DEV_FAC = "Factory"
DEV_CC = "Control Panel"
DEV_PP = "Power Plant"
DEV_CAMS = "Cameras"

# user data
THR_LVL = "Threat_lvl"

UNREGISTERED_USER = "Unregistered User"
LOG_HEADER = "  --System Log--  "


class UnknownTemplateError(ValueError):
    """Raised when a document template name is not known."""


class RawEntry(NamedTuple):
    """One serialised entry: key, textual value and type tag."""

    key: str
    value: str
    kind: str


RawEntries = list[RawEntry]
ObjectList = list[tuple[str, RawEntries]]


@dataclass
class Document:
    """A typed key/value document, kept per value type in insertion order."""

    strings: dict[str, str] = field(default_factory=dict)
    ints: dict[str, int] = field(default_factory=dict)
    bools: dict[str, bool] = field(default_factory=dict)
    str_arrays: dict[str, list[str]] = field(default_factory=dict)
    obj_arrays: dict[str, ObjectList] = field(default_factory=dict)
    objects: dict[str, RawEntries] = field(default_factory=dict)

    @classmethod
    def from_template(cls, kind: str) -> Document:
        """Build a fresh document of one of the known kinds."""
        try:
            build = _TEMPLATES[kind]
        except KeyError:
            raise UnknownTemplateError(f"unknown document type: {kind!r}") from None
        return build()

    def get_str(self, key: str) -> str:
        return self.strings[key]

    def set_str(self, key: str, value: str) -> None:
        self.strings[key] = value

    def get_int(self, key: str) -> int:
        return self.ints[key]

    def set_int(self, key: str, value: int) -> None:
        self.ints[key] = int(value)

    def get_bool(self, key: str) -> bool:
        return self.bools[key]

    def set_bool(self, key: str, value: bool) -> None:
        self.bools[key] = bool(value)

    def get_str_array(self, key: str) -> list[str]:
        """Return the stored list itself, so changes to it are kept."""
        return self.str_arrays[key]

    def set_str_array(self, key: str, values) -> None:
        self.str_arrays[key] = list(values)


def _account() -> Document:
    return Document(
        strings={ACC_USERNAME: UNREGISTERED_USER, ACC_PASSWORD: "", ACC_STATUS: "user"},
        bools={ACC_IS_ADMIN: False, ACC_IS_LOCKED: False},
    )


def _globals() -> Document:
    return Document(
        strings={GLV_CONFIG: "default", GLV_USERNAME: UNREGISTERED_USER},
        ints={GLV_VERSION: 0},
        bools={
            GLV_LOGGED_IN: False,
            GLV_CONNECTED: False,
            GLV_ACC_N_LOCKED: False,
            GLV_HACKED: False,
            GLV_UNLOCKED: False,
        },
        str_arrays={GLV_LOG: [LOG_HEADER]},
    )


def _banned() -> Document:
    return Document(str_arrays={BAN_IPS: ["295.234.234.3"]})


def _devices() -> Document:
    return Document(
        strings={DEV_O2: "", DEV_FAC: "", DEV_CC: "", DEV_PP: ""},
        str_arrays={DEV_CAMS: []},
    )


def _user_data() -> Document:
    return Document(strings={THR_LVL: "neutral"})


_TEMPLATES: dict[str, Callable[[], Document]] = {
    "account": _account,
    "glv": _globals,
    "ban_ip": _banned,
    "devices": _devices,
    "user_d": _user_data,
}