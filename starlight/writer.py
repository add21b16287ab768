"""Serialisation of documents into the console's annotated JSON-like format."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Iterable, Union

from starlight.document import (
    KIND_ARRAY_OBJECT,
    KIND_ARRAY_STRING,
    KIND_BOOL,
    KIND_INT,
    KIND_OBJECT,
    KIND_STRING,
    Document,
    ObjectList,
    RawEntries,
    RawEntry,
)

PathArg = Union[str, PathLike]


class UnknownEntryTypeError(ValueError):
    """Raised when an entry carries a type tag that cannot be written."""


def _split_commas(raw: str) -> tuple[list[str], int]:
    """Split on commas; the character right after a comma is never a split point."""
    parts: list[str] = []
    start = 0
    index = 0
    while index < len(raw):
        if raw[index] == ",":
            parts.append(raw[start:index])
            index += 1
            start = index
        index += 1
    return parts, start


def str_to_arr(raw: str) -> list[str]:
    """Split a comma separated string into its elements."""
    parts, start = _split_commas(raw)
    return [*parts, raw[start:]]


def str_to_obj(raw: str) -> list[tuple[str, str]]:
    """Parse comma terminated ``key: value`` arguments into pairs."""
    parts, _ = _split_commas(raw)
    pairs: list[tuple[str, str]] = []
    for arg in parts:
        for position, char in enumerate(arg):
            if char != ":":
                continue
            if position + 2 > len(arg):
                raise ValueError(f"argument {arg!r} has no value after ':'")
            pairs.append((arg[:position], arg[position + 2:]))
    return pairs


def convert_arr_str(values: Iterable[str]) -> str:
    """Render strings as a quoted, comma separated list body."""
    return ", ".join(f'"{value}"' for value in values)


def convert_json_obj(raw_objects: ObjectList) -> str:
    """Render a collection of named objects as one brace-wrapped string."""
    body = "".join("".join(convert_json(entries)) for _, entries in raw_objects)
    return "{ " + body + " }"


def convert_arr_obj(raw: Iterable[tuple[str, ObjectList]]) -> str:
    """Render object arrays as a bracketed string."""
    return "[" + "".join(convert_json_obj(objects) for _, objects in raw) + "]"


def convert_json(raw: RawEntries, is_obj: bool = False) -> list[str]:
    """Turn raw entries into the lines of a document."""
    lines = ["{\n"]
    last = len(raw) - 1
    for index, (key, value, kind) in enumerate(raw):
        head = f'"{key}": '
        if kind == KIND_STRING:
            body = f'"{value}"'
        elif kind in (KIND_INT, KIND_BOOL, KIND_OBJECT):
            body = value
        elif kind in (KIND_ARRAY_STRING, KIND_ARRAY_OBJECT):
            body = f"[ {value} ]"
        elif "array" in kind:
            lines.append(head)
            continue
        else:
            raise UnknownEntryTypeError(f"unknown type for entry {key!r}: {kind!r}")
        separator = ", " if index != last else ""
        lines.append(f"{head}{body}{separator}// {kind}\n")
    lines.append("}" if is_obj else "}\n")
    return lines


def gen_json_raw(doc: Document) -> RawEntries:
    """Flatten a document into raw entries, grouped by value type."""
    raw: RawEntries = [RawEntry(key, value, KIND_STRING) for key, value in doc.strings.items()]
    raw += [RawEntry(key, str(value), KIND_INT) for key, value in doc.ints.items()]
    raw += [RawEntry(key, "1" if value else "0", KIND_BOOL) for key, value in doc.bools.items()]
    raw += [
        RawEntry(key, convert_arr_str(values), KIND_ARRAY_STRING)
        for key, values in doc.str_arrays.items()
    ]
    all_object_arrays = list(doc.obj_arrays.items())
    raw += [
        RawEntry(key, convert_arr_obj(all_object_arrays), KIND_ARRAY_OBJECT)
        for key in doc.obj_arrays
    ]
    raw += [
        RawEntry(key, "".join(convert_json(entries, True)), KIND_OBJECT)
        for key, entries in doc.objects.items()
    ]
    return raw


def gen_json(raw: RawEntries) -> str:
    """Render raw entries as a single string with an extra enclosing brace pair."""
    return "{\n" + "".join(convert_json(raw)) + "}"


def write_json(lines: Iterable[str], path: PathArg) -> None:
    """Write the lines to ``path``, replacing its content."""
    Path(path).write_text("".join(lines), encoding="utf-8")


def conandwrite(doc: Document, path: PathArg) -> None:
    """Convert a document and write it to ``path``."""
    write_json(convert_json(gen_json_raw(doc)), path)