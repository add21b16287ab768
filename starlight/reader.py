"""Parsing of the console's annotated JSON-like documents."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path
from typing import Union

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

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class JsonReadError(ValueError):
    """Raised when a document cannot be parsed."""


def _substr(text: str, start: int, length: int) -> str:
    """Take ``length`` characters from ``start``; a negative length means to the end."""
    if start < 0 or start > len(text):
        raise JsonReadError(f"position {start} is outside {text!r}")
    if length < 0:
        return text[start:]
    return text[start:start + length]


def _split_lines(raw: str) -> list[str]:
    """Split at newlines; text after the last newline is dropped."""
    lines: list[str] = []
    start = 0
    index = 0
    while index < len(raw):
        if raw[index] == "\n":
            lines.append(raw[start:index])
            index += 1
            start = index
        index += 1
    return lines


def _type_comment(line: str) -> str:
    slash = line.find("/")
    start = slash + 3 if slash >= 0 else 2
    return _substr(line, start, -1)


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise JsonReadError(f"not an integer: {text!r}")
    return int(match.group(1))


def rconvert_arr(raw: str) -> list[str]:
    """Extract the quoted elements of an array body."""
    pieces: list[str] = []
    start = 0
    index = 0
    while index < len(raw):
        if raw[index] == '"':
            pieces.append(raw[start:index])
            start = index + 1
            index += 1
        index += 1
    return [piece for piece in pieces[1:] if piece != ", "]


def read_json_raw(path: PathArg) -> str:
    """Read lines up to the first empty line, each ending in a newline."""
    text = Path(path).read_text(encoding="utf-8")
    kept: list[str] = []
    for line in text.split("\n"):
        if not line:
            break
        kept.append(line + "\n")
    return "".join(kept)


def read_obj_str(raw: str) -> RawEntries:
    """Parse the content of an embedded object into raw entries."""
    lines = _split_lines(raw) or [raw]
    entries: RawEntries = []
    for line in lines:
        comment = _type_comment(line)

        first_quote = line.find('"')
        next_quote = line.find('"', first_quote + 1)
        key = _substr(line, first_quote + 3, next_quote - (first_quote + 2))

        colon = line.find(":")
        begin = colon + 2 if colon >= 0 else 1
        end = line.find(",")
        if end < 0:
            end = line.find("/")
        value = _substr(line, begin, end - begin)

        entries.append(RawEntry(key, value, comment))
    return entries


def find_key(line: str) -> str:
    """Return the quoted key at the start of a line."""
    return _substr(line, 1, line.find('"', 2) - 1)


def find_val(line: str) -> str:
    """Return the value part of a document line."""
    space = line.find(" ")
    is_string = False
    if "[" in line:
        begin = line.find("[") + 1
    else:
        quote = line.find('"', space) if space >= 0 else -1
        if quote >= 0:
            begin = quote + 1
            is_string = True
        else:
            begin = space + 1

    if "]" in line:
        end = line.rfind("]")
    elif "," in line:
        end = line.find(",")
    else:
        end = line.find("/")

    length = end - begin - 1 if is_string else end - begin
    return _substr(line, begin, length)


def _read_object_array(line: str) -> ObjectList:
    bracket_begin = line.find("[")
    if bracket_begin < 0:
        raise JsonReadError(f"object array without '[': {line!r}")
    bracket_end = line.find("]") + 1
    array_text = _substr(line, bracket_begin, bracket_end - bracket_begin)

    name_spans: list[tuple[int, int]] = []
    object_spans: list[tuple[int, int]] = []
    name_start = 0
    open_at: int | None = None
    for position, char in enumerate(array_text):
        if char == '"':
            if name_start:
                name_spans.append((name_start, position))
                name_start = 0
            else:
                name_start = position
        elif char == "{":
            open_at = position
        elif char == "}":
            if open_at is None:
                raise JsonReadError(f"'}}' without '{{' in {line!r}")
            object_spans.append((open_at, position))

    names = [_substr(line, first + 2, second - first - 1) for first, second in name_spans]
    contents = [_substr(line, first, second + 1 - first) for first, second in object_spans]
    if len(contents) < len(names):
        raise JsonReadError(f"object array has names without objects: {line!r}")
    return [(name, read_obj_str(content)) for name, content in zip(names, contents)]


def read_json_str(raw: str) -> Document:
    """Parse document text into a :class:`Document`."""
    doc = Document()
    lines = _split_lines(raw)
    index = 1
    while index < len(lines):
        line = lines[index]
        if line == "}":
            break

        comment = _type_comment(line)
        if comment == KIND_INT:
            doc.ints[find_key(line)] = _to_int(find_val(line))
        elif comment == KIND_STRING:
            doc.strings[find_key(line)] = find_val(line)
        elif comment == KIND_BOOL:
            text = find_val(line)
            if text not in ("0", "1"):
                raise JsonReadError(f"not a bool: {text!r}")
            doc.bools[find_key(line)] = text == "1"
        elif "array" in comment or "[" in comment:
            if comment == KIND_ARRAY_STRING:
                doc.str_arrays[find_key(line)] = rconvert_arr(find_val(line))
            elif comment == KIND_ARRAY_OBJECT:
                doc.obj_arrays[find_key(line)] = _read_object_array(line)
        elif comment == KIND_OBJECT or "{" in comment:
            begin = end = 0
            for position in range(index, len(lines)):
                if "{" in lines[position]:
                    begin = position
                elif "}" in lines[position]:
                    end = position
                if begin and end:
                    break
            else:
                raise JsonReadError(f"object starting at {line!r} is never closed")
            doc.objects[find_key(line)] = read_obj_str("".join(lines[begin + 1:end]))
            index = end
        else:
            raise JsonReadError(f"cannot convert type {comment!r}")
        index += 1
    return doc


def read_json(path: PathArg) -> Document:
    """Read and parse the document stored at ``path``."""
    return read_json_str(read_json_raw(path))