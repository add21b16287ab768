"""Locations of the console's configuration tree."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import TextIO, Union

from starlight.document import Document
from starlight.reader import read_json

PathArg = Union[str, PathLike]

CONFIG_DIR = "Console_Config"
GLOBALS_FILE = "global_vars.json"


class ConfigPaths:
    """Resolves, and creates on demand, the directories under ``Console_Config``."""

    def __init__(self, root: PathArg | None = None, out: TextIO | None = None) -> None:
        self.root = Path(root) if root is not None else None
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _base(self) -> Path:
        return (self.root if self.root is not None else Path.cwd()) / CONFIG_DIR

    def _ensure(self, path: Path, label: str) -> Path:
        if not self.exists(path):
            print(f"Error: {label} Path doesn't exist! Creating one...", file=self.out)
            path.mkdir(parents=True, exist_ok=True)
        return path

    def ensure_all(self) -> None:
        """Create every directory the console relies on."""
        self.glv_path()
        self.temp_path()
        self.log_path()
        self.users_path()

    def exists(self, path: PathArg) -> bool:
        return Path(path).exists()

    def glv_path(self, directory_only: bool = False) -> Path:
        """Path of the global variables file, or of its directory."""
        directory = self._ensure(self._base() / "system", "GLV")
        return directory if directory_only else directory / GLOBALS_FILE

    def temp_path(self) -> Path:
        return self._ensure(self._base() / "system" / "temp", "Temp")

    def log_path(self) -> Path:
        return self._ensure(self._base() / "system" / "logs", "Log")

    def users_path(self) -> Path:
        return self._ensure(self._base() / "users", "User")

    def load_globals(self) -> Document:
        """Read the global variables document."""
        return read_json(self.glv_path())