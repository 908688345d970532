"""Loading files relative to an optional assets folder."""

from __future__ import annotations

import os
from typing import Optional

__all__ = ["FileError", "set_pc_assets_folder", "load_file", "load_string"]

_assets_folder: Optional[str] = None


class FileError(Exception):
    """A file could not be loaded."""

    def __init__(self, kind: OSError, path: str) -> None:
        self.kind = kind
        self.path = path
        reason = kind.strerror or str(kind)
        super().__init__(f"Couldn't load file {path}: {reason}")


def set_pc_assets_folder(path: Optional[str]) -> None:
    """Make later loads resolve paths inside ``path``; ``None`` turns this off."""
    global _assets_folder
    _assets_folder = path


def _resolve(path: str) -> str:
    if _assets_folder is None:
        return path
    return f"{_assets_folder}/{path}"


def load_file(path: str) -> bytes:
    """Read the whole file at ``path`` (inside the assets folder, if set)."""
    full_path = _resolve(path)
    try:
        with open(os.fspath(full_path), "rb") as handle:
            return handle.read()
    except OSError as error:
        raise FileError(error, full_path) from error


def load_string(path: str) -> str:
    """Read a file as UTF-8 text, replacing invalid sequences."""
    return load_file(path).decode("utf-8", errors="replace")