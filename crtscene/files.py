"""File system helpers for reading sources, walking directories and storing JSON."""

from __future__ import annotations

import json
import os
from typing import Any


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole contents of a file, or an empty string if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError:
        return ""


def filename_from_path(path: str) -> str:
    """Return the last component of a path, extension included."""
    return os.path.basename(path)


def basename_from_path(path: str) -> str:
    """Return the last component of a path without its final extension."""
    stem, _ = os.path.splitext(os.path.basename(path))
    return stem


def parent_directory(path: str) -> str:
    """Return the directory part of a path."""
    return os.path.dirname(path)


def path_exists(path: str | os.PathLike[str]) -> bool:
    """Tell whether anything exists at the path."""
    return os.path.exists(path)


def create_file(path: str | os.PathLike[str]) -> None:
    """Create an empty file unless one exists; an unwritable location is left alone."""
    if path_exists(path):
        return
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError:
        return


def load_json(path: str | os.PathLike[str]) -> Any:
    """Parse a JSON file, returning None if it cannot be opened."""
    try:
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)
    except OSError:
        return None


def save_json(data: Any, path: str | os.PathLike[str]) -> None:
    """Write data as JSON with two-space indentation and sorted keys.

    A location that cannot be opened for writing is silently skipped.
    """
    try:
        handle = open(path, "w", encoding="utf-8")
    except OSError:
        return
    with handle:
        json.dump(data, handle, indent=2, sort_keys=True, ensure_ascii=False)


def files_in_directory(directory: str) -> list[str]:
    """Return every regular file below a directory, descending depth first.

    A directory that does not exist yields no files.
    """
    files: list[str] = []
    pending = [directory]
    while pending:
        current = pending.pop()
        if not path_exists(current):
            continue
        for path in paths_in_directory(current):
            if is_file(path):
                files.append(path)
            elif is_directory(path):
                pending.append(path)
    return files


def paths_in_directory(directory: str) -> list[str]:
    """Return the paths of the direct children of a directory."""
    with os.scandir(directory) as entries:
        return [entry.path for entry in entries]


def is_file(path: str | os.PathLike[str]) -> bool:
    """Tell whether the path is a regular file."""
    return os.path.isfile(path)


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Tell whether the path is a directory."""
    return os.path.isdir(path)