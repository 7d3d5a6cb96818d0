"""Renaming of files after the dates found in their names."""

from __future__ import annotations

import errno
import itertools
import os
from collections.abc import Callable

from .finder import Outcome

NAME_MAX = 255
PATH_MAX = 4096

GREY = "\033[30m"
RED = "\033[31m"
YELLOW = "\033[33m"
WHITE = "\033[0m"

Finder = Callable[[str], "tuple[Outcome, str]"]


def _byte_len(text: str) -> int:
    return len(os.fsencode(text))


def _join(directory: str | os.PathLike[str], name: str) -> str:
    path = os.path.join(os.fspath(directory), name)
    if _byte_len(path) >= PATH_MAX:
        raise OSError(errno.ENAMETOOLONG, "path is too long", path)
    return path


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def split_extension(filename: str) -> tuple[str, str]:
    """Split a name at its first dot, keeping the dot in the extension.

    A dot that ends the name does not start an extension.
    """
    dot = filename.find(".")
    if dot == -1 or dot == len(filename) - 1:
        return filename, ""
    return filename[:dot], filename[dot:]


def make_filename_unique(directory: str | os.PathLike[str], filename: str) -> str:
    """Return filename, numbered before its extension if it is already taken."""
    if not _exists(_join(directory, filename)):
        return filename

    stem, extension = split_extension(filename)
    for dupe in itertools.count(1):
        candidate = f"{stem}({dupe}){extension}"
        if not _exists(_join(directory, candidate)):
            break

    if _byte_len(candidate) >= NAME_MAX:
        raise OSError(errno.ENAMETOOLONG, "file name is too long", candidate)
    return candidate


def write_back(directory: str | os.PathLike[str], filename: str, new_name: str) -> None:
    """Rename a file inside directory."""
    os.rename(_join(directory, filename), _join(directory, new_name))


def format_outcome(outcome: Outcome, filename: str, new_name: str) -> str:
    """Describe the change made to a file name."""
    match Outcome(outcome):
        case Outcome.FOUND:
            return f"{filename} -> {new_name}"
        case Outcome.UNSURE:
            return f"{YELLOW}{filename} -> {new_name}{WHITE}"
        case Outcome.UNKNOWN:
            return f"{RED}Unknown: {filename}{WHITE}"
        case Outcome.UNCHANGED:
            return f"{GREY}{filename} -> {new_name}{WHITE}"
        case Outcome.FAILURE:
            return f"{RED}Failure: {filename}{WHITE}"


def print_outcome(outcome: Outcome, filename: str, new_name: str) -> None:
    """Print the change made to a file name."""
    print(format_outcome(outcome, filename, new_name))


def analyze_filenames(folder: str | os.PathLike[str], finder: Finder) -> int:
    """Rename the regular, visible files in folder with the names finder gives.

    Each outcome is printed; returns the number of files renamed.
    """
    with os.scandir(folder) as entries:
        names = sorted(entry.name for entry in entries if entry.is_file(follow_symlinks=False))

    changes = 0
    for filename in names:
        if filename.startswith(".") or _byte_len(filename) >= NAME_MAX:
            continue

        stem, extension = split_extension(filename)
        outcome, new_name = finder(stem)
        new_name += extension
        if _byte_len(new_name) >= NAME_MAX:
            outcome = Outcome.FAILURE

        if outcome in (Outcome.FOUND, Outcome.UNSURE):
            try:
                new_name = make_filename_unique(folder, new_name)
                write_back(folder, filename, new_name)
            except OSError:
                outcome = Outcome.FAILURE
            else:
                changes += 1

        print_outcome(outcome, filename, new_name)
    return changes