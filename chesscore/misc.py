"""Version strings, string helpers and path utilities."""

from __future__ import annotations

import datetime as _dt
import os
import re
from collections.abc import Callable, MutableSequence
from typing import TypeVar

T = TypeVar("T")

ENGINE_NAME = "Chesscore"
VERSION = "dev"
AUTHORS = "the Chesscore developers (see AUTHORS file)"

_SIZE_T_MAX = (1 << 64) - 1
_C_WHITESPACE = frozenset(" \t\n\v\f\r")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d+)")


def engine_version_info(
    build_date: _dt.date | str | None = None, git_sha: str | None = None
) -> str:
    """Return the full engine name with version.

    Development builds look like ``<name> dev-YYYYMMDD-SHA``, or end in
    ``nogit`` when no commit hash is known. ``build_date`` may be a date or
    an already formatted ``YYYYMMDD`` string; it defaults to today.
    """
    text = f"{ENGINE_NAME} {VERSION}"
    if VERSION == "dev":
        if build_date is None:
            build_date = _dt.date.today()
        date_text = (
            build_date if isinstance(build_date, str) else build_date.strftime("%Y%m%d")
        )
        text += f"-{date_text}-{git_sha if git_sha else 'nogit'}"
    return text


def engine_info(to_uci: bool = False) -> str:
    """Return the version line followed by the authors, UCI style if asked."""
    joiner = "\nid author " if to_uci else " by "
    return engine_version_info() + joiner + AUTHORS


def split(s: str, delimiter: str) -> list[str]:
    """Split ``s`` on every occurrence of ``delimiter``; an empty string gives no parts."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if not s:
        return []
    return s.split(delimiter)


def remove_whitespace(s: str) -> str:
    """Return ``s`` with every whitespace character removed."""
    return "".join(c for c in s if c not in _C_WHITESPACE)


def is_whitespace(s: str) -> bool:
    """Return True if ``s`` consists only of whitespace (or is empty)."""
    return all(c in _C_WHITESPACE for c in s)


def str_to_size_t(s: str) -> int:
    """Parse the leading unsigned decimal number of ``s`` as a 64-bit size.

    Leading whitespace and a sign are accepted and trailing text is ignored.
    A negated value wraps modulo 2**64. Raises ValueError when no number is
    found and OverflowError when the magnitude does not fit in 64 bits.
    """
    match = _LEADING_INT.match(s)
    if match is None:
        raise ValueError(f"no number in {s!r}")
    sign, digits = match.groups()
    value = int(digits)
    if value > _SIZE_T_MAX:
        raise OverflowError(f"{s!r} does not fit in 64 bits")
    if sign == "-":
        value = (-value) % (1 << 64)
    return value


def read_file_to_string(path: str | os.PathLike[str]) -> bytes | None:
    """Return the file's contents as bytes, or None if it cannot be opened."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError:
        return None


def get_working_directory() -> str:
    """Return the current working directory, or an empty string if unknown."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def get_binary_directory(argv0: str) -> str:
    """Return the directory part of ``argv0``, ending in a separator.

    A bare program name gives the current directory; a leading ``.``
    followed by the separator is replaced by the working directory.
    """
    sep = "\\" if os.name == "nt" else "/"
    working_directory = get_working_directory()

    pos = max(argv0.rfind("\\"), argv0.rfind("/"))
    binary_directory = "." + sep if pos < 0 else argv0[: pos + 1]

    if binary_directory.startswith("." + sep):
        binary_directory = working_directory + binary_directory[1:]
    return binary_directory


def move_to_front(items: MutableSequence[T], pred: Callable[[T], bool]) -> None:
    """Move the first item satisfying ``pred`` to the front, keeping the rest in order."""
    for i, item in enumerate(items):
        if pred(item):
            if i:
                del items[i]
                items.insert(0, item)
            return