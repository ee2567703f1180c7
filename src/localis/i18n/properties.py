"""
Reading and writing of key=value ``.properties`` text files.

Files are plain UTF-8 text without sections:

    # comment
    Language=fr
    Country=CA
    Variant=

Leading whitespace on a line is ignored. Values may use the backslash
escapes ``\\n``, ``\\t``, ``\\r``, ``\\f`` and ``\\uXXXX``; any other escaped
character stands for itself (``\\:`` -> ``:``, ``\\\\`` -> ``\\``).
"""

from __future__ import annotations

import configparser
import itertools
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

# configparser needs a section, properties files have none. The header
# can't occur in a real file, so "[...]" lines are read as plain keys.
_SECTION = "\x00properties"
_SECTION_PATTERN = re.compile(r"\[(?P<header>\x00properties)\]")

_ESCAPE_PATTERN = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "f": "\f"}


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=", ":"),
        comment_prefixes=("#", "!"),
        interpolation=None,
        allow_no_value=True,
        strict=False,
    )
    parser.SECTCRE = _SECTION_PATTERN
    # Keep key case ("Language", not "language")
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def _unescape_match(match: re.Match[str]) -> str:
    escaped = match.group(1)
    if len(escaped) == 5:
        return chr(int(escaped[1:], 16))
    return _ESCAPES.get(escaped, escaped)


def unescape(value: str) -> str:
    """Decode backslash escapes in a value."""
    return _ESCAPE_PATTERN.sub(_unescape_match, value)


def escape(value: str) -> str:
    """Encode a value so that it stays on one line."""
    return (
        value.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\f", "\\f")
    )


def _dedent(lines: Iterable[str]) -> Iterator[str]:
    # Indented lines would otherwise continue the previous value
    for line in lines:
        yield line.lstrip()


def read_properties(path: Path | str) -> dict[str, str]:
    """
    Load a properties file.

    Args:
        path: Path to the file

    Returns:
        Ordered dict of key -> value, in file order. Keys without a value map to "".

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid UTF-8
        configparser.Error: If the file cannot be parsed
    """
    parser = _new_parser()
    with Path(path).open("r", encoding="utf-8") as f:
        parser.read_file(itertools.chain([f"[{_SECTION}]\n"], _dedent(f)), source=str(path))

    return {key: unescape(value or "") for key, value in parser.items(_SECTION)}


def write_properties(path: Path | str, properties: Mapping[str, str]) -> None:
    """
    Rewrite a properties file with the given entries.

    The whole file is replaced. No header comment is written.

    Args:
        path: Path to the file
        properties: Entries to write, in order

    Raises:
        OSError: If the file cannot be written
    """
    with Path(path).open("w", encoding="utf-8") as f:
        for key, value in properties.items():
            f.write(f"{key}={escape(str(value))}\n")
