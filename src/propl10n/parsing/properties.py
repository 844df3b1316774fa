"""Parser for Java-style properties resource files.

Turns the text of one resource file into an ordered key -> value mapping.
The format is line based:

    # comment
    month.jan=January
    greeting=Hello {0}, \\
        welcome back!
    cafe=caf\\u00e9

Parsing rules, applied in order:
    1. A physical line (trimmed) ending in an unescaped backslash continues on
       the next physical line: the backslash is dropped and the next trimmed
       line appended. Lines starting with '#' never continue.
    2. The logical line is cut at the first unescaped '#'.
    3. Empty lines are skipped.
    4. Every \\uXXXX escape becomes a numeric character reference (&#233;).
    5. The line splits at the first '='. Key and value are trimmed, then the
       value is C-unescaped (\\n, \\t, \\\\, octal, hex, ...).
    6. The first occurrence of a key wins.

Lines without '=' or with an empty key are skipped and reported as malformed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from propl10n.constants import COMMENT_CHAR, CONTINUATION_CHAR, TRIM_CHARS

__all__ = [
    "ParsedProperties",
    "decode_unicode_escapes",
    "iter_logical_lines",
    "parse_properties",
    "strip_comment",
    "unescape_value",
]

_UNICODE_ESCAPE = re.compile(r"\\u([0-9A-Fa-f]{4})")

# Octal (up to 3 digits), hex (\x plus up to 2 digits), or any single char.
_C_ESCAPE = re.compile(r"\\([0-7]{1,3}|x[0-9A-Fa-f]{1,2}|.)", re.DOTALL)

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "v": "\v",
    "b": "\b",
    "f": "\f",
}


@dataclass(frozen=True, slots=True)
class ParsedProperties:
    """Result of parsing one resource file.

    Attributes:
        entries: Key -> value in first-occurrence order
        malformed_lines: Logical lines skipped for lacking a key=value shape
    """

    entries: dict[str, str] = field(default_factory=dict)
    malformed_lines: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


def _trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def _has_continuation(line: str) -> bool:
    """Check for a trailing backslash that is not itself escaped."""
    trailing = len(line) - len(line.rstrip(CONTINUATION_CHAR))
    return trailing % 2 == 1


def iter_logical_lines(source: str) -> Iterator[str]:
    """Yield logical lines, joining backslash continuations.

    Physical lines are split on LF only and trimmed; CR from CRLF files is
    removed by the trim. A line starting with '#' is a comment and never
    continues, even when it ends in a backslash.
    """
    pending: str | None = None
    for raw in source.split("\n"):
        line = _trim(raw)
        if pending is None and line.startswith(COMMENT_CHAR):
            yield line
            continue
        if pending is not None:
            line = pending + line
        if _has_continuation(line):
            pending = line[:-1]
            continue
        pending = None
        yield line
    if pending is not None:
        yield pending


def strip_comment(line: str) -> str:
    """Cut the line at the first '#' that is not preceded by a backslash.

    Example:
        >>> strip_comment("key=value # note")
        'key=value '
        >>> strip_comment("tag=\\\\#1")
        'tag=\\\\#1'
    """
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == CONTINUATION_CHAR:
            index += 2
            continue
        if char == COMMENT_CHAR:
            return line[:index]
        index += 1
    return line


def decode_unicode_escapes(text: str) -> str:
    """Replace each \\uXXXX escape by its numeric character reference.

    Example:
        >>> decode_unicode_escapes("caf\\\\u00e9")
        'caf&#233;'
    """
    return _UNICODE_ESCAPE.sub(lambda m: f"&#{int(m.group(1), 16)};", text)


def _replace_escape(match: re.Match[str]) -> str:
    body = match.group(1)
    if body[0] in "01234567":
        return chr(int(body, 8) & 0xFF)
    if body[0] == "x" and len(body) > 1:
        return chr(int(body[1:], 16))
    return _SIMPLE_ESCAPES.get(body, body)


def unescape_value(text: str) -> str:
    """Resolve C-style backslash escapes.

    Known escapes map to control characters, octal and hex escapes to the
    character with that code, and any other escaped character to itself.
    A lone trailing backslash is kept.

    Example:
        >>> unescape_value('say \\\\"hi\\\\"\\\\n')
        'say "hi"\\n'
    """
    if CONTINUATION_CHAR not in text:
        return text
    return _C_ESCAPE.sub(_replace_escape, text)


def parse_properties(source: str) -> ParsedProperties:
    """Parse properties text into an ordered mapping.

    Never raises for malformed content: such lines are collected in
    ParsedProperties.malformed_lines and otherwise ignored.

    Args:
        source: Full text of one resource file

    Returns:
        ParsedProperties with entries in first-occurrence order
    """
    entries: dict[str, str] = {}
    malformed: list[str] = []

    for logical in iter_logical_lines(source):
        line = strip_comment(logical)
        if not _trim(line):
            continue
        if "\\u" in line:
            line = decode_unicode_escapes(line)

        raw_key, sep, raw_value = line.partition("=")
        key = _trim(raw_key)
        if not sep or not key:
            malformed.append(line)
            continue

        entries.setdefault(key, unescape_value(_trim(raw_value)))

    return ParsedProperties(entries=entries, malformed_lines=tuple(malformed))
