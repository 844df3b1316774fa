"""Locale hierarchy description and fallback chain resolution.

The hierarchy file lists every configured locale, one per line, optionally
followed by explicit substitutes queried when a key is missing:

    # configured locales
    de_DE
    de_AT
    en de

Here English falls back to generic German. The language-only parent of a
tag (de for de_AT) is never listed: the cascade peels it implicitly.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from propl10n.constants import COMMENT_CHAR
from propl10n.localization.loading import ResourceLoader
from propl10n.localization.types import LocaleTag

__all__ = [
    "HierarchyEntry",
    "LocaleChain",
    "load_hierarchy",
    "parse_hierarchy",
    "resolve_chain",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HierarchyEntry:
    """One configured locale with its explicit substitutes.

    Attributes:
        primary: Configured locale tag (first token of the line)
        substitutes: Remaining tokens in file order
    """

    primary: LocaleTag
    substitutes: tuple[LocaleTag, ...] = ()

    @property
    def chain(self) -> tuple[LocaleTag, ...]:
        """Primary followed by its substitutes."""
        return (self.primary, *self.substitutes)


@dataclass(frozen=True, slots=True)
class LocaleChain:
    """Fallback chain for the requested locale plus every configured locale.

    Attributes:
        chain: Tags to cascade through, empty if the locale is not configured
        available: Primary tags of all hierarchy lines, in file order
    """

    chain: tuple[LocaleTag, ...]
    available: tuple[LocaleTag, ...]


def parse_hierarchy(source: str) -> tuple[HierarchyEntry, ...]:
    """Parse hierarchy text into entries.

    Blank lines and lines whose first token starts with '#' are skipped.
    Tokens are separated by any run of whitespace.

    Args:
        source: Full text of the hierarchy file

    Returns:
        Entries in file order
    """
    entries: list[HierarchyEntry] = []
    for line in source.splitlines():
        tokens = line.split()
        if not tokens or tokens[0].startswith(COMMENT_CHAR):
            continue
        entries.append(HierarchyEntry(tokens[0], tuple(tokens[1:])))
    return tuple(entries)


def resolve_chain(requested: LocaleTag, entries: Iterable[HierarchyEntry]) -> LocaleChain:
    """Select the fallback chain for the requested locale.

    Matching is exact and case-sensitive. When several lines declare the
    same primary tag, the last one provides the chain; every line still
    contributes to ``available``.

    Args:
        requested: Locale tag asked for by the caller
        entries: Parsed hierarchy entries

    Returns:
        LocaleChain; ``chain`` is empty if no line matches
    """
    available: list[LocaleTag] = []
    chain: tuple[LocaleTag, ...] | None = None
    for entry in entries:
        available.append(entry.primary)
        if entry.primary == requested:
            chain = entry.chain

    if chain is None:
        logger.info("Locale %r is not configured; using catch-all resources only", requested)
        chain = ()
    return LocaleChain(chain=chain, available=tuple(available))


def load_hierarchy(
    path: str, requested: LocaleTag, loader: ResourceLoader
) -> LocaleChain:
    """Read the hierarchy file and resolve the chain for requested.

    A missing or unreadable file is not an error: it yields an empty chain
    and no available locales.

    Args:
        path: Hierarchy file location
        requested: Locale tag asked for by the caller
        loader: Loader used to read the file

    Returns:
        LocaleChain for the requested locale
    """
    try:
        source = loader.load(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Hierarchy file %s unavailable: %s", path, e)
        return LocaleChain(chain=(), available=())
    return resolve_chain(requested, parse_hierarchy(source))
