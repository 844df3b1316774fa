"""Locale tag utilities.

Locale tags take the POSIX-like form ``language`` or ``language_COUNTRY``
(``de``, ``de_AT``). Tags are case-significant and never case-folded here:
they are matched verbatim against hierarchy lines and used verbatim in
resource file names.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator
from typing import TYPE_CHECKING

from propl10n.constants import LOCALE_SEPARATOR
from propl10n.core.babel_compat import get_locale_class
from propl10n.core.errors import LocaleTagError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "parent_tag",
    "peel_chain",
    "split_locale",
    "validate_locale_tag",
]


def split_locale(tag: str) -> tuple[str, str | None]:
    """Split a locale tag into language and optional country.

    Only the first separator is significant; anything after a second
    separator stays part of the country segment.

    Example:
        >>> split_locale("de_AT")
        ('de', 'AT')
        >>> split_locale("en")
        ('en', None)
    """
    language, sep, country = tag.partition(LOCALE_SEPARATOR)
    return language, (country if sep else None)


def parent_tag(tag: str) -> str:
    """Return the tag with everything from the last separator removed.

    Returns an empty string once the tag has no separator left, which ends
    the peeling loop.

    Example:
        >>> parent_tag("de_AT")
        'de'
        >>> parent_tag("de")
        ''
    """
    index = tag.rfind(LOCALE_SEPARATOR)
    return tag[:index] if index >= 0 else ""


def peel_chain(tag: str) -> Iterator[str]:
    """Yield the tag and each of its parents, most specific first.

    Example:
        >>> list(peel_chain("sr_Latn_RS"))
        ['sr_Latn_RS', 'sr_Latn', 'sr']
    """
    while tag:
        yield tag
        tag = parent_tag(tag)


def validate_locale_tag(tag: str) -> None:
    """Validate that a tag is safe to embed in a resource file name.

    Args:
        tag: Locale tag taken from the hierarchy file

    Raises:
        LocaleTagError: If the tag is empty or contains path components
    """
    if not tag:
        raise LocaleTagError(tag, "tag cannot be empty")
    if ".." in tag:
        raise LocaleTagError(tag, "path traversal sequences not allowed")
    if "/" in tag or "\\" in tag:
        raise LocaleTagError(tag, "path separators not allowed")


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX form for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Babel loads CLDR data at import time; resolved lazily on first call
    locale_class = get_locale_class("get_babel_locale")
    return locale_class.parse(normalize_locale(locale_code))
