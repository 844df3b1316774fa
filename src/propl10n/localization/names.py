"""Display names for configured locales.

LocaleNames holds two static tables:

    languages: language code -> (display locale -> name)
    countries: country code  -> (display locale -> name)

list_locales() turns the configured tags into printable entries such as
"Deutsch (Österreich)", choosing each name by priority:

    1. the name in the wanted display locale (or its language), if given
    2. the name in the tag's own language
    3. the first name in the table
    4. the raw code, if the table has no entry at all

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from propl10n.constants import CURRENT_LOCALE
from propl10n.core.babel_compat import require_babel
from propl10n.locale_utils import get_babel_locale, peel_chain, split_locale
from propl10n.localization.types import LocaleTag

__all__ = ["LocaleEntry", "LocaleNames", "list_locales"]

logger = logging.getLogger(__name__)

type NameTable = Mapping[str, Mapping[str, str]]

_DEFAULT_LANGUAGES: dict[str, dict[str, str]] = {
    "de": {"de": "Deutsch", "en": "German", "fr": "Allemand"},
    "en": {"en": "English", "de": "Englisch", "fr": "Anglais"},
    "fr": {"fr": "Francais", "de": "Französisch", "en": "French"},
    "sv": {"sv": "Svenska", "en": "Swedish"},
    "no": {"no": "Norsk", "en": "Norwegian"},
}

_DEFAULT_COUNTRIES: dict[str, dict[str, str]] = {
    "DE": {"de": "Deutschland", "en": "Germany"},
    "UK": {"en": "United Kingdom", "de": "Großbritannien"},
    "US": {"en": "United States", "de": "USA"},
    "AT": {"de": "Österreich", "en": "Austria"},
    "CH": {"de": "Schweiz", "fr": "Suisse", "en": "Switzerland"},
    "FR": {"fr": "France", "de": "Frankreich", "en": "France"},
    "CA": {"en": "Canada", "fr": "Canada", "de": "Kanada"},
    "SE": {"sv": "Sverige", "de": "Schweden", "en": "Sweden"},
    "NO": {"no": "Norge", "en": "Norway", "de": "Norwegen"},
}


@dataclass(frozen=True, slots=True)
class LocaleEntry:
    """One configured locale ready for display.

    Attributes:
        locale: Configured tag (e.g., 'de_AT')
        display_name: Printable name (e.g., 'Deutsch (Österreich)')
        is_current: True for the active locale
    """

    locale: LocaleTag
    display_name: str
    is_current: bool = False


def _freeze(table: NameTable) -> NameTable:
    return MappingProxyType({code: MappingProxyType(dict(names)) for code, names in table.items()})


@dataclass(frozen=True, slots=True)
class LocaleNames:
    """Read-only language and country display-name tables.

    Attributes:
        languages: language code -> (display locale -> name)
        countries: country code -> (display locale -> name)
    """

    languages: NameTable = field(default_factory=dict)
    countries: NameTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "languages", _freeze(self.languages))
        object.__setattr__(self, "countries", _freeze(self.countries))

    @classmethod
    def default(cls) -> LocaleNames:
        """Built-in tables for de, en, fr, sv and no plus common countries."""
        return cls(languages=_DEFAULT_LANGUAGES, countries=_DEFAULT_COUNTRIES)

    @classmethod
    def from_babel(
        cls,
        tags: Iterable[LocaleTag],
        display_locales: Iterable[str] = (),
    ) -> LocaleNames:
        """Build tables for the given tags from CLDR data.

        Names are collected in every display locale given plus the language
        of each tag, so the "own language" tier is always populated when
        CLDR knows the name.

        Args:
            tags: Locale tags whose language and country need names
            display_locales: Additional locales to collect names in

        Returns:
            LocaleNames covering the languages and countries of tags

        Raises:
            BabelImportError: If Babel is not installed
        """
        require_babel("LocaleNames.from_babel")
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        languages: list[str] = []
        countries: list[str] = []
        for tag in tags:
            language, country = split_locale(tag)
            languages.append(language)
            if country:
                countries.append(country)
        languages = list(dict.fromkeys(languages))
        countries = list(dict.fromkeys(countries))

        language_table: dict[str, dict[str, str]] = {code: {} for code in languages}
        country_table: dict[str, dict[str, str]] = {code: {} for code in countries}
        for display in dict.fromkeys([*display_locales, *languages]):
            try:
                babel_locale = get_babel_locale(display)
            except (UnknownLocaleError, ValueError) as e:
                logger.warning("No CLDR data for display locale %r: %s", display, e)
                continue
            for code in languages:
                if name := babel_locale.languages.get(code):
                    language_table[code][display] = name
            for code in countries:
                if name := babel_locale.territories.get(code):
                    country_table[code][display] = name

        return cls(
            languages={k: v for k, v in language_table.items() if v},
            countries={k: v for k, v in country_table.items() if v},
        )

    def language_name(self, code: str, in_locale: str | None = None) -> str:
        """Display name for a language code."""
        return _pick(self.languages.get(code), in_locale, code) or code

    def country_name(self, code: str, language: str, in_locale: str | None = None) -> str:
        """Display name for a country code, preferring the tag's language."""
        return _pick(self.countries.get(code), in_locale, language) or code


def _pick(names: Mapping[str, str] | None, wanted: str | None, genuine: str) -> str | None:
    if not names:
        return None
    for tag in peel_chain(wanted or ""):
        if names.get(tag):
            return names[tag]
    if names.get(genuine):
        return names[genuine]
    return next(iter(names.values()))


def list_locales(
    available: Iterable[LocaleTag],
    active_locale: LocaleTag,
    names: LocaleNames,
    in_locale: str | None = None,
) -> tuple[LocaleEntry, ...]:
    """List configured locales with display names.

    Args:
        available: Configured tags in hierarchy order
        active_locale: Tag of the active localizer
        names: Display-name tables
        in_locale: Locale to show names in; "CURRENT" means active_locale;
                   None shows each name in its own language

    Returns:
        One LocaleEntry per configured tag
    """
    if in_locale == CURRENT_LOCALE:
        in_locale = active_locale

    entries: list[LocaleEntry] = []
    for tag in available:
        language, country = split_locale(tag)
        display = names.language_name(language, in_locale)
        if country:
            display = f"{display} ({names.country_name(country, language, in_locale)})"
        entries.append(LocaleEntry(tag, display, is_current=tag == active_locale))
    return tuple(entries)
