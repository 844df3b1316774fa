"""Directive-driven rendering of caller strings against a merged catalog.

The first character of a directive string selects how it is rendered:

    "°..."          render the rest, then recode it to the output encoding
    "@key"          catalog lookup, {n} placeholders filled from params
    "@key|a|b"      catalog lookup with inline arguments a, b
    "#<b>"          HTML-entity-escaped copy of the rest: "&lt;b&gt;"
    anything else   returned unchanged

Callers may also pass a locale map ({"de": "@x", "en": "plain"}); the entry
for the active locale is rendered.

Inline arguments may reference caller variables as **name**. They are looked
up in a closed table supplied at construction; nothing is evaluated.

Python 3.13+.
"""

from __future__ import annotations

import codecs
import logging
import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from html.entities import codepoint2name
from types import MappingProxyType

from propl10n.constants import (
    DEFAULT_OUTPUT_ENCODING,
    ESCAPE_PREFIX,
    LOOKUP_PREFIX,
    PARAM_SEPARATOR,
    RECODE_PREFIX,
    VARIABLE_MARKER,
)
from propl10n.enums import DirectiveKind
from propl10n.localization.types import (
    LocaleMap,
    LocaleTag,
    ResourceKey,
    ResourceValue,
    VariableTable,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Directive variants
    "Literal",
    "ByLocale",
    "Directive",
    "to_directive",
    "classify",
    # Text helpers
    "substitute_params",
    "missing_key_text",
    "expand_variables",
    "html_entities",
    "recode",
    # Renderer
    "MissingKeyInfo",
    "DirectiveRenderer",
]

logger = logging.getLogger(__name__)

_MARKER = re.escape(VARIABLE_MARKER)
_VARIABLE_REF = re.compile(rf"{_MARKER}([^*]+?){_MARKER}")

# HTML 4.01 named entities, plus the numeric form for the single quote.
_HTML_ENTITIES: dict[int, str] = {cp: f"&{name};" for cp, name in codepoint2name.items()}
_HTML_ENTITIES[ord("'")] = "&#039;"


@dataclass(frozen=True, slots=True)
class Literal:
    """A single directive string."""

    text: str


@dataclass(frozen=True, slots=True)
class ByLocale:
    """Directive strings keyed by locale tag.

    Attributes:
        texts: Locale tag -> directive string or nested locale map
    """

    texts: LocaleMap

    def __post_init__(self) -> None:
        object.__setattr__(self, "texts", MappingProxyType(dict(self.texts)))

    def select(self, locales: Iterable[LocaleTag]) -> str | LocaleMap | None:
        """Return the text for the first of locales that has one."""
        for locale in locales:
            if locale in self.texts:
                return self.texts[locale]
        return None


type Directive = Literal | ByLocale


def to_directive(value: str | LocaleMap | Directive) -> Directive:
    """Coerce caller input into a Directive.

    Raises:
        TypeError: If value is neither a string, a mapping, nor a Directive
    """
    match value:
        case Literal() | ByLocale():
            return value
        case str():
            return Literal(value)
        case Mapping():
            return ByLocale(value)
        case _:
            msg = f"Expected str or locale mapping, got {type(value).__name__}"
            raise TypeError(msg)


def classify(text: str) -> DirectiveKind:
    """Determine the rendering behavior of a directive string."""
    if text.startswith(RECODE_PREFIX):
        return DirectiveKind.RECODE
    if text.startswith(LOOKUP_PREFIX):
        return DirectiveKind.LOOKUP
    if text.startswith(ESCAPE_PREFIX):
        return DirectiveKind.ESCAPE
    return DirectiveKind.VERBATIM


def substitute_params(text: str, params: Sequence[object] | None) -> str:
    """Replace {0}, {1}, ... with the matching params.

    Replacement runs index by index over the whole text, so a parameter
    value containing "{1}" is itself subject to the next replacement.
    Placeholders without a matching param stay literal.

    Example:
        >>> substitute_params("Hello {0}, you have {1} items", ["Ann", "3"])
        'Hello Ann, you have 3 items'
        >>> substitute_params("{0} {2}", ["x"])
        'x {2}'
    """
    if not params:
        return text
    for index, param in enumerate(params):
        text = text.replace(f"{{{index}}}", str(param))
    return text


def missing_key_text(key: ResourceKey, params: Sequence[object] | None) -> str:
    """Visible stand-in for an untranslated key.

    Example:
        >>> missing_key_text("foo.bar", None)
        'foo.bar'
        >>> missing_key_text("foo.bar", ["x", "y"])
        'foo.bar|x|y'
    """
    if params is None:
        return key
    return key + PARAM_SEPARATOR + PARAM_SEPARATOR.join(str(p) for p in params)


def expand_variables(text: str, variables: VariableTable) -> str:
    """Replace **name** references with values from variables.

    Unknown names are left in place so the gap is visible in the output.
    """
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        logger.debug("Unknown variable reference: %s", name)
        return match.group(0)

    return _VARIABLE_REF.sub(replace, text)


def html_entities(text: str) -> str:
    """Escape text for HTML, using named entities where HTML 4.01 has one.

    Example:
        >>> html_entities("<b>café</b>")
        '&lt;b&gt;caf&eacute;&lt;/b&gt;'
    """
    return text.translate(_HTML_ENTITIES)


def recode(text: str, encoding: str) -> str:
    """Make text representable in encoding.

    Characters the target encoding cannot hold become numeric character
    references; everything else passes through unchanged.

    Example:
        >>> recode("Jänner", "ascii")
        'J&#228;nner'
    """
    return text.encode(encoding, errors="xmlcharrefreplace").decode(encoding)


@dataclass(frozen=True, slots=True)
class MissingKeyInfo:
    """Information about a key that had no catalog entry.

    Attributes:
        key: The key that was looked up
        locale: Active locale of the renderer
    """

    key: ResourceKey
    locale: LocaleTag


class DirectiveRenderer:
    """Renders directive strings against a read-only catalog.

    Holds no mutable state: one instance can serve any number of calls.

    Example:
        >>> renderer = DirectiveRenderer({"month.jan": "January"}, "en")
        >>> renderer.render("@month.jan")
        'January'
        >>> renderer.render("#<b>")
        '&lt;b&gt;'
        >>> renderer.render("plain text")
        'plain text'
    """

    __slots__ = (
        "_catalog",
        "_locale",
        "_locale_order",
        "_on_missing",
        "_output_encoding",
        "_variables",
    )

    def __init__(
        self,
        catalog: Mapping[ResourceKey, ResourceValue],
        locale: LocaleTag,
        *,
        fallback_locales: Iterable[LocaleTag] = (),
        variables: VariableTable | None = None,
        output_encoding: str = DEFAULT_OUTPUT_ENCODING,
        on_missing: Callable[[MissingKeyInfo], None] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            catalog: Merged key -> value mapping
            locale: Active locale, selects entries of locale maps
            fallback_locales: Tried in order when a locale map has no entry
                              for the active locale
            variables: Values for **name** references in inline arguments
            output_encoding: Target encoding of the recode directive
            on_missing: Called with MissingKeyInfo for each missing key

        Raises:
            LookupError: If output_encoding is not a known codec
        """
        codecs.lookup(output_encoding)
        self._catalog = catalog
        self._locale = locale
        self._locale_order: tuple[LocaleTag, ...] = tuple(
            dict.fromkeys((locale, *fallback_locales))
        )
        self._variables: VariableTable = MappingProxyType(dict(variables or {}))
        self._output_encoding = output_encoding
        self._on_missing = on_missing

    @property
    def locale(self) -> LocaleTag:
        """Active locale tag."""
        return self._locale

    @property
    def output_encoding(self) -> str:
        """Target encoding of the recode directive."""
        return self._output_encoding

    def get(self, key: ResourceKey, params: Sequence[object] | None = None) -> str:
        """Look up key and fill its placeholders.

        Args:
            key: Catalog key
            params: Positional values for {0}, {1}, ...

        Returns:
            The substituted value, or the key (with |-joined params) if absent
        """
        value = self._catalog.get(key)
        if value is None:
            logger.debug("Missing key %r for locale %s", key, self._locale)
            if self._on_missing is not None:
                self._on_missing(MissingKeyInfo(key=key, locale=self._locale))
            return missing_key_text(key, params)
        return substitute_params(value, params)

    def render(
        self,
        text: str | LocaleMap | Directive,
        params: Sequence[object] | None = None,
    ) -> str:
        """Render a directive string or locale map.

        Args:
            text: Directive string, locale map, or Directive
            params: Positional values for lookups without inline arguments

        Returns:
            Rendered text; never raises for missing keys or locale entries

        Raises:
            TypeError: If text is not a string, mapping, or Directive
        """
        match to_directive(text):
            case ByLocale() as by_locale:
                selected = by_locale.select(self._locale_order)
                if selected is None:
                    logger.warning(
                        "Locale map has no entry for %s (tried %s)",
                        self._locale,
                        ", ".join(self._locale_order),
                    )
                    return ""
                return self.render(selected, params)
            case Literal(text=literal):
                return self._render_text(literal, params)

    def render_sequence(
        self, texts: Iterable[str | LocaleMap | Directive]
    ) -> str:
        """Render each element without params and concatenate the results."""
        return "".join(self.render(text) for text in texts)

    def _render_text(self, text: str, params: Sequence[object] | None) -> str:
        match classify(text):
            case DirectiveKind.RECODE:
                return recode(self._render_text(text[len(RECODE_PREFIX):], params),
                              self._output_encoding)
            case DirectiveKind.LOOKUP:
                return self._lookup(text[len(LOOKUP_PREFIX):], params)
            case DirectiveKind.ESCAPE:
                return html_entities(text[len(ESCAPE_PREFIX):])
            case _:
                return text

    def _lookup(self, body: str, params: Sequence[object] | None) -> str:
        parts = expand_variables(body, self._variables).split(PARAM_SEPARATOR)
        if len(parts) > 1:
            return self.get(parts[0], parts[1:])
        return self.get(body, params)
