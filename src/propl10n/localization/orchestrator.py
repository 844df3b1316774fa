"""Localizer: locale resolution, resource cascade and rendering in one object.

A Localizer is built once per requested locale (typically once per request)
and is read-only afterwards. Construction reads the hierarchy file, resolves
the fallback chain, runs the cascade over all search roots, and freezes the
merged catalog. Nothing is loaded lazily.

Example layout with hierarchy file ``/site/i18n.ini``::

    de_DE
    de_AT
    en de

and resources under ``/site/i18n``::

    index_p_de.properties      month.jan=Januar / month.feb=Februar
    index_p_de_AT.properties   month.jan=Jänner
    index_p_en.properties      month.jan=January

    >>> l10n = Localizer("de_AT", hierarchy_path="/site/i18n.ini",
    ...                  document_root="/site", base_name="index_p")
    >>> l10n.localize("@month.jan"), l10n.localize("@month.feb")
    ('Jänner', 'Februar')

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence

from propl10n.constants import (
    DEFAULT_EXTENSION,
    DEFAULT_OUTPUT_ENCODING,
    DEFAULT_PATH_PREFIX,
    UNKNOWN_LOCALE,
)
from propl10n.locale_utils import peel_chain
from propl10n.localization.cascade import build_catalog
from propl10n.localization.hierarchy import LocaleChain, load_hierarchy
from propl10n.localization.loading import FileResourceLoader, LoadSummary, ResourceLoader
from propl10n.localization.names import LocaleEntry, LocaleNames, list_locales
from propl10n.localization.types import (
    LocaleMap,
    LocaleTag,
    ResourceKey,
    ResourceValue,
    VariableTable,
)
from propl10n.runtime.directives import Directive, DirectiveRenderer, MissingKeyInfo

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)


def _normalize_roots(search_roots: str | Iterable[str] | None) -> tuple[str, ...]:
    if isinstance(search_roots, str):
        search_roots = (search_roots,)
    roots = tuple(root for root in (search_roots or ()) if root)
    return roots or (DEFAULT_PATH_PREFIX,)


class Localizer:
    """Localized strings for one requested locale.

    Attributes:
        locale: Requested locale tag, as given
        chain: Fallback chain from the hierarchy (empty if not configured)
        available: All configured locale tags in hierarchy order
    """

    __slots__ = (
        "_available",
        "_catalog",
        "_chain",
        "_load_summary",
        "_locale",
        "_names",
        "_renderer",
    )

    def __init__(
        self,
        locale: LocaleTag | None,
        *,
        base_name: str,
        hierarchy_path: str,
        search_roots: str | Iterable[str] | None = None,
        document_root: str = "",
        extension: str = DEFAULT_EXTENSION,
        loader: ResourceLoader | None = None,
        names: LocaleNames | None = None,
        variables: VariableTable | None = None,
        output_encoding: str = DEFAULT_OUTPUT_ENCODING,
        on_missing: Callable[[MissingKeyInfo], None] | None = None,
    ) -> None:
        """Load hierarchy and resources for locale.

        Args:
            locale: Requested locale tag; empty or None becomes "?", which
                    matches no hierarchy line
            base_name: Resource file base relative to each search root
                       (e.g., "index_p" or "/sub/index_p"); a leading "/"
                       is added when missing
            hierarchy_path: Location of the hierarchy description file
            search_roots: Path prefixes searched in order; defaults to "/i18n"
            document_root: Prefix prepended to every resource path
            extension: Resource file extension without the dot
            loader: File loader; defaults to FileResourceLoader()
            names: Display-name tables; defaults to LocaleNames.default()
            variables: Values for **name** references in lookup arguments
            output_encoding: Target encoding of the recode directive
            on_missing: Called with MissingKeyInfo for each missing key

        Raises:
            ValueError: If base_name or extension is empty
            LookupError: If output_encoding is not a known codec
        """
        if not base_name:
            msg = "base_name must not be empty"
            raise ValueError(msg)
        if not extension:
            msg = "extension must not be empty"
            raise ValueError(msg)
        if not base_name.startswith("/"):
            base_name = "/" + base_name

        loader = loader if loader is not None else FileResourceLoader()
        self._locale: LocaleTag = locale or UNKNOWN_LOCALE
        self._names = names if names is not None else LocaleNames.default()

        resolved: LocaleChain = load_hierarchy(hierarchy_path, self._locale, loader)
        self._chain = resolved.chain
        self._available = resolved.available

        cascade = build_catalog(
            _normalize_roots(search_roots),
            base_name,
            self._chain,
            loader,
            extension=extension,
            document_root=document_root,
        )
        self._catalog = cascade.catalog
        self._load_summary = LoadSummary(results=cascade.results)

        fallback_locales = [peeled for tag in self._chain for peeled in peel_chain(tag)]
        self._renderer = DirectiveRenderer(
            self._catalog,
            self._locale,
            fallback_locales=fallback_locales,
            variables=variables,
            output_encoding=output_encoding,
            on_missing=on_missing,
        )

        logger.info(
            "Localizer ready for %s: chain=%s, %d keys from %d of %d files",
            self._locale,
            list(self._chain),
            len(self._catalog),
            self._load_summary.successful,
            self._load_summary.total_attempted,
        )

    def __repr__(self) -> str:
        return (
            f"Localizer(locale={self._locale!r}, chain={self._chain!r}, "
            f"keys={len(self._catalog)})"
        )

    def __contains__(self, key: object) -> bool:
        return key in self._catalog

    @property
    def locale(self) -> LocaleTag:
        """Requested locale tag, unmodified ("?" if none was given)."""
        return self._locale

    @property
    def chain(self) -> tuple[LocaleTag, ...]:
        """Fallback chain taken from the hierarchy file."""
        return self._chain

    @property
    def available(self) -> tuple[LocaleTag, ...]:
        """Configured locale tags in hierarchy order."""
        return self._available

    @property
    def catalog(self) -> Mapping[ResourceKey, ResourceValue]:
        """Read-only merged catalog."""
        return self._catalog

    def get_locale(self) -> LocaleTag:
        """Return the raw locale tag of this localizer."""
        return self._locale

    def get_keys(self) -> list[ResourceKey]:
        """Return all loaded keys in load order."""
        return list(self._catalog)

    def get(self, key: ResourceKey, params: Sequence[object] | None = None) -> str:
        """Look up key, substituting {n} placeholders with params.

        Missing keys come back as the key itself, suffixed with the
        |-joined params when params is given.
        """
        return self._renderer.get(key, params)

    def localize(
        self,
        text: str | LocaleMap | Directive,
        params: Sequence[object] | None = None,
    ) -> str:
        """Render a directive string or a locale map.

        See propl10n.runtime.directives for the directive grammar.
        """
        return self._renderer.render(text, params)

    def localize_sequence(
        self, texts: Iterable[str | LocaleMap | Directive]
    ) -> str:
        """Render each element and concatenate the results."""
        return self._renderer.render_sequence(texts)

    def get_all_locales(self, in_locale: str | None = None) -> tuple[LocaleEntry, ...]:
        """List configured locales with display names.

        Args:
            in_locale: Locale for the names; "CURRENT" for this localizer's
                       locale; None for each locale's own language

        Returns:
            One LocaleEntry per configured locale, active one flagged
        """
        return list_locales(self._available, self._locale, self._names, in_locale)

    def get_load_summary(self) -> LoadSummary:
        """Summary of every resource file the cascade attempted."""
        return self._load_summary
