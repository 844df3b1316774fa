"""Cascading merge of properties files across search roots and locales.

For every search root, the cascade walks the fallback chain and peels each
tag down to its language, then finishes the root with the locale-less base
file. Files earlier in this order win on key collisions:

    roots=["/i18n", "/shared"], base="/index_p", chain=["en", "de"]

    /i18n/index_p_en.properties
    /i18n/index_p_de.properties
    /i18n/index_p.properties
    /shared/index_p_en.properties
    /shared/index_p_de.properties
    /shared/index_p.properties

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from propl10n.constants import DEFAULT_EXTENSION
from propl10n.core.errors import LocaleTagError
from propl10n.enums import LoadStatus
from propl10n.locale_utils import peel_chain, validate_locale_tag
from propl10n.localization.catalog import MergedCatalog
from propl10n.localization.loading import ResourceLoader, ResourceLoadResult
from propl10n.localization.types import LocaleTag
from propl10n.parsing.properties import parse_properties

__all__ = [
    "CascadeResult",
    "build_catalog",
    "cascade_candidates",
    "load_properties",
    "resource_path",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CascadeResult:
    """Frozen catalog plus the record of every file the cascade attempted.

    Attributes:
        catalog: Merged, frozen catalog
        results: Load results in cascade order
    """

    catalog: MergedCatalog
    results: tuple[ResourceLoadResult, ...] = field(default=())


def resource_path(prefix: str, locale: LocaleTag, extension: str = DEFAULT_EXTENSION) -> str:
    """Build the file name for one cascade candidate.

    Example:
        >>> resource_path("/i18n/index_p", "de_AT")
        '/i18n/index_p_de_AT.properties'
        >>> resource_path("/i18n/index_p", "")
        '/i18n/index_p.properties'
    """
    if not locale:
        return f"{prefix}.{extension}"
    return f"{prefix}_{locale}.{extension}"


def cascade_candidates(
    search_roots: Iterable[str],
    base_name: str,
    chain: Iterable[LocaleTag],
) -> Iterator[tuple[str, LocaleTag]]:
    """Yield (file prefix, locale tag) pairs in merge order.

    The catch-all base file of each root is yielded with an empty tag.
    Tags are not deduplicated: a tag reachable twice is simply read twice,
    which cannot change the result under first-writer-wins.
    """
    chain = tuple(chain)
    for root in search_roots:
        prefix = f"{root}{base_name}"
        for tag in chain:
            for peeled in peel_chain(tag):
                yield prefix, peeled
        yield prefix, ""


def load_properties(
    path: str,
    locale: LocaleTag,
    loader: ResourceLoader,
    into: MergedCatalog,
) -> ResourceLoadResult:
    """Read one resource file and merge it into the catalog.

    Never raises for I/O or decoding problems; they are reported through
    the returned ResourceLoadResult.

    Args:
        path: File to read
        locale: Tag this file belongs to (empty for the catch-all file)
        loader: Loader implementation to use
        into: Catalog receiving absent keys

    Returns:
        ResourceLoadResult indicating success, not_found, or error
    """
    try:
        source = loader.load(path)
    except FileNotFoundError:
        logger.debug("Resource file not found: %s", path)
        return ResourceLoadResult(path=path, locale=locale, status=LoadStatus.NOT_FOUND)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read resource file %s: %s", path, e)
        return ResourceLoadResult(path=path, locale=locale, status=LoadStatus.ERROR, error=e)

    parsed = parse_properties(source)
    added = into.merge(parsed.entries.items())
    logger.debug(
        "Loaded %s: %d entries, %d new, %d malformed",
        path,
        len(parsed),
        added,
        len(parsed.malformed_lines),
    )
    return ResourceLoadResult(
        path=path,
        locale=locale,
        status=LoadStatus.SUCCESS,
        keys_added=added,
        malformed_lines=parsed.malformed_lines,
    )


def build_catalog(
    search_roots: Iterable[str],
    base_name: str,
    chain: Iterable[LocaleTag],
    loader: ResourceLoader,
    *,
    extension: str = DEFAULT_EXTENSION,
    document_root: str = "",
) -> CascadeResult:
    """Run the full cascade and return the frozen catalog.

    Args:
        search_roots: Path prefixes tried in order (e.g., ["/i18n"])
        base_name: File base appended to each root (e.g., "/index_p")
        chain: Fallback chain from the hierarchy
        loader: Loader used for every file
        extension: Resource file extension without the dot
        document_root: Prefix prepended to every assembled path

    Returns:
        CascadeResult with the merged catalog and per-file load results
    """
    catalog = MergedCatalog()
    results: list[ResourceLoadResult] = []

    for prefix, tag in cascade_candidates(search_roots, base_name, chain):
        path = resource_path(f"{document_root}{prefix}", tag, extension)
        if tag:
            try:
                validate_locale_tag(tag)
            except LocaleTagError as e:
                logger.warning("Skipping resource %s: %s", path, e)
                results.append(
                    ResourceLoadResult(path=path, locale=tag, status=LoadStatus.ERROR, error=e)
                )
                continue
        results.append(load_properties(path, tag, loader, catalog))

    return CascadeResult(catalog=catalog.freeze(), results=tuple(results))
