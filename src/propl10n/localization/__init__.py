"""Localization package: hierarchy, cascade, catalog and the Localizer facade.

Submodules:
    types        - PEP 695 type aliases (LocaleTag, ResourceKey, ...)
    loading      - ResourceLoader protocol, FileResourceLoader,
                   ResourceLoadResult, LoadSummary
    hierarchy    - Hierarchy file parsing and fallback chain resolution
    catalog      - MergedCatalog (first-writer-wins mapping)
    cascade      - Multi-root, multi-locale merge of properties files
    names        - LocaleNames tables and configured-locale listing
    orchestrator - Localizer (facade)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from propl10n.enums import LoadStatus
from propl10n.localization.cascade import CascadeResult, build_catalog
from propl10n.localization.catalog import MergedCatalog
from propl10n.localization.hierarchy import (
    HierarchyEntry,
    LocaleChain,
    load_hierarchy,
    parse_hierarchy,
    resolve_chain,
)
from propl10n.localization.loading import (
    FileResourceLoader,
    LoadSummary,
    ResourceLoader,
    ResourceLoadResult,
)
from propl10n.localization.names import LocaleEntry, LocaleNames, list_locales
from propl10n.localization.orchestrator import Localizer
from propl10n.localization.types import LocaleMap, LocaleTag, ResourceKey, ResourceValue

__all__ = [
    # Facade
    "Localizer",
    # Hierarchy
    "HierarchyEntry",
    "LocaleChain",
    "load_hierarchy",
    "parse_hierarchy",
    "resolve_chain",
    # Cascade
    "CascadeResult",
    "MergedCatalog",
    "build_catalog",
    # Loader protocol and implementation
    "ResourceLoader",
    "FileResourceLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Display names
    "LocaleEntry",
    "LocaleNames",
    "list_locales",
    # Type aliases
    "LocaleMap",
    "LocaleTag",
    "ResourceKey",
    "ResourceValue",
]
