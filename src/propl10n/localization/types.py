"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating Localizer call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LocaleMap",
    "LocaleTag",
    "ResourceKey",
    "ResourceValue",
    "VariableTable",
]

type LocaleTag = str
"""Locale tag in ``language`` or ``language_COUNTRY`` form (e.g., 'de', 'de_AT')."""

type ResourceKey = str
"""Key of a properties entry (e.g., 'month.jan')."""

type ResourceValue = str
"""Decoded value of a properties entry, possibly with {n} placeholders."""

type LocaleMap = Mapping[LocaleTag, str | LocaleMap]
"""Caller-supplied text per locale; entries may themselves be locale maps."""

type VariableTable = Mapping[str, str]
"""Closed name -> value table for **name** references in lookup arguments."""
