"""Hypothesis strategies for propl10n property-based testing.

Usage:
    from tests.strategies import locale_tags, property_keys, property_values
"""

from .properties import (
    locale_tags,
    properties_documents,
    property_keys,
    property_values,
)

__all__ = [
    "locale_tags",
    "properties_documents",
    "property_keys",
    "property_values",
]
