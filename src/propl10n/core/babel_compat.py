"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that every
Babel-backed feature reports a missing installation the same way.

Design Rationale:
    propl10n supports two installation modes:
    - Core: `pip install propl10n` (no external dependencies)
    - CLDR names: `pip install propl10n[babel]` (display names from Babel)

    This module ensures that:
    1. Core installations never trigger Babel imports
    2. LocaleNames.from_babel gets a helpful error message when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from propl10n.core.babel_compat import get_locale_class

    def my_function(locale_code: str) -> None:
        Locale = get_locale_class("my_function")  # BabelImportError if missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale


__all__ = [
    "BabelImportError",
    "get_locale_class",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install propl10n[babel]"
        )
        super().__init__(message)
        self.feature = feature


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class(feature: str = "get_locale_class") -> type[Locale]:
    """Get the Babel Locale class.

    Args:
        feature: Name of the calling feature (for the error message)

    Returns:
        The Babel Locale class

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel(feature)
    from babel import Locale  # noqa: PLC0415

    return Locale
