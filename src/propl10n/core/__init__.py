"""Core utilities shared across parsing, localization and runtime layers.

Exports:
    Propl10nError: Base exception
    LocaleTagError: Raised for tags unusable in resource file names

Python 3.13+.
"""

from .errors import LocaleTagError, Propl10nError

__all__ = ["LocaleTagError", "Propl10nError"]
