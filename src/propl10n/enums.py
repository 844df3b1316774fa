"""Enumerations for propl10n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of a single resource or hierarchy file read.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File was read and parsed."""

    NOT_FOUND = "not_found"
    """File does not exist. Expected for most cascade candidates."""

    ERROR = "error"
    """File exists but could not be read or decoded, or its tag was rejected."""


class DirectiveKind(StrEnum):
    """Rendering behavior selected by the first character of a directive string.

    StrEnum provides automatic string conversion: str(DirectiveKind.LOOKUP) == "lookup"
    """

    RECODE = "recode"
    """Leading degree sign: render the rest, then recode to the output encoding."""

    LOOKUP = "lookup"
    """Leading @: catalog lookup with optional inline |-arguments."""

    ESCAPE = "escape"
    """Leading #: HTML-entity-escaped copy of the rest."""

    VERBATIM = "verbatim"
    """Anything else: returned unchanged."""


__all__ = [
    "DirectiveKind",
    "LoadStatus",
]
