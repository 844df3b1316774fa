"""Shared constants for propl10n.

Centralized defaults used by the parser, the cascade and the facade.
Placing them here avoids circular imports between subpackages.

Constants are grouped by domain:
- File layout: Default search root, extension and encoding
- Locale markers: Sentinel locale values understood by the facade
- Parsing: Character sets mirrored from the properties file format

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # File layout
    "DEFAULT_PATH_PREFIX",
    "DEFAULT_EXTENSION",
    "DEFAULT_ENCODING",
    "DEFAULT_OUTPUT_ENCODING",
    # Locale markers
    "UNKNOWN_LOCALE",
    "CURRENT_LOCALE",
    "LOCALE_SEPARATOR",
    # Parsing
    "TRIM_CHARS",
    "COMMENT_CHAR",
    "CONTINUATION_CHAR",
    "PARAM_SEPARATOR",
    # Directive prefixes
    "RECODE_PREFIX",
    "LOOKUP_PREFIX",
    "ESCAPE_PREFIX",
    "VARIABLE_MARKER",
]

# ============================================================================
# FILE LAYOUT
# ============================================================================

# Search root used when the caller passes none.
DEFAULT_PATH_PREFIX: str = "/i18n"

# Resource files are named <base>_<tag>.<ext> and <base>.<ext>.
DEFAULT_EXTENSION: str = "properties"

# Encoding used to decode hierarchy and resource files.
DEFAULT_ENCODING: str = "utf-8"

# Target encoding for the recode directive.
DEFAULT_OUTPUT_ENCODING: str = "utf-8"

# ============================================================================
# LOCALE MARKERS
# ============================================================================

# Substituted for an empty requested locale. Never matches a hierarchy line.
UNKNOWN_LOCALE: str = "?"

# Passed as in_locale to list display names in the active locale.
CURRENT_LOCALE: str = "CURRENT"

# Separates language from country in a locale tag (de_AT).
LOCALE_SEPARATOR: str = "_"

# ============================================================================
# PARSING
# ============================================================================

# Characters stripped from both ends of physical lines, keys and values.
# Matches the classic properties tooling: space, tab, LF, CR, NUL, VT.
TRIM_CHARS: str = " \t\n\r\0\x0b"

COMMENT_CHAR: str = "#"

CONTINUATION_CHAR: str = "\\"

# Separates key reference and inline arguments in "@key|arg0|arg1".
PARAM_SEPARATOR: str = "|"

# ============================================================================
# DIRECTIVE PREFIXES
# ============================================================================

RECODE_PREFIX: str = "°"  # degree sign
LOOKUP_PREFIX: str = "@"
ESCAPE_PREFIX: str = "#"

# Variable references inside lookup arguments are written **name**.
VARIABLE_MARKER: str = "**"
