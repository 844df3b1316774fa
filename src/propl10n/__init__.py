"""propl10n - Properties-file localization with cascading locale fallback.

Resolves strings for a requested locale from Java-style .properties files,
falling back through configured substitute locales, language-only parents and
locale-less base files. Caller strings use a small directive grammar
(@key|arg, #escaped, °recoded, locale maps) with {n} parameter substitution.

Public API:
    Localizer - Hierarchy + cascade + rendering for one requested locale
    LocaleNames - Display-name tables for configured locales
    parse_properties - Parse properties text into key/value entries
    FileResourceLoader - Disk loader with configurable encoding

Exceptions:
    Propl10nError - Base exception class
    LocaleTagError - Tag unusable in a resource file name

Submodules:
    propl10n.localization - Hierarchy, cascade, catalog, load tracking
    propl10n.runtime.directives - Directive grammar and renderer
    propl10n.parsing.properties - Properties file parser
"""

from .core import LocaleTagError, Propl10nError
from .localization import FileResourceLoader, LocaleNames, Localizer
from .parsing import parse_properties

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("propl10n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FileResourceLoader",
    "LocaleNames",
    "LocaleTagError",
    "Localizer",
    "Propl10nError",
    "__version__",
    "parse_properties",
]
