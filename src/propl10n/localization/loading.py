"""Resource loading infrastructure for the properties cascade.

Provides the protocol for file loaders, a filesystem implementation, and
result/summary data structures for tracking every file the cascade tried.

Components:
    ResourceLoader - Protocol for reading resource text (structural typing)
    FileResourceLoader - Disk-based loader with configurable encoding
    ResourceLoadResult - Immutable result of a single file read attempt
    LoadSummary - Immutable aggregate of all load results from construction

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from propl10n.constants import DEFAULT_ENCODING
from propl10n.enums import LoadStatus
from propl10n.localization.types import LocaleTag

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceLoader",
    # Concrete loader
    "FileResourceLoader",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
]


class ResourceLoader(Protocol):
    """Protocol for reading hierarchy and resource files.

    This is a Protocol (structural typing) rather than ABC so tests and
    callers can supply in-memory loaders without subclassing.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def load(self, path: str) -> str:
        ...         try:
        ...             return self.files[path]
        ...         except KeyError:
        ...             raise FileNotFoundError(path) from None
    """

    def load(self, path: str) -> str:
        """Return the full text of the file at path.

        Args:
            path: File path as assembled by the cascade

        Returns:
            Decoded file content

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid in the loader's encoding
        """


@dataclass(frozen=True, slots=True)
class FileResourceLoader:
    """File system loader decoding files with a fixed encoding.

    Attributes:
        encoding: Text encoding of hierarchy and resource files
    """

    encoding: str = DEFAULT_ENCODING

    def load(self, path: str) -> str:
        """Read a file from disk.

        Raises:
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
            UnicodeDecodeError: If file content doesn't match the encoding
        """
        return Path(path).read_text(encoding=self.encoding)


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of reading a single resource file during the cascade.

    Attributes:
        path: File path that was attempted
        locale: Locale tag for this file, empty for the catch-all base file
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        keys_added: Number of keys this file contributed to the catalog
        malformed_lines: Logical lines skipped for lacking a key=value shape
    """

    path: str
    locale: LocaleTag
    status: LoadStatus
    error: Exception | None = None
    keys_added: int = 0
    malformed_lines: tuple[str, ...] = ()

    @property
    def is_success(self) -> bool:
        """Check if the file was read successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file was not found (expected for most candidates)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if reading the file failed with an error."""
        return self.status == LoadStatus.ERROR

    @property
    def has_malformed(self) -> bool:
        """Check if the file had lines that were skipped."""
        return len(self.malformed_lines) > 0


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of resource load results from Localizer construction.

    All statistics are computed properties derived from the ``results`` tuple,
    which preserves cascade order.

    Attributes:
        results: All individual load results (immutable tuple)

    Example:
        >>> summary = localizer.get_load_summary()
        >>> for result in summary.get_successful():
        ...     print(f"{result.path}: {result.keys_added} keys")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors}, "
            f"malformed={self.malformed_count})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of files not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def malformed_count(self) -> int:
        """Total number of skipped malformed lines across all files."""
        return sum(len(r.malformed_lines) for r in self.results)

    @property
    def has_errors(self) -> bool:
        """Check if any file failed to load with an error."""
        return self.errors > 0

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results where the file was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[ResourceLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleTag) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific locale tag (empty tag for catch-all files)."""
        return tuple(r for r in self.results if r.locale == locale)
