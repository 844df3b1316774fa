"""Exception hierarchy for propl10n.

Resource loading never raises: missing or unreadable files are recorded as
load results. The exceptions here cover programmer errors that the caller
must fix (invalid locale tags used to build file names).

Python 3.13+.
"""

__all__ = ["LocaleTagError", "Propl10nError"]


class Propl10nError(Exception):
    """Base exception for all propl10n errors."""


class LocaleTagError(Propl10nError, ValueError):
    """Locale tag cannot be used to build a resource file name.

    Raised for empty tags and tags carrying path separators or traversal
    sequences. The cascade catches it and records the candidate as
    LoadStatus.ERROR.

    Attributes:
        tag: The rejected tag
    """

    def __init__(self, tag: str, reason: str) -> None:
        """Create error for a rejected tag.

        Args:
            tag: The rejected tag
            reason: Human-readable explanation
        """
        super().__init__(f"Invalid locale tag {tag!r}: {reason}")
        self.tag = tag
