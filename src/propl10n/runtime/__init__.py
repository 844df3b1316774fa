"""Runtime rendering of directive strings.

Python 3.13+.
"""

from .directives import ByLocale, DirectiveRenderer, Literal, MissingKeyInfo, to_directive

__all__ = ["ByLocale", "DirectiveRenderer", "Literal", "MissingKeyInfo", "to_directive"]
