"""Properties file parsing.

Python 3.13+. Zero external dependencies.
"""

from .properties import ParsedProperties, parse_properties

__all__ = ["ParsedProperties", "parse_properties"]
