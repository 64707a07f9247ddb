"""Chord resolution from user text.

Two independent entry points share the :data:`~caged_engine.models.ParseResult`
contract: literal chord names and roman numerals relative to a key.
Malformed input is reported as a ``ParseFailure`` value, never raised.
"""

from caged_engine.resolver.literal import LITERAL_SUFFIXES, match_suffix, parse_literal_chord
from caged_engine.resolver.roman import (
    RomanParts,
    parse_roman_numeral,
    parse_roman_part,
    quality_from_roman,
)

__all__ = [
    "LITERAL_SUFFIXES",
    "RomanParts",
    "match_suffix",
    "parse_literal_chord",
    "parse_roman_numeral",
    "parse_roman_part",
    "quality_from_roman",
]
