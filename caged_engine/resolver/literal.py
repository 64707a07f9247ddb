"""Literal chord-name parsing (e.g. "Cmaj7", "F#m7b5", "Bb").

The suffix after the root is matched against an ordered table; the first
pattern that matches wins. Order matters: "m7" must be tried as a minor
seventh before the bare minor pattern gets a chance at it.
"""

from __future__ import annotations

import logging
import re

from caged_engine.chords import make_chord
from caged_engine.models import ChordQuality, ErrorKind, ParseFailure, ParseResult, ParseSuccess
from caged_engine.pitch_class import InvalidNoteError, to_pitch_class

logger = logging.getLogger(__name__)

# Root letter, optional single accidental, then the rest as the suffix
LITERAL_CHORD_RE = re.compile(r"^([A-Ga-g])([#b]?)(.*)$", re.DOTALL)

# Ordered (pattern, quality) table, first full match wins.
# Word spellings are case-insensitive; single letters are not ("M7" vs "m7", "M" vs "m").
LITERAL_SUFFIXES: tuple[tuple[re.Pattern[str], ChordQuality], ...] = (
    (re.compile(r"(?i:maj7)|M7|Δ7"), "maj7"),
    (re.compile(r"(?i:m7b5)|ø"), "m7b5"),
    (re.compile(r"(?i:min7)|m7"), "min7"),
    (re.compile(r"7"), "dom7"),
    (re.compile(r"(?i:min)|m|-"), "min"),
    (re.compile(r"(?i:dim)|°"), "dim"),
    (re.compile(r"(?i:aug)|\+"), "aug"),
    (re.compile(r"(?i:sus2)"), "sus2"),
    (re.compile(r"(?i:sus4)"), "sus4"),
    (re.compile(r"(?i:add9)"), "add9"),
    (re.compile(r"6"), "6"),
    (re.compile(r"9"), "9"),
    (re.compile(r"(?i:maj)|M|"), "maj"),
)


def match_suffix(suffix: str) -> ChordQuality | None:
    """Return the quality for a chord suffix, or None if none matches.

    Examples
    --------
    >>> match_suffix("m7")
    'min7'
    >>> match_suffix("M7")
    'maj7'
    >>> match_suffix("")
    'maj'
    >>> match_suffix("13") is None
    True
    """
    for pattern, quality in LITERAL_SUFFIXES:
        if pattern.fullmatch(suffix):
            return quality
    return None


def parse_literal_chord(text: str) -> ParseResult:
    """Parse a literal chord name into a resolved chord.

    Parameters
    ----------
    text : str
        Chord name such as "Cmaj7", "f#m7b5" or " Bb ". Surrounding
        whitespace is ignored, as is whitespace between root and suffix.

    Returns
    -------
    ParseResult
        ``ParseSuccess`` with the chord, or ``ParseFailure`` with kind
        ``INVALID_ROOT`` or ``UNSUPPORTED_SUFFIX``.

    Examples
    --------
    >>> result = parse_literal_chord("Cmaj7")
    >>> result.chord.root, result.chord.quality
    (0, 'maj7')
    >>> parse_literal_chord("Hz").kind
    <ErrorKind.INVALID_ROOT: 'invalid_root'>
    """
    match = LITERAL_CHORD_RE.match(text.strip())
    if match is None:
        logger.debug("Rejected chord %r: invalid root", text)
        return ParseFailure(ErrorKind.INVALID_ROOT, "Invalid chord root.")

    letter, accidental, rest = match.groups()
    try:
        root = to_pitch_class(letter + accidental)
    except InvalidNoteError:
        return ParseFailure(ErrorKind.INVALID_ROOT, "Invalid chord root.")

    suffix = rest.strip()
    quality = match_suffix(suffix)
    if quality is None:
        logger.debug("Rejected chord %r: unsupported suffix %r", text, suffix)
        return ParseFailure(
            ErrorKind.UNSUPPORTED_SUFFIX,
            f"Unsupported chord suffix: {suffix or '(none)'}",
        )

    return ParseSuccess(make_chord(root, quality))
