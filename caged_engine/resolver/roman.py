"""Roman-numeral chord parsing relative to a key.

Supports an optional leading accidental (``bVII``, ``#iv``), case-encoded
triad quality (``V`` major, ``ii`` minor), quality markers (``vii°``,
``viiø7``, ``III+``) and one level of secondary function, restricted to
``V/x`` and ``VII/x``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from caged_engine.chords import make_chord
from caged_engine.models import ChordQuality, ErrorKind, Mode, ParseFailure, ParseResult, ParseSuccess, PitchClass
from caged_engine.pitch_class import InvalidNoteError, to_pitch_class, transpose_pitch_class
from caged_engine.scales import SCALE_INTERVALS, build_scale

logger = logging.getLogger(__name__)

ROMAN_DEGREES: dict[str, int] = {
    "I": 1,
    "II": 2,
    "III": 3,
    "IV": 4,
    "V": 5,
    "VI": 6,
    "VII": 7,
}

ROMAN_ACCIDENTALS: dict[str, int] = {
    "": 0,
    "b": -1,
    "#": 1,
}

# Optional accidental, a run of roman letters, then the quality suffix
ROMAN_PART_RE = re.compile(r"^([b#]?)([ivIV]+)(.*)$")

# Ordered (pattern, quality) table, each pattern must match the whole suffix
ROMAN_QUALITY_MARKERS: tuple[tuple[re.Pattern[str], ChordQuality], ...] = (
    (re.compile(r"ø7?"), "m7b5"),
    (re.compile(r"(?:°|dim|o)7?", re.IGNORECASE), "dim"),
    (re.compile(r"(?:\+|aug)7?", re.IGNORECASE), "aug"),
)

# Suffixes that leave the case-derived triad quality unchanged
PLAIN_SUFFIXES = frozenset({"", "7"})

# Semitones above the target for each supported secondary function, by degree
SECONDARY_INTERVALS: dict[int, int] = {
    5: 7,  # dominant a fifth above
    7: 11,  # leading tone a major seventh above
}

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class RomanParts:
    """One roman numeral split into its components.

    Parameters
    ----------
    accidental : int
        -1 for a leading ``b``, +1 for ``#``, else 0.
    degree : int
        Scale degree 1-7.
    is_lower : bool
        True for a lower-case numeral (implied minor triad).
    suffix : str
        Everything after the numeral.
    """

    accidental: int
    degree: int
    is_lower: bool
    suffix: str


def parse_roman_part(text: str) -> RomanParts | None:
    """Split one roman numeral into accidental, degree, case and suffix.

    Returns None if the numeral is not I-VII written in a single case.

    Examples
    --------
    >>> parse_roman_part("bVII")
    RomanParts(accidental=-1, degree=7, is_lower=False, suffix='')
    >>> parse_roman_part("vii°7")
    RomanParts(accidental=0, degree=7, is_lower=True, suffix='°7')
    >>> parse_roman_part("Vii") is None
    True
    """
    match = ROMAN_PART_RE.match(text)
    if match is None:
        return None
    accidental, roman, suffix = match.groups()
    if roman not in (roman.upper(), roman.lower()):
        return None
    degree = ROMAN_DEGREES.get(roman.upper())
    if degree is None:
        return None
    return RomanParts(
        accidental=ROMAN_ACCIDENTALS[accidental],
        degree=degree,
        is_lower=roman.islower(),
        suffix=suffix,
    )


def quality_from_roman(parts: RomanParts) -> ChordQuality | None:
    """Derive the chord quality from a numeral's suffix and case.

    Returns None when the suffix carries an unrecognized quality token.

    Examples
    --------
    >>> quality_from_roman(parse_roman_part("viiø7"))
    'm7b5'
    >>> quality_from_roman(parse_roman_part("ii"))
    'min'
    >>> quality_from_roman(parse_roman_part("V7"))
    'maj'
    >>> quality_from_roman(parse_roman_part("Vsus")) is None
    True
    """
    for pattern, quality in ROMAN_QUALITY_MARKERS:
        if pattern.fullmatch(parts.suffix):
            return quality
    if parts.suffix not in PLAIN_SUFFIXES:
        return None
    return "min" if parts.is_lower else "maj"


def resolve_degree(scale: tuple[PitchClass, ...], parts: RomanParts) -> PitchClass:
    """Return the pitch class of a numeral's degree in ``scale``, with its accidental applied."""
    return transpose_pitch_class(scale[parts.degree - 1], parts.accidental)


def _fail(kind: ErrorKind, message: str, text: str) -> ParseFailure:
    logger.debug("Rejected roman numeral %r: %s", text, message)
    return ParseFailure(kind, message)


def parse_roman_numeral(text: str, key_tonic: str, key_mode: Mode) -> ParseResult:
    """Resolve a roman numeral against a key.

    Parameters
    ----------
    text : str
        Numeral such as "V", "ii", "bVII", "vii°" or "V/ii". Whitespace
        anywhere in the text is ignored.
    key_tonic : str
        Key tonic note name, e.g. "C" or "Bb".
    key_mode : {"major", "minor"}
        Key mode; minor uses the natural minor scale. Any other tag
        fails with ``INVALID_KEY``.

    Returns
    -------
    ParseResult
        ``ParseSuccess`` with the chord, or ``ParseFailure`` describing the
        structural problem.

    Examples
    --------
    >>> parse_roman_numeral("V/ii", "C", "major").chord.root
    9
    >>> parse_roman_numeral("bVII", "A", "minor").chord.root
    6
    >>> parse_roman_numeral("V/V/V", "C", "major").kind
    <ErrorKind.TOO_MANY_SECONDARY_DOMINANTS: 'too_many_secondary_dominants'>
    """
    cleaned = _WHITESPACE_RE.sub("", text)
    if not cleaned:
        return _fail(ErrorKind.EMPTY_INPUT, "Empty roman numeral.", text)

    pieces = cleaned.split("/")
    if len(pieces) > 2:
        return _fail(ErrorKind.TOO_MANY_SECONDARY_DOMINANTS, "Too many secondary dominants.", text)

    main = parse_roman_part(pieces[0])
    if main is None:
        return _fail(ErrorKind.INVALID_ROMAN_NUMERAL, "Invalid roman numeral.", text)

    quality = quality_from_roman(main)
    if quality is None:
        return _fail(
            ErrorKind.UNSUPPORTED_ROMAN_QUALITY,
            f"Unsupported roman numeral quality: {main.suffix}",
            text,
        )

    try:
        key_root = to_pitch_class(key_tonic)
    except InvalidNoteError:
        return _fail(ErrorKind.INVALID_KEY, "Invalid key tonic.", text)
    if key_mode not in SCALE_INTERVALS:
        return _fail(ErrorKind.INVALID_KEY, f"Invalid key mode: {key_mode}", text)

    scale = build_scale(key_root, key_mode)

    if len(pieces) == 1:
        return ParseSuccess(make_chord(resolve_degree(scale, main), quality))

    target = parse_roman_part(pieces[1])
    if target is None:
        return _fail(ErrorKind.INVALID_SECONDARY_TARGET, "Invalid secondary target.", text)

    interval = SECONDARY_INTERVALS.get(main.degree)
    if interval is None:
        return _fail(
            ErrorKind.UNSUPPORTED_SECONDARY_FORM,
            "Only V/x or VII°/x secondary chords are supported.",
            text,
        )

    root = transpose_pitch_class(resolve_degree(scale, target), interval)
    return ParseSuccess(make_chord(root, quality))
