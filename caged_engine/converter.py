"""Notation interop between resolved chords, Harte and pychord symbols.

Resolved chords can be written out in Harte notation (e.g. "G:min7") or
pychord's simplified notation (e.g. "Gm7"), and any symbol pychord can
read is mapped back into the closed quality catalog.
"""

from __future__ import annotations

from caged_engine.chords import make_chord
from caged_engine.models import ChordQuality, ErrorKind, ParseFailure, ParseResult, ParseSuccess, ResolvedChord
from caged_engine.pitch_class import format_pitch_class, to_pitch_class

# Catalog quality to Harte shorthand
QUALITY_TO_HARTE: dict[ChordQuality, str] = {
    "maj": "maj",
    "min": "min",
    "dim": "dim",
    "aug": "aug",
    "sus2": "sus2",
    "sus4": "sus4",
    "dom7": "7",
    "maj7": "maj7",
    "min7": "min7",
    "m7b5": "hdim7",
    "add9": "maj(9)",
    "6": "maj6",
    "9": "9",
}

# Catalog quality to pychord quality name
QUALITY_TO_PYCHORD: dict[ChordQuality, str] = {
    "maj": "",
    "min": "m",
    "dim": "dim",
    "aug": "aug",
    "sus2": "sus2",
    "sus4": "sus4",
    "dom7": "7",
    "maj7": "maj7",
    "min7": "m7",
    "m7b5": "m7-5",
    "add9": "add9",
    "6": "6",
    "9": "9",
}

# pychord quality names (as parsed) to catalog quality
PYCHORD_TO_QUALITY: dict[str, ChordQuality] = {
    "": "maj",
    "maj": "maj",
    "m": "min",
    "min": "min",
    "-": "min",
    "dim": "dim",
    "aug": "aug",
    "+": "aug",
    "sus2": "sus2",
    "sus4": "sus4",
    "sus": "sus4",
    "7": "dom7",
    "maj7": "maj7",
    "M7": "maj7",
    "m7": "min7",
    "min7": "min7",
    "-7": "min7",
    "m7-5": "m7b5",
    "m7b5": "m7b5",
    "add9": "add9",
    "6": "6",
    "9": "9",
}


def to_harte(chord: ResolvedChord, prefer_flats: bool = False) -> str:
    """Convert to Harte notation.

    Examples
    --------
    >>> to_harte(make_chord(7, "min7"))
    'G:min7'
    >>> to_harte(make_chord(6, "m7b5"))
    'F#:hdim7'
    """
    return f"{format_pitch_class(chord.root, prefer_flats)}:{QUALITY_TO_HARTE[chord.quality]}"


def to_pychord(chord: ResolvedChord, prefer_flats: bool = False) -> str:
    """Convert to pychord notation.

    Examples
    --------
    >>> to_pychord(make_chord(7, "min7"))
    'Gm7'
    >>> to_pychord(make_chord(10, "maj"), prefer_flats=True)
    'Bb'
    """
    return f"{format_pitch_class(chord.root, prefer_flats)}{QUALITY_TO_PYCHORD[chord.quality]}"


def from_pychord(chord_str: str) -> ParseResult:
    """Parse any symbol pychord accepts into the closed catalog.

    Slash basses are dropped; the chord keeps its root and quality.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C/E", "Bbsus").

    Returns
    -------
    ParseResult
        ``ParseSuccess``, or ``ParseFailure`` with kind ``INVALID_ROOT`` when
        pychord rejects the symbol and ``UNSUPPORTED_QUALITY`` when its
        quality is outside the catalog.

    Examples
    --------
    >>> from_pychord("Gm7").chord.quality
    'min7'
    >>> from_pychord("C13").kind
    <ErrorKind.UNSUPPORTED_QUALITY: 'unsupported_quality'>
    """
    from pychord import Chord as PyChord

    try:
        pc = PyChord(chord_str.strip())
    except ValueError as e:
        return ParseFailure(ErrorKind.INVALID_ROOT, f"Unrecognized chord: {e}")

    quality_name = str(pc.quality)
    quality = PYCHORD_TO_QUALITY.get(quality_name)
    if quality is None:
        return ParseFailure(ErrorKind.UNSUPPORTED_QUALITY, f"Unsupported chord quality: {quality_name}")

    return ParseSuccess(make_chord(to_pitch_class(pc.root), quality))
