"""Pitch class operations and note-name spelling.

This module provides the canonical 12-tone pitch-class representation
(0-11, C = 0) used throughout the engine, along with parsing and
formatting of note names. No value carries octave information; all
arithmetic is modulo 12.
"""

from __future__ import annotations

import re

from caged_engine.models import PitchClass

# Natural letters to pitch class (0-11, where C=0)
LETTER_TO_PC: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

ACCIDENTAL_OFFSET: dict[str, int] = {
    "": 0,
    "#": 1,
    "b": -1,
}

# Spelling tables; they agree on naturals and differ only on the 5 accidentals
SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Letter A-G (either case) and an optional single accidental
NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)")

_WHITESPACE_RE = re.compile(r"\s+")


class InvalidNoteError(ValueError):
    """Raised when a note name cannot be read as a pitch class."""


def normalize_note_name(note: str) -> str:
    """Strip a note name and remove any internal whitespace.

    Examples
    --------
    >>> normalize_note_name("  F # ")
    'F#'
    """
    return _WHITESPACE_RE.sub("", note.strip())


def to_pitch_class(note: str) -> PitchClass:
    """Convert a note name to pitch class (0-11).

    The name must start with a letter A-G (case-insensitive), optionally
    followed by a single ``#`` or ``b``. Anything after that is ignored, so
    a key name such as "Am" reads as A.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "f#", " Bb ").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    InvalidNoteError
        If the name does not start with a note letter.

    Examples
    --------
    >>> to_pitch_class("C")
    0
    >>> to_pitch_class("f#")
    6
    >>> to_pitch_class("Cb")
    11
    """
    cleaned = normalize_note_name(note)
    match = NOTE_RE.match(cleaned)
    if match is None:
        msg = f"Invalid note name: {note!r}"
        raise InvalidNoteError(msg)
    letter, accidental = match.groups()
    return (LETTER_TO_PC[letter.upper()] + ACCIDENTAL_OFFSET[accidental]) % 12


def format_pitch_class(pc: PitchClass, prefer_flats: bool = False) -> str:
    """Spell a pitch class as a note name.

    Parameters
    ----------
    pc : int
        Pitch class; any integer is reduced modulo 12 first.
    prefer_flats : bool
        Spell accidentals as flats (Bb) rather than sharps (A#).

    Returns
    -------
    str
        Note name.

    Examples
    --------
    >>> format_pitch_class(10)
    'A#'
    >>> format_pitch_class(10, prefer_flats=True)
    'Bb'
    >>> format_pitch_class(-1)
    'B'
    """
    names = FLAT_NAMES if prefer_flats else SHARP_NAMES
    return names[pc % 12]


def prefer_flats_for_key(key_tonic: str) -> bool:
    """Decide whether to spell accidentals as flats for a key.

    This is a surface check on the text of the key name: any ``b`` in it
    selects flats. It does not derive the key signature, so keys such as
    F major (one flat) still get sharps.

    Examples
    --------
    >>> prefer_flats_for_key("Bb")
    True
    >>> prefer_flats_for_key("F#")
    False
    """
    return "b" in key_tonic


def transpose_pitch_class(pc: PitchClass, semitones: int) -> PitchClass:
    """Move a pitch class by a number of semitones (positive = up).

    Examples
    --------
    >>> transpose_pitch_class(11, 2)
    1
    >>> transpose_pitch_class(0, -1)
    11
    """
    return (pc + semitones) % 12


def interval_between(from_pc: PitchClass, to_pc: PitchClass) -> int:
    """Return the upward distance in semitones (0-11) from one pitch class to another.

    Examples
    --------
    >>> interval_between(9, 0)
    3
    """
    return (to_pc - from_pc) % 12
