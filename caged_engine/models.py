"""Value types shared by the resolver, CAGED mapper and voicing modules.

Every type here is an immutable value: frozen dataclasses holding ints,
strings and tuples, so results can be compared, hashed and memoized by
value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

PitchClass = int
"""Note identity modulo the octave, 0-11 with C = 0."""

Mode = Literal["major", "minor"]

ChordQuality = Literal[
    "maj",
    "min",
    "dim",
    "aug",
    "sus2",
    "sus4",
    "dom7",
    "maj7",
    "min7",
    "m7b5",
    "add9",
    "6",
    "9",
]

CagedRegionId = Literal["C", "A", "G", "E", "D"]

# Sentinel fret value for a string that is not played
MUTED = -1


class ErrorKind(str, Enum):
    """Why a chord could not be resolved."""

    INVALID_NOTE = "invalid_note"
    INVALID_ROOT = "invalid_root"
    INVALID_KEY = "invalid_key"
    UNSUPPORTED_SUFFIX = "unsupported_suffix"
    UNSUPPORTED_QUALITY = "unsupported_quality"
    EMPTY_INPUT = "empty_input"
    INVALID_ROMAN_NUMERAL = "invalid_roman_numeral"
    UNSUPPORTED_ROMAN_QUALITY = "unsupported_roman_quality"
    INVALID_SECONDARY_TARGET = "invalid_secondary_target"
    UNSUPPORTED_SECONDARY_FORM = "unsupported_secondary_form"
    TOO_MANY_SECONDARY_DOMINANTS = "too_many_secondary_dominants"


class ChordResolutionError(ValueError):
    """Raised by :meth:`ParseFailure.unwrap` for callers that prefer exceptions.

    Parameters
    ----------
    kind : ErrorKind
        The failure category.
    message : str
        Human-readable description.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class ResolvedChord:
    """A fully specified chord: root pitch class plus quality.

    Parameters
    ----------
    root : PitchClass
        Root pitch class (0-11).
    quality : ChordQuality
        One of the closed set of supported qualities.
    intervals : tuple[int, ...]
        Semitone offsets from the root, copied from the quality's interval
        table. Values may exceed 11 for compound tones (e.g. 14 for a ninth).

    Examples
    --------
    >>> chord = ResolvedChord(root=7, quality="min7", intervals=(0, 3, 7, 10))
    >>> chord.root, chord.quality
    (7, 'min7')
    """

    root: PitchClass
    quality: ChordQuality
    intervals: tuple[int, ...]


@dataclass(frozen=True)
class ParseSuccess:
    """Successful resolution carrying the chord."""

    chord: ResolvedChord

    @property
    def ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> ResolvedChord:
        """Return the resolved chord."""
        return self.chord


@dataclass(frozen=True)
class ParseFailure:
    """Failed resolution carrying a category and a human-readable message."""

    kind: ErrorKind
    error: str

    @property
    def ok(self) -> Literal[False]:
        return False

    def unwrap(self) -> ResolvedChord:
        """Raise :class:`ChordResolutionError` describing the failure."""
        raise ChordResolutionError(self.kind, self.error)


ParseResult = ParseSuccess | ParseFailure


@dataclass(frozen=True)
class CagedRegion:
    """An inclusive fret window for one CAGED shape in a given key.

    Parameters
    ----------
    id : CagedRegionId
        Shape letter (C, A, G, E or D).
    label : str
        Display label, e.g. "E shape".
    fret_start : int
        First fret of the window (inclusive), already clamped to the board.
    fret_end : int
        Last fret of the window (inclusive), already clamped to the board.
    """

    id: CagedRegionId
    label: str
    fret_start: int
    fret_end: int

    def contains(self, fret: int) -> bool:
        """Return True if ``fret`` lies inside the window."""
        return self.fret_start <= fret <= self.fret_end


@dataclass(frozen=True)
class VoicingShape:
    """A named fingering template, one fret per string (low to high).

    Parameters
    ----------
    id : str
        Stable identifier, e.g. "e-shape-min7".
    name : str
        Display name, e.g. "E-shape Min7".
    quality : ChordQuality
        Chord quality the shape plays.
    base_root : {"C", "D", "E", "G", "A"}
        Root the frets are written for.
    frets : tuple[int, ...]
        Fret per string, or ``MUTED`` for strings that are not played.
    movable : bool
        False for open-position shapes tied to one exact chord; True for
        shapes that are transposed along the neck to the requested root.
    """

    id: str
    name: str
    quality: ChordQuality
    base_root: Literal["C", "D", "E", "G", "A"]
    frets: tuple[int, ...]
    movable: bool
