"""Chord quality catalog and chord-tone derivation.

The interval table is the only source of truth for what a quality
contains. Intervals are semitones above the root and may exceed 11 for
compound tones (a ninth is 14) before octave reduction.
"""

from __future__ import annotations

import numpy as np

from caged_engine.models import ChordQuality, PitchClass, ResolvedChord
from caged_engine.pitch_class import format_pitch_class, transpose_pitch_class

CHORD_QUALITIES: tuple[ChordQuality, ...] = (
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
)

# Quality to semitone intervals from the root
CHORD_QUALITY_INTERVALS: dict[ChordQuality, tuple[int, ...]] = {
    # Triads
    "maj": (0, 4, 7),
    "min": (0, 3, 7),
    "dim": (0, 3, 6),
    "aug": (0, 4, 8),
    # Suspended
    "sus2": (0, 2, 7),
    "sus4": (0, 5, 7),
    # Seventh chords
    "dom7": (0, 4, 7, 10),
    "maj7": (0, 4, 7, 11),
    "min7": (0, 3, 7, 10),
    "m7b5": (0, 3, 6, 10),
    # Added tones and extensions
    "add9": (0, 4, 7, 14),
    "6": (0, 4, 7, 9),
    "9": (0, 4, 7, 10, 14),
}

# Display label appended to the root in chord summaries
QUALITY_LABELS: dict[ChordQuality, str] = {
    "maj": "major",
    "min": "minor",
    "dim": "diminished",
    "aug": "augmented",
    "sus2": "sus2",
    "sus4": "sus4",
    "dom7": "7",
    "maj7": "maj7",
    "min7": "min7",
    "m7b5": "m7b5",
    "add9": "add9",
    "6": "6",
    "9": "9",
}


def make_chord(root: PitchClass, quality: ChordQuality) -> ResolvedChord:
    """Build a :class:`ResolvedChord` with the quality's interval table.

    Parameters
    ----------
    root : int
        Root pitch class; reduced modulo 12.
    quality : ChordQuality
        Quality name from :data:`CHORD_QUALITIES`.

    Raises
    ------
    ValueError
        If the quality is not in the catalog.

    Examples
    --------
    >>> make_chord(2, "min7")
    ResolvedChord(root=2, quality='min7', intervals=(0, 3, 7, 10))
    """
    if quality not in CHORD_QUALITY_INTERVALS:
        msg = f"Unknown chord quality: {quality}"
        raise ValueError(msg)
    return ResolvedChord(root=root % 12, quality=quality, intervals=CHORD_QUALITY_INTERVALS[quality])


def chord_tone_set(chord: ResolvedChord) -> frozenset[PitchClass]:
    """Return the set of pitch classes in a chord.

    Compound intervals are reduced modulo 12, so a tone that aliases a
    lower one collapses into it.

    Examples
    --------
    >>> sorted(chord_tone_set(make_chord(0, "9")))
    [0, 2, 4, 7, 10]
    >>> sorted(chord_tone_set(make_chord(7, "maj")))
    [2, 7, 11]
    """
    return frozenset(transpose_pitch_class(chord.root, interval) for interval in chord.intervals)


def chord_tones(chord: ResolvedChord) -> tuple[PitchClass, ...]:
    """Return chord tones in interval order (root first), without duplicates."""
    seen: list[PitchClass] = []
    for interval in chord.intervals:
        pc = transpose_pitch_class(chord.root, interval)
        if pc not in seen:
            seen.append(pc)
    return tuple(seen)


def format_chord_summary(chord: ResolvedChord, prefer_flats: bool = False) -> str:
    """Return a human-readable name such as "G 7" or "Bb minor".

    Examples
    --------
    >>> format_chord_summary(make_chord(10, "min"), prefer_flats=True)
    'Bb minor'
    >>> format_chord_summary(make_chord(7, "dom7"))
    'G 7'
    """
    root = format_pitch_class(chord.root, prefer_flats)
    return f"{root} {QUALITY_LABELS[chord.quality]}"


def chord_chroma(chord: ResolvedChord) -> np.ndarray:
    """Return the binary chroma template of a chord.

    Returns
    -------
    np.ndarray
        Float array of shape (12,) with 1.0 at every chord tone.

    Examples
    --------
    >>> chord_chroma(make_chord(0, "maj")).nonzero()[0].tolist()
    [0, 4, 7]
    """
    chroma = np.zeros(12, dtype=float)
    chroma[sorted(chord_tone_set(chord))] = 1.0
    return chroma
