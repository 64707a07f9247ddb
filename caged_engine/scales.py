"""Scale and pentatonic construction for major and natural-minor keys."""

from __future__ import annotations

from caged_engine.models import Mode, PitchClass
from caged_engine.pitch_class import format_pitch_class, interval_between, transpose_pitch_class

# Scale formulas as semitone intervals from the root, in degree order
SCALE_INTERVALS: dict[str, tuple[int, ...]] = {
    "major": (0, 2, 4, 5, 7, 9, 11),
    "minor": (0, 2, 3, 5, 7, 8, 10),  # natural minor
}

PENTATONIC_INTERVALS: dict[str, tuple[int, ...]] = {
    "major": (0, 2, 4, 7, 9),
    "minor": (0, 3, 5, 7, 10),
}


def _intervals_for(table: dict[str, tuple[int, ...]], mode: str) -> tuple[int, ...]:
    if mode not in table:
        msg = f"Mode must be 'major' or 'minor', got: {mode!r}"
        raise ValueError(msg)
    return table[mode]


def build_scale(root: PitchClass, mode: Mode) -> tuple[PitchClass, ...]:
    """Build the 7-note scale on ``root`` in ascending degree order.

    Parameters
    ----------
    root : int
        Tonic pitch class.
    mode : {"major", "minor"}
        Major or natural minor.

    Returns
    -------
    tuple[int, ...]
        Seven pitch classes; index 0 is the tonic.

    Raises
    ------
    ValueError
        If the mode is not recognized.

    Examples
    --------
    >>> build_scale(7, "major")
    (7, 9, 11, 0, 2, 4, 6)
    >>> build_scale(9, "minor")
    (9, 11, 0, 2, 4, 5, 7)
    """
    return tuple(transpose_pitch_class(root, i) for i in _intervals_for(SCALE_INTERVALS, mode))


def build_pentatonic(root: PitchClass, mode: Mode) -> tuple[PitchClass, ...]:
    """Build the 5-note pentatonic scale on ``root``.

    Examples
    --------
    >>> build_pentatonic(9, "minor")
    (9, 0, 2, 4, 7)
    """
    return tuple(transpose_pitch_class(root, i) for i in _intervals_for(PENTATONIC_INTERVALS, mode))


def scale_degree_label(pc: PitchClass, key_tonic_pc: PitchClass, mode: Mode) -> str:
    """Label a pitch class by its scale degree in a key.

    Diatonic tones are labelled "1" to "7". A chromatic tone gets "#n" when
    it sits a semitone above degree n, or "bn" when it sits a semitone below
    it; degrees are tried in ascending order, sharp before flat.

    Examples
    --------
    >>> scale_degree_label(7, 0, "major")
    '5'
    >>> scale_degree_label(1, 0, "major")
    '#1'
    >>> scale_degree_label(3, 0, "major")
    '#2'
    >>> scale_degree_label(6, 9, "minor")
    '#6'
    """
    intervals = _intervals_for(SCALE_INTERVALS, mode)
    semitones = interval_between(key_tonic_pc, pc)
    if semitones in intervals:
        return str(intervals.index(semitones) + 1)

    for degree, interval in enumerate(intervals, start=1):
        if semitones == (interval + 1) % 12:
            return f"#{degree}"
        if semitones == (interval + 11) % 12:
            return f"b{degree}"

    return "?"


def note_label(pc: PitchClass, *, prefer_flats: bool = False) -> str:
    """Label a pitch class by its letter name."""
    return format_pitch_class(pc, prefer_flats)
