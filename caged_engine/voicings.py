"""Chord voicings: open-position shapes and movable E/A shapes.

Frets are listed low string to high string. Open shapes already spell one
exact chord and are returned as-is; movable shapes are written for a
reference root and slide up the neck to the requested root.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from caged_engine.models import MUTED, PitchClass, ResolvedChord, VoicingShape
from caged_engine.pitch_class import LETTER_TO_PC, format_pitch_class, interval_between

logger = logging.getLogger(__name__)

X = MUTED

VOICINGS: tuple[VoicingShape, ...] = (
    # Open position
    VoicingShape("open-c-maj", "Open C", "maj", "C", (X, 3, 2, 0, 1, 0), movable=False),
    VoicingShape("open-c-min", "Open Cm (alt)", "min", "C", (X, 3, 1, 0, 1, 3), movable=False),
    VoicingShape("open-d-maj", "Open D", "maj", "D", (X, X, 0, 2, 3, 2), movable=False),
    VoicingShape("open-d-min", "Open Dm", "min", "D", (X, X, 0, 2, 3, 1), movable=False),
    VoicingShape("open-e-maj", "Open E", "maj", "E", (0, 2, 2, 1, 0, 0), movable=False),
    VoicingShape("open-e-min", "Open Em", "min", "E", (0, 2, 2, 0, 0, 0), movable=False),
    VoicingShape("open-g-maj", "Open G", "maj", "G", (3, 2, 0, 0, 0, 3), movable=False),
    VoicingShape("open-a-maj", "Open A", "maj", "A", (X, 0, 2, 2, 2, 0), movable=False),
    VoicingShape("open-a-min", "Open Am", "min", "A", (X, 0, 2, 2, 1, 0), movable=False),
    # E-shape barre chords, root on the low E string
    VoicingShape("e-shape-maj", "E-shape Maj", "maj", "E", (0, 2, 2, 1, 0, 0), movable=True),
    VoicingShape("e-shape-min", "E-shape Min", "min", "E", (0, 2, 2, 0, 0, 0), movable=True),
    VoicingShape("e-shape-dom7", "E-shape 7", "dom7", "E", (0, 2, 0, 1, 0, 0), movable=True),
    VoicingShape("e-shape-maj7", "E-shape Maj7", "maj7", "E", (0, 2, 1, 1, 0, 0), movable=True),
    VoicingShape("e-shape-min7", "E-shape Min7", "min7", "E", (0, 2, 0, 0, 0, 0), movable=True),
    # A-shape barre chords, root on the A string
    VoicingShape("a-shape-maj", "A-shape Maj", "maj", "A", (X, 0, 2, 2, 2, 0), movable=True),
    VoicingShape("a-shape-min", "A-shape Min", "min", "A", (X, 0, 2, 2, 1, 0), movable=True),
    VoicingShape("a-shape-dom7", "A-shape 7", "dom7", "A", (X, 0, 2, 0, 2, 0), movable=True),
    VoicingShape("a-shape-maj7", "A-shape Maj7", "maj7", "A", (X, 0, 2, 1, 2, 0), movable=True),
    VoicingShape("a-shape-min7", "A-shape Min7", "min7", "A", (X, 0, 2, 0, 1, 0), movable=True),
)


@dataclass(frozen=True)
class VoicingOption:
    """A catalog shape resolved for one chord.

    Parameters
    ----------
    shape : VoicingShape
        The catalog shape.
    frets : tuple[int, ...]
        Resolved fret per string (``MUTED`` for strings not played).
    label : str
        Display label from :func:`voicing_label`.
    """

    shape: VoicingShape
    frets: tuple[int, ...]
    label: str


def base_root_pc(shape: VoicingShape) -> PitchClass:
    """Return the pitch class of the root a shape is written for."""
    return LETTER_TO_PC[shape.base_root]


def voicing_offset(shape: VoicingShape, target_root: PitchClass) -> int:
    """Return how many frets a movable shape slides to reach ``target_root`` (0-11)."""
    return interval_between(base_root_pc(shape), target_root)


def resolve_voicing_frets(shape: VoicingShape, target_root: PitchClass) -> tuple[int, ...]:
    """Return the frets that play ``shape`` on ``target_root``.

    Open shapes come back unchanged whatever the target. Movable shapes
    have every played string raised by the offset from their base root;
    muted strings stay muted. Frets are not checked against the board.

    Examples
    --------
    >>> shape = find_voicing("e-shape-maj")
    >>> resolve_voicing_frets(shape, 7)
    (3, 5, 5, 4, 3, 3)
    >>> resolve_voicing_frets(find_voicing("a-shape-min"), 0)
    (-1, 3, 5, 5, 4, 3)
    """
    if not shape.movable:
        return shape.frets
    offset = voicing_offset(shape, target_root)
    return tuple(MUTED if fret < 0 else fret + offset for fret in shape.frets)


def voicing_label(shape: VoicingShape, target_root: PitchClass, prefer_flats: bool = False) -> str:
    """Return a display label for a shape played on ``target_root``.

    Examples
    --------
    >>> voicing_label(find_voicing("open-g-maj"), 7)
    'Open G'
    >>> voicing_label(find_voicing("a-shape-min7"), 10, prefer_flats=True)
    'Bb A-shape Min7 (fret 1)'
    """
    if not shape.movable:
        return shape.name
    root_name = format_pitch_class(target_root, prefer_flats)
    return f"{root_name} {shape.name} (fret {voicing_offset(shape, target_root)})"


def find_voicing(voicing_id: str) -> VoicingShape | None:
    """Look up a catalog shape by id."""
    for shape in VOICINGS:
        if shape.id == voicing_id:
            return shape
    return None


def voicing_options(
    chord: ResolvedChord,
    *,
    fret_count: int,
    prefer_flats: bool = False,
    shapes: tuple[VoicingShape, ...] = VOICINGS,
) -> list[VoicingOption]:
    """List the shapes that can voice ``chord`` on a board of ``fret_count`` frets.

    Only shapes of the chord's quality are considered, and a shape is
    dropped if any resolved fret is at or above ``fret_count``. Open shapes
    are offered unchanged for any root of a matching quality.
    """
    options: list[VoicingOption] = []
    for shape in shapes:
        if shape.quality != chord.quality:
            continue
        frets = resolve_voicing_frets(shape, chord.root)
        if any(fret >= fret_count for fret in frets):
            logger.debug("Skipped %s for root %d: frets %s exceed %d frets", shape.id, chord.root, frets, fret_count)
            continue
        options.append(VoicingOption(shape=shape, frets=frets, label=voicing_label(shape, chord.root, prefer_flats)))
    return options
