"""CAGED shape regions on a finite fretboard.

Each of the five shapes has a fixed fret window in one reference key per
mode (C major, A minor). For another key the windows are shifted by the
distance between tonics. A shift of ``diff`` and ``diff - 12`` name the
same pitch class, so both placements are tried and the one with the
larger overlap with the board is kept. Shapes with no valid placement
are left out.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from caged_engine.models import CagedRegion, CagedRegionId, Mode, PitchClass
from caged_engine.pitch_class import interval_between

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CagedTemplate:
    """A shape's window in the reference key: ``[anchor + start_offset, anchor + end_offset]``."""

    id: CagedRegionId
    label: str
    anchor_fret: int
    start_offset: int
    end_offset: int

    @property
    def base_start(self) -> int:
        return self.anchor_fret + self.start_offset

    @property
    def base_end(self) -> int:
        return self.anchor_fret + self.end_offset


@dataclass(frozen=True)
class FretWindow:
    """An inclusive fret range."""

    start: int
    end: int

    @property
    def overlap(self) -> int:
        return self.end - self.start


C_MAJOR_TEMPLATES: tuple[CagedTemplate, ...] = (
    CagedTemplate("C", "C shape", anchor_fret=3, start_offset=-3, end_offset=1),
    CagedTemplate("A", "A shape", anchor_fret=3, start_offset=-1, end_offset=3),
    CagedTemplate("G", "G shape", anchor_fret=3, start_offset=-1, end_offset=3),
    CagedTemplate("E", "E shape", anchor_fret=8, start_offset=-1, end_offset=3),
    CagedTemplate("D", "D shape", anchor_fret=10, start_offset=-2, end_offset=2),
)

A_MINOR_TEMPLATES: tuple[CagedTemplate, ...] = (
    CagedTemplate("A", "A shape", anchor_fret=0, start_offset=0, end_offset=3),
    CagedTemplate("G", "G shape", anchor_fret=5, start_offset=-2, end_offset=2),
    CagedTemplate("E", "E shape", anchor_fret=5, start_offset=-1, end_offset=3),
    CagedTemplate("D", "D shape", anchor_fret=10, start_offset=-2, end_offset=2),
    CagedTemplate("C", "C shape", anchor_fret=12, start_offset=-3, end_offset=1),
)

# Reference key tonic and template set per mode
REFERENCE_TONIC: dict[str, PitchClass] = {
    "major": 0,
    "minor": 9,
}

TEMPLATES_BY_MODE: dict[str, tuple[CagedTemplate, ...]] = {
    "major": C_MAJOR_TEMPLATES,
    "minor": A_MINOR_TEMPLATES,
}


def clamp_window(fret_start: int, fret_end: int, fret_min: int, fret_max: int) -> FretWindow | None:
    """Clamp a window to ``[fret_min, fret_max]``.

    Returns None if nothing of the window remains on the board.

    Examples
    --------
    >>> clamp_window(13, 17, 0, 15)
    FretWindow(start=13, end=15)
    >>> clamp_window(-6, -2, 0, 15) is None
    True
    """
    start = max(fret_min, fret_start)
    end = min(fret_max, fret_end)
    if end < fret_min or start > fret_max or start > end:
        return None
    return FretWindow(start, end)


def place_template(template: CagedTemplate, diff: int, fret_min: int, fret_max: int) -> FretWindow | None:
    """Place one template for a key ``diff`` semitones above the reference.

    Tries the shifts ``diff`` and ``diff - 12`` in that order and keeps the
    clamped window with the larger overlap; on a tie the first one wins.
    """
    best: FretWindow | None = None
    for shift in (diff, diff - 12):
        window = clamp_window(template.base_start + shift, template.base_end + shift, fret_min, fret_max)
        if window is None:
            continue
        if best is None or window.overlap > best.overlap:
            best = window
    return best


def get_caged_regions_for_key(
    key_tonic_pc: PitchClass,
    key_mode: Mode,
    fret_min: int,
    fret_max: int,
    *,
    templates: Sequence[CagedTemplate] | None = None,
) -> list[CagedRegion]:
    """Compute the CAGED regions for a key on a board of ``[fret_min, fret_max]``.

    Parameters
    ----------
    key_tonic_pc : int
        Key tonic pitch class.
    key_mode : {"major", "minor"}
        Selects the reference key and template set.
    fret_min, fret_max : int
        Inclusive fret bounds of the board.
    templates : Sequence[CagedTemplate] | None
        Template set to shift instead of the mode's default set.

    Returns
    -------
    list[CagedRegion]
        Zero to five regions, in template order.

    Examples
    --------
    >>> [(r.id, r.fret_start, r.fret_end) for r in get_caged_regions_for_key(0, "major", 0, 15)]
    [('C', 0, 4), ('A', 2, 6), ('G', 2, 6), ('E', 7, 11), ('D', 8, 12)]
    """
    if key_mode not in REFERENCE_TONIC:
        msg = f"Mode must be 'major' or 'minor', got: {key_mode!r}"
        raise ValueError(msg)

    diff = interval_between(REFERENCE_TONIC[key_mode], key_tonic_pc)
    if templates is None:
        templates = TEMPLATES_BY_MODE[key_mode]

    regions: list[CagedRegion] = []
    for template in templates:
        window = place_template(template, diff, fret_min, fret_max)
        if window is None:
            logger.debug(
                "Dropped %s for key pc %d %s on frets %d-%d",
                template.label,
                key_tonic_pc,
                key_mode,
                fret_min,
                fret_max,
            )
            continue
        regions.append(
            CagedRegion(
                id=template.id,
                label=template.label,
                fret_start=window.start,
                fret_end=window.end,
            )
        )
    return regions


def get_region_window(regions: Sequence[CagedRegion], region_id: CagedRegionId) -> FretWindow | None:
    """Return the window of the region with ``region_id``, or None if absent."""
    for region in regions:
        if region.id == region_id:
            return FretWindow(region.fret_start, region.fret_end)
    return None


def get_regions_for_fret(regions: Sequence[CagedRegion], fret: int) -> list[CagedRegionId]:
    """Return the ids of every region whose window contains ``fret``.

    Examples
    --------
    >>> get_regions_for_fret(get_caged_regions_for_key(0, "major", 0, 15), 2)
    ['C', 'A', 'G']
    """
    return [region.id for region in regions if region.contains(fret)]
