"""Fretboard geometry: which pitch class sits at each string and fret.

The instrument is described by its open-string tuning (as pitch classes,
low string first) and its fret count. Fret 0 is the open string, so a
board of ``fret_count`` frets covers frets ``0`` to ``fret_count - 1``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from caged_engine.caged import FretWindow
from caged_engine.models import PitchClass

# Standard guitar tuning, low E to high E
STANDARD_TUNING: tuple[PitchClass, ...] = (4, 9, 2, 7, 11, 4)

DEFAULT_FRET_COUNT = 16


@dataclass(frozen=True)
class FretPosition:
    """One string/fret location and the pitch class it sounds.

    Parameters
    ----------
    string_index : int
        0-based index into the tuning (0 is the lowest string).
    fret : int
        Fret number, 0 for the open string.
    pitch_class : int
        Pitch class sounded at this position.
    """

    string_index: int
    fret: int
    pitch_class: PitchClass


@dataclass(frozen=True)
class Fretboard:
    """A fretted instrument with fixed tuning and fret count.

    Parameters
    ----------
    tuning : tuple[int, ...]
        Open-string pitch classes, low string first.
    fret_count : int
        Number of fret positions including the open string.

    Examples
    --------
    >>> board = Fretboard()
    >>> board.pitch_at(0, 3)
    7
    >>> board.max_fret
    15
    """

    tuning: tuple[PitchClass, ...] = STANDARD_TUNING
    fret_count: int = DEFAULT_FRET_COUNT

    def __post_init__(self) -> None:
        if not self.tuning:
            msg = "Tuning must have at least one string"
            raise ValueError(msg)
        if any(not 0 <= pc <= 11 for pc in self.tuning):
            msg = f"Tuning pitch classes must be in 0-11, got: {self.tuning}"
            raise ValueError(msg)
        if self.fret_count < 1:
            msg = f"Fret count must be at least 1, got: {self.fret_count}"
            raise ValueError(msg)

    @property
    def string_count(self) -> int:
        return len(self.tuning)

    @property
    def max_fret(self) -> int:
        """Highest fret on the board."""
        return self.fret_count - 1

    def pitch_at(self, string_index: int, fret: int) -> PitchClass:
        """Return the pitch class at a string and fret."""
        return (self.tuning[string_index] + fret) % 12

    def pitch_grid(self) -> np.ndarray:
        """Return the pitch class at every position.

        Returns
        -------
        np.ndarray
            Integer array of shape (string_count, fret_count).
        """
        return np.add.outer(np.asarray(self.tuning), np.arange(self.fret_count)) % 12

    def positions_for(
        self,
        pitch_classes: Iterable[PitchClass],
        window: FretWindow | None = None,
    ) -> list[FretPosition]:
        """Find every position whose pitch class is in ``pitch_classes``.

        Parameters
        ----------
        pitch_classes : Iterable[int]
            Pitch classes to look for, e.g. a chord-tone or scale set.
        window : FretWindow | None
            Restrict results to this inclusive fret range.

        Returns
        -------
        list[FretPosition]
            Positions ordered by string, then fret.
        """
        grid = self.pitch_grid()
        mask = np.isin(grid, list(pitch_classes))
        if window is not None:
            frets = np.arange(self.fret_count)
            mask &= (frets >= window.start) & (frets <= window.end)
        strings, frets_hit = np.nonzero(mask)
        return [
            FretPosition(string_index=int(s), fret=int(f), pitch_class=int(grid[s, f]))
            for s, f in zip(strings, frets_hit)
        ]

    def positions_for_frets(self, frets: Sequence[int]) -> list[FretPosition]:
        """Map one fret per string (as from a voicing) to positions.

        Muted strings and frets outside the board are skipped.
        """
        return [
            FretPosition(string_index=s, fret=fret, pitch_class=self.pitch_at(s, fret))
            for s, fret in enumerate(frets[: self.string_count])
            if 0 <= fret < self.fret_count
        ]
