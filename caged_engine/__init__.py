"""Music-theory resolution engine for fretboard practice.

This library turns chord symbols (literal names or roman numerals relative
to a key) into resolved chords, derives scale, pentatonic and chord-tone
sets from them, places chord voicings on the neck and splits the neck into
the five overlapping CAGED regions of a key. Every function is pure and
returns immutable values.

Examples
--------
>>> from caged_engine import parse_literal_chord, parse_roman_numeral, chord_tone_set

>>> # Literal chord names
>>> result = parse_literal_chord("F#m7b5")
>>> result.chord.root, result.chord.quality
(6, 'm7b5')

>>> # Roman numerals with secondary dominants
>>> parse_roman_numeral("V/ii", "C", "major").chord.root
9

>>> # Chord tones as pitch classes
>>> sorted(chord_tone_set(result.chord))
[0, 4, 6, 9]

>>> # CAGED regions for a key
>>> from caged_engine import get_caged_regions_for_key
>>> [r.id for r in get_caged_regions_for_key(0, "major", 0, 15)]
['C', 'A', 'G', 'E', 'D']
"""

from caged_engine.caged import (
    A_MINOR_TEMPLATES,
    C_MAJOR_TEMPLATES,
    CagedTemplate,
    FretWindow,
    get_caged_regions_for_key,
    get_region_window,
    get_regions_for_fret,
)
from caged_engine.chords import (
    CHORD_QUALITIES,
    CHORD_QUALITY_INTERVALS,
    chord_chroma,
    chord_tone_set,
    chord_tones,
    format_chord_summary,
    make_chord,
)
from caged_engine.converter import from_pychord, to_harte, to_pychord
from caged_engine.fretboard import DEFAULT_FRET_COUNT, STANDARD_TUNING, Fretboard, FretPosition
from caged_engine.models import (
    MUTED,
    CagedRegion,
    ChordResolutionError,
    ErrorKind,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    ResolvedChord,
    VoicingShape,
)
from caged_engine.pitch_class import (
    InvalidNoteError,
    format_pitch_class,
    normalize_note_name,
    prefer_flats_for_key,
    to_pitch_class,
)
from caged_engine.resolver import parse_literal_chord, parse_roman_numeral
from caged_engine.scales import build_pentatonic, build_scale, note_label, scale_degree_label
from caged_engine.voicings import (
    VOICINGS,
    VoicingOption,
    find_voicing,
    resolve_voicing_frets,
    voicing_label,
    voicing_options,
)

__all__ = [
    "A_MINOR_TEMPLATES",
    "CHORD_QUALITIES",
    "CHORD_QUALITY_INTERVALS",
    "C_MAJOR_TEMPLATES",
    "DEFAULT_FRET_COUNT",
    "MUTED",
    "STANDARD_TUNING",
    "VOICINGS",
    "CagedRegion",
    "CagedTemplate",
    "ChordResolutionError",
    "ErrorKind",
    "FretPosition",
    "FretWindow",
    "Fretboard",
    "InvalidNoteError",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "ResolvedChord",
    "VoicingOption",
    "VoicingShape",
    "build_pentatonic",
    "build_scale",
    "chord_chroma",
    "chord_tone_set",
    "chord_tones",
    "find_voicing",
    "format_chord_summary",
    "format_pitch_class",
    "from_pychord",
    "get_caged_regions_for_key",
    "get_region_window",
    "get_regions_for_fret",
    "make_chord",
    "normalize_note_name",
    "note_label",
    "parse_literal_chord",
    "parse_roman_numeral",
    "prefer_flats_for_key",
    "resolve_voicing_frets",
    "scale_degree_label",
    "to_harte",
    "to_pitch_class",
    "to_pychord",
    "voicing_label",
    "voicing_options",
]
