import sys

from caged_engine import (
    Fretboard,
    chord_tone_set,
    format_chord_summary,
    get_caged_regions_for_key,
    parse_roman_numeral,
    prefer_flats_for_key,
    to_pitch_class,
    voicing_options,
)

key, mode = "G", "major"
board = Fretboard()
prefer_flats = prefer_flats_for_key(key)

for numeral in ["I", "V/vi", "vi", "IV"]:
    result = parse_roman_numeral(numeral, key, mode)
    if not result.ok:
        sys.stdout.write(f"{numeral}: {result.error}\n")
        continue
    chord = result.chord
    sys.stdout.write(f"{numeral}: {format_chord_summary(chord, prefer_flats)}\n")
    for option in voicing_options(chord, fret_count=board.fret_count, prefer_flats=prefer_flats):
        sys.stdout.write(f"  {option.label}: {option.frets}\n")
    sys.stdout.write(f"  tones on the neck: {len(board.positions_for(chord_tone_set(chord)))}\n")

# CAGED regions for the key
for region in get_caged_regions_for_key(to_pitch_class(key), mode, 0, board.max_fret):
    sys.stdout.write(f"{region.label}: frets {region.fret_start}-{region.fret_end}\n")
