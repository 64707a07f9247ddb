"""Tests for roman-numeral parsing relative to a key."""

import pytest

from caged_engine.models import ErrorKind
from caged_engine.resolver.roman import RomanParts, parse_roman_numeral, parse_roman_part, quality_from_roman


class TestParseRomanPart:
    """Test splitting a single numeral."""

    def test_plain_upper(self) -> None:
        assert parse_roman_part("IV") == RomanParts(accidental=0, degree=4, is_lower=False, suffix="")

    def test_flat_lower_with_suffix(self) -> None:
        assert parse_roman_part("biiio") == RomanParts(accidental=-1, degree=3, is_lower=True, suffix="o")

    def test_sharp(self) -> None:
        assert parse_roman_part("#iv").accidental == 1

    @pytest.mark.parametrize("text", ["", "X", "IIII", "VV", "Vii", "iV", "b", "7"])
    def test_invalid(self, text: str) -> None:
        assert parse_roman_part(text) is None


class TestQualityFromRoman:
    """Test quality derivation from suffix and case."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("I", "maj"),
            ("ii", "min"),
            ("V7", "maj"),
            ("ii7", "min"),
            ("viiø", "m7b5"),
            ("viiø7", "m7b5"),
            ("vii°", "dim"),
            ("viio", "dim"),
            ("viio7", "dim"),
            ("iidim", "dim"),
            ("III+", "aug"),
            ("IIIaug", "aug"),
            ("viidim7", "dim"),
            ("VIIO", "dim"),
            ("III+7", "aug"),
        ],
    )
    def test_markers(self, text: str, expected: str) -> None:
        assert quality_from_roman(parse_roman_part(text)) == expected

    @pytest.mark.parametrize(
        "text",
        ["Vsus4", "Imaj7", "V9", "iim", "Vhello", "Vsus4dim", "IVxyz+", "Vmaj7aug", "iidimsus4", "viiøø", "V+9"],
    )
    def test_unrecognized(self, text: str) -> None:
        assert quality_from_roman(parse_roman_part(text)) is None


class TestParseRomanNumeral:
    """Test full roman-numeral resolution."""

    @pytest.mark.parametrize(
        ("text", "root", "quality"),
        [
            ("I", 0, "maj"),
            ("ii", 2, "min"),
            ("iii", 4, "min"),
            ("IV", 5, "maj"),
            ("V", 7, "maj"),
            ("vi", 9, "min"),
            ("vii°", 11, "dim"),
        ],
    )
    def test_diatonic_c_major(self, text: str, root: int, quality: str) -> None:
        result = parse_roman_numeral(text, "C", "major")
        assert result.ok
        assert result.chord.root == root
        assert result.chord.quality == quality

    def test_case_is_taken_literally(self) -> None:
        """Case decides the triad, even against the key's diatonic quality."""
        result = parse_roman_numeral("II", "C", "major")
        assert result.chord.root == 2
        assert result.chord.quality == "maj"

    def test_secondary_dominant_of_ii(self) -> None:
        result = parse_roman_numeral("V/ii", "C", "major")
        assert result.ok
        assert result.chord.root == 9
        assert result.chord.quality == "maj"

    def test_secondary_dominant_of_v(self) -> None:
        assert parse_roman_numeral("V/V", "G", "major").chord.root == 9

    def test_secondary_leading_tone(self) -> None:
        result = parse_roman_numeral("vii°/V", "C", "major")
        assert result.ok
        assert result.chord.root == 6
        assert result.chord.quality == "dim"

    def test_secondary_seventh_figure(self) -> None:
        result = parse_roman_numeral("V7/vi", "C", "major")
        assert result.chord.root == 4
        assert result.chord.quality == "maj"

    def test_flat_seven_in_a_minor(self) -> None:
        # A natural minor: degree 7 is G (7), lowered to F# (6)
        result = parse_roman_numeral("bVII", "A", "minor")
        assert result.ok
        assert result.chord.root == 6
        assert result.chord.quality == "maj"

    def test_flat_six_in_a_minor(self) -> None:
        assert parse_roman_numeral("bVI", "A", "minor").chord.root == 4

    def test_minor_key_tonic(self) -> None:
        result = parse_roman_numeral("i", "A", "minor")
        assert result.chord.root == 9
        assert result.chord.quality == "min"

    def test_flat_key(self) -> None:
        assert parse_roman_numeral("IV", "Bb", "major").chord.root == 3

    def test_whitespace_removed(self) -> None:
        assert parse_roman_numeral(" V / ii ", "C", "major").chord.root == 9

    def test_intervals_copied(self) -> None:
        assert parse_roman_numeral("viiø", "C", "major").chord.intervals == (0, 3, 6, 10)


class TestParseRomanFailures:
    """Test structured roman-numeral failures."""

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text: str) -> None:
        result = parse_roman_numeral(text, "C", "major")
        assert result.kind is ErrorKind.EMPTY_INPUT
        assert result.error == "Empty roman numeral."

    def test_too_many_secondaries(self) -> None:
        result = parse_roman_numeral("V/V/V", "C", "major")
        assert result.kind is ErrorKind.TOO_MANY_SECONDARY_DOMINANTS

    @pytest.mark.parametrize("text", ["X", "H7", "Vii", "/V"])
    def test_invalid_numeral(self, text: str) -> None:
        assert parse_roman_numeral(text, "C", "major").kind is ErrorKind.INVALID_ROMAN_NUMERAL

    def test_unsupported_quality(self) -> None:
        result = parse_roman_numeral("Vsus4", "C", "major")
        assert result.kind is ErrorKind.UNSUPPORTED_ROMAN_QUALITY
        assert "sus4" in result.error

    @pytest.mark.parametrize("text", ["Vhello", "Vsus4dim", "IVxyz+", "Vmaj7aug", "iidimsus4"])
    def test_marker_inside_other_text(self, text: str) -> None:
        result = parse_roman_numeral(text, "C", "major")
        assert result.kind is ErrorKind.UNSUPPORTED_ROMAN_QUALITY

    def test_invalid_key(self) -> None:
        result = parse_roman_numeral("V", "H", "major")
        assert result.kind is ErrorKind.INVALID_KEY
        assert result.error == "Invalid key tonic."

    @pytest.mark.parametrize("mode", ["Major", "dorian", ""])
    def test_invalid_key_mode(self, mode: str) -> None:
        result = parse_roman_numeral("V", "C", mode)  # type: ignore[arg-type]
        assert result.kind is ErrorKind.INVALID_KEY
        assert result.error == f"Invalid key mode: {mode}"

    @pytest.mark.parametrize("text", ["V/x", "V/", "V/H"])
    def test_invalid_secondary_target(self, text: str) -> None:
        assert parse_roman_numeral(text, "C", "major").kind is ErrorKind.INVALID_SECONDARY_TARGET

    @pytest.mark.parametrize("text", ["IV/V", "ii/V", "VI/ii", "I/V"])
    def test_unsupported_secondary_form(self, text: str) -> None:
        result = parse_roman_numeral(text, "C", "major")
        assert result.kind is ErrorKind.UNSUPPORTED_SECONDARY_FORM

    def test_failures_are_values(self) -> None:
        """Malformed input never raises."""
        for text in ["", "?", "V/V/V", "V/?", "IV/V", "Vxyz", "Vhello"]:
            result = parse_roman_numeral(text, "C", "major")
            assert result.ok is False
