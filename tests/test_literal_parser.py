"""Tests for literal chord-name parsing."""

import pytest

from caged_engine.models import ErrorKind, ParseFailure, ParseSuccess
from caged_engine.resolver.literal import LITERAL_SUFFIXES, match_suffix, parse_literal_chord


class TestParseLiteralChord:
    """Test successful literal parses."""

    def test_cmaj7(self) -> None:
        result = parse_literal_chord("Cmaj7")
        assert isinstance(result, ParseSuccess)
        assert result.ok is True
        assert result.chord.root == 0
        assert result.chord.quality == "maj7"
        assert result.chord.intervals == (0, 4, 7, 11)

    def test_half_diminished_with_sharp_root(self) -> None:
        result = parse_literal_chord("F#m7b5")
        assert result.ok
        assert result.chord.root == 6
        assert result.chord.quality == "m7b5"

    @pytest.mark.parametrize(
        ("text", "root", "quality"),
        [
            ("C", 0, "maj"),
            ("Am", 9, "min"),
            ("Am7", 9, "min7"),
            ("Amin7", 9, "min7"),
            ("A-", 9, "min"),
            ("G7", 7, "dom7"),
            ("CM7", 0, "maj7"),
            ("CΔ7", 0, "maj7"),
            ("CMAJ7", 0, "maj7"),
            ("Bø", 11, "m7b5"),
            ("Bdim", 11, "dim"),
            ("B°", 11, "dim"),
            ("Caug", 0, "aug"),
            ("C+", 0, "aug"),
            ("Dsus2", 2, "sus2"),
            ("Dsus4", 2, "sus4"),
            ("Cadd9", 0, "add9"),
            ("F6", 5, "6"),
            ("E9", 4, "9"),
            ("Bbm", 10, "min"),
            ("Ebmaj7", 3, "maj7"),
            ("Cb", 11, "maj"),
            ("CM", 0, "maj"),
            ("Cmaj", 0, "maj"),
            ("CMAJ", 0, "maj"),
        ],
    )
    def test_suffix_table(self, text: str, root: int, quality: str) -> None:
        result = parse_literal_chord(text)
        assert result.ok
        assert result.chord.root == root
        assert result.chord.quality == quality

    def test_lower_case_root(self) -> None:
        result = parse_literal_chord("am7")
        assert result.ok
        assert result.chord.root == 9
        assert result.chord.quality == "min7"

    def test_whitespace(self) -> None:
        result = parse_literal_chord("  D  m7 ")
        assert result.ok
        assert result.chord.root == 2
        assert result.chord.quality == "min7"


class TestParseLiteralFailures:
    """Test structured literal failures."""

    @pytest.mark.parametrize("text", ["Hz", "", "   ", "7", "#C", "xm7"])
    def test_invalid_root(self, text: str) -> None:
        result = parse_literal_chord(text)
        assert isinstance(result, ParseFailure)
        assert result.ok is False
        assert result.kind is ErrorKind.INVALID_ROOT
        assert result.error == "Invalid chord root."

    @pytest.mark.parametrize("text", ["C13", "Cm9", "Cdim7", "Cmaj9", "Csus"])
    def test_unsupported_suffix(self, text: str) -> None:
        result = parse_literal_chord(text)
        assert result.kind is ErrorKind.UNSUPPORTED_SUFFIX
        assert result.error == f"Unsupported chord suffix: {text[1:]}"

    def test_failure_unwrap_raises(self) -> None:
        from caged_engine.models import ChordResolutionError

        with pytest.raises(ChordResolutionError, match="Unsupported chord suffix: 13") as exc_info:
            parse_literal_chord("C13").unwrap()
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_SUFFIX

    def test_success_unwrap(self) -> None:
        assert parse_literal_chord("G").unwrap().root == 7


class TestSuffixOrder:
    """Test that the ordered suffix table keeps its priority rules."""

    def test_min7_before_minor(self) -> None:
        qualities = [quality for _, quality in LITERAL_SUFFIXES]
        assert qualities.index("min7") < qualities.index("min")

    def test_empty_suffix_is_last(self) -> None:
        assert LITERAL_SUFFIXES[-1][1] == "maj"

    def test_m7_is_not_major_seventh(self) -> None:
        assert match_suffix("m7") == "min7"
        assert match_suffix("M7") == "maj7"

    def test_unknown_suffix(self) -> None:
        assert match_suffix("m13") is None

    def test_single_letter_m_keeps_case(self) -> None:
        assert match_suffix("m") == "min"
        assert match_suffix("M") == "maj"
