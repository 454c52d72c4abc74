"""
Tests for the fretboard system.

Tests cover:
- Fret, InstrumentString, Fretboard (fretboard.py)
- ScaleMap (scale_map.py)
"""

import pytest

from chuk_mcp_fretboard.core import Note, Scale, UnrecognizedPitchClassError
from chuk_mcp_fretboard.fretboard import Fret, Fretboard, InstrumentString, ScaleMap

GUITAR_STANDARD = [Note.parse(n) for n in ("E2", "A2", "D3", "G3", "B3", "E4")]


@pytest.fixture
def low_e() -> InstrumentString:
    """A 12-fret string tuned to E2."""
    return InstrumentString.build(Note("E", 2), 12)


@pytest.fixture
def guitar() -> Fretboard:
    """Standard-tuned guitar with 24 frets."""
    return Fretboard.build(GUITAR_STANDARD, 24)


class TestFret:
    """Tests for Fret."""

    def test_negative_fret(self) -> None:
        with pytest.raises(ValueError):
            Fret(-1, Note("E", 2))

    def test_render(self) -> None:
        assert str(Fret(3, Note("G", 2))) == "fret number: 3\n note: G2\n"

    def test_to_dict(self) -> None:
        data = Fret(3, Note("G", 2, scale_degree=5)).to_dict()
        assert data == {"fret": 3, "note": "G2", "name": "G", "octave": 2, "scale_degree": 5}


class TestInstrumentString:
    """Tests for InstrumentString."""

    def test_frets_inclusive(self, low_e: InstrumentString) -> None:
        """Frets run from 0 (open) to the fret count."""
        assert len(low_e.frets) == 13
        assert low_e.fret_count == 12
        assert [fret.fret_number for fret in low_e.frets] == list(range(13))

    def test_sharp_spelling(self, low_e: InstrumentString) -> None:
        """Frets are spelled with sharps and change octave at C."""
        assert [str(fret.note) for fret in low_e.frets] == [
            "E2",
            "F2",
            "F#2",
            "G2",
            "G#2",
            "A2",
            "A#2",
            "B2",
            "C3",
            "C#3",
            "D3",
            "D#3",
            "E3",
        ]

    def test_open_note(self, low_e: InstrumentString) -> None:
        assert low_e[0].note == low_e.open_note
        assert low_e.name == "E"
        assert low_e.key == "E2"

    def test_flat_open_note(self) -> None:
        """Every fret is spelled with sharps, the open fret included."""
        string = InstrumentString.build(Note("Eb", 2), 2)
        assert [str(fret.note) for fret in string.frets] == ["D#2", "E2", "F2"]

    def test_zero_frets(self) -> None:
        string = InstrumentString.build(Note("A", 2), 0)
        assert len(string.frets) == 1

    def test_render(self) -> None:
        string = InstrumentString.build(Note("B", 3), 2)
        assert str(string) == "B string: B3, C4, C#4, \n"


class TestFretboard:
    """Tests for Fretboard."""

    def test_strings_in_tuning_order(self, guitar: Fretboard) -> None:
        assert len(guitar) == 6
        assert [string.key for string in guitar] == ["E2", "A2", "D3", "G3", "B3", "E4"]
        assert guitar.tuning == GUITAR_STANDARD

    def test_fret_notes(self, guitar: Fretboard) -> None:
        assert guitar.fret_count == 24
        assert guitar.strings[4][1].note == Note("C", 4)
        assert guitar.strings[5][24].note == Note("E", 6)
        assert guitar.strings[0][5].note == guitar.strings[1][0].note

    def test_empty_tuning(self) -> None:
        with pytest.raises(ValueError):
            Fretboard.build([], 12)

    @pytest.mark.parametrize("frets", [-1, 2.5, True])
    def test_invalid_fret_count(self, frets: object) -> None:
        with pytest.raises(ValueError):
            Fretboard.build(GUITAR_STANDARD, frets)  # type: ignore[arg-type]

    def test_invalid_open_note(self) -> None:
        with pytest.raises(UnrecognizedPitchClassError):
            Fretboard.build([Note.error()], 3)

    def test_render(self) -> None:
        fretboard = Fretboard.build([Note("E", 2), Note("A", 2)], 1)
        assert str(fretboard) == "E string: E2, F2, \n\nA string: A2, A#2, \n\n"


class TestScaleMap:
    """Tests for ScaleMap."""

    def test_low_e_in_c_minor(self) -> None:
        """Only natural scale tones match a sharp-spelled string."""
        fretboard = Fretboard.build([Note("E", 2)], 12)
        scale = Scale.build(Note("C", 4), "minor")
        scale_map = ScaleMap.build(fretboard, scale)

        assert scale_map.fret_numbers("E2") == [1, 3, 8, 10]
        assert [(str(f.note), f.note.scale_degree) for f in scale_map["E2"]] == [
            ("F2", 4),
            ("G2", 5),
            ("C3", 1),
            ("D3", 2),
        ]

    def test_all_naturals_scale(self) -> None:
        """A minor has no accidentals, so every scale fret matches."""
        fretboard = Fretboard.build([Note("E", 2)], 12)
        scale_map = ScaleMap.build(fretboard, Scale.build(Note("A", 2), "minor"))
        assert scale_map.fret_numbers("E2") == [0, 1, 3, 5, 7, 8, 10, 12]
        assert scale_map["E2"][0].note.scale_degree == 5

    def test_keys_follow_strings(self, guitar: Fretboard) -> None:
        scale_map = ScaleMap.build(guitar, Scale.build(Note("C", 4), "major"))
        assert list(scale_map) == ["E2", "A2", "D3", "G3", "B3", "E4"]
        assert len(scale_map) == 6
        assert "B3" in scale_map

    def test_fretboard_not_modified(self, guitar: Fretboard) -> None:
        """Degrees are stamped on copies, not on the fretboard's notes."""
        ScaleMap.build(guitar, Scale.build(Note("C", 4), "major"))
        assert guitar.strings[0][1].note.scale_degree == 0

    def test_string_without_matches(self) -> None:
        """A string whose frets never match gets an empty entry."""
        fretboard = Fretboard.build([Note("C#", 3)], 0)
        scale_map = ScaleMap.build(fretboard, Scale.build(Note("C", 4), "minor"))
        assert scale_map["C#3"] == ()

    def test_render(self) -> None:
        fretboard = Fretboard.build([Note("E", 2)], 12)
        scale_map = ScaleMap.build(fretboard, Scale.build(Note("C", 4), "minor"))
        assert scale_map.render() == (
            "\nE2 string: F2(4) @fret 1, G2(5) @fret 3, C3(1) @fret 8, D3(2) @fret 10, \n"
        )

    def test_repeated_open_string(self) -> None:
        """Strings tuned alike share a key; each string still renders its own line."""
        fretboard = Fretboard.build([Note("E", 2), Note("E", 2)], 3)
        scale_map = ScaleMap.build(fretboard, Scale.build(Note("C", 4), "minor"))

        assert list(scale_map) == ["E2"]
        assert scale_map.fret_numbers("E2") == [1, 3, 1, 3]
        assert scale_map.render() == (
            "\nE2 string: F2(4) @fret 1, G2(5) @fret 3, "
            "\nE2 string: F2(4) @fret 1, G2(5) @fret 3, \n"
        )
