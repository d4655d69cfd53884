"""Tests for the Latin/Morse tables."""

import string

import pytest

from morsewave.table import (
    DURATION_UNITS,
    LATIN_TO_MORSE,
    MORSE_TO_LATIN,
    char_of,
    code_of,
    duration_units,
    invert_table,
)


class TestCodeOf:
    def test_letters_and_digits_present(self):
        for char in string.ascii_uppercase + string.digits:
            assert code_of(char) is not None, char

    def test_punctuation_present(self):
        for char in ",.?/()-":
            assert code_of(char) is not None, char

    def test_known_codes(self):
        assert code_of("S") == "..."
        assert code_of("O") == "---"
        assert code_of("0") == "-----"
        assert code_of("?") == "..--.."

    def test_space_and_newline(self):
        assert code_of(" ") == "/"
        assert code_of("\n") == "\n"

    def test_lowercase_not_mapped(self):
        # Callers uppercase before lookup
        assert code_of("a") is None

    def test_codes_use_dots_and_dashes(self):
        for char, code in LATIN_TO_MORSE.items():
            if char in (" ", "\n"):
                continue
            assert set(code) <= {".", "-"}, char


class TestCharOf:
    def test_inverse_of_every_entry(self):
        for char, code in LATIN_TO_MORSE.items():
            assert char_of(code) == char

    def test_unknown_code(self):
        assert char_of("........") is None

    def test_inverse_has_same_size(self):
        assert len(MORSE_TO_LATIN) == len(LATIN_TO_MORSE)


class TestInvertTable:
    def test_inverts(self):
        assert invert_table({"A": ".-", "B": "-..."}) == {".-": "A", "-...": "B"}

    def test_collision_raises(self):
        with pytest.raises(ValueError, match="'A'.*'Z'"):
            invert_table({"A": ".-", "Z": ".-"})


class TestDurationUnits:
    def test_symbol_units(self):
        assert duration_units(".") == 1
        assert duration_units("-") == 3
        assert duration_units(" ") == 3
        assert duration_units("/") == 1
        assert duration_units("\n") == 10

    def test_unknown_is_zero(self):
        assert duration_units("x") == 0
        assert duration_units("") == 0


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        LATIN_TO_MORSE["A"] = "..."
    with pytest.raises(TypeError):
        DURATION_UNITS["."] = 2
