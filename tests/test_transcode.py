"""Tests for text <-> Morse transcoding."""

import pytest

from morsewave.table import LATIN_TO_MORSE
from morsewave.transcode import code_to_text, format_unmatched, text_to_code


class TestTextToCode:
    def test_sos(self):
        result = text_to_code("SOS")
        assert result.output == "... --- ..."
        assert result.unmatched == ()

    def test_lowercase_is_uppercased(self):
        assert text_to_code("sos").output == "... --- ..."

    def test_space_becomes_word_token(self):
        assert text_to_code("HI YOU").output == ".... .. / -.-- --- ..-"

    def test_newline_drops_surrounding_separators(self):
        assert text_to_code("A\nB").output == ".-\n-..."

    def test_unmatched_character(self):
        result = text_to_code("#")
        assert result.output == ""
        assert result.unmatched == ("#",)

    def test_unmatched_deduplicated_in_first_seen_order(self):
        result = text_to_code("a@b#c@#")
        assert result.output == ".- -... -.-."
        assert result.unmatched == ("@", "#")

    def test_unmatched_not_emitted_as_blank(self):
        assert text_to_code("E#E").output == ". ."

    def test_accented_letter_falls_back_to_base(self):
        result = text_to_code("\u00e9")
        assert result.output == "."
        assert result.unmatched == ("\u0301",)

    def test_empty(self):
        result = text_to_code("")
        assert result.output == ""
        assert result.unmatched == ()


class TestCodeToText:
    def test_sos(self):
        result = code_to_text("... --- ...")
        assert result.output == "SOS"
        assert result.unmatched == ()

    def test_word_boundary(self):
        assert code_to_text(".- / -...").output == "A B"

    def test_underscore_is_dash(self):
        assert code_to_text("_._.").output == code_to_text("-.-.").output == "C"

    def test_underscore_inside_unknown_token(self):
        assert code_to_text("-.-_-.-") == code_to_text("-.---.-")

    def test_empty_tokens_skipped(self):
        assert code_to_text("...  ---  ").output == "SO"

    def test_unmatched_tokens(self):
        result = code_to_text("...... . ...... .-.-.-.-")
        assert result.output == "E"
        assert result.unmatched == ("......", ".-.-.-.-")

    def test_unmatched_contributes_nothing(self):
        assert code_to_text(". ...... .").output == "EE"

    def test_empty(self):
        result = code_to_text("")
        assert result.output == ""
        assert result.unmatched == ()


class TestRoundTrip:
    @pytest.mark.parametrize("char", sorted(LATIN_TO_MORSE))
    def test_every_table_character(self, char):
        code = text_to_code(char).output
        assert code_to_text(code).output == char.upper()

    def test_sentence(self):
        text = "MEET AT 10, OK?"
        assert code_to_text(text_to_code(text).output).output == text


class TestFormatUnmatched:
    def test_nothing_unmatched(self):
        assert format_unmatched((), "Latin") == ""

    def test_message(self):
        assert format_unmatched(("#", "@"), "Latin") == 'Latin Character(s) Not Found: "#", "@"'

    def test_escapes_newline(self):
        assert format_unmatched(["..\n."], "Morse") == 'Morse Character(s) Not Found: "..\\n."'

    def test_keeps_non_ascii(self):
        assert format_unmatched(("ß",), "Latin") == 'Latin Character(s) Not Found: "ß"'
