"""Substitution rules of convert() with the static alphabet"""

import pytest

from shift_encode import DICT, SEPARATOR, OFFSET, convert, shift_letter, shift_text


class TestConvert:
    """convert() with DICT / SEPARATOR / OFFSET"""

    def test_example_phrase(self):
        assert convert("ab cd") == "bc de"

    def test_empty_input(self):
        assert convert("") == ""

    @pytest.mark.parametrize("c", list(DICT))
    def test_each_letter_moves_by_offset(self, c):
        assert convert(c) == DICT[(DICT.index(c) + OFFSET) % len(DICT)]

    def test_last_letter_wraps(self):
        assert convert("z") == "a"

    @pytest.mark.parametrize("c", ["A", "Z", "0", "9", ".", "!", "\n", "\t", "ж", "é"])
    def test_characters_outside_alphabet_pass_through(self, c):
        assert convert(c) == c

    def test_mixed_text_keeps_non_letters(self):
        assert convert("Hello, world 42!") == "Hfmmp, xpsme 42!"

    @pytest.mark.parametrize("text", ["a b c", "  ", " lead", "trail ", "a  b", "no-separator"])
    def test_segment_count_preserved(self, text):
        out = convert(text)
        assert len(out.split(SEPARATOR)) == len(text.split(SEPARATOR))
        assert len(out) == len(text)

    def test_separator_positions_unchanged(self):
        text = "xy  z "
        out = convert(text)
        assert [i for i, c in enumerate(out) if c == SEPARATOR] == \
               [i for i, c in enumerate(text) if c == SEPARATOR]

    def test_no_state_between_calls(self):
        assert convert("abc") == convert("abc") == "bcd"


class TestShiftLetter:

    def test_empty_alphabet(self):
        assert shift_letter("a", "", 3) == "a"

    def test_shift_inside_alphabet(self):
        assert shift_letter("a", DICT, 3) == "d"

    def test_not_in_alphabet(self):
        assert shift_letter("?", DICT, 3) == "?"

    def test_multi_char_string_is_untouched(self):
        assert shift_letter("ab", DICT, 3) == "ab"

    @pytest.mark.parametrize("offset, expected", [(-1, "z"), (25, "z"), (26, "a"), (27, "b"), (-27, "z")])
    def test_offset_wraps(self, offset, expected):
        assert shift_letter("a", DICT, offset) == expected


class TestShiftText:
    """Explicit alphabet / separator / offset"""

    def test_custom_alphabet_and_separator(self):
        assert shift_text("01|2", "0123", "|", 2) == "23|0"

    def test_negative_offset_matches_complement(self):
        assert shift_text("hello world", offset=-3) == shift_text("hello world", offset=23)

    def test_oversized_offset_matches_reduced(self):
        assert shift_text("hello world", offset=26 * 4 + 5) == shift_text("hello world", offset=5)

    @pytest.mark.parametrize("k", [0, 1, 7, 13, 25, 26, 40, -4])
    def test_inverse_offset_restores_text(self, k):
        text = "the quick brown fox, 1999!"
        inverse = (len(DICT) - k) % len(DICT)
        assert shift_text(shift_text(text, offset=k), offset=inverse) == text

    def test_empty_alphabet_leaves_text(self):
        assert shift_text("x y", "", " ", 1) == "x y"

    def test_repeated_alphabet_agrees_with_shift_letter(self):
        assert shift_text("a", "aba", " ", 1) == shift_letter("a", "aba", 1)

    def test_zero_offset_is_identity(self):
        assert shift_text("anything at all", offset=0) == "anything at all"
