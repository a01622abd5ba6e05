"""Tests for short name generation."""

import re

import pytest

from mimicss.names import ALL_CHARS, FOLLOWING_ONLY_CHARS, LEADING_CHARS, NameGenerator


# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------


class TestAlphabets:
    def test_leading_alphabet_size(self):
        assert len(LEADING_CHARS) == 53
        assert len(set(LEADING_CHARS)) == 53

    def test_all_chars_extends_leading(self):
        assert len(ALL_CHARS) == 64
        assert ALL_CHARS[:53] == LEADING_CHARS
        assert ALL_CHARS[53:] == FOLLOWING_ONLY_CHARS

    def test_no_digit_or_hyphen_leads(self):
        assert not set("0123456789-") & set(LEADING_CHARS)


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_first_names_follow_base_alphabet(self):
        gen = NameGenerator()
        assert gen.generate(0) == "a"
        assert gen.generate(25) == "z"
        assert gen.generate(26) == "A"
        assert gen.generate(52) == "_"

    def test_two_character_names(self):
        gen = NameGenerator()
        assert gen.generate(53) == "aa"
        assert gen.generate(54) == "ba"
        assert gen.generate(106) == "ab"

    def test_last_two_character_name(self):
        gen = NameGenerator()
        last = 53 + 53 * 64 - 1
        assert gen.generate(last) == "_-"
        assert len(gen.generate(last + 1)) == 3

    def test_names_are_unique(self):
        gen = NameGenerator()
        names = [gen.generate(i) for i in range(5000)]
        assert len(set(names)) == len(names)

    def test_names_are_valid_identifiers(self):
        gen = NameGenerator()
        pattern = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")
        for i in range(0, 20000, 7):
            assert pattern.match(gen.generate(i))

    def test_lengths_never_shrink(self):
        gen = NameGenerator()
        lengths = [len(gen.generate(i)) for i in range(4000)]
        assert lengths == sorted(lengths)

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            NameGenerator().generate(-1)


# ---------------------------------------------------------------------------
# Frequency ordering
# ---------------------------------------------------------------------------


class TestFrequency:
    def test_record_usage_counts_known_characters(self):
        gen = NameGenerator()
        gen.record_usage("flex-1")
        assert gen.frequency("f") == 1
        assert gen.frequency("-") == 1
        assert gen.frequency("1") == 1
        assert gen.frequency(":") == 0

    def test_record_usage_weight(self):
        gen = NameGenerator()
        gen.record_usage("aa", weight=3)
        assert gen.frequency("a") == 6

    def test_sort_puts_frequent_characters_first(self):
        gen = NameGenerator()
        gen.record_usage("xxx")
        gen.record_usage("yy")
        gen.sort_by_frequency()
        assert gen.leading_chars[:2] == ("x", "y")
        assert gen.generate(0) == "x"
        assert gen.generate(1) == "y"

    def test_ties_keep_base_order(self):
        gen = NameGenerator()
        gen.record_usage("flex")
        gen.sort_by_frequency()
        assert gen.leading_chars[:4] == ("e", "f", "l", "x")
        assert gen.leading_chars[4:] == tuple(c for c in LEADING_CHARS if c not in "eflx")

    def test_digits_only_promoted_in_all_chars(self):
        gen = NameGenerator()
        gen.record_usage("999")
        gen.sort_by_frequency()
        assert gen.all_chars[0] == "9"
        assert "9" not in gen.leading_chars
        assert gen.generate(0) == "a"
        assert gen.generate(53) == "a9"

    def test_reset_restores_base_counts(self):
        gen = NameGenerator()
        gen.record_usage("zzz")
        gen.reset()
        assert gen.frequency("z") == 0
        gen.sort_by_frequency()
        assert gen.leading_chars == LEADING_CHARS
