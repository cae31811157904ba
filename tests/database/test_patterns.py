"""Tests for LIKE pattern masking and matching."""

from dbmeta.database.patterns import like_to_regex, mask_pattern, matches_pattern


class TestMaskPattern:
    def test_underscore_is_escaped(self):
        assert mask_pattern("a_b") == "a\\_b"

    def test_every_underscore_is_escaped(self):
        assert mask_pattern("TEST_TABLE_1") == "TEST\\_TABLE\\_1"

    def test_percent_is_untouched(self):
        assert mask_pattern("a%b") == "a%b"

    def test_none_stays_none(self):
        assert mask_pattern(None) is None

    def test_empty_string(self):
        assert mask_pattern("") == ""


class TestMatchesPattern:
    def test_none_pattern_matches_everything(self):
        assert matches_pattern("anything", None)
        assert matches_pattern(None, None)

    def test_none_value_never_matches_a_pattern(self):
        assert not matches_pattern(None, "%")

    def test_percent_matches_any_run(self):
        assert matches_pattern("TEST_TABLE_1", "TEST%")
        assert matches_pattern("TEST", "TEST%")
        assert not matches_pattern("XTEST", "TEST%")

    def test_underscore_matches_one_character(self):
        assert matches_pattern("TESTXTABLE", "TEST_TABLE")
        assert not matches_pattern("TESTTABLE", "TEST_TABLE")

    def test_masked_underscore_is_literal(self):
        masked = mask_pattern("TEST_TABLE")
        assert matches_pattern("TEST_TABLE", masked)
        assert not matches_pattern("TESTXTABLE", masked)

    def test_match_is_case_sensitive(self):
        assert not matches_pattern("test_table", "TEST%")

    def test_regex_characters_are_literal(self):
        assert matches_pattern("a.b", "a.b")
        assert not matches_pattern("axb", "a.b")
        assert matches_pattern("price($)", "price($)")

    def test_trailing_escape_is_literal(self):
        assert like_to_regex("ab\\").fullmatch("ab\\")
