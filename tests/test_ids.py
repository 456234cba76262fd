"""
Unit tests for core.ids.
"""

from core.ids import suggest_next_id


class TestSuggestNextId:
    """Test cases for id suggestions."""

    def test_one_past_highest(self):
        assert suggest_next_id("D", ["D001", "D005"]) == "D006"

    def test_empty_list(self):
        assert suggest_next_id("RH", []) == "RH001"

    def test_gaps_are_not_refilled(self):
        assert suggest_next_id("RH", ["RH001", "RH002", "RH004"]) == "RH005"

    def test_other_prefixes_ignored(self):
        assert suggest_next_id("I", ["I001", "ID009", "IV003"]) == "I002"

    def test_non_numeric_ids_ignored(self):
        assert suggest_next_id("E", ["E001", "admin", ""]) == "E002"

    def test_width_grows_past_padding(self):
        assert suggest_next_id("M", ["M999"]) == "M1000"
