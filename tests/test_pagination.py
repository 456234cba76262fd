"""
Unit tests for the page-number window in core.data.
"""

from core.data import page_number_window


class TestPageNumberWindow:
    """Test cases for page navigation buttons."""

    def test_few_pages_show_all(self):
        assert page_number_window(5, 2) == [0, 1, 2, 3, 4]

    def test_gaps_on_both_sides(self):
        assert page_number_window(20, 10) == [0, None, 9, 10, 11, None, 19]

    def test_start_of_range(self):
        assert page_number_window(20, 0) == [0, 1, 2, 3, None, 19]

    def test_end_of_range(self):
        assert page_number_window(20, 19) == [0, None, 16, 17, 18, 19]

    def test_wider_radius(self):
        assert page_number_window(20, 10, radius=2) == [0, None, 8, 9, 10, 11, 12, None, 19]
