"""Unit tests for currency formatting and pagination helpers."""
import pytest

from invoice_dashboard.utils.formatting import format_currency, generate_pagination


class TestFormatCurrency:

    @pytest.mark.parametrize("cents, expected", [
        (0, "$0.00"),
        (5, "$0.05"),
        (15795, "$157.95"),
        (123456, "$1,234.56"),
        (100000000, "$1,000,000.00"),
        (-2500, "-$25.00"),
    ])
    def test_cents_to_dollars(self, cents, expected):
        assert format_currency(cents) == expected

    def test_numeric_strings_are_accepted(self):
        """Count endpoints may return sums as strings."""
        assert format_currency("44800") == "$448.00"

    @pytest.mark.parametrize("empty", [None, ""])
    def test_missing_amount_is_zero(self, empty):
        assert format_currency(empty) == "$0.00"


class TestGeneratePagination:

    def test_all_pages_when_seven_or_fewer(self):
        assert generate_pagination(1, 7) == [1, 2, 3, 4, 5, 6, 7]

    def test_no_pages(self):
        assert generate_pagination(1, 0) == []

    def test_current_page_near_start(self):
        assert generate_pagination(2, 10) == [1, 2, 3, "...", 9, 10]

    def test_current_page_near_end(self):
        assert generate_pagination(9, 10) == [1, 2, "...", 8, 9, 10]

    def test_current_page_in_the_middle(self):
        assert generate_pagination(5, 10) == [1, "...", 4, 5, 6, "...", 10]
