"""Tests for listing presentation helpers."""

import pytest

from advocates.client.presentation import format_phone_number, order_specialties, visible_range


class TestFormatPhoneNumber:
    @pytest.mark.parametrize(
        "phone,expected",
        [
            (5559876543, "(555) 987-6543"),
            ("5551234567", "(555) 123-4567"),
            (None, "N/A"),
            (12345, "12345"),
        ],
    )
    def test_format(self, phone, expected):
        assert format_phone_number(phone) == expected


class TestOrderSpecialties:
    def test_alphabetical_without_selection(self):
        assert order_specialties(["pediatrics", "Bipolar", "LGBTQ"]) == ["Bipolar", "LGBTQ", "pediatrics"]

    def test_selected_first(self):
        result = order_specialties(
            ["Bipolar", "LGBTQ", "Chronic pain", "Pediatrics"], selected=["Pediatrics", "LGBTQ"]
        )

        assert result == ["LGBTQ", "Pediatrics", "Bipolar", "Chronic pain"]


class TestVisibleRange:
    @pytest.mark.parametrize(
        "page,size,total,expected",
        [
            (1, 10, 25, (1, 10)),
            (3, 10, 25, (21, 25)),
            (4, 10, 25, (0, 0)),
            (1, 10, 0, (0, 0)),
        ],
    )
    def test_range(self, page, size, total, expected):
        assert visible_range(page, size, total) == expected
