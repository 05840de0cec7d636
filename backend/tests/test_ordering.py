"""Tests for listing sort order construction."""

import pytest
from sqlalchemy.dialects import sqlite

from advocates.schemas.advocate import SortDirection, SortField
from advocates.search.ordering import build_order_by


def _rendered(order_by) -> list[str]:
    return [str(expr.compile(dialect=sqlite.dialect())) for expr in order_by]


TIEBREAK = ["advocates.last_name ASC", "advocates.first_name ASC", "advocates.id ASC"]


class TestBuildOrderBy:
    """ORDER BY lists are fully determined."""

    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    def test_no_field_is_name_ascending(self, direction):
        assert _rendered(build_order_by(None, direction)) == TIEBREAK

    def test_name_desc_flips_both_name_columns(self):
        assert _rendered(build_order_by(SortField.NAME, SortDirection.DESC)) == [
            "advocates.last_name DESC",
            "advocates.first_name DESC",
            "advocates.id ASC",
        ]

    def test_name_asc(self):
        assert _rendered(build_order_by(SortField.NAME, SortDirection.ASC)) == TIEBREAK

    @pytest.mark.parametrize(
        "field,column",
        [
            (SortField.DEGREE, "advocates.degree"),
            (SortField.CITY, "advocates.city"),
            (SortField.EXPERIENCE, "advocates.years_of_experience"),
        ],
    )
    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    def test_primary_column_then_tiebreak(self, field, column, direction):
        rendered = _rendered(build_order_by(field, direction))

        assert rendered == [f"{column} {direction.value.upper()}", *TIEBREAK]

    def test_id_is_always_last(self):
        for field in [None, *SortField]:
            for direction in SortDirection:
                assert _rendered(build_order_by(field, direction))[-1] == "advocates.id ASC"
