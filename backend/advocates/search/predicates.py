"""Predicate construction for advocate listing queries.

Each clause builder returns ``None`` when its trigger condition does not hold,
so callers can feed every builder unconditionally and let
:class:`AdvocatePredicateBuilder` drop the inactive ones.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import String, and_, cast, or_, true
from sqlalchemy.sql.elements import ColumnElement

from advocates.db.types import json_array_contains
from advocates.models.advocate import Advocate
from advocates.schemas.advocate import AdvocateQuery

LIKE_ESCAPE = "/"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def text_search_clause(search: str) -> ColumnElement[bool] | None:
    """Case-insensitive substring match over name, city, degree and specialties."""
    if not search:
        return None
    pattern = f"%{escape_like(search)}%"
    return or_(
        Advocate.first_name.ilike(pattern, escape=LIKE_ESCAPE),
        Advocate.last_name.ilike(pattern, escape=LIKE_ESCAPE),
        Advocate.city.ilike(pattern, escape=LIKE_ESCAPE),
        Advocate.degree.ilike(pattern, escape=LIKE_ESCAPE),
        cast(Advocate.specialties, String).ilike(pattern, escape=LIKE_ESCAPE),
    )


def degree_clause(degrees: Sequence[str]) -> ColumnElement[bool] | None:
    """Degree must be one of the selected values."""
    if not degrees:
        return None
    return Advocate.degree.in_(list(degrees))


def specialty_clause(specialties: Sequence[str]) -> ColumnElement[bool] | None:
    """Specialties must contain at least one of the selected values."""
    if not specialties:
        return None
    return or_(*(json_array_contains(Advocate.specialties, value) for value in specialties))


class AdvocatePredicateBuilder:
    """Accumulates active clauses and folds them with AND."""

    def __init__(self) -> None:
        self._clauses: list[ColumnElement[bool]] = []

    def add(self, clause: ColumnElement[bool] | None) -> AdvocatePredicateBuilder:
        if clause is not None:
            self._clauses.append(clause)
        return self

    @property
    def clauses(self) -> list[ColumnElement[bool]]:
        return list(self._clauses)

    def build(self) -> ColumnElement[bool]:
        if not self._clauses:
            return true()
        if len(self._clauses) == 1:
            return self._clauses[0]
        return and_(*self._clauses)


def build_advocate_predicate(query: AdvocateQuery) -> ColumnElement[bool]:
    """Combine the text, degree and specialty clauses for one query."""
    return (
        AdvocatePredicateBuilder()
        .add(text_search_clause(query.search))
        .add(degree_clause(query.degrees))
        .add(specialty_clause(query.specialties))
        .build()
    )
