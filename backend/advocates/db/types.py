"""Dialect-aware column types and SQL constructs.

PostgreSQL is the production store; SQLite (aiosqlite) backs local runs and
tests. Both are supported through the constructs below.
"""

from typing import Any

from sqlalchemy import Boolean, String, literal
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.compiler import SQLCompiler
from sqlalchemy.sql.functions import FunctionElement
from sqlalchemy.types import JSON, TypeDecorator


class JSONType(TypeDecorator[Any]):
    """Uses JSONB on PostgreSQL and standard JSON on other dialects (like SQLite)."""

    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect: Any) -> Any:
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(JSON())


class json_array_contains(FunctionElement):  # noqa: N801
    """True when a JSON array column contains the given scalar element."""

    type = Boolean()
    inherit_cache = True
    name = "json_array_contains"

    def __init__(self, column: Any, element: str, **kwargs: Any):
        super().__init__(column, literal(element, String()), **kwargs)


@compiles(json_array_contains)
def _json_array_contains_default(element: json_array_contains, compiler: SQLCompiler, **kw: Any) -> str:
    """PostgreSQL: ``column @> jsonb_build_array(value)``."""
    column, value = list(element.clauses)
    return (
        f"{compiler.process(column, **kw)} @> "
        f"jsonb_build_array(CAST({compiler.process(value, **kw)} AS TEXT))"
    )


@compiles(json_array_contains, "sqlite")
def _json_array_contains_sqlite(element: json_array_contains, compiler: SQLCompiler, **kw: Any) -> str:
    """SQLite has no containment operator; probe the array with json_each."""
    column, value = list(element.clauses)
    return (
        f"EXISTS (SELECT 1 FROM json_each({compiler.process(column, **kw)}) "
        f"WHERE json_each.value = {compiler.process(value, **kw)})"
    )
