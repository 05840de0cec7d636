"""Advocate search: predicates, ordering and query services."""
