"""Formatting helpers for rendering listing rows."""

from collections.abc import Iterable
from typing import Any


def format_phone_number(phone: int | str | None) -> str:
    """Format a 10-digit number as ``(xxx) xxx-xxxx``; other lengths pass through."""
    if phone is None:
        return "N/A"
    digits = str(phone)
    if len(digits) != 10:
        return digits
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def order_specialties(specialties: Iterable[Any], selected: Iterable[str] = ()) -> list[str]:
    """Selected specialties first, then the rest, each group alphabetical."""
    chosen = set(selected)
    values = [str(value) for value in specialties]
    return sorted(values, key=lambda value: (value not in chosen, value.casefold(), value))


def visible_range(current_page: int, page_size: int, total_count: int) -> tuple[int, int]:
    """1-based (first, last) row numbers shown on a page; (0, 0) when empty."""
    if total_count <= 0:
        return 0, 0
    start = (current_page - 1) * page_size
    end = min(start + page_size, total_count)
    if start >= end:
        return 0, 0
    return start + 1, end
