"""
Helpers for reading spreadsheet rows.

A row is a mapping from column header to cell text. Cells that are missing,
None, or whitespace-only are treated as empty.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

Row = Mapping[str, str | None]


def get_value(row: Row, column: str) -> str | None:
    """Return the stripped cell value, or None when the cell is empty."""
    value = row.get(column)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def has_value(row: Row, column: str) -> bool:
    return get_value(row, column) is not None


def get_missing_fields(row: Row, required: Sequence[str]) -> list[str]:
    """Columns from `required` that are empty on this row, in declared order."""
    return [column for column in required if not has_value(row, column)]


def get_required_empty_fields(row: Row, required_empty: Sequence[str]) -> list[str]:
    """Columns from `required_empty` that carry a value on this row (they should not)."""
    return [column for column in required_empty if has_value(row, column)]


def split_multi_value(value: str | None, delimiter: str) -> tuple[str, ...]:
    """
    Split a multi-value cell on `delimiter`.

    Blank entries are dropped and duplicates removed, keeping first-seen order.
    """
    if not value:
        return ()
    if not delimiter:
        raise ValueError("Delimiter for multi-value cells must not be empty.")
    seen: dict[str, None] = {}
    for part in value.split(delimiter):
        item = part.strip()
        if item:
            seen.setdefault(item, None)
    return tuple(seen)
