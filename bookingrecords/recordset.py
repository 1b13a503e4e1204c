"""Fill record types from the result sets of a DB-API cursor."""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

from bookingrecords.models import column_map

R = TypeVar("R")
T = TypeVar("T")


def _column_names(cursor: Any) -> list[str]:
    description = cursor.description
    if description is None:
        return []
    return [column[0] for column in description]


def _advance(cursor: Any) -> bool:
    """Move the cursor to its next result set; return False when there is none."""
    nextset = getattr(cursor, "nextset", None)
    if nextset is None:
        return False
    return bool(nextset())


def scan_recordset(cursor: Any, record_type: type[R]) -> list[R]:
    """Read every row of the cursor's current result set into ``record_type``.

    Columns are matched to fields by their ``db`` names, ignoring case.
    Columns with no matching field are read and discarded; fields with no
    matching column stay ``None``.
    """
    mapping = column_map(record_type)
    columns = _column_names(cursor)
    if not columns:
        return []
    targets = [mapping.get(name.lower()) for name in columns]

    records: list[R] = []
    for row in cursor.fetchall():
        values = {
            attribute: value
            for attribute, value in zip(targets, row)
            if attribute is not None
        }
        records.append(record_type(**values))
    return records


def scan_multiple_recordsets(cursor: Any, result_type: type[T]) -> T:
    """Fill each recordset field of ``result_type`` from successive result sets.

    The first field takes the current result set, each following field the
    next one. Scanning stops when the cursor has no more result sets, leaving
    the remaining lists empty. Fields that do not declare a row type under
    ``record`` in their metadata still consume a result set but are left as
    they are.
    """
    if not (isinstance(result_type, type) and dataclasses.is_dataclass(result_type)):
        raise TypeError(f"{result_type!r} is not a result type")

    result = result_type()
    for index, fld in enumerate(dataclasses.fields(result_type)):
        if index > 0 and not _advance(cursor):
            break
        record_type = fld.metadata.get("record")
        if record_type is not None:
            getattr(result, fld.name).extend(scan_recordset(cursor, record_type))
    return result