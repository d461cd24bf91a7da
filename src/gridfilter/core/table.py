"""
In-memory cell provider.

RowTable is the reference CellProvider: a list of row records (mappings)
plus the column definitions that describe them. Cells are built on demand
from the record values; a record may carry a pre-rendered display form for
a column under ``RowTable.HTML_KEY``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from gridfilter.core.types import Cell, ColumnCapability, ColumnDefinition
from gridfilter.exceptions import ColumnNotFoundError

logger = logging.getLogger(__name__)


def _as_content(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


class RowTable:
    """
    A grid held in memory as row records.

    Args:
        records: Row records, indexed by position (the row identifier).
        columns: Column definitions. Column ids are the record keys.

    Usage:
        table = RowTable.from_records([{"age": "25", "name": "Tom"}])
        cell = table.get_cell(0, "name")
    """

    HTML_KEY = "__html__"

    def __init__(self, records: Sequence[Mapping[str, Any]], columns: Sequence[ColumnDefinition]) -> None:
        self._records = list(records)
        self._columns = {column.id: column for column in columns}

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        capabilities: Mapping[str, ColumnCapability] | None = None,
    ) -> "RowTable":
        """
        Build a table whose columns are the union of the records' keys.

        Column order follows first appearance across records.
        """
        records = list(records)
        capabilities = capabilities or {}
        column_ids: list[str] = []
        for record in records:
            for key in record:
                if key != cls.HTML_KEY and key not in column_ids:
                    column_ids.append(key)

        columns = []
        for column_id in column_ids:
            if column_id in capabilities:
                columns.append(ColumnDefinition(column_id, capability=capabilities[column_id]))
            else:
                columns.append(ColumnDefinition(column_id))

        logger.debug(f"Built table with {len(records)} rows and {len(columns)} columns")
        return cls(records, columns)

    @property
    def columns(self) -> list[ColumnDefinition]:
        return list(self._columns.values())

    def column(self, column_id: str) -> ColumnDefinition:
        try:
            return self._columns[column_id]
        except KeyError:
            raise ColumnNotFoundError(column_id, available=self.column_ids()) from None

    def row_indices(self) -> list[int]:
        return list(range(len(self._records)))

    def column_ids(self) -> list[str]:
        return list(self._columns)

    def get_row(self, row_index: int) -> Mapping[str, Any]:
        return self._records[row_index]

    def get_cell(self, row_index: int, column_id: str) -> Cell:
        column = self.column(column_id)
        record = self._records[row_index]
        rendered = record.get(self.HTML_KEY) or {}
        return Cell(
            content=_as_content(record.get(column_id)),
            row_index=row_index,
            column=column,
            html=rendered.get(column_id),
        )

    def __len__(self) -> int:
        return len(self._records)
