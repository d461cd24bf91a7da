"""Cell and provider factories shared by the predicate tests."""

from gridfilter.core.predicates import CellEvaluator
from gridfilter.core.types import Cell, ColumnDefinition


def make_cells(values, column=None, html=None):
    """Build one cell per value with row indices 0..n-1."""
    column = column or ColumnDefinition("col")
    html = html or {}
    return [
        Cell(content=value, row_index=i, column=column, html=html.get(i))
        for i, value in enumerate(values)
    ]


class StubProvider:
    """Minimal CellProvider over a list of cells in one column."""

    def __init__(self, cells, rows=None):
        self._cells = {cell.row_index: cell for cell in cells}
        self._rows = rows or {cell.row_index: {"col": cell.content} for cell in cells}

    def row_indices(self):
        return sorted(self._cells)

    def column_ids(self):
        return ["col"]

    def get_cell(self, row_index, column_id):
        return self._cells[row_index]

    def get_row(self, row_index):
        return self._rows[row_index]


def make_evaluator(cells, **kwargs):
    return CellEvaluator(StubProvider(cells), **kwargs)
