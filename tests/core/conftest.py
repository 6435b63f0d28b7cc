from __future__ import annotations

import pytest

from tabula.core.grammar import Sort
from tabula.core.schema import Header, make_row
from tabula.core.table import Table, add_column, add_rows, empty_table


@pytest.fixture
def ids_table() -> Table:
    """Table with header ["id"] (i64) and rows [{id: 1}, {id: 2}]."""
    t = add_column(empty_table(), Header(column_name="id", sort=Sort.INTEGER), [])
    return add_rows(t, [make_row(t.schema, [1]), make_row(t.schema, [2])])
