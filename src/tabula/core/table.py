"""
Immutable tables: construction, properties, and accessors.

A Table pairs one Schema with an ordered tuple of Rows that all share that schema
(structurally). Every operation here follows the same discipline:

1) ``require`` its preconditions on the inputs,
2) build a new Schema and/or new Rows (never touching values reachable from the input),
3) ``ensure`` its postconditions on the new Table, then return it.

Operations
----------
| Operation                              | Result
|----------------------------------------|------------------------------------------
| empty_table()                          | table with empty schema and no rows
| add_rows(t, rs)                        | t's rows followed by rs
| add_column(t, header, values)          | t plus one column of supplied values
| build_column(t, header, compute)       | t plus one column of compute(row) values
| nrows / ncols / header                 | row count, column count, column names
| get_row(t, i)                          | i-th row, bounds checked
| get_value(row, name)                   | value under a column name
| get_column_by_index / _by_name         | column values in row order
| vcat / hcat / values / cross_join /    | NotYetSupported
| left_join                              |

Notes
-----
- ``header`` is derived from the schema on every access.
- ``compute`` in build_column receives the original row and cannot observe the new
  column. An exception raised by compute propagates and no table is produced.
- Sort membership of added values is a postcondition: a value outside the declared
  sort raises PostconditionViolation.

Examples
--------
>>> from tabula.core.schema import Header, Schema, make_row
>>> from tabula.core.table import add_column, add_rows, empty_table, get_row, get_value
>>> t = add_column(empty_table(), Header(column_name="id", sort="i64"), [])
>>> t = add_rows(t, [make_row(t.schema, [1]), make_row(t.schema, [2])])
>>> t2 = add_column(t, Header(column_name="name", sort="str"), ["a", "b"])
>>> t2.header, t.header
(['id', 'name'], ['id'])
>>> get_value(get_row(t2, 0), "name")
'a'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .contracts import ensure, require
from .errors import NotYetSupported, RowIndexError
from .grammar import is_member
from .schema import Cell, Header, Row, Schema

__all__ = [
    "Table",
    # constructors
    "empty_table",
    "add_rows",
    "add_column",
    "build_column",
    # unsupported
    "vcat",
    "hcat",
    "values",
    "cross_join",
    "left_join",
    # properties
    "nrows",
    "ncols",
    "header",
    # accessors
    "get_row",
    "get_value",
    "get_column_by_index",
    "get_column_by_name",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Table:
    """
    Schema plus an ordered collection of schema-conformant rows.

    Attributes:
        schema (Schema): Shape shared by every row.
        rows (tuple[Row, ...]): Rows in insertion order.

    Notes:
        Build tables with the module-level constructors; they enforce the row/schema
        invariant. The dataclass constructor itself does not check it.
    """

    schema: Schema = field(default_factory=Schema)
    rows: tuple[Row, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))

    @property
    def nrows(self) -> int:
        return len(self.rows)

    @property
    def ncols(self) -> int:
        return len(self.schema.headers)

    @property
    def header(self) -> list[str]:
        return [h.column_name for h in self.schema.headers]


# -----------------------------------------------------------------------------
# Constructors
# -----------------------------------------------------------------------------


def empty_table() -> Table:
    """Return a table with an empty schema and no rows."""
    t = Table()

    ensure(t.schema == Schema(), "t.schema == Schema()")
    ensure(t.nrows == 0, "t.nrows == 0")

    return t


def add_rows(table: Table, rows: Sequence[Row]) -> Table:
    """
    Append rows to a table.

    Args:
        table (Table): Source table; left unchanged.
        rows (Sequence[Row]): Rows whose schema equals table.schema.

    Returns:
        Table: Same schema; table.rows followed by rows, order preserved.

    Raises:
        PreconditionViolation: If any row's schema differs from table.schema.
    """
    rows = tuple(rows)
    require(all(r.schema == table.schema for r in rows), "all(r.schema == table.schema for r in rows)")

    new_table = Table(schema=table.schema, rows=table.rows + rows)

    ensure(new_table.schema == table.schema, "new_table.schema == table.schema")
    ensure(new_table.nrows == table.nrows + len(rows), "new_table.nrows == table.nrows + len(rows)")

    logger.debug("add_rows: %d + %d rows", table.nrows, len(rows))
    return new_table


def add_column(table: Table, column: Header, values: Sequence[Any]) -> Table:
    """
    Add a column of supplied values.

    Args:
        table (Table): Source table; left unchanged.
        column (Header): New column name and sort; the name must not already exist.
        values (Sequence[Any]): One value per existing row, in row order.

    Returns:
        Table: New schema (old headers + column) and fresh rows carrying the new cell.

    Raises:
        PreconditionViolation: If the name exists or len(values) != table.nrows.
        PostconditionViolation: If a value is not a member of column.sort.
    """
    values = list(values)
    require(column.column_name not in table.header, "column.column_name not in table.header")
    require(len(values) == table.nrows, "len(values) == table.nrows")

    new_schema = table.schema.append(column)
    new_rows = tuple(_extend_row(row, new_schema, column, v) for row, v in zip(table.rows, values))
    new_table = Table(schema=new_schema, rows=new_rows)

    _ensure_column_appended(table, new_table, column)
    ensure(
        all(is_member(v, new_table.schema[column.column_name].sort) for v in values),
        "all(is_member(v, column.sort) for v in values)",
    )
    ensure(new_table.nrows == table.nrows, "new_table.nrows == table.nrows")

    logger.debug("add_column: %r (%s) over %d rows", column.column_name, column.sort.value, table.nrows)
    return new_table


def build_column(table: Table, column: Header, compute: Callable[[Row], Any]) -> Table:
    """
    Add a column whose values are computed from each row.

    Args:
        table (Table): Source table; left unchanged.
        column (Header): New column name and sort; the name must not already exist.
        compute (Callable[[Row], Any]): Called once per row, in order, with the original row.

    Returns:
        Table: New schema (old headers + column) and fresh rows carrying compute(row).

    Raises:
        PreconditionViolation: If the name exists.
        PostconditionViolation: If a computed value is not a member of column.sort.
    """
    require(column.column_name not in table.header, "column.column_name not in table.header")

    new_schema = table.schema.append(column)
    new_rows = tuple(_extend_row(row, new_schema, column, compute(row)) for row in table.rows)
    new_table = Table(schema=new_schema, rows=new_rows)

    _ensure_column_appended(table, new_table, column)
    ensure(
        all(
            is_member(get_value(r, column.column_name), new_table.schema[column.column_name].sort)
            for r in new_table.rows
        ),
        "all(is_member(get_value(r, column.column_name), column.sort) for r in new_table.rows)",
    )
    ensure(new_table.nrows == table.nrows, "new_table.nrows == table.nrows")

    logger.debug("build_column: %r (%s) over %d rows", column.column_name, column.sort.value, table.nrows)
    return new_table


def _extend_row(row: Row, schema: Schema, column: Header, value: Any) -> Row:
    return Row(schema, row.cells + (Cell(column_name=column.column_name, value=value),))


def _ensure_column_appended(table: Table, new_table: Table, column: Header) -> None:
    ensure(
        new_table.header == table.header + [column.column_name],
        "new_table.header == table.header + [column.column_name]",
    )
    ensure(
        all(table.schema[c] == new_table.schema[c] for c in table.header),
        "all(table.schema[c] == new_table.schema[c] for c in table.header)",
    )


# Relational operators without defined semantics. They raise NotYetSupported rather
# than a contract violation.


def vcat(table1: Table, table2: Table) -> Table:
    raise NotYetSupported("vcat")


def hcat(table1: Table, table2: Table) -> Table:
    raise NotYetSupported("hcat")


def values(rows: Sequence[Row]) -> Table:
    raise NotYetSupported("values")


def cross_join(table1: Table, table2: Table) -> Table:
    raise NotYetSupported("cross_join")


def left_join(table1: Table, table2: Table, columns: Sequence[str]) -> Table:
    raise NotYetSupported("left_join")


# -----------------------------------------------------------------------------
# Properties
# -----------------------------------------------------------------------------


def nrows(table: Table) -> int:
    return table.nrows


def ncols(table: Table) -> int:
    return table.ncols


def header(table: Table) -> list[str]:
    return table.header


# -----------------------------------------------------------------------------
# Accessors
# -----------------------------------------------------------------------------


def _is_index(n: Any) -> bool:
    return isinstance(n, int) and not isinstance(n, bool)


def get_row(table: Table, index: int) -> Row:
    """
    Return the row at a position.

    Raises:
        PreconditionViolation: If index is not an int.
        RowIndexError: If index < 0 or index >= table.nrows.
    """
    require(_is_index(index), "isinstance(index, int)")
    require(index >= 0, "index >= 0", kind=RowIndexError)
    require(index < table.nrows, "index < table.nrows", kind=RowIndexError)

    return table.rows[index]


def get_value(row: Row, column_name: str) -> Any:
    """
    Return the value stored under a column name.

    Args:
        row (Row): Row to read.
        column_name (str): Column present in row.schema.

    Returns:
        Any: The cell value, a member of the column's sort.

    Raises:
        PreconditionViolation: If column_name is not a str or not in row.schema.
        PostconditionViolation: If the row is corrupted: zero or several cells or headers
            under column_name, or a value outside the header's sort.
    """
    require(isinstance(column_name, str), "isinstance(column_name, str)")
    require(column_name in row.schema.column_names, "column_name in row.schema.column_names")

    cells = [c for c in row.cells if c.column_name == column_name]
    ensure(len(cells) == 1, "len(cells) == 1")
    value = cells[0].value

    headers = [h for h in row.schema.headers if h.column_name == column_name]
    ensure(len(headers) == 1, "len(headers) == 1")
    ensure(is_member(value, headers[0].sort), "is_member(value, header.sort)")

    return value


def get_column_by_index(table: Table, index: int) -> list[Any]:
    """
    Return the values of the column at a position, in row order.

    Raises:
        PreconditionViolation: If index is not an int or outside [0, table.ncols).
        PostconditionViolation: If a row has no cell at index or its value is outside
            the column's sort.
    """
    require(_is_index(index), "isinstance(index, int)")
    require(0 <= index < table.ncols, "0 <= index < table.ncols")

    out: list[Any] = []
    for r in table.rows:
        ensure(index < len(r.cells), "index < len(row.cells)")
        ensure(index < len(r.schema.headers), "index < len(row.schema.headers)")
        value = r.cells[index].value
        ensure(is_member(value, r.schema.headers[index].sort), "is_member(value, column.sort)")
        out.append(value)
    return out


def get_column_by_name(table: Table, column_name: str) -> list[Any]:
    """Return the values of a named column, in row order."""
    require(isinstance(column_name, str), "isinstance(column_name, str)")
    require(column_name in table.header, "column_name in table.header")

    out: list[Any] = []
    for r in table.rows:
        value = get_value(r, column_name)
        headers = [h for h in r.schema.headers if h.column_name == column_name]
        ensure(len(headers) == 1, "len(headers) == 1")
        ensure(is_member(value, headers[0].sort), "is_member(value, column.sort)")
        out.append(value)
    return out
