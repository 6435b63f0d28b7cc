"""
Core package aggregator for tabula (sorts, contracts, schemas, tables).

## Contracts (single source of truth)
- Grammar — the closed Sort enum and the membership predicate.
- Contracts — require/ensure checks with static descriptions.
- Schema — Header/Cell models, Schema/Row values, checked row construction.
- Table — immutable tables, transformations, and accessors.

## Notes
- Zero-IO policy: stdlib + pydantic only.
- Every transformation returns a new Table; nothing reachable from an existing Table
  is mutated.
- PreconditionViolation means caller error, PostconditionViolation means an internal
  defect or a corrupted row, NotYetSupported means a declared but missing operation.

## Downstream usage
- tabula.frames — converts tables to and from polars DataFrames using `grammar` sorts
  and the `table` constructors.

## Examples
```python
from tabula.core import Header, add_column, add_rows, empty_table, make_row, get_column_by_name

t = add_column(empty_table(), Header(column_name="id", sort="i64"), [])
t = add_rows(t, [make_row(t.schema, [1]), make_row(t.schema, [2])])
t = add_column(t, Header(column_name="name", sort="str"), ["a", "b"])
get_column_by_name(t, "name")  # ['a', 'b']
```
"""

from .contracts import ensure, require
from .errors import (
    ContractViolation,
    GrammarError,
    NotYetSupported,
    PostconditionViolation,
    PreconditionViolation,
    RowIndexError,
    SchemaError,
)
from .grammar import Sort, is_member, sort_from_value, sort_value
from .schema import Cell, Header, Row, Schema, make_row
from .table import (
    Table,
    add_column,
    add_rows,
    build_column,
    cross_join,
    empty_table,
    get_column_by_index,
    get_column_by_name,
    get_row,
    get_value,
    hcat,
    header,
    left_join,
    ncols,
    nrows,
    values,
    vcat,
)

__all__ = [
    "require",
    "ensure",
    "ContractViolation",
    "PreconditionViolation",
    "PostconditionViolation",
    "RowIndexError",
    "NotYetSupported",
    "SchemaError",
    "GrammarError",
    "Sort",
    "is_member",
    "sort_value",
    "sort_from_value",
    "Header",
    "Cell",
    "Schema",
    "Row",
    "make_row",
    "Table",
    "empty_table",
    "add_rows",
    "add_column",
    "build_column",
    "vcat",
    "hcat",
    "values",
    "cross_join",
    "left_join",
    "nrows",
    "ncols",
    "header",
    "get_row",
    "get_value",
    "get_column_by_index",
    "get_column_by_name",
]
