"""
In-memory conversion between tabula Tables and polars DataFrames.

Notes
- Nothing here reads or writes files; frames are built from and into memory.
- Tables are read through the core accessors, so a corrupted table fails with the
  same postcondition it would raise anywhere else.
- Frames become tables through make_row and add_rows, so every contract check runs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import polars as pl

from tabula.core.grammar import Sort
from tabula.core.schema import Schema, make_row
from tabula.core.table import Table, add_rows, get_column_by_index

from .config import FrameSettings
from .errors import FrameSchemaError
from .validate import dtype_for_sort, infer_schema, validate_frame_against_schema

__all__ = ["to_frame", "from_frame", "preview"]

logger = logging.getLogger(__name__)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def to_frame(table: Table) -> pl.DataFrame:
    """
    Materialize a table as a DataFrame.

    Columns keep schema order. Scalar sorts get explicit dtypes, ANY becomes pl.Object,
    STRUCT and LIST dtypes are inferred by polars; frozen cell values are handed over as
    plain lists and dicts.

    Raises:
        FrameSchemaError: If a column holds values polars cannot represent faithfully:
            integers outside i64, structs with non-str keys or differing key sets, or
            lists polars rejects (e.g. mixed element types).
    """
    series: list[pl.Series] = []
    for i, h in enumerate(table.schema.headers):
        col = [_thaw(v) for v in get_column_by_index(table, i)]
        if h.sort is Sort.INTEGER:
            _check_i64(h.column_name, col)
        elif h.sort is Sort.STRUCT:
            _check_struct_keys(h.column_name, col)
        try:
            series.append(pl.Series(h.column_name, col, dtype=dtype_for_sort(h.sort)))
        except (TypeError, ValueError, OverflowError, pl.exceptions.PolarsError) as exc:
            raise FrameSchemaError(f"column {h.column_name!r} cannot be held by polars: {exc}") from exc
    return pl.DataFrame(series)


def _thaw(value: Any) -> Any:
    # frozen cell values back to the list/dict shapes polars builds from
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    return value


def _check_i64(column_name: str, col: list[Any]) -> None:
    out_of_range = [v for v in col if not _I64_MIN <= v <= _I64_MAX]
    if out_of_range:
        raise FrameSchemaError(f"column {column_name!r} has values outside i64: {out_of_range[:3]!r}")


def _check_struct_keys(column_name: str, col: list[dict[Any, Any]]) -> None:
    for v in col:
        bad = [k for k in v if not isinstance(k, str)]
        if bad:
            raise FrameSchemaError(f"column {column_name!r} has non-str struct keys: {bad!r}")
    # missing struct fields read back as nulls
    key_sets = {frozenset(v) for v in col}
    if len(key_sets) > 1:
        raise FrameSchemaError(f"column {column_name!r} has structs with differing key sets")


def from_frame(
    df: pl.DataFrame,
    schema: Schema | None = None,
    *,
    settings: FrameSettings | None = None,
) -> Table:
    """
    Build a table from a DataFrame.

    Args:
        df (pl.DataFrame): Source frame.
        schema (Schema | None): Target schema. When None, it is inferred from df dtypes.
        settings (FrameSettings | None): Conversion settings; FrameSettings.load() when None.

    Returns:
        Table: Rows in frame order over schema.

    Raises:
        FrameSchemaError: If df does not fit schema (see validate_frame_against_schema).
        PreconditionViolation: If a value is not a member of its column's sort.
    """
    settings = settings or FrameSettings.load()
    if schema is None:
        schema = infer_schema(df, settings)
        validate_frame_against_schema(df, schema, strict=True)
    else:
        validate_frame_against_schema(df, schema, strict=settings.strict_schema)

    rows = [make_row(schema, r) for r in df.select(schema.column_names).rows()] if len(schema) else []
    logger.debug("from_frame: %d rows x %d columns", len(rows), len(schema))
    return add_rows(Table(schema=schema), rows)


def preview(table: Table, settings: FrameSettings | None = None) -> pl.DataFrame:
    """First ``settings.preview_rows`` rows of a table as a DataFrame."""
    settings = settings or FrameSettings.load()
    return to_frame(Table(schema=table.schema, rows=table.rows[: settings.preview_rows]))
