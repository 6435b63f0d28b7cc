"""
Schema validation utilities for tabula.frames.

Purpose
- Map polars dtypes to tabula Sorts and back.
- Validate Polars DataFrames against tabula Schemas before rows are built.

Checks performed
- Every schema column is present.
- When strict=True: no columns outside the schema.
- Dtype compatibility per Sort:
  - INTEGER accepts any polars integer dtype, FLOAT any float dtype.
  - STRING accepts Utf8, BOOLEAN accepts Boolean.
  - STRUCT accepts pl.Struct or pl.Object, LIST accepts pl.List.
  - ANY accepts every dtype.
- No nulls in columns whose sort is not ANY.

Notes
- Value-level sort membership is enforced again by tabula.core.schema.make_row.
"""

from __future__ import annotations

import polars as pl

from tabula.core.grammar import Sort
from tabula.core.schema import Header, Schema

from .config import FrameSettings
from .errors import FrameSchemaError

# Scalar sorts with a fixed polars dtype. STRUCT and LIST are inferred by polars.
_DTYPE_MAP: dict[Sort, object] = {
    Sort.BOOLEAN: pl.Boolean,
    Sort.INTEGER: pl.Int64,
    Sort.FLOAT: pl.Float64,
    Sort.STRING: pl.Utf8,
    Sort.ANY: pl.Object,
}


def dtype_for_sort(sort: Sort) -> object | None:
    """Polars dtype used when materializing a column of ``sort``; None lets polars infer."""
    return _DTYPE_MAP.get(sort)


def sort_for_dtype(dtype: pl.DataType, *, object_fallback: bool = False) -> Sort:
    """
    Infer the Sort for a polars dtype.

    Args:
        dtype (pl.DataType): Column dtype.
        object_fallback (bool): Return Sort.ANY for dtypes with no matching sort
            instead of raising.

    Returns:
        Sort: Matching sort.

    Raises:
        FrameSchemaError: If no sort matches and object_fallback is False.
    """
    if dtype == pl.Boolean:
        return Sort.BOOLEAN
    if dtype.is_integer():
        return Sort.INTEGER
    if dtype.is_float():
        return Sort.FLOAT
    if dtype == pl.Utf8:
        return Sort.STRING
    if isinstance(dtype, pl.Struct):
        return Sort.STRUCT
    if isinstance(dtype, pl.List):
        return Sort.LIST
    if dtype == pl.Object or object_fallback:
        return Sort.ANY
    raise FrameSchemaError(f"no sort for dtype {dtype}")


def _compatible_dtype(sort: Sort, actual: pl.DataType) -> bool:
    if sort is Sort.ANY:
        return True
    if sort is Sort.STRUCT:
        return isinstance(actual, pl.Struct) or actual == pl.Object
    try:
        return sort_for_dtype(actual) is sort
    except FrameSchemaError:
        return False


def validate_frame_against_schema(
    df: pl.DataFrame,
    schema: Schema,
    *,
    strict: bool = True,
) -> None:
    """
    Validate a Polars DataFrame against a Schema.

    Args:
        df (pl.DataFrame): Frame to validate.
        schema (Schema): Target schema.
        strict (bool): Reject columns not named by the schema when True.

    Raises:
        FrameSchemaError: If columns are missing, extras are present under strict mode,
            dtypes are incompatible, or a non-ANY column holds nulls.
    """
    missing = [c for c in schema.column_names if c not in df.columns]
    if missing:
        raise FrameSchemaError(f"missing schema columns: {missing!r}")
    if strict:
        extras = [c for c in df.columns if c not in schema]
        if extras:
            raise FrameSchemaError(f"unexpected columns present: {extras!r} (allowed={schema.column_names!r})")

    for h in schema.headers:
        actual = df.schema[h.column_name]
        if not _compatible_dtype(h.sort, actual):
            raise FrameSchemaError(f"column {h.column_name!r} expected sort {h.sort.value!r}; got dtype {actual}")
        if h.sort is not Sort.ANY and df.get_column(h.column_name).null_count() > 0:
            raise FrameSchemaError(f"column {h.column_name!r} contains nulls")


def infer_schema(df: pl.DataFrame, settings: FrameSettings | None = None) -> Schema:
    """
    Infer a Schema from a frame's column order and dtypes.

    Args:
        df (pl.DataFrame): Source frame.
        settings (FrameSettings | None): settings.object_fallback maps unmatched dtypes to
            Sort.ANY; FrameSettings.load() when None.
    """
    settings = settings or FrameSettings.load()
    return Schema(
        tuple(
            Header(column_name=name, sort=sort_for_dtype(dtype, object_fallback=settings.object_fallback))
            for name, dtype in df.schema.items()
        )
    )
