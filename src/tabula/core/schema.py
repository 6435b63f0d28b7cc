"""
Column descriptors, schemas, cells, and rows.

Responsibilities
- Define Header and Cell as frozen Pydantic v2 models.
- Define Schema and Row as frozen dataclasses over tuples.
- Freeze cell values on construction: lists and tuples become tuples, mappings become
  read-only MappingProxyType views over a frozen copy, recursively. Other objects
  (e.g. in ANY columns) are stored as given.
- Provide ``make_row``, the checked Row constructor.

Notes
- Schema equality is structural (same headers, same order), never identity.
- ``Row(...)`` does not validate its cells. Rows built that way may be corrupted;
  accessors in tabula.core.table detect this through postconditions. Use ``make_row``
  to build rows from caller data.
- Derived shapes are produced by ``Schema.append``, which returns a new Schema.

Examples
--------
>>> from tabula.core.schema import Header, Schema, make_row
>>> schema = Schema((Header(column_name="id", sort="i64"),))
>>> row = make_row(schema, [1])
>>> row.to_dict()
{'id': 1}
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .contracts import require
from .errors import SchemaError
from .grammar import Sort, is_member, sort_from_value

__all__ = [
    "Header",
    "Cell",
    "Schema",
    "Row",
    "make_row",
]


class Header(BaseModel):
    """
    Single column descriptor.

    Attributes:
        column_name (str): Column name, unique within a schema.
        sort (Sort): Value kind legal for the column. Serialized tags ("i64", "str", ...)
            are parsed via tabula.core.grammar.sort_from_value.

    Raises:
        pydantic.ValidationError: If column_name is empty or sort is an unknown tag.

    Examples:
        >>> Header(column_name="name", sort="str").sort
        <Sort.STRING: 'str'>
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    column_name: str = Field(..., min_length=1)
    sort: Sort

    @field_validator("sort", mode="before")
    @classmethod
    def _parse_sort(cls, v: Any) -> Any:
        if isinstance(v, str):
            return sort_from_value(v)
        return v


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


class Cell(BaseModel):
    """
    A (column name, value) entry within one row.

    Notes:
        List values are stored as tuples and mappings as read-only views over a copy,
        so neither the caller's original nor a value read back can change the cell.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    column_name: str
    value: Any

    @field_validator("value")
    @classmethod
    def _freeze_value(cls, v: Any) -> Any:
        return _freeze(v)


@dataclass(frozen=True)
class Schema:
    """
    Ordered sequence of headers defining a table's shape.

    Attributes:
        headers (tuple[Header, ...]): Column descriptors in column order.

    Raises:
        SchemaError: If two headers share a column name.
    """

    headers: tuple[Header, ...] = ()

    def __post_init__(self) -> None:
        headers = tuple(self.headers)
        object.__setattr__(self, "headers", headers)
        seen: set[str] = set()
        dupes: list[str] = []
        for h in headers:
            if h.column_name in seen:
                dupes.append(h.column_name)
            seen.add(h.column_name)
        if dupes:
            raise SchemaError(f"duplicate column names: {dupes!r}")

    @property
    def column_names(self) -> list[str]:
        return [h.column_name for h in self.headers]

    def __len__(self) -> int:
        return len(self.headers)

    def __iter__(self) -> Iterator[Header]:
        return iter(self.headers)

    def __contains__(self, column_name: object) -> bool:
        return any(h.column_name == column_name for h in self.headers)

    def __getitem__(self, column_name: str) -> Header:
        for h in self.headers:
            if h.column_name == column_name:
                return h
        raise KeyError(column_name)

    def index_of(self, column_name: str) -> int:
        """Position of a column; KeyError if absent."""
        for i, h in enumerate(self.headers):
            if h.column_name == column_name:
                return i
        raise KeyError(column_name)

    def append(self, header: Header) -> Schema:
        """Return a new schema with ``header`` as the last column."""
        return Schema(self.headers + (header,))


@dataclass(frozen=True)
class Row:
    """
    One tuple of cells over a shared schema.

    Attributes:
        schema (Schema): Schema the cells align with, position by position.
        cells (tuple[Cell, ...]): Cells in schema order.
    """

    schema: Schema
    cells: tuple[Cell, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(c.value for c in self.cells)

    def to_dict(self) -> dict[str, Any]:
        return {c.column_name: c.value for c in self.cells}


def make_row(schema: Schema, values: Sequence[Any] | Mapping[str, Any]) -> Row:
    """
    Build a schema-conformant Row.

    Args:
        schema (Schema): Target schema.
        values (Sequence[Any] | Mapping[str, Any]): Values in schema order, or a mapping
            keyed by column name covering exactly the schema's columns.

    Returns:
        Row: Row whose cells align with schema.headers.

    Raises:
        PreconditionViolation: If the values do not cover the schema exactly, or a value
            is not a member of its column's sort.
    """
    if isinstance(values, Mapping):
        require(
            set(values) == set(schema.column_names),
            "set(values) == set(schema.column_names)",
        )
        ordered: list[Any] = [values[name] for name in schema.column_names]
    else:
        ordered = list(values)
        require(len(ordered) == len(schema), "len(values) == len(schema.headers)")

    require(
        all(is_member(v, h.sort) for v, h in zip(ordered, schema.headers)),
        "every value is a member of its column sort",
    )
    return Row(
        schema,
        tuple(Cell(column_name=h.column_name, value=v) for h, v in zip(schema.headers, ordered)),
    )
