from __future__ import annotations

import polars as pl
import pytest

from tabula.core.errors import PreconditionViolation
from tabula.core.grammar import Sort
from tabula.core.schema import Header, Schema, make_row
from tabula.core.table import Table, add_column, add_rows, empty_table, get_column_by_name, header, nrows
from tabula.frames import (
    FrameSchemaError,
    FrameSettings,
    from_frame,
    infer_schema,
    preview,
    sort_for_dtype,
    to_frame,
    validate_frame_against_schema,
)

SCHEMA = Schema(
    (
        Header(column_name="id", sort="i64"),
        Header(column_name="name", sort="str"),
        Header(column_name="score", sort="f64"),
        Header(column_name="active", sort="bool"),
    )
)


@pytest.fixture
def people() -> Table:
    return add_rows(
        Table(schema=SCHEMA),
        [make_row(SCHEMA, [1, "a", 0.5, True]), make_row(SCHEMA, [2, "b", 1.5, False])],
    )


def test_to_frame_keeps_order_and_dtypes(people) -> None:
    df = to_frame(people)
    assert df.columns == ["id", "name", "score", "active"]
    assert df.schema["id"] == pl.Int64
    assert df.schema["name"] == pl.Utf8
    assert df.schema["score"] == pl.Float64
    assert df.schema["active"] == pl.Boolean
    assert df.get_column("name").to_list() == ["a", "b"]


def test_from_frame_with_schema(people) -> None:
    t = from_frame(to_frame(people), SCHEMA, settings=FrameSettings())
    assert t.schema == SCHEMA
    assert t.rows == people.rows


def test_from_frame_infers_schema() -> None:
    df = pl.DataFrame({"id": [1, 2], "tags": [["x"], []], "meta": [{"k": 1}, {"k": 2}]})
    t = from_frame(df, settings=FrameSettings())
    assert header(t) == ["id", "tags", "meta"]
    assert [h.sort for h in t.schema] == [Sort.INTEGER, Sort.LIST, Sort.STRUCT]
    assert get_column_by_name(t, "tags") == [("x",), ()]
    assert get_column_by_name(t, "meta") == [{"k": 1}, {"k": 2}]


def test_from_frame_strict_rejects_extra_columns() -> None:
    schema = Schema((Header(column_name="id", sort="i64"),))
    df = pl.DataFrame({"id": [1], "extra": ["x"]})
    with pytest.raises(FrameSchemaError):
        from_frame(df, schema, settings=FrameSettings(strict_schema=True))
    t = from_frame(df, schema, settings=FrameSettings(strict_schema=False))
    assert header(t) == ["id"]
    assert nrows(t) == 1


def test_validate_rejects_missing_columns_dtypes_and_nulls() -> None:
    schema = Schema((Header(column_name="id", sort="i64"),))
    with pytest.raises(FrameSchemaError):
        validate_frame_against_schema(pl.DataFrame({"other": [1]}), schema, strict=False)
    with pytest.raises(FrameSchemaError):
        validate_frame_against_schema(pl.DataFrame({"id": ["1"]}), schema)
    with pytest.raises(FrameSchemaError):
        validate_frame_against_schema(pl.DataFrame({"id": [1, None]}), schema)


def test_sort_for_dtype() -> None:
    assert sort_for_dtype(pl.Int32) is Sort.INTEGER
    assert sort_for_dtype(pl.Float32) is Sort.FLOAT
    assert sort_for_dtype(pl.Utf8) is Sort.STRING
    assert sort_for_dtype(pl.Boolean) is Sort.BOOLEAN
    with pytest.raises(FrameSchemaError):
        sort_for_dtype(pl.Date)
    assert sort_for_dtype(pl.Date, object_fallback=True) is Sort.ANY


def test_infer_schema_order() -> None:
    schema = infer_schema(pl.DataFrame({"b": [1.0], "a": ["x"]}), FrameSettings())
    assert schema.column_names == ["b", "a"]


def test_infer_schema_object_fallback_from_settings() -> None:
    df = pl.DataFrame({"day": pl.Series("day", [], dtype=pl.Date)})
    with pytest.raises(FrameSchemaError):
        infer_schema(df, FrameSettings())
    schema = infer_schema(df, FrameSettings(object_fallback=True))
    assert schema["day"].sort is Sort.ANY


def test_any_column_roundtrips_objects() -> None:
    payload = object()
    t = add_column(
        add_rows(
            add_column(empty_table(), Header(column_name="id", sort="i64"), []),
            [make_row(Schema((Header(column_name="id", sort="i64"),)), [1])],
        ),
        Header(column_name="payload", sort="any"),
        [payload],
    )
    df = to_frame(t)
    assert df.schema["payload"] == pl.Object
    assert df.get_column("payload").to_list() == [payload]


def test_preview_limits_rows(people) -> None:
    df = preview(people, FrameSettings(preview_rows=1))
    assert df.height == 1
    assert df.columns == header(people)
    assert nrows(people) == 2


def test_from_frame_value_outside_sort_is_precondition() -> None:
    # pl.Object satisfies the STRUCT dtype check but the values are not mappings
    df = pl.DataFrame({"meta": pl.Series("meta", [1], dtype=pl.Object)})
    schema = Schema((Header(column_name="meta", sort="struct"),))
    with pytest.raises(PreconditionViolation):
        from_frame(df, schema, settings=FrameSettings())


def _one_row(sort: str, value) -> Table:
    schema = Schema((Header(column_name="v", sort=sort),))
    return add_rows(Table(schema=schema), [make_row(schema, [value])])


@pytest.mark.parametrize(
    ("sort", "value"),
    [
        ("list", [1, "a"]),
        ("i64", 2**70),
        ("struct", {1: "a"}),
    ],
)
def test_to_frame_rejects_values_polars_cannot_hold(sort, value) -> None:
    with pytest.raises(FrameSchemaError):
        to_frame(_one_row(sort, value))


def test_struct_roundtrip_with_shared_keys() -> None:
    schema = Schema((Header(column_name="meta", sort="struct"),))
    t = add_rows(Table(schema=schema), [make_row(schema, [{"a": 1, "b": [2]}]), make_row(schema, [{"a": 3, "b": []}])])
    back = from_frame(to_frame(t), t.schema, settings=FrameSettings())
    assert back.rows == t.rows


def test_struct_with_differing_keys_is_rejected() -> None:
    schema = Schema((Header(column_name="meta", sort="struct"),))
    t = add_rows(Table(schema=schema), [make_row(schema, [{"a": 1}]), make_row(schema, [{"b": 2}])])
    with pytest.raises(FrameSchemaError):
        to_frame(t)
