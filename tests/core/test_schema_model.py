import pytest
from pydantic import ValidationError

from tabula.core.errors import PreconditionViolation, SchemaError
from tabula.core.grammar import Sort
from tabula.core.schema import Cell, Header, Row, Schema, make_row

ID = Header(column_name="id", sort=Sort.INTEGER)
NAME = Header(column_name="name", sort=Sort.STRING)


def test_header_parses_sort_tag() -> None:
    assert Header(column_name="id", sort="i64") == ID


def test_header_rejects_unknown_sort_and_empty_name() -> None:
    with pytest.raises(ValidationError):
        Header(column_name="id", sort="decimal")
    with pytest.raises(ValidationError):
        Header(column_name="", sort="i64")


def test_header_and_cell_are_frozen() -> None:
    with pytest.raises(ValidationError):
        ID.column_name = "other"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        Cell(column_name="id", value=1).value = 2  # type: ignore[misc]


def test_schema_equality_is_structural() -> None:
    assert Schema((ID, NAME)) == Schema([Header(column_name="id", sort="i64"), NAME])
    assert Schema((ID, NAME)) != Schema((NAME, ID))
    assert Schema((ID,)) != Schema((Header(column_name="id", sort="f64"),))


def test_schema_rejects_duplicate_names() -> None:
    with pytest.raises(SchemaError):
        Schema((ID, Header(column_name="id", sort="str")))


def test_schema_lookup() -> None:
    s = Schema((ID, NAME))
    assert s.column_names == ["id", "name"]
    assert "name" in s and "missing" not in s
    assert s["name"] == NAME
    assert s.index_of("name") == 1
    with pytest.raises(KeyError):
        s["missing"]


def test_schema_append_returns_new_schema() -> None:
    s = Schema((ID,))
    s2 = s.append(NAME)
    assert s.column_names == ["id"]
    assert s2.column_names == ["id", "name"]


def test_make_row_from_sequence_and_mapping() -> None:
    s = Schema((ID, NAME))
    r1 = make_row(s, [1, "a"])
    r2 = make_row(s, {"name": "a", "id": 1})
    assert r1 == r2
    assert r1.values == (1, "a")
    assert r1.to_dict() == {"id": 1, "name": "a"}
    assert r1.schema is s


def test_make_row_rejects_misaligned_values() -> None:
    s = Schema((ID, NAME))
    with pytest.raises(PreconditionViolation):
        make_row(s, [1])
    with pytest.raises(PreconditionViolation):
        make_row(s, {"id": 1, "nom": "a"})
    with pytest.raises(PreconditionViolation):
        make_row(s, ["1", "a"])


def test_raw_row_is_not_validated() -> None:
    # corrupted rows are representable; accessors catch them via postconditions
    r = Row(Schema((ID,)), [Cell(column_name="id", value="x")])
    assert r.cells == (Cell(column_name="id", value="x"),)
