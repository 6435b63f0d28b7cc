import tabula
from tabula.core import Header, add_column, add_rows, empty_table, get_column_by_name, make_row


def test_public_api_reexports() -> None:
    for name in ("Table", "empty_table", "add_rows", "add_column", "build_column", "require", "ensure"):
        assert name in tabula.__all__
        assert hasattr(tabula, name)


def test_quickstart() -> None:
    t = add_column(empty_table(), Header(column_name="id", sort="i64"), [])
    t = add_rows(t, [make_row(t.schema, [1]), make_row(t.schema, [2])])
    t = add_column(t, Header(column_name="name", sort="str"), ["a", "b"])
    assert get_column_by_name(t, "name") == ["a", "b"]
