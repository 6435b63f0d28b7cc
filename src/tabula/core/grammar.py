"""
Sorts: the closed set of value kinds a column may declare.

Responsibilities
- Define the Sort enum and its serialized dtype tags.
- Provide the membership predicate used by every contract check on values.
- Parse and render serialized tags.

Design principles
-----------------
1) Closed set:
   - Membership is a table lookup keyed by Sort.
   - The table is checked against the enum at import time so a new member
     without a predicate fails immediately.

2) Naming:
   - Enum member names: UPPER_SNAKE
   - Serialized values: short dtype tags ("i64", "f64", "str", ...)

Membership
----------
| Sort     | tag      | members
|----------|----------|------------------------------------------
| BOOLEAN  | bool     | True, False
| INTEGER  | i64      | ints (bools excluded)
| FLOAT    | f64      | floats (ints excluded)
| STRING   | str      | str
| STRUCT   | struct   | any Mapping
| LIST     | list     | list or tuple
| ANY      | any      | everything, including None

Examples
--------
>>> from tabula.core.grammar import Sort, is_member, sort_from_value
>>> is_member(3, Sort.INTEGER)
True
>>> is_member(True, Sort.INTEGER)
False
>>> sort_from_value("f64") is Sort.FLOAT
True
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, Final

from .errors import GrammarError

__all__ = [
    "Sort",
    "is_member",
    "sort_value",
    "sort_from_value",
]


class Sort(Enum):
    """Closed set of column value kinds, serialized as dtype tags."""

    BOOLEAN = "bool"
    INTEGER = "i64"
    FLOAT = "f64"
    STRING = "str"
    STRUCT = "struct"
    LIST = "list"
    ANY = "any"


_MEMBERSHIP: Final[dict[Sort, Callable[[Any], bool]]] = {
    Sort.BOOLEAN: lambda v: isinstance(v, bool),
    Sort.INTEGER: lambda v: isinstance(v, int) and not isinstance(v, bool),
    Sort.FLOAT: lambda v: isinstance(v, float),
    Sort.STRING: lambda v: isinstance(v, str),
    Sort.STRUCT: lambda v: isinstance(v, Mapping),
    Sort.LIST: lambda v: isinstance(v, (list, tuple)),
    Sort.ANY: lambda v: True,
}

_missing = set(Sort) - set(_MEMBERSHIP)
if _missing:  # pragma: no cover
    raise GrammarError(f"no membership predicate for sorts: {sorted(s.value for s in _missing)}")


def is_member(value: Any, sort: Sort) -> bool:
    """
    Check whether a value belongs to a sort.

    Args:
        value (Any): Candidate cell value.
        sort (Sort): Declared column sort.

    Returns:
        bool: True if value is a member of sort.

    Examples:
        >>> is_member("a", Sort.STRING)
        True
        >>> is_member(1, Sort.FLOAT)
        False
    """
    return _MEMBERSHIP[sort](value)


def sort_value(sort: Sort) -> str:
    """Return the serialized tag for a sort."""
    return sort.value


def sort_from_value(s: str) -> Sort:
    """
    Parse a serialized tag into a Sort.

    Args:
        s (str): Tag such as "i64" or "str".

    Returns:
        Sort: Parsed sort.

    Raises:
        GrammarError: If s is not a known tag.
    """
    try:
        return Sort(s)
    except ValueError as exc:
        allowed = [m.value for m in Sort]
        raise GrammarError(f"unknown sort {s!r}; expected one of {allowed}") from exc
