"""
Core exception types raised by contract checks, schema construction, and sort parsing.

Provides typed exceptions for core-domain failures:
- PreconditionViolation when a caller breaks an operation's stated contract.
- PostconditionViolation when an operation's own invariant fails after construction.
- NotYetSupported for declared operations that have no behavior yet.
- SchemaError for invalid Schema construction (e.g., duplicate column names).
- GrammarError for unknown sort tags.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - tabula.core.contracts raises the two contract kinds; nothing in tabula.core
      catches and downgrades them.
    - NotYetSupported subclasses NotImplementedError, not ContractViolation, so callers
      can tell "missing feature" from "misuse".

Examples:
    Distinguish caller error from a missing feature.

    >>> from tabula.core.errors import NotYetSupported, PreconditionViolation
    >>> try:
    ...     raise PreconditionViolation("len(values) == table.nrows")
    ... except PreconditionViolation as e:
    ...     msg = str(e)
    >>> msg
    '[failed require] len(values) == table.nrows'
    >>> issubclass(NotYetSupported, PreconditionViolation)
    False
"""

from __future__ import annotations

__all__ = [
    "ContractViolation",
    "PreconditionViolation",
    "PostconditionViolation",
    "RowIndexError",
    "NotYetSupported",
    "SchemaError",
    "GrammarError",
]


class ContractViolation(AssertionError):
    """
    Base class for failed require/ensure checks.

    Attributes:
        description (str): Static, human-readable statement of the checked property.
    """

    label = "failed contract"

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"[{self.label}] {description}")


class PreconditionViolation(ContractViolation):
    """Caller supplied inputs that break an operation's contract."""

    label = "failed require"


class RowIndexError(PreconditionViolation, IndexError):
    """Row index outside ``[0, nrows)``."""


class PostconditionViolation(ContractViolation):
    """An operation's own invariant did not hold; signals an internal defect or corrupted row."""

    label = "failed ensure"


class NotYetSupported(NotImplementedError):
    """
    Declared table operation without an implementation.

    Attributes:
        operation (str): Name of the unsupported operation.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} is not supported yet")


class SchemaError(ValueError):
    """Schema-level construction failure (duplicate column names)."""


class GrammarError(ValueError):
    """Unknown or malformed sort tag."""
