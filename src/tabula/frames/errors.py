"""
Custom exceptions for the tabula.frames module.

Source of truth and boundaries
- tabula.core.errors covers contract, schema, and sort failures raised by core.
- tabula.frames raises Frame* errors for DataFrame/settings concerns:
  - FrameConfigError: invalid settings values.
  - FrameSchemaError: DataFrame does not fit a tabula Schema.

Notes
- Row-level sort membership is still enforced by tabula.core.schema.make_row.
"""

from __future__ import annotations


class FrameError(Exception):
    """Base class for errors raised by tabula.frames."""


class FrameConfigError(FrameError):
    """
    Raised when frame settings are invalid.

    Examples:
        - preview_rows < 0
    """


class FrameSchemaError(FrameError):
    """
    Raised when a DataFrame fails validation against a Schema.

    Notes:
        Covers missing or unexpected columns, incompatible dtypes, nulls in columns
        whose sort is not ANY, and dtypes with no matching Sort.
    """
