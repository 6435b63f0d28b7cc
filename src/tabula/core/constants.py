"""
tabula core defaults.

Defines defaults consumed by the frames layer settings. This module is zero-IO and
uses only the Python standard library.

Notes:
    - tabula.frames.config.FrameSettings reads these values as its defaults.
    - Contract checks in tabula.core are always enabled and have no switch here.
"""

from __future__ import annotations

__all__ = [
    "PREVIEW_ROWS",
    "STRICT_SCHEMA",
    "OBJECT_FALLBACK",
    "SETTINGS_ENV_PREFIX",
]

# Number of rows returned by tabula.frames.convert.preview.
PREVIEW_ROWS: int = 10

# Reject frame columns that are not named by the target schema.
STRICT_SCHEMA: bool = True

# Map polars dtypes without a matching Sort to Sort.ANY instead of failing.
OBJECT_FALLBACK: bool = False

SETTINGS_ENV_PREFIX: str = "TABULA_FRAMES_"
