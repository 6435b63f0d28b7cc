"""
tabula.frames — in-memory polars interop for tabula tables.

## Public API
- FrameSettings — conversion settings (env > TOML > defaults).
- to_frame / from_frame / preview — Table <-> pl.DataFrame.
- validate_frame_against_schema / infer_schema — frame checks against a Schema.

## Import DAG discipline
- Depends only on stdlib, polars, and tabula.core.*.

## Examples
```python
import polars as pl
from tabula.frames import from_frame, to_frame

t = from_frame(pl.DataFrame({"id": [1, 2], "name": ["a", "b"]}))
to_frame(t).columns  # ['id', 'name']
```
"""

from __future__ import annotations

from .config import FrameSettings
from .convert import from_frame, preview, to_frame
from .errors import FrameConfigError, FrameError, FrameSchemaError
from .validate import dtype_for_sort, infer_schema, sort_for_dtype, validate_frame_against_schema

__all__ = [
    "FrameSettings",
    "FrameError",
    "FrameConfigError",
    "FrameSchemaError",
    "to_frame",
    "from_frame",
    "preview",
    "dtype_for_sort",
    "sort_for_dtype",
    "infer_schema",
    "validate_frame_against_schema",
]
