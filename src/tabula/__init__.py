"""
tabula — immutable, schema-typed tables with contract-checked transformations.

Subpackages
- tabula.core — sorts, contracts, schemas, rows, tables (stdlib + pydantic).
- tabula.frames — in-memory conversion to and from polars DataFrames.
"""

from . import core
from .core import *  # noqa: F401,F403

__all__ = list(core.__all__)
