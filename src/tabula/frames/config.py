"""
Configuration for the tabula.frames module.

Defines FrameSettings, a frozen dataclass carrying runtime configuration for
DataFrame conversion. Defaults are sourced from tabula.core.constants.

Source of truth
- tabula.core.constants.STRICT_SCHEMA, PREVIEW_ROWS, OBJECT_FALLBACK, SETTINGS_ENV_PREFIX

Import DAG discipline
- Depends only on stdlib and tabula.core.

Notes
- Precedence when loading: environment > TOML > defaults.
- Core contract checks are not configurable; these settings only shape frame conversion.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from tabula.core.constants import OBJECT_FALLBACK as CORE_OBJECT_FALLBACK
from tabula.core.constants import PREVIEW_ROWS as CORE_PREVIEW_ROWS
from tabula.core.constants import SETTINGS_ENV_PREFIX
from tabula.core.constants import STRICT_SCHEMA as CORE_STRICT_SCHEMA

from .errors import FrameConfigError


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


@dataclass(frozen=True)
class FrameSettings:
    """
    Runtime settings for tabula.frames.

    Attributes:
        strict_schema (bool): If True, from_frame rejects columns not named by the target schema.
        preview_rows (int): Number of rows returned by preview (>= 0).
        object_fallback (bool): If True, dtypes with no matching Sort infer as Sort.ANY
            instead of raising FrameSchemaError.

    Raises:
        FrameConfigError: If preview_rows is negative.

    Examples:
        >>> from tabula.frames import FrameSettings
        >>> FrameSettings(preview_rows=5)  # doctest: +ELLIPSIS
        FrameSettings(...)
    """

    strict_schema: bool = CORE_STRICT_SCHEMA
    preview_rows: int = CORE_PREVIEW_ROWS
    object_fallback: bool = CORE_OBJECT_FALLBACK

    def __post_init__(self) -> None:
        if self.preview_rows < 0:
            raise FrameConfigError(f"preview_rows must be >= 0, got {self.preview_rows}")

    @classmethod
    def _apply_mapping(cls, base: FrameSettings, cfg: dict[str, Any] | None) -> FrameSettings:
        """Apply a loose config mapping onto FrameSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "strict_schema" in cfg:
            s = replace(s, strict_schema=_bool(cfg["strict_schema"]))

        if "preview_rows" in cfg:
            try:
                rows = int(cfg["preview_rows"])
            except (TypeError, ValueError) as exc:
                raise FrameConfigError(f"preview_rows must be an integer, got {cfg['preview_rows']!r}") from exc
            s = replace(s, preview_rows=rows)

        if "object_fallback" in cfg:
            s = replace(s, object_fallback=_bool(cfg["object_fallback"]))

        return s

    @classmethod
    def from_env(cls, base: FrameSettings | None = None, prefix: str = SETTINGS_ENV_PREFIX) -> FrameSettings:
        """
        Build FrameSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - TABULA_FRAMES_STRICT_SCHEMA (1/0/true/false/yes/no/on/off)
            - TABULA_FRAMES_PREVIEW_ROWS
            - TABULA_FRAMES_OBJECT_FALLBACK
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("strict_schema", "preview_rows", "object_fallback"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> FrameSettings:
        """
        Build FrameSettings from a TOML file.

        Search order when `path` is None:
            1) ./tabula.toml (with either a [frames] table or top-level keys)
            2) ./pyproject.toml under [tool.tabula.frames]

        Returns defaults if no file is present.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "tabula.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            with p.open("rb") as fh:
                data = tomllib.load(fh)
            if p.name == "pyproject.toml":
                cfg = data.get("tool", {}).get("tabula", {}).get("frames")
            elif isinstance(data.get("frames"), dict):
                cfg = data["frames"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> FrameSettings:
        """
        Load FrameSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (tabula.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        return cls.from_env(base=s)
