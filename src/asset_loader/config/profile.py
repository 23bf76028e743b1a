"""Loader profiles: optional YAML overrides for batch size, delimiter and tables."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from src import settings


def default_table_name(table: str) -> str:
    """Unquoted 'catalog.schema.table' for a table in the configured schema."""
    return f"{settings.CATALOG}.{settings.CATALOG_SCHEMA}.{table}"


@dataclass(frozen=True)
class LoaderProfile:
    """Settings for one load run."""

    batch_size: int = settings.BATCH_SIZE
    delimiter: str = settings.MULTI_VALUE_DELIMITER
    assets_table: str = default_table_name(settings.ASSETS_TABLE)
    classifications_table: str = default_table_name(settings.CLASSIFICATIONS_TABLE)


def load_profile(path: Path | str | None = None) -> LoaderProfile:
    """
    Load a profile from YAML, falling back to settings for anything not given.

    Values written as `${NAME}` are looked up on `src.settings`.
    """
    if path is None:
        return LoaderProfile()

    with Path(path).open("r") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Loader profile {path} must be a mapping, got {type(raw).__name__}.")

    known = {f.name for f in fields(LoaderProfile)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown loader profile key(s): {', '.join(unknown)}")

    resolved = {key: _resolve(value) for key, value in raw.items()}
    if "batch_size" in resolved:
        resolved["batch_size"] = int(resolved["batch_size"])
    return LoaderProfile(**resolved)


def _resolve(value: Any) -> Any:
    """Substitute `${NAME}` with the matching settings attribute."""
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        if not hasattr(settings, var_name):
            raise ValueError(f"Loader profile refers to unknown setting '{var_name}'.")
        return getattr(settings, var_name)
    return value
