"""Shared constant values used across the asset loader."""

from typing import Final

QUALIFIED_NAME_SEPARATOR: Final[str] = "/"
BUCKET_BATCH_NAME: Final[str] = "bucket"
