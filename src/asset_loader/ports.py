"""
Catalog ports.

- CatalogClient: protocol for anything that can persist assets and tag them
  (Delta tables, a remote catalog API, fakes in tests).

Both operations must be idempotent: upserting an asset that already exists
updates it, and appending a classification the asset already carries is a no-op.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from src.asset_loader.assets import Asset


class CatalogClient(Protocol):
    """Port for implementations that can write assets to a catalog."""

    def upsert_assets(self, assets: Sequence[Asset]) -> None: ...

    def append_classifications(
        self, type_name: str, qualified_name: str, classifications: Sequence[str]
    ) -> None: ...
