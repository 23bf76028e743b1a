"""
AssetBatch

Buffers assets and submits them to a `CatalogClient` in groups of at most
`max_size`. Callers must `flush()` once they have added everything; until then
up to `max_size - 1` assets may still be buffered.

Submission errors are not caught here. The failed group stays buffered so the
caller can decide whether to retry with `flush()` or abandon the load.
"""

from __future__ import annotations

from src.asset_loader.assets import Asset
from src.asset_loader.ports import CatalogClient
from src.logger import LOGGER


class AssetBatch:
    """Size-bounded buffer of assets for bulk create-or-update."""

    def __init__(self, client: CatalogClient, name: str, max_size: int) -> None:
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 1:
            raise ValueError(f"Batch size must be a positive integer, got: {max_size!r}")
        self.client = client
        self.name = name
        self.max_size = max_size
        self._buffer: list[Asset] = []
        self.submitted = 0

    def __len__(self) -> int:
        return len(self._buffer)

    def add(self, asset: Asset) -> None:
        """Buffer one asset, submitting the buffer when it reaches `max_size`."""
        self._buffer.append(asset)
        if len(self._buffer) >= self.max_size:
            self._submit()

    def flush(self) -> None:
        """Submit anything still buffered; returns once the client has accepted it."""
        if self._buffer:
            self._submit()
        LOGGER.info("Batch '%s' flushed, %d asset(s) submitted.", self.name, self.submitted)

    def _submit(self) -> None:
        pending = tuple(self._buffer)
        LOGGER.info("Submitting %d asset(s) for batch '%s'.", len(pending), self.name)
        self.client.upsert_assets(pending)
        self._buffer.clear()
        self.submitted += len(pending)
