"""
Loader: high-level entry point for loading buckets from spreadsheet rows.

Responsibilities
----------------
- Wire default components (profile, upserter).
- Expose a single entry point:
    - load(connection_cache, rows)

Notes:
-----
- Reading the spreadsheet and resolving connections happen before this runs.
- Everything can be overridden for testing or custom behaviour.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.asset_loader.buckets import BucketDetails, collect_buckets
from src.asset_loader.config.profile import LoaderProfile
from src.asset_loader.connections import ConnectionCache
from src.asset_loader.ports import CatalogClient
from src.asset_loader.rows import Row
from src.asset_loader.upsert import BucketUpserter
from src.logger import LOGGER


class BucketLoader:
    """Collects buckets from rows and upserts them into the catalog."""

    def __init__(
        self,
        client: CatalogClient,
        profile: LoaderProfile | None = None,
        upserter: BucketUpserter | None = None,
    ) -> None:
        self.client = client
        self.profile = profile or LoaderProfile()
        self.upserter = upserter or BucketUpserter(client)

    def load(
        self, connection_cache: ConnectionCache, rows: Iterable[Row]
    ) -> dict[str, BucketDetails]:
        """Upsert every distinct bucket named in `rows`; returns what was submitted."""
        buckets = collect_buckets(connection_cache, rows, self.profile.delimiter)
        LOGGER.info(
            "Upserting %d bucket(s) in batches of %d.", len(buckets), self.profile.batch_size
        )
        self.upserter.upsert(buckets, self.profile.batch_size)
        LOGGER.info("Bucket load completed.")
        return buckets
