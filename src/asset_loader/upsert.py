"""
Bulk create-or-update of buckets.

Flow (one call):
  1) Build one catalog payload per bucket, by provider, and batch it.
     Classifications are set aside per provider, keyed by the payload's
     qualified name.
  2) Flush the batch.
  3) Append the set-aside classifications, S3 then GCS then ADLS.

Classifications can only be attached to assets that already exist, so step 3
never starts before step 2 has returned.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from src.asset_loader.assets import ADLSContainer, Asset, GCSBucket, S3Bucket
from src.asset_loader.batch import AssetBatch
from src.asset_loader.buckets import BucketDetails
from src.asset_loader.classifications import append_classifications
from src.asset_loader.connections import build_qualified_name, parse_connector_type
from src.asset_loader.ports import CatalogClient
from src.constants import BUCKET_BATCH_NAME
from src.enums import ConnectorType
from src.logger import LOGGER

PayloadBuilder = Callable[[BucketDetails], Asset | None]

# Classification pass order and the catalog type tagged for each provider.
CLASSIFIED_TYPES: tuple[tuple[ConnectorType, str], ...] = (
    (ConnectorType.S3, S3Bucket.TYPE_NAME),
    (ConnectorType.GCS, GCSBucket.TYPE_NAME),
    (ConnectorType.ADLS, ADLSContainer.TYPE_NAME),
)


class BucketUpserter:
    """Idempotently ensures a set of buckets exists in the catalog."""

    def __init__(
        self,
        client: CatalogClient,
        batch_factory: Callable[[CatalogClient, str, int], AssetBatch] = AssetBatch,
    ) -> None:
        """
        Initialize the upserter.

        `batch_factory` can be swapped for testing or for a different batching strategy.
        """
        self.client = client
        self.batch_factory = batch_factory
        self._builders: Mapping[ConnectorType, PayloadBuilder] = {
            ConnectorType.S3: self._build_s3_bucket,
            ConnectorType.GCS: self._build_gcs_bucket,
            ConnectorType.ADLS: self._build_adls_container,
        }

    # ---------- public API ----------

    def upsert(self, buckets: Mapping[str, BucketDetails], batch_size: int) -> None:
        """Create buckets that do not exist and update those that do."""
        batch = self.batch_factory(self.client, BUCKET_BATCH_NAME, batch_size)
        to_classify: dict[ConnectorType, dict[str, list[str]]] = {
            connector_type: {} for connector_type, _ in CLASSIFIED_TYPES
        }

        for details in buckets.values():
            bucket_type = parse_connector_type(details.connection_qualified_name)
            builder = self._builders.get(bucket_type)
            if builder is None:
                LOGGER.error("Invalid bucket type (%s) - skipping: %s", bucket_type, details)
                continue
            asset = builder(details)
            if asset is None:
                continue
            if details.classifications:
                to_classify[bucket_type][asset.qualified_name] = list(details.classifications)
            batch.add(asset)

        batch.flush()

        for connector_type, type_name in CLASSIFIED_TYPES:
            append_classifications(self.client, to_classify[connector_type], type_name)

    # ---------- payload builders ----------

    def _build_s3_bucket(self, details: BucketDetails) -> S3Bucket | None:
        if not details.arn:
            LOGGER.error("Unable to create an S3 bucket without an ARN: %s", details)
            return None
        return S3Bucket.creator(
            details.name,
            details.connection_qualified_name,
            details.arn,
            **_common_attributes(details),
        )

    def _build_gcs_bucket(self, details: BucketDetails) -> GCSBucket:
        return GCSBucket.creator(
            details.name,
            details.connection_qualified_name,
            **_common_attributes(details),
        )

    def _build_adls_container(self, details: BucketDetails) -> ADLSContainer | None:
        if not details.account_name:
            LOGGER.error("Unable to create an ADLS container without an account: %s", details)
            return None
        account_qualified_name = build_qualified_name(
            details.connection_qualified_name, details.account_name
        )
        return ADLSContainer.creator(
            details.name,
            account_qualified_name,
            details.connection_qualified_name,
            **_common_attributes(details),
        )


# ---------- tiny helpers ----------


def _common_attributes(details: BucketDetails) -> dict[str, Any]:
    """Metadata copied from the row onto every bucket payload."""
    return {
        "description": details.description,
        "certificate_status": details.certificate,
        "certificate_status_message": details.certificate_status_message,
        "announcement_type": details.announcement_type,
        "announcement_title": details.announcement_title,
        "announcement_message": details.announcement_message,
        "owner_users": details.owner_users,
        "owner_groups": details.owner_groups,
    }
