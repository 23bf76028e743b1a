"""
Object-store buckets described on spreadsheet rows.

A row names a bucket when CONNECTOR, CONNECTION and BUCKET NAME are filled in.
If OBJECT NAME is also filled in, the row describes an object inside the
bucket: only the bucket's identity is taken from it, none of its metadata.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from src.asset_loader.columns import (
    COL_ACCOUNT,
    COL_BUCKET_ARN,
    COL_BUCKET_NAME,
    COL_CONNECTION,
    COL_CONNECTOR,
    COL_OBJECT_NAME,
)
from src.asset_loader.connections import (
    ConnectionCache,
    build_qualified_name,
    build_s3_qualified_name,
    get_account_qualified_name,
    get_connection_qualified_name,
    parse_connector_type,
)
from src.asset_loader.models import AssetDetails
from src.asset_loader.rows import Row, get_missing_fields, get_required_empty_fields, get_value
from src.enums import ConnectorType
from src.logger import LOGGER

REQUIRED: Final[tuple[str, ...]] = (COL_CONNECTOR, COL_CONNECTION, COL_BUCKET_NAME)
REQUIRED_EMPTY: Final[tuple[str, ...]] = (COL_OBJECT_NAME,)


@dataclass(frozen=True, kw_only=True)
class BucketDetails(AssetDetails):
    """Everything a row says about one bucket or container."""

    connection_qualified_name: str | None
    name: str
    account_name: str | None = None
    arn: str | None = None
    is_minimal: bool = False

    @property
    def identity(self) -> str:
        return f"{self.connection_qualified_name}/{self.account_name or ''}/{self.name}"

    @classmethod
    def from_row(
        cls, connection_cache: ConnectionCache, row: Row, delimiter: str
    ) -> BucketDetails | None:
        """
        Build the bucket details for one row, or None if the row names no bucket.

        Bucket rows carry the full common metadata; object rows give a minimal
        descriptor with identity fields only.
        """
        if get_missing_fields(row, REQUIRED):
            return None

        identity_fields = {
            "connection_qualified_name": get_connection_qualified_name(connection_cache, row),
            "account_name": get_value(row, COL_ACCOUNT),
            "name": get_value(row, COL_BUCKET_NAME),
            "arn": get_value(row, COL_BUCKET_ARN),
        }
        if get_required_empty_fields(row, REQUIRED_EMPTY):
            return cls(**identity_fields, is_minimal=True)
        return cls(**cls.common_fields_from_row(row, delimiter), **identity_fields)


def resolve_qualified_name(connection_cache: ConnectionCache, row: Row) -> str | None:
    """
    Catalog qualified name of the bucket on this row.

    Returns None when the connection cannot be resolved, when a field the
    provider needs is empty, or when the connector is not an object store.
    """
    connection_qualified_name = get_connection_qualified_name(connection_cache, row)
    if not connection_qualified_name:
        return None

    connector_type = parse_connector_type(connection_qualified_name)
    bucket_name = get_value(row, COL_BUCKET_NAME)

    if connector_type is ConnectorType.S3:
        bucket_arn = get_value(row, COL_BUCKET_ARN)
        if bucket_name and bucket_arn:
            return build_s3_qualified_name(connection_qualified_name, bucket_arn)
    elif connector_type is ConnectorType.GCS:
        if bucket_name:
            return build_qualified_name(connection_qualified_name, bucket_name)
    elif connector_type is ConnectorType.ADLS:
        account_qualified_name = get_account_qualified_name(connection_cache, row)
        if account_qualified_name and bucket_name:
            return build_qualified_name(account_qualified_name, bucket_name)
    else:
        LOGGER.error("Unknown connector type for object stores: %s", connector_type)
    return None


def collect_buckets(
    connection_cache: ConnectionCache, rows: Iterable[Row], delimiter: str
) -> dict[str, BucketDetails]:
    """
    De-duplicate the buckets named across `rows`, keyed by identity.

    A bucket row replaces an earlier object-row reference to the same bucket;
    otherwise the first descriptor seen for an identity is kept.
    """
    buckets: dict[str, BucketDetails] = {}
    for row in rows:
        details = BucketDetails.from_row(connection_cache, row, delimiter)
        if details is None:
            continue
        existing = buckets.get(details.identity)
        if existing is None or (existing.is_minimal and not details.is_minimal):
            buckets[details.identity] = details
    LOGGER.info("Collected %d distinct bucket(s).", len(buckets))
    return buckets
