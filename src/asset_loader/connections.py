"""
Connection and qualified-name utilities.

This module defines:
- ConnectionDetails: hashable key for the connection cache.
- Helpers to build and parse slash-delimited qualified names.
- Resolution of connection / account qualified names from a spreadsheet row.

Conventions:
- A connection qualified name looks like `<tenant>/<connector>/<epoch>`.
- Verbs: build_*, parse_*, get_* (row lookups that may return None).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from src.asset_loader.columns import COL_ACCOUNT, COL_CONNECTION, COL_CONNECTOR
from src.asset_loader.rows import Row, get_value
from src.constants import QUALIFIED_NAME_SEPARATOR
from src.enums import ConnectorType


# -----------------------------
# Cache key
# -----------------------------


@dataclass(frozen=True)
class ConnectionDetails:
    """
    Connector plus connection name, as written on a spreadsheet row.

    `connector` keeps the lower-cased cell text, so connectors this loader does
    not recognise still produce distinct keys.
    """

    connector: str
    connection_name: str

    @property
    def connector_type(self) -> ConnectorType:
        return ConnectorType.parse(self.connector)

    @classmethod
    def from_row(cls, row: Row) -> ConnectionDetails | None:
        """Build the cache key for a row; None when either column is empty."""
        connector = get_value(row, COL_CONNECTOR)
        connection = get_value(row, COL_CONNECTION)
        if connector is None or connection is None:
            return None
        return cls(connector=connector.lower(), connection_name=connection)


ConnectionCache = Mapping[ConnectionDetails, str]


# -----------------------------
# Qualified-name helpers
# -----------------------------


def build_qualified_name(parent_qualified_name: str, name: str) -> str:
    """`<parent>/<name>`, with both parts used exactly as given."""
    return f"{parent_qualified_name}{QUALIFIED_NAME_SEPARATOR}{name}"


def parse_connector_type(qualified_name: str | None) -> ConnectorType:
    """
    Connector type encoded in any qualified name under a connection.

    'default/s3/1700000000/arn:aws:s3:::bucket' -> ConnectorType.S3
    Anything that cannot be parsed is ConnectorType.UNKNOWN.
    """
    if not qualified_name:
        return ConnectorType.UNKNOWN
    parts = qualified_name.split(QUALIFIED_NAME_SEPARATOR)
    if len(parts) < 2:
        return ConnectorType.UNKNOWN
    return ConnectorType.parse(parts[1])


def build_s3_qualified_name(connection_qualified_name: str, arn: str) -> str:
    """S3 buckets are identified by their ARN under the connection."""
    return f"{connection_qualified_name}{QUALIFIED_NAME_SEPARATOR}{arn}"


# -----------------------------
# Row lookups
# -----------------------------


def get_connection_qualified_name(connection_cache: ConnectionCache, row: Row) -> str | None:
    """Resolved connection qualified name for the row, or None if it is not cached."""
    details = ConnectionDetails.from_row(row)
    if details is None:
        return None
    return connection_cache.get(details)


def get_account_qualified_name(connection_cache: ConnectionCache, row: Row) -> str | None:
    """`<connection>/<account>` for the row, or None if either part is unavailable."""
    connection_qualified_name = get_connection_qualified_name(connection_cache, row)
    account_name = get_value(row, COL_ACCOUNT)
    if not connection_qualified_name or account_name is None:
        return None
    return build_qualified_name(connection_qualified_name, account_name)
