"""
Catalog asset payloads for object-store containers.

Each payload type knows its catalog `TYPE_NAME` and how to derive its own
qualified name through a `creator(...)` constructor. Payloads are immutable;
build a new one instead of mutating.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar

from src.asset_loader.connections import build_qualified_name, build_s3_qualified_name
from src.enums import AnnouncementType, CertificateStatus


@dataclass(frozen=True, kw_only=True)
class Asset:
    """Fields every catalog asset carries."""

    TYPE_NAME: ClassVar[str] = "Asset"

    qualified_name: str
    name: str
    connection_qualified_name: str
    description: str | None = None
    certificate_status: CertificateStatus | None = None
    certificate_status_message: str | None = None
    announcement_type: AnnouncementType | None = None
    announcement_title: str | None = None
    announcement_message: str | None = None
    owner_users: tuple[str, ...] = ()
    owner_groups: tuple[str, ...] = ()

    @property
    def type_name(self) -> str:
        return self.TYPE_NAME

    def to_record(self) -> dict[str, Any]:
        """Flat record with enum values as plain strings and tuples as lists."""
        record: dict[str, Any] = {"type_name": self.TYPE_NAME}
        for key, value in asdict(self).items():
            if isinstance(value, tuple):
                value = list(value)
            elif value is not None and hasattr(value, "value"):
                value = value.value
            record[key] = value
        return record


@dataclass(frozen=True, kw_only=True)
class S3Bucket(Asset):
    """An AWS S3 bucket."""

    TYPE_NAME: ClassVar[str] = "S3Bucket"

    aws_arn: str

    @classmethod
    def creator(
        cls, name: str, connection_qualified_name: str, aws_arn: str, **attributes: Any
    ) -> S3Bucket:
        return cls(
            qualified_name=build_s3_qualified_name(connection_qualified_name, aws_arn),
            name=name,
            connection_qualified_name=connection_qualified_name,
            aws_arn=aws_arn,
            **attributes,
        )


@dataclass(frozen=True, kw_only=True)
class GCSBucket(Asset):
    """A Google Cloud Storage bucket."""

    TYPE_NAME: ClassVar[str] = "GCSBucket"

    @classmethod
    def creator(cls, name: str, connection_qualified_name: str, **attributes: Any) -> GCSBucket:
        return cls(
            qualified_name=build_qualified_name(connection_qualified_name, name),
            name=name,
            connection_qualified_name=connection_qualified_name,
            **attributes,
        )


@dataclass(frozen=True, kw_only=True)
class ADLSContainer(Asset):
    """An Azure Data Lake Storage container, anchored to its storage account."""

    TYPE_NAME: ClassVar[str] = "ADLSContainer"

    adls_account_qualified_name: str

    @classmethod
    def creator(
        cls,
        name: str,
        adls_account_qualified_name: str,
        connection_qualified_name: str,
        **attributes: Any,
    ) -> ADLSContainer:
        return cls(
            qualified_name=build_qualified_name(adls_account_qualified_name, name),
            name=name,
            connection_qualified_name=connection_qualified_name,
            adls_account_qualified_name=adls_account_qualified_name,
            **attributes,
        )
