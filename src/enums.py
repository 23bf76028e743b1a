"""Enumerations used throughout the asset loader."""

from enum import StrEnum


class Catalog(StrEnum):
    """Catalog name in Unity Catalog."""

    DEV = "dev"
    PROD = "prod"


class ConnectorType(StrEnum):
    """Connector names as they appear in a connection's qualified name."""

    S3 = "s3"
    GCS = "gcs"
    ADLS = "adls"
    SNOWFLAKE = "snowflake"
    DATABRICKS = "databricks"
    BIGQUERY = "bigquery"
    POSTGRES = "postgres"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "ConnectorType":
        """Case-insensitive lookup; anything unrecognised is UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class CertificateStatus(StrEnum):
    """Certification applied to a catalog asset."""

    VERIFIED = "VERIFIED"
    DRAFT = "DRAFT"
    DEPRECATED = "DEPRECATED"


class AnnouncementType(StrEnum):
    """Kind of announcement banner on a catalog asset."""

    INFORMATION = "information"
    WARNING = "warning"
    ISSUE = "issue"
