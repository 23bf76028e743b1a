"""
Catalog client backed by two Delta tables.

- assets: one row per asset, keyed by qualified_name.
- classifications: one row per (qualified_name, classification).

Both writes are MERGEs, so replaying the same load leaves the tables unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

import pyspark.sql.types as T
from delta.tables import DeltaTable
from pyspark.sql import SparkSession

from src import settings
from src.asset_loader.assets import Asset
from src.asset_loader.config.profile import LoaderProfile, default_table_name
from src.logger import LOGGER

ASSETS_SCHEMA = T.StructType(
    [
        T.StructField("qualified_name", T.StringType(), nullable=False),
        T.StructField("type_name", T.StringType(), nullable=False),
        T.StructField("name", T.StringType(), nullable=False),
        T.StructField("connection_qualified_name", T.StringType(), nullable=False),
        T.StructField("parent_qualified_name", T.StringType(), nullable=True),
        T.StructField("aws_arn", T.StringType(), nullable=True),
        T.StructField("description", T.StringType(), nullable=True),
        T.StructField("certificate_status", T.StringType(), nullable=True),
        T.StructField("certificate_status_message", T.StringType(), nullable=True),
        T.StructField("announcement_type", T.StringType(), nullable=True),
        T.StructField("announcement_title", T.StringType(), nullable=True),
        T.StructField("announcement_message", T.StringType(), nullable=True),
        T.StructField("owner_users", T.ArrayType(T.StringType()), nullable=True),
        T.StructField("owner_groups", T.ArrayType(T.StringType()), nullable=True),
    ]
)

CLASSIFICATIONS_SCHEMA = T.StructType(
    [
        T.StructField("qualified_name", T.StringType(), nullable=False),
        T.StructField("type_name", T.StringType(), nullable=False),
        T.StructField("classification", T.StringType(), nullable=False),
    ]
)

# Record keys that point at the asset's parent.
_PARENT_KEYS = ("adls_account_qualified_name",)


class DeltaCatalogClient:
    """Persists assets and their classifications in Delta tables."""

    def __init__(
        self,
        spark: SparkSession,
        assets_table: str | None = None,
        classifications_table: str | None = None,
    ) -> None:
        self.spark = spark
        self.assets_table = assets_table or default_table_name(settings.ASSETS_TABLE)
        self.classifications_table = classifications_table or default_table_name(
            settings.CLASSIFICATIONS_TABLE
        )

    @classmethod
    def from_profile(cls, spark: SparkSession, profile: LoaderProfile) -> DeltaCatalogClient:
        """Client writing to the tables named in a loader profile."""
        return cls(spark, profile.assets_table, profile.classifications_table)

    # ---------- setup ----------

    def ensure_tables(self) -> None:
        """Create both tables if they do not already exist."""
        for table_name, schema in (
            (self.assets_table, ASSETS_SCHEMA),
            (self.classifications_table, CLASSIFICATIONS_SCHEMA),
        ):
            DeltaTable.createIfNotExists(self.spark).tableName(table_name).addColumns(
                schema
            ).execute()

    # ---------- CatalogClient ----------

    def upsert_assets(self, assets: Sequence[Asset]) -> None:
        """Insert new assets and overwrite existing ones, matched on qualified name."""
        if not assets:
            return
        rows = [_asset_row(asset) for asset in assets]
        source = self.spark.createDataFrame(rows, schema=ASSETS_SCHEMA)
        self._merge(
            self.assets_table,
            source,
            condition="t.qualified_name = s.qualified_name",
            update=True,
        )
        LOGGER.info("Upserted %d asset(s) into %s.", len(rows), self.assets_table)

    def append_classifications(
        self, type_name: str, qualified_name: str, classifications: Sequence[str]
    ) -> None:
        """Insert classification rows the asset does not already carry."""
        if not classifications:
            return
        rows = [
            (qualified_name, type_name, classification)
            for classification in dict.fromkeys(classifications)
        ]
        source = self.spark.createDataFrame(rows, schema=CLASSIFICATIONS_SCHEMA)
        self._merge(
            self.classifications_table,
            source,
            condition=(
                "t.qualified_name = s.qualified_name AND t.classification = s.classification"
            ),
            update=False,
        )

    # ---------- helpers ----------

    def _merge(self, table_name: str, source, *, condition: str, update: bool) -> None:
        if not self.spark.catalog.tableExists(table_name):
            raise ValueError(f"Cannot merge into {table_name}: table does not exist.")
        target = DeltaTable.forName(self.spark, table_name)
        merge = target.alias("t").merge(source=source.alias("s"), condition=condition)
        if update:
            merge = merge.whenMatchedUpdateAll()
        merge.whenNotMatchedInsertAll().execute()


def _asset_row(asset: Asset) -> dict[str, object]:
    """Project an asset record onto ASSETS_SCHEMA columns."""
    record = asset.to_record()
    parent = next((record[key] for key in _PARENT_KEYS if record.get(key)), None)
    row = {field.name: record.get(field.name) for field in ASSETS_SCHEMA.fields}
    row["parent_qualified_name"] = parent
    return row
