"""Configuration values sourced from environment variables."""

import os
from typing import Final

from src.enums import Catalog

_catalog = os.getenv(key="CATALOG", default="dev")


CATALOG: Final[str] = Catalog(_catalog)
CATALOG_SCHEMA: Final[str] = os.getenv(key="CATALOG_SCHEMA", default="asset_catalog")
ASSETS_TABLE: Final[str] = os.getenv(key="ASSETS_TABLE", default="assets")
CLASSIFICATIONS_TABLE: Final[str] = os.getenv(
    key="CLASSIFICATIONS_TABLE", default="asset_classifications"
)
BATCH_SIZE: Final[int] = int(os.getenv(key="BATCH_SIZE", default="20"))
MULTI_VALUE_DELIMITER: Final[str] = os.getenv(key="MULTI_VALUE_DELIMITER", default="\n")
LOG_LEVEL: Final[str] = os.getenv(key="LOG_LEVEL", default="INFO")
LOGGER_NAME: Final[str] = os.getenv(key="LOGGER_NAME", default="asset-loader")
LOG_COLOUR_ENABLED: Final[bool] = bool(
    os.getenv(key="LOG_COLOUR_ENABLED", default="True").upper() == "TRUE"
)
