"""Spreadsheet column headers recognised by the loader."""

from typing import Final

# connection
COL_CONNECTOR: Final[str] = "CONNECTOR"
COL_CONNECTION: Final[str] = "CONNECTION"

# object-store hierarchy
COL_ACCOUNT: Final[str] = "ACCOUNT NAME"
COL_BUCKET_NAME: Final[str] = "BUCKET NAME"
COL_BUCKET_ARN: Final[str] = "BUCKET ARN"
COL_OBJECT_NAME: Final[str] = "OBJECT NAME"

# common asset metadata
COL_DESCRIPTION: Final[str] = "DESCRIPTION"
COL_CERTIFICATE: Final[str] = "CERTIFICATE"
COL_CERTIFICATE_MESSAGE: Final[str] = "CERTIFICATE MESSAGE"
COL_ANNOUNCEMENT: Final[str] = "ANNOUNCEMENT"
COL_ANNOUNCEMENT_TITLE: Final[str] = "ANNOUNCEMENT TITLE"
COL_ANNOUNCEMENT_MESSAGE: Final[str] = "ANNOUNCEMENT MESSAGE"
COL_OWNER_USERS: Final[str] = "OWNER USERS"
COL_OWNER_GROUPS: Final[str] = "OWNER GROUPS"
COL_CLASSIFICATIONS: Final[str] = "CLASSIFICATIONS"
