"""Details shared by every asset described on a spreadsheet row."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from src.asset_loader.columns import (
    COL_ANNOUNCEMENT,
    COL_ANNOUNCEMENT_MESSAGE,
    COL_ANNOUNCEMENT_TITLE,
    COL_CERTIFICATE,
    COL_CERTIFICATE_MESSAGE,
    COL_CLASSIFICATIONS,
    COL_DESCRIPTION,
    COL_OWNER_GROUPS,
    COL_OWNER_USERS,
)
from src.asset_loader.rows import Row, get_value, split_multi_value
from src.enums import AnnouncementType, CertificateStatus
from src.logger import LOGGER

_E = TypeVar("_E", bound=StrEnum)


@dataclass(frozen=True, kw_only=True)
class AssetDetails:
    """
    Common, optional metadata for an asset.

    Multi-value fields are tuples in the order they appeared in the cell.
    """

    description: str | None = None
    certificate: CertificateStatus | None = None
    certificate_status_message: str | None = None
    announcement_type: AnnouncementType | None = None
    announcement_title: str | None = None
    announcement_message: str | None = None
    owner_users: tuple[str, ...] = ()
    owner_groups: tuple[str, ...] = ()
    classifications: tuple[str, ...] = ()

    @staticmethod
    def common_fields_from_row(row: Row, delimiter: str) -> dict[str, Any]:
        """Read the common metadata columns into keyword arguments for a details class."""
        return {
            "description": get_value(row, COL_DESCRIPTION),
            "certificate": _parse_enum(CertificateStatus, get_value(row, COL_CERTIFICATE)),
            "certificate_status_message": get_value(row, COL_CERTIFICATE_MESSAGE),
            "announcement_type": _parse_enum(AnnouncementType, get_value(row, COL_ANNOUNCEMENT)),
            "announcement_title": get_value(row, COL_ANNOUNCEMENT_TITLE),
            "announcement_message": get_value(row, COL_ANNOUNCEMENT_MESSAGE),
            "owner_users": split_multi_value(get_value(row, COL_OWNER_USERS), delimiter),
            "owner_groups": split_multi_value(get_value(row, COL_OWNER_GROUPS), delimiter),
            "classifications": split_multi_value(get_value(row, COL_CLASSIFICATIONS), delimiter),
        }


def _parse_enum(enum_type: type[_E], value: str | None) -> _E | None:
    """Case-insensitive match on member name or value; unknown values are dropped."""
    if value is None:
        return None
    wanted = value.strip().upper()
    for member in enum_type:
        if member.name == wanted or member.value.upper() == wanted:
            return member
    LOGGER.warning("Ignoring unrecognised %s value: %s", enum_type.__name__, value)
    return None
