"""Attach classifications to assets that already exist in the catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from src.asset_loader.ports import CatalogClient
from src.logger import LOGGER


def append_classifications(
    client: CatalogClient,
    to_classify: Mapping[str, Sequence[str]],
    type_name: str,
) -> None:
    """
    Append classifications to each asset in `to_classify` (qualified name -> names).

    Names are de-duplicated per asset, keeping first-seen order. Assets with no
    names left are skipped. Client errors propagate to the caller.
    """
    if not to_classify:
        return

    LOGGER.info("Classifying %d %s asset(s).", len(to_classify), type_name)
    for qualified_name, names in to_classify.items():
        unique = tuple(dict.fromkeys(name for name in names if name))
        if not unique:
            continue
        client.append_classifications(type_name, qualified_name, unique)
