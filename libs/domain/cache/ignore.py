from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from ports.store import DocumentStorePort
from shared.contracts.v1.property import ignore_flag

from .filters import Filter

LOG: Final = logging.getLogger(__name__)

INVALID_PATH: Final = "[ERROR] Invalid path."
NO_MATCH: Final = "No matching properties found."


def _exists(store: DocumentStorePort, query: dict) -> bool:
    return next(store.find(query), None) is not None


def toggle_ignore(
    store: DocumentStorePort,
    flt: Filter | None,
    keys: Iterable[str],
    on: bool,
) -> str | None:
    """
    Set ``ignore`` on every record under ``flt`` whose key is in ``keys``.
    Returns None on success, else INVALID_PATH or NO_MATCH.
    Keys with no record in scope are skipped silently.
    """
    scope = (flt or Filter()).scoped().as_query()

    if not _exists(store, scope):
        return INVALID_PATH

    query = {"key": {"$in": sorted(set(keys))}, **scope}
    if not _exists(store, query):
        return NO_MATCH

    n = store.update_many(query, {"ignore": ignore_flag(on)})
    LOG.debug("ignore=%s on %d record(s) under %s", on, n, flt or "<all>")
    return None


def toggle_location(
    store: DocumentStorePort,
    location: str | None,
    keys: Iterable[str],
    on: bool,
) -> str | None:
    flt = Filter.from_location(location) if location is not None else None
    return toggle_ignore(store, flt, keys, on)
