from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from ports.parser import DirectoryParserPort
from ports.store import DocumentStorePort
from shared.contracts.v1.property import PropertyRecord

from .filters import Filter
from .ignore import toggle_ignore

LOG: Final = logging.getLogger(__name__)

IgnoreDeclarations = dict[Filter, set[str]]


def populate(store: DocumentStorePort, parser: DirectoryParserPort, root: Path | str) -> int:
    """
    Normalize every parsed file under ``root`` into property records.

    Each file location is replaced (delete, then insert) on its own, so a
    file that now yields nothing still clears its old records. Marker files
    contribute no records; their keys are flagged ignored once every data
    file has been written. Returns the number of records inserted.
    """
    declarations: IgnoreDeclarations = {}
    count = 0

    for parsed in parser.parse(Path(root)):
        flt = Filter.from_metadata(parsed.metadata)

        if parsed.is_marker:
            declarations.setdefault(flt, set()).update(parsed.data)
            continue

        docs = [
            PropertyRecord(
                key=key, value=str(value), metadata=dict(parsed.metadata)
            ).to_document()
            for key, value in parsed.data.items()
        ]

        removed = store.delete_many(flt.as_query())
        if docs:
            store.insert_many(docs)
        count += len(docs)
        LOG.debug("%s: replaced %d record(s) with %d", flt, removed, len(docs))

    for flt, keys in declarations.items():
        if not keys:
            continue
        diag = toggle_ignore(store, flt, keys, True)
        if diag is not None:
            LOG.warning("Ignore declaration at %s not applied: %s", flt.scoped(), diag)

    LOG.info("Populated %d properties from %s", count, root)
    return count
