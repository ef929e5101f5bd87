from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Final

from adapters.fs_parser import DirectoryParser
from domain.cache import ConfigCache
from ports.store import DocumentStorePort

from apps.confcache.settings import CacheSettings

LOG: Final = logging.getLogger("confcache")


def build_store(settings: CacheSettings) -> DocumentStorePort:
    store: DocumentStorePort

    if settings.store_impl == "mongo":
        from adapters.store_mongo import MongoDocumentStore

        store = MongoDocumentStore.from_settings(settings)
        LOG.debug("Using mongo store %s/%s", settings.database, settings.collection)
    else:
        from adapters.store_memory import InMemoryDocumentStore

        store = InMemoryDocumentStore.create()
        LOG.debug("Using in-memory store")

    return store


def build_cache(
    settings: CacheSettings, echo: Callable[[str], None] = print
) -> ConfigCache:
    return ConfigCache(store=build_store(settings), parser=DirectoryParser(), echo=echo)
