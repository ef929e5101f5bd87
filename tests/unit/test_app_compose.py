from __future__ import annotations

from adapters.fs_parser import DirectoryParser
from adapters.store_memory import InMemoryDocumentStore
from domain.cache import ConfigCache
from ports.store import DocumentStorePort

from apps.confcache.compose import build_cache, build_store
from apps.confcache.settings import CacheSettings


def test_compose_memory_store():
    settings = CacheSettings(store_impl="memory")
    store = build_store(settings)

    assert isinstance(store, DocumentStorePort)
    assert isinstance(store, InMemoryDocumentStore)
    assert store.count() == 0


def test_build_cache_wires_parser_and_echo():
    out: list[str] = []
    cache = build_cache(CacheSettings(store_impl="memory"), echo=out.append)

    assert isinstance(cache, ConfigCache)
    assert isinstance(cache.parser, DirectoryParser)
    cache.print_info()
    assert out and "0 properties" in out[0]
