from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONFCACHE_", extra="ignore")

    # choose store impl
    store_impl: Literal["memory", "mongo"] = "mongo"

    mongo_uri: str = "mongodb://localhost:27017"
    database: str = "confcache"
    collection: str = "properties"

    log_level: str = "INFO"
    tree_depth: int = 4  # default depth for `list`
