from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from shared.config.loader import load_cache_settings


def _write_profile(dirpath: Path, name: str, text: str) -> Path:
    dirpath.mkdir(parents=True, exist_ok=True)
    p = dirpath / f"{name}.toml"
    p.write_text(text, encoding="utf-8")
    return p


def test_defaults_when_no_profile_and_no_env(tmp_path: Path):
    # Empty profiles dir → fall back to model defaults
    env = {"CONFCACHE_CONFIG_DIR": str(tmp_path / "empty")}
    s = load_cache_settings(env=env, profile="dev")
    assert s.store_impl == "mongo"
    assert s.mongo_uri == "mongodb://localhost:27017"
    assert s.database == "confcache"
    assert s.collection == "properties"
    assert s.tree_depth == 4


def test_toml_overlay(tmp_path: Path):
    profiles = tmp_path / "profiles"
    _write_profile(
        profiles,
        "dev",
        """
        [cache]
        store_impl = "memory"
        database = "configs_db"
        collection = "props"
        tree_depth = 3
        """,
    )

    env = {
        "CONFCACHE_CONFIG_DIR": str(profiles),
        "CONFCACHE_PROFILE": "dev",
    }
    s = load_cache_settings(env=env)
    assert s.store_impl == "memory"
    assert s.database == "configs_db"
    assert s.collection == "props"
    assert s.tree_depth == 3


def test_env_overrides_toml(tmp_path: Path):
    profiles = tmp_path / "profiles"
    _write_profile(
        profiles,
        "dev",
        """
        [cache]
        store_impl = "memory"
        mongo_uri = "mongodb://from-toml:27017"
        """,
    )

    env: dict[str, Any] = {
        "CONFCACHE_CONFIG_DIR": str(profiles),
        "CONFCACHE_PROFILE": "dev",
        # Flat CONFCACHE_* keys override TOML
        "CONFCACHE_STORE_IMPL": "mongo",
        "CONFCACHE_mongo_uri": "mongodb://from-env:27017",
        "CONFCACHE_TREE_DEPTH": "2",  # numeric string → int
    }
    s = load_cache_settings(env=env)
    assert s.store_impl == "mongo"
    assert s.mongo_uri == "mongodb://from-env:27017"
    assert s.tree_depth == 2


def test_profile_selected_by_argument(tmp_path: Path):
    profiles = tmp_path / "custom_profiles"
    _write_profile(profiles, "ci", '[cache]\ndatabase = "ci_db"\n')

    s = load_cache_settings(env={"CONFCACHE_CONFIG_DIR": str(profiles)}, profile="ci")
    assert s.database == "ci_db"


def test_unknown_store_impl_rejected(tmp_path: Path):
    env = {"CONFCACHE_CONFIG_DIR": str(tmp_path), "CONFCACHE_STORE_IMPL": "redis"}
    with pytest.raises(ValueError):
        load_cache_settings(env=env)


def test_bad_toml_raises_runtime_error(tmp_path: Path):
    profiles = tmp_path / "profiles"
    # Intentionally broken TOML
    _write_profile(profiles, "dev", "[cache]\nthis = not_valid\n")

    env = {"CONFCACHE_CONFIG_DIR": str(profiles), "CONFCACHE_PROFILE": "dev"}

    with pytest.raises(RuntimeError):
        _ = load_cache_settings(env=env)


def test_shipped_test_profile_uses_memory_store():
    s = load_cache_settings(env={}, profile="test")
    assert s.store_impl == "memory"
    assert s.log_level == "DEBUG"
