from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from apps.confcache.settings import CacheSettings

ENV_PREFIX = "CONFCACHE_"

# --- paths --------------------------------------------------------------------


def _repo_root() -> Path:
    """Heuristic: walk up from this file until we find pyproject.toml."""
    p = Path(__file__).resolve()
    for ancestor in [p, *p.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return Path.cwd()


def _profiles_dir(env: Mapping[str, str]) -> Path:
    # CONFCACHE_CONFIG_DIR points *at* profiles/
    override = env.get(f"{ENV_PREFIX}CONFIG_DIR")
    if override:
        return Path(override)
    return _repo_root() / "configs" / "profiles"


def _load_profile_table(env: Mapping[str, str], profile: str) -> dict[str, Any]:
    f = _profiles_dir(env) / f"{profile}.toml"
    if not f.exists():
        return {}
    text = f.read_text("utf-8")
    try:
        return tomllib.loads(text)
    except Exception as e:
        raise RuntimeError(f"Failed to parse profile TOML: {f}") from e


# --- env overlay helpers ------------------------------------------------------


def _coerce_env_value(raw: str) -> Any:
    """
    Try to parse JSON first (so numbers/bools work),
    then fall back to the original string.
    """
    try:
        return json.loads(raw)
    except Exception:
        return raw


def _collect_env_for(
    fields: set[str], env: Mapping[str, str], prefix: str = ENV_PREFIX
) -> dict[str, Any]:
    """
    Collect overrides like CONFCACHE_STORE_IMPL -> {'store_impl': '...'}.
    Case-insensitive after the prefix.
    """
    out: dict[str, Any] = {}
    upper_to_field = {f.upper(): f for f in fields}
    plen = len(prefix)
    for k, v in env.items():
        if not k.startswith(prefix):
            continue
        key = k[plen:].upper()
        if key in upper_to_field:
            out[upper_to_field[key]] = _coerce_env_value(v)
    return out


# --- public API ---------------------------------------------------------------


def load_cache_settings(
    env: Mapping[str, str] | None = None, profile: str | None = None
) -> CacheSettings:
    """
    Merge defaults (CacheSettings) <- TOML [cache] <- env CONFCACHE_*.
    Env examples: CONFCACHE_STORE_IMPL=memory, CONFCACHE_MONGO_URI=mongodb://db:27017
    """
    env = os.environ if env is None else env
    profile = (profile or env.get(f"{ENV_PREFIX}PROFILE") or "dev").strip()

    # model_construct skips BaseSettings' own env read; env is overlaid below
    base = CacheSettings.model_construct().model_dump()

    toml_table = _load_profile_table(env, profile)
    toml_cache = toml_table.get("cache", {}) if isinstance(toml_table, dict) else {}
    if isinstance(toml_cache, dict):
        base.update(toml_cache)

    env_over = _collect_env_for(set(base.keys()), env)
    base.update(env_over)

    return CacheSettings.model_validate(base)
