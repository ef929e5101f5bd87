from __future__ import annotations

from pydantic import BaseModel


class CacheInfo(BaseModel):
    properties: int = 0
    environments: int = 0
    fabrics: int = 0
    nodes: int = 0
    files: int = 0
    environment_names: list[str] = []
