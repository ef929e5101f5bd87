from __future__ import annotations

from ports.store import DocumentStorePort
from shared.contracts.v1.info import CacheInfo

from .tree import ENV_LEVEL, FABRIC_LEVEL, FILE_LEVEL, NODE_LEVEL, DirTree, build_tree


def collect_info(store: DocumentStorePort, tree: DirTree | None = None) -> CacheInfo:
    tree = tree or build_tree(store)
    root = tree.root
    return CacheInfo(
        properties=store.count(),
        environments=tree.count_nodes(root, ENV_LEVEL, True),
        fabrics=tree.count_nodes(root, FABRIC_LEVEL, True),
        nodes=tree.count_nodes(root, NODE_LEVEL, True),
        files=tree.count_nodes(root, FILE_LEVEL, False),
        environment_names=sorted(str(e) for e in store.distinct("environment")),
    )


def format_info(info: CacheInfo) -> str:
    lines = [
        f"There are currently {info.properties} properties in the database.",
        "",
        f"environments\t\t{info.environments} (see below)",
        f" > fabrics\t\t{info.fabrics}",
        f"   - nodes\t\t{info.nodes}",
        f"     - files\t\t{info.files}",
    ]
    if info.environment_names:
        lines += ["", "Environments:"]
        lines += [f"{i}. {env}" for i, env in enumerate(info.environment_names, start=1)]
    lines += ["", "Use the 'list' command to see a detailed database structure."]
    return "\n".join(lines)


def get_ignored(store: DocumentStorePort) -> set[str]:
    return {str(k) for k in store.distinct("key", {"ignore": "true"})}
