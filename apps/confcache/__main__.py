from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from domain.cache import ConfigCache, UnknownPathError
from rich.console import Console
from shared.config.loader import load_cache_settings

from apps.confcache.compose import build_cache

ALL_SCOPE = "-"


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="confcache")
    ap.add_argument("--profile", help="Config profile under configs/profiles (default: dev).")
    ap.add_argument("--quiet", action="store_true", help="Reduce console output.")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("populate", help="Normalize a directory tree into the cache.")
    p.add_argument("root", help="Root directory (environment/fabric/node/file).")

    for name, helptext in (
        ("ignore", "Mark properties as ignored."),
        ("unignore", "Clear the ignored flag on properties."),
    ):
        p = sub.add_parser(name, help=helptext)
        p.add_argument("location", help=f"env[/fabric[/node]] or '{ALL_SCOPE}' for everything.")
        p.add_argument("keys", nargs="+", metavar="KEY")

    p = sub.add_parser("list", help="Print the cached directory structure.")
    p.add_argument("path", nargs="?", default=None)
    p.add_argument("--level", type=int, default=None, help="Depth to print.")

    sub.add_parser("info", help="Summarize the cache.")
    sub.add_parser("ignored", help="List property keys flagged ignored.")
    return ap


def run(cache: ConfigCache, args: argparse.Namespace, console: Console, depth: int = 4) -> int:
    if args.command == "populate":
        n = cache.populate(args.root)
        if not args.quiet:
            console.print(f"[confcache] {n} properties added to the database.")
        return 0

    if args.command in ("ignore", "unignore"):
        location = None if args.location == ALL_SCOPE else args.location
        diag = cache.toggle_location(location, set(args.keys), args.command == "ignore")
        if diag is not None:
            console.print(diag)
            return 1
        if not args.quiet:
            console.print(f"[confcache] {args.command}d {len(args.keys)} key(s).")
        return 0

    if args.command == "list":
        level = args.level if args.level is not None else depth
        try:
            cache.print_structure(args.path, level)
        except UnknownPathError as e:
            console.print(f"[confcache] {e}")
            return 2
        return 0

    if args.command == "info":
        cache.print_info()
        return 0

    if args.command == "ignored":
        for key in sorted(cache.get_ignored()):
            console.print(key)
        return 0

    return 2


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    settings = load_cache_settings(profile=args.profile)
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    console = Console(markup=False, highlight=False)
    cache = build_cache(settings, echo=lambda text: console.print(text))
    return run(cache, args, console, depth=settings.tree_depth)


if __name__ == "__main__":
    raise SystemExit(main())
