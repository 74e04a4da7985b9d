"""Command-line access to a disk cache namespace.

    python -m syncdisk set path/to/file.js "some value"
    python -m syncdisk get path/to/file.js
    python -m syncdisk --compression gzip clear
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from syncdisk.cache import Cache
from syncdisk.errors import CacheError
from syncdisk.types.config import Compression, load_config

_KEYED = ("get", "set", "has", "remove", "path")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syncdisk", description="Inspect and edit a synchronous disk cache."
    )
    parser.add_argument("--namespace", help="Cache namespace (default from config)")
    parser.add_argument("--location", help="Parent directory (default: system temp dir)")
    parser.add_argument(
        "--compression",
        choices=[c.value for c in Compression],
        help="Compression scheme the entries were written with",
    )
    parser.add_argument("--config", help="Path to a syncdisk.toml file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("command", choices=_KEYED + ("clear",))
    parser.add_argument("key", nargs="?")
    parser.add_argument("value", nargs="?", help="Value for 'set' (stdin when omitted)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command in _KEYED and args.key is None:
        parser.error(f"'{args.command}' requires a key")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s | %(message)s",
    )
    console = Console(stderr=True)

    try:
        cache = Cache(
            args.namespace,
            load_config(args.config),
            location=args.location,
            compression=args.compression,
        )

        if args.command == "get":
            entry = cache.get(args.key)
            if not entry.is_cached:
                console.print(f"[yellow]miss[/yellow] {escape(args.key)}", highlight=False)
                return 1
            sys.stdout.write(entry.value)
        elif args.command == "set":
            value = args.value if args.value is not None else sys.stdin.read()
            path = cache.set(args.key, value)
            console.print(f"[green]stored[/green] {path}", highlight=False)
        elif args.command == "has":
            found = cache.has(args.key)
            console.print("[green]yes[/green]" if found else "[yellow]no[/yellow]")
            return 0 if found else 1
        elif args.command == "remove":
            removed = cache.remove(args.key)
            status = "removed" if removed else "not present"
            console.print(f"{status}: {escape(args.key)}", highlight=False)
        elif args.command == "path":
            sys.stdout.write(f"{cache.path_for(args.key)}\n")
        else:
            cache.clear()
            console.print(f"[green]cleared[/green] {cache.root}", highlight=False)
    except (CacheError, OSError, ValidationError) as exc:
        console.print(f"[red]error:[/red] {escape(str(exc))}", highlight=False)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
