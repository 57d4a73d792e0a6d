#!/usr/bin/env python3
"""Command-line front end for a worldwise cities backend.

Drives a :class:`worldwise.CitiesStore` through :class:`worldwise.CitiesProvider`
and prints the resulting snapshot.

Backend origin:
- --base-url (fallback: WORLDWISE_BASE_URL, then http://localhost:9000)

Examples:
    worldwise_cli.py list
    worldwise_cli.py show 73930385
    worldwise_cli.py add --name Lisbon --country Portugal --emoji 🇵🇹 --lat 38.72 --lng -9.14
    worldwise_cli.py delete 73930385
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from worldwise import CitiesProvider, CitiesStore, WorldwiseConfig  # noqa: E402
from worldwise.display import render_city, render_city_row  # noqa: E402


def _print_state(store: CitiesStore) -> int:
    if store.error:
        print(f"error: {store.error}", file=sys.stderr)
        failure = store.state.failure
        if failure is not None and failure.detail:
            print(f"  ({failure.kind}: {failure.detail})", file=sys.stderr)
        return 1
    return 0


async def _cmd_list(store: CitiesStore, _args: argparse.Namespace) -> int:
    if store.error:
        return _print_state(store)
    if not store.cities:
        print("Add your first city by clicking on a city on the map")
        return 0
    for city in store.cities:
        print(render_city_row(city))
    return 0


async def _cmd_show(store: CitiesStore, args: argparse.Namespace) -> int:
    await store.load_one(args.id)
    if store.error or store.current_city is None:
        return _print_state(store)
    print(render_city(store.current_city))
    return 0


async def _cmd_add(store: CitiesStore, args: argparse.Namespace) -> int:
    draft: dict[str, Any] = {
        "cityName": args.name,
        "country": args.country,
        "emoji": args.emoji,
        "date": args.date or datetime.now(UTC).isoformat(),
        "notes": args.notes,
        "position": {"lat": args.lat, "lng": args.lng},
    }
    await store.create(draft)
    if store.error or store.current_city is None:
        return _print_state(store)
    print(f"Created city {store.current_city.id}")
    print(render_city(store.current_city))
    return 0


async def _cmd_delete(store: CitiesStore, args: argparse.Namespace) -> int:
    await store.remove(args.id)
    if store.error:
        return _print_state(store)
    print(f"Deleted city {args.id}; {len(store.cities)} remaining")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage visited cities on a worldwise backend")
    parser.add_argument("--base-url", help="Backend origin (default: WORLDWISE_BASE_URL or http://localhost:9000)")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds (default: none)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all cities").set_defaults(handler=_cmd_list, load_all=True)

    show = sub.add_parser("show", help="Show one city")
    show.add_argument("id")
    show.set_defaults(handler=_cmd_show, load_all=False)

    add = sub.add_parser("add", help="Add a visited city")
    add.add_argument("--name", required=True)
    add.add_argument("--country")
    add.add_argument("--emoji")
    add.add_argument("--date", help="ISO-8601 visit date (default: now)")
    add.add_argument("--notes")
    add.add_argument("--lat", type=float, required=True)
    add.add_argument("--lng", type=float, required=True)
    add.set_defaults(handler=_cmd_add, load_all=True)

    delete = sub.add_parser("delete", help="Delete a city")
    delete.add_argument("id")
    delete.set_defaults(handler=_cmd_delete, load_all=True)

    return parser


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {"load_on_start": args.load_all}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    config = WorldwiseConfig.from_env(**overrides)

    async with CitiesProvider(config) as store:
        result: int = await args.handler(store, args)
        return result


def main() -> int:
    args = _build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
