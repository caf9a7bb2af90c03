#!/usr/bin/env python3
"""Dump every collection the pymova stores can load.

Reloads the activities, info pages and news stores for one language and
prints the parsed items, optionally with the raw backend JSON, so you can
spot fields that aren't mapped yet.

Usage
-----
Set environment variables and run::

    export MOVA_BASE_URL="https://cms.example.org/data"
    python scripts/dump_content.py --language de

Options::

    --language CODE      Language to load (default: MOVA_DEFAULT_LANGUAGE)
    --search KEYWORD     Also run an info page search
    --raw                Print the raw JSON of every item
    --json               Output as machine-readable JSON
    --output FILE        Write JSON output to FILE instead of stdout
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pymova import ContentItem, MovaConfig, MovaContext  # noqa: E402
from pymova.store import ContentStore  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _format_item(item: ContentItem, *, raw: bool) -> list[str]:
    lines = [f"  - [{item.id}] {item.title or '<untitled>'}"]
    for key, value in item.model_dump(exclude={"id", "title", "raw", "content"}).items():
        if value in (None, "", False):
            continue
        lines.append(f"      {key}: {value}")
    if item.content:
        preview = item.content.replace("\n", " ")
        lines.append(f"      content: {preview[:80]}{'…' if len(preview) > 80 else ''}")
    if raw:
        lines.append(json.dumps(item.raw, indent=2, default=str, ensure_ascii=False))
    return lines


def _dump_store(store: ContentStore[Any], loaded: bool, *, raw: bool, out: list[str]) -> dict[str, Any]:
    out.append(_section(f"{store.collection.upper()}  ({len(store.get())} items)"))
    if not loaded:
        out.append("  !! reload failed, see log output")
    for item in store.get():
        out.extend(_format_item(item, raw=raw))
    return {
        "loaded": loaded,
        "items": [item.model_dump(mode="json", exclude={"raw"}) for item in store.get()],
    }


# ── main ─────────────────────────────────────────────────────


async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Dump all content pymova can load for debugging / development.",
    )
    parser.add_argument("--language", help="Language to load (default: MOVA_DEFAULT_LANGUAGE)")
    parser.add_argument("--search", help="Also run an info page search for KEYWORD")
    parser.add_argument("--raw", action="store_true", help="Print the raw JSON of every item")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--output", "-o", help="Write JSON output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = MovaConfig.from_env()
    result: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "base_url": config.base_url,
        "collections": {},
    }

    out: list[str] = []
    out.append(_section("pymova dump_content"))
    out.append(f"  time      : {result['timestamp']}")
    out.append(f"  backend   : {config.base_url}")

    async with MovaContext(config) as ctx:
        if args.language:
            await ctx.languages.set_language(args.language)
            for store in ctx.stores:
                await store.join()
        language = await ctx.languages.get_current_language_async()
        result["language"] = language
        out.append(f"  language  : {language}")
        out.append(f"  reachable : {await ctx.backend.check_availability()}")

        loaded = await ctx.reload_all()
        for store in ctx.stores:
            result["collections"][store.collection] = _dump_store(
                store, loaded[store.collection], raw=args.raw, out=out
            )

        if args.search is not None:
            hits = ctx.infopages.search(args.search)
            out.append(_section(f"SEARCH infopages for {args.search!r}  ({len(hits)} hits)"))
            for page in hits:
                out.extend(_format_item(page, raw=False))
            result["search"] = {"keyword": args.search, "ids": [page.id for page in hits]}

    # ── Output ──
    if args.json_mode or args.output:
        payload = json.dumps(result, indent=2, default=str, ensure_ascii=False)
        if args.output:
            Path(args.output).write_text(payload, encoding="utf-8")
            print(f"JSON written to {args.output}", file=sys.stderr)
        else:
            print(payload)
    else:
        print("\n".join(out))


if __name__ == "__main__":
    asyncio.run(main())
