"""CLI entrypoint: python -m credit_resolver"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from credit_resolver.clients.config import ClientConfig
from credit_resolver.clients.musicbrainz import MusicBrainzClient
from credit_resolver.config import ResolverConfig
from credit_resolver.entities.caches import build_entity_cache, build_name_cache
from credit_resolver.entities.resolver import RelationshipLog, ResolutionOrchestrator
from credit_resolver.entities.storage import FileStore
from credit_resolver.parsing.notice import parse_copyright_notice
from credit_resolver.terminal import TerminalConfirmation
from credit_resolver.workflow import CopyrightNoticeWorkflow

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="credit-resolver",
        description="Parse copyright notices and resolve their owners on MusicBrainz",
    )
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="Print the statements of a notice as JSON")
    parse_cmd.add_argument("text", nargs="*", help="Notice text (default: stdin)")

    resolve_cmd = sub.add_parser("resolve", help="Resolve the owners and create relationships")
    resolve_cmd.add_argument("text", nargs="*", help="Credit lines (default: stdin)")
    resolve_cmd.add_argument("--automatic", action="store_true",
                             help="Take the first search result without asking")
    resolve_cmd.add_argument("--base-url", default="https://musicbrainz.org",
                             help="MusicBrainz server (default: https://musicbrainz.org)")
    resolve_cmd.add_argument("--cache-dir", type=Path, default=None,
                             help="Directory of the name cache (default: ~/.cache/credit-resolver)")
    resolve_cmd.add_argument("--entity-type", default="label",
                             help="Type of the copyright owners (default: label)")
    resolve_cmd.add_argument("--clear-cache", action="store_true",
                             help="Forget all learned name mappings first")

    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> ResolverConfig:
    config = ResolverConfig(
        client=ClientConfig(base_url=args.base_url),
        entity_type=args.entity_type,
    )
    if args.cache_dir is not None:
        config.cache_dir = args.cache_dir
    return config


def _read_text(args: argparse.Namespace) -> str:
    if args.text:
        return "\n".join(args.text)
    return sys.stdin.read()


def _run_parse(args: argparse.Namespace) -> int:
    statements = parse_copyright_notice(_read_text(args))
    json.dump([s.to_dict() for s in statements], sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0 if statements else 1


async def _resolve(config: ResolverConfig, text: str, automatic_mode: bool, clear: bool) -> int:
    name_cache = build_name_cache(FileStore(config.cache_dir), config.name_cache_name)
    sink = RelationshipLog()

    async with MusicBrainzClient(config.client) as client:
        entity_cache = build_entity_cache(client)
        orchestrator = ResolutionOrchestrator(
            entity_cache,
            name_cache,
            client,
            sink,
            lambda draft: TerminalConfirmation(draft, lookup=entity_cache.get),
            entity_type=config.entity_type,
        )
        workflow = CopyrightNoticeWorkflow(orchestrator, name_cache)
        if clear:
            name_cache.clear()
        else:
            workflow.load()
        result = await workflow.run(text, automatic_mode)

    for rel in sink.relationships:
        print(json.dumps({
            "id": rel.id,
            "source_type": rel.source_type,
            "link_type_id": rel.link_type_id,
            "target": {"id": rel.target.id, "name": rel.target.name},
            "year": rel.begin_year,
            "sources": [s.id for s in rel.sources],
        }, ensure_ascii=False))
    if result.skipped_lines:
        logger.info("Skipped lines:\n%s", result.remaining_text)
    return 0 if result.parsed_lines else 1


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command == "parse":
        return _run_parse(args)

    config = build_config(args)
    text = _read_text(args)
    return asyncio.run(_resolve(config, text, args.automatic, args.clear_cache))


if __name__ == "__main__":
    sys.exit(main())
