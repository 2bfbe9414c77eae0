"""Command line entry point."""

import argparse
import asyncio
import dataclasses
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from leetcode_daily.config import Settings, load_settings
from leetcode_daily.domain.exceptions import DailyChallengeError
from leetcode_daily.domain.models import RunSummary
from leetcode_daily.logging_config import configure_logging
from leetcode_daily.services import create_orchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leetcode-daily",
        description="Fetch today's LeetCode challenge and scaffold solution files per language.",
    )
    parser.add_argument(
        "--slug",
        help="Scaffold this problem (e.g. two-sum) instead of today's challenge.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Root directory for <language>/<difficulty>/ folders (default: current directory).",
    )
    parser.add_argument(
        "--no-hook",
        action="store_true",
        help="Skip the post-processing command even if one is configured.",
    )
    parser.add_argument(
        "--show-hook-output",
        action="store_true",
        help="Let the post-processing command write to this terminal.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.no_hook:
        overrides["post_hook"] = ""
    if args.show_hook_output:
        overrides["post_hook_silent"] = False
    return dataclasses.replace(settings, **overrides)


async def run(settings: Settings, title_slug: Optional[str] = None) -> RunSummary:
    async with create_orchestrator(settings) as orchestrator:
        if title_slug:
            return await orchestrator.scaffold_slug(title_slug)
        return await orchestrator.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(load_settings(), args)
    configure_logging(settings.log_level, verbose=args.verbose)

    try:
        asyncio.run(run(settings, args.slug))
    except DailyChallengeError as e:
        logger.error(str(e))
        return 1
    except Exception:
        logger.exception("Unexpected error while scaffolding the daily challenge")
        return 1

    return 0
