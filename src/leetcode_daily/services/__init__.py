from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from loguru import logger

from leetcode_daily.config import Settings
from leetcode_daily.services.materializer import SolutionFileMaterializer

if TYPE_CHECKING:
    from leetcode_daily.application import DailyChallengeOrchestrator


@asynccontextmanager
async def create_orchestrator(settings: Settings) -> AsyncIterator["DailyChallengeOrchestrator"]:
    """Factory that wires the orchestrator and closes the HTTP client afterwards."""
    from leetcode_daily.application import DailyChallengeOrchestrator
    from leetcode_daily.infrastructure import (
        AsyncHTTPClient,
        BrowserDailyFinder,
        LeetCodeGraphQLClient,
        PostHookRunner,
    )

    http_client = AsyncHTTPClient(timeout=settings.request_timeout)

    try:
        yield DailyChallengeOrchestrator(
            remote_client=LeetCodeGraphQLClient(http_client, settings),
            browser_finder=BrowserDailyFinder(settings),
            materializer=SolutionFileMaterializer(settings.output_dir),
            post_hook=PostHookRunner(settings.post_hook, silent=settings.post_hook_silent),
        )
    finally:
        await http_client.close()
        logger.debug("HTTP client closed")


__all__ = ["SolutionFileMaterializer", "create_orchestrator"]
