"""Async orchestrator for fetching the daily challenge and scaffolding files."""

import asyncio
from typing import Optional

from loguru import logger

from leetcode_daily.domain.exceptions import AcquisitionExhaustedError
from leetcode_daily.domain.models import (
    AcquisitionFailure,
    AcquisitionResult,
    AcquisitionSource,
    AcquisitionStage,
    AcquisitionSuccess,
    RunSummary,
)
from leetcode_daily.infrastructure.interfaces import (
    DailySlugFinderProtocol,
    MaterializerProtocol,
    PostHookProtocol,
    RemoteClientProtocol,
)


class DailyChallengeOrchestrator:
    """
    Runs the pipeline: acquire -> fetch content -> materialize -> post hook.

    Acquisition tries the GraphQL API once and, only if that fails, the
    browser fallback once. The API path covers the content query as well, so
    a content failure there also falls back. Both failing is fatal.
    """

    def __init__(
        self,
        *,
        remote_client: RemoteClientProtocol,
        browser_finder: DailySlugFinderProtocol,
        materializer: MaterializerProtocol,
        post_hook: Optional[PostHookProtocol] = None,
    ):
        """Initialize orchestrator with dependency injection."""
        self.remote_client = remote_client
        self.browser_finder = browser_finder
        self.materializer = materializer
        self.post_hook = post_hook

    async def run(self) -> RunSummary:
        """
        Scaffold today's daily challenge.

        Raises:
            AcquisitionExhaustedError: If neither the API nor the browser
                identified the challenge
        """
        logger.info("Fetching daily LeetCode challenge...")

        acquisition = await self._acquire_via_api()
        if isinstance(acquisition, AcquisitionFailure):
            logger.error(f"Direct API call failed at {acquisition}")
            logger.info("Attempting with headless browser...")

            fallback = await self._acquire_via_browser()
            if isinstance(fallback, AcquisitionFailure):
                logger.error(f"Browser fallback failed at {fallback}")
                raise AcquisitionExhaustedError([acquisition, fallback])
            acquisition = fallback

        return await self._scaffold(acquisition)

    async def scaffold_slug(self, title_slug: str) -> RunSummary:
        """Scaffold a specific problem without asking for today's challenge."""
        logger.info(f"Creating solution files for: {title_slug}")
        return await self._scaffold(AcquisitionSuccess(title_slug, AcquisitionSource.MANUAL))

    async def _acquire_via_api(self) -> AcquisitionResult:
        logger.info("Step 1: Fetching CSRF token")
        try:
            await self.remote_client.fetch_csrf_token()
        except Exception as e:
            return AcquisitionFailure(AcquisitionStage.TOKEN, e)

        logger.info("Got CSRF token, attempting API request...")
        try:
            identity = await self.remote_client.fetch_today_challenge()
        except Exception as e:
            return AcquisitionFailure(AcquisitionStage.DAILY_QUERY, e)

        logger.info("Step 2: Fetching problem content")
        try:
            content = await self.remote_client.fetch_problem_content(
                identity.title_slug, identity=identity
            )
        except Exception as e:
            return AcquisitionFailure(AcquisitionStage.CONTENT, e)

        return AcquisitionSuccess(identity.title_slug, AcquisitionSource.API, identity, content)

    async def _acquire_via_browser(self) -> AcquisitionResult:
        try:
            title_slug = await self.browser_finder.fetch_today_slug()
        except Exception as e:
            return AcquisitionFailure(AcquisitionStage.BROWSER, e)

        return AcquisitionSuccess(title_slug, AcquisitionSource.BROWSER)

    async def _scaffold(self, acquisition: AcquisitionSuccess) -> RunSummary:
        content = acquisition.content
        if content is None:
            logger.info("Step 2: Fetching problem content")
            content = await self.remote_client.fetch_problem_content(
                acquisition.title_slug, identity=acquisition.identity
            )
        identity = content.identity
        logger.info(f"Question ID: {identity.question_id}")
        logger.info(f"Title: {identity.title}")
        logger.info(f"Difficulty: {identity.difficulty.value}")

        logger.info("Step 3: Writing solution files")
        outcomes = await asyncio.to_thread(self.materializer.materialize, content)

        summary = RunSummary(identity=identity, source=acquisition.source, outcomes=outcomes)

        logger.info("Step 4: Running post hook")
        summary.hook_succeeded = await self._run_post_hook(identity.title_slug)

        self._report(summary)
        return summary

    async def _run_post_hook(self, title_slug: str) -> Optional[bool]:
        if self.post_hook is None or not self.post_hook.enabled:
            logger.debug("No post hook configured")
            return None

        try:
            await self.post_hook.run(title_slug)
        except Exception as e:
            logger.warning(f"Post hook failed, but files were created successfully: {e}")
            return False

        return True

    def _report(self, summary: RunSummary) -> None:
        sections = (
            ("Skipped files (already have content)", summary.skipped),
            ("Updated empty files", summary.updated),
            ("Newly created files", summary.created),
        )
        for header, paths in sections:
            if not paths:
                continue
            logger.info(f"{header}:")
            for path in paths:
                logger.info(f"  {path}")

        logger.info(
            f"Done ({summary.source.value}): {len(summary.created)} created, "
            f"{len(summary.updated)} updated, {len(summary.skipped)} skipped"
        )
