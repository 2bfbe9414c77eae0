"""Headless browser fallback for discovering today's challenge."""

from typing import Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from leetcode_daily.config import Settings
from leetcode_daily.domain.exceptions import ExtractionError

from .http_client import USER_AGENT
from .parsers.problemset_parser import ProblemsetPageParser

CALENDAR_SELECTOR = '[href^="/problems/"][class*="h-8 w-8"]'
LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class BrowserDailyFinder:
    """Renders the problemset page in Chromium and reads the calendar."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        page_parser: type[ProblemsetPageParser] = ProblemsetPageParser,
    ):
        self.settings = settings or Settings()
        self.page_parser = page_parser

    async def fetch_today_slug(self) -> str:
        """
        Return today's problem slug.

        The browser is closed whether or not extraction succeeds.

        Raises:
            ExtractionError: If the page cannot be rendered or has no marker
        """
        timeout_ms = self.settings.browser_timeout * 1000
        url = self.settings.problemset_url

        async with async_playwright() as playwright:
            logger.info("Launching headless Chromium with sandbox disabled...")
            try:
                browser = await playwright.chromium.launch(headless=True, args=LAUNCH_ARGS)
            except PlaywrightError as e:
                raise ExtractionError(f"Failed to launch browser: {e}") from e

            try:
                page = await browser.new_page(user_agent=USER_AGENT)

                logger.info(f"Navigating to {url}")
                await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
                await page.wait_for_selector(CALENDAR_SELECTOR, timeout=timeout_ms)

                logger.info("Extracting daily challenge...")
                html = await page.content()
            except PlaywrightError as e:
                raise ExtractionError(f"Failed to render {url}: {e}") from e
            finally:
                await browser.close()

        slug = self.page_parser.extract_daily_slug(html)
        logger.info(f"Daily challenge (browser): {slug}")
        return slug
