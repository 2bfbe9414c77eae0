"""Parser for the rendered LeetCode problemset page."""

import re

from bs4 import BeautifulSoup
from loguru import logger

from leetcode_daily.domain.exceptions import ExtractionError


class ProblemsetPageParser:
    """Finds today's challenge in the problemset page's calendar widget."""

    # Today's cell is the only calendar anchor wrapping a green badge
    DAILY_MARKER_SELECTOR = 'a[href^="/problems/"] span[class*="bg-green-s"]'
    SLUG_PATTERN = re.compile(r"/problems/([^/?#]+)")

    @classmethod
    def extract_daily_slug(cls, html: str) -> str:
        """
        Extract today's problem slug from rendered HTML.

        Raises:
            ExtractionError: If the marker or a problem link is missing
        """
        soup = BeautifulSoup(html, "lxml")

        marker = soup.select_one(cls.DAILY_MARKER_SELECTOR)
        anchor = marker.find_parent("a") if marker else None
        if anchor is None:
            raise ExtractionError("Failed to extract daily challenge: marker not found")

        href = anchor.get("href")
        match = cls.SLUG_PATTERN.match(href) if isinstance(href, str) else None
        if not match:
            raise ExtractionError(f"Failed to extract daily challenge from link: {href!r}")

        slug = match.group(1)
        logger.debug(f"Extracted daily slug from calendar: {slug}")
        return slug
