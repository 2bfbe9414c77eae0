"""Unit tests for extracting today's slug from the rendered problemset page."""

import pytest

from leetcode_daily.domain.exceptions import ExtractionError
from leetcode_daily.infrastructure.parsers import ProblemsetPageParser

CALENDAR_HTML = """
<html><body>
  <div class="calendar">
    <a href="/problems/two-sum/" class="h-8 w-8 rounded"><span class="text-sm">1</span></a>
    <a href="/problems/trapping-rain-water/?envType=daily-question" class="h-8 w-8 rounded">
      <span class="bg-green-s dark:bg-dark-green-s rounded-full">2</span>
    </a>
    <a href="/problems/lru-cache/" class="h-8 w-8 rounded"><span class="text-sm">3</span></a>
  </div>
</body></html>
"""


def test_extracts_slug_of_highlighted_day():
    assert ProblemsetPageParser.extract_daily_slug(CALENDAR_HTML) == "trapping-rain-water"


def test_missing_marker_raises():
    html = CALENDAR_HTML.replace("bg-green-s", "bg-blue-s")

    with pytest.raises(ExtractionError):
        ProblemsetPageParser.extract_daily_slug(html)


def test_marker_outside_problem_links_is_ignored():
    html = '<div><span class="bg-green-s">today</span></div><a href="/problems/x/">x</a>'

    with pytest.raises(ExtractionError):
        ProblemsetPageParser.extract_daily_slug(html)


def test_empty_page_raises():
    with pytest.raises(ExtractionError):
        ProblemsetPageParser.extract_daily_slug("")
