"""GraphQL client for LeetCode's daily challenge and problem data."""

import asyncio
import re
from typing import Any, Optional, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from leetcode_daily.config import Settings
from leetcode_daily.domain.exceptions import RemoteQueryError, TokenNotFoundError
from leetcode_daily.domain.models import ChallengeIdentity, ProblemContent

from .http_client import AsyncHTTPClient
from .schemas import (
    DailyChallenge,
    GraphQLResponse,
    QuestionContent,
    QuestionEditorData,
    QuestionIdentity,
)

CSRF_TOKEN_PATTERN = re.compile(r"var csrfToken = '([^']+)'")

DAILY_QUERY = """
query questionOfToday {
  activeDailyCodingChallengeQuestion {
    question {
      questionId
      title
      titleSlug
      difficulty
    }
  }
}
"""

CONTENT_QUERY = """
query questionContent($titleSlug: String!) {
  question(titleSlug: $titleSlug) {
    content
    mysqlSchemas
  }
}
"""

EDITOR_QUERY = """
query questionEditorData($titleSlug: String!) {
  question(titleSlug: $titleSlug) {
    codeSnippets {
      lang
      langSlug
      code
    }
  }
}
"""

QUESTION_DATA_QUERY = """
query questionData($titleSlug: String!) {
  question(titleSlug: $titleSlug) {
    questionId
    title
    titleSlug
    difficulty
  }
}
"""

PAGE_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8",
    "Upgrade-Insecure-Requests": "1",
}

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class LeetCodeGraphQLClient:
    """Client for the LeetCode GraphQL endpoint."""

    def __init__(self, http_client: AsyncHTTPClient, settings: Optional[Settings] = None):
        """
        Initialize client.

        Args:
            http_client: Async HTTP client instance
            settings: Endpoint URLs and request pacing
        """
        self.http_client = http_client
        self.settings = settings or Settings()
        self.csrf_token: Optional[str] = None

    async def fetch_csrf_token(self) -> str:
        """Scrape the CSRF token embedded in the LeetCode landing page."""
        url = f"{self.settings.base_url}/"
        logger.debug(f"Fetching CSRF token from {url}")

        html = await self.http_client.get_text(url, headers=PAGE_HEADERS)
        match = CSRF_TOKEN_PATTERN.search(html)
        if not match:
            raise TokenNotFoundError(f"CSRF token not found on {url}")

        self.csrf_token = match.group(1)
        return self.csrf_token

    async def fetch_today_challenge(self) -> ChallengeIdentity:
        """Query the active daily coding challenge."""
        if self.csrf_token is None:
            await self.fetch_csrf_token()

        await asyncio.sleep(self.settings.query_delay)
        data = await self._query(DAILY_QUERY)
        daily = self._parse(DailyChallenge, data.get("activeDailyCodingChallengeQuestion"), "daily challenge")

        identity = daily.question.to_domain()
        logger.info(f"Daily challenge (API): {identity}")
        return identity

    async def fetch_problem_content(
        self,
        title_slug: str,
        identity: Optional[ChallengeIdentity] = None,
    ) -> ProblemContent:
        """
        Fetch statement and code snippets for a problem.

        Statement and snippets are queried concurrently. When the caller has
        no identity yet (browser fallback), a third query resolves it.

        Raises:
            RemoteQueryError: If any of the queries fails
        """
        await asyncio.sleep(self.settings.content_delay)

        variables = {"titleSlug": title_slug}
        queries = [CONTENT_QUERY, EDITOR_QUERY]
        if identity is None:
            queries.append(QUESTION_DATA_QUERY)

        results = await self._query_all(queries, variables)

        content = self._parse(QuestionContent, results[0].get("question"), title_slug)
        editor = self._parse(QuestionEditorData, results[1].get("question"), title_slug)
        if identity is None:
            identity = self._parse(QuestionIdentity, results[2].get("question"), title_slug).to_domain()

        snippets = tuple(snippet.to_domain() for snippet in editor.code_snippets or [])
        logger.debug(f"Fetched {len(snippets)} code snippet(s) for {title_slug}")

        return ProblemContent(
            identity=identity,
            content=content.content or "",
            code_snippets=snippets,
        )

    async def _query_all(self, queries: list[str], variables: dict[str, Any]) -> list[dict[str, Any]]:
        """Run queries concurrently; the first failure cancels the rest."""
        tasks = [asyncio.ensure_future(self._query(query, variables)) for query in queries]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    def _graphql_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Referer": self.settings.problemset_url,
            "Origin": self.settings.base_url,
            "X-Requested-With": "XMLHttpRequest",
            "Accept": "application/json, text/javascript, */*; q=0.01",
        }
        if self.csrf_token:
            headers["X-CSRFToken"] = self.csrf_token
        return headers

    async def _query(self, query: str, variables: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        raw = await self.http_client.post_json(
            self.settings.graphql_url, payload, headers=self._graphql_headers()
        )
        response = self._parse(GraphQLResponse, raw, "GraphQL envelope")

        if response.errors:
            messages = "; ".join(error.message for error in response.errors)
            raise RemoteQueryError(f"GraphQL errors: {messages}")
        if response.data is None:
            raise RemoteQueryError("GraphQL response contained no data")

        return response.data

    @staticmethod
    def _parse(schema: type[SchemaT], raw: Any, what: str) -> SchemaT:
        if raw is None:
            raise RemoteQueryError(f"No data returned for {what}")
        try:
            return schema.model_validate(raw)
        except ValidationError as e:
            raise RemoteQueryError(f"Malformed payload for {what}: {e}") from e
