"""Unit tests for the GraphQL client against a mocked transport."""

import asyncio
import json

import httpx
import pytest

from leetcode_daily.config import Settings
from leetcode_daily.domain.exceptions import RemoteQueryError, TokenNotFoundError
from leetcode_daily.domain.models import ChallengeIdentity, Difficulty
from leetcode_daily.infrastructure.http_client import AsyncHTTPClient
from leetcode_daily.infrastructure.leetcode_client import LeetCodeGraphQLClient

SETTINGS = Settings(query_delay=0, content_delay=0)
LANDING_PAGE = "<html><script>var csrfToken = 'tok123';</script></html>"

DAILY = {
    "activeDailyCodingChallengeQuestion": {
        "question": {
            "questionId": "42",
            "title": "Trapping Rain Water",
            "titleSlug": "trapping-rain-water",
            "difficulty": "Hard",
        }
    }
}
CONTENT = {"question": {"content": "<p>Water</p>", "mysqlSchemas": []}}
EDITOR = {
    "question": {
        "codeSnippets": [
            {"lang": "C++", "langSlug": "cpp", "code": "class Solution {};"},
            {"lang": "Python", "langSlug": "python", "code": None},
        ]
    }
}
QUESTION_DATA = {
    "question": {
        "questionId": "1",
        "title": "Two Sum",
        "titleSlug": "two-sum",
        "difficulty": "Easy",
    }
}

OPERATION_DATA = {
    "questionOfToday": DAILY,
    "questionContent": CONTENT,
    "questionEditorData": EDITOR,
    "questionData": QUESTION_DATA,
}


def operation_name(request: httpx.Request) -> str:
    query = json.loads(request.content)["query"]
    return query.split("query ", 1)[1].split("(", 1)[0].split("{", 1)[0].strip()


class FakeLeetCode:
    """Records requests and answers like leetcode.com."""

    def __init__(self, landing_page: str = LANDING_PAGE, overrides: dict | None = None):
        self.landing_page = landing_page
        self.overrides = overrides or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            return httpx.Response(200, text=self.landing_page)

        name = operation_name(request)
        if name in self.overrides:
            return self.overrides[name]
        return httpx.Response(200, json={"data": OPERATION_DATA[name]})

    def operations(self) -> list[str]:
        return [operation_name(r) for r in self.requests if r.method == "POST"]


def make_client(fake: FakeLeetCode) -> LeetCodeGraphQLClient:
    http_client = AsyncHTTPClient(timeout=5, transport=httpx.MockTransport(fake))
    return LeetCodeGraphQLClient(http_client, SETTINGS)


@pytest.mark.asyncio
async def test_fetch_csrf_token():
    client = make_client(FakeLeetCode())

    assert await client.fetch_csrf_token() == "tok123"
    assert client.csrf_token == "tok123"


@pytest.mark.asyncio
async def test_missing_token_raises():
    client = make_client(FakeLeetCode(landing_page="<html>redesigned</html>"))

    with pytest.raises(TokenNotFoundError):
        await client.fetch_csrf_token()


@pytest.mark.asyncio
async def test_fetch_today_challenge_sends_token_headers():
    fake = FakeLeetCode()
    client = make_client(fake)

    identity = await client.fetch_today_challenge()

    assert identity == ChallengeIdentity("42", "Trapping Rain Water", "trapping-rain-water", Difficulty.HARD)
    post = fake.requests[-1]
    assert post.url == "https://leetcode.com/graphql"
    assert post.headers["X-CSRFToken"] == "tok123"
    assert post.headers["Origin"] == "https://leetcode.com"
    assert post.headers["Referer"] == "https://leetcode.com/problemset/all/"
    assert post.headers["Content-Type"] == "application/json"
    assert "Mozilla/5.0" in post.headers["User-Agent"]
    assert post.headers["Accept-Language"] == "en-US,en;q=0.9"


@pytest.mark.asyncio
async def test_graphql_errors_raise_remote_query_error():
    fake = FakeLeetCode(
        overrides={
            "questionOfToday": httpx.Response(200, json={"data": None, "errors": [{"message": "rate limited"}]})
        }
    )
    client = make_client(fake)

    with pytest.raises(RemoteQueryError, match="rate limited"):
        await client.fetch_today_challenge()


@pytest.mark.asyncio
async def test_http_error_status_is_carried():
    fake = FakeLeetCode(overrides={"questionOfToday": httpx.Response(403, text="forbidden")})
    client = make_client(fake)

    with pytest.raises(RemoteQueryError) as exc_info:
        await client.fetch_today_challenge()

    assert exc_info.value.status == 403


@pytest.mark.asyncio
async def test_unexpected_difficulty_is_malformed_payload():
    broken = json.loads(json.dumps(DAILY))
    broken["activeDailyCodingChallengeQuestion"]["question"]["difficulty"] = "Insane"
    fake = FakeLeetCode(overrides={"questionOfToday": httpx.Response(200, json={"data": broken})})
    client = make_client(fake)

    with pytest.raises(RemoteQueryError, match="Malformed payload"):
        await client.fetch_today_challenge()


@pytest.mark.asyncio
async def test_fetch_problem_content_with_known_identity():
    fake = FakeLeetCode()
    client = make_client(fake)
    identity = ChallengeIdentity("42", "Trapping Rain Water", "trapping-rain-water", Difficulty.HARD)

    content = await client.fetch_problem_content("trapping-rain-water", identity=identity)

    assert sorted(fake.operations()) == ["questionContent", "questionEditorData"]
    assert content.identity is identity
    assert content.content == "<p>Water</p>"
    assert content.snippet_for("cpp").code == "class Solution {};"
    assert content.snippet_for("python").code == ""
    assert content.snippet_for("rust") is None


@pytest.mark.asyncio
async def test_fetch_problem_content_resolves_identity_from_slug():
    fake = FakeLeetCode()
    client = make_client(fake)

    content = await client.fetch_problem_content("two-sum")

    assert sorted(fake.operations()) == ["questionContent", "questionData", "questionEditorData"]
    assert content.identity.question_id == "1"
    assert content.identity.difficulty is Difficulty.EASY
    body = json.loads(fake.requests[0].content)
    assert body["variables"] == {"titleSlug": "two-sum"}


@pytest.mark.asyncio
async def test_fetch_problem_content_fails_if_any_query_fails():
    fake = FakeLeetCode(overrides={"questionEditorData": httpx.Response(500)})
    client = make_client(fake)

    with pytest.raises(RemoteQueryError) as exc_info:
        await client.fetch_problem_content("two-sum")

    assert exc_info.value.status == 500


@pytest.mark.asyncio
async def test_failing_query_cancels_pending_siblings():
    cancelled: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        name = operation_name(request)
        if name == "questionEditorData":
            return httpx.Response(500)
        try:
            await asyncio.sleep(30)
        except asyncio.CancelledError:
            cancelled.append(name)
            raise
        return httpx.Response(200, json={"data": OPERATION_DATA[name]})

    http_client = AsyncHTTPClient(timeout=60, transport=httpx.MockTransport(handler))
    client = LeetCodeGraphQLClient(http_client, SETTINGS)

    with pytest.raises(RemoteQueryError):
        await asyncio.wait_for(client.fetch_problem_content("two-sum"), timeout=5)

    assert sorted(cancelled) == ["questionContent", "questionData"]


@pytest.mark.asyncio
async def test_missing_question_raises():
    fake = FakeLeetCode(overrides={"questionContent": httpx.Response(200, json={"data": {"question": None}})})
    client = make_client(fake)

    with pytest.raises(RemoteQueryError, match="No data returned"):
        await client.fetch_problem_content("does-not-exist")


@pytest.mark.asyncio
async def test_timeout_maps_to_remote_query_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    http_client = AsyncHTTPClient(timeout=5, transport=httpx.MockTransport(handler))
    client = LeetCodeGraphQLClient(http_client, SETTINGS)

    with pytest.raises(RemoteQueryError, match="timed out"):
        await client.fetch_csrf_token()
