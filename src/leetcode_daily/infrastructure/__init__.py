from .browser import BrowserDailyFinder
from .http_client import AsyncHTTPClient
from .leetcode_client import LeetCodeGraphQLClient
from .post_hook import PostHookRunner

__all__ = [
    "AsyncHTTPClient",
    "BrowserDailyFinder",
    "LeetCodeGraphQLClient",
    "PostHookRunner",
]
