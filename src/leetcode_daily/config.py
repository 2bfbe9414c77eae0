"""Runtime settings loaded from environment variables / .env file."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "LEETCODE_DAILY_"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Settings for a daily challenge run."""

    base_url: str = "https://leetcode.com"
    output_dir: Path = Path(".")
    request_timeout: float = 10.0
    browser_timeout: float = 30.0
    # Pauses before GraphQL calls to stay under LeetCode's rate limiting
    query_delay: float = 1.0
    content_delay: float = 1.5
    post_hook: str = ""
    post_hook_silent: bool = True
    log_level: str = "INFO"

    @property
    def graphql_url(self) -> str:
        return f"{self.base_url}/graphql"

    @property
    def problemset_url(self) -> str:
        return f"{self.base_url}/problemset/all/"


def load_settings() -> Settings:
    """Build settings from the environment, reading a .env file if present."""
    load_dotenv(find_dotenv(usecwd=True))

    defaults = Settings()
    return Settings(
        base_url=_env("BASE_URL", defaults.base_url).rstrip("/"),
        output_dir=Path(_env("OUTPUT_DIR", str(defaults.output_dir))),
        request_timeout=float(_env("REQUEST_TIMEOUT", str(defaults.request_timeout))),
        browser_timeout=float(_env("BROWSER_TIMEOUT", str(defaults.browser_timeout))),
        query_delay=float(_env("QUERY_DELAY", str(defaults.query_delay))),
        content_delay=float(_env("CONTENT_DELAY", str(defaults.content_delay))),
        post_hook=_env("POST_HOOK", defaults.post_hook),
        post_hook_silent=_env_bool("POST_HOOK_SILENT", defaults.post_hook_silent),
        log_level=_env("LOG_LEVEL", defaults.log_level).upper(),
    )
