"""Protocol interfaces for the orchestrator's collaborators."""

from typing import Optional, Protocol

from leetcode_daily.domain.models import ChallengeIdentity, FileOperationOutcome, ProblemContent


class RemoteClientProtocol(Protocol):
    """Protocol for the LeetCode API client."""

    async def fetch_csrf_token(self) -> str:
        """Obtain the anti-forgery token."""
        ...

    async def fetch_today_challenge(self) -> ChallengeIdentity:
        """Query today's challenge identity."""
        ...

    async def fetch_problem_content(
        self, title_slug: str, identity: Optional[ChallengeIdentity] = None
    ) -> ProblemContent:
        """Fetch statement and code snippets."""
        ...


class DailySlugFinderProtocol(Protocol):
    """Protocol for the browser fallback."""

    async def fetch_today_slug(self) -> str:
        """Find today's challenge slug."""
        ...


class MaterializerProtocol(Protocol):
    """Protocol for writing solution files."""

    def materialize(self, content: ProblemContent) -> list[FileOperationOutcome]:
        """Create, update or skip one file per supported language."""
        ...


class PostHookProtocol(Protocol):
    """Protocol for the post-processing command."""

    @property
    def enabled(self) -> bool:
        """Whether a command is configured."""
        ...

    async def run(self, title_slug: str) -> None:
        """Run the command for a challenge."""
        ...
