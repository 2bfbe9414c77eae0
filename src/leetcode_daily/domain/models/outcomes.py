"""Result types produced while running the daily pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .identifiers import ChallengeIdentity
from .problem import ProblemContent


class FileAction(str, Enum):
    """Action taken for a single solution file."""

    CREATED = "Created"
    UPDATED = "Updated"
    SKIPPED = "Skipped"


@dataclass(frozen=True)
class FileOperationOutcome:
    """What happened to one language's solution file."""

    language: str
    action: FileAction
    path: Path


class AcquisitionSource(str, Enum):
    """Where the daily challenge slug came from."""

    API = "api"
    BROWSER = "browser"
    MANUAL = "manual"


class AcquisitionStage(str, Enum):
    """Acquisition step that failed."""

    TOKEN = "token"
    DAILY_QUERY = "daily_query"
    CONTENT = "content"
    BROWSER = "browser"


@dataclass(frozen=True)
class AcquisitionSuccess:
    """Slug resolved; identity and content are known only when the API answered."""

    title_slug: str
    source: AcquisitionSource
    identity: Optional[ChallengeIdentity] = None
    content: Optional[ProblemContent] = None


@dataclass(frozen=True)
class AcquisitionFailure:
    """Acquisition attempt failed at a given stage."""

    stage: AcquisitionStage
    error: Exception

    def __str__(self) -> str:
        return f"{self.stage.value}: {self.error}"


AcquisitionResult = Union[AcquisitionSuccess, AcquisitionFailure]


@dataclass
class RunSummary:
    """Summary of a completed run."""

    identity: ChallengeIdentity
    source: AcquisitionSource
    outcomes: list[FileOperationOutcome] = field(default_factory=list)
    hook_succeeded: Optional[bool] = None

    def _paths(self, action: FileAction) -> list[Path]:
        return [outcome.path for outcome in self.outcomes if outcome.action is action]

    @property
    def created(self) -> list[Path]:
        return self._paths(FileAction.CREATED)

    @property
    def updated(self) -> list[Path]:
        return self._paths(FileAction.UPDATED)

    @property
    def skipped(self) -> list[Path]:
        return self._paths(FileAction.SKIPPED)
