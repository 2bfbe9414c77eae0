"""Domain models package."""

from .identifiers import ChallengeIdentity, Difficulty
from .outcomes import (
    AcquisitionFailure,
    AcquisitionResult,
    AcquisitionSource,
    AcquisitionStage,
    AcquisitionSuccess,
    FileAction,
    FileOperationOutcome,
    RunSummary,
)
from .problem import CodeSnippet, ProblemContent

__all__ = [
    "AcquisitionFailure",
    "AcquisitionResult",
    "AcquisitionSource",
    "AcquisitionStage",
    "AcquisitionSuccess",
    "ChallengeIdentity",
    "CodeSnippet",
    "Difficulty",
    "FileAction",
    "FileOperationOutcome",
    "ProblemContent",
    "RunSummary",
]
