"""Exceptions raised while fetching and scaffolding the daily challenge."""

from pathlib import Path
from typing import Optional, Sequence


class DailyChallengeError(Exception):
    """Base error for the daily challenge pipeline."""

    pass


class TokenNotFoundError(DailyChallengeError):
    """CSRF token missing from the LeetCode landing page."""

    pass


class RemoteQueryError(DailyChallengeError):
    """GraphQL request failed or returned an error payload."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        self.message = message
        prefix = f"[{status}] " if status is not None else ""
        super().__init__(f"{prefix}{message}")


class ExtractionError(DailyChallengeError):
    """Daily challenge marker not found in the rendered problemset page."""

    pass


class FileWriteError(DailyChallengeError):
    """Solution file could not be read or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")


class PostHookError(DailyChallengeError):
    """Post-processing command exited unsuccessfully."""

    def __init__(self, command: Sequence[str], returncode: Optional[int], output: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        super().__init__(f'Command "{" ".join(self.command)}" failed with code {returncode}')


class AcquisitionExhaustedError(DailyChallengeError):
    """Both the API and the browser fallback failed to identify the challenge."""

    def __init__(self, failures: Sequence[object]):
        self.failures = list(failures)
        details = "; ".join(str(failure) for failure in self.failures)
        super().__init__(f"Both API and browser approaches failed ({details})")
