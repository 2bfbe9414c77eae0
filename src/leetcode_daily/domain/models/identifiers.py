"""Value objects for daily challenge identification."""

from dataclasses import dataclass
from enum import Enum


class Difficulty(str, Enum):
    """Difficulty levels reported by LeetCode."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @property
    def directory_name(self) -> str:
        return self.value.lower()


@dataclass(frozen=True)
class ChallengeIdentity:
    """Identifies the daily challenge problem."""

    question_id: str
    title: str
    title_slug: str
    difficulty: Difficulty

    def __str__(self) -> str:
        """String representation."""
        return f"{self.question_id}. {self.title} ({self.difficulty.value})"
