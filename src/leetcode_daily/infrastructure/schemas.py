"""Pydantic schemas for LeetCode GraphQL payloads."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from leetcode_daily.domain.models import ChallengeIdentity, CodeSnippet, Difficulty


class GraphQLError(BaseModel):
    """Single entry of a GraphQL ``errors`` list."""

    message: str = ""


class GraphQLResponse(BaseModel):
    """Envelope of every GraphQL response."""

    data: Optional[dict[str, Any]] = None
    errors: list[GraphQLError] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def _none_to_empty(cls, v: object) -> object:
        return [] if v is None else v


class QuestionIdentity(BaseModel):
    """Fields identifying a question."""

    model_config = ConfigDict(populate_by_name=True)

    question_id: str = Field(alias="questionId")
    title: str
    title_slug: str = Field(alias="titleSlug")
    difficulty: Difficulty

    def to_domain(self) -> ChallengeIdentity:
        return ChallengeIdentity(
            question_id=self.question_id,
            title=self.title,
            title_slug=self.title_slug,
            difficulty=self.difficulty,
        )


class DailyChallenge(BaseModel):
    """``activeDailyCodingChallengeQuestion`` payload."""

    question: QuestionIdentity


class QuestionContent(BaseModel):
    """``questionContent`` payload; content is null for premium problems."""

    content: Optional[str] = None


class CodeSnippetPayload(BaseModel):
    """One entry of ``codeSnippets``."""

    model_config = ConfigDict(populate_by_name=True)

    lang: str
    lang_slug: str = Field(alias="langSlug")
    code: Optional[str] = None

    def to_domain(self) -> CodeSnippet:
        return CodeSnippet(lang=self.lang, lang_slug=self.lang_slug, code=self.code or "")


class QuestionEditorData(BaseModel):
    """``questionEditorData`` payload."""

    model_config = ConfigDict(populate_by_name=True)

    code_snippets: Optional[list[CodeSnippetPayload]] = Field(default=None, alias="codeSnippets")
