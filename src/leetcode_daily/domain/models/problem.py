"""Domain models for problem content returned by LeetCode."""

from dataclasses import dataclass, field
from typing import Optional

from .identifiers import ChallengeIdentity


@dataclass(frozen=True)
class CodeSnippet:
    """Starter code template for one language."""

    lang: str
    lang_slug: str
    code: str


@dataclass
class ProblemContent:
    """Full problem statement plus per-language starter code."""

    identity: ChallengeIdentity
    content: str
    code_snippets: tuple[CodeSnippet, ...] = field(default_factory=tuple)

    def snippet_for(self, lang_slug: str) -> Optional[CodeSnippet]:
        """Return the snippet for a language key, if LeetCode provided one."""
        for snippet in self.code_snippets:
            if snippet.lang_slug == lang_slug:
                return snippet
        return None
