"""Catalog of languages a solution stub is scaffolded for."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

C_STYLE_BLOCK = ("/*", "*/")


class NamingRule(str, Enum):
    """How the title slug is joined into a file name."""

    HYPHEN = "hyphen"
    UNDERSCORE = "underscore"


@dataclass(frozen=True)
class SupportedLanguage:
    """Static description of one target language."""

    key: str
    extension: str
    comment_delimiters: tuple[str, str] = C_STYLE_BLOCK
    naming_rule: NamingRule = NamingRule.HYPHEN
    line_comment_prefixes: tuple[str, ...] = ("//",)
    block_comment_pairs: tuple[tuple[str, str], ...] = (C_STYLE_BLOCK,)
    # LeetCode langSlug when it differs from the directory key
    snippet_slug: Optional[str] = None

    @property
    def snippet_key(self) -> str:
        return self.snippet_slug or self.key

    def file_name(self, question_id: str, slug: str) -> str:
        """Build the solution file name for a question."""
        if self.naming_rule is NamingRule.UNDERSCORE:
            return f"{question_id}_{slug.replace('-', '_')}.{self.extension}"
        return f"{question_id}-{slug}.{self.extension}"


_CATALOG = (
    SupportedLanguage(
        key="python",
        extension="py",
        comment_delimiters=('"""', '"""'),
        line_comment_prefixes=("#",),
        block_comment_pairs=(('"""', '"""'), ("'''", "'''")),
    ),
    SupportedLanguage("typescript", "ts"),
    SupportedLanguage("javascript", "js"),
    SupportedLanguage("java", "java"),
    SupportedLanguage("cpp", "cpp"),
    SupportedLanguage("c", "c"),
    SupportedLanguage("csharp", "cs"),
    SupportedLanguage("dart", "dart", naming_rule=NamingRule.UNDERSCORE),
    SupportedLanguage("php", "php", line_comment_prefixes=("//", "#")),
    SupportedLanguage("go", "go", snippet_slug="golang"),
    SupportedLanguage("rust", "rs"),
    SupportedLanguage(
        key="ruby",
        extension="rb",
        comment_delimiters=("=begin", "=end"),
        line_comment_prefixes=("#",),
        block_comment_pairs=(("=begin", "=end"),),
    ),
    SupportedLanguage("swift", "swift"),
    SupportedLanguage("kotlin", "kt"),
)

SUPPORTED_LANGUAGES: Mapping[str, SupportedLanguage] = MappingProxyType(
    {language.key: language for language in _CATALOG}
)


def get_language(key: str) -> Optional[SupportedLanguage]:
    """Look up a catalog entry by its directory key."""
    return SUPPORTED_LANGUAGES.get(key)
