"""Service that writes per-language solution stubs for a problem."""

from pathlib import Path
from typing import Mapping

from loguru import logger

from leetcode_daily.domain.exceptions import FileWriteError
from leetcode_daily.domain.languages import SUPPORTED_LANGUAGES, SupportedLanguage
from leetcode_daily.domain.models import (
    ChallengeIdentity,
    FileAction,
    FileOperationOutcome,
    ProblemContent,
)
from leetcode_daily.domain.parsers import has_substantive_content
from leetcode_daily.domain.text import format_problem_file, slugify


class SolutionFileMaterializer:
    """Creates, refreshes or leaves alone one solution file per language."""

    def __init__(
        self,
        output_dir: Path = Path("."),
        languages: Mapping[str, SupportedLanguage] = SUPPORTED_LANGUAGES,
    ):
        """
        Initialize materializer.

        Args:
            output_dir: Root under which ``<language>/<difficulty>/`` is created
            languages: Language catalog to scaffold
        """
        self.output_dir = output_dir
        self.languages = languages

    def target_path(self, identity: ChallengeIdentity, language: SupportedLanguage) -> Path:
        """Path of the solution file for a language."""
        directory = self.output_dir / language.key / identity.difficulty.directory_name
        return directory / language.file_name(identity.question_id, slugify(identity.title))

    def materialize(self, content: ProblemContent) -> list[FileOperationOutcome]:
        """
        Write solution files for every catalog language.

        A file that already holds non-comment lines is skipped. Failures are
        logged per language and leave that language out of the result.
        """
        outcomes: list[FileOperationOutcome] = []

        for language in self.languages.values():
            try:
                outcome = self._materialize_language(content, language)
            except FileWriteError as e:
                logger.error(f"Error creating {language.key} solution: {e}")
                continue

            outcomes.append(outcome)

        return outcomes

    def _materialize_language(
        self, content: ProblemContent, language: SupportedLanguage
    ) -> FileOperationOutcome:
        path = self.target_path(content.identity, language)
        existed = path.exists()

        try:
            if existed:
                if has_substantive_content(path.read_text(encoding="utf-8"), language):
                    logger.info(f"File exists with content, skipping: {path}")
                    return FileOperationOutcome(language.key, FileAction.SKIPPED, path)
                logger.info(f"File exists but empty, replacing: {path}")

            path.parent.mkdir(parents=True, exist_ok=True)

            snippet = content.snippet_for(language.snippet_key)
            if snippet is None:
                logger.debug(f"No {language.snippet_key} snippet, writing comment-only placeholder")
            body = format_problem_file(language.key, content.content, snippet.code if snippet else "")
            path.write_text(body, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileWriteError(path, str(e)) from e

        action = FileAction.UPDATED if existed else FileAction.CREATED
        logger.info(f"{action.value} file: {path}")
        return FileOperationOutcome(language.key, action, path)
