"""Scanner that tells placeholder files apart from files holding real work."""

from typing import Optional

from leetcode_daily.domain.languages import SupportedLanguage


class CommentScanner:
    """
    Line-oriented state machine over a source file.

    The only state is the closing delimiter of the block comment currently
    open (``None`` outside a block). A line is comment-only when it is blank,
    starts with a line-comment prefix, or is covered by a block comment.
    Text following a block closer on the same line is scanned again.
    """

    def __init__(self, language: SupportedLanguage):
        """
        Initialize scanner.

        Args:
            language: Catalog entry supplying the comment syntax
        """
        self.language = language

    def has_substantive_content(self, text: str) -> bool:
        """Return True if any line is neither blank nor a comment."""
        closer: Optional[str] = None

        for line in text.splitlines():
            remainder = line.strip()

            while remainder:
                if closer is not None:
                    index = remainder.find(closer)
                    if index == -1:
                        break
                    remainder = remainder[index + len(closer):].strip()
                    closer = None
                    continue

                if self._is_line_comment(remainder):
                    break

                pair = self._opening_pair(remainder)
                if pair is None:
                    return True

                opener, closer = pair
                remainder = remainder[len(opener):].strip()

        return False

    def _is_line_comment(self, line: str) -> bool:
        return any(line.startswith(prefix) for prefix in self.language.line_comment_prefixes)

    def _opening_pair(self, line: str) -> Optional[tuple[str, str]]:
        for opener, closer in self.language.block_comment_pairs:
            if line.startswith(opener):
                return opener, closer
        return None


def has_substantive_content(text: str, language: SupportedLanguage) -> bool:
    """Convenience wrapper around :class:`CommentScanner`."""
    return CommentScanner(language).has_substantive_content(text)
