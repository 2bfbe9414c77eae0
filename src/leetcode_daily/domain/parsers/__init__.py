"""Pure parsers that need no network access."""

from .comment_scanner import CommentScanner, has_substantive_content

__all__ = ["CommentScanner", "has_substantive_content"]
