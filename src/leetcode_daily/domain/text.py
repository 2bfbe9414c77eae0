"""Text helpers for turning LeetCode titles and statements into file content."""

import re

from .languages import C_STYLE_BLOCK, get_language

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")
_TAG = re.compile(r"<[^>]+>")

# &amp; must stay last so "&amp;lt;" decodes to "&lt;" rather than "<"
_ENTITIES = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)


def slugify(title: str) -> str:
    """Convert a problem title to a kebab-case slug of ``[a-z0-9-]``."""
    slug = _WHITESPACE.sub("-", title.lower())
    return _NON_SLUG.sub("", slug)


def markup_to_plain_text(html: str) -> str:
    """
    Strip tags and decode the handful of entities LeetCode statements use.

    Tags are removed with a regex, not an HTML parser, so malformed markup may
    leave fragments behind. Unknown entities are left untouched.
    """
    text = _TAG.sub("", html)
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    return text.strip()


def format_problem_file(language: str, problem_html: str, code: str) -> str:
    """Wrap the plain-text statement in a comment block and append the starter code."""
    catalog_entry = get_language(language)
    start, end = catalog_entry.comment_delimiters if catalog_entry else C_STYLE_BLOCK
    return f"{start}\n{markup_to_plain_text(problem_html)}\n{end}\n\n{code}"
