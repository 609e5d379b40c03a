"""Description lookup in Markdown frontmatter."""

from __future__ import annotations

import re

_FRONTMATTER_RE = re.compile(r"\A---\r?\n(.*?)\r?\n---", re.DOTALL)
_DESCRIPTION_RE = re.compile(r"^description:[ \t]*(.*)$", re.MULTILINE)
_QUOTES = ("\"", "'")


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def extract_description(content: str | None) -> str:
    """Return the ``description`` field of a leading frontmatter block, or ``""``.

    The block must open on the first line with ``---`` and be closed by another
    ``---`` line. One pair of matching quotes around the value is dropped.
    """
    if not content:
        return ""

    match = _FRONTMATTER_RE.match(content)
    if match is None:
        return ""

    field_match = _DESCRIPTION_RE.search(match.group(1))
    if field_match is None:
        return ""

    return _strip_quotes(field_match.group(1).strip()).strip()


__all__ = ["extract_description"]
