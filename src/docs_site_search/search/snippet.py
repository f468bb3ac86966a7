"""Snippet extraction for body-text matches.

A snippet is the line of content holding the match. Long lines are cut to a
window centered on the match and marked with ellipses on every side that was
cut. Lines are never merged, so a snippet never spans a paragraph break.
"""

from __future__ import annotations


ELLIPSIS = "..."
DEFAULT_SNIPPET_LENGTH = 120


def find_line_bounds(text: str, position: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the line containing ``position``.

    ``start`` is the first character after the preceding newline (or 0) and
    ``end`` is the index of the following newline (or ``len(text)``).
    """
    start = text.rfind("\n", 0, position) + 1
    end = text.find("\n", position)
    if end == -1:
        end = len(text)
    return start, end


def extract_line_snippet(
    text: str,
    char_index: int,
    term_length: int,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
) -> str:
    """Return a readable excerpt of the line holding a match.

    Args:
        text: The page content.
        char_index: Offset of the match in ``text``.
        term_length: Length of the matched term.
        snippet_length: Longest excerpt returned without truncation.

    Returns:
        The whole line when it fits, otherwise a window of ``snippet_length``
        characters around the match with ``...`` on truncated sides.
    """
    line_start, line_end = find_line_bounds(text, char_index)
    line = text[line_start:line_end]
    if len(line) <= snippet_length:
        return line

    match_offset = char_index - line_start
    # bounds stay fractional for odd margins and are truncated when slicing
    window_start = max(match_offset - (snippet_length - term_length) / 2, 0)
    window_end = min(window_start + snippet_length, len(line))

    snippet = line[int(window_start) : int(window_end)]
    if window_start > 0:
        snippet = ELLIPSIS + snippet
    if window_end < len(line):
        snippet = snippet + ELLIPSIS
    return snippet
