"""Script detection for routing pages to charset-specific indexes.

Pages carry two flags (Cyrillic, CJK) that decide which auxiliary index they
land in. The flags are normally computed upstream; these helpers fill them in
when a page arrives without them.
"""

from __future__ import annotations

import re


# Hangul jamo and syllables, CJK Unified Ideographs (incl. Extension A), the
# unified ideographs that live in the compatibility block, and the
# supplementary-plane extensions B-D. One match is one character.
CJK_PATTERN = re.compile(
    r"["
    r"\u3131-\u3163"
    r"\uac00-\ud7a3"
    r"\u4e00-\u9fcc"
    r"\u3400-\u4db5"
    r"\ufa0e\ufa0f\ufa11\ufa13\ufa14\ufa1f\ufa21\ufa23\ufa24\ufa27-\ufa29"
    r"\U00020000-\U0002a6d6"
    r"\U0002a700-\U0002b734"
    r"\U0002b740-\U0002b81d"
    r"]"
)

# Cyrillic plus Cyrillic Supplement
CYRILLIC_PATTERN = re.compile(r"[\u0400-\u052f]")


def contains_cjk(text: str) -> bool:
    """Return True when text holds at least one Hangul or CJK ideograph."""
    return bool(text) and CJK_PATTERN.search(text) is not None


def contains_cyrillic(text: str) -> bool:
    return bool(text) and CYRILLIC_PATTERN.search(text) is not None
