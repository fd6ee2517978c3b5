"""Regex matchers for the five entity categories.

Every pattern is compiled with re.ASCII: word boundaries, \\w and \\d only
consider ASCII letters, digits and underscore.  Whitespace is the
exception and is spelled out in _WS, which also covers the Unicode spaces
(no-break space, ideographic space, ...).
"""

from __future__ import annotations
import re

from .types import EntityMatch

# Whitespace characters, usable inside a character class
_WS = r"\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# Each pattern: (category, compiled_regex)
_PATTERNS: list[tuple[str, re.Pattern]] = [
    # Email — local@domain.tld between word boundaries
    ("emails", re.compile(
        r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b",
        re.ASCII,
    )),

    # URL — http(s) only; the trailing class is greedy and may swallow
    # adjacent punctuation
    ("urls", re.compile(
        r"https?://(?:www\.)?"
        r"[\-A-Za-z0-9@:%._+~#=]{1,256}"
        r"\.[A-Za-z0-9()]{1,6}\b"
        r"[\-A-Za-z0-9()@:%_+.~#?&/=]*",
        re.ASCII,
    )),

    # Phone — optional international prefix, then 3-3-4 digits
    ("phonenumbers", re.compile(
        r"(?:\+?\d{1,3}[\-." + _WS + r"]?)?"
        r"\(?\d{3}\)?[\-." + _WS + r"]?"
        r"\d{3}[\-." + _WS + r"]?\d{4}",
        re.ASCII,
    )),

    # Hashtag
    ("hashtags", re.compile(r"#\w+", re.ASCII)),

    # Currency — USD style, comma thousands, optional cents
    ("currencyamounts", re.compile(
        r"\$[" + _WS + r"]?\d{1,3}(?:,\d{3})*(?:\.\d{2})?",
        re.ASCII,
    )),
]


def scan_regex(text: str) -> list[EntityMatch]:
    """Run all patterns against text.

    Returns raw matches grouped by category (in category order) and, within
    a category, in document order.  Overlaps between categories are kept.
    """
    matches: list[EntityMatch] = []
    for category, pattern in _PATTERNS:
        for m in pattern.finditer(text):
            matches.append(EntityMatch(
                category=category,
                start=m.start(),
                end=m.end(),
                text=m.group(),
                value=m.group(),
            ))
    return matches
