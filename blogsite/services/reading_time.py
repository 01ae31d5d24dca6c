"""Reading-time estimation for markdown post bodies."""

import math
import re

WORDS_PER_MINUTE = 200

_CODE_BLOCK_RE = re.compile(r"```.*?```", re.DOTALL)
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_MARKDOWN_SYNTAX_RE = re.compile(r"[#*_~`]")
# ECMAScript whitespace and line terminators; differs from str.split() on
# U+FEFF (included here) and U+001C-U+001F, U+0085 (excluded here)
_WHITESPACE_RE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


def count_words(text: str) -> int:
    """Count whitespace-delimited words, ignoring code blocks, tags and markup."""
    text = _CODE_BLOCK_RE.sub("", text)
    text = _HTML_TAG_RE.sub("", text)
    text = _MARKDOWN_SYNTAX_RE.sub("", text)
    return len([word for word in _WHITESPACE_RE.split(text) if word])


def estimate_reading_time(text: str) -> int:
    """Return the estimated reading time of *text* in whole minutes (at least 1)."""
    return max(1, math.ceil(count_words(text) / WORDS_PER_MINUTE))
