"""Korean/Latin aware tokenizer shared by the indexer and the query side."""

from __future__ import annotations

import re
import unicodedata

# Hangul syllables, Hangul jamo, compatibility jamo, Latin letters and digits
# (including fullwidth forms).
_WORD_CHARS = (
    "0-9A-Za-z"
    "\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u024f\u1e00-\u1eff"
    "\u1100-\u11ff"
    "\u3130-\u318f"
    "\uac00-\ud7a3"
    "\uff10-\uff19\uff21-\uff3a\uff41-\uff5a"
)
_LEADING = re.compile(f"^[^{_WORD_CHARS}]+")
_TRAILING = re.compile(f"[^{_WORD_CHARS}]+$")


def strip_token(token: str) -> str:
    """Remove leading/trailing non-word characters from a single token."""
    return _TRAILING.sub("", _LEADING.sub("", token))


def tokenize(text: str | None) -> list[str]:
    """Split *text* into index tokens.

    The text is NFC-normalized so decomposed jamo compose back into
    syllables, split on whitespace, and each piece is trimmed of surrounding
    punctuation. Punctuation inside a token (``state-of-the-art``) is kept.
    """
    if not text:
        return []
    normalized = unicodedata.normalize("NFC", text)
    tokens = []
    for piece in normalized.split():
        token = strip_token(piece)
        if token:
            tokens.append(token)
    return tokens
