"""
text_processing.py
==================
Text normalisation shared by every similarity component.

  tokenize() — lowercase, strip punctuation, split, drop short tokens and
               stop words.  Order is preserved and duplicates are kept.
  stem()     — crude single-rule suffix stripper used for loose matching.
"""

from __future__ import annotations

import re
from typing import FrozenSet, List, Tuple

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "should", "could", "can", "may", "might", "must",
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "my", "your", "his", "our", "their",
})

_MIN_TOKEN_LENGTH = 3
_MIN_STEM_LENGTH  = 5

# Tried in order; the first rule whose suffix matches and whose stem passes
# the length guard wins.
_SUFFIX_RULES: Tuple[Tuple[str, str], ...] = (
    ("ation", "ate"),
    ("ing",   ""),
    ("ed",    ""),
    ("er",    ""),
    ("est",   ""),
    ("s",     ""),
)

# Anything that is not a letter, digit or whitespace (underscore counts as punctuation)
_NON_WORD_RE = re.compile(r"[^\w\s]|_")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def tokenize(text: str) -> List[str]:
    """
    Split free text into meaningful lowercase tokens.

    Punctuation becomes a space so "CGPA/GPA" yields two tokens rather than
    one merged word.  Tokens of two characters or fewer and stop words are
    dropped.
    """
    if not text:
        return []

    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [
        word for word in cleaned.split()
        if len(word) >= _MIN_TOKEN_LENGTH and word not in STOP_WORDS
    ]


def stem(word: str) -> str:
    """Strip at most one common suffix, keeping stems longer than four characters."""
    for suffix, replacement in _SUFFIX_RULES:
        if not word.endswith(suffix):
            continue
        stemmed = word[: len(word) - len(suffix)] + replacement
        if len(stemmed) >= _MIN_STEM_LENGTH:
            return stemmed
    return word
