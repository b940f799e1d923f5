"""Word sequence construction from normalized text."""
from __future__ import annotations

from typing import List

from .normalizer import txt_preprocess


def split_words(text: str) -> List[str]:
    """Split normalized text on single spaces.

    An empty string yields no tokens rather than one empty token.
    """
    if not text:
        return []
    return text.split(" ")


def tokenize_transcript(raw: str) -> List[str]:
    """Normalize raw transcript text and split it into words."""
    return split_words(txt_preprocess(raw))
