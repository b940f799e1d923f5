"""Data model for one aligned step between hypothesis and reference."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

OP_MATCH = "match"
OP_SUBSTITUTION = "sub"
OP_INSERTION = "ins"
OP_DELETION = "del"


@dataclass(frozen=True)
class EditOperation:
    """Represents one classified step of the alignment path.

    Attributes:
        op: Operation type - "match", "sub", "ins", or "del"
        hyp_word: The word from the hypothesis (or None for a deletion)
        ref_word: The word from the reference (or None for an insertion)
    """
    op: str  # "match" | "sub" | "ins" | "del"
    hyp_word: Optional[str] = None
    ref_word: Optional[str] = None
