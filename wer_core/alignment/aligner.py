"""Alignment orchestration between hypothesis and reference transcripts."""
from __future__ import annotations

from typing import Sequence, Union

from wer_core.models.alignment_result import AlignmentResult, InvariantViolation
from .edit_distance import backtrace, compute_edit_distance_matrix
from .tokenizer import tokenize_transcript


def align_word_lists(
    hyp_words: Sequence[str], ref_words: Sequence[str]
) -> Union[AlignmentResult, InvariantViolation]:
    """Align two already-normalized word sequences."""
    dist = compute_edit_distance_matrix(hyp_words, ref_words)
    return backtrace(dist, hyp_words, ref_words)


def align_words(hypothesis: str, reference: str) -> Union[AlignmentResult, InvariantViolation]:
    """Align a raw hypothesis transcript against a raw reference transcript.

    Both strings are normalized and split into words first.

    Args:
        hypothesis: Transcript produced by the recognizer
        reference: Ground-truth transcript (may be blank)

    Returns:
        AlignmentResult, or InvariantViolation if the backtrace is inconsistent
    """
    return align_word_lists(tokenize_transcript(hypothesis), tokenize_transcript(reference))
