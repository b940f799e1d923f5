"""Full scoring of one hypothesis/reference pair."""
from __future__ import annotations

from dataclasses import replace
from typing import Sequence, Union

from wer_core.alignment.aligner import align_word_lists
from wer_core.alignment.tokenizer import tokenize_transcript
from wer_core.models.alignment_result import InvariantViolation
from wer_core.models.report import WerCountsModel, WerResponse
from .renderer import render_aligned_html
from .statistics import get_summaries, get_wer


def score_words(
    hyp_words: Sequence[str], ref_words: Sequence[str]
) -> Union[WerResponse, InvariantViolation]:
    """Align, count and render two normalized word sequences.

    Returns:
        WerResponse with summary, details and html, or the InvariantViolation
        returned by any stage, filled in with both sequences and the matrix
        dimensions
    """
    aligned = align_word_lists(hyp_words, ref_words)
    if isinstance(aligned, InvariantViolation):
        return aligned

    html = render_aligned_html(aligned.ops)
    if isinstance(html, InvariantViolation):
        # The renderer only sees one operation at a time
        return replace(
            html,
            hyp_words=aligned.hyp_words,
            ref_words=aligned.ref_words,
            rows=len(aligned.ref_words) + 1,
            cols=len(aligned.hyp_words) + 1,
        )

    summary, details = get_summaries(aligned.counts)
    return WerResponse(
        summary=summary,
        details=details,
        html=html,
        wer=round(get_wer(aligned.counts), 2),
        counts=WerCountsModel(**aligned.counts.as_dict()),
    )


def score_transcript(hypothesis: str, reference: str) -> Union[WerResponse, InvariantViolation]:
    """Normalize, align, count and render a raw transcript pair.

    Args:
        hypothesis: Recognizer output, raw
        reference: Ground-truth text, raw (may be blank)
    """
    return score_words(tokenize_transcript(hypothesis), tokenize_transcript(reference))
