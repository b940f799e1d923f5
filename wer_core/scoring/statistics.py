"""Word error rate and per-category breakdown."""
from __future__ import annotations

from typing import Dict, Tuple

from wer_core.models.alignment_result import WerCounts


def _percent_of_reference(count: int, counts: WerCounts) -> float:
    # max(1, ...) keeps an empty reference from dividing by zero
    return count * 100.0 / max(1, counts.reference_words)


def get_wer(counts: WerCounts) -> float:
    """Compute Word Error Rate as a percentage.

    WER can exceed 100.0 when there are many insertions.
    """
    return _percent_of_reference(counts.total_errors, counts)


def get_breakdown(counts: WerCounts) -> Dict[str, float]:
    """Deletion, insertion and substitution rates, each over the reference length.

    The three values are computed independently, so they only add up to the
    WER when every error is counted against the same denominator.
    """
    return {
        "del": _percent_of_reference(counts.deletions, counts),
        "ins": _percent_of_reference(counts.insertions, counts),
        "sub": _percent_of_reference(counts.substitutions, counts),
    }


def get_summaries(counts: WerCounts) -> Tuple[str, str]:
    """Summarize word errors.

    Returns:
        summary: total errors, total reference words and WER
        details: breakdown of the three error types (del, ins, sub)
    """
    summary = (
        f"total WER = {counts.total_errors}, "
        f"total word = {counts.reference_words}, "
        f"wer = {get_wer(counts):.2f}"
    )

    rates = get_breakdown(counts)
    details = (
        f"Error breakdown: del = {rates['del']:.2f}, "
        f"ins = {rates['ins']:.2f}, "
        f"sub = {rates['sub']:.2f}"
    )
    return summary, details
