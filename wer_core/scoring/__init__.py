"""Word error statistics and highlighted diff rendering."""
from .renderer import highlight_aligned_html, render_aligned_html
from .statistics import get_breakdown, get_summaries, get_wer
from .scorer import score_transcript, score_words

__all__ = [
    "highlight_aligned_html",
    "render_aligned_html",
    "get_breakdown",
    "get_summaries",
    "get_wer",
    "score_transcript",
    "score_words",
]
