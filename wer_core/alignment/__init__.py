"""Alignment utilities for matching a hypothesis transcript to its reference."""
from .aligner import align_word_lists, align_words
from .edit_distance import backtrace, compute_edit_distance_matrix
from .normalizer import txt_preprocess
from .tokenizer import split_words

__all__ = [
    "align_word_lists",
    "align_words",
    "backtrace",
    "compute_edit_distance_matrix",
    "txt_preprocess",
    "split_words",
]
