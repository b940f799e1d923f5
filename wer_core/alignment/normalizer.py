"""Transcript normalization applied before scoring and display."""
from __future__ import annotations

import re

_ANNOTATION_RE = re.compile(r" *\[[^\]]*\]")
_WHITESPACE_RE = re.compile(r"[\t\r\n]")
_PUNCT_BEFORE_SPACE_RE = re.compile(r"[,.?!]+ ")
_PUNCT_AT_END_RE = re.compile(r"[,.?!]+$")
_PUNCT_AFTER_SPACE_RE = re.compile(r" [,.?!]+")
_PUNCT_AT_START_RE = re.compile(r"^[,.?!]+")
_ENCLOSING_RE = re.compile(r"[\"()\[\]]")
_MULTI_SPACE_RE = re.compile(r" +")


def txt_preprocess(txt: str) -> str:
    """Normalize a raw transcript string for WER calculation.

    Steps, in order:
      1. remove annotations in square brackets, e.g. "[laughs]"
      2. lowercase
      3. turn tabs and newlines into spaces
      4. drop , . ? ! runs touching a space or either end of the string
      5. drop double quotes, parentheses and square brackets
      6. trim and collapse repeated spaces

    Example: 'Hello, World! [noise] (Yes)' -> 'hello world yes'

    Args:
        txt: Raw transcript text (may be empty)

    Returns:
        Normalized text; blank input gives an empty string
    """
    if not txt:
        return ""

    txt = _ANNOTATION_RE.sub("", txt)
    txt = _WHITESPACE_RE.sub(" ", txt.lower())

    txt = _PUNCT_BEFORE_SPACE_RE.sub(" ", txt)
    txt = _PUNCT_AT_END_RE.sub("", txt)
    txt = _PUNCT_AFTER_SPACE_RE.sub(" ", txt)
    txt = _PUNCT_AT_START_RE.sub("", txt)

    txt = _ENCLOSING_RE.sub("", txt)

    return _MULTI_SPACE_RE.sub(" ", txt.strip())
