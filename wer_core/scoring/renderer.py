"""HTML rendering of an aligned hypothesis/reference pair.

Every token is escaped here, so the returned markup can be injected into a
page as-is. Styling is left to CSS through these classes:

  wer-sub  substituted words (hypothesis struck out, then reference)
  wer-del  reference words missing from the hypothesis
  wer-ins  hypothesis words absent from the reference (struck out)
"""
from __future__ import annotations

from typing import Iterable, List, Union

from markupsafe import escape

from wer_core.models.alignment_result import InvariantViolation
from wer_core.models.edit_operation import (
    EditOperation,
    OP_DELETION,
    OP_INSERTION,
    OP_MATCH,
    OP_SUBSTITUTION,
)


def highlight_aligned_html(op: EditOperation) -> Union[str, InvariantViolation]:
    """Render one edit operation as an HTML fragment.

    Returns:
        The fragment, or InvariantViolation when a match pairs unequal
        tokens or the operation type is unknown.
    """
    hyp = escape(op.hyp_word or "")
    ref = escape(op.ref_word or "")

    if op.op == OP_MATCH:
        if op.hyp_word != op.ref_word:
            return InvariantViolation(
                reason=f"hyp ({op.hyp_word}) does not match ref ({op.ref_word}) for a match",
                hyp_words=(op.hyp_word or "",),
                ref_words=(op.ref_word or "",),
            )
        return f"{hyp} "
    if op.op == OP_SUBSTITUTION:
        return (
            f'<span class="wer-sub"><del>{hyp}</del></span> '
            f'<span class="wer-sub">{ref}</span> '
        )
    if op.op == OP_DELETION:
        return f'<span class="wer-del">{ref}</span> '
    if op.op == OP_INSERTION:
        return f'<span class="wer-ins"><del>{hyp}</del></span> '

    return InvariantViolation(reason=f"unknown edit operation: {op.op}")


def render_aligned_html(ops: Iterable[EditOperation]) -> Union[str, InvariantViolation]:
    """Concatenate one fragment per operation, keeping their order."""
    fragments: List[str] = []
    for op in ops:
        fragment = highlight_aligned_html(op)
        if isinstance(fragment, InvariantViolation):
            return fragment
        fragments.append(fragment)
    return "".join(fragments)
