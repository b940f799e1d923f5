"""Word-level edit distance and backtrace classification."""
from __future__ import annotations

from typing import List, Sequence, Union

from wer_core.models.alignment_result import AlignmentResult, InvariantViolation, WerCounts
from wer_core.models.edit_operation import (
    EditOperation,
    OP_DELETION,
    OP_INSERTION,
    OP_MATCH,
    OP_SUBSTITUTION,
)


def compute_edit_distance_matrix(
    hyp_words: Sequence[str], ref_words: Sequence[str]
) -> List[List[int]]:
    """Compute the edit distance matrix between two word lists.

    Args:
        hyp_words: Words in the hypothesis sentence
        ref_words: Words in the reference sentence

    Returns:
        Matrix as a list of lists, (len(ref)+1) rows by (len(hyp)+1) columns.
        The first index is the reference, the second the hypothesis.
    """
    rows, cols = len(ref_words), len(hyp_words)
    dist = [[0] * (cols + 1) for _ in range(rows + 1)]

    for j in range(cols + 1):
        dist[0][j] = j
    for i in range(1, rows + 1):
        dist[i][0] = i

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if ref_words[i - 1] == hyp_words[j - 1]:
                dist[i][j] = dist[i - 1][j - 1]
            else:
                replace = dist[i - 1][j - 1]
                insert = dist[i][j - 1]
                delete = dist[i - 1][j]
                dist[i][j] = 1 + min(replace, insert, delete)

    return dist


def backtrace(
    dist: Sequence[Sequence[int]],
    hyp_words: Sequence[str],
    ref_words: Sequence[str],
) -> Union[AlignmentResult, InvariantViolation]:
    """Walk the matrix back from the last cell and classify every step.

    Ties are broken in a fixed order: a match wins, then an exhausted side
    forces deletion (no hypothesis left) or insertion (no reference left),
    then substitution, deletion, insertion.

    Returns:
        AlignmentResult with operations in left-to-right order, or an
        InvariantViolation if the matrix does not fit the two word lists.
    """
    rows, cols = len(ref_words), len(hyp_words)

    def violation(reason: str) -> InvariantViolation:
        return InvariantViolation(
            reason=reason,
            hyp_words=tuple(hyp_words),
            ref_words=tuple(ref_words),
            rows=rows + 1,
            cols=cols + 1,
        )

    if len(dist) != rows + 1 or any(len(row) != cols + 1 for row in dist):
        return violation("edit distance matrix has the wrong shape")

    ops: List[EditOperation] = []
    sub = ins = dele = 0
    i, j = rows, cols

    while i > 0 or j > 0:
        hyp = hyp_words[j - 1] if j > 0 else None
        ref = ref_words[i - 1] if i > 0 else None

        if i > 0 and j > 0 and ref == hyp:
            ops.append(EditOperation(OP_MATCH, hyp, ref))
            i -= 1
            j -= 1
        elif j == 0:
            ops.append(EditOperation(OP_DELETION, None, ref))
            dele += 1
            i -= 1
        elif i == 0:
            ops.append(EditOperation(OP_INSERTION, hyp, None))
            ins += 1
            j -= 1
        elif dist[i][j] == 1 + dist[i - 1][j - 1]:
            ops.append(EditOperation(OP_SUBSTITUTION, hyp, ref))
            sub += 1
            i -= 1
            j -= 1
        elif dist[i][j] == 1 + dist[i - 1][j]:
            ops.append(EditOperation(OP_DELETION, None, ref))
            dele += 1
            i -= 1
        elif dist[i][j] == 1 + dist[i][j - 1]:
            ops.append(EditOperation(OP_INSERTION, hyp, None))
            ins += 1
            j -= 1
        else:
            return violation(f"failed to parse edit distance matrix at cell ({i}, {j})")

    distance = dist[rows][cols]
    if sub + ins + dele != distance:
        return violation(
            f"classified errors ({sub + ins + dele}) differ from edit distance ({distance})"
        )

    ops.reverse()
    counts = WerCounts(
        substitutions=sub,
        insertions=ins,
        deletions=dele,
        reference_words=rows,
    )
    return AlignmentResult(
        ops=tuple(ops),
        counts=counts,
        distance=distance,
        hyp_words=tuple(hyp_words),
        ref_words=tuple(ref_words),
    )
